# quizscore/schemas/quizzes.py
from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from schemas.scoring import QuestionScoringResult, ScoringMode, SubmittedAnswer

# ---------- Stored configuration ----------


class QuizSettings(BaseModel):
    scoring_mode: ScoringMode = ScoringMode.PROPORTIONAL_NO_PENALTY
    time_limit_minutes: Optional[int] = Field(default=None, gt=0)
    opens_at: Optional[datetime] = None
    closes_at: Optional[datetime] = None


class OptionConfig(BaseModel):
    id: str
    option_text: str = ""
    is_correct: bool = False
    sort_order: int = 0


class QuestionConfig(BaseModel):
    id: str
    question_text: str = ""
    points: float = Field(default=1, ge=0)
    # None = inherit the quiz's scoring_mode
    scoring_mode: Optional[ScoringMode] = None
    sort_order: int = 0
    answer_options: List[OptionConfig] = Field(default_factory=list)


# ---------- Student-facing view (no is_correct) ----------


class PublicOption(BaseModel):
    id: str
    option_text: str
    sort_order: int


class PublicQuestion(BaseModel):
    id: str
    question_text: str
    points: float
    sort_order: int
    # selection limit hint for the player
    correct_count: int
    scoring_mode: Optional[ScoringMode] = None
    answer_options: List[PublicOption]


# ---------- Submit ----------


class SubmissionState(BaseModel):
    submission_id: str
    started_at: datetime
    submitted_at: Optional[datetime] = None


class SubmitPayload(BaseModel):
    submission_id: str = Field(min_length=1)
    answers: List[SubmittedAnswer]


class GradedSubmission(BaseModel):
    submission_id: str
    total_score: float
    max_possible_score: float
    per_question: Dict[str, QuestionScoringResult]
    time_limit_exceeded: bool = False


# ---------- Export ----------


class ResultRow(BaseModel):
    student_name: Optional[str] = None
    student_email: Optional[str] = None
    total_score: Optional[float] = None
    max_possible_score: Optional[float] = None
    per_question_scores: Dict[str, float] = Field(default_factory=dict)
