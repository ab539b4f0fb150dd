# quizscore/schemas/scoring.py
from __future__ import annotations

from enum import Enum
from typing import Dict, List, Set

from pydantic import BaseModel, ConfigDict, Field


class ScoringMode(str, Enum):
    PROPORTIONAL_NO_PENALTY = "proportional_no_penalty"
    PROPORTIONAL_WITH_PENALTY = "proportional_with_penalty"
    ALL_OR_NOTHING = "all_or_nothing"


# ---------- Engine input ----------


class AnswerOption(BaseModel):
    # display fields (text, order) may ride along; scoring only reads these two
    model_config = ConfigDict(extra="ignore")
    id: str
    is_correct: bool


class QuestionScoringInput(BaseModel):
    points: float = Field(ge=0)
    scoring_mode: ScoringMode
    all_options: List[AnswerOption] = Field(default_factory=list)
    selected_option_ids: Set[str] = Field(default_factory=set)


class ScoringQuestion(BaseModel):
    """
    Per-question scoring configuration with the effective mode already resolved.
    """

    id: str
    points: float = Field(ge=0)
    scoring_mode: ScoringMode
    all_options: List[AnswerOption] = Field(default_factory=list)


class SubmittedAnswer(BaseModel):
    question_id: str
    selected_option_ids: Set[str] = Field(default_factory=set)


# ---------- Engine output ----------


class QuestionScoringResult(BaseModel):
    earned: float
    max: float
    correct_count: int
    total_correct: int


class SubmissionScoringResult(BaseModel):
    total_score: float
    max_possible_score: float
    per_question: Dict[str, QuestionScoringResult]
