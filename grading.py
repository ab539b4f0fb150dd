# quizscore/grading.py
"""
Calling boundary around the scoring engine: payload validation, scoring-mode
resolution and the submit-time checks done before a score is finalized.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Iterable, List, Optional

from pydantic import ValidationError

from quiz_time import is_time_limit_exceeded
from schemas.quizzes import (
    GradedSubmission,
    PublicOption,
    PublicQuestion,
    QuestionConfig,
    QuizSettings,
    SubmissionState,
    SubmitPayload,
)
from schemas.scoring import AnswerOption, ScoringMode, ScoringQuestion
from scoring import score_submission

logger = logging.getLogger("quizscore.grading")

_MISSING_FIELDS_MSG = "Missing required fields"
_ALREADY_SUBMITTED_MSG = "Already submitted"
_WRONG_SUBMISSION_MSG = "Payload does not belong to this submission"


class SubmissionRejected(ValueError):
    """Request failed a boundary check and must not be scored."""


def resolve_scoring_mode(
    question_mode: Optional[ScoringMode], quiz_mode: ScoringMode
) -> ScoringMode:
    return question_mode if question_mode is not None else quiz_mode


def build_scoring_questions(
    quiz: QuizSettings, questions: Iterable[QuestionConfig]
) -> List[ScoringQuestion]:
    return [
        ScoringQuestion(
            id=q.id,
            points=q.points,
            scoring_mode=resolve_scoring_mode(q.scoring_mode, quiz.scoring_mode),
            all_options=[AnswerOption(id=o.id, is_correct=o.is_correct) for o in q.answer_options],
        )
        for q in questions
    ]


def parse_submit_payload(raw: Any) -> SubmitPayload:
    if isinstance(raw, SubmitPayload):
        return raw
    try:
        return SubmitPayload.model_validate(raw)
    except ValidationError as e:
        logger.info("rejected submit payload: %d validation error(s)", e.error_count())
        raise SubmissionRejected(_MISSING_FIELDS_MSG) from e


def grade_submission(
    quiz: QuizSettings,
    questions: Iterable[QuestionConfig],
    submission: SubmissionState,
    payload: Any,
    now: Optional[datetime] = None,
) -> GradedSubmission:
    req = parse_submit_payload(payload)

    if req.submission_id != submission.submission_id:
        raise SubmissionRejected(_WRONG_SUBMISSION_MSG)
    if submission.submitted_at is not None:
        raise SubmissionRejected(_ALREADY_SUBMITTED_MSG)

    # late submissions are still scored
    exceeded = bool(quiz.time_limit_minutes) and is_time_limit_exceeded(
        submission.started_at, quiz.time_limit_minutes, now
    )
    if exceeded:
        logger.warning("Submission %s exceeded time limit", submission.submission_id)

    scoring_questions = build_scoring_questions(quiz, questions)
    for q in scoring_questions:
        if not any(o.is_correct for o in q.all_options):
            logger.warning("Question %s has no correct option; awarding full credit", q.id)

    result = score_submission(scoring_questions, req.answers)
    logger.info(
        "Scored submission %s: %s/%s",
        submission.submission_id,
        result.total_score,
        result.max_possible_score,
    )

    return GradedSubmission(
        submission_id=submission.submission_id,
        total_score=result.total_score,
        max_possible_score=result.max_possible_score,
        per_question=result.per_question,
        time_limit_exceeded=exceeded,
    )


def public_question(q: QuestionConfig) -> PublicQuestion:
    options = sorted(q.answer_options, key=lambda o: o.sort_order)
    return PublicQuestion(
        id=q.id,
        question_text=q.question_text,
        points=q.points,
        sort_order=q.sort_order,
        correct_count=sum(1 for o in options if o.is_correct),
        scoring_mode=q.scoring_mode,
        answer_options=[
            PublicOption(id=o.id, option_text=o.option_text, sort_order=o.sort_order)
            for o in options
        ],
    )
