# quizscore/scoring.py
"""
Scoring engine for multiple-choice questions.

Pure functions only: no I/O, no shared state. Arithmetic runs on exact
rationals and is converted to float once the value has been rounded to the cent.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Union

from sympy import Rational, floor

from schemas.scoring import (
    QuestionScoringInput,
    QuestionScoringResult,
    ScoringMode,
    ScoringQuestion,
    SubmissionScoringResult,
    SubmittedAnswer,
)
from settings import SCORE_DECIMALS

Number = Union[int, float, Rational]

# --- Numeric helpers --------------------------------------------------------------


def to_rational(value: Number) -> Rational:
    if isinstance(value, Rational):
        return value
    if isinstance(value, int):
        return Rational(value)
    # str() keeps the decimal the caller wrote (0.1 -> 1/10, not the binary double)
    return Rational(str(value))


def round_half_up(value: Number, decimals: int = SCORE_DECIMALS) -> float:
    """
    Multiply by 10**decimals, round to the nearest integer with halves going up,
    divide back. Matches the cent rounding the stored scores were produced with.
    """
    scale = 10**decimals
    return float(floor(to_rational(value) * scale + Rational(1, 2)) / scale)


# --- Policies ---------------------------------------------------------------------
# (correct_selected, wrong_selected, total_correct, points) -> unrounded earned

Policy = Callable[[int, int, int, Rational], Rational]


def _proportional_no_penalty(correct: int, wrong: int, n: int, points: Rational) -> Rational:
    return Rational(correct, n) * points


def _proportional_with_penalty(correct: int, wrong: int, n: int, points: Rational) -> Rational:
    return max(Rational(0), Rational(correct - wrong, n) * points)


def _all_or_nothing(correct: int, wrong: int, n: int, points: Rational) -> Rational:
    if correct == n and wrong == 0:
        return points
    return Rational(0)


POLICIES: Dict[ScoringMode, Policy] = {
    ScoringMode.PROPORTIONAL_NO_PENALTY: _proportional_no_penalty,
    ScoringMode.PROPORTIONAL_WITH_PENALTY: _proportional_with_penalty,
    ScoringMode.ALL_OR_NOTHING: _all_or_nothing,
}


# --- Engine -----------------------------------------------------------------------


def score_question(question: QuestionScoringInput) -> QuestionScoringResult:
    options = question.all_options
    selected = question.selected_option_ids

    total_correct = sum(1 for o in options if o.is_correct)

    # No correct option configured: full credit instead of dividing by zero.
    if total_correct == 0:
        return QuestionScoringResult(
            earned=question.points, max=question.points, correct_count=0, total_correct=0
        )

    correct_selected = sum(1 for o in options if o.is_correct and o.id in selected)
    wrong_selected = sum(1 for o in options if not o.is_correct and o.id in selected)

    policy = POLICIES[question.scoring_mode]
    earned = policy(correct_selected, wrong_selected, total_correct, to_rational(question.points))

    return QuestionScoringResult(
        earned=round_half_up(earned),
        max=question.points,
        correct_count=correct_selected,
        total_correct=total_correct,
    )


def score_submission(
    questions: Iterable[ScoringQuestion], answers: Iterable[SubmittedAnswer]
) -> SubmissionScoringResult:
    # last entry wins on duplicate question ids
    selections = {a.question_id: a.selected_option_ids for a in answers}

    total_score = Rational(0)
    max_possible_score = Rational(0)
    per_question: Dict[str, QuestionScoringResult] = {}

    for q in questions:
        result = score_question(
            QuestionScoringInput(
                points=q.points,
                scoring_mode=q.scoring_mode,
                all_options=q.all_options,
                selected_option_ids=selections.get(q.id, set()),
            )
        )
        total_score += to_rational(result.earned)
        max_possible_score += to_rational(result.max)
        per_question[q.id] = result

    return SubmissionScoringResult(
        total_score=round_half_up(total_score),
        max_possible_score=round_half_up(max_possible_score),
        per_question=per_question,
    )
