# quizscore/csv_export.py
from __future__ import annotations

import csv
import io
import math
from typing import Iterable, List, Optional, Sequence

from schemas.quizzes import QuestionConfig, ResultRow
from scoring import round_half_up


def _num_to_clean_str(x: float) -> str:
    if math.isfinite(x) and abs(x - round(x)) < 1e-12:
        return str(int(round(x)))
    return str(x)


def percentage(total_score: Optional[float], max_possible_score: Optional[float]) -> int:
    if not max_possible_score or max_possible_score <= 0:
        return 0
    return int(round_half_up((total_score or 0) / max_possible_score * 100, decimals=0))


def header_row(questions: Sequence[QuestionConfig]) -> List[str]:
    return [
        "Student Name",
        "Student Email",
        *[f"Q{i} ({_num_to_clean_str(q.points)}pts)" for i, q in enumerate(questions, 1)],
        "Total Score",
        "Max Score",
        "Percentage",
    ]


def result_row(questions: Sequence[QuestionConfig], row: ResultRow) -> List[str]:
    return [
        row.student_name or "",
        row.student_email or "",
        *[_num_to_clean_str(row.per_question_scores.get(q.id, 0)) for q in questions],
        _num_to_clean_str(row.total_score or 0),
        _num_to_clean_str(row.max_possible_score or 0),
        f"{percentage(row.total_score, row.max_possible_score)}%",
    ]


def build_results_csv(questions: Iterable[QuestionConfig], rows: Iterable[ResultRow]) -> str:
    """
    One header line, then one line per submission. Columns follow the order of
    `questions`; a score missing for a question is written as 0.
    """
    qs = list(questions)
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(header_row(qs))
    for row in rows:
        writer.writerow(result_row(qs, row))
    return buf.getvalue().removesuffix("\n")
