#!/usr/bin/env python
"""
Score one submission described in a JSON file and print the result as JSON.

    {"quiz": {...}, "questions": [...], "submission": {...}, "payload": {...}}
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Allow running as `python tools/score_submission.py` from the project root
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pydantic import TypeAdapter, ValidationError  # noqa: E402

from grading import SubmissionRejected, grade_submission  # noqa: E402
from schemas.quizzes import QuestionConfig, QuizSettings, SubmissionState  # noqa: E402
from settings import LOG_LEVEL  # noqa: E402

logger = logging.getLogger("quizscore.tools")

_questions_adapter = TypeAdapter(list[QuestionConfig])


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Score a quiz submission from a JSON file.")
    parser.add_argument("file", type=Path)
    parser.add_argument("--pretty", action="store_true", help="indent the JSON output")
    args = parser.parse_args(argv)

    logging.basicConfig(level=LOG_LEVEL)

    try:
        doc = json.loads(args.file.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        print(f"Error: could not read {args.file}: {e}", file=sys.stderr)
        return 1
    if not isinstance(doc, dict):
        print("Error: expected a JSON object at the top level", file=sys.stderr)
        return 1

    try:
        quiz = QuizSettings.model_validate(doc.get("quiz") or {})
        questions = _questions_adapter.validate_python(doc.get("questions") or [])
        submission = SubmissionState.model_validate(doc.get("submission"))
    except ValidationError as e:
        print(f"Error: invalid quiz data: {e.error_count()} validation error(s)", file=sys.stderr)
        return 1

    try:
        graded = grade_submission(quiz, questions, submission, doc.get("payload"))
    except SubmissionRejected as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(graded.model_dump_json(indent=2 if args.pretty else None))
    return 0


if __name__ == "__main__":
    sys.exit(main())
