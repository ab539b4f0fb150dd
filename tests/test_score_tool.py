import json

from tools.score_submission import main

DOC = {
    "quiz": {"scoring_mode": "proportional_with_penalty"},
    "questions": [
        {
            "id": "q1",
            "points": 6,
            "answer_options": [
                {"id": "a", "is_correct": True},
                {"id": "b", "is_correct": True},
                {"id": "c", "is_correct": False},
            ],
        }
    ],
    "submission": {"submission_id": "s1", "started_at": "2026-01-01T12:00:00Z"},
    "payload": {
        "submission_id": "s1",
        "answers": [{"question_id": "q1", "selected_option_ids": ["a", "b", "c"]}],
    },
}


def _write(tmp_path, doc):
    p = tmp_path / "submission.json"
    p.write_text(json.dumps(doc), encoding="utf-8")
    return str(p)


def test_score_tool_prints_result(tmp_path, capsys):
    assert main([_write(tmp_path, DOC)]) == 0
    body = json.loads(capsys.readouterr().out)
    assert body["submission_id"] == "s1"
    assert body["total_score"] == 3
    assert body["max_possible_score"] == 6
    assert body["per_question"]["q1"]["correct_count"] == 2


def test_score_tool_rejects_bad_payload(tmp_path, capsys):
    doc = dict(DOC, payload={"submission_id": "s1", "answers": "a"})
    assert main([_write(tmp_path, doc)]) == 1
    assert "Missing required fields" in capsys.readouterr().err


def test_score_tool_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.json")]) == 1
    assert "could not read" in capsys.readouterr().err
