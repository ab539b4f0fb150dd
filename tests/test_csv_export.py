from csv_export import build_results_csv, percentage
from schemas.quizzes import QuestionConfig, ResultRow

QUESTIONS = [QuestionConfig(id="q1", points=10), QuestionConfig(id="q2", points=2.5)]


def test_percentage():
    assert percentage(7, 9) == 78
    assert percentage(1, 8) == 13
    assert percentage(5, 0) == 0
    assert percentage(None, None) == 0


def test_build_results_csv():
    rows = [
        ResultRow(
            student_name="Doe, Jane",
            student_email="jane@example.com",
            total_score=11,
            max_possible_score=12.5,
            per_question_scores={"q1": 10, "q2": 1},
        ),
        ResultRow(),
    ]
    out = build_results_csv(QUESTIONS, rows)
    assert out.split("\n") == [
        "Student Name,Student Email,Q1 (10pts),Q2 (2.5pts),Total Score,Max Score,Percentage",
        '"Doe, Jane",jane@example.com,10,1,11,12.5,88%',
        ",,0,0,0,0,0%",
    ]


def test_build_results_csv_escapes_quotes():
    out = build_results_csv([], [ResultRow(student_name='Say "hi"', total_score=1, max_possible_score=2)])
    assert out.split("\n")[1] == '"Say ""hi""",,1,2,50%'


def test_build_results_csv_header_only():
    out = build_results_csv(QUESTIONS, [])
    assert "\n" not in out
    assert out.startswith("Student Name,Student Email,Q1 (10pts)")
