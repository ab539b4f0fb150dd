from datetime import UTC, datetime, timedelta

from quiz_time import is_quiz_open, is_time_limit_exceeded, seconds_remaining

NOW = datetime(2026, 3, 1, 9, 0, tzinfo=UTC)


def test_quiz_open_without_window():
    assert is_quiz_open(None, None, now=NOW) is True


def test_quiz_not_yet_open():
    assert is_quiz_open(NOW + timedelta(hours=1), None, now=NOW) is False


def test_quiz_closed():
    assert is_quiz_open(None, NOW - timedelta(seconds=1), now=NOW) is False


def test_quiz_inside_window():
    assert is_quiz_open(NOW - timedelta(days=1), NOW + timedelta(days=1), now=NOW) is True


def test_naive_datetimes_are_utc():
    naive_open = datetime(2026, 3, 1, 10, 0)
    assert is_quiz_open(naive_open, None, now=NOW) is False


def test_time_limit_strictly_greater():
    started = NOW - timedelta(minutes=10)
    assert is_time_limit_exceeded(started, 10, now=NOW) is False
    assert is_time_limit_exceeded(started - timedelta(seconds=1), 10, now=NOW) is True


def test_seconds_remaining():
    started = NOW - timedelta(minutes=4)
    assert seconds_remaining(started, 5, now=NOW) == 60
    assert seconds_remaining(started, 3, now=NOW) == 0
