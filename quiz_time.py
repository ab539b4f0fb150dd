# quizscore/quiz_time.py
from __future__ import annotations

from datetime import UTC, datetime
from typing import Optional


def _aware(dt: datetime) -> datetime:
    # naive timestamps are stored as UTC
    return dt if dt.tzinfo is not None else dt.replace(tzinfo=UTC)


def _now(now: Optional[datetime]) -> datetime:
    return _aware(now) if now is not None else datetime.now(UTC)


def is_quiz_open(
    opens_at: Optional[datetime],
    closes_at: Optional[datetime],
    now: Optional[datetime] = None,
) -> bool:
    current = _now(now)
    if opens_at is not None and _aware(opens_at) > current:
        return False
    if closes_at is not None and _aware(closes_at) < current:
        return False
    return True


def elapsed_seconds(started_at: datetime, now: Optional[datetime] = None) -> float:
    return (_now(now) - _aware(started_at)).total_seconds()


def is_time_limit_exceeded(
    started_at: datetime, time_limit_minutes: float, now: Optional[datetime] = None
) -> bool:
    return elapsed_seconds(started_at, now) / 60 > time_limit_minutes


def seconds_remaining(
    started_at: datetime, time_limit_minutes: float, now: Optional[datetime] = None
) -> float:
    return max(0.0, time_limit_minutes * 60 - elapsed_seconds(started_at, now))
