# quizscore/share_code.py
from __future__ import annotations

import secrets
from typing import Callable

from settings import SHARE_CODE_FALLBACK_LENGTH, SHARE_CODE_LENGTH, SHARE_CODE_MAX_ATTEMPTS

# Omits O, 0, I, 1 to avoid visual confusion
ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"


def generate_share_code(length: int = SHARE_CODE_LENGTH) -> str:
    return "".join(secrets.choice(ALPHABET) for _ in range(length))


def generate_unique_share_code(
    exists: Callable[[str], bool], max_attempts: int = SHARE_CODE_MAX_ATTEMPTS
) -> str:
    """
    Try up to max_attempts codes against the `exists` lookup. If every one is
    taken, return a longer code without checking it.
    """
    for _ in range(max_attempts):
        code = generate_share_code()
        if not exists(code):
            return code
    return generate_share_code(SHARE_CODE_FALLBACK_LENGTH)
