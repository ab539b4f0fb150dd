# quizscore/settings.py
import os

# Load once at module import
LOG_LEVEL = os.getenv("QUIZSCORE_LOG_LEVEL", "INFO").upper()

# --- Scoring policy ---------------------------------------------------------------
# Scores are kept to the cent; rounding is half-up on that unit.
SCORE_DECIMALS = 2

# --- Share codes ------------------------------------------------------------------
SHARE_CODE_LENGTH = int(os.getenv("QUIZSCORE_SHARE_CODE_LENGTH", "7"))
SHARE_CODE_FALLBACK_LENGTH = int(os.getenv("QUIZSCORE_SHARE_CODE_FALLBACK_LENGTH", "8"))
SHARE_CODE_MAX_ATTEMPTS = int(os.getenv("QUIZSCORE_SHARE_CODE_MAX_ATTEMPTS", "5"))
