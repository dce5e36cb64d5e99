import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./cleansync.db")

# Security - CRITICAL: No default secret key in production
SECRET_KEY = os.getenv("SECRET_KEY")
if not SECRET_KEY:
    import warnings

    warnings.warn(
        "SECRET_KEY not set! Using insecure default - DO NOT USE IN PRODUCTION", RuntimeWarning, stacklevel=2
    )
    SECRET_KEY = "INSECURE-DEV-KEY-CHANGE-IN-PRODUCTION"  # noqa: S105 - Dev fallback only

# Session cookie holding the authenticated client id
SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "cleansync_session")
SESSION_MAX_AGE = int(os.getenv("SESSION_MAX_AGE", str(7 * 24 * 3600)))
SESSION_HTTPS_ONLY = os.getenv("SESSION_HTTPS_ONLY", "false").lower() == "true"

# Login brute-force protection (4-digit PINs are a small keyspace)
LOGIN_RATE_LIMIT_ENABLED = os.getenv("LOGIN_RATE_LIMIT_ENABLED", "true").lower() == "true"
LOGIN_RATE_LIMIT = int(os.getenv("LOGIN_RATE_LIMIT", "10"))
LOGIN_RATE_WINDOW_SECONDS = int(os.getenv("LOGIN_RATE_WINDOW_SECONDS", "300"))

# Outbound booking notification. Unset URL disables it.
BOOKING_WEBHOOK_URL = os.getenv("BOOKING_WEBHOOK_URL")
BOOKING_WEBHOOK_SECRET = os.getenv("BOOKING_WEBHOOK_SECRET")
BOOKING_WEBHOOK_TIMEOUT_SECONDS = float(os.getenv("BOOKING_WEBHOOK_TIMEOUT_SECONDS", "10"))

# Hosted assistant (OpenAI). Unset key disables it.
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
OPENAI_TIMEOUT_SECONDS = float(os.getenv("OPENAI_TIMEOUT_SECONDS", "30"))

# Crew calendar
WORKING_HOURS_START = int(os.getenv("WORKING_HOURS_START", "9"))  # 09:00
WORKING_HOURS_END = int(os.getenv("WORKING_HOURS_END", "17"))  # 17:00
SESSION_LENGTH_HOURS = int(os.getenv("SESSION_LENGTH_HOURS", "2"))

# Chat intent classifier weights
CLASSIFIER_KEYWORD_WEIGHT = float(os.getenv("CLASSIFIER_KEYWORD_WEIGHT", "1.5"))
CLASSIFIER_PARTIAL_TERM_WEIGHT = float(os.getenv("CLASSIFIER_PARTIAL_TERM_WEIGHT", "0.75"))
CLASSIFIER_CONTEXT_WEIGHT = float(os.getenv("CLASSIFIER_CONTEXT_WEIGHT", "1.0"))
CLASSIFIER_RELATED_TERM_WEIGHT = float(os.getenv("CLASSIFIER_RELATED_TERM_WEIGHT", "0.5"))
CLASSIFIER_CONFIDENCE_FLOOR = float(os.getenv("CLASSIFIER_CONFIDENCE_FLOOR", "0.3"))

# Frontend origins allowed to send the session cookie
ALLOWED_ORIGINS = os.getenv(
    "ALLOWED_ORIGINS",
    "http://localhost:5173,http://localhost:3000",
).split(",")
