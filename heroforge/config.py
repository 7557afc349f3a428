"""
heroforge/config.py  ·  environment-driven settings
"""
import os

from dotenv import load_dotenv

load_dotenv()

# ────────── Models ──────────
LLM_MODEL   = os.getenv("LLM_MODEL", "gpt-4o-mini")
IMAGE_MODEL = os.getenv("IMAGE_MODEL", "gpt-image-1")
IMAGE_SIZE  = os.getenv("IMAGE_SIZE", "1024x1024")

# ────────── Progress bar timing ──────────
PROGRESS_TICK_SECONDS = float(os.getenv("PROGRESS_TICK_SECONDS", "0.41"))
SETTLE_DELAY_SECONDS  = float(os.getenv("SETTLE_DELAY_SECONDS", "0.5"))

# ────────── HTTP ──────────
ALLOWED_ORIGINS = [
    o.strip()
    for o in os.getenv("ALLOWED_ORIGINS", "http://localhost:4200").split(",")
    if o.strip()
]
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "8000"))
SESSION_COOKIE_MAX_AGE = 60 * 60 * 24 * 30
MAX_SESSIONS = int(os.getenv("MAX_SESSIONS", "1000"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
