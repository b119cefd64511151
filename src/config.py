"""
Shared configuration for FestiPlan (environment variables, optionally from .env).
"""
import os


def _int_env(name, default):
    value = os.getenv(name)
    return int(value) if value not in (None, "") else default


# ── Server ──
HOST = os.getenv("HOST", "127.0.0.1")
PORT = _int_env("PORT", 8000)
RELOAD = os.getenv("RELOAD", "True").lower() == "true"
LOG_LEVEL = os.getenv("LOG_LEVEL", "info").lower()
ALLOWED_ORIGINS = os.getenv(
    "ALLOWED_ORIGINS", "http://localhost:8000,http://127.0.0.1:8000"
).split(",")

# ── Rate limit ──
REDIS_URL = os.getenv("REDIS_URL")
RATE_LIMIT_PER_MINUTE = _int_env("RATE_LIMIT_PER_MINUTE", 60)

# ── Optimizer ──
SAMPLE_COUNT = _int_env("FESTIPLAN_SAMPLE_COUNT", 4000)
WORKERS = _int_env("FESTIPLAN_WORKERS", 1)
SEED = _int_env("FESTIPLAN_SEED", None)   # None = OS entropy per request
