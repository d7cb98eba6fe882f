# backend/voicepos/config.py
from __future__ import annotations
import os

from sqlalchemy.pool import StaticPool


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class Config:
    # Optional "SECRET_KEY", with default dev key
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-change-me")

    # Memory-resident store: everything is reseeded on process start
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        "DATABASE_URL",  # optional alternative location
        "sqlite://",
    )
    # One shared connection so every request thread sees the same in-memory DB
    SQLALCHEMY_ENGINE_OPTIONS = (
        {"poolclass": StaticPool, "connect_args": {"check_same_thread": False}}
        if SQLALCHEMY_DATABASE_URI.startswith("sqlite")
        else {}
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    SEED_DEMO_DATA = _env_flag("VOICEPOS_SEED", True)

    LOW_STOCK_THRESHOLD = int(os.environ.get("VOICEPOS_LOW_STOCK", "10"))
    CRITICAL_STOCK_THRESHOLD = int(os.environ.get("VOICEPOS_CRITICAL_STOCK", "5"))

    SPEECH_LANGUAGE = os.environ.get("VOICEPOS_SPEECH_LANGUAGE", "bn-BD")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
