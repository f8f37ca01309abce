from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

load_dotenv()

APP_NAME = os.getenv("APP_NAME", "physics-tutorial-api")
APP_VERSION = os.getenv("APP_VERSION", "0.1.0")
API_PREFIX = os.getenv("API_PREFIX", "/api/v1").rstrip("/")

# Single learner until an auth collaborator exists
DEMO_USER_ID = os.getenv("DEMO_USER_ID", "demo-user")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3001"))

_CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def cors_origins(raw: str | None = None) -> list[str]:
    value = _CORS_ORIGINS if raw is None else raw
    return [o.strip() for o in value.split(",") if o.strip()]


def log_level(raw: str | None = None) -> int:
    name = (_LOG_LEVEL if raw is None else raw).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO
