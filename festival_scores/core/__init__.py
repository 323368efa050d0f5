"""Core configuration and infrastructure helpers."""

from .config import (
    ADMIN_PASS,
    API_PREFIX,
    ADMIN_USER,
    ALLOWED_CORS_ORIGINS,
    COOKIE_DOMAIN,
    COOKIE_SAMESITE,
    COOKIE_SECURE,
    DATABASE_URL,
    DB_RESET,
    LOG_LEVEL,
    SECRET_KEY,
)
from .database import engine, get_session
from .logs import setup_logging
from .security import check_admin_credentials, require_admin
from .time import isoformat_utc, utcnow

__all__ = [
    "ADMIN_PASS",
    "API_PREFIX",
    "ADMIN_USER",
    "ALLOWED_CORS_ORIGINS",
    "COOKIE_DOMAIN",
    "COOKIE_SAMESITE",
    "COOKIE_SECURE",
    "DATABASE_URL",
    "DB_RESET",
    "LOG_LEVEL",
    "SECRET_KEY",
    "check_admin_credentials",
    "engine",
    "get_session",
    "isoformat_utc",
    "require_admin",
    "setup_logging",
    "utcnow",
]
