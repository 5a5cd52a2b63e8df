"""
Configuration management.
Loads from config_local.py (gitignored) when present, otherwise from environment variables with defaults.
"""
import os
from typing import List

# Try to import local config (gitignored)
try:
    from app.config_local import (
        DATABASE_URL,
        ENVIRONMENT,
        CORS_ORIGINS,
        PORT,
        LOG_LEVEL,
    )
except ImportError:
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./stacksave.db")
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")  # "production" hides error details
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "http://localhost:3000")  # comma-separated
    PORT: int = int(os.getenv("PORT", "3001"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


def _split_origins(value: str) -> List[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


def is_production() -> bool:
    """True when error responses must not leak internals."""
    return ENVIRONMENT.lower() == "production"


def get_settings():
    """Return settings object (for FastAPI dependency injection if needed)."""
    return type("Settings", (), {
        "database_url": DATABASE_URL,
        "environment": ENVIRONMENT,
        "cors_origins": _split_origins(CORS_ORIGINS),
        "port": PORT,
        "log_level": LOG_LEVEL,
        "is_production": is_production(),
    })()
