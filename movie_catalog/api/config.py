"""
API configuration loaded from environment or defaults.
"""

import os
from pathlib import Path


def get_database_path() -> str:
    """Get database file path from env or default."""
    return os.getenv("DATABASE_URL", "sqlite:///").replace("sqlite:///", "") or str(
        Path(__file__).resolve().parents[2] / "data" / "catalog.db"
    )


def get_upload_dir() -> str:
    """Get directory that holds uploaded spreadsheets while they are imported."""
    return os.getenv("UPLOAD_DIR", "") or str(
        Path(__file__).resolve().parents[2] / "uploads"
    )


def get_import_atomic() -> bool:
    """Whether a failing spreadsheet row rolls back the rows imported before it."""
    return os.getenv("IMPORT_ATOMIC", "true").strip().lower() not in ("0", "false", "no", "off")


def get_cors_origins() -> list[str]:
    """Get front-end origins allowed to call the API."""
    origins = os.getenv("CORS_ORIGINS", "http://localhost:8501")
    return [origin.strip() for origin in origins.split(",") if origin.strip()]


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_file() -> str | None:
    """Get log file name from env; None logs to console only."""
    return os.getenv("LOG_FILE") or None


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("API_PORT", "8000"))
