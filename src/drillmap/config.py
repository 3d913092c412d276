"""Configuration management for DrillMap."""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()


def _parse_cors_origins() -> list[str]:
    """Parse CORS origins from environment variable."""
    cors_env = os.getenv("CORS_ALLOW_ORIGINS")
    if cors_env:
        return cors_env.split(",")
    return ["*"]


def _parse_extensions(raw: Optional[str] = None) -> list[str]:
    """Parse the accepted upload extensions (comma-separated, leading dot optional)."""
    raw = raw if raw is not None else os.getenv("ALLOWED_EXTENSIONS", ".las,.xlsx,.csv")
    extensions = []
    for token in raw.split(","):
        token = token.strip().lower()
        if not token:
            continue
        if not token.startswith("."):
            token = f".{token}"
        extensions.append(token)
    return extensions or [".las", ".xlsx", ".csv"]


class Settings(BaseModel):
    """Application settings."""

    # Server settings
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "8000"))
    debug: bool = os.getenv("DEBUG", "false").lower() == "true"
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS settings (comma-separated list of allowed origins, or * for all)
    cors_allow_origins: list[str] = _parse_cors_origins()

    # File intake
    processing_delay_seconds: float = float(os.getenv("PROCESSING_DELAY_SECONDS", "2.0"))
    allowed_extensions: list[str] = _parse_extensions()
    max_upload_mb: int = int(os.getenv("MAX_UPLOAD_MB", "100"))  # Shown in the UI, not enforced


settings = Settings()
