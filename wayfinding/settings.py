"""Environment-driven runtime settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Resolved process configuration."""

    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_reload: bool = True
    cors_origins: tuple[str, ...] = ("*",)
    log_level: str = "INFO"
    log_json: bool = False
    log_file: Path | None = None


def load_settings() -> Settings:
    """Read settings from the current environment."""
    raw_origins = os.getenv("WAYFINDING_CORS_ORIGINS", "*").strip()
    origins = tuple(o.strip() for o in raw_origins.split(",") if o.strip()) or ("*",)

    raw_log_file = os.getenv("WAYFINDING_LOG_FILE", "").strip()

    return Settings(
        api_host=os.getenv("API_HOST", "0.0.0.0"),
        api_port=int(os.getenv("API_PORT", "8000")),
        api_reload=_env_flag("API_RELOAD", "true"),
        cors_origins=origins,
        log_level=os.getenv("WAYFINDING_LOG_LEVEL", "INFO").strip().upper() or "INFO",
        log_json=_env_flag("WAYFINDING_LOG_JSON", "false"),
        log_file=Path(raw_log_file) if raw_log_file else None,
    )
