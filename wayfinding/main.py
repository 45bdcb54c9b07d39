"""Application entry point for the wayfinding API.

Run locally:
    uvicorn wayfinding.main:app --reload --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

import os
from pathlib import Path

import uvicorn

from wayfinding.api import create_app
from wayfinding.logging_config import setup_logging
from wayfinding.settings import load_settings


def _load_local_env() -> None:
    """Load key=value pairs from local .env files if present.

    Priority (first existing file wins per key if env var was unset):
    1) wayfinding/.env
    2) .env
    """
    candidates = [Path("wayfinding/.env"), Path(".env")]

    for env_path in candidates:
        if not env_path.exists():
            continue

        for raw in env_path.read_text(encoding="utf-8").splitlines():
            line = raw.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, value = line.split("=", 1)
            key = key.strip()
            if not key or key in os.environ:
                continue
            os.environ[key] = value.strip().strip("'").strip('"')


_load_local_env()
settings = load_settings()
setup_logging(level=settings.log_level, json_format=settings.log_json, log_file=settings.log_file)
app = create_app(settings=settings)


if __name__ == "__main__":
    uvicorn.run("wayfinding.main:app", host=settings.api_host, port=settings.api_port, reload=settings.api_reload)
