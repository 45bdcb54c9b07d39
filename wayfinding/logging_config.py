"""Logging configuration for the wayfinding service.

Route planning binds `start_id` / `goal_id` (and the resulting step count and
distance) into each record's `extra`, so JSON output can be filtered per route.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

from loguru import logger

ROUTE_FIELDS = ("start_id", "goal_id", "steps", "total_distance")


class JSONFormatter:
    """Render loguru records as single-line JSON with a nested `route` object."""

    def __call__(self, record: dict[str, Any]) -> str:
        extra = dict(record.get("extra") or {})
        log_data: dict[str, Any] = {
            "timestamp": record["time"].isoformat(),
            "level": record["level"].name,
            "component": extra.pop("component", record.get("name", "")),
            "message": record["message"],
            "function": record.get("function", ""),
            "line": record.get("line", 0),
        }

        route = {key: extra.pop(key) for key in ROUTE_FIELDS if key in extra}
        if route:
            log_data["route"] = route

        if record.get("exception"):
            exc = record["exception"]
            log_data["exception"] = {
                "type": exc.type.__name__ if exc.type else None,
                "value": str(exc.value) if exc.value else None,
            }

        log_data.update(extra)

        # loguru treats the returned string as a format template.
        return json.dumps(log_data, ensure_ascii=False, default=str).replace("{", "{{").replace("}", "}}") + "\n"


def setup_logging(
    *,
    level: str = "INFO",
    json_format: bool = False,
    log_file: Path | None = None,
) -> None:
    """Configure loguru sinks for the process.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_format: Emit JSON lines instead of the colored console format.
        log_file: Optional file sink; stderr only when None.
    """
    logger.remove()

    if json_format:
        formatter: Any = JSONFormatter()
    else:
        formatter = (
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{extra[component]}</cyan>:<cyan>{function}</cyan> | "
            "<level>{message}</level>"
        )

    logger.configure(extra={"component": "wayfinding"})
    logger.add(sys.stderr, format=formatter, level=level, colorize=not json_format)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_file, format=formatter, level=level, rotation="10 MB", retention="7 days")


def get_logger(component: str | None = None) -> Any:
    """Return the shared logger, bound to a component name when given."""
    if component:
        return logger.bind(component=component)
    return logger


def route_logger(base: Any, start_id: str, goal_id: str) -> Any:
    """Bind one route request's endpoints onto `base`."""
    return base.bind(start_id=start_id, goal_id=goal_id)
