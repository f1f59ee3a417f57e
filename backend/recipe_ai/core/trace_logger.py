"""
Trace logging utilities for Recipe AI.

Writes pipeline runs to JSONL so we can replay/debug generation requests.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from threading import Lock
from typing import Any

from .config import get_settings

logger = logging.getLogger(__name__)


class TraceLogger:
    """Append-only JSONL logger for recipe pipeline runs."""

    def __init__(self, log_path: Path | None = None, enabled: bool | None = None):
        settings = get_settings()
        self.log_path = log_path or settings.trace_log_path
        self.enabled = settings.enable_trace_logging if enabled is None else enabled
        self._lock = Lock()

    def log_recipe_run(
        self,
        request_id: str,
        prompt: str,
        language: str,
        recipe_count: int,
        images_generated: int,
        duration_ms: float,
        error: str | None = None,
    ) -> None:
        """Persist a single pipeline run as a JSON line."""
        if not self.enabled:
            return

        entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "request_id": request_id,
            "prompt": prompt,
            "language": language,
            "recipe_count": recipe_count,
            "images_generated": images_generated,
            "images_missing": recipe_count - images_generated,
            "duration_ms": round(duration_ms, 1),
            "error": error,
        }

        try:
            self.log_path.parent.mkdir(parents=True, exist_ok=True)
            serialized = json.dumps(entry, ensure_ascii=False)
            with self._lock:
                with self.log_path.open("a", encoding="utf-8") as log_file:
                    log_file.write(serialized + "\n")
        except Exception as exc:  # pragma: no cover - logging failure shouldn't break requests
            logger.warning("Failed to persist recipe trace: %s", exc)


_TRACE_LOGGER: TraceLogger | None = None


def get_trace_logger() -> TraceLogger:
    """Return a singleton TraceLogger instance."""
    global _TRACE_LOGGER
    if _TRACE_LOGGER is None:
        _TRACE_LOGGER = TraceLogger()
    return _TRACE_LOGGER


def set_trace_logger(logger_instance: TraceLogger | None) -> None:
    """Override the global trace logger (primarily for tests)."""
    global _TRACE_LOGGER
    _TRACE_LOGGER = logger_instance
