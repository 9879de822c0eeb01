"""Structured JSON logging for the seomatic renderer.

Render passes log skipped entries at debug level; the CLI turns
those records into JSON lines on stderr or in a log file.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any


class JSONFormatter(logging.Formatter):
    """Formats log records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        # Merge extra structured data
        if hasattr(record, "data"):
            entry["data"] = record.data  # type: ignore[attr-defined]
        if record.exc_info and record.exc_info[1]:
            entry["error"] = str(record.exc_info[1])
        return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logging(
    log_dir: Path | None = None,
    level: int | str = logging.WARNING,
) -> logging.Logger:
    """Configure structured logging for the renderer.

    Args:
        log_dir: Directory for log files. If None, logs to stderr only.
        level: Logging level, as a number or a level name.

    Returns:
        The root 'seomatic' logger.
    """
    logger = logging.getLogger("seomatic")
    logger.setLevel(level)

    # Avoid duplicate handlers on repeated calls
    if logger.handlers:
        return logger

    fmt = JSONFormatter()

    # File handler (JSON lines)
    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_dir / "seomatic.jsonl", encoding="utf-8")
        fh.setFormatter(fmt)
        fh.setLevel(level)
        logger.addHandler(fh)

    sh = logging.StreamHandler()
    sh.setFormatter(fmt)
    sh.setLevel(level)
    logger.addHandler(sh)

    return logger


def log_render(part: str, head_count: int, body_count: int) -> None:
    """Log a completed render pass."""
    logger = logging.getLogger("seomatic.render")
    logger.info(
        "render_done",
        extra={"data": {
            "part": part,
            "head_elements": head_count,
            "body_elements": body_count,
        }},
    )
