"""Structured JSON logger for excerpt and language results.

Writes one JSON object per line to the configured log file.
Document and selection text is *never* logged (privacy requirement), only
offsets, lengths and detector outcomes.
"""

from __future__ import annotations

import json
import logging
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from grounding.config import settings
from grounding.models import Arbitration, Excerpt

_logger: logging.Logger | None = None
_init_lock = threading.Lock()


def _get_logger() -> logging.Logger:
    """Lazily initialise the file-backed JSON logger."""
    global _logger
    if _logger is not None:
        return _logger

    # Concurrent first calls must not attach two handlers
    with _init_lock:
        if _logger is None:
            log_path = Path(settings.log_path)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            results = logging.getLogger("grounding.results")
            results.setLevel(logging.INFO)
            results.propagate = False
            if not results.handlers:
                handler = logging.FileHandler(str(log_path), encoding="utf-8")
                handler.setFormatter(logging.Formatter("%(message)s"))
                results.addHandler(handler)
            _logger = results
    return _logger


def _write(event: str, fields: dict[str, Any]) -> None:
    if not settings.log_results:
        return
    entry: dict[str, Any] = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "event": event,
        **fields,
    }
    _get_logger().info(json.dumps(entry, ensure_ascii=False))


def log_excerpt(
    document_length: int,
    requested_start: int,
    requested_end: int,
    excerpt: Excerpt,
) -> None:
    """Append a structured JSON entry for one built excerpt."""
    _write(
        "excerpt",
        {
            "document_length": document_length,
            "requested_start": requested_start,
            "requested_end": requested_end,
            "resolved_start": excerpt.span.start,
            "resolved_end": excerpt.span.end,
            "resolution": excerpt.span.method,
            "marked": excerpt.marked,
            "snippet_length": len(excerpt.snippet),
        },
    )


def log_language(sample_length: int, arbitration: Arbitration) -> None:
    """Append a structured JSON entry for one language decision."""
    _write(
        "language",
        {
            "sample_length": sample_length,
            "prefer": arbitration.prefer,
            "lang": arbitration.guess.lang,
            "confidence": round(arbitration.guess.confidence, 4),
            "method": arbitration.guess.method,
            "heuristic_lang": arbitration.heuristic.lang,
            "statistical_lang": arbitration.statistical.lang,
        },
    )
