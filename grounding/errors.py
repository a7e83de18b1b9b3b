"""Exceptions raised by the grounding utilities."""

from __future__ import annotations

from typing import Any


class InvalidArgumentError(TypeError):
    """A text or span argument has the wrong type."""


def require_text(value: Any, name: str = "text") -> str:
    """Return *value* unchanged if it is a ``str``, otherwise fail fast."""
    if not isinstance(value, str):
        raise InvalidArgumentError(
            f"{name} must be a str, got {type(value).__name__}"
        )
    return value
