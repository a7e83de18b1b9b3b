"""Span resolution – repair a caller's selection and cut a marked excerpt.

A caller holds ``(full_text, selected_text, start, end)`` where the offsets
were recorded against its own copy of the document, in UTF-16 code units.
By the time they reach us the document may have been edited, re-encoded or
re-composed, so the offsets are verified and, if needed, realigned:

1. exact match at the given offsets,
2. first occurrence within ``± search_radius`` characters,
3. first occurrence anywhere in the document,
4. give up and return the clamped offsets (``method="unverified"``).

The resolved selection is then wrapped in « » and a window of ``pad``
characters either side is returned, with … marking truncation.
"""

from __future__ import annotations

import logging
import unicodedata
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from grounding.config import settings
from grounding.errors import InvalidArgumentError, require_text
from grounding.logger import log_excerpt
from grounding.models import Excerpt, ResolvedSpan, Span

_log = logging.getLogger("grounding.span")

OPEN = "«"
CLOSE = "»"
ELLIPSIS = "…"


# ── Normalisation & offsets ────────────────────────────────────────────────

def normalize(text: str) -> str:
    """Return *text* in Unicode NFC."""
    return unicodedata.normalize("NFC", require_text(text))


def strip_markers(text: str) -> str:
    """Remove every open and close marker glyph from *text*."""
    return require_text(text).replace(OPEN, "").replace(CLOSE, "")


def utf16_to_index(text: str, offset: int) -> int:
    """Convert a UTF-16 code-unit offset into a ``str`` index of *text*.

    Offsets are clamped to the text; an offset that falls between the two
    halves of a surrogate pair rounds down to the start of that character.
    """
    if offset <= 0:
        return 0
    units = 0
    for i, ch in enumerate(text):
        units += 2 if ord(ch) > 0xFFFF else 1
        if units > offset:
            return i
    return len(text)


def index_to_utf16(text: str, index: int) -> int:
    """Inverse of :func:`utf16_to_index` for reporting offsets to clients."""
    index = _clamp(index, 0, len(text))
    return index + sum(1 for ch in text[:index] if ord(ch) > 0xFFFF)


def _clamp(n: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, n))


# ── Resolution tiers ───────────────────────────────────────────────────────

def _search_local(document: str, needle: str, start: int, end: int, radius: int) -> int:
    lo = _clamp(start - radius, 0, len(document))
    hi = _clamp(end + radius, 0, len(document))
    return document.find(needle, lo, hi)


def _search_global(document: str, needle: str) -> int:
    return document.find(needle)


def resolve(
    normalized_document: str,
    span: Span,
    radius: int | None = None,
) -> ResolvedSpan:
    """Verify *span* against *normalized_document*, realigning it if it drifted.

    Never raises for out-of-range or inverted offsets; they are ordered and
    clamped.  When the selection text cannot be found anywhere the result
    has ``method="unverified"`` and may point at unrelated content.
    """
    radius = settings.search_radius if radius is None else radius
    document = normalized_document
    length = len(document)

    lo_units, hi_units = sorted((span.start, span.end))
    start = utf16_to_index(document, lo_units)
    end = _clamp(utf16_to_index(document, hi_units), start, length)

    # The raw selection may be composed differently from the document
    needle = normalize(span.text)

    if document[start:end] == needle:
        return ResolvedSpan(start=start, end=end, text=needle, method="exact")

    found = _search_local(document, needle, start, end, radius)
    if found != -1:
        _log.debug("Span realigned locally: %d -> %d", start, found)
        return ResolvedSpan(
            start=found, end=found + len(needle), text=needle, method="local"
        )

    found = _search_global(document, needle)
    if found != -1:
        _log.debug("Span realigned globally: %d -> %d", start, found)
        return ResolvedSpan(
            start=found, end=found + len(needle), text=needle, method="global"
        )

    _log.warning(
        "Selection of %d chars not found in document of %d chars; "
        "keeping clamped offsets [%d, %d)",
        len(needle), length, start, end,
    )
    return ResolvedSpan(start=start, end=end, text=needle, method="unverified")


# ── Marking & windowing ────────────────────────────────────────────────────

def mark(normalized_document: str, start: int, end: int) -> str:
    """Insert « before *start* and » after *end*; nothing else changes."""
    document = normalized_document
    start = _clamp(start, 0, len(document))
    end = _clamp(end, start, len(document))
    return document[:start] + OPEN + document[start:end] + CLOSE + document[end:]


def window(text: str, a: int, b: int, pad: int | None = None) -> str:
    """Return ``text[a - pad : b + pad]`` with … on each truncated side."""
    pad = settings.context_pad if pad is None else pad
    lo = max(0, a - pad)
    hi = min(len(text), b + pad)
    prefix = ELLIPSIS if lo > 0 else ""
    suffix = ELLIPSIS if hi < len(text) else ""
    return prefix + text[lo:hi] + suffix


# ── Full pipeline ──────────────────────────────────────────────────────────

def _coerce_span(span: Span | Mapping[str, Any]) -> Span:
    if isinstance(span, Span):
        return span
    if not isinstance(span, Mapping):
        raise InvalidArgumentError(
            f"span must be a Span or mapping, got {type(span).__name__}"
        )
    try:
        return Span.model_validate(span)
    except ValidationError as exc:
        raise InvalidArgumentError(f"invalid span: {exc}") from exc


def build_excerpt(
    full_text: str,
    span: Span | Mapping[str, Any],
    pad: int | None = None,
) -> Excerpt:
    """Resolve *span* in *full_text* and return a marked, bounded excerpt.

    Steps
    -----
    1. NFC-normalise the document.
    2. Resolve the span (exact → local → global → unverified).
    3. Mark the resolved range in the full document.
    4. Window around the markers; ``snippet`` is the same window unmarked.

    If the markers cannot be located after marking, the unmarked resolved
    range is windowed instead and ``snippet == marked_snippet`` with
    ``marked=False``.
    """
    require_text(full_text, "full_text")
    span = _coerce_span(span)

    document = normalize(full_text)
    resolved = resolve(document, span)

    marked_full = mark(document, resolved.start, resolved.end)
    a = marked_full.find(OPEN, resolved.start)
    b = marked_full.find(CLOSE, resolved.end + 1) if a != -1 else -1

    if a == -1 or b == -1:
        _log.warning("Markers not found after marking; returning unmarked excerpt")
        raw = window(document, resolved.start, resolved.end, pad)
        excerpt = Excerpt(snippet=raw, marked_snippet=raw, span=resolved, marked=False)
    else:
        marked_snippet = window(marked_full, a, b + 1, pad)
        excerpt = Excerpt(
            snippet=strip_markers(marked_snippet),
            marked_snippet=marked_snippet,
            span=resolved,
        )

    log_excerpt(len(document), span.start, span.end, excerpt)
    return excerpt
