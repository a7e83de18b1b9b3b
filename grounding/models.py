"""Pydantic v2 models shared by the span resolver and language classifier."""

from __future__ import annotations

from typing import Literal

from pydantic import AliasChoices, BaseModel, Field

ResolutionMethod = Literal["exact", "local", "global", "unverified"]
DetectorMethod = Literal["heuristic", "statistical"]

UNDETERMINED = "und"


# ── Span resolution ─────────────────────────────────────────────────────────

class Span(BaseModel):
    """A caller-held selection, offsets in UTF-16 code units."""

    model_config = {"frozen": True, "populate_by_name": True}

    start: int = Field(..., validation_alias=AliasChoices("start", "start_utf16"))
    end: int = Field(..., validation_alias=AliasChoices("end", "end_utf16"))
    text: str = Field(..., description="Substring the caller believed it selected")


class ResolvedSpan(BaseModel):
    """Offsets valid against the normalised document.

    ``method == "unverified"`` means no occurrence of ``text`` was found and
    the offsets are only clamped; treat it as low confidence.
    """

    model_config = {"frozen": True}

    start: int = Field(..., ge=0)
    end: int = Field(..., ge=0)
    text: str
    method: ResolutionMethod


class Excerpt(BaseModel):
    """Bounded context around a resolved span."""

    model_config = {"frozen": True}

    snippet: str
    marked_snippet: str = Field(..., serialization_alias="markedSnippet")
    span: ResolvedSpan
    marked: bool = True  # False only on the degraded fallback path


# ── Language identification ─────────────────────────────────────────────────

class LanguageGuess(BaseModel):
    model_config = {"frozen": True}

    lang: str = Field(..., description="ISO 639-1 code or 'und'")
    confidence: float = Field(..., ge=0.0, le=1.0)
    method: DetectorMethod

    @property
    def undetermined(self) -> bool:
        return self.lang == UNDETERMINED


class Arbitration(BaseModel):
    """Outcome of combining both detectors, with the inputs kept for debugging."""

    model_config = {"frozen": True}

    guess: LanguageGuess
    heuristic: LanguageGuess
    statistical: LanguageGuess
    prefer: DetectorMethod
