"""Statistical language detection via ``langdetect`` (character n-grams).

Strong on longer Latin-script prose, unreliable on very short samples, so
anything under ``min_length`` characters is reported as ``"und"`` without
consulting the model.  Detector codes are mapped to ISO 639-1; codes with
no two-letter equivalent are also reported as ``"und"``.
"""

from __future__ import annotations

from langdetect import DetectorFactory, LangDetectException, detect_langs

from grounding.config import settings
from grounding.models import UNDETERMINED, LanguageGuess
from grounding.pipeline.iso639 import to_iso1
from grounding.pipeline.span import normalize, strip_markers

# langdetect is non-deterministic unless seeded
DetectorFactory.seed = settings.langdetect_seed

_UNDETERMINED = LanguageGuess(lang=UNDETERMINED, confidence=0.0, method="statistical")


def detect_statistical(text: str, min_length: int | None = None) -> LanguageGuess:
    """Return the most probable language of *text* according to langdetect."""
    min_length = settings.statistical_min_length if min_length is None else min_length
    sample = strip_markers(normalize(text))[: settings.language_sample_limit].strip()
    if len(sample) < max(min_length, 1):
        return _UNDETERMINED

    try:
        candidates = detect_langs(sample)
    except LangDetectException:
        return _UNDETERMINED
    if not candidates:
        return _UNDETERMINED

    top = candidates[0]
    lang = to_iso1(top.lang)
    if lang == UNDETERMINED:
        return _UNDETERMINED
    return LanguageGuess(
        lang=lang,
        confidence=round(min(1.0, float(top.prob)), 4),
        method="statistical",
    )
