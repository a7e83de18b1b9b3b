"""Language identification – script rules, stopwords, then langdetect.

The heuristic detector is fast and reliable for short or script-distinctive
samples; the statistical detector is better on ambiguous Latin-script prose.
Callers pick a primary detector and the other one is used whenever the
primary comes back undetermined.

Identification is advisory: any ``str`` input yields a guess, falling back
to ``"und"`` with confidence 0 rather than raising.
"""

from __future__ import annotations

import logging
from typing import get_args

from grounding.config import settings
from grounding.errors import require_text
from grounding.logger import log_language
from grounding.models import UNDETERMINED, Arbitration, DetectorMethod, LanguageGuess
from grounding.pipeline import stopwords
from grounding.pipeline.iso639 import normalize_lang2
from grounding.pipeline.scripts import count_scripts, match_script
from grounding.pipeline.span import normalize, strip_markers
from grounding.pipeline.statistical import detect_statistical

_log = logging.getLogger("grounding.language")

_PREFERENCES: tuple[str, ...] = get_args(DetectorMethod)


def _undetermined(method: DetectorMethod) -> LanguageGuess:
    return LanguageGuess(lang=UNDETERMINED, confidence=0.0, method=method)


def detect_heuristic(text: str) -> LanguageGuess:
    """Classify *text* by script counts, falling back to stopword ratios."""
    sample = strip_markers(normalize(text))[: settings.language_sample_limit].strip()
    if len(sample) < 2:
        return _undetermined("heuristic")

    rule = match_script(count_scripts(sample))
    if rule is not None:
        return LanguageGuess(lang=rule.lang, confidence=rule.confidence, method="heuristic")

    lang, ratio = stopwords.best_match(sample)
    if lang is not None and ratio >= stopwords.MIN_RATIO:
        return LanguageGuess(
            lang=lang,
            confidence=stopwords.confidence_for(ratio),
            method="heuristic",
        )
    return _undetermined("heuristic")


def arbitrate(
    heuristic: LanguageGuess,
    statistical: LanguageGuess,
    prefer: DetectorMethod = "heuristic",
) -> Arbitration:
    """Pick the preferred guess unless it is undetermined, then the other one."""
    if prefer == "statistical":
        primary, fallback = statistical, heuristic
    else:
        primary, fallback = heuristic, statistical
    guess = fallback if primary.undetermined else primary
    return Arbitration(
        guess=guess,
        heuristic=heuristic,
        statistical=statistical,
        prefer=prefer,
    )


def classify_language_detailed(
    text: str,
    prefer: DetectorMethod | None = None,
    min_length: int | None = None,
) -> Arbitration:
    """Run both detectors on *text* and arbitrate between them."""
    require_text(text)
    prefer = prefer or settings.language_preference
    if prefer not in _PREFERENCES:
        raise ValueError(f"prefer must be one of {_PREFERENCES}, got {prefer!r}")

    arbitration = arbitrate(
        detect_heuristic(text),
        detect_statistical(text, min_length=min_length),
        prefer,
    )
    _log.debug(
        "Language %s (%.2f, %s); heuristic=%s statistical=%s",
        arbitration.guess.lang,
        arbitration.guess.confidence,
        arbitration.guess.method,
        arbitration.heuristic.lang,
        arbitration.statistical.lang,
    )
    log_language(len(text), arbitration)
    return arbitration


def classify_language(
    text: str,
    prefer: DetectorMethod | None = None,
    min_length: int | None = None,
) -> LanguageGuess:
    """Return the single best language guess for *text*."""
    return classify_language_detailed(text, prefer=prefer, min_length=min_length).guess


def infer_source_language(
    text: str,
    supplied: str | None = None,
    prefer: DetectorMethod | None = None,
) -> str | None:
    """Return the source language for translation or speech.

    A caller-supplied tag wins (reduced to two letters); otherwise the text
    is classified and ``None`` is returned when the result is undetermined.
    """
    if supplied is not None and require_text(supplied, "supplied").strip():
        return normalize_lang2(supplied)
    guess = classify_language(text, prefer=prefer)
    return None if guess.undetermined else guess.lang
