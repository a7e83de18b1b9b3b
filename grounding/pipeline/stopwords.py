"""Stopword scoring for Latin-script samples.

Each candidate language gets ``hits / total_words`` against a short list of
its most common function words; the best ratio wins.
"""

from __future__ import annotations

from typing import Mapping

# Evaluation order matters: on equal ratios the earlier language wins.
CANDIDATES: tuple[str, ...] = (
    "de", "en", "fr", "es", "nl", "it", "pt", "sv", "da", "no", "pl", "tr",
)

STOPWORDS: Mapping[str, frozenset[str]] = {
    "en": frozenset({
        "the", "and", "to", "of", "in", "is", "for", "on", "with", "that",
        "it", "as", "are", "was", "be",
    }),
    "de": frozenset({
        "der", "die", "das", "und", "ist", "nicht", "ein", "eine", "zu", "wir",
        "sie", "ich", "mit", "für", "auf",
    }),
    "fr": frozenset({
        "le", "la", "les", "et", "de", "des", "en", "pour", "que", "est",
        "une", "un", "dans", "avec",
    }),
    "es": frozenset({
        "el", "la", "los", "las", "y", "de", "que", "en", "por", "para",
        "con", "no", "una", "es", "un",
    }),
    "nl": frozenset({"de", "het", "en", "van", "een", "is", "niet", "met"}),
    "it": frozenset({
        "il", "la", "le", "e", "di", "che", "in", "per", "è", "una", "un",
        "con", "non",
    }),
    "pt": frozenset({
        "o", "a", "os", "as", "e", "de", "que", "em", "para", "com", "não",
        "uma", "um",
    }),
    "sv": frozenset({"och", "att", "det", "som", "en", "är", "inte", "med"}),
    "da": frozenset({"og", "at", "det", "som", "en", "er", "ikke", "med"}),
    "no": frozenset({"og", "det", "som", "en", "er", "ikke", "med"}),
    "pl": frozenset({"i", "w", "nie", "jest", "z", "że", "na", "się"}),
    "tr": frozenset({"ve", "bir", "bu", "için", "ile", "değil", "olan"}),
}

MIN_RATIO = 0.01


def tokenize(text: str) -> list[str]:
    """Lower-case *text*, blank out everything but letters and whitespace, split."""
    lowered = text.lower()
    cleaned = "".join(ch if ch.isalpha() or ch.isspace() else " " for ch in lowered)
    return cleaned.split()


def score(words: list[str], lang: str) -> float:
    """Fraction of *words* that are stopwords of *lang*."""
    if not words:
        return 0.0
    stop = STOPWORDS.get(lang, frozenset())
    hits = sum(1 for w in words if w in stop)
    return hits / len(words)


def best_match(text: str) -> tuple[str | None, float]:
    """Return ``(lang, ratio)`` of the best-scoring candidate.

    ``lang`` is ``None`` when no candidate scores above zero.
    """
    words = tokenize(text)
    best_lang: str | None = None
    best_ratio = 0.0
    for lang in CANDIDATES:
        ratio = score(words, lang)
        if ratio > best_ratio:
            best_lang, best_ratio = lang, ratio
    return best_lang, best_ratio


def confidence_for(ratio: float) -> float:
    """Map a stopword ratio onto a confidence in ``[0.5, 0.99]``."""
    return min(0.99, 0.5 + ratio * 10)
