"""Script detection – count code points per Unicode block and apply rules.

Thresholds are absolute counts, not ratios: a short sample containing only
a handful of Hangul or Hebrew letters is already a strong signal.  Rules are
evaluated in order and the first match wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Mapping

# Unicode blocks represented as script -> ((start, end), ...), inclusive
SCRIPT_RANGES: Mapping[str, tuple[tuple[int, int], ...]] = {
    "han": ((0x4E00, 0x9FFF), (0x3400, 0x4DBF)),
    "hiragana": ((0x3040, 0x309F),),
    "katakana": ((0x30A0, 0x30FF),),
    "hangul": ((0xAC00, 0xD7AF),),
    "arabic": ((0x0600, 0x06FF),),
    "cyrillic": ((0x0400, 0x04FF),),
    "hebrew": ((0x0590, 0x05FF),),
    "devanagari": ((0x0900, 0x097F),),
    "thai": ((0x0E00, 0x0E7F),),
    "greek": ((0x0370, 0x03FF),),
}

ScriptCounts = Mapping[str, int]


@dataclass(frozen=True)
class ScriptRule:
    lang: str
    confidence: float
    predicate: Callable[[ScriptCounts], bool]


# Korean text may contain occasional Han characters, hence the tie-break.
SCRIPT_RULES: tuple[ScriptRule, ...] = (
    ScriptRule("ko", 0.98, lambda c: c["hangul"] > 5 and c["hangul"] > c["han"]),
    ScriptRule("ja", 0.98, lambda c: c["hiragana"] + c["katakana"] > 5),
    ScriptRule("zh", 0.95, lambda c: c["han"] > 10),
    ScriptRule("ar", 0.98, lambda c: c["arabic"] > 10),
    ScriptRule("ru", 0.90, lambda c: c["cyrillic"] > 10),
    ScriptRule("he", 0.98, lambda c: c["hebrew"] > 6),
    ScriptRule("hi", 0.90, lambda c: c["devanagari"] > 6),
    ScriptRule("th", 0.98, lambda c: c["thai"] > 6),
    ScriptRule("el", 0.98, lambda c: c["greek"] > 6),
)


def _script_of(code: int) -> str | None:
    for script, ranges in SCRIPT_RANGES.items():
        for start, end in ranges:
            if start <= code <= end:
                return script
    return None


def count_scripts(text: str) -> dict[str, int]:
    """Return the number of code points of *text* in each known script."""
    counts = dict.fromkeys(SCRIPT_RANGES, 0)
    for ch in text:
        script = _script_of(ord(ch))
        if script is not None:
            counts[script] += 1
    return counts


def match_script(counts: ScriptCounts) -> ScriptRule | None:
    """Return the first rule whose predicate holds for *counts*."""
    for rule in SCRIPT_RULES:
        if rule.predicate(counts):
            return rule
    return None
