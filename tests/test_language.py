"""Tests for language identification.

The statistical detector is mocked where a specific langdetect answer is
needed, so the assertions do not depend on model probabilities.
"""

from __future__ import annotations

import os
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

os.environ["LOG_PATH"] = "/tmp/test_grounding.log"

from langdetect.lang_detect_exception import ErrorCode, LangDetectException

from grounding.errors import InvalidArgumentError
from grounding.models import LanguageGuess
from grounding.pipeline.iso639 import autonym, normalize_lang2, to_iso1
from grounding.pipeline.language import (
    arbitrate,
    classify_language,
    classify_language_detailed,
    detect_heuristic,
    infer_source_language,
)
from grounding.pipeline.scripts import count_scripts, match_script
from grounding.pipeline.statistical import detect_statistical

GERMAN = "Der Hund und die Katze sind im Garten"
ENGLISH_LONG = (
    "This is a fairly long English sentence that should be detected "
    "without any trouble at all by the statistical detector."
)


def _langs(*pairs: tuple[str, float]) -> list[SimpleNamespace]:
    """Fake ``detect_langs`` output."""
    return [SimpleNamespace(lang=lang, prob=prob) for lang, prob in pairs]


# ── Script detection ────────────────────────────────────────────────────────

def test_han_example():
    guess = classify_language("这是一个测试句子用于检测")
    assert guess == LanguageGuess(lang="zh", confidence=0.95, method="heuristic")


@pytest.mark.parametrize(
    "text,lang,confidence",
    [
        ("안녕하세요 반갑습니다", "ko", 0.98),
        ("ひらがなとカタカナ", "ja", 0.98),
        ("مرحبا بكم في هذا الاختبار", "ar", 0.98),
        ("Привет, как у тебя дела сегодня", "ru", 0.90),
        ("שלום עולם", "he", 0.98),
        ("नमस्ते दुनिया", "hi", 0.90),
        ("สวัสดีครับ", "th", 0.98),
        ("Καλημέρα κόσμε", "el", 0.98),
    ],
)
def test_script_rules(text, lang, confidence):
    guess = detect_heuristic(text)
    assert guess.lang == lang
    assert guess.confidence == pytest.approx(confidence)
    assert guess.method == "heuristic"


def test_hangul_needs_to_outnumber_han():
    assert detect_heuristic("漢" * 3 + "한" * 6).lang == "ko"
    assert detect_heuristic("漢" * 12 + "한" * 6).lang == "zh"


def test_thresholds_are_strict():
    assert detect_heuristic("ア" * 5).lang == "und"
    assert detect_heuristic("ア" * 6).lang == "ja"
    assert detect_heuristic("漢" * 10).lang == "und"
    assert detect_heuristic("漢" * 11).lang == "zh"


def test_rule_order_is_first_match():
    counts = count_scripts("漢" * 20 + "한" * 6)
    assert counts["han"] == 20
    assert counts["hangul"] == 6
    assert match_script(counts).lang == "zh"
    assert match_script(count_scripts("plain latin text")) is None


# ── Stopwords ───────────────────────────────────────────────────────────────

def test_german_stopwords():
    guess = detect_heuristic(GERMAN)
    assert guess.lang == "de"
    assert guess.confidence > 0.5


def test_english_stopwords():
    guess = detect_heuristic("The cat is on the table with the dog")
    assert guess.lang == "en"
    assert 0.5 < guess.confidence <= 0.99


def test_markers_do_not_count():
    assert detect_heuristic("«a»").lang == "und"
    assert detect_heuristic("«" * 40 + "»" * 40).confidence == 0


# ── Undetermined ────────────────────────────────────────────────────────────

def test_undetermined_from_both_detectors():
    assert detect_heuristic("xyzxyz123") == LanguageGuess(lang="und", confidence=0, method="heuristic")
    assert detect_statistical("xyzxyz123") == LanguageGuess(lang="und", confidence=0, method="statistical")
    for prefer in ("heuristic", "statistical"):
        guess = classify_language("xyzxyz123", prefer=prefer)
        assert guess.lang == "und"
        assert guess.confidence == 0


@pytest.mark.parametrize("text", ["", " ", " a ", "12345", "!!!"])
def test_never_raises_on_strings(text):
    assert classify_language(text).lang == "und"


def test_non_string_fails_fast():
    with pytest.raises(InvalidArgumentError):
        classify_language(None)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        classify_language(123)  # type: ignore[arg-type]


def test_unknown_preference_is_rejected():
    with pytest.raises(ValueError):
        classify_language(GERMAN, prefer="coinflip")  # type: ignore[arg-type]


# ── Statistical detector ───────────────────────────────────────────────────

@patch("grounding.pipeline.statistical.detect_langs")
def test_statistical_respects_min_length(mock_detect: MagicMock):
    mock_detect.return_value = _langs(("de", 0.99))

    assert detect_statistical("kurz").lang == "und"
    mock_detect.assert_not_called()

    assert detect_statistical("kurz", min_length=3).lang == "de"
    mock_detect.assert_called_once()


@pytest.mark.parametrize(
    "code,expected",
    [("deu", "de"), ("fra", "fr"), ("zh-cn", "zh"), ("en", "en"), ("tlh", "und"), ("xx", "und")],
)
def test_statistical_code_mapping(code, expected):
    with patch("grounding.pipeline.statistical.detect_langs", return_value=_langs((code, 0.97))):
        guess = detect_statistical(ENGLISH_LONG)
    assert guess.lang == expected
    assert guess.method == "statistical"
    assert guess.confidence == (0.97 if expected != "und" else 0.0)


@patch("grounding.pipeline.statistical.detect_langs")
def test_statistical_swallows_langdetect_errors(mock_detect: MagicMock):
    mock_detect.side_effect = LangDetectException(ErrorCode.CantDetectError, "No features in text.")
    assert detect_statistical("1234567890 1234567890 1234567890").lang == "und"


def test_statistical_real_model_on_english():
    guess = detect_statistical(ENGLISH_LONG)
    assert guess.lang == "en"
    assert 0 < guess.confidence <= 1


# ── Arbitration ─────────────────────────────────────────────────────────────

H_DE = LanguageGuess(lang="de", confidence=0.9, method="heuristic")
H_UND = LanguageGuess(lang="und", confidence=0.0, method="heuristic")
S_NL = LanguageGuess(lang="nl", confidence=0.8, method="statistical")
S_UND = LanguageGuess(lang="und", confidence=0.0, method="statistical")


@pytest.mark.parametrize(
    "heuristic,statistical,prefer,expected",
    [
        (H_DE, S_NL, "heuristic", H_DE),
        (H_DE, S_NL, "statistical", S_NL),
        (H_UND, S_NL, "heuristic", S_NL),
        (H_DE, S_UND, "statistical", H_DE),
        (H_UND, S_UND, "heuristic", S_UND),
        (H_UND, S_UND, "statistical", H_UND),
        (H_DE, S_UND, "heuristic", H_DE),
        (H_UND, S_NL, "statistical", S_NL),
    ],
)
def test_arbitrate(heuristic, statistical, prefer, expected):
    result = arbitrate(heuristic, statistical, prefer)
    assert result.guess == expected
    assert result.heuristic == heuristic
    assert result.statistical == statistical
    assert result.prefer == prefer


@patch("grounding.pipeline.statistical.detect_langs")
def test_classify_prefers_statistical_when_asked(mock_detect: MagicMock):
    mock_detect.return_value = _langs(("nl", 0.8))

    detailed = classify_language_detailed(GERMAN, prefer="statistical")
    assert detailed.guess.lang == "nl"
    assert detailed.heuristic.lang == "de"

    assert classify_language(GERMAN, prefer="heuristic").lang == "de"


def test_classify_falls_back_to_heuristic_on_short_text():
    guess = classify_language("Der Hund und", prefer="statistical")
    assert guess.lang == "de"
    assert guess.method == "heuristic"


# ── Source language & ISO helpers ───────────────────────────────────────────

def test_infer_source_language():
    assert infer_source_language(GERMAN, supplied="de-DE") == "de"
    assert infer_source_language(GERMAN) == "de"
    assert infer_source_language("xyzxyz123") is None


def test_autonym():
    assert autonym("de") == "Deutsch"
    assert autonym("DE") == "Deutsch"
    assert autonym("zh-TW") == "中文"
    assert autonym("zz") is None
    assert autonym("") is None


def test_iso_helpers():
    assert to_iso1("eng") == "en"
    assert to_iso1("ger") == "de"
    assert to_iso1("und") == "und"
    assert to_iso1(None) == "und"
    assert normalize_lang2("EN_us") == "en"
    assert normalize_lang2(None) == "en"
    assert normalize_lang2("", default="de") == "de"


def test_non_string_codes_fail_fast():
    with pytest.raises(InvalidArgumentError):
        autonym(123)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        normalize_lang2(42)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        infer_source_language(GERMAN, supplied=42)  # type: ignore[arg-type]


def test_language_log_can_be_disabled():
    from pathlib import Path

    from grounding.config import settings

    path = Path(settings.log_path)
    before = len(path.read_text(encoding="utf-8").splitlines()) if path.exists() else 0
    with patch.object(settings, "log_results", False):
        classify_language(GERMAN)
    after = len(path.read_text(encoding="utf-8").splitlines()) if path.exists() else 0
    assert after == before
