"""Static ISO 639 tables: three-letter → two-letter codes and autonyms.

Loaded once at import; nothing here is computed per call.
"""

from __future__ import annotations

from typing import Mapping

from grounding.errors import require_text
from grounding.models import UNDETERMINED

# ISO 639-2/T and 639-3 codes, plus 639-2/B where it differs
ISO639_3_TO_1: Mapping[str, str] = {
    "afr": "af", "amh": "am", "ara": "ar", "arb": "ar", "asm": "as",
    "aze": "az", "azj": "az", "bel": "be", "bul": "bg", "ben": "bn",
    "bod": "bo", "tib": "bo", "bos": "bs", "cat": "ca", "ces": "cs",
    "cze": "cs", "cym": "cy", "wel": "cy", "dan": "da", "deu": "de",
    "ger": "de", "ell": "el", "gre": "el", "eng": "en", "epo": "eo",
    "spa": "es", "est": "et", "ekk": "et", "eus": "eu", "baq": "eu",
    "fas": "fa", "per": "fa", "pes": "fa", "fin": "fi", "fra": "fr",
    "fre": "fr", "gle": "ga", "glg": "gl", "guj": "gu", "hau": "ha",
    "heb": "he", "hin": "hi", "hrv": "hr", "hat": "ht", "hun": "hu",
    "hye": "hy", "arm": "hy", "ind": "id", "ibo": "ig", "isl": "is",
    "ice": "is", "ita": "it", "jpn": "ja", "jav": "jv", "kat": "ka",
    "geo": "ka", "kaz": "kk", "khm": "km", "kan": "kn", "kor": "ko",
    "kur": "ku", "kir": "ky", "lat": "la", "ltz": "lb", "lao": "lo",
    "lit": "lt", "lav": "lv", "lvs": "lv", "mlg": "mg", "plt": "mg",
    "mkd": "mk", "mac": "mk", "mal": "ml", "mon": "mn", "khk": "mn",
    "mar": "mr", "msa": "ms", "may": "ms", "zsm": "ms", "mlt": "mt",
    "mya": "my", "bur": "my", "nep": "ne", "npi": "ne", "nld": "nl",
    "dut": "nl", "nor": "no", "nob": "nb", "nno": "nn", "ori": "or",
    "ory": "or", "pan": "pa", "pol": "pl", "pus": "ps", "pbu": "ps",
    "por": "pt", "ron": "ro", "rum": "ro", "rus": "ru", "kin": "rw",
    "sin": "si", "slk": "sk", "slo": "sk", "slv": "sl", "som": "so",
    "sqi": "sq", "alb": "sq", "als": "sq", "srp": "sr", "sun": "su",
    "swe": "sv", "swa": "sw", "swh": "sw", "tam": "ta", "tel": "te",
    "tgk": "tg", "tha": "th", "tuk": "tk", "tgl": "tl", "fil": "tl",
    "tur": "tr", "tat": "tt", "uig": "ug", "ukr": "uk", "urd": "ur",
    "uzb": "uz", "uzn": "uz", "vie": "vi", "xho": "xh", "yid": "yi",
    "ydd": "yi", "yor": "yo", "zho": "zh", "chi": "zh", "cmn": "zh",
    "zul": "zu",
}

AUTONYMS: Mapping[str, str] = {
    "af": "Afrikaans", "am": "አማርኛ", "ar": "العربية", "as": "অসমীয়া",
    "az": "Azərbaycanca", "be": "Беларуская", "bg": "Български",
    "bn": "বাংলা", "bo": "བོད་ཡིག", "bs": "Bosanski", "ca": "Català",
    "cs": "Čeština", "cy": "Cymraeg", "da": "Dansk", "de": "Deutsch",
    "el": "Ελληνικά", "en": "English", "eo": "Esperanto", "es": "Español",
    "et": "Eesti", "eu": "Euskara", "fa": "فارسی", "fi": "Suomi",
    "fr": "Français", "ga": "Gaeilge", "gl": "Galego", "gu": "ગુજરાતી",
    "ha": "Hausa", "he": "עברית", "hi": "हिन्दी", "hr": "Hrvatski",
    "ht": "Kreyòl ayisyen", "hu": "Magyar", "hy": "Հայերեն",
    "id": "Bahasa Indonesia", "ig": "Igbo", "is": "Íslenska",
    "it": "Italiano", "ja": "日本語", "jv": "Basa Jawa", "ka": "ქართული",
    "kk": "Қазақша", "km": "ខ្មែរ", "kn": "ಕನ್ನಡ", "ko": "한국어",
    "ku": "Kurdî", "ky": "Кыргызча", "la": "Latina",
    "lb": "Lëtzebuergesch", "lo": "ລາວ", "lt": "Lietuvių",
    "lv": "Latviešu", "mg": "Malagasy", "mk": "Македонски",
    "ml": "മലയാളം", "mn": "Монгол", "mr": "मराठी",
    "ms": "Bahasa Melayu", "mt": "Malti", "my": "မြန်မာဘာသာ",
    "nb": "Norsk bokmål", "ne": "नेपाली", "nl": "Nederlands",
    "nn": "Norsk nynorsk", "no": "Norsk", "or": "ଓଡ଼ିଆ", "pa": "ਪੰਜਾਬੀ",
    "pl": "Polski", "ps": "پښتو", "pt": "Português", "ro": "Română",
    "ru": "Русский", "rw": "Kinyarwanda", "si": "සිංහල",
    "sk": "Slovenčina", "sl": "Slovenščina", "so": "Soomaali",
    "sq": "Shqip", "sr": "Српски", "su": "Basa Sunda", "sv": "Svenska",
    "sw": "Kiswahili", "ta": "தமிழ்", "te": "తెలుగు", "tg": "Тоҷикӣ",
    "th": "ไทย", "tk": "Türkmençe", "tl": "Tagalog", "tr": "Türkçe",
    "tt": "Татарча", "ug": "ئۇيغۇرچە", "uk": "Українська", "ur": "اردو",
    "uz": "Oʻzbekcha", "vi": "Tiếng Việt", "xh": "isiXhosa",
    "yi": "ייִדיש", "yo": "Yorùbá", "zh": "中文", "zu": "isiZulu",
}

ISO639_1: frozenset[str] = frozenset(AUTONYMS)


def _primary_subtag(tag: str) -> str:
    return tag.strip().replace("_", "-").split("-", 1)[0].lower()


def normalize_lang2(tag: str | None, default: str = "en") -> str:
    """Reduce "en", "en-US", "EN_us" … to its two-letter primary subtag."""
    if tag is None or not require_text(tag, "tag").strip():
        return default
    return tag.strip()[:2].lower()


def to_iso1(code: str | None) -> str:
    """Map a detector code to ISO 639-1, or ``"und"`` if there is no mapping.

    Accepts two-letter codes, region-suffixed codes such as ``"zh-cn"`` and
    ISO 639-3 three-letter codes such as ``"deu"``.
    """
    if not code:
        return UNDETERMINED
    base = _primary_subtag(code)
    if len(base) == 2:
        return base if base in ISO639_1 else UNDETERMINED
    if len(base) == 3:
        return ISO639_3_TO_1.get(base, UNDETERMINED)
    return UNDETERMINED


def autonym(code: str | None) -> str | None:
    """Return the language's name for itself (``"de"`` → ``"Deutsch"``)."""
    if code is None or not require_text(code, "code"):
        return None
    return AUTONYMS.get(_primary_subtag(code))
