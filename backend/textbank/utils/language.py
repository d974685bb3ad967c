"""
Language utilities for textbank
"""

from __future__ import annotations

from typing import List, Optional, Tuple

DEFAULT_LANGUAGE = "en"

# English display names, used for the `name` attribute of new language files.
LANGUAGE_NAMES = {
    "ar": "Arabic",
    "cs": "Czech",
    "da": "Danish",
    "de": "German",
    "el": "Greek",
    "en": "English",
    "es": "Spanish",
    "et": "Estonian",
    "fi": "Finnish",
    "fr": "French",
    "he": "Hebrew",
    "hu": "Hungarian",
    "is": "Icelandic",
    "it": "Italian",
    "ja": "Japanese",
    "ko": "Korean",
    "lt": "Lithuanian",
    "lv": "Latvian",
    "nb": "Norwegian Bokmål",
    "nl": "Dutch",
    "nn": "Norwegian Nynorsk",
    "no": "Norwegian",
    "pl": "Polish",
    "pt": "Portuguese",
    "ro": "Romanian",
    "ru": "Russian",
    "sk": "Slovak",
    "sv": "Swedish",
    "tr": "Turkish",
    "uk": "Ukrainian",
    "zh": "Chinese",
}

REGION_NAMES = {
    "AT": "Austria",
    "AU": "Australia",
    "BE": "Belgium",
    "BR": "Brazil",
    "CA": "Canada",
    "CH": "Switzerland",
    "CN": "China",
    "DE": "Germany",
    "DK": "Denmark",
    "EE": "Estonia",
    "ES": "Spain",
    "FI": "Finland",
    "FR": "France",
    "GB": "United Kingdom",
    "IE": "Ireland",
    "IN": "India",
    "IT": "Italy",
    "JP": "Japan",
    "KR": "Korea",
    "LT": "Lithuania",
    "LV": "Latvia",
    "MX": "Mexico",
    "NL": "Netherlands",
    "NO": "Norway",
    "NZ": "New Zealand",
    "PL": "Poland",
    "PT": "Portugal",
    "RU": "Russia",
    "SE": "Sweden",
    "TW": "Taiwan",
    "UA": "Ukraine",
    "US": "United States",
}


def split_language_id(lang: str) -> Tuple[str, Optional[str]]:
    """
    Split a language id into (primary subtag, region).

    "sv-SE" -> ("sv", "SE"), "en_us" -> ("en", "US"), "fr" -> ("fr", None)
    """
    raw = str(lang).strip().replace("_", "-")
    if "-" not in raw:
        return raw.lower(), None
    primary, rest = raw.split("-", 1)
    region = rest.split("-")[-1].upper() if rest else None
    return primary.lower(), region or None


def get_language_name(lang: str) -> str:
    """
    Get the English display name for a language id.

    Args:
        lang: Language id, optionally with a region ("sv-SE")

    Returns:
        Human-readable name, e.g. "Swedish (Sweden)". Unknown ids are returned as given.
    """
    primary, region = split_language_id(lang)
    name = LANGUAGE_NAMES.get(primary)
    if name is None:
        return str(lang).strip()
    if region:
        return f"{name} ({REGION_NAMES.get(region, region)})"
    return name


def normalize_language(lang: Optional[str], default: str = DEFAULT_LANGUAGE) -> str:
    """
    Normalize a language id for use as a document identifier.

    Whitespace and quality values ("sv-SE;q=0.8") are stripped; the id itself is kept
    as given, since every language id names its own document.
    """
    if not lang:
        return default

    raw = str(lang).strip()
    if ";" in raw:
        raw = raw.split(";", 1)[0].strip()
    if not raw or raw == "*":
        return default
    return raw


def parse_accept_language(value: Optional[str]) -> List[str]:
    """
    Parse Accept-Language into a list of language ids ordered by preference.

    Very small parser; we don't implement full RFC behavior, but we respect q=.
    """
    if not value:
        return []

    weighted: List[Tuple[float, str]] = []
    for part in (p.strip() for p in value.split(",")):
        if not part:
            continue
        lang = part
        q = 1.0
        if ";" in part:
            lang, params = part.split(";", 1)
            params = params.strip()
            if params.startswith("q="):
                try:
                    q = float(params[2:])
                except ValueError:
                    q = 1.0
        lang = lang.strip()
        if lang and lang != "*" and q > 0:
            weighted.append((q, lang))

    # Sort by q desc, stable otherwise
    weighted.sort(key=lambda item: item[0], reverse=True)
    return [lang for _, lang in weighted]
