"""Locale helpers: flatten nested {en, de, ru} payloads into suffixed columns."""

import re

LOCALES = ("en", "de", "ru")
DEFAULT_LOCALE = "en"

LANGUAGE_NAMES = {
    "en": "English",
    "de": "German",
    "ru": "Russian",
}


def localized_columns(
    field: str,
    nested: dict | None = None,
    flat: dict | None = None,
    default: str | list = "",
) -> dict:
    """Build {field_en, field_de, field_ru} from a nested object or field_<lang> keys.

    The nested value wins, then the flat key, then `default`.
    """
    if not isinstance(nested, dict):
        nested = {}
    flat = flat or {}
    columns = {}
    for lang in LOCALES:
        value = nested.get(lang) or flat.get(f"{field}_{lang}")
        if not value:
            value = list(default) if isinstance(default, list) else default
        columns[f"{field}_{lang}"] = value
    return columns


def slugify(text: str) -> str:
    """'Classic Uzbekistan Tour' -> 'classic-uzbekistan-tour'."""
    return re.sub(r"\s+", "-", text.strip().lower())


def pick_locale(values: dict | None, locale: str, fallback: str = "") -> str:
    """Value for `locale`, falling back to English, then `fallback`."""
    if not values:
        return fallback
    return values.get(locale) or values.get(DEFAULT_LOCALE) or fallback
