"""Locale utilities for BCP-47 and POSIX conversion.

Centralizes locale format normalization used throughout the codebase.
Language tags are kept in BCP-47 form (``en-US``) for display, directory
names and cache keys; Babel expects POSIX form (``en_US``).

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, NamedTuple

from babel.core import parse_locale

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "TagParts",
    "clear_locale_cache",
    "format_language_tag",
    "get_babel_locale",
    "normalize_locale",
    "split_language_tag",
]


class TagParts(NamedTuple):
    """Subtags of a parsed language tag, in Babel's casing conventions."""

    language: str
    script: str | None
    region: str | None
    variant: str | None


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


def split_language_tag(text: str) -> TagParts:
    """Split a BCP-47 or POSIX tag into its subtags.

    Babel performs the syntax check and the case normalization (language
    lowercase, script titlecase, region and variant uppercase).

    Args:
        text: Tag such as "en-US", "zh_Hant_TW", "EN-us"

    Returns:
        TagParts with missing subtags set to None

    Raises:
        ValueError: If the tag is malformed, or carries an encoding
            ("en_US.UTF-8") or modifier ("de_DE@euro") suffix

    Example:
        >>> split_language_tag("zh-hant-tw")
        TagParts(language='zh', script='Hant', region='TW', variant=None)
    """
    if "." in text or "@" in text:
        msg = f"'{text}' is not a language tag (encoding or modifier suffix)"
        raise ValueError(msg)
    parts = parse_locale(normalize_locale(text))
    language, region, script, variant = parts[:4]
    return TagParts(language=language, script=script, region=region, variant=variant)


def format_language_tag(parts: TagParts) -> str:
    """Join subtags into a canonical BCP-47 tag.

    Example:
        >>> format_language_tag(TagParts("en", None, "US", None))
        'en-US'
    """
    return "-".join(
        subtag
        for subtag in (parts.language, parts.script, parts.region, parts.variant)
        if subtag
    )


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the cached Babel Locale objects."""
    get_babel_locale.cache_clear()
