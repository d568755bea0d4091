"""Language and ISO 3166 country metadata via Babel CLDR data.

Locale identity only needs a handful of questions answered about languages
and countries. They are expressed as the LocaleMetadataProvider protocol so
that registries can be built over other data sources (or fixed tables in
tests); BabelMetadataProvider answers them from CLDR.

Python 3.13+. Uses Babel for CLDR data.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Protocol

from babel import Locale, UnknownLocaleError
from babel.core import get_global

from msglocalization.constants import INTERNATIONAL_LANGUAGE, RETIRED_ALPHA3_CODES
from msglocalization.enums import TextDirection

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Data classes
    "LanguageInfo",
    # Protocol
    "LocaleMetadataProvider",
    # Babel implementation
    "BabelMetadataProvider",
    # Cache management
    "clear_metadata_cache",
]


@dataclass(frozen=True, slots=True)
class LanguageInfo:
    """Display metadata for a language subtag.

    Immutable, thread-safe, hashable.

    Attributes:
        direction: Writing direction of the language.
        international_name: English name (e.g., 'Japanese').
        native_name: Name in the language itself (e.g., '日本語').
    """

    direction: TextDirection
    international_name: str
    native_name: str


class LocaleMetadataProvider(Protocol):
    """Answers language and country questions for locale identity.

    All methods return None for unknown input instead of raising.
    """

    def language_info(self, language: str) -> LanguageInfo | None:
        """Return metadata for a lowercase language subtag, or None if unknown."""

    def country_alpha3(self, code: str) -> str | None:
        """Map an uppercase alpha-2 or alpha-3 code to canonical alpha-3, or None."""

    def country_alpha2(self, alpha3: str) -> str | None:
        """Map a canonical alpha-3 code to its alpha-2 code, or None."""

    def country_name(self, alpha3: str, language: str) -> str | None:
        """Return the country's name in the given language, or None."""


# ============================================================================
# CACHED CLDR LOOKUPS
# ============================================================================


@lru_cache(maxsize=256)
def _language_info(language: str) -> LanguageInfo | None:
    """Look up language metadata (cached per subtag)."""
    try:
        babel_locale = Locale.parse(language)
    except (UnknownLocaleError, ValueError):
        return None

    international_name = babel_locale.get_language_name(INTERNATIONAL_LANGUAGE)
    if not international_name:
        return None
    native_name = babel_locale.get_language_name() or international_name
    direction = (
        TextDirection.RIGHT_TO_LEFT
        if babel_locale.text_direction == "rtl"
        else TextDirection.LEFT_TO_RIGHT
    )
    return LanguageInfo(
        direction=direction,
        international_name=international_name,
        native_name=native_name,
    )


@lru_cache(maxsize=1)
def _alpha_code_tables() -> tuple[dict[str, str], dict[str, str]]:
    """Build (alpha3 -> alpha2, alpha2 -> alpha3) tables from CLDR aliases.

    CLDR lists every ISO 3166-1 alpha-3 code as an alias of its alpha-2
    territory. Only territories CLDR can name are kept.
    """
    known = Locale.parse(INTERNATIONAL_LANGUAGE).territories
    aliases: dict[str, list[str]] = get_global("territory_aliases")

    to_alpha2: dict[str, str] = {}
    to_alpha3: dict[str, str] = {}
    # Sorted so that table construction does not depend on dict order.
    for alias, replacements in sorted(aliases.items()):
        if len(alias) != 3 or not alias.isalpha() or len(replacements) != 1:
            continue
        alpha2 = replacements[0]
        if alpha2 not in known:
            continue
        to_alpha2[alias] = alpha2
        current = to_alpha3.get(alpha2)
        if current is None or current in RETIRED_ALPHA3_CODES:
            to_alpha3[alpha2] = alias
    return to_alpha2, to_alpha3


@lru_cache(maxsize=1024)
def _territory_name(alpha2: str, language: str) -> str | None:
    """Get a territory's name in a language (cached)."""
    try:
        babel_locale = Locale.parse(language)
    except (UnknownLocaleError, ValueError):
        return None
    return babel_locale.territories.get(alpha2)


def clear_metadata_cache() -> None:
    """Clear all cached CLDR lookups.

    Useful for memory reclamation in long-running processes; pooled Locale
    and Country instances are unaffected.
    """
    _language_info.cache_clear()
    _alpha_code_tables.cache_clear()
    _territory_name.cache_clear()


# ============================================================================
# PROVIDER
# ============================================================================


class BabelMetadataProvider:
    """LocaleMetadataProvider backed by Babel's CLDR data.

    Stateless; all lookups go through module-level caches, so any number of
    instances share the same data.

    Example:
        >>> provider = BabelMetadataProvider()
        >>> provider.language_info("ar").direction
        <TextDirection.RIGHT_TO_LEFT: 'rightToLeft'>
        >>> provider.country_alpha3("US")
        'USA'
        >>> provider.country_name("DEU", "de")
        'Deutschland'
    """

    __slots__ = ()

    def language_info(self, language: str) -> LanguageInfo | None:
        """Return metadata for a language subtag, or None if CLDR lacks it."""
        if not language.isalpha():
            return None
        return _language_info(language.lower())

    def country_alpha3(self, code: str) -> str | None:
        """Map alpha-2 or alpha-3 input to the canonical alpha-3 code.

        Withdrawn alpha-3 codes (e.g., 'FXX') resolve to the current code of
        the territory they alias. Deprecated alpha-2 codes (e.g., 'BU') are
        followed through CLDR's alias table first.
        """
        to_alpha2, to_alpha3 = _alpha_code_tables()
        code = code.upper()
        match len(code):
            case 2:
                replacements = get_global("territory_aliases").get(code)
                if replacements is not None and len(replacements) == 1:
                    code = replacements[0]
                return to_alpha3.get(code)
            case 3:
                alpha2 = to_alpha2.get(code)
                return to_alpha3.get(alpha2) if alpha2 is not None else None
            case _:
                return None

    def country_alpha2(self, alpha3: str) -> str | None:
        """Map a canonical alpha-3 code to alpha-2."""
        to_alpha2, _ = _alpha_code_tables()
        return to_alpha2.get(alpha3.upper())

    def country_name(self, alpha3: str, language: str) -> str | None:
        """Return the country's display name in the given language."""
        alpha2 = self.country_alpha2(alpha3)
        if alpha2 is None:
            return None
        return _territory_name(alpha2, language)
