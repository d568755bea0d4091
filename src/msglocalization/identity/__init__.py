"""Canonical locale and country identity.

Submodules:
    metadata - LocaleMetadataProvider protocol and the Babel-backed provider
    registry - Locale, Country and the LocaleRegistry pools

Python 3.13+.
"""

from .metadata import (
    BabelMetadataProvider,
    LanguageInfo,
    LocaleMetadataProvider,
    clear_metadata_cache,
)
from .registry import (
    Country,
    Locale,
    LocaleRegistry,
    default_registry,
    parse_country,
    parse_locale,
)

__all__ = [
    "BabelMetadataProvider",
    "Country",
    "LanguageInfo",
    "Locale",
    "LocaleMetadataProvider",
    "LocaleRegistry",
    "clear_metadata_cache",
    "default_registry",
    "parse_country",
    "parse_locale",
]
