"""Shared constants for msglocalization.

Centralizes the fixed lookup tables used by locale identity and the
asset loader. Placing them here avoids circular imports between the
identity and localization packages.

Constants are grouped by domain:
- Locale aliases: informal single-subtag spellings mapped to real tags
- Country defaults: languages that imply a country without a region subtag
- Assets: document naming and event names

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale identity
    "LOCALE_ALIASES",
    "DEFAULT_LANGUAGE_COUNTRIES",
    "RETIRED_ALPHA3_CODES",
    "INTERNATIONAL_LANGUAGE",
    # Assets
    "ASSET_FILE_SUFFIX",
    "LOCALE_LOAD_EVENT",
    # Placeholders
    "UNBOUND_VARIABLE",
]

# ============================================================================
# LOCALE IDENTITY
# ============================================================================

# Informal identifiers that users type instead of a language tag.
# Matched case-insensitively against the whole identifier.
LOCALE_ALIASES: dict[str, str] = {
    "br": "pt-BR",
    "us": "en-US",
    "usa": "en-US",
    "jp": "ja",
}

# Languages whose bare tag implies a country (no region subtag present).
# Values are ISO 3166-1 alpha-3 codes.
DEFAULT_LANGUAGE_COUNTRIES: dict[str, str] = {
    "fr": "FRA",
    "ja": "JPN",
    "ru": "RUS",
}

# CLDR keeps aliases for alpha-3 codes withdrawn from ISO 3166-1. When a
# withdrawn code and a current code both alias the same territory, the
# current code is canonical.
RETIRED_ALPHA3_CODES: frozenset[str] = frozenset({
    "BUR",  # Burma -> MMR
    "DDR",  # German Democratic Republic -> DEU
    "FXX",  # Metropolitan France -> FRA
    "ROM",  # Romania (pre-2002) -> ROU
    "TMP",  # East Timor -> TLS
    "YMD",  # South Yemen -> YEM
    "ZAR",  # Zaire -> COD
})

# Language used for "international" display names.
INTERNATIONAL_LANGUAGE: str = "en"

# ============================================================================
# ASSETS
# ============================================================================

ASSET_FILE_SUFFIX: str = ".json"

# Type name of the notification dispatched after every successful load.
LOCALE_LOAD_EVENT: str = "localeload"

# ============================================================================
# PLACEHOLDERS
# ============================================================================

# Rendered in place of a $name token whose variable was not supplied.
UNBOUND_VARIABLE: str = "undefined"
