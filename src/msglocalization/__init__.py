"""MsgLocalization - JSON-asset localization with declared fallback chains.

Loads per-locale JSON documents (over HTTP or from the filesystem), merges
them into one asset tree per locale and resolves dotted message keys along
a declared fallback chain, with gender, plural and free-form key suffixes
and ``$name`` interpolation.

Public API:
    MsgLocalization - Multi-locale loading and message resolution
    LocalizationOptions, AssetOptions - Immutable configuration
    parse_locale, parse_country - Pooled Locale / Country identity
    Gender, PluralRuleSelector - Message key modifiers

Exceptions:
    LocalizationError - Base exception class
    ConfigurationError - Invalid configuration or load arguments
    UnsupportedLocaleError - Locale outside the supported set
    AssetFetchError, AssetNotFoundError - Transport failures

Submodules:
    msglocalization.identity - Locale, Country, LocaleRegistry
    msglocalization.localization - Loading, storage and resolution stack
    msglocalization.runtime - CLDR plural rules
"""

from .enums import AssetTransport, Gender, LoadStatus, TextDirection
from .errors import (
    AssetFetchError,
    AssetNotFoundError,
    ConfigurationError,
    LocalizationError,
    UnsupportedLocaleError,
)
from .identity import Country, Locale, LocaleRegistry, parse_country, parse_locale
from .localization import (
    AssetOptions,
    FallbackInfo,
    FileSystemAssetFetcher,
    HttpAssetFetcher,
    LoadSummary,
    LocaleEvent,
    LocalizationOptions,
    MsgLocalization,
    PluralRuleSelector,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("msglocalization")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "AssetFetchError",
    "AssetNotFoundError",
    "AssetOptions",
    "AssetTransport",
    "ConfigurationError",
    "Country",
    "FallbackInfo",
    "FileSystemAssetFetcher",
    "Gender",
    "HttpAssetFetcher",
    "LoadStatus",
    "LoadSummary",
    "Locale",
    "LocaleEvent",
    "LocaleRegistry",
    "LocalizationError",
    "LocalizationOptions",
    "MsgLocalization",
    "PluralRuleSelector",
    "TextDirection",
    "UnsupportedLocaleError",
    "__version__",
    "parse_country",
    "parse_locale",
]
