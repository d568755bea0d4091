"""Multi-locale localization package for MsgLocalization.

Provides the full localization stack: configuration, fallback graph,
asset transports, atomic asset store, message resolution and the
orchestrator that ties them together.

Submodules:
    types        - PEP 695 type aliases (MessageKey, DocumentName, AssetTree)
    options      - AssetOptions, LocalizationOptions
    fallbacks    - FallbackGraph (declared fallback edges, chain expansion)
    transport    - AssetFetcher protocol, HttpAssetFetcher, FileSystemAssetFetcher
    store        - AssetStore (snapshot-swap per-locale trees)
    loading      - Document merging, AssetLoadResult, LoadSummary, LocaleEvent
    resolver     - Key composition, PluralRuleSelector, interpolation
    orchestrator - MsgLocalization (multi-locale orchestration)

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from msglocalization.enums import LoadStatus
from msglocalization.localization.fallbacks import FallbackGraph
from msglocalization.localization.loading import (
    AssetLoadResult,
    FallbackInfo,
    LoadSummary,
    LocaleEvent,
)
from msglocalization.localization.options import AssetOptions, LocaleLike, LocalizationOptions
from msglocalization.localization.orchestrator import LocaleListener, MsgLocalization
from msglocalization.localization.resolver import MessageOption, PluralRuleSelector
from msglocalization.localization.store import AssetStore
from msglocalization.localization.transport import (
    AssetFetcher,
    FileSystemAssetFetcher,
    HttpAssetFetcher,
    create_fetcher,
)
from msglocalization.localization.types import AssetTree, DocumentName, JsonValue, MessageKey

__all__ = [
    # Main orchestrator
    "MsgLocalization",
    "LocaleListener",
    # Configuration
    "AssetOptions",
    "LocalizationOptions",
    "LocaleLike",
    # Fallbacks and storage
    "FallbackGraph",
    "AssetStore",
    # Transport protocol and implementations
    "AssetFetcher",
    "HttpAssetFetcher",
    "FileSystemAssetFetcher",
    "create_fetcher",
    # Load tracking
    "LoadStatus",
    "LoadSummary",
    "AssetLoadResult",
    # Observability
    "FallbackInfo",
    "LocaleEvent",
    # Message options
    "MessageOption",
    "PluralRuleSelector",
    # Type aliases for user code type annotations
    "AssetTree",
    "DocumentName",
    "JsonValue",
    "MessageKey",
]
