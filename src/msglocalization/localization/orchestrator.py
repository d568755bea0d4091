"""Locale loading and message resolution with declared fallback chains.

MsgLocalization ties the pieces together:

- LocaleRegistry turns configured identifiers into pooled Locale objects
- FallbackGraph expands the requested locale into its search chain
- an AssetFetcher retrieves every (locale, document) pair concurrently
- AssetStore receives the merged trees in one atomic replace
- the resolver composes keys, walks the chain and interpolates

Loading Behavior:
    ``await load(locale)`` is all-or-nothing. Every document of every locale
    in the chain must fetch and decode; otherwise the failures are logged,
    ``False`` is returned and neither the store nor the current locale
    change. Configuration mistakes (no locale, unsupported locale, fallback
    locale without a directory) raise ConfigurationError before any fetch.

    Loads on one instance are serialized by an asyncio.Lock. Message lookups
    are synchronous and read a single store snapshot, so they never observe a
    half-applied load.

Python 3.13+.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from msglocalization.enums import LoadStatus
from msglocalization.errors import (
    AssetFetchError,
    AssetNotFoundError,
    ConfigurationError,
    UnsupportedLocaleError,
)
from msglocalization.identity import Locale, LocaleRegistry, default_registry
from msglocalization.localization.fallbacks import FallbackGraph
from msglocalization.localization.loading import (
    AssetLoadResult,
    FallbackInfo,
    LoadSummary,
    LocaleEvent,
    is_empty_document,
    merge_document,
)
from msglocalization.localization.options import LocaleLike, LocalizationOptions
from msglocalization.localization.resolver import (
    PluralRuleSelector,
    compose_message_key,
    find_template,
    interpolate,
)
from msglocalization.localization.store import AssetStore
from msglocalization.localization.transport import AssetFetcher, create_fetcher

if TYPE_CHECKING:
    from decimal import Decimal

    from msglocalization.localization.types import AssetTree, DocumentName, JsonValue

__all__ = ["LocaleListener", "MsgLocalization"]

logger = logging.getLogger(__name__)

type LocaleListener = Callable[[LocaleEvent], None]
"""Callback notified after every successful load."""


class MsgLocalization:
    """Multi-locale message resolution over JSON asset trees.

    Example:
        >>> l10n = MsgLocalization({
        ...     "supportsLocales": ["en-US", "pt-BR"],
        ...     "defaultLocale": "en-US",
        ...     "fallbacks": {"pt-BR": "en-US"},
        ...     "assets": {"src": "res/lang", "files": ["common"],
        ...                "loadAssetsVia": "fileSystem"},
        ... })
        >>> await l10n.load("pt-BR")
        True
        >>> l10n.t("common.greeting", {"name": "Ana"})
        'Olá, Ana'

    Attributes:
        current_locale: Locale of the last successful load, or None
    """

    __slots__ = (
        "_assets",
        "_current_locale",
        "_default_locale",
        "_directory_names",
        "_fallbacks",
        "_fetcher",
        "_last_load_summary",
        "_listeners",
        "_load_lock",
        "_on_fallback",
        "_registry",
        "_store",
        "_supported",
    )

    def __init__(
        self,
        options: LocalizationOptions | Mapping[str, Any],
        *,
        fetcher: AssetFetcher | None = None,
        registry: LocaleRegistry | None = None,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
    ) -> None:
        """Initialize from configuration.

        Invalid locale identifiers in ``supports_locales`` and ``fallbacks``
        are dropped with a warning. Cyclic fallback declarations are
        accepted (traversal is cycle-safe) and logged.

        Args:
            options: LocalizationOptions or the equivalent camelCase mapping
            fetcher: Transport override; defaults to the one selected by
                ``options.assets.load_assets_via``
            registry: Locale pool; defaults to the process-wide registry
            on_fallback: Optional callback invoked when a message resolves
                from a locale other than the current one

        Raises:
            ConfigurationError: If the options are malformed
        """
        if not isinstance(options, LocalizationOptions):
            if not isinstance(options, Mapping):
                msg = (
                    "options must be LocalizationOptions or a mapping, "
                    f"got {type(options).__name__}"
                )
                raise ConfigurationError(msg)
            options = LocalizationOptions.from_mapping(options)

        self._registry = registry if registry is not None else default_registry()
        self._assets = options.assets
        self._fetcher: AssetFetcher = (
            fetcher if fetcher is not None else create_fetcher(options.assets.load_assets_via)
        )
        self._on_fallback = on_fallback
        self._listeners: list[LocaleListener] = []
        self._store = AssetStore()
        self._current_locale: Locale | None = None
        self._last_load_summary: LoadSummary | None = None
        self._load_lock = asyncio.Lock()

        # Supported locales keep the caller's spelling as directory name
        self._directory_names: dict[Locale, str] = {}
        for entry in options.supports_locales:
            locale = self._registry.coerce_locale(entry)
            if locale is None:
                logger.warning("Ignoring invalid supported locale %r", entry)
                continue
            self._directory_names[locale] = str(entry)
        self._supported = frozenset(self._directory_names)

        self._default_locale: Locale | None = None
        if options.default_locale is not None:
            self._default_locale = self._registry.coerce_locale(options.default_locale)
            if self._default_locale is None:
                logger.warning("Ignoring invalid default locale %r", options.default_locale)

        self._fallbacks = FallbackGraph(self._parse_fallbacks(options.fallbacks))
        for cycle in self._fallbacks.find_cycles():
            logger.warning(
                "Cyclic fallback declaration: %s", " -> ".join(str(node) for node in cycle)
            )

    def _parse_fallbacks(
        self, declared: Mapping[LocaleLike, tuple[LocaleLike, ...]]
    ) -> dict[Locale, list[Locale]]:
        edges: dict[Locale, list[Locale]] = {}
        for source, targets in declared.items():
            source_locale = self._registry.coerce_locale(source)
            if source_locale is None:
                logger.warning("Ignoring fallbacks of invalid locale %r", source)
                continue
            parsed: list[Locale] = []
            for target in targets:
                target_locale = self._registry.coerce_locale(target)
                if target_locale is None:
                    logger.warning("Ignoring invalid fallback %r of %s", target, source_locale)
                    continue
                parsed.append(target_locale)
            edges[source_locale] = parsed
        return edges

    # ------------------------------------------------------------------
    # Configuration accessors
    # ------------------------------------------------------------------

    @property
    def registry(self) -> LocaleRegistry:
        """Locale pool used to parse identifiers."""
        return self._registry

    @property
    def supported_locales(self) -> frozenset[Locale]:
        """Supported locales (read-only)."""
        return self._supported

    def supports_locale(self, locale: LocaleLike | None) -> bool:
        """Check whether ``locale`` (a Locale or identifier) is supported."""
        parsed = self._registry.coerce_locale(locale)
        return parsed is not None and parsed in self._supported

    @property
    def default_locale(self) -> Locale | None:
        """Locale loaded by ``load()`` without argument."""
        return self._default_locale

    @property
    def fallbacks(self) -> FallbackGraph:
        """Declared fallback graph."""
        return self._fallbacks

    @property
    def store(self) -> AssetStore:
        """Asset store (shared with clones)."""
        return self._store

    # ------------------------------------------------------------------
    # Current locale
    # ------------------------------------------------------------------

    @property
    def current_locale(self) -> Locale | None:
        """Locale of the last successful load."""
        return self._current_locale

    @property
    def current_locale_sequence(self) -> tuple[Locale, ...]:
        """Current locale followed by its fallbacks; empty before any load."""
        if self._current_locale is None:
            return ()
        return self._fallbacks.chain(self._current_locale)

    @property
    def current_locale_sequence_as_strings(self) -> tuple[str, ...]:
        """Canonical tags of current_locale_sequence (for formatting APIs)."""
        return tuple(str(locale) for locale in self.current_locale_sequence)

    @property
    def last_load_summary(self) -> LoadSummary | None:
        """Fetch results of the most recent load that fetched documents."""
        return self._last_load_summary

    # ------------------------------------------------------------------
    # Notification
    # ------------------------------------------------------------------

    def add_listener(self, listener: LocaleListener) -> None:
        """Register a callback notified after every successful load."""
        self._listeners.append(listener)

    def remove_listener(self, listener: LocaleListener) -> None:
        """Unregister a callback; unknown callbacks are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify_loaded(self) -> None:
        event = LocaleEvent()
        for listener in tuple(self._listeners):
            listener(event)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    async def load(self, locale: LocaleLike | None = None) -> bool:
        """Load ``locale`` (or the default locale) with its fallbacks.

        Args:
            locale: Locale or identifier; None selects the default locale

        Returns:
            True if the locale is now current, False if any document failed
            to load (state unchanged)

        Raises:
            ConfigurationError: If no locale is given and no default is set,
                or a fallback locale is not a supported locale
            UnsupportedLocaleError: If the locale is not supported
        """
        async with self._load_lock:
            target = self._validate_target(locale)

            if target is self._current_locale:
                logger.debug("Locale %s already loaded", target)
                self._notify_loaded()
                return True

            required = self._fallbacks.chain(target)
            directories = self._directories_for(required)

            pairs = [
                (required_locale, document)
                for required_locale in required
                for document in self._assets.files
            ]
            fetched = await asyncio.gather(
                *(self._fetch_document(loc, directories[loc], doc) for loc, doc in pairs)
            )

            results = tuple(result for result, _ in fetched)
            summary = LoadSummary(locale=target, results=results)
            self._last_load_summary = summary
            if not summary.all_successful:
                logger.error(
                    "Failed to load locale %s: %d of %d documents failed",
                    target,
                    len(summary.get_errors()),
                    summary.total_attempted,
                )
                return False

            entries: dict[Locale, AssetTree] = {loc: {} for loc in required}
            for (loc, document), (_, content) in zip(pairs, fetched, strict=True):
                merge_document(entries[loc], document, content)

            self._store.replace(entries, discard_existing=self._assets.clean_unused_assets)
            self._current_locale = target
            logger.info(
                "Loaded locale %s (%s)", target, ", ".join(str(loc) for loc in required)
            )
            self._notify_loaded()
            return True

    def _validate_target(self, locale: LocaleLike | None) -> Locale:
        if locale is None:
            if self._default_locale is None:
                msg = "Locale argument must be specified (no default locale configured)"
                raise ConfigurationError(msg)
            target = self._default_locale
        else:
            parsed = self._registry.coerce_locale(locale)
            if parsed is None:
                raise UnsupportedLocaleError(locale)
            target = parsed
        if target not in self._supported:
            raise UnsupportedLocaleError(target)
        return target

    def _directories_for(self, required: tuple[Locale, ...]) -> dict[Locale, str]:
        directories: dict[Locale, str] = {}
        for locale in required:
            directory = self._directory_names.get(locale)
            if directory is None:
                msg = f"Fallback locale is not a supported locale: {locale}"
                raise ConfigurationError(msg)
            directories[locale] = directory
        return directories

    async def _fetch_document(
        self,
        locale: Locale,
        directory: str,
        document: DocumentName,
    ) -> tuple[AssetLoadResult, JsonValue]:
        """Fetch one document and record the outcome; never raises."""
        path = self._assets.document_path(directory, document)
        try:
            content = await self._fetcher.fetch(path)
        except AssetNotFoundError as e:
            logger.error("Failed to load resource at %s: not found", path)
            return AssetLoadResult(locale, document, LoadStatus.NOT_FOUND, path, e), None
        except AssetFetchError as e:
            logger.error("Failed to load resource at %s: %s", path, e)
            return AssetLoadResult(locale, document, LoadStatus.ERROR, path, e), None
        except Exception as e:  # noqa: BLE001 - injected fetchers may raise anything
            logger.error("Failed to load resource at %s: %s: %s", path, type(e).__name__, e)
            return AssetLoadResult(locale, document, LoadStatus.ERROR, path, e), None

        if is_empty_document(content):
            error = AssetFetchError(f"Empty resource at {path}", path=path)
            logger.error("Failed to load resource at %s: empty content", path)
            return AssetLoadResult(locale, document, LoadStatus.ERROR, path, error), None

        return AssetLoadResult(locale, document, LoadStatus.SUCCESS, path), content

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------

    def t(self, key: str, *options: object) -> str:
        """Resolve and format a message.

        Args:
            key: Dotted message key (e.g., 'common.messageId')
            *options: Variable mappings, Gender, PluralRuleSelector, or str
                modifiers (see msglocalization.localization.resolver)

        Returns:
            The interpolated message, or the (suffixed) key itself when no
            locale is loaded or no locale in the chain has the message
        """
        composed = compose_message_key(key, options)
        current = self._current_locale
        if current is None:
            return composed.key

        trees = self._store.snapshot()
        found = find_template(trees, self._fallbacks.chain(current), composed.segments)
        if found is None:
            logger.debug("Message '%s' not found for %s", composed.key, current)
            return composed.key

        template, resolved = found
        if self._on_fallback is not None and resolved is not current:
            self._on_fallback(
                FallbackInfo(
                    requested_locale=current,
                    resolved_locale=resolved,
                    message_id=composed.key,
                )
            )
        return interpolate(template, composed.variables)

    def has_message(self, key: str, *options: object) -> bool:
        """Check whether the (suffixed) key resolves in the current chain."""
        current = self._current_locale
        if current is None:
            return False
        composed = compose_message_key(key, options)
        found = find_template(
            self._store.snapshot(), self._fallbacks.chain(current), composed.segments
        )
        return found is not None

    def plural_selector(self, value: int | float | Decimal) -> PluralRuleSelector:
        """Plural selector using the rules of the current locale sequence."""
        return PluralRuleSelector.for_locales(self.current_locale_sequence_as_strings, value)

    # ------------------------------------------------------------------
    # Reflection
    # ------------------------------------------------------------------

    def reflect_options(self) -> LocalizationOptions:
        """Return the live configuration in constructible form."""
        return LocalizationOptions(
            supports_locales=tuple(self._directory_names.values()),
            default_locale=str(self._default_locale) if self._default_locale else None,
            fallbacks={
                source: tuple(targets) for source, targets in self._fallbacks.to_dict().items()
            },
            assets=self._assets,
        )

    def clone(self) -> MsgLocalization:
        """New instance sharing loaded assets and the current locale.

        The clone has its own configuration copy, listeners and load lock;
        the asset store object itself is shared.
        """
        clone = MsgLocalization(
            self.reflect_options(),
            fetcher=self._fetcher,
            registry=self._registry,
            on_fallback=self._on_fallback,
        )
        clone._store = self._store
        clone._current_locale = self._current_locale
        return clone

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"MsgLocalization(current={self._current_locale}, "
            f"supported={sorted(str(locale) for locale in self._supported)})"
        )
