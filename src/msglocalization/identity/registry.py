"""Pooled Locale and Country identity.

A LocaleRegistry canonicalizes textual identifiers and hands out exactly one
Locale (or Country) instance per canonical identifier. Equality is identity:
``registry.parse_locale("en_us") is registry.parse_locale("EN-US")``.

Instances can only be created by a registry. Direct construction raises
TypeError, so validation cannot be bypassed and the one-instance invariant
holds for every object in circulation.

The module-level parse_locale()/parse_country() functions use a process-wide
default registry. Tests and embedders that need isolation construct their own
LocaleRegistry (optionally with a custom metadata provider) and pass it to
MsgLocalization.

Python 3.13+.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from threading import RLock
from typing import TYPE_CHECKING

from msglocalization.constants import (
    DEFAULT_LANGUAGE_COUNTRIES,
    INTERNATIONAL_LANGUAGE,
    LOCALE_ALIASES,
)
from msglocalization.identity.metadata import BabelMetadataProvider
from msglocalization.locale_utils import TagParts, format_language_tag, split_language_tag

if TYPE_CHECKING:
    from msglocalization.enums import TextDirection
    from msglocalization.identity.metadata import LanguageInfo, LocaleMetadataProvider

__all__ = [
    "Country",
    "Locale",
    "LocaleRegistry",
    "default_registry",
    "parse_country",
    "parse_locale",
]

# Sentinel proving construction went through a LocaleRegistry.
_FACTORY_TOKEN = object()


def _check_token(cls_name: str, token: object) -> None:
    if token is not _FACTORY_TOKEN:
        msg = (
            f"{cls_name} does not support direct construction. "
            f"Use LocaleRegistry.parse_{cls_name.lower()}() or "
            f"msglocalization.parse_{cls_name.lower()}() instead."
        )
        raise TypeError(msg)


@dataclass(frozen=True, slots=True, eq=False)
class Country:
    """ISO 3166-1 country, identified by its alpha-3 code.

    Immutable and pooled: compare with ``is`` or ``==`` (identity).

    Attributes:
        code: Canonical alpha-3 code (e.g., 'USA').
        alpha2: Alpha-2 code (e.g., 'US').
    """

    code: str
    alpha2: str
    _registry: LocaleRegistry = field(repr=False)
    _factory_token: object = field(default=None, repr=False)

    def __post_init__(self) -> None:
        _check_token("Country", self._factory_token)

    @property
    def international_name(self) -> str:
        """English name of the country."""
        name = self._registry.metadata.country_name(self.code, INTERNATIONAL_LANGUAGE)
        return name if name is not None else self.code

    def get_name(self, locale: Locale) -> str:
        """Name of the country in the language of ``locale``.

        Falls back to the English name when CLDR has no translation.
        """
        name = self._registry.metadata.country_name(self.code, locale.language)
        return name if name is not None else self.international_name

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True, slots=True, eq=False)
class Locale:
    """Language/region combination with derived display metadata.

    Immutable and pooled per registry. ``str(locale)`` is the canonical
    BCP-47 tag.

    Attributes:
        tag: Canonical tag (e.g., 'en-US', 'zh-Hant-TW').
        language: Lowercase language subtag.
        script: Titlecase script subtag or None.
        region: Uppercase region subtag or None.
        variant: Uppercase variant subtag or None.

    Example:
        >>> locale = parse_locale("pt-br")
        >>> locale.tag
        'pt-BR'
        >>> locale.native_name
        'português (Brasil)'
    """

    tag: str
    language: str
    script: str | None
    region: str | None
    variant: str | None
    _info: LanguageInfo = field(repr=False)
    _registry: LocaleRegistry = field(repr=False)
    _factory_token: object = field(default=None, repr=False)

    def __post_init__(self) -> None:
        _check_token("Locale", self._factory_token)

    @property
    def direction(self) -> TextDirection:
        """Writing direction of the language."""
        return self._info.direction

    @property
    def international_name(self) -> str:
        """English name of the language (e.g., 'Portuguese')."""
        return self._info.international_name

    @property
    def native_name(self) -> str:
        """Native language name, with the native country name when known."""
        country = self.country
        if country is None:
            return self._info.native_name
        return f"{self._info.native_name} ({country.get_name(self)})"

    @property
    def country(self) -> Country | None:
        """Country from the region subtag, or the language's default country."""
        if self.region is not None:
            country = self._registry.parse_country(self.region)
            if country is not None:
                return country
            return None
        default = DEFAULT_LANGUAGE_COUNTRIES.get(self.language)
        if default is not None and self.script is None and self.variant is None:
            return self._registry.parse_country(default)
        return None

    def __str__(self) -> str:
        return self.tag


class LocaleRegistry:
    """Owner of the Locale and Country pools.

    Pools live as long as the registry and are never evicted; evicting would
    allow two instances for one identifier to coexist.

    Thread Safety:
        Pool access is protected by an RLock with a double-checked insert,
        so concurrent parses of the same identifier return the same instance.

    Example:
        >>> registry = LocaleRegistry()
        >>> registry.parse_locale("us") is registry.parse_locale("en-US")
        True
        >>> registry.parse_locale("not a locale") is None
        True
    """

    __slots__ = ("_countries", "_lock", "_locales", "_metadata")

    def __init__(self, metadata: LocaleMetadataProvider | None = None) -> None:
        """Initialize an empty registry.

        Args:
            metadata: Metadata capability; defaults to BabelMetadataProvider.
        """
        self._metadata: LocaleMetadataProvider = (
            metadata if metadata is not None else BabelMetadataProvider()
        )
        self._locales: dict[str, Locale] = {}
        self._countries: dict[str, Country] = {}
        self._lock = RLock()

    @property
    def metadata(self) -> LocaleMetadataProvider:
        """Metadata capability used for validation and display names."""
        return self._metadata

    def parse_locale(self, text: object) -> Locale | None:
        """Parse a locale identifier into the pooled Locale.

        Args:
            text: Identifier such as 'en-US', 'en_us', 'us', 'zh-Hant-TW'

        Returns:
            The pooled Locale, or None for malformed tags, unknown languages
            and non-string input. Never raises.
        """
        if not isinstance(text, str):
            return None
        text = text.strip()
        text = LOCALE_ALIASES.get(text.lower(), text)

        try:
            parts = split_language_tag(text)
        except ValueError:
            return None
        tag = format_language_tag(parts)

        with self._lock:
            cached = self._locales.get(tag)
        if cached is not None:
            return cached

        info = self._metadata.language_info(parts.language)
        if info is None:
            return None
        return self._intern_locale(tag, parts, info)

    def _intern_locale(self, tag: str, parts: TagParts, info: LanguageInfo) -> Locale:
        with self._lock:
            # Double-check: another thread may have inserted meanwhile
            cached = self._locales.get(tag)
            if cached is not None:
                return cached
            locale = Locale(
                tag=tag,
                language=parts.language,
                script=parts.script,
                region=parts.region,
                variant=parts.variant,
                _info=info,
                _registry=self,
                _factory_token=_FACTORY_TOKEN,
            )
            self._locales[tag] = locale
            return locale

    def parse_country(self, text: object) -> Country | None:
        """Parse an ISO 3166-1 alpha-2 or alpha-3 code into the pooled Country.

        Args:
            text: Code such as 'US', 'usa', 'DE'

        Returns:
            The pooled Country, or None for unknown codes and non-string
            input. Never raises.
        """
        if not isinstance(text, str):
            return None
        code = text.strip().upper()
        if not code.isalpha():
            return None
        alpha3 = self._metadata.country_alpha3(code)
        if alpha3 is None:
            return None

        with self._lock:
            cached = self._countries.get(alpha3)
            if cached is not None:
                return cached
            alpha2 = self._metadata.country_alpha2(alpha3)
            if alpha2 is None or self._metadata.country_name(alpha3, INTERNATIONAL_LANGUAGE) is None:
                return None
            country = Country(
                code=alpha3,
                alpha2=alpha2,
                _registry=self,
                _factory_token=_FACTORY_TOKEN,
            )
            self._countries[alpha3] = country
            return country

    def coerce_locale(self, value: object) -> Locale | None:
        """Return ``value`` if it is a Locale, else parse it as text."""
        if isinstance(value, Locale):
            return value
        return self.parse_locale(value)

    @property
    def cached_locales(self) -> tuple[str, ...]:
        """Canonical tags of all pooled locales, in creation order."""
        with self._lock:
            return tuple(self._locales)

    @property
    def cached_countries(self) -> tuple[str, ...]:
        """Alpha-3 codes of all pooled countries, in creation order."""
        with self._lock:
            return tuple(self._countries)


@functools.cache
def default_registry() -> LocaleRegistry:
    """Process-wide registry used by the module-level parse functions."""
    return LocaleRegistry()


def parse_locale(text: object) -> Locale | None:
    """Parse a locale identifier using the default registry.

    Repeated parses of equivalent identifiers return the same object:

        >>> parse_locale("us") is parse_locale("en_US")
        True
    """
    return default_registry().parse_locale(text)


def parse_country(text: object) -> Country | None:
    """Parse a country code using the default registry."""
    return default_registry().parse_country(text)
