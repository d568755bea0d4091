"""Configuration objects for MsgLocalization.

Two frozen dataclasses replace the loose options mapping: AssetOptions
describes where and how documents are fetched, LocalizationOptions carries
the locale set, default locale and fallback declarations.

Both accept the camelCase mapping form used by asset-hosting front ends
(``{"supportsLocales": [...], "assets": {"loadAssetsVia": "fileSystem"}}``)
through ``from_mapping()`` and serialize back with ``to_dict()``.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import PurePosixPath, PureWindowsPath
from types import MappingProxyType
from typing import Any

from msglocalization.constants import ASSET_FILE_SUFFIX
from msglocalization.enums import AssetTransport
from msglocalization.errors import ConfigurationError
from msglocalization.identity import Locale
from msglocalization.localization.types import DocumentName

__all__ = ["AssetOptions", "LocaleLike", "LocalizationOptions"]

type LocaleLike = str | Locale
"""A Locale instance or an identifier parseable by a LocaleRegistry."""


def _pick(data: Mapping[str, Any], camel: str, snake: str, default: Any = None) -> Any:
    """Read a key in camelCase or snake_case form."""
    if camel in data:
        return data[camel]
    return data.get(snake, default)


def _validate_document_name(name: object) -> DocumentName:
    """Validate an asset document name and strip a trailing '.json'.

    Raises:
        ConfigurationError: If the name is empty, padded with whitespace,
            absolute, or contains '..'
    """
    if not isinstance(name, str):
        msg = f"Asset document name must be a string, got {type(name).__name__}"
        raise ConfigurationError(msg)
    stripped = name.strip()
    if stripped != name:
        msg = f"Asset document name contains leading/trailing whitespace: {name!r}"
        raise ConfigurationError(msg)
    if PurePosixPath(name).is_absolute() or PureWindowsPath(name).is_absolute():
        msg = f"Absolute paths not allowed in asset document name: '{name}'"
        raise ConfigurationError(msg)
    if ".." in name.split("/"):
        msg = f"Path traversal sequences not allowed in asset document name: '{name}'"
        raise ConfigurationError(msg)
    name = name.removesuffix(ASSET_FILE_SUFFIX)
    if not name:
        msg = "Asset document name cannot be empty"
        raise ConfigurationError(msg)
    return name


def _as_sequence(value: object) -> tuple[Any, ...]:
    """Wrap a scalar in a tuple; convert other iterables to a tuple."""
    if value is None:
        return ()
    if isinstance(value, (str, Locale)):
        return (value,)
    if isinstance(value, Iterable):
        return tuple(value)
    return (value,)


@dataclass(frozen=True, slots=True)
class AssetOptions:
    """Where and how asset documents are fetched.

    Attributes:
        src: Root path or URL; documents live at ``{src}/{dir}/{name}.json``.
        files: Document names, fetched and merged in this order. A trailing
            '.json' is stripped. '/' and '.' inside a name nest the document
            further in the merged tree.
        clean_unused_assets: Drop every previously loaded tree on each
            successful load (default: False, keep and overwrite per locale).
        load_assets_via: Transport selector (default: HTTP).

    Example:
        >>> AssetOptions(src="res/lang", files=["common.json"]).files
        ('common',)
    """

    src: str = ""
    files: tuple[DocumentName, ...] = ()
    clean_unused_assets: bool = False
    load_assets_via: AssetTransport = AssetTransport.HTTP

    def __post_init__(self) -> None:
        """Normalize fields and validate them.

        Raises:
            ConfigurationError: If src is not a string, a document name is
                invalid, or the transport is unknown
        """
        if not isinstance(self.src, str):
            msg = f"Asset src must be a string, got {type(self.src).__name__}"
            raise ConfigurationError(msg)
        if isinstance(self.files, str):
            msg = "Asset files must be a sequence of document names, not a string"
            raise ConfigurationError(msg)
        files = tuple(_validate_document_name(name) for name in self.files)
        object.__setattr__(self, "files", files)
        object.__setattr__(self, "clean_unused_assets", bool(self.clean_unused_assets))
        try:
            transport = AssetTransport(self.load_assets_via)
        except ValueError:
            valid = ", ".join(repr(t.value) for t in AssetTransport)
            msg = f"Unknown asset transport {self.load_assets_via!r}; expected one of {valid}"
            raise ConfigurationError(msg) from None
        object.__setattr__(self, "load_assets_via", transport)

    def document_path(self, directory: str, document: DocumentName) -> str:
        """Build the fetch path of one document.

        Example:
            >>> AssetOptions(src="res/").document_path("en-US", "common")
            'res/en-US/common.json'
        """
        filename = f"{document}{ASSET_FILE_SUFFIX}"
        if not self.src:
            return f"{directory}/{filename}"
        return f"{self.src.rstrip('/')}/{directory}/{filename}"

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> AssetOptions:
        """Build from ``{src, files, cleanUnusedAssets, loadAssetsVia}``."""
        return cls(
            src=_pick(data, "src", "src", ""),
            files=_pick(data, "files", "files", ()) or (),
            clean_unused_assets=bool(
                _pick(data, "cleanUnusedAssets", "clean_unused_assets", False)
            ),
            load_assets_via=_pick(data, "loadAssetsVia", "load_assets_via", None)
            or AssetTransport.HTTP,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase mapping form."""
        return {
            "src": self.src,
            "files": list(self.files),
            "cleanUnusedAssets": self.clean_unused_assets,
            "loadAssetsVia": str(self.load_assets_via),
        }


@dataclass(frozen=True, slots=True)
class LocalizationOptions:
    """Immutable configuration of a MsgLocalization engine.

    Attributes:
        supports_locales: Supported locales. The text given for each entry is
            also its asset directory name ('pt-br' loads from '{src}/pt-br/').
        default_locale: Locale loaded by ``load()`` without argument.
        fallbacks: Locale -> ordered fallback locales. A single value is
            accepted in place of a one-element sequence.
        assets: Asset source configuration.

    Example:
        >>> options = LocalizationOptions(
        ...     supports_locales=["en-US", "pt-BR"],
        ...     default_locale="en-US",
        ...     fallbacks={"pt-BR": "en-US"},
        ...     assets=AssetOptions(src="res/lang", files=["common"]),
        ... )
        >>> options.fallbacks["pt-BR"]
        ('en-US',)
    """

    supports_locales: tuple[LocaleLike, ...] = ()
    default_locale: LocaleLike | None = None
    fallbacks: Mapping[LocaleLike, tuple[LocaleLike, ...]] = field(default_factory=dict)
    assets: AssetOptions = field(default_factory=AssetOptions)

    def __post_init__(self) -> None:
        """Normalize sequences and freeze the fallback mapping.

        Raises:
            ConfigurationError: If fallbacks or assets have the wrong shape
        """
        object.__setattr__(self, "supports_locales", _as_sequence(self.supports_locales))

        fallbacks = self.fallbacks if self.fallbacks is not None else {}
        if not isinstance(fallbacks, Mapping):
            msg = f"fallbacks must be a mapping, got {type(fallbacks).__name__}"
            raise ConfigurationError(msg)
        frozen = {key: _as_sequence(value) for key, value in fallbacks.items()}
        object.__setattr__(self, "fallbacks", MappingProxyType(frozen))

        match self.assets:
            case AssetOptions():
                pass
            case Mapping():
                object.__setattr__(self, "assets", AssetOptions.from_mapping(self.assets))
            case _:
                msg = f"assets must be AssetOptions or a mapping, got {type(self.assets).__name__}"
                raise ConfigurationError(msg)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> LocalizationOptions:
        """Build from ``{supportsLocales, defaultLocale, fallbacks, assets}``.

        snake_case keys are accepted as well.
        """
        return cls(
            supports_locales=_as_sequence(_pick(data, "supportsLocales", "supports_locales")),
            default_locale=_pick(data, "defaultLocale", "default_locale"),
            fallbacks=_pick(data, "fallbacks", "fallbacks") or {},
            assets=_pick(data, "assets", "assets") or AssetOptions(),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase mapping form with string identifiers."""
        return {
            "supportsLocales": [str(locale) for locale in self.supports_locales],
            "defaultLocale": (
                str(self.default_locale) if self.default_locale is not None else None
            ),
            "fallbacks": {
                str(key): [str(value) for value in values]
                for key, values in self.fallbacks.items()
            },
            "assets": self.assets.to_dict(),
        }
