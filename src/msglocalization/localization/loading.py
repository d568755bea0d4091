"""Asset merging and load bookkeeping for MsgLocalization.

Provides the document-merge rule that turns fetched JSON documents into one
asset tree per locale, plus immutable records describing what happened
during a load.

Components:
    merge_document - Place a document in a tree under its (nested) name
    is_empty_document - Detect documents that count as failed loads
    AssetLoadResult - Immutable result of a single document fetch
    LoadSummary - Immutable aggregate of all fetches of one load
    FallbackInfo - Immutable record of a message resolved from a fallback
    LocaleEvent - Notification dispatched after a successful load

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from msglocalization.constants import LOCALE_LOAD_EVENT
from msglocalization.enums import LoadStatus

if TYPE_CHECKING:
    from msglocalization.identity import Locale
    from msglocalization.localization.types import AssetTree, DocumentName, JsonValue

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Tree construction
    "document_path_segments",
    "copy_document",
    "merge_document",
    "is_empty_document",
    # Load result types
    "AssetLoadResult",
    "LoadSummary",
    # Observability
    "FallbackInfo",
    "LocaleEvent",
]


def document_path_segments(name: DocumentName) -> list[str]:
    """Nesting path of a document inside the merged tree.

    The name is split on '/', then its last component is split on '.'.
    Dots in directory components are kept.

    Example:
        >>> document_path_segments("forms/login.errors")
        ['forms', 'login', 'errors']
        >>> document_path_segments("v1.0/common")
        ['v1.0', 'common']
    """
    *directories, last = name.split("/")
    return [*directories, *last.split(".")]


def copy_document(document: JsonValue) -> JsonValue:
    """Copy the containers of a decoded JSON document.

    Iterative (explicit stack) so that any nesting depth json.loads accepts
    can be copied without RecursionError. Leaves are shared.

    Example:
        >>> source = {"a": [{"b": "c"}]}
        >>> copied = copy_document(source)
        >>> copied == source, copied["a"][0] is source["a"][0]
        (True, False)
    """
    if not isinstance(document, (dict, list)):
        return document
    root: JsonValue = {} if isinstance(document, dict) else []
    stack: list[tuple[JsonValue, JsonValue]] = [(document, root)]
    while stack:
        source, target = stack.pop()
        items = source.items() if isinstance(source, dict) else enumerate(source)
        for key, value in items:
            child = value
            if isinstance(value, (dict, list)):
                child = {} if isinstance(value, dict) else []
                stack.append((value, child))
            if isinstance(target, dict):
                target[key] = child
            else:
                target.append(child)
    return root


def merge_document(tree: AssetTree, name: DocumentName, document: JsonValue) -> None:
    """Place ``document`` into ``tree`` under the path derived from ``name``.

    Intermediate values that are not mappings are replaced by fresh
    mappings. The terminal key is overwritten with a deep copy of
    ``document``, so the fetched object is never mutated by later merges.

    Example:
        >>> tree = {}
        >>> merge_document(tree, "common", {"hi": "Hi"})
        >>> merge_document(tree, "forms/login", {"title": "Log in"})
        >>> tree
        {'common': {'hi': 'Hi'}, 'forms': {'login': {'title': 'Log in'}}}
    """
    *parents, leaf = document_path_segments(name)
    node = tree
    for segment in parents:
        child = node.get(segment)
        if not isinstance(child, dict):
            child = {}
            node[segment] = child
        node = child
    node[leaf] = copy_document(document)


def is_empty_document(document: JsonValue) -> bool:
    """Check whether fetched content counts as empty.

    ``null``, ``""``, ``0`` and ``false`` are empty; any object or array
    (including ``{}`` and ``[]``) is content.
    """
    if isinstance(document, (dict, list)):
        return False
    return not document


@dataclass(frozen=True, slots=True)
class AssetLoadResult:
    """Result of fetching a single asset document.

    Attributes:
        locale: Locale the document belongs to
        document: Document name (without '.json')
        status: Load status (success, not_found, error)
        source_path: Path or URL the document was fetched from
        error: Exception if status is not SUCCESS, None otherwise
    """

    locale: Locale
    document: DocumentName
    status: LoadStatus
    source_path: str
    error: Exception | None = None

    @property
    def is_success(self) -> bool:
        """Check if the document loaded successfully."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        """Check if the document was not found."""
        return self.status == LoadStatus.NOT_FOUND

    @property
    def is_error(self) -> bool:
        """Check if the fetch failed with an error."""
        return self.status == LoadStatus.ERROR


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of the document fetches of one load.

    All statistics are computed properties derived from ``results``.

    Attributes:
        locale: Locale that was requested
        results: All individual fetch results (immutable tuple)

    Example:
        >>> ok = await l10n.load("pt-BR")
        >>> summary = l10n.last_load_summary
        >>> for result in summary.get_errors():
        ...     print(f"Failed: {result.source_path}: {result.error}")
    """

    locale: Locale
    results: tuple[AssetLoadResult, ...]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LoadSummary(locale={self.locale}, "
            f"total={self.total_attempted}, "
            f"ok={self.successful}, "
            f"not_found={self.not_found}, "
            f"errors={self.errors})"
        )

    @property
    def total_attempted(self) -> int:
        """Total number of fetch attempts."""
        return len(self.results)

    @property
    def successful(self) -> int:
        """Number of successful fetches."""
        return sum(1 for r in self.results if r.is_success)

    @property
    def not_found(self) -> int:
        """Number of documents not found."""
        return sum(1 for r in self.results if r.is_not_found)

    @property
    def errors(self) -> int:
        """Number of fetch errors."""
        return sum(1 for r in self.results if r.is_error)

    def get_errors(self) -> tuple[AssetLoadResult, ...]:
        """Get all results that did not succeed (errors and not-found)."""
        return tuple(r for r in self.results if not r.is_success)

    def get_successful(self) -> tuple[AssetLoadResult, ...]:
        """Get all successful results."""
        return tuple(r for r in self.results if r.is_success)

    def get_by_locale(self, locale: Locale) -> tuple[AssetLoadResult, ...]:
        """Get all results for a specific locale."""
        return tuple(r for r in self.results if r.locale is locale)

    @property
    def all_successful(self) -> bool:
        """Check if every document loaded (the load was committed)."""
        return self.errors == 0 and self.not_found == 0


@dataclass(frozen=True, slots=True)
class FallbackInfo:
    """Information about a message resolved from a fallback locale.

    Provided to the ``on_fallback`` callback of MsgLocalization.

    Attributes:
        requested_locale: The current locale (head of the chain)
        resolved_locale: The locale that actually contained the message
        message_id: The (suffixed) message key that was resolved
    """

    requested_locale: Locale
    resolved_locale: Locale
    message_id: str


@dataclass(frozen=True, slots=True)
class LocaleEvent:
    """Notification dispatched to listeners after a successful load.

    Attributes:
        type: Event type name ('localeload')
    """

    type: str = LOCALE_LOAD_EVENT
