"""Per-locale asset trees with atomic replacement.

The store keeps an immutable snapshot (a read-only mapping from Locale to
asset tree). replace() builds the next snapshot off to the side and
publishes it with a single reference assignment, so a reader holding a
snapshot never sees a partially applied update.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from threading import Lock
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from msglocalization.identity import Locale
    from msglocalization.localization.types import AssetNode, AssetTree

__all__ = ["AssetStore", "lookup_message", "split_key"]


def split_key(key_path: str | Sequence[str]) -> tuple[str, ...]:
    """Split a dotted key into segments ('a.b.c' -> ('a', 'b', 'c'))."""
    if isinstance(key_path, str):
        return tuple(key_path.split("."))
    return tuple(key_path)


def lookup_message(tree: AssetTree | None, segments: Sequence[str]) -> str | None:
    """Deep-walk an asset tree.

    Returns:
        The string at ``segments``, or None if a segment is missing, an
        intermediate value is not a mapping, or the terminal value is not
        a string.
    """
    node: AssetNode = tree
    for segment in segments:
        if not isinstance(node, dict):
            return None
        node = node.get(segment)
    return node if isinstance(node, str) else None


class AssetStore:
    """Holds the loaded asset tree of each locale.

    Thread Safety:
        Writers are serialized by a lock; readers take the current snapshot
        without locking (reference reads are atomic) and keep using it for
        the whole lookup.

    Example:
        >>> store = AssetStore()
        >>> store.replace({en: {"common": {"hi": "Hi"}}}, discard_existing=True)
        >>> store.get(en, "common.hi")
        'Hi'
    """

    __slots__ = ("_snapshot", "_write_lock")

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._snapshot: Mapping[Locale, AssetTree] = MappingProxyType({})
        self._write_lock = Lock()

    def snapshot(self) -> Mapping[Locale, AssetTree]:
        """Current read-only mapping of locale to asset tree."""
        return self._snapshot

    def get(self, locale: Locale, key_path: str | Sequence[str]) -> str | None:
        """Look up a message template for one locale.

        Args:
            locale: Loaded locale
            key_path: Dotted key ('common.messageId') or its segments

        Returns:
            The template string, or None if absent
        """
        return lookup_message(self._snapshot.get(locale), split_key(key_path))

    def tree(self, locale: Locale) -> AssetTree | None:
        """Merged asset tree of ``locale``, or None if not loaded."""
        return self._snapshot.get(locale)

    @property
    def loaded_locales(self) -> tuple[Locale, ...]:
        """Locales with a stored tree, in insertion order."""
        return tuple(self._snapshot)

    def replace(
        self,
        entries: Mapping[Locale, AssetTree],
        *,
        discard_existing: bool,
    ) -> None:
        """Publish new trees as one atomic update.

        Args:
            entries: Locale -> freshly merged asset tree
            discard_existing: Drop all previously stored trees first. When
                False, trees of locales absent from ``entries`` are kept and
                same-locale trees are overwritten.
        """
        with self._write_lock:
            updated: dict[Locale, AssetTree] = {} if discard_existing else dict(self._snapshot)
            updated.update(entries)
            self._snapshot = MappingProxyType(updated)

    def __contains__(self, locale: object) -> bool:
        return locale in self._snapshot

    def __len__(self) -> int:
        return len(self._snapshot)
