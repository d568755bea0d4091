"""Declared fallback graph between locales.

The graph is exactly what the caller declared: if A falls back to B, B does
not fall back to A unless that edge is declared too. Nothing prevents a
cyclic declaration, so every traversal here tracks visited nodes and
terminates on cycles; find_cycles() reports them for diagnostics.

Traversals are iterative (explicit stack) to avoid RecursionError on long
declared chains.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from enum import Enum, auto
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from msglocalization.identity import Locale

__all__ = ["FallbackGraph"]


class _NodeState(Enum):
    """DFS node visitation state for iterative cycle detection."""

    ENTER = auto()  # First visit to node
    EXIT = auto()  # Returning from node (all neighbors processed)


class FallbackGraph:
    """Immutable mapping from a locale to its ordered fallback locales.

    Example:
        >>> graph = FallbackGraph({a: [b], b: [c]})
        >>> graph.chain(a)
        (a, b, c)
        >>> graph.closure(a) == frozenset({b, c})
        True
    """

    __slots__ = ("_edges",)

    def __init__(self, edges: Mapping[Locale, Sequence[Locale]] | None = None) -> None:
        """Initialize from declared edges.

        Duplicate targets within one declaration are dropped, keeping the
        first occurrence.

        Args:
            edges: Locale -> fallback locales in priority order
        """
        frozen: dict[Locale, tuple[Locale, ...]] = {}
        for source, targets in (edges or {}).items():
            frozen[source] = tuple(dict.fromkeys(targets))
        self._edges: Mapping[Locale, tuple[Locale, ...]] = MappingProxyType(frozen)

    @property
    def edges(self) -> Mapping[Locale, tuple[Locale, ...]]:
        """Read-only view of the declared edges."""
        return self._edges

    def fallbacks_of(self, locale: Locale) -> tuple[Locale, ...]:
        """Directly declared fallbacks of ``locale`` (empty if none)."""
        return self._edges.get(locale, ())

    def _walk(self, locale: Locale) -> Iterator[Locale]:
        """Yield locales reachable from ``locale`` in DFS pre-order.

        Each locale is yielded once; ``locale`` itself is yielded only if a
        cycle leads back to it.
        """
        visited: set[Locale] = set()
        # Reversed so that the first declared fallback is popped first
        stack: list[Locale] = list(reversed(self.fallbacks_of(locale)))
        while stack:
            node = stack.pop()
            if node in visited:
                continue
            visited.add(node)
            yield node
            stack.extend(
                target for target in reversed(self.fallbacks_of(node)) if target not in visited
            )

    def closure(self, locale: Locale) -> frozenset[Locale]:
        """All locales reachable by following declared fallback edges.

        Excludes ``locale`` unless it is reachable through a cycle.
        """
        return frozenset(self._walk(locale))

    def chain(self, locale: Locale) -> tuple[Locale, ...]:
        """``locale`` followed by its closure in declaration order.

        This is the message search order and the locale sequence handed to
        formatting APIs. Duplicates and revisits are suppressed.
        """
        ordered = dict.fromkeys((locale,))
        for node in self._walk(locale):
            ordered.setdefault(node, None)
        return tuple(ordered)

    def find_cycles(self) -> list[list[Locale]]:
        """Detect cycles in the declared graph using iterative DFS.

        Returns:
            List of cycles, each a path of locales ending where it started.
            Empty list if the graph is acyclic.
        """
        visited: set[Locale] = set()
        cycles: list[list[Locale]] = []
        seen_cycle_keys: set[frozenset[Locale]] = set()

        for start_node in self._edges:
            if start_node in visited:
                continue

            path: list[Locale] = []
            rec_stack: set[Locale] = set()
            stack: list[tuple[Locale, _NodeState]] = [(start_node, _NodeState.ENTER)]

            while stack:
                node, state = stack.pop()

                if state == _NodeState.EXIT:
                    if path and path[-1] is node:
                        path.pop()
                    rec_stack.discard(node)
                    continue

                if node in visited:
                    continue
                visited.add(node)
                rec_stack.add(node)
                path.append(node)
                stack.append((node, _NodeState.EXIT))

                for neighbor in reversed(self.fallbacks_of(node)):
                    if neighbor not in visited:
                        stack.append((neighbor, _NodeState.ENTER))
                    elif neighbor in rec_stack:
                        cycle = [*path[path.index(neighbor):], neighbor]
                        key = frozenset(cycle)
                        if key not in seen_cycle_keys:
                            seen_cycle_keys.add(key)
                            cycles.append(cycle)

        return cycles

    def to_dict(self) -> dict[str, list[str]]:
        """Declared edges with canonical tags, for reflection."""
        return {
            str(source): [str(target) for target in targets]
            for source, targets in self._edges.items()
        }

    def __len__(self) -> int:
        return len(self._edges)

    def __repr__(self) -> str:
        return f"FallbackGraph({self.to_dict()!r})"
