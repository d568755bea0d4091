"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization package
and by user code when annotating MsgLocalization call sites.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "AssetNode",
    "AssetTree",
    "DocumentName",
    "JsonValue",
    "MessageKey",
]

type MessageKey = str
"""Dotted message identifier (e.g., 'common.messageId')."""

type DocumentName = str
"""Asset document name without '.json' (e.g., 'common', 'forms/login')."""

type JsonValue = (
    dict[str, JsonValue] | list[JsonValue] | str | int | float | bool | None
)
"""Any value produced by json.loads()."""

type AssetNode = dict[str, AssetNode] | JsonValue
"""A node of an asset tree: a nested mapping or a leaf value."""

type AssetTree = dict[str, AssetNode]
"""Merged asset documents of one locale; string leaves are message templates."""
