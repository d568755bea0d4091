"""Tests for AssetStore snapshots and deep key lookup.

Python 3.13+.
"""

from __future__ import annotations

import pytest

from msglocalization.identity import Locale, LocaleRegistry
from msglocalization.localization.store import AssetStore, lookup_message, split_key


@pytest.fixture
def en(registry: LocaleRegistry) -> Locale:
    locale = registry.parse_locale("en")
    assert locale is not None
    return locale


@pytest.fixture
def pt(registry: LocaleRegistry) -> Locale:
    locale = registry.parse_locale("pt")
    assert locale is not None
    return locale


class TestLookupMessage:
    """Deep walk of nested asset trees."""

    def test_nested_string(self) -> None:
        tree = {"common": {"forms": {"title": "Title"}}}
        assert lookup_message(tree, ("common", "forms", "title")) == "Title"

    def test_missing_segment(self) -> None:
        assert lookup_message({"common": {}}, ("common", "missing")) is None

    def test_non_mapping_intermediate(self) -> None:
        assert lookup_message({"common": "text"}, ("common", "title")) is None

    def test_non_string_terminal(self) -> None:
        tree = {"common": {"count": 3, "nested": {"a": "b"}, "list": ["x"]}}
        assert lookup_message(tree, ("common", "count")) is None
        assert lookup_message(tree, ("common", "nested")) is None
        assert lookup_message(tree, ("common", "list")) is None

    def test_missing_tree(self) -> None:
        assert lookup_message(None, ("a",)) is None

    def test_split_key(self) -> None:
        assert split_key("a.b.c") == ("a", "b", "c")
        assert split_key(["a", "b"]) == ("a", "b")


class TestAssetStore:
    """Atomic replacement semantics."""

    def test_empty(self, en: Locale) -> None:
        store = AssetStore()
        assert len(store) == 0
        assert en not in store
        assert store.get(en, "common.hi") is None
        assert store.tree(en) is None

    def test_replace_and_get(self, en: Locale) -> None:
        store = AssetStore()
        store.replace({en: {"common": {"hi": "Hi"}}}, discard_existing=False)
        assert store.get(en, "common.hi") == "Hi"
        assert store.get(en, ["common", "hi"]) == "Hi"
        assert store.loaded_locales == (en,)

    def test_merge_keeps_other_locales(self, en: Locale, pt: Locale) -> None:
        store = AssetStore()
        store.replace({en: {"a": "1"}}, discard_existing=False)
        store.replace({pt: {"a": "2"}}, discard_existing=False)
        assert store.loaded_locales == (en, pt)

    def test_same_locale_overwritten_whole(self, en: Locale) -> None:
        store = AssetStore()
        store.replace({en: {"a": "1", "b": "2"}}, discard_existing=False)
        store.replace({en: {"a": "3"}}, discard_existing=False)
        assert store.get(en, "a") == "3"
        assert store.get(en, "b") is None

    def test_discard_existing(self, en: Locale, pt: Locale) -> None:
        store = AssetStore()
        store.replace({en: {"a": "1"}}, discard_existing=False)
        store.replace({pt: {"a": "2"}}, discard_existing=True)
        assert en not in store
        assert pt in store

    def test_snapshot_unaffected_by_later_replace(self, en: Locale, pt: Locale) -> None:
        store = AssetStore()
        store.replace({en: {"a": "1"}}, discard_existing=False)
        before = store.snapshot()
        store.replace({pt: {"a": "2"}}, discard_existing=True)
        assert en in before
        assert pt not in before

    def test_snapshot_read_only(self, en: Locale) -> None:
        store = AssetStore()
        with pytest.raises(TypeError):
            store.snapshot()[en] = {}  # type: ignore[index]
