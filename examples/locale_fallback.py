"""MsgLocalization Example - Multi-Locale Fallback Chains.

Demonstrates loading JSON assets from the filesystem and resolving messages
along a declared fallback chain.

Scenarios covered:
1. Partial Brazilian Portuguese translations falling back to English
2. Gender and plural key suffixes
3. Failed loads leave the engine untouched

Python 3.13+.
"""

from __future__ import annotations

import asyncio
import json
import logging
import tempfile
from pathlib import Path

from msglocalization import FallbackInfo, Gender, MsgLocalization

ASSETS = {
    "en-US/common.json": {
        "welcome": "Hello, $name!",
        "cart": "Cart",
        "paymentSuccess": "Payment successful!",
        "inboxFemale": "She has $count new messages",
        "inboxMale": "He has $count new messages",
        "itemsOne": "$number item",
        "itemsOther": "$number items",
    },
    "pt-BR/common.json": {
        "welcome": "Olá, $name!",
        "cart": "Carrinho",
        "itemsOne": "$number item",
        "itemsOther": "$number itens",
    },
}


def write_assets(root: Path) -> None:
    for relative, document in ASSETS.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(document, ensure_ascii=False), encoding="utf-8")


def report_fallback(info: FallbackInfo) -> None:
    print(f"  (fallback: '{info.message_id}' from {info.resolved_locale})")


async def example_1_basic_fallback(root: Path) -> None:
    """Example 1: Basic two-locale fallback (pt-BR -> en-US)."""
    print("=" * 60)
    print("Example 1: Basic Fallback (pt-BR -> en-US)")
    print("=" * 60)

    l10n = MsgLocalization(
        {
            "supportsLocales": ["en-US", "pt-BR"],
            "defaultLocale": "en-US",
            "fallbacks": {"pt-BR": "en-US"},
            "assets": {"src": str(root), "files": ["common"], "loadAssetsVia": "fileSystem"},
        },
        on_fallback=report_fallback,
    )
    await l10n.load("pt-BR")

    print(f"\nLocale sequence: {l10n.current_locale_sequence_as_strings}")
    print(f"  welcome: {l10n.t('common.welcome', {'name': 'Ana'})}")
    print(f"  cart: {l10n.t('common.cart')}")
    print(f"  paymentSuccess: {l10n.t('common.paymentSuccess')}")
    print(f"  missing: {l10n.t('common.missing')}")


async def example_2_suffixes(root: Path) -> None:
    """Example 2: Gender and plural suffixes."""
    print("\n" + "=" * 60)
    print("Example 2: Gender and Plural Suffixes")
    print("=" * 60)

    l10n = MsgLocalization(
        {
            "supportsLocales": ["en-US"],
            "assets": {"src": str(root), "files": ["common"], "loadAssetsVia": "fileSystem"},
        }
    )
    await l10n.load("en-US")

    print(f"\n  {l10n.t('common.inbox', Gender.FEMALE, {'count': 3})}")
    print(f"  {l10n.t('common.inbox', Gender.MALE, {'count': 1})}")
    for n in (1, 2, 21):
        print(f"  {l10n.t('common.items', l10n.plural_selector(n))}")


async def example_3_failed_load(root: Path) -> None:
    """Example 3: A missing document rejects the whole load."""
    print("\n" + "=" * 60)
    print("Example 3: All-or-Nothing Loading")
    print("=" * 60)

    l10n = MsgLocalization(
        {
            "supportsLocales": ["en-US", "pt-BR"],
            "fallbacks": {"pt-BR": "en-US"},
            "assets": {
                "src": str(root),
                "files": ["common", "checkout"],
                "loadAssetsVia": "fileSystem",
            },
        }
    )
    loaded = await l10n.load("pt-BR")
    print(f"\n  loaded: {loaded}, current locale: {l10n.current_locale}")
    summary = l10n.last_load_summary
    if summary is not None:
        for result in summary.get_errors():
            print(f"  failed: {result.source_path} ({result.status})")


async def main() -> None:
    logging.basicConfig(level=logging.WARNING)
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        write_assets(root)
        await example_1_basic_fallback(root)
        await example_2_suffixes(root)
        await example_3_failed_load(root)


if __name__ == "__main__":
    asyncio.run(main())
