"""Pytest configuration for msglocalization test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Shared fixtures:
- registry: fresh LocaleRegistry (isolated Locale/Country pools)
- memory_fetcher: in-memory AssetFetcher that records every fetched path
- asset_dir: temporary directory tree of JSON documents for filesystem loads
"""

from __future__ import annotations

import json
import os
from typing import TYPE_CHECKING, Any

import pytest
from hypothesis import Phase, Verbosity, settings

from msglocalization.errors import AssetFetchError, AssetNotFoundError
from msglocalization.identity import LocaleRegistry

if TYPE_CHECKING:
    from pathlib import Path

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

# Development profile: thorough local testing (500 examples, silent)
settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

# CI profile: fast feedback for GitHub Actions (50 examples)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

# Verbose profile: debug mode with progress visibility (100 examples)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# TEST DOUBLES
# =============================================================================


class MemoryFetcher:
    """AssetFetcher serving documents from a dict keyed by path.

    Missing paths raise AssetNotFoundError; paths listed in ``broken`` raise
    AssetFetchError. Every requested path is appended to ``requests``.
    """

    def __init__(self, documents: dict[str, Any] | None = None) -> None:
        self.documents: dict[str, Any] = dict(documents or {})
        self.broken: set[str] = set()
        self.requests: list[str] = []

    async def fetch(self, path: str) -> Any:
        self.requests.append(path)
        if path in self.broken:
            msg = f"Simulated transport failure for {path}"
            raise AssetFetchError(msg, path=path)
        try:
            return self.documents[path]
        except KeyError:
            msg = f"Resource not found at {path}"
            raise AssetNotFoundError(msg, path=path) from None


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def registry() -> LocaleRegistry:
    """Fresh registry so pooled instances do not leak between tests."""
    return LocaleRegistry()


@pytest.fixture
def memory_fetcher() -> MemoryFetcher:
    """Empty in-memory fetcher; tests populate ``documents``."""
    return MemoryFetcher()


@pytest.fixture
def asset_dir(tmp_path: Path) -> Path:
    """Asset tree with en-US and pt-BR 'common' and 'forms/login' documents."""
    documents = {
        "en-US/common.json": {"messageId": "Hi", "greeting": "Hello, $name", "onlyEn": "English"},
        "en-US/forms/login.json": {"title": "Log in"},
        "pt-BR/common.json": {"messageId": "Oi", "greeting": "Olá, $name"},
        "pt-BR/forms/login.json": {"title": "Entrar"},
    }
    for relative, content in documents.items():
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(content, ensure_ascii=False), encoding="utf-8")
    return tmp_path
