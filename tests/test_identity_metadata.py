"""Tests for the Babel-backed locale metadata provider.

Python 3.13+.
"""

from __future__ import annotations

import pytest

from msglocalization.enums import TextDirection
from msglocalization.identity.metadata import (
    BabelMetadataProvider,
    LanguageInfo,
    clear_metadata_cache,
)


@pytest.fixture
def provider() -> BabelMetadataProvider:
    return BabelMetadataProvider()


class TestLanguageInfo:
    """Language display metadata from CLDR."""

    def test_known_language(self, provider: BabelMetadataProvider) -> None:
        info = provider.language_info("pt")
        assert info == LanguageInfo(
            direction=TextDirection.LEFT_TO_RIGHT,
            international_name="Portuguese",
            native_name="português",
        )

    def test_right_to_left(self, provider: BabelMetadataProvider) -> None:
        info = provider.language_info("ar")
        assert info is not None
        assert info.direction is TextDirection.RIGHT_TO_LEFT

    def test_case_insensitive(self, provider: BabelMetadataProvider) -> None:
        assert provider.language_info("EN") == provider.language_info("en")

    @pytest.mark.parametrize("language", ["xx", "e1", ""])
    def test_unknown_language(self, provider: BabelMetadataProvider, language: str) -> None:
        assert provider.language_info(language) is None


class TestCountryCodes:
    """ISO 3166-1 alpha-2 / alpha-3 mapping."""

    @pytest.mark.parametrize(
        ("code", "alpha3"),
        [("US", "USA"), ("GB", "GBR"), ("usa", "USA"), ("DEU", "DEU"), ("jp", "JPN")],
    )
    def test_alpha3(self, provider: BabelMetadataProvider, code: str, alpha3: str) -> None:
        assert provider.country_alpha3(code) == alpha3

    def test_deprecated_alpha2_follows_alias(self, provider: BabelMetadataProvider) -> None:
        assert provider.country_alpha3("BU") == "MMR"

    def test_withdrawn_alpha3_maps_to_current(self, provider: BabelMetadataProvider) -> None:
        assert provider.country_alpha3("DDR") == "DEU"

    @pytest.mark.parametrize("code", ["Q", "QQQQ", "XYZ"])
    def test_unknown_codes(self, provider: BabelMetadataProvider, code: str) -> None:
        assert provider.country_alpha3(code) is None

    def test_alpha2(self, provider: BabelMetadataProvider) -> None:
        assert provider.country_alpha2("USA") == "US"
        assert provider.country_alpha2("XYZ") is None


class TestCountryName:
    """Localized territory names."""

    def test_english(self, provider: BabelMetadataProvider) -> None:
        assert provider.country_name("USA", "en") == "United States"

    def test_native(self, provider: BabelMetadataProvider) -> None:
        assert provider.country_name("DEU", "de") == "Deutschland"

    def test_unknown_country(self, provider: BabelMetadataProvider) -> None:
        assert provider.country_name("XYZ", "en") is None

    def test_unknown_language(self, provider: BabelMetadataProvider) -> None:
        assert provider.country_name("USA", "xx") is None


def test_clear_metadata_cache_keeps_answers(provider: BabelMetadataProvider) -> None:
    before = provider.country_alpha3("FR")
    clear_metadata_cache()
    assert provider.country_alpha3("FR") == before == "FRA"
