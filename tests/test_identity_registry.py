"""Tests for pooled Locale and Country identity.

Python 3.13+.
"""

from __future__ import annotations

import threading

import pytest
from hypothesis import given
from hypothesis import strategies as st

from msglocalization.enums import TextDirection
from msglocalization.identity import (
    Country,
    LanguageInfo,
    Locale,
    LocaleRegistry,
    default_registry,
    parse_country,
    parse_locale,
)


class FixedMetadata:
    """Metadata provider with a two-language, two-country table."""

    _languages = {
        "en": LanguageInfo(TextDirection.LEFT_TO_RIGHT, "English", "English"),
        "he": LanguageInfo(TextDirection.RIGHT_TO_LEFT, "Hebrew", "עברית"),
    }
    _alpha3 = {"US": "USA", "USA": "USA", "IL": "ISR", "ISR": "ISR"}
    _names = {("USA", "en"): "United States", ("ISR", "en"): "Israel", ("ISR", "he"): "ישראל"}

    def language_info(self, language: str) -> LanguageInfo | None:
        return self._languages.get(language)

    def country_alpha3(self, code: str) -> str | None:
        return self._alpha3.get(code)

    def country_alpha2(self, alpha3: str) -> str | None:
        return {"USA": "US", "ISR": "IL"}.get(alpha3)

    def country_name(self, alpha3: str, language: str) -> str | None:
        return self._names.get((alpha3, language))


class TestParseLocale:
    """Canonicalization and pooling of locales."""

    def test_canonical_tag(self, registry: LocaleRegistry) -> None:
        locale = registry.parse_locale("en_us")
        assert locale is not None
        assert locale.tag == "en-US"
        assert str(locale) == "en-US"
        assert (locale.language, locale.script, locale.region, locale.variant) == (
            "en",
            None,
            "US",
            None,
        )

    def test_equivalent_spellings_share_instance(self, registry: LocaleRegistry) -> None:
        first = registry.parse_locale("en-US")
        assert first is registry.parse_locale("EN_us")
        assert first is registry.parse_locale("  en-US  ")

    @pytest.mark.parametrize(
        ("alias", "tag"),
        [("us", "en-US"), ("USA", "en-US"), ("br", "pt-BR"), ("jp", "ja")],
    )
    def test_aliases(self, registry: LocaleRegistry, alias: str, tag: str) -> None:
        locale = registry.parse_locale(alias)
        assert locale is not None
        assert locale is registry.parse_locale(tag)

    def test_script_subtag(self, registry: LocaleRegistry) -> None:
        locale = registry.parse_locale("zh-hant-tw")
        assert locale is not None
        assert locale.tag == "zh-Hant-TW"
        assert locale.script == "Hant"

    @pytest.mark.parametrize(
        "text", ["", "not a locale", "xx", "en_US.UTF-8", "de_DE@euro", "12"]
    )
    def test_invalid_text(self, registry: LocaleRegistry, text: str) -> None:
        assert registry.parse_locale(text) is None

    @pytest.mark.parametrize("value", [None, 42, b"en", ["en"]])
    def test_non_string(self, registry: LocaleRegistry, value: object) -> None:
        assert registry.parse_locale(value) is None

    def test_invalid_input_not_cached(self, registry: LocaleRegistry) -> None:
        registry.parse_locale("xx")
        assert registry.cached_locales == ()

    def test_cached_locales_in_creation_order(self, registry: LocaleRegistry) -> None:
        registry.parse_locale("pt-BR")
        registry.parse_locale("en")
        registry.parse_locale("pt_br")
        assert registry.cached_locales == ("pt-BR", "en")

    def test_registries_are_isolated(self, registry: LocaleRegistry) -> None:
        other = LocaleRegistry()
        assert registry.parse_locale("en") is not other.parse_locale("en")

    def test_coerce_locale_passes_instances_through(self, registry: LocaleRegistry) -> None:
        locale = registry.parse_locale("de")
        assert registry.coerce_locale(locale) is locale
        assert registry.coerce_locale("de") is locale
        assert registry.coerce_locale(3.5) is None

    def test_concurrent_parses_return_one_instance(self, registry: LocaleRegistry) -> None:
        results: list[Locale | None] = []
        barrier = threading.Barrier(8)

        def worker() -> None:
            barrier.wait()
            results.append(registry.parse_locale("fr-CA"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == 8
        assert all(result is results[0] for result in results)

    @given(st.sampled_from(["en-US", "en_US", "EN-us", "en_us", "us", "usa"]))
    def test_spelling_variants_property(self, text: str) -> None:
        assert parse_locale(text) is parse_locale("en-US")


class TestLocaleMetadata:
    """Derived display metadata."""

    def test_international_name(self, registry: LocaleRegistry) -> None:
        locale = registry.parse_locale("pt-BR")
        assert locale is not None
        assert locale.international_name == "Portuguese"

    def test_native_name_with_region(self, registry: LocaleRegistry) -> None:
        locale = registry.parse_locale("pt-BR")
        assert locale is not None
        assert locale.native_name == "português (Brasil)"

    def test_native_name_without_country(self, registry: LocaleRegistry) -> None:
        locale = registry.parse_locale("en")
        assert locale is not None
        assert locale.native_name == "English"

    def test_native_name_with_default_country(self, registry: LocaleRegistry) -> None:
        locale = registry.parse_locale("ja")
        assert locale is not None
        assert locale.native_name == "日本語 (日本)"

    def test_direction(self, registry: LocaleRegistry) -> None:
        arabic = registry.parse_locale("ar")
        english = registry.parse_locale("en")
        assert arabic is not None
        assert english is not None
        assert arabic.direction is TextDirection.RIGHT_TO_LEFT
        assert english.direction is TextDirection.LEFT_TO_RIGHT


class TestLocaleCountry:
    """Country association of locales."""

    def test_region_subtag(self, registry: LocaleRegistry) -> None:
        locale = registry.parse_locale("en-US")
        assert locale is not None
        assert locale.country is registry.parse_country("USA")

    @pytest.mark.parametrize(("tag", "alpha3"), [("fr", "FRA"), ("ja", "JPN"), ("ru", "RUS")])
    def test_default_language_country(
        self, registry: LocaleRegistry, tag: str, alpha3: str
    ) -> None:
        locale = registry.parse_locale(tag)
        assert locale is not None
        country = locale.country
        assert country is not None
        assert country.code == alpha3

    def test_no_country(self, registry: LocaleRegistry) -> None:
        locale = registry.parse_locale("en")
        assert locale is not None
        assert locale.country is None

    def test_script_suppresses_default_country(self, registry: LocaleRegistry) -> None:
        locale = registry.parse_locale("ru-Latn")
        assert locale is not None
        assert locale.country is None


class TestParseCountry:
    """Canonicalization and pooling of countries."""

    def test_alpha2_and_alpha3_share_instance(self, registry: LocaleRegistry) -> None:
        country = registry.parse_country("us")
        assert country is not None
        assert country is registry.parse_country("USA")
        assert country.code == "USA"
        assert country.alpha2 == "US"
        assert str(country) == "USA"

    def test_international_name(self, registry: LocaleRegistry) -> None:
        country = registry.parse_country("US")
        assert country is not None
        assert country.international_name == "United States"

    def test_localized_name(self, registry: LocaleRegistry) -> None:
        country = registry.parse_country("DE")
        german = registry.parse_locale("de")
        assert country is not None
        assert german is not None
        assert country.get_name(german) == "Deutschland"

    def test_withdrawn_code_shares_current_instance(self, registry: LocaleRegistry) -> None:
        assert registry.parse_country("DDR") is registry.parse_country("DEU")

    @pytest.mark.parametrize("text", ["", "U1", "1US", "XYZ", "Q"])
    def test_invalid_codes(self, registry: LocaleRegistry, text: str) -> None:
        assert registry.parse_country(text) is None

    def test_non_string(self, registry: LocaleRegistry) -> None:
        assert registry.parse_country(840) is None

    def test_cached_countries(self, registry: LocaleRegistry) -> None:
        registry.parse_country("BR")
        registry.parse_country("bra")
        assert registry.cached_countries == ("BRA",)


class TestConstructionGuard:
    """Locale and Country can only be created by a registry."""

    def test_locale_direct_construction(self, registry: LocaleRegistry) -> None:
        info = LanguageInfo(TextDirection.LEFT_TO_RIGHT, "English", "English")
        with pytest.raises(TypeError, match="does not support direct construction"):
            Locale(
                tag="en",
                language="en",
                script=None,
                region=None,
                variant=None,
                _info=info,
                _registry=registry,
            )

    def test_country_direct_construction_with_wrong_token(
        self, registry: LocaleRegistry
    ) -> None:
        with pytest.raises(TypeError, match=r"LocaleRegistry\.parse_country\(\)"):
            Country(code="USA", alpha2="US", _registry=registry, _factory_token=object())


class TestCustomMetadata:
    """Registries over a non-Babel metadata provider."""

    def test_uses_provider_tables(self) -> None:
        registry = LocaleRegistry(FixedMetadata())
        hebrew = registry.parse_locale("he-IL")
        assert hebrew is not None
        assert hebrew.direction is TextDirection.RIGHT_TO_LEFT
        assert hebrew.native_name == "עברית (ישראל)"
        assert registry.parse_locale("de") is None

    def test_country_name_falls_back_to_english(self) -> None:
        registry = LocaleRegistry(FixedMetadata())
        hebrew = registry.parse_locale("he")
        country = registry.parse_country("US")
        assert hebrew is not None
        assert country is not None
        assert country.get_name(hebrew) == "United States"


class TestDefaultRegistry:
    """Module-level helpers."""

    def test_default_registry_is_shared(self) -> None:
        assert default_registry() is default_registry()

    def test_module_functions_use_default_registry(self) -> None:
        assert parse_locale("en") is default_registry().parse_locale("en")
        assert parse_country("US") is default_registry().parse_country("USA")
