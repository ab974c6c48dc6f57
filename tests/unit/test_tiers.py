"""
Тесты для уровней проверки (TIER 0-3)

Каждый уровень тестируется изолированно: вход — уже нормализованные строки
или извлечённое число, выход — результат уровня.
"""

import pytest

from src.core.domain import Language
from src.validator import ValidatorConfig
from src.validator.tiers import Tier00Exact, Tier01Numeric, Tier02Fuzzy, Tier03Variant


@pytest.fixture
def config() -> ValidatorConfig:
    return ValidatorConfig()


class TestTier00Exact:
    """TIER 0: Exact"""

    def test_equal(self, config: ValidatorConfig) -> None:
        result = Tier00Exact(config).evaluate("two thousand", "two thousand")
        assert result.matched is True
        assert result.confidence == 1.0
        assert "PASS" in result.details

    def test_not_equal(self, config: ValidatorConfig) -> None:
        result = Tier00Exact(config).evaluate("two thousand", "three thousand")
        assert result.matched is False
        assert result.confidence == 0.0


class TestTier01Numeric:
    """TIER 1: Numeric"""

    @pytest.mark.parametrize(
        "raw, language, expected",
        [
            ("2560", Language.EN, 2560),
            (" 2,560 ", Language.EN, 2560),
            ("1 000 000", Language.EN, 1_000_000),
            ("0", Language.JA, 0),
            ("two thousand five hundred sixty", Language.EN, 2560),
            ("300万", Language.JA, 3_000_000),
            ("さんびゃくまん", Language.JA, 3_000_000),
            ("ぜろ", Language.JA, 0),
            ("blah", Language.EN, None),
            ("", Language.EN, None),
            ("あいうえお", Language.JA, None),
            ("２５６０", Language.EN, 2560),
            ("２，５６０", Language.EN, 2560),
            ("1" * 5000, Language.EN, None),
            ("1" * 5000, Language.JA, None),
        ],
    )
    def test_extract_number(self, raw: str, language: Language, expected) -> None:
        assert Tier01Numeric.extract_number(raw, language) == expected

    def test_match(self, config: ValidatorConfig) -> None:
        result = Tier01Numeric(config).evaluate(2560, 2560)
        assert result.matched is True
        assert result.confidence == 0.95
        assert result.user_number == 2560

    def test_mismatch_keeps_user_number(self, config: ValidatorConfig) -> None:
        result = Tier01Numeric(config).evaluate(2000, 2560)
        assert result.matched is False
        assert result.user_number == 2000
        assert "2000" in result.details

    def test_not_parsed(self, config: ValidatorConfig) -> None:
        result = Tier01Numeric(config).evaluate(None, 2560)
        assert result.matched is False
        assert result.user_number is None

    def test_zero_matches_zero(self, config: ValidatorConfig) -> None:
        """0 — валидное число, не 'не распознано'"""
        assert Tier01Numeric(config).evaluate(0, 0).matched is True


class TestTier02Fuzzy:
    """TIER 2: Fuzzy"""

    def test_above_threshold(self, config: ValidatorConfig) -> None:
        result = Tier02Fuzzy(config).evaluate(
            "two thousand five hundred and sixty",
            "two thousand five hundred sixty",
        )
        assert result.matched is True
        assert result.confidence == pytest.approx(1 - 4 / 35)
        assert result.similarity == result.confidence

    def test_below_threshold_keeps_similarity(self, config: ValidatorConfig) -> None:
        result = Tier02Fuzzy(config).evaluate("two thousand", "two thousand five hundred sixty")
        assert result.matched is False
        assert result.confidence == 0.0
        assert 0.0 < result.similarity < 0.8

    def test_threshold_inclusive(self) -> None:
        """similarity == порог → принято"""
        result = Tier02Fuzzy(ValidatorConfig(fuzzy_threshold=0.75)).evaluate("abcd", "abcf")
        assert result.matched is True


class TestTier03Variant:
    """TIER 3: Variant (только японский)"""

    def test_no_space_variant(self, config: ValidatorConfig) -> None:
        """Ответ без пробелов совпадает с вариантом эталона без пробелов"""
        result = Tier03Variant(config).evaluate("いちまんにせん", "いち まん に せん", Language.JA)
        assert result.matched is True
        assert result.confidence == 1.0
        assert result.matched_variant == "いちまんにせん"

    def test_not_applicable_for_english(self, config: ValidatorConfig) -> None:
        result = Tier03Variant(config).evaluate("twothousand", "two thousand", Language.EN)
        assert result.matched is False
        assert result.matched_variant is None
        assert "not applicable" in result.details

    def test_no_variant_matches(self, config: ValidatorConfig) -> None:
        result = Tier03Variant(config).evaluate("ごまん", "いち まん に せん", Language.JA)
        assert result.matched is False
        assert result.confidence == 0.0
