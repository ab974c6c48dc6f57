"""
Тесты для лексических таблиц (японский / английский)

Проверяет:
1. Таблицу эвфонии (тотальность, identity по умолчанию)
2. Порядок чтений цифр (длинные первыми)
3. Порядок и множители единиц разрядов
4. Обратные английские таблицы
"""

import pytest

from src.core.lexicon import (
    EN_MAX_VALUE,
    EN_ONES_VALUES,
    EN_SCALE_VALUES,
    EN_TEENS_VALUES,
    EN_TENS_VALUES,
    JA_DIGIT_READINGS,
    JA_EUPHONY,
    JA_MAJOR_UNITS,
    JA_MAX_VALUE,
    JA_MINOR_UNITS,
    apply_euphony,
)


class TestEuphony:
    """Тесты для apply_euphony"""

    @pytest.mark.parametrize(
        "unit, digit, expected",
        [
            ("ひゃく", 3, "びゃく"),
            ("ひゃく", 6, "ぴゃく"),
            ("ひゃく", 8, "ぴゃく"),
            ("せん", 3, "ぜん"),
        ],
    )
    def test_sound_changes(self, unit: str, digit: int, expected: str) -> None:
        """Документированные звуковые изменения"""
        assert apply_euphony(unit, digit) == expected

    @pytest.mark.parametrize("digit", range(1, 10))
    def test_total_over_digits(self, digit: int) -> None:
        """Функция определена для всех цифр 1-9 и всех единиц"""
        for unit in ("じゅう", "ひゃく", "せん", "まん"):
            assert apply_euphony(unit, digit)

    def test_identity_for_unmapped(self) -> None:
        """Пары вне таблицы возвращают основное чтение"""
        assert apply_euphony("せん", 8) == "せん"
        assert apply_euphony("ひゃく", 2) == "ひゃく"
        assert apply_euphony("じゅう", 3) == "じゅう"
        assert apply_euphony("ひゃく", 1) == "ひゃく"

    def test_table_is_immutable(self) -> None:
        """Таблица эвфонии неизменяема"""
        with pytest.raises(TypeError):
            JA_EUPHONY[("せん", 6)] = "ぜん"  # type: ignore[index]


class TestJapaneseTables:
    """Тесты японских таблиц"""

    def test_digit_readings_longest_first(self) -> None:
        """Длинные чтения идут раньше коротких"""
        lengths = [len(reading) for reading, _ in JA_DIGIT_READINGS]
        assert lengths == sorted(lengths, reverse=True)

    def test_shichi_before_shi(self) -> None:
        """'しち' (7) проверяется раньше 'し' (4)"""
        readings = [reading for reading, _ in JA_DIGIT_READINGS]
        assert readings.index("しち") < readings.index("し")

    def test_irregular_readings_present(self) -> None:
        """Альтернативные чтения 4 / 7 / 9"""
        readings = dict(JA_DIGIT_READINGS)
        assert readings["し"] == 4
        assert readings["しち"] == 7
        assert readings["く"] == 9
        assert readings["よん"] == 4
        assert readings["なな"] == 7
        assert readings["きゅう"] == 9

    def test_major_units_descending(self) -> None:
        """Старшие единицы: 兆 → 億 → 万"""
        assert [unit.magnitude for unit in JA_MAJOR_UNITS] == [10**12, 10**8, 10**4]
        assert [unit.symbol for unit in JA_MAJOR_UNITS] == ["兆", "億", "万"]

    def test_minor_units_descending(self) -> None:
        """Младшие единицы: 千 → 百 → 十, со всеми вариантами"""
        assert [unit.magnitude for unit in JA_MINOR_UNITS] == [1000, 100, 10]
        hundred = JA_MINOR_UNITS[1]
        assert set(hundred.variants) == {"ひゃく", "びゃく", "ぴゃく"}

    def test_max_value(self) -> None:
        """Максимум: 9999兆9999億9999万9999"""
        assert JA_MAX_VALUE == 9999_9999_9999_9999


class TestEnglishTables:
    """Тесты английских обратных таблиц"""

    def test_ones(self) -> None:
        assert EN_ONES_VALUES["one"] == 1
        assert EN_ONES_VALUES["nine"] == 9
        assert "" not in EN_ONES_VALUES

    def test_teens(self) -> None:
        assert EN_TEENS_VALUES["ten"] == 10
        assert EN_TEENS_VALUES["nineteen"] == 19

    def test_tens(self) -> None:
        assert EN_TENS_VALUES["twenty"] == 20
        assert EN_TENS_VALUES["ninety"] == 90
        assert len(EN_TENS_VALUES) == 8

    def test_scales(self) -> None:
        assert EN_SCALE_VALUES == {
            "thousand": 1_000,
            "million": 1_000_000,
            "billion": 1_000_000_000,
            "trillion": 1_000_000_000_000,
        }

    def test_max_value(self) -> None:
        assert EN_MAX_VALUE == 999_999_999_999_999
