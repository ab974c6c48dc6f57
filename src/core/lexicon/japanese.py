"""
Japanese Lexicon — Статические таблицы японских числительных

Хирагана-чтения цифр, единиц разрядов и эвфонических изменений
(連濁 / 半濁音化) для 4-значной системы группировки (万 / 億 / 兆).

Все таблицы неизменяемые (tuple / MappingProxyType) и не содержат состояния.
Вопрос "какие звуковые изменения существуют" решается только здесь.
"""

from types import MappingProxyType
from typing import Final, Mapping, NamedTuple


class ScaleUnit(NamedTuple):
    """Единица разряда: основное чтение, все варианты написания, символ, множитель."""

    reading: str
    variants: tuple[str, ...]
    symbol: str
    magnitude: int


# =============================================================================
# ЦИФРЫ
# =============================================================================

# Индекс = значение цифры
JA_DIGITS: Final[tuple[str, ...]] = (
    "ぜろ", "いち", "に", "さん", "よん", "ご", "ろく", "なな", "はち", "きゅう",
)

JA_ZERO_WORD: Final[str] = JA_DIGITS[0]

# Формы, которые явно обозначают ноль (после удаления разделителей)
JA_ZERO_FORMS: Final[frozenset[str]] = frozenset({"ぜろ", "れい", "零", "0"})

# Альтернативные чтения, встречающиеся в речи:
# - し / しち / く — старые чтения 4 / 7 / 9
# - いっ / ろっ / はっ — удвоенные (促音) формы перед せん / ぴゃく
JA_IRREGULAR_READINGS: Final[Mapping[str, int]] = MappingProxyType(
    {
        "し": 4,
        "しち": 7,
        "く": 9,
        "いっ": 1,
        "ろっ": 6,
        "はっ": 8,
    }
)


def _build_digit_readings() -> tuple[tuple[str, int], ...]:
    readings = {reading: value for value, reading in enumerate(JA_DIGITS)}
    readings.update(JA_IRREGULAR_READINGS)
    # Длинные чтения первыми: 'しち' должно совпасть раньше 'し'
    return tuple(sorted(readings.items(), key=lambda item: len(item[0]), reverse=True))


JA_DIGIT_READINGS: Final[tuple[tuple[str, int], ...]] = _build_digit_readings()


# =============================================================================
# ЕДИНИЦЫ РАЗРЯДОВ
# =============================================================================

JA_TEN: Final[ScaleUnit] = ScaleUnit("じゅう", ("じゅう",), "十", 10)
JA_HUNDRED: Final[ScaleUnit] = ScaleUnit("ひゃく", ("ひゃく", "びゃく", "ぴゃく"), "百", 100)
JA_THOUSAND: Final[ScaleUnit] = ScaleUnit("せん", ("せん", "ぜん"), "千", 1_000)

JA_MAN: Final[ScaleUnit] = ScaleUnit("まん", ("まん",), "万", 10_000)
JA_OKU: Final[ScaleUnit] = ScaleUnit("おく", ("おく",), "億", 100_000_000)
JA_CHO: Final[ScaleUnit] = ScaleUnit("ちょう", ("ちょう",), "兆", 1_000_000_000_000)

# Младшие единицы умножают ожидающую цифру внутри группы (< 10^4)
JA_MINOR_UNITS: Final[tuple[ScaleUnit, ...]] = (JA_THOUSAND, JA_HUNDRED, JA_TEN)

# Старшие единицы закрывают группу; порядок — от старшей к младшей
JA_MAJOR_UNITS: Final[tuple[ScaleUnit, ...]] = (JA_CHO, JA_OKU, JA_MAN)

# Пауза между старшими группами в произносимой форме
JA_PAUSE: Final[str] = "、"

# Максимальное значение: 9999兆9999億9999万9999
JA_MAX_VALUE: Final[int] = 10**16 - 1


# =============================================================================
# ЭВФОНИЯ
# =============================================================================

# (основное чтение единицы, цифра) → изменённое чтение
JA_EUPHONY: Final[Mapping[tuple[str, int], str]] = MappingProxyType(
    {
        ("ひゃく", 3): "びゃく",
        ("ひゃく", 6): "ぴゃく",
        ("ひゃく", 8): "ぴゃく",
        ("せん", 3): "ぜん",
    }
)


def apply_euphony(unit: str, digit: int) -> str:
    """
    Чтение единицы разряда после цифры с учётом звуковых изменений.

    Функция тотальна: для пар, отсутствующих в JA_EUPHONY, возвращает
    основное чтение без изменений.

    Args:
        unit: Основное чтение единицы (например, 'ひゃく')
        digit: Предшествующая цифра 1-9

    Returns:
        Чтение единицы после цифры

    Examples:
        >>> apply_euphony("ひゃく", 3)
        'びゃく'
        >>> apply_euphony("せん", 8)
        'せん'
    """
    return JA_EUPHONY.get((unit, digit), unit)
