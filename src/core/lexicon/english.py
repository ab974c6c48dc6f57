"""
English Lexicon — Статические таблицы английских числительных

Слова для 1-9, 10-19, десятков и разрядов 3-значной группировки.
"""

from types import MappingProxyType
from typing import Final, Mapping


EN_ZERO_WORD: Final[str] = "zero"
EN_HUNDRED_WORD: Final[str] = "hundred"

# Индекс = значение; нулевой элемент пустой
EN_ONES: Final[tuple[str, ...]] = (
    "", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
)

# Индекс = значение - 10
EN_TEENS: Final[tuple[str, ...]] = (
    "ten", "eleven", "twelve", "thirteen", "fourteen",
    "fifteen", "sixteen", "seventeen", "eighteen", "nineteen",
)

# Индекс = количество десятков; 0 и 1 не используются
EN_TENS: Final[tuple[str, ...]] = (
    "", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety",
)

# Индекс = номер 3-значной группы
EN_SCALE_WORDS: Final[tuple[str, ...]] = ("", "thousand", "million", "billion", "trillion")

# Максимальное значение: 999 trillion 999 billion ...
EN_MAX_VALUE: Final[int] = 1000 ** len(EN_SCALE_WORDS) - 1


# =============================================================================
# ОБРАТНЫЕ ТАБЛИЦЫ (для декодера)
# =============================================================================

EN_ONES_VALUES: Final[Mapping[str, int]] = MappingProxyType(
    {word: value for value, word in enumerate(EN_ONES) if word}
)

EN_TEENS_VALUES: Final[Mapping[str, int]] = MappingProxyType(
    {word: value + 10 for value, word in enumerate(EN_TEENS)}
)

EN_TENS_VALUES: Final[Mapping[str, int]] = MappingProxyType(
    {word: value * 10 for value, word in enumerate(EN_TENS) if word}
)

EN_SCALE_VALUES: Final[Mapping[str, int]] = MappingProxyType(
    {word: 1000**index for index, word in enumerate(EN_SCALE_WORDS) if word}
)
