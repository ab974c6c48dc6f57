"""
Japanese Numeral Decoder — Японский текст → число

Две стратегии, применяемые по порядку (первая распознавшая побеждает):

1. Смешанная запись (цифры + символы 万/億/兆):
   '300万' → 3000000, '1億2345万6789' → 123456789
   Символ без цифр перед ним считается коэффициентом 1 ('兆' → 10^12).

2. Фонетическая запись (хирагана), конечный автомат:
   'にせんごひゃくろくじゅう' → 2560
   Состояние сканирования:
   - final_result: подтверждённая сумма завершённых групп (万/億/兆)
   - group_value: значение внутри текущей группы (< 10^4)
   - pending_digit: цифра, ожидающая единицу разряда

   Порядок распознавания в каждой позиции КРИТИЧЕН и не меняется:
   (a) старшие единицы (ちょう/おく/まん)
   (b) младшие единицы со всеми эвфоническими вариантами (せん/ぜん, ひゃく/びゃく/ぴゃく, じゅう)
   (c) цифры, длинные чтения первыми ('しち' раньше 'し')
   Нераспознанные символы пропускаются (шум распознавания речи).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Текст без цифр → None (не 0 и не exception)
2. 0 возвращается только для явного нуля ('ぜろ', 'れい', '零', '0')
3. Никаких exceptions для некорректного текста
"""

import logging
import re
import unicodedata
from dataclasses import dataclass
from typing import Final, Optional

from src.codec.digits import parse_digit_run
from src.core.lexicon.japanese import (
    JA_DIGIT_READINGS,
    JA_MAJOR_UNITS,
    JA_MINOR_UNITS,
    JA_ZERO_FORMS,
)

logger = logging.getLogger(__name__)


# Разделители, удаляемые перед разбором (паузы, запятые, пробелы)
_SEPARATORS_RE: Final[re.Pattern[str]] = re.compile(r"[、。，,・\s]+")

# Признак смешанной записи: ASCII-цифра или один из старших символов
_MIXED_MARKER_RE: Final[re.Pattern[str]] = re.compile(
    "[0-9" + "".join(unit.symbol for unit in JA_MAJOR_UNITS) + "]"
)

_DIGIT_RUN_RE: Final[re.Pattern[str]] = re.compile(r"[0-9]+")

_MAJOR_SYMBOL_RES: Final[tuple[tuple[re.Pattern[str], int], ...]] = tuple(
    (re.compile(r"([0-9]*)" + re.escape(unit.symbol)), unit.magnitude)
    for unit in JA_MAJOR_UNITS
)


def strip_separators(text: str) -> str:
    """NFKC (полноширинные цифры → ASCII) и удаление пауз/пробелов/запятых."""
    return _SEPARATORS_RE.sub("", unicodedata.normalize("NFKC", text))


# =============================================================================
# СТРАТЕГИЯ 1: СМЕШАННАЯ ЗАПИСЬ
# =============================================================================


def parse_mixed(text: str) -> Optional[int]:
    """
    Разбор смешанной записи ('300万', '3億5000万', '1兆2000億').

    Для 兆, 億, 万 (от старшего к младшему) находится первое вхождение
    '(цифры)(символ)', коэффициент × множитель добавляется к результату,
    совпавшая подстрока удаляется. Затем добавляется первая оставшаяся
    последовательность цифр (младшая часть).

    Args:
        text: Текст без разделителей (см. strip_separators)

    Returns:
        Сумма или None, если запись не смешанная, сумма равна нулю
        или последовательность цифр длиннее любого поддерживаемого числа
    """
    if not _MIXED_MARKER_RE.search(text):
        return None

    result = 0
    remaining = text

    for pattern, magnitude in _MAJOR_SYMBOL_RES:
        match = pattern.search(remaining)
        if match is None:
            continue
        digits = match.group(1)
        # Символ без цифр → коэффициент 1
        coefficient = parse_digit_run(digits) if digits else 1
        if coefficient is None:
            return None
        result += coefficient * magnitude
        remaining = remaining[: match.start()] + remaining[match.end() :]

    leftover = _DIGIT_RUN_RE.search(remaining)
    if leftover is not None:
        leftover_value = parse_digit_run(leftover.group())
        if leftover_value is None:
            return None
        result += leftover_value

    return result if result > 0 else None


# =============================================================================
# СТРАТЕГИЯ 2: ФОНЕТИЧЕСКИЙ КОНЕЧНЫЙ АВТОМАТ
# =============================================================================


@dataclass
class PhoneticScanState:
    """Состояние сканирования хираганы (три взаимозависимых аккумулятора)."""

    final_result: int = 0
    group_value: int = 0
    pending_digit: int = 0

    def on_major_unit(self, magnitude: int) -> None:
        """万/億/兆: закрыть группу (пустая группа = коэффициент 1)."""
        self.group_value += self.pending_digit
        self.final_result += (self.group_value or 1) * magnitude
        self.group_value = 0
        self.pending_digit = 0

    def on_minor_unit(self, magnitude: int) -> None:
        """千/百/十: умножить ожидающую цифру (или 1) внутри группы."""
        self.group_value += (self.pending_digit or 1) * magnitude
        self.pending_digit = 0

    def on_digit(self, digit: int) -> None:
        """Цифра: сбросить предыдущую ожидающую цифру в группу, запомнить новую."""
        self.group_value += self.pending_digit
        self.pending_digit = digit

    def finish(self) -> int:
        """Конец ввода: свернуть ожидающую цифру и группу в итог."""
        self.group_value += self.pending_digit
        self.final_result += self.group_value
        self.pending_digit = 0
        self.group_value = 0
        return self.final_result


# (чтение, множитель) в порядке приоритета распознавания
_MAJOR_TOKENS: Final[tuple[tuple[str, int], ...]] = tuple(
    (variant, unit.magnitude) for unit in JA_MAJOR_UNITS for variant in unit.variants
)
_MINOR_TOKENS: Final[tuple[tuple[str, int], ...]] = tuple(
    (variant, unit.magnitude) for unit in JA_MINOR_UNITS for variant in unit.variants
)


def _match_token(
    text: str, position: int, tokens: tuple[tuple[str, int], ...]
) -> Optional[tuple[str, int]]:
    for reading, value in tokens:
        if text.startswith(reading, position):
            return reading, value
    return None


def parse_phonetic(text: str) -> Optional[int]:
    """
    Разбор хираганы одним проходом слева направо.

    Args:
        text: Текст без разделителей

    Returns:
        Число или None, если ни одна цифра/единица не распознана
        (или итог равен нулю)

    Examples:
        >>> parse_phonetic("さんびゃくまん")
        3000000
        >>> parse_phonetic("あいうえお") is None
        True
    """
    state = PhoneticScanState()
    position = 0

    while position < len(text):
        major = _match_token(text, position, _MAJOR_TOKENS)
        if major is not None:
            state.on_major_unit(major[1])
            position += len(major[0])
            continue

        minor = _match_token(text, position, _MINOR_TOKENS)
        if minor is not None:
            state.on_minor_unit(minor[1])
            position += len(minor[0])
            continue

        digit = _match_token(text, position, JA_DIGIT_READINGS)
        if digit is not None:
            state.on_digit(digit[1])
            position += len(digit[0])
            continue

        # Нераспознанный символ пропускается
        position += 1

    result = state.finish()
    return result if result > 0 else None


# =============================================================================
# ПУБЛИЧНЫЙ API
# =============================================================================


def decode_japanese(text: str) -> Optional[int]:
    """
    Японский текст (хирагана или смешанная запись) → число.

    Args:
        text: Произвольный текст (в том числе результат распознавания речи)

    Returns:
        Неотрицательное целое или None, если число не распознано
    """
    cleaned = strip_separators(text)

    if cleaned in JA_ZERO_FORMS:
        return 0

    mixed = parse_mixed(cleaned)
    if mixed is not None:
        logger.debug("Japanese mixed parse: %r -> %d", text, mixed)
        return mixed

    phonetic = parse_phonetic(cleaned)
    logger.debug("Japanese phonetic parse: %r -> %r", text, phonetic)
    return phonetic
