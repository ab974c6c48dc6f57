"""
Numeral Encoder — Число → произносимый текст / сгруппированная запись

Японский (произносимая форма):
    value = 兆 × 10^12 + 億 × 10^8 + 万 × 10^4 + остаток
    Каждая ненулевая группа (1-9999) рендерится общим group renderer,
    группы соединяются паузой '、'.
    Пример: 12345 → 'いちまん、にせんさんびゃくよんじゅうご'

Английский (произносимая форма):
    3-значные группы от младшей к старшей, слово разряда для групп > 0.
    Пример: 12345 → 'twelve thousand three hundred forty-five'

Сгруппированная запись:
    Японский: '1億2345万6789' (символы 万/億/兆, без разделителей)
    Английский: '123,456,789' (запятая каждые 3 цифры)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. 0 → слово нуля ('ぜろ' / 'zero'), никогда не пустая строка
2. decode(encode_spoken(v, L), L) == v для всех v в домене
3. Отрицательное значение или выход за максимальный разряд →
   NumeralDomainViolation (ошибка вызывающего кода, не пользовательский ввод)
"""

from src.core.domain.language import Language
from src.core.lexicon.english import (
    EN_HUNDRED_WORD,
    EN_MAX_VALUE,
    EN_ONES,
    EN_SCALE_WORDS,
    EN_TEENS,
    EN_TENS,
    EN_ZERO_WORD,
)
from src.core.lexicon.japanese import (
    JA_DIGITS,
    JA_MAJOR_UNITS,
    JA_MAX_VALUE,
    JA_MINOR_UNITS,
    JA_PAUSE,
    JA_ZERO_WORD,
    apply_euphony,
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NumeralDomainViolation(ValueError):
    """
    Значение вне поддерживаемого домена кодировщика.

    Отрицательные числа, числа больше максимального разряда и не-int значения.
    Сигнализирует об ошибке вызывающего кода: диапазон проверяется до вызова.
    """

    pass


def _check_domain(value: int, max_value: int, language: Language) -> None:
    # bool — подкласс int, но числом не является
    if isinstance(value, bool) or not isinstance(value, int):
        raise NumeralDomainViolation(
            f"Numeral value must be int, got {type(value).__name__}: {value!r}"
        )
    if value < 0:
        raise NumeralDomainViolation(f"Numeral value cannot be negative: {value}")
    if value > max_value:
        raise NumeralDomainViolation(
            f"Numeral value {value} exceeds maximum {max_value} for language={language.value}"
        )


# =============================================================================
# ЯПОНСКИЙ
# =============================================================================


def _japanese_group(num: int) -> str:
    """Group renderer: 1-9999 → хирагана (千/百/十 + единицы)."""
    parts: list[str] = []

    for unit in JA_MINOR_UNITS:
        coefficient, num = divmod(num, unit.magnitude)
        if coefficient == 0:
            continue
        if coefficient == 1:
            # 千, 百, 十 без 'いち'
            parts.append(apply_euphony(unit.reading, 1))
        else:
            parts.append(JA_DIGITS[coefficient] + apply_euphony(unit.reading, coefficient))

    if num > 0:
        parts.append(JA_DIGITS[num])

    return "".join(parts)


def to_japanese(num: int) -> str:
    """
    Число → японская произносимая форма (хирагана).

    Args:
        num: Неотрицательное целое, не больше JA_MAX_VALUE

    Returns:
        Хирагана-текст; старшие группы разделены '、'

    Raises:
        NumeralDomainViolation: Если num вне домена

    Examples:
        >>> to_japanese(2560)
        'にせんごひゃくろくじゅう'
        >>> to_japanese(100000000)
        'いちおく'
    """
    _check_domain(num, JA_MAX_VALUE, Language.JA)

    if num == 0:
        return JA_ZERO_WORD

    parts: list[str] = []
    for unit in JA_MAJOR_UNITS:
        coefficient, num = divmod(num, unit.magnitude)
        if coefficient > 0:
            # Перед старшей единицей коэффициент 1 произносится ('いちまん')
            parts.append(_japanese_group(coefficient) + unit.reading)

    if num > 0:
        parts.append(_japanese_group(num))

    return JA_PAUSE.join(parts)


def format_japanese_numeric(num: int) -> str:
    """
    Число → японская сгруппированная запись ('1億2345万6789').

    Нулевые группы опускаются, разделители не вставляются; 0 → '0'.

    Raises:
        NumeralDomainViolation: Если num вне домена
    """
    _check_domain(num, JA_MAX_VALUE, Language.JA)

    parts: list[str] = []
    for unit in JA_MAJOR_UNITS:
        coefficient, num = divmod(num, unit.magnitude)
        if coefficient > 0:
            parts.append(f"{coefficient}{unit.symbol}")

    if num > 0 or not parts:
        parts.append(str(num))

    return "".join(parts)


# =============================================================================
# АНГЛИЙСКИЙ
# =============================================================================


def _english_group(num: int) -> str:
    """Group renderer: 1-999 → слова (hundreds + teens | tens-ones | ones)."""
    parts: list[str] = []

    hundreds, num = divmod(num, 100)
    if hundreds > 0:
        parts.append(f"{EN_ONES[hundreds]} {EN_HUNDRED_WORD}")

    if num >= 20:
        tens, ones = divmod(num, 10)
        if ones > 0:
            parts.append(f"{EN_TENS[tens]}-{EN_ONES[ones]}")
        else:
            parts.append(EN_TENS[tens])
    elif num >= 10:
        parts.append(EN_TEENS[num - 10])
    elif num > 0:
        parts.append(EN_ONES[num])

    return " ".join(parts)


def to_english(num: int) -> str:
    """
    Число → английская произносимая форма.

    Args:
        num: Неотрицательное целое, не больше EN_MAX_VALUE

    Returns:
        Текст словами, группы разделены пробелом

    Raises:
        NumeralDomainViolation: Если num вне домена

    Examples:
        >>> to_english(1234567)
        'one million two hundred thirty-four thousand five hundred sixty-seven'
    """
    _check_domain(num, EN_MAX_VALUE, Language.EN)

    if num == 0:
        return EN_ZERO_WORD

    parts: list[str] = []
    group_index = 0
    while num > 0:
        num, group = divmod(num, 1000)
        if group > 0:
            scale_word = EN_SCALE_WORDS[group_index]
            group_text = _english_group(group)
            parts.insert(0, f"{group_text} {scale_word}" if scale_word else group_text)
        group_index += 1

    return " ".join(parts)


def format_english_numeric(num: int) -> str:
    """
    Число → западная запись с запятой каждые 3 цифры ('1,234,567').

    Raises:
        NumeralDomainViolation: Если num вне домена
    """
    _check_domain(num, EN_MAX_VALUE, Language.EN)
    return f"{num:,}"


# =============================================================================
# DISPATCH
# =============================================================================


def encode_spoken(value: int, language: Language) -> str:
    """
    Число → произносимая форма на выбранном языке.

    Args:
        value: Неотрицательное целое
        language: Language.JA или Language.EN

    Returns:
        Текст числительного

    Raises:
        NumeralDomainViolation: Если value вне домена языка
    """
    if language == Language.JA:
        return to_japanese(value)
    return to_english(value)


def encode_grouped(value: int, language: Language) -> str:
    """
    Число → сгруппированная цифровая запись на выбранном языке.

    Raises:
        NumeralDomainViolation: Если value вне домена языка
    """
    if language == Language.JA:
        return format_japanese_numeric(value)
    return format_english_numeric(value)
