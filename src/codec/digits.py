"""Digit runs — безопасное преобразование последовательности ASCII-цифр в int.

Ответ ученика — произвольный текст: последовательность цифр длиннее
максимального поддерживаемого числа не может быть числительным и
возвращает None (bare int() на таких строках бросает ValueError).
"""

from typing import Final, Optional

from src.core.lexicon.english import EN_MAX_VALUE
from src.core.lexicon.japanese import JA_MAX_VALUE

# Длина записи наибольшего поддерживаемого числа (9999兆… = 16 цифр)
MAX_DIGIT_RUN: Final[int] = len(str(max(JA_MAX_VALUE, EN_MAX_VALUE)))


def parse_digit_run(run: str) -> Optional[int]:
    """
    Последовательность ASCII-цифр → int.

    Args:
        run: Строка из цифр 0-9 (без разделителей)

    Returns:
        Число или None, если строка пустая, содержит не-цифры
        или длиннее MAX_DIGIT_RUN

    Examples:
        >>> parse_digit_run("2560")
        2560
        >>> parse_digit_run("1" * 5000) is None
        True
    """
    if not run or len(run) > MAX_DIGIT_RUN or not (run.isascii() and run.isdigit()):
        return None
    return int(run)
