"""
English Numeral Decoder — Английский текст → число

Свёртка токенов слева направо с двумя аккумуляторами:
- current: значение внутри активной группы разряда
- result: подтверждённая сумма

Классы токенов:
- цифровые токены ('100', '2,560', полноширинные после NFKC) → current += значение;
  токен длиннее любого поддерживаемого числа → весь текст не распознан
- one..nine, ten..nineteen, twenty..ninety → current += значение
- hundred → current = (current or 1) × 100
- thousand/million/billion/trillion → result += (current or 1) × множитель; current = 0
- прочие токены ('and', 'a', шум) игнорируются

Пример: '1 billion 200 million' → 1200000000
"""

import logging
import re
import unicodedata
from typing import Final, Optional

from src.codec.digits import parse_digit_run
from src.core.lexicon.english import (
    EN_HUNDRED_WORD,
    EN_ONES_VALUES,
    EN_SCALE_VALUES,
    EN_TEENS_VALUES,
    EN_TENS_VALUES,
    EN_ZERO_WORD,
)

logger = logging.getLogger(__name__)


_TOKEN_SPLIT_RE: Final[re.Pattern[str]] = re.compile(r"[\s\-]+")

# Цифровой токен, допускаются запятые-разделители тысяч ('2,560')
_NUMERIC_TOKEN_RE: Final[re.Pattern[str]] = re.compile(r"[0-9]+(?:,[0-9]{3})*")

# Пунктуация по краям токена ('thousand,' / 'sixty.')
_TOKEN_PUNCTUATION: Final[str] = ".,!?;:\"'()"

_ZERO_FORMS: Final[frozenset[str]] = frozenset({EN_ZERO_WORD, "0"})


def decode_english(text: str) -> Optional[int]:
    """
    Английский текст (слова и/или цифровые токены) → число.

    Args:
        text: Произвольный текст, регистр не важен

    Returns:
        Неотрицательное целое или None, если число не распознано

    Examples:
        >>> decode_english("two thousand five hundred sixty")
        2560
        >>> decode_english("50 thousand")
        50000
        >>> decode_english("blah blah") is None
        True
    """
    normalized = unicodedata.normalize("NFKC", text).lower().strip()
    if normalized in _ZERO_FORMS:
        return 0

    result = 0
    current = 0

    for raw_token in _TOKEN_SPLIT_RE.split(normalized):
        token = raw_token.strip(_TOKEN_PUNCTUATION)
        if not token:
            continue

        if _NUMERIC_TOKEN_RE.fullmatch(token):
            value = parse_digit_run(token.replace(",", ""))
            if value is None:
                logger.debug("English parse: digit run too long in %r", text[:40])
                return None
            current += value
        elif token in EN_ONES_VALUES:
            current += EN_ONES_VALUES[token]
        elif token in EN_TEENS_VALUES:
            current += EN_TEENS_VALUES[token]
        elif token in EN_TENS_VALUES:
            current += EN_TENS_VALUES[token]
        elif token == EN_HUNDRED_WORD:
            current = (current or 1) * 100
        elif token in EN_SCALE_VALUES:
            result += (current or 1) * EN_SCALE_VALUES[token]
            current = 0

    result += current
    logger.debug("English parse: %r -> %d", text, result)
    return result if result > 0 else None
