"""
Answer Normalization — Нормализация текста ответа перед сравнением

- NFKC (полноширинные символы → обычные)
- casefold
- удаление пунктуации, поставленной только для читаемости ('、', '。', ',', '.', ...)
- схлопывание пробелов до одного, обрезка по краям

Пробелы между словами сохраняются: для английского они несут границы слов.
"""

import re
import unicodedata
from typing import Final

_READABILITY_PUNCTUATION_RE: Final[re.Pattern[str]] = re.compile(
    r"[、。，．,.!?！？;:；：\"'「」『』()（）]"
)

_WHITESPACE_RE: Final[re.Pattern[str]] = re.compile(r"\s+")


def normalize_answer(text: str) -> str:
    """
    Нормализация ответа для сравнения строк.

    Examples:
        >>> normalize_answer("  Two   Thousand, five hundred. ")
        'two thousand five hundred'
        >>> normalize_answer("いちまん、にせん")
        'いちまんにせん'
    """
    text = unicodedata.normalize("NFKC", text).casefold()
    text = _READABILITY_PUNCTUATION_RE.sub("", text)
    return _WHITESPACE_RE.sub(" ", text).strip()


def whitespace_variants(text: str) -> list[str]:
    """
    Варианты текста по пробелам: как есть, без пробелов, с одиночными пробелами.

    Порядок сохраняется, дубликаты удаляются.
    """
    variants = [
        text,
        _WHITESPACE_RE.sub("", text),
        _WHITESPACE_RE.sub(" ", text),
    ]
    return list(dict.fromkeys(variants))
