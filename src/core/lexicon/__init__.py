"""
Lexicon — статические таблицы числительных.

Японская (万/億/兆, эвфония) и английская (thousand/million/...) лексика.
"""

from src.core.lexicon.english import (
    EN_HUNDRED_WORD,
    EN_MAX_VALUE,
    EN_ONES,
    EN_ONES_VALUES,
    EN_SCALE_VALUES,
    EN_SCALE_WORDS,
    EN_TEENS,
    EN_TEENS_VALUES,
    EN_TENS,
    EN_TENS_VALUES,
    EN_ZERO_WORD,
)
from src.core.lexicon.japanese import (
    JA_CHO,
    JA_DIGIT_READINGS,
    JA_DIGITS,
    JA_EUPHONY,
    JA_HUNDRED,
    JA_IRREGULAR_READINGS,
    JA_MAJOR_UNITS,
    JA_MAN,
    JA_MAX_VALUE,
    JA_MINOR_UNITS,
    JA_OKU,
    JA_PAUSE,
    JA_TEN,
    JA_THOUSAND,
    JA_ZERO_FORMS,
    JA_ZERO_WORD,
    ScaleUnit,
    apply_euphony,
)

__all__ = [
    # Japanese
    "ScaleUnit",
    "JA_DIGITS",
    "JA_ZERO_WORD",
    "JA_ZERO_FORMS",
    "JA_IRREGULAR_READINGS",
    "JA_DIGIT_READINGS",
    "JA_TEN",
    "JA_HUNDRED",
    "JA_THOUSAND",
    "JA_MAN",
    "JA_OKU",
    "JA_CHO",
    "JA_MINOR_UNITS",
    "JA_MAJOR_UNITS",
    "JA_PAUSE",
    "JA_MAX_VALUE",
    "JA_EUPHONY",
    "apply_euphony",
    # English
    "EN_ZERO_WORD",
    "EN_HUNDRED_WORD",
    "EN_ONES",
    "EN_TEENS",
    "EN_TENS",
    "EN_SCALE_WORDS",
    "EN_MAX_VALUE",
    "EN_ONES_VALUES",
    "EN_TEENS_VALUES",
    "EN_TENS_VALUES",
    "EN_SCALE_VALUES",
]
