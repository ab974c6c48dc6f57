"""
Language — Язык числительных

Японский: 4-значная группировка (万 / 億 / 兆), хирагана.
Английский: 3-значная группировка (thousand / million / ...).
"""

from enum import Enum


class Language(str, Enum):
    """Язык произносимой формы числа."""

    JA = "ja"
    EN = "en"
