"""TIER 1: Numeric — совпадение извлечённого числа с эталоном

Самый важный уровень: '2560' и 'two thousand five hundred sixty'
обозначают одно и то же число.

Извлечение числа:
1. Ответ из одних цифр (после NFKC, удаления запятых и пробелов) → int напрямую;
   цифр больше, чем в любом поддерживаемом числе → None
2. Иначе → декодер языка ответа (JA / EN)

Извлечение выполняется до всех уровней: результат проверки всегда
содержит число ученика, даже если ответ принят по TIER 0.
"""

import re
import unicodedata
from dataclasses import dataclass
from typing import Final, Optional

from src.codec.decoder import decode
from src.codec.digits import parse_digit_run
from src.core.domain.language import Language
from src.validator.config import ValidatorConfig

_DIGITS_ONLY_RE: Final[re.Pattern[str]] = re.compile(r"[0-9]+")
_DIGIT_SEPARATORS_RE: Final[re.Pattern[str]] = re.compile(r"[,\s]")


@dataclass(frozen=True)
class Tier01Result:
    """Результат TIER 1."""

    matched: bool
    confidence: float
    user_number: Optional[int]
    details: str


class Tier01Numeric:
    """TIER 1: Numeric match."""

    def __init__(self, config: ValidatorConfig):
        self.config = config

    @staticmethod
    def extract_number(user_answer_raw: str, language: Language) -> Optional[int]:
        """
        Извлечение числа из сырого ответа.

        Args:
            user_answer_raw: ответ без нормализации
            language: язык ответа (выбор декодера)

        Returns:
            Число или None, если ответ не распознан
        """
        normalized = unicodedata.normalize("NFKC", user_answer_raw).strip()
        compact = _DIGIT_SEPARATORS_RE.sub("", normalized)
        if _DIGITS_ONLY_RE.fullmatch(compact):
            return parse_digit_run(compact)

        return decode(user_answer_raw, language)

    def evaluate(self, user_number: Optional[int], correct_number: int) -> Tier01Result:
        """
        Args:
            user_number: число, извлечённое extract_number (или None)
            correct_number: эталонное число

        Returns:
            Tier01Result
        """
        if user_number is None:
            return Tier01Result(
                matched=False,
                confidence=0.0,
                user_number=None,
                details="user answer not parsed as a number",
            )

        if user_number == correct_number:
            return Tier01Result(
                matched=True,
                confidence=self.config.numeric_confidence,
                user_number=user_number,
                details=f"PASS: user_number={user_number}",
            )

        return Tier01Result(
            matched=False,
            confidence=0.0,
            user_number=user_number,
            details=f"user_number={user_number} != correct_number={correct_number}",
        )
