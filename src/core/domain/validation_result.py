"""
ValidationResult — Результат проверки ответа ученика

Immutable Pydantic модель, создаваемая заново на каждый вызов validate().

Результат всегда содержит извлечённое из ответа число (или None), даже если
ответ неверный: вызывающий код объясняет ошибку без повторного парсинга.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .language import Language


# =============================================================================
# ENUMS
# =============================================================================


class MatchMethod(str, Enum):
    """
    Уровень проверки, принявший решение.

    Порядок приоритета: EXACT → NUMERIC → FUZZY → VARIANT → REJECTED.
    """

    EXACT = "exact"
    NUMERIC = "numeric"
    FUZZY = "fuzzy"
    VARIANT = "variant"
    REJECTED = "rejected"


# =============================================================================
# VALIDATION RESULT MODEL
# =============================================================================


class ValidationResult(BaseModel):
    """
    Результат проверки ответа.

    Immutable модель (frozen=True). Содержит:
    - Решение (is_correct, confidence, method)
    - Ответ ученика (user_answer_raw, user_number, user_parsed)
    - Эталон (correct_answer_text, correct_number)
    """

    # Решение
    is_correct: bool = Field(..., description="Ответ принят")
    confidence: float = Field(..., ge=0, le=1, description="Уверенность (0-1)")
    method: MatchMethod = Field(..., description="Уровень, принявший решение")

    # Ответ ученика
    user_answer_raw: str = Field(..., description="Исходный текст ответа (без нормализации)")
    user_number: Optional[int] = Field(
        None, ge=0, description="Число, извлечённое из ответа (nullable)"
    )
    user_parsed: bool = Field(..., description="Удалось ли извлечь число")

    # Эталон
    correct_answer_text: str = Field(..., description="Эталонный текст ответа")
    correct_number: int = Field(..., ge=0, description="Эталонное число")

    language: Language = Field(..., description="Язык ответа")

    model_config = {"frozen": True}

    @field_validator("user_parsed")
    @classmethod
    def validate_parsed_matches_number(cls, v: bool, info) -> bool:
        """user_parsed == True тогда и только тогда, когда user_number задан"""
        if "user_number" in info.data:
            has_number = info.data["user_number"] is not None
            if v != has_number:
                raise ValueError(
                    f"user_parsed={v} inconsistent with user_number={info.data['user_number']!r}"
                )
        return v

    @property
    def numeric_delta(self) -> Optional[int]:
        """Абсолютная разница между ответом и эталоном (None если число не извлечено)."""
        if self.user_number is None:
            return None
        return abs(self.user_number - self.correct_number)
