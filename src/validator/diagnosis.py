"""
Mistake Diagnosis — Структурированное объяснение неверного ответа

Работает только с ValidationResult (число уже извлечено валидатором),
без повторного парсинга и без UI-строк:

1. Ответ принят                          → NONE
2. Число не распознано                   → NOT_RECOGNIZED
3. Разница < 10% от эталона              → VERY_CLOSE (delta)
4. Меньше / больше цифр, чем в эталоне   → FEWER_DIGITS / MORE_DIGITS
5. Первая отличающаяся цифра слева       → WRONG_PLACE (place: 0 = единицы)
6. Указать не на что                     → OTHER
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final, Optional

from src.core.domain.validation_result import ValidationResult

# Порог "почти правильно" (доля от эталонного числа)
VERY_CLOSE_FRACTION: Final[float] = 0.10


class MistakeKind(str, Enum):
    """Тип ошибки в ответе."""

    NONE = "NONE"
    NOT_RECOGNIZED = "NOT_RECOGNIZED"
    VERY_CLOSE = "VERY_CLOSE"
    FEWER_DIGITS = "FEWER_DIGITS"
    MORE_DIGITS = "MORE_DIGITS"
    WRONG_PLACE = "WRONG_PLACE"
    OTHER = "OTHER"


@dataclass(frozen=True)
class MistakeDiagnosis:
    """Результат диагностики ошибки."""

    kind: MistakeKind
    delta: Optional[int] = None
    user_digits: Optional[int] = None
    correct_digits: Optional[int] = None
    place: Optional[int] = None


def _is_very_close(delta: int, correct_number: int) -> bool:
    if correct_number == 0:
        return False
    return delta / correct_number < VERY_CLOSE_FRACTION


def diagnose(result: ValidationResult) -> MistakeDiagnosis:
    """
    Диагностика ошибки по результату проверки.

    Args:
        result: результат AnswerValidator.validate

    Returns:
        MistakeDiagnosis

    Examples:
        >>> from src.validator import validate
        >>> from src.core.domain import Language
        >>> diagnose(validate("2,600", "two thousand five hundred sixty", Language.EN, 2560)).kind
        <MistakeKind.VERY_CLOSE: 'VERY_CLOSE'>
    """
    if result.is_correct:
        return MistakeDiagnosis(kind=MistakeKind.NONE)

    user_number = result.user_number
    if user_number is None:
        return MistakeDiagnosis(kind=MistakeKind.NOT_RECOGNIZED)

    correct_number = result.correct_number
    delta = abs(user_number - correct_number)

    if delta > 0 and _is_very_close(delta, correct_number):
        return MistakeDiagnosis(kind=MistakeKind.VERY_CLOSE, delta=delta)

    user_str = str(user_number)
    correct_str = str(correct_number)

    if len(user_str) != len(correct_str):
        if len(user_str) < len(correct_str):
            kind = MistakeKind.FEWER_DIGITS
        else:
            kind = MistakeKind.MORE_DIGITS
        return MistakeDiagnosis(
            kind=kind,
            delta=delta,
            user_digits=len(user_str),
            correct_digits=len(correct_str),
        )

    for index, (user_char, correct_char) in enumerate(zip(user_str, correct_str)):
        if user_char != correct_char:
            return MistakeDiagnosis(
                kind=MistakeKind.WRONG_PLACE,
                delta=delta,
                place=len(user_str) - 1 - index,
            )

    return MistakeDiagnosis(kind=MistakeKind.OTHER, delta=delta)
