"""
Тесты для Mistake Diagnosis

Проверяет классификацию неверного ответа по ValidationResult:
NONE / NOT_RECOGNIZED / VERY_CLOSE / FEWER_DIGITS / MORE_DIGITS / WRONG_PLACE / OTHER
"""

import pytest

from src.core.domain import Language, MatchMethod, ValidationResult
from src.validator import MistakeKind, diagnose, validate


EN_CORRECT_TEXT = "two thousand five hundred sixty"


def _diagnose_en(user_answer: str, correct_number: int = 2560):
    return diagnose(validate(user_answer, EN_CORRECT_TEXT, Language.EN, correct_number))


class TestDiagnose:
    """Тесты для diagnose"""

    def test_correct_answer(self) -> None:
        assert _diagnose_en("2560").kind == MistakeKind.NONE

    def test_not_recognized(self) -> None:
        diagnosis = _diagnose_en("blah blah blah")
        assert diagnosis.kind == MistakeKind.NOT_RECOGNIZED
        assert diagnosis.delta is None

    def test_very_close(self) -> None:
        """|2600 - 2560| = 40 < 10% от 2560"""
        diagnosis = _diagnose_en("2,600")
        assert diagnosis.kind == MistakeKind.VERY_CLOSE
        assert diagnosis.delta == 40

    def test_fewer_digits(self) -> None:
        diagnosis = _diagnose_en("256")
        assert diagnosis.kind == MistakeKind.FEWER_DIGITS
        assert diagnosis.user_digits == 3
        assert diagnosis.correct_digits == 4

    def test_more_digits(self) -> None:
        diagnosis = _diagnose_en("25600")
        assert diagnosis.kind == MistakeKind.MORE_DIGITS
        assert diagnosis.user_digits == 5
        assert diagnosis.correct_digits == 4

    @pytest.mark.parametrize(
        "user_answer, place",
        [("3560", 3), ("2960", 2)],
    )
    def test_wrong_place(self, user_answer: str, place: int) -> None:
        """place: 0 = единицы, 1 = десятки, ..."""
        diagnosis = _diagnose_en(user_answer)
        assert diagnosis.kind == MistakeKind.WRONG_PLACE
        assert diagnosis.place == place

    def test_zero_reference_never_very_close(self) -> None:
        """Эталон 0: относительная разница не определена"""
        diagnosis = diagnose(validate("5", "zero", Language.EN, 0))
        assert diagnosis.kind == MistakeKind.WRONG_PLACE
        assert diagnosis.place == 0

    def test_japanese(self) -> None:
        diagnosis = diagnose(validate("30万", "さんびゃくまん", Language.JA, 3_000_000))
        assert diagnosis.kind == MistakeKind.FEWER_DIGITS

    def test_other(self) -> None:
        """Число совпало, но ответ отклонён: указать не на что"""
        result = ValidationResult(
            is_correct=False,
            confidence=0.0,
            method=MatchMethod.REJECTED,
            user_answer_raw="2560",
            user_number=2560,
            user_parsed=True,
            correct_answer_text=EN_CORRECT_TEXT,
            correct_number=2560,
            language=Language.EN,
        )
        diagnosis = diagnose(result)
        assert diagnosis.kind == MistakeKind.OTHER
        assert diagnosis.delta == 0
