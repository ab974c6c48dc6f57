"""Answer Validator — многоуровневая проверка ответа ученика

Порядок уровней (первый сработавший побеждает, остальные не выполняются):
1. TIER 0 Exact   → confidence 1.0
2. TIER 1 Numeric → confidence 0.95
3. TIER 2 Fuzzy   → confidence = similarity
4. TIER 3 Variant → confidence = similarity варианта (только японский)
5. REJECTED       → confidence = similarity из TIER 2

Отказ уровня — нормальный поток управления, никогда не exception.
Число ученика извлекается до всех уровней и всегда попадает в результат.
"""

import logging
from typing import Optional

from src.core.domain.language import Language
from src.core.domain.validation_result import MatchMethod, ValidationResult
from src.validator.config import ValidatorConfig
from src.validator.normalization import normalize_answer
from src.validator.tiers import Tier00Exact, Tier01Numeric, Tier02Fuzzy, Tier03Variant

logger = logging.getLogger(__name__)


class AnswerValidator:
    """Answer Validator: TIER 0-3 + REJECTED.

    Stateless после конструирования; безопасен для конкурентного вызова.
    """

    def __init__(self, config: Optional[ValidatorConfig] = None):
        """
        Args:
            config: Конфигурация порогов (default: ValidatorConfig())
        """
        self.config = config or ValidatorConfig()
        self.tier00 = Tier00Exact(self.config)
        self.tier01 = Tier01Numeric(self.config)
        self.tier02 = Tier02Fuzzy(self.config)
        self.tier03 = Tier03Variant(self.config)

    def validate(
        self,
        user_answer_raw: str,
        correct_answer_text: str,
        language: Language,
        correct_number: int,
    ) -> ValidationResult:
        """Проверка ответа ученика.

        Args:
            user_answer_raw: ответ ученика (транскрипция речи), без изменений
            correct_answer_text: эталонный текст ответа
            language: язык ответа
            correct_number: эталонное число

        Returns:
            ValidationResult (новый экземпляр на каждый вызов)
        """
        user_normalized = normalize_answer(user_answer_raw)
        correct_normalized = normalize_answer(correct_answer_text)

        user_number = self.tier01.extract_number(user_answer_raw, language)

        def build(is_correct: bool, confidence: float, method: MatchMethod) -> ValidationResult:
            logger.debug(
                "validate(%r, language=%s): method=%s confidence=%.3f user_number=%r",
                user_answer_raw,
                language.value,
                method.value,
                confidence,
                user_number,
            )
            return ValidationResult(
                is_correct=is_correct,
                confidence=confidence,
                method=method,
                user_answer_raw=user_answer_raw,
                user_number=user_number,
                user_parsed=user_number is not None,
                correct_answer_text=correct_answer_text,
                correct_number=correct_number,
                language=language,
            )

        # 1. Exact
        tier00 = self.tier00.evaluate(user_normalized, correct_normalized)
        if tier00.matched:
            return build(True, tier00.confidence, MatchMethod.EXACT)

        # 2. Numeric
        tier01 = self.tier01.evaluate(user_number, correct_number)
        if tier01.matched:
            return build(True, tier01.confidence, MatchMethod.NUMERIC)

        # 3. Fuzzy
        tier02 = self.tier02.evaluate(user_normalized, correct_normalized)
        if tier02.matched:
            return build(True, tier02.confidence, MatchMethod.FUZZY)

        # 4. Variant (только японский)
        tier03 = self.tier03.evaluate(user_normalized, correct_normalized, language)
        if tier03.matched:
            return build(True, tier03.confidence, MatchMethod.VARIANT)

        # 5. Rejected
        return build(False, tier02.similarity, MatchMethod.REJECTED)


_DEFAULT_VALIDATOR = AnswerValidator()


def validate(
    user_answer_raw: str,
    correct_answer_text: str,
    language: Language,
    correct_number: int,
) -> ValidationResult:
    """
    Проверка ответа валидатором с конфигурацией по умолчанию.

    См. AnswerValidator.validate.
    """
    return _DEFAULT_VALIDATOR.validate(
        user_answer_raw, correct_answer_text, language, correct_number
    )
