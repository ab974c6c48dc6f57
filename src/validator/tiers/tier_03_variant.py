"""TIER 3: Variant — нечёткое совпадение с вариантами эталона (только японский)

Варианты нормализованного эталона по пробелам (как есть / без пробелов /
с одиночными пробелами). Первый вариант с похожестью >= порога побеждает.
Для английского уровень не применяется.
"""

from dataclasses import dataclass
from typing import Optional

from src.core.domain.language import Language
from src.core.math.similarity import similarity
from src.validator.config import ValidatorConfig
from src.validator.normalization import whitespace_variants


@dataclass(frozen=True)
class Tier03Result:
    """Результат TIER 3."""

    matched: bool
    confidence: float
    matched_variant: Optional[str]
    details: str


class Tier03Variant:
    """TIER 3: Variant match."""

    def __init__(self, config: ValidatorConfig):
        self.config = config

    def evaluate(
        self,
        user_normalized: str,
        correct_normalized: str,
        language: Language,
    ) -> Tier03Result:
        """
        Args:
            user_normalized: нормализованный ответ ученика
            correct_normalized: нормализованный эталон
            language: язык ответа

        Returns:
            Tier03Result
        """
        if language != Language.JA:
            return Tier03Result(
                matched=False,
                confidence=0.0,
                matched_variant=None,
                details=f"not applicable for language={language.value}",
            )

        for variant in whitespace_variants(correct_normalized):
            score = similarity(user_normalized, variant)
            if score >= self.config.fuzzy_threshold:
                return Tier03Result(
                    matched=True,
                    confidence=score,
                    matched_variant=variant,
                    details=f"PASS: variant={variant!r} similarity={score:.3f}",
                )

        return Tier03Result(
            matched=False,
            confidence=0.0,
            matched_variant=None,
            details="no variant above threshold",
        )
