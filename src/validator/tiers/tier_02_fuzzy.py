"""TIER 2: Fuzzy — нечёткое совпадение строк (вариации произношения)

similarity = 1 - levenshtein / max(len); порог ValidatorConfig.fuzzy_threshold.
Похожесть вычисляется всегда: при отказе на всех уровнях она становится
уверенностью REJECTED результата.
"""

from dataclasses import dataclass

from src.core.math.similarity import similarity
from src.validator.config import ValidatorConfig


@dataclass(frozen=True)
class Tier02Result:
    """Результат TIER 2."""

    matched: bool
    similarity: float
    confidence: float
    details: str


class Tier02Fuzzy:
    """TIER 2: Fuzzy match."""

    def __init__(self, config: ValidatorConfig):
        self.config = config

    def evaluate(self, user_normalized: str, correct_normalized: str) -> Tier02Result:
        """
        Args:
            user_normalized: нормализованный ответ ученика
            correct_normalized: нормализованный эталон

        Returns:
            Tier02Result
        """
        score = similarity(user_normalized, correct_normalized)

        if score >= self.config.fuzzy_threshold:
            return Tier02Result(
                matched=True,
                similarity=score,
                confidence=score,
                details=f"PASS: similarity={score:.3f} >= {self.config.fuzzy_threshold:.2f}",
            )

        return Tier02Result(
            matched=False,
            similarity=score,
            confidence=0.0,
            details=f"similarity={score:.3f} < {self.config.fuzzy_threshold:.2f}",
        )
