"""TIER 0: Exact — точное совпадение нормализованных строк

Первый уровень в цепочке. Совпадение → ответ принят с уверенностью 1.0.
"""

from dataclasses import dataclass

from src.validator.config import ValidatorConfig


@dataclass(frozen=True)
class Tier00Result:
    """Результат TIER 0."""

    matched: bool
    confidence: float
    details: str


class Tier00Exact:
    """TIER 0: Exact match (stateless)."""

    def __init__(self, config: ValidatorConfig):
        self.config = config

    def evaluate(self, user_normalized: str, correct_normalized: str) -> Tier00Result:
        """
        Args:
            user_normalized: нормализованный ответ ученика
            correct_normalized: нормализованный эталон

        Returns:
            Tier00Result
        """
        if user_normalized == correct_normalized:
            return Tier00Result(
                matched=True,
                confidence=self.config.exact_confidence,
                details="PASS: normalized strings equal",
            )

        return Tier00Result(
            matched=False,
            confidence=0.0,
            details="normalized strings differ",
        )
