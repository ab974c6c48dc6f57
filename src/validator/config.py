"""Конфигурация Answer Validator."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidatorConfig:
    """Конфигурация уровней проверки ответа.

    - exact_confidence / numeric_confidence: фиксированные константы,
      не зависят от длины строк
    - fuzzy_threshold: минимальная похожесть для FUZZY и VARIANT
    """

    exact_confidence: float = 1.0
    numeric_confidence: float = 0.95
    fuzzy_threshold: float = 0.80

    def __post_init__(self) -> None:
        for name in ("exact_confidence", "numeric_confidence", "fuzzy_threshold"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be in [0, 1], got {value}")
