"""
Domain models and value objects.

Contains fundamental domain entities like Language, MatchMethod, ValidationResult.
"""

from src.core.domain.language import Language
from src.core.domain.validation_result import MatchMethod, ValidationResult

__all__ = [
    # Language
    "Language",
    # Validation result model
    "MatchMethod",
    "ValidationResult",
]
