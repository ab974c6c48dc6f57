"""Validator — проверка ответа ученика и диагностика ошибок.

- AnswerValidator: TIER 0-3 (Exact / Numeric / Fuzzy / Variant) + REJECTED
- diagnose: объяснение неверного ответа по ValidationResult
"""

from .config import ValidatorConfig
from .diagnosis import MistakeDiagnosis, MistakeKind, diagnose
from .normalization import normalize_answer, whitespace_variants
from .validator import AnswerValidator, validate

__all__ = [
    "AnswerValidator",
    "ValidatorConfig",
    "validate",
    "normalize_answer",
    "whitespace_variants",
    "MistakeKind",
    "MistakeDiagnosis",
    "diagnose",
]
