"""Tiers — уровни проверки ответа в порядке строгого приоритета.

- TIER 0: Exact (нормализованные строки равны)
- TIER 1: Numeric (извлечённое число равно эталону)
- TIER 2: Fuzzy (похожесть Левенштейна >= порога)
- TIER 3: Variant (варианты эталона по пробелам, только японский)
- Ни один уровень не сработал → REJECTED
"""

from .tier_00_exact import Tier00Exact, Tier00Result
from .tier_01_numeric import Tier01Numeric, Tier01Result
from .tier_02_fuzzy import Tier02Fuzzy, Tier02Result
from .tier_03_variant import Tier03Variant, Tier03Result

__all__ = [
    "Tier00Exact",
    "Tier00Result",
    "Tier01Numeric",
    "Tier01Result",
    "Tier02Fuzzy",
    "Tier02Result",
    "Tier03Variant",
    "Tier03Result",
]
