"""
Core math modules

Математические примитивы для сравнения строк.
"""

# String Similarity
from src.core.math.similarity import (
    levenshtein_distance,
    similarity,
)

__all__ = [
    # String Similarity
    "levenshtein_distance",
    "similarity",
]
