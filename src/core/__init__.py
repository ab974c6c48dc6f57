"""
Core domain models, lexicon tables and mathematical primitives.

This module contains the foundational building blocks that are independent
of external systems (UI, speech recognition, storage, etc.).
"""
