"""
Test suite for numeral-practice-core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
