"""
Test suite for decimal_core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
