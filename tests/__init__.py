"""
Test suite for flat

Contains:
- tests/unit/          : Unit tests for individual modules
"""
