"""
Test suite for safemath

Contains:
- tests/unit/          : Unit tests for individual modules
"""
