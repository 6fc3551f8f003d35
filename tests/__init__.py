"""
Test suite for recordkit

Contains:
- tests/unit/          : Unit tests for individual modules
"""
