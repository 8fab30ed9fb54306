"""
Test suite for identicons

Contains:
- tests/unit/          : Unit tests for individual modules
"""
