"""
Test suite for fluent scalar wrappers

Contains:
- tests/unit/          : Unit tests for individual modules and end-to-end chains
"""
