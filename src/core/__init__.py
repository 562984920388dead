"""
Core fluent wrappers, math primitives, and domain value objects.

This module contains self-contained building blocks with no I/O
and no dependencies between the individual wrappers.
"""
