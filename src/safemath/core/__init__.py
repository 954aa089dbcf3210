"""
Core arithmetic primitives and value objects.

This package is pure computation: no I/O, no shared mutable state.
"""
