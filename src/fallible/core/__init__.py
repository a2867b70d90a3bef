"""Core components for fallible.

This package provides the result primitives and the exceptions that form the
foundation of the library.
"""
