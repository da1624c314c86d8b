"""AST Data Extraction Engine - Language-specific implementation modules."""

from . import go_impl

__all__ = [
    "go_impl",
]
