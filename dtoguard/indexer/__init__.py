"""Source tree traversal for dtoguard."""

from .core import SourceWalker, read_source
from .exceptions import AnalysisError, ParseError, TraversalError

__all__ = [
    "AnalysisError",
    "ParseError",
    "SourceWalker",
    "TraversalError",
    "read_source",
]
