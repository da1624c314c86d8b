"""Go rule definitions."""

from .sanitize_analyze import analyze, classify_record, inspect_record, should_check_record

__all__ = [
    "analyze",
    "classify_record",
    "inspect_record",
    "should_check_record",
]
