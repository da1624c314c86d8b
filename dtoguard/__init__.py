"""dtoguard - sanitization tag enforcement for Go data-transfer objects."""

__version__ = "1.0.0"
