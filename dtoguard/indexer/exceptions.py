"""Fatal errors raised while scanning a source tree.

Both exceptions abort the whole run. Rule violations are never raised;
they are collected and reported in bulk.
"""


class AnalysisError(Exception):
    """Base class for errors that abort an analysis run."""


class TraversalError(AnalysisError):
    """Raised when a directory (or a file inside it) cannot be read.

    Attributes:
        path: The path that could not be read
        reason: Underlying OS error text
    """

    def __init__(self, path: str, reason: str):
        super().__init__(f"cannot read {path}: {reason}")
        self.path = path
        self.reason = reason


class ParseError(AnalysisError):
    """Raised when a source file is not syntactically valid.

    Attributes:
        path: File that failed to parse
        message: Parser diagnostic
        line: 1-based line of the first syntax error, if known
        column: 1-based column of the first syntax error, if known
    """

    def __init__(self, path: str, message: str, line: int | None = None, column: int | None = None):
        location = path if line is None else f"{path}:{line}:{column or 1}"
        super().__init__(f"failed to parse {location}: {message}")
        self.path = path
        self.message = message
        self.line = line
        self.column = column
