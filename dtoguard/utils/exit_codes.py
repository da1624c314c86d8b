"""Centralized exit codes for the dtoguard CLI."""


class ExitCodes:
    """Standard exit codes for dtoguard commands.

    A fatal error and a non-empty violation list share the same status:
    CI only needs to know that the tree is not clean.
    """

    SUCCESS = 0

    VIOLATIONS = 1
    FATAL = 1
