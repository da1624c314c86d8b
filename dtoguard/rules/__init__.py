"""dtoguard AST-based rule definitions.

Rules live under per-language packages (``rules/go``) and share the data
contracts in ``rules/base.py``.
"""
