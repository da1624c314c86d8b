"""Pytest configuration and fixtures."""
from pathlib import Path

import pytest
from tree_sitter_language_pack import get_parser

from dtoguard.ast_parser import GoSourceParser
from dtoguard.rules.base import RuleConfig


@pytest.fixture
def go_parser():
    """Create a raw Go tree-sitter parser."""
    return get_parser("go")


@pytest.fixture
def source_parser():
    """Create the GoSourceParser used by the pipeline."""
    return GoSourceParser()


@pytest.fixture
def rule_config():
    """Default naming conventions and marker."""
    return RuleConfig()


@pytest.fixture
def dto_tree(tmp_path):
    """Factory writing Go files under a temporary DTO directory.

    Usage:
        root = dto_tree({"a.go": "package dto ...", "sub/b.go": "..."})
    """

    def _write(files: dict[str, str]) -> Path:
        root = tmp_path / "common" / "dto"
        root.mkdir(parents=True, exist_ok=True)
        for relative, content in files.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return root

    return _write
