"""End-to-end tests for run_sanitize_check."""

import os

from dtoguard.indexer import ParseError, TraversalError
from dtoguard.pipelines import run_sanitize_check
from dtoguard.rules.base import RuleConfig, ViolationReason
from dtoguard.utils.exit_codes import ExitCodes

LOGIN_FILE = """package dto

type LoginDto struct {
    Email    string `validate:"sanitize"`
    Password string
}
"""

SPORT_FILE = """package dto

type SportResponseDto struct {
    Name string
}
"""


class TestRunSanitizeCheck:
    def test_login_and_response_scenario(self, dto_tree):
        root = dto_tree({"a.go": LOGIN_FILE, "b.go": SPORT_FILE})

        report = run_sanitize_check(root)

        assert [(v.record_name, v.field_name, v.reason) for v in report.violations] == [
            ("LoginDto", "Password", ViolationReason.MISSING_TAG),
        ]
        assert report.fatal_error is None
        assert report.files_scanned == 2
        assert report.records_checked == 1
        assert report.exit_code == ExitCodes.VIOLATIONS

    def test_clean_tree_succeeds(self, dto_tree):
        root = dto_tree({
            "user.go": """package dto

type UserCreateDto struct {
    Email string `json:"email" validate:"sanitize,required,email"`
    Age   int    `json:"age"`
}
""",
        })

        report = run_sanitize_check(root)

        assert report.violations == []
        assert report.success is True
        assert report.exit_code == ExitCodes.SUCCESS

    def test_empty_tree_succeeds(self, dto_tree):
        report = run_sanitize_check(dto_tree({}))

        assert report.exit_code == ExitCodes.SUCCESS
        assert report.files_scanned == 0

    def test_violations_in_sorted_file_order(self, dto_tree):
        root = dto_tree({
            "z.go": "package dto\ntype ZDto struct {\n    Z string\n}\n",
            "a.go": "package dto\ntype ADto struct {\n    A1 string\n    A2 string `json:\"a\"`\n}\n",
        })

        report = run_sanitize_check(root)

        assert [(v.record_name, v.field_name) for v in report.violations] == [
            ("ADto", "A1"),
            ("ADto", "A2"),
            ("ZDto", "Z"),
        ]
        assert report.violations[0].file_path.endswith("a.go")

    def test_idempotent(self, dto_tree):
        root = dto_tree({"a.go": LOGIN_FILE, "b.go": SPORT_FILE, "c.go": "package dto\ntype XDto struct {\n    X string `json:\"x\"`\n}\n"})

        first = run_sanitize_check(root)
        second = run_sanitize_check(root)

        assert first.violations == second.violations

    def test_missing_root_is_fatal(self, tmp_path):
        report = run_sanitize_check(tmp_path / "nope")

        assert isinstance(report.fatal_error, TraversalError)
        assert report.violations == []
        assert report.exit_code == ExitCodes.FATAL

    def test_parse_error_discards_partial_violations(self, dto_tree):
        root = dto_tree({
            "a.go": LOGIN_FILE,
            "b.go": "package dto\ntype Broken struct {\n    Name string\n",
        })

        report = run_sanitize_check(root)

        assert isinstance(report.fatal_error, ParseError)
        assert report.fatal_error.path.endswith("b.go")
        assert report.violations == []
        assert report.exit_code == ExitCodes.FATAL

    def test_empty_go_file_is_fatal(self, dto_tree):
        root = dto_tree({"a.go": LOGIN_FILE, "empty.go": ""})

        report = run_sanitize_check(root)

        assert isinstance(report.fatal_error, ParseError)
        assert report.fatal_error.path.endswith("empty.go")
        assert report.violations == []
        assert report.exit_code == ExitCodes.FATAL

    def test_file_without_package_clause_is_fatal(self, dto_tree):
        root = dto_tree({"x.go": "type XDto struct {\n    A string\n}\n"})

        report = run_sanitize_check(root)

        assert isinstance(report.fatal_error, ParseError)
        assert report.violations == []

    def test_unreadable_subdirectory_is_fatal(self, dto_tree, monkeypatch):
        root = dto_tree({"a.go": LOGIN_FILE, "locked/b.go": SPORT_FILE})
        locked = root / "locked"
        real_scandir = os.scandir

        def scandir(path="."):
            if os.fspath(path) == os.fspath(locked):
                raise PermissionError(13, "Permission denied", os.fspath(path))
            return real_scandir(path)

        monkeypatch.setattr(os, "scandir", scandir)

        report = run_sanitize_check(root)

        assert isinstance(report.fatal_error, TraversalError)
        assert report.fatal_error.path == str(locked)
        assert report.violations == []
        assert report.exit_code == ExitCodes.FATAL

    def test_custom_config(self, dto_tree):
        root = dto_tree({"a.go": LOGIN_FILE})
        config = RuleConfig(input_suffixes=("Request",), input_names=frozenset())

        report = run_sanitize_check(root, config)

        assert report.violations == []
        assert report.records_checked == 0

    def test_to_dict(self, dto_tree):
        root = dto_tree({"a.go": LOGIN_FILE})

        data = run_sanitize_check(root).to_dict()

        assert data["exit_code"] == 1
        assert data["fatal_error"] is None
        assert data["marker"] == "sanitize"
        assert data["violations"][0]["record"] == "LoginDto"
        assert data["violations"][0]["reason"] == "MissingTag"
        assert data["violations"][0]["line"] == 5
