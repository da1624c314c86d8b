"""Data contracts for a single analysis run."""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from dtoguard.indexer.exceptions import AnalysisError
from dtoguard.rules.base import Violation
from dtoguard.utils.exit_codes import ExitCodes


class ViolationCollector:
    """Accumulates violations in encounter order.

    One collector is created per run and passed through the pipeline;
    it is never shared between runs. The pipeline appends a whole file's
    findings with extend(); add() takes a single finding.
    """

    def __init__(self):
        self._violations: list[Violation] = []

    def add(self, violation: Violation) -> None:
        self._violations.append(violation)

    def extend(self, violations: list[Violation]) -> None:
        self._violations.extend(violations)

    @property
    def violations(self) -> list[Violation]:
        return list(self._violations)

    def __len__(self) -> int:
        return len(self._violations)


@dataclass
class RunReport:
    """Outcome of one run: either violations or a fatal error, never both.

    JSON-serializable via to_dict() for CI consumption.
    """
    root: Path
    violations: list[Violation] = field(default_factory=list)
    fatal_error: AnalysisError | None = None
    files_scanned: int = 0
    records_checked: int = 0
    marker: str = "sanitize"

    @property
    def exit_code(self) -> int:
        """Failure on any violation or on a fatal error."""
        if self.fatal_error is not None:
            return ExitCodes.FATAL
        if self.violations:
            return ExitCodes.VIOLATIONS
        return ExitCodes.SUCCESS

    @property
    def success(self) -> bool:
        return self.exit_code == ExitCodes.SUCCESS

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "root": str(self.root),
            "marker": self.marker,
            "files_scanned": self.files_scanned,
            "records_checked": self.records_checked,
            "violations": [v.to_dict() for v in self.violations],
            "fatal_error": str(self.fatal_error) if self.fatal_error else None,
            "exit_code": self.exit_code,
        }
