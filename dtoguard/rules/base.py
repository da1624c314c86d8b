"""Base contracts shared by the parser, the rules and the reporter."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any


class FieldKind(Enum):
    """Shape of a struct field's declared type."""

    PRIMITIVE_STRING = "primitive_string"
    ALIASED_STRING = "aliased_string"
    POINTER = "pointer"
    SLICE = "slice"
    OTHER = "other"


class ViolationReason(Enum):
    """Why a string field failed the sanitization check."""

    MISSING_TAG = "MissingTag"
    MISSING_MARKER = "MissingMarker"


class Classification(Enum):
    """Outcome of classifying a record by name."""

    OUTPUT_ONLY = "output_only"
    EXCLUDED = "excluded"
    INPUT = "input"
    NOT_A_DTO = "not_a_dto"

    @property
    def in_scope(self) -> bool:
        """True if records with this classification must be inspected."""
        return self is Classification.INPUT


@dataclass(frozen=True)
class FieldType:
    """Declared type of a field."""

    kind: FieldKind
    text: str


@dataclass(frozen=True)
class FieldDeclaration:
    """One named field of a struct.

    ``tag`` is the struct tag with its delimiters stripped, or None when the
    field has no tag at all.
    """

    name: str
    type: FieldType
    tag: str | None = None
    line: int = 0
    is_embedded: bool = False


@dataclass(frozen=True)
class RecordDeclaration:
    """A struct type declaration and its fields in declaration order."""

    name: str
    fields: tuple[FieldDeclaration, ...]
    file_path: str = ""
    line: int = 0


@dataclass(frozen=True)
class RuleConfig:
    """Naming conventions and marker used by the sanitization rule."""

    output_suffixes: tuple[str, ...] = ("ResponseDto", "Response")
    excluded_names: frozenset[str] = frozenset({"SportDto", "CommonStatsDto"})
    input_suffixes: tuple[str, ...] = ("Dto",)
    input_names: frozenset[str] = frozenset({"Login"})
    marker: str = "sanitize"
    extension: str = ".go"
    include_string_aliases: bool = False


@dataclass(frozen=True)
class Violation:
    """A string field of an input record that lacks the sanitization marker."""

    record_name: str
    field_name: str
    reason: ViolationReason
    file_path: str = ""
    line: int = 0

    def describe(self, marker: str = "sanitize") -> str:
        """Human-readable one-liner for this violation."""
        if self.reason is ViolationReason.MISSING_TAG:
            detail = f"missing validate tag with '{marker}'"
        else:
            detail = f"validate tag missing '{marker}'"
        return f"{self.record_name}.{self.field_name}: {detail}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "record": self.record_name,
            "field": self.field_name,
            "reason": self.reason.value,
            "file": self.file_path,
            "line": self.line,
        }


@dataclass
class SourceFile:
    """One file being processed: its text and the records parsed from it.

    Parse failures are raised as ParseError rather than stored here.
    """

    path: Path
    text: str
    records: list[RecordDeclaration] = field(default_factory=list)
