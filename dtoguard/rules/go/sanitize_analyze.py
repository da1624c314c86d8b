"""Go DTO Sanitization Tag Analyzer.

Every struct that carries request input must mark each of its ``string``
fields with a struct tag containing the sanitization marker, e.g.

    type UserCreateDto struct {
        Email string `json:"email" validate:"sanitize,required,email"`
    }

Which structs count as input is decided from the struct name alone:
1. Output-only suffixes (``ResponseDto``, ``Response``) - skipped, they hold
   data read back from storage
2. Explicit exclusion list - skipped
3. Input suffix (``Dto``) or a literal name such as ``Login`` - checked
4. Anything else - skipped

Only fields declared directly as ``string`` are checked. Pointers, slices,
embedded structs and nested types are never followed.
"""

from collections.abc import Iterable

from dtoguard.rules.base import (
    Classification,
    FieldDeclaration,
    FieldKind,
    RecordDeclaration,
    RuleConfig,
    Violation,
    ViolationReason,
)


def classify_record(name: str, config: RuleConfig) -> Classification:
    """Decide whether a record is in scope. First matching rule wins."""
    if name.endswith(config.output_suffixes):
        return Classification.OUTPUT_ONLY

    if name in config.excluded_names:
        return Classification.EXCLUDED

    if name.endswith(config.input_suffixes) or name in config.input_names:
        return Classification.INPUT

    return Classification.NOT_A_DTO


def should_check_record(name: str, config: RuleConfig) -> bool:
    """True if the record's string fields must carry the marker."""
    return classify_record(name, config).in_scope


def _is_checked_field(field: FieldDeclaration, config: RuleConfig) -> bool:
    if field.type.kind is FieldKind.PRIMITIVE_STRING:
        return True
    return config.include_string_aliases and field.type.kind is FieldKind.ALIASED_STRING


def inspect_record(record: RecordDeclaration, config: RuleConfig) -> list[Violation]:
    """Check the string fields of one in-scope record, in declaration order."""
    violations = []

    for field in record.fields:
        if not _is_checked_field(field, config):
            continue

        if field.tag is None:
            reason = ViolationReason.MISSING_TAG
        elif config.marker not in field.tag:
            reason = ViolationReason.MISSING_MARKER
        else:
            continue

        violations.append(
            Violation(
                record_name=record.name,
                field_name=field.name,
                reason=reason,
                file_path=record.file_path,
                line=field.line,
            )
        )

    return violations


def analyze(records: Iterable[RecordDeclaration], config: RuleConfig) -> list[Violation]:
    """Classify each record and inspect the ones in scope."""
    violations: list[Violation] = []
    for record in records:
        if should_check_record(record.name, config):
            violations.extend(inspect_record(record, config))
    return violations
