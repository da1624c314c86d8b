"""Go struct extraction using tree-sitter.

Everything in this module works on tree-sitter nodes; callers only see the
RecordDeclaration / FieldDeclaration contracts from ``dtoguard.rules.base``.
"""

from collections.abc import Iterator
from typing import Any

from dtoguard.rules.base import FieldDeclaration, FieldKind, FieldType, RecordDeclaration

STRING_TYPE = "string"

_POINTER_TYPES = {"pointer_type"}
_SLICE_TYPES = {"slice_type", "array_type", "implicit_length_array_type"}


def _get_node_text(node: Any) -> str:
    """Extract text from a tree-sitter node."""
    if node is None:
        return ""
    return node.text.decode("utf-8", errors="ignore")


def _find_child_by_type(node: Any, child_type: str) -> Any | None:
    """Find first child of given type."""
    if node is None:
        return None
    for child in node.children:
        if child.type == child_type:
            return child
    return None


def _find_children_by_type(node: Any, child_type: str) -> list[Any]:
    """Find all children of given type."""
    if node is None:
        return []
    return [child for child in node.children if child.type == child_type]


def _iter_nodes(root: Any) -> Iterator[Any]:
    """Pre-order walk over every node, in source order."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def _line(node: Any) -> int:
    return node.start_point[0] + 1


_TOP_LEVEL_TYPES = {
    "package_clause",
    "import_declaration",
    "function_declaration",
    "method_declaration",
    "type_declaration",
    "const_declaration",
    "var_declaration",
    "comment",
}


def _position(node: Any) -> tuple[int, int]:
    return _line(node), node.start_point[1] + 1


def find_syntax_error(tree: Any) -> tuple[int, int, str] | None:
    """Locate the first syntax error in a tree.

    tree-sitter-go accepts a few inputs the Go compiler rejects (no package
    clause, statements at file scope), so those are reported here as well.

    Returns:
        (line, column, message) with 1-based positions, or None if the tree is clean
    """
    root = tree.root_node
    if root.has_error:
        for node in _iter_nodes(root):
            if node.is_missing:
                return *_position(node), f"missing {node.type!r}"
            if node.type == "ERROR":
                snippet = _get_node_text(node).splitlines()[0] if node.text else ""
                return *_position(node), f"unexpected {snippet[:40]!r}"
        return _line(root), 1, "syntax error"

    declarations = [child for child in root.named_children if child.type != "comment"]
    if not declarations or declarations[0].type != "package_clause":
        anchor = declarations[0] if declarations else root
        return *_position(anchor), "expected 'package' clause"

    for index, child in enumerate(declarations):
        if child.type not in _TOP_LEVEL_TYPES:
            return *_position(child), f"non-declaration statement outside function body ({child.type})"
        if child.type == "package_clause" and index > 0:
            return *_position(child), "unexpected second 'package' clause"

    return None


def extract_string_aliases(tree: Any) -> set[str]:
    """Names declared in this file whose underlying type is ``string``.

    Covers both ``type Email string`` and ``type Email = string``.
    """
    aliases = set()
    for node in _iter_nodes(tree.root_node):
        if node.type not in ("type_spec", "type_alias"):
            continue
        name_node = node.child_by_field_name("name")
        type_node = node.child_by_field_name("type")
        if name_node is None or type_node is None:
            continue
        if type_node.type == "type_identifier" and _get_node_text(type_node) == STRING_TYPE:
            aliases.add(_get_node_text(name_node))
    return aliases


def classify_type(type_node: Any, string_aliases: set[str], is_pointer: bool = False) -> FieldType:
    """Build a FieldType descriptor from a field's type node."""
    text = _get_node_text(type_node)
    if is_pointer:
        return FieldType(FieldKind.POINTER, "*" + text)
    if type_node is None:
        return FieldType(FieldKind.OTHER, text)
    if type_node.type in _POINTER_TYPES:
        return FieldType(FieldKind.POINTER, text)
    if type_node.type in _SLICE_TYPES:
        return FieldType(FieldKind.SLICE, text)
    if type_node.type == "type_identifier":
        if text == STRING_TYPE:
            return FieldType(FieldKind.PRIMITIVE_STRING, text)
        if text in string_aliases:
            return FieldType(FieldKind.ALIASED_STRING, text)
    return FieldType(FieldKind.OTHER, text)


def _parse_tag(field_decl: Any) -> str | None:
    """Struct tag text without its quotes, or None if the field has no tag."""
    tag_node = field_decl.child_by_field_name("tag")
    if tag_node is None:
        return None
    return _get_node_text(tag_node)[1:-1]


def _parse_field_declaration(field_decl: Any, string_aliases: set[str]) -> list[FieldDeclaration]:
    """Parse a field declaration, which may declare several names (x, y int)."""
    type_node = field_decl.child_by_field_name("type")
    tag = _parse_tag(field_decl)
    line = _line(field_decl)

    name_nodes = field_decl.children_by_field_name("name")
    if not name_nodes:
        # Embedded field: the type name doubles as the field name
        is_pointer = _find_child_by_type(field_decl, "*") is not None
        field_type = classify_type(type_node, string_aliases, is_pointer=is_pointer)
        embedded_name = _get_node_text(type_node).split(".")[-1]
        return [FieldDeclaration(embedded_name, field_type, tag, line, is_embedded=True)]

    field_type = classify_type(type_node, string_aliases)
    return [
        FieldDeclaration(_get_node_text(name_node), field_type, tag, line)
        for name_node in name_nodes
    ]


def extract_go_records(tree: Any, file_path: str) -> list[RecordDeclaration]:
    """Extract every struct type declaration from a Go file.

    Grouped ``type ( ... )`` blocks and types declared inside function
    bodies are included. Anonymous structs used as field types are not
    records of their own.
    """
    string_aliases = extract_string_aliases(tree)
    records = []

    for type_spec in _iter_nodes(tree.root_node):
        if type_spec.type != "type_spec":
            continue

        struct_type = type_spec.child_by_field_name("type")
        if struct_type is None or struct_type.type != "struct_type":
            continue

        name_node = type_spec.child_by_field_name("name")
        if name_node is None:
            continue

        fields: list[FieldDeclaration] = []
        field_list = _find_child_by_type(struct_type, "field_declaration_list")
        for field_decl in _find_children_by_type(field_list, "field_declaration"):
            fields.extend(_parse_field_declaration(field_decl, string_aliases))

        records.append(
            RecordDeclaration(
                name=_get_node_text(name_node),
                fields=tuple(fields),
                file_path=file_path,
                line=_line(type_spec),
            )
        )

    return records
