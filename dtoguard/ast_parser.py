"""Source parsers: file text in, record declarations out."""

from abc import ABC, abstractmethod
from pathlib import Path

from dtoguard.ast_extractors import go_impl
from dtoguard.indexer.exceptions import ParseError
from dtoguard.rules.base import RecordDeclaration
from dtoguard.utils.logging import logger


class SourceParser(ABC):
    """Turns the text of one source file into record declarations.

    Implementations raise ParseError for text that is not syntactically
    valid. Nothing downstream depends on the parsing library behind them.
    """

    language: str = ""

    @abstractmethod
    def parse(self, content: str, file_path: str | Path) -> list[RecordDeclaration]:
        """Parse ``content`` (read from ``file_path``) into records.

        Raises:
            ParseError: If the content cannot be parsed
        """


class GoSourceParser(SourceParser):
    """Go parser backed by the tree-sitter Go grammar."""

    language = "go"

    def __init__(self):
        from tree_sitter_language_pack import get_parser

        try:
            self._parser = get_parser("go")
        except Exception as e:
            raise RuntimeError(
                f"Failed to load tree-sitter grammar for Go: {e}\n"
                "Please try: pip install --force-reinstall tree-sitter-language-pack"
            ) from e

    def parse(self, content: str, file_path: str | Path) -> list[RecordDeclaration]:
        path = str(file_path)
        tree = self._parser.parse(content.encode("utf-8"))

        error = go_impl.find_syntax_error(tree)
        if error is not None:
            line, column, message = error
            raise ParseError(path, message, line, column)

        records = go_impl.extract_go_records(tree, path)
        logger.debug("Parsed {path}: {count} struct declarations", path=path, count=len(records))
        return records
