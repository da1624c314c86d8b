"""Directory traversal for the sanitization check.

This module contains the SourceWalker class, which collects every source
file under a root directory and turns unreadable directories into a fatal
TraversalError.
"""


import os
from pathlib import Path

from dtoguard.utils.logging import logger

from .exceptions import ParseError, TraversalError


class SourceWalker:
    """Walks a directory tree and collects files with one extension."""

    def __init__(self, root_path: Path, extension: str = ".go"):
        """Initialize the walker.

        Args:
            root_path: Root directory to walk
            extension: Source extension to keep, including the dot
        """
        self.root_path = Path(root_path)
        self.extension = extension

        self.stats = {
            "directories": 0,
            "total_files": 0,
            "source_files": 0,
        }

    @staticmethod
    def _raise_traversal_error(error: OSError) -> None:
        raise TraversalError(str(error.filename or ""), error.strerror or str(error)) from error

    def walk(self) -> list[Path]:
        """Collect source files under the root.

        Returns:
            Source file paths, sorted for deterministic output

        Raises:
            TraversalError: If the root or any directory below it cannot be read
        """
        files = []

        for dirpath, _dirnames, filenames in os.walk(
            self.root_path,
            onerror=self._raise_traversal_error,
        ):
            self.stats["directories"] += 1
            for filename in filenames:
                self.stats["total_files"] += 1
                if filename.endswith(self.extension):
                    files.append(Path(dirpath) / filename)

        self.stats["source_files"] = len(files)
        logger.debug(
            "Walked {root}: {count} source files in {dirs} directories",
            root=self.root_path,
            count=len(files),
            dirs=self.stats["directories"],
        )

        # Filesystem order is not stable across platforms
        return sorted(files)


def read_source(file_path: Path) -> str:
    """Read a source file as UTF-8 text.

    Raises:
        TraversalError: If the file cannot be read
        ParseError: If the bytes are not valid UTF-8
    """
    try:
        raw = Path(file_path).read_bytes()
    except OSError as e:
        raise TraversalError(str(file_path), e.strerror or str(e)) from e

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(str(file_path), f"invalid UTF-8: {e.reason}") from e
