"""Small file helpers shared by commands."""

import json
from pathlib import Path
from typing import Any


def save_json_file(data: dict[str, Any], file_path: str | Path) -> None:
    """
    Save data as JSON to file, creating parent directories.

    Args:
        data: Data to save
        file_path: Path to output file
    """
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, sort_keys=True)
