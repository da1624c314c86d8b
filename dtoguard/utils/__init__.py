"""dtoguard utilities package."""

from .exit_codes import ExitCodes
from .helpers import save_json_file
from .logging import logger

__all__ = [
    "ExitCodes",
    "logger",
    "save_json_file",
]
