"""Centralized logging configuration using Loguru.

Usage:
    from dtoguard.utils.logging import logger
    logger.debug("Parsed {path}", path=path)

Environment Variables:
    DTOGUARD_LOG_LEVEL: DEBUG|INFO|WARNING|ERROR (default: WARNING)
    DTOGUARD_LOG_JSON: 0|1 (default: 0, human-readable)
    DTOGUARD_LOG_FILE: path to an NDJSON log file (optional)

The default level is WARNING: stderr is the channel for fatal analysis
errors, so pipeline progress stays at DEBUG and only shows up on request.
"""

import json
import os
import sys
import uuid

from loguru import logger

logger.remove()

# Pino-compatible numeric levels
PINO_LEVELS = {
    "TRACE": 10,
    "DEBUG": 20,
    "INFO": 30,
    "WARNING": 40,
    "ERROR": 50,
    "CRITICAL": 60,
}

_log_level = os.environ.get("DTOGUARD_LOG_LEVEL", "WARNING").upper()
_json_mode = os.environ.get("DTOGUARD_LOG_JSON", "0") == "1"
_log_file = os.environ.get("DTOGUARD_LOG_FILE")
_run_id = os.environ.get("DTOGUARD_RUN_ID") or str(uuid.uuid4())


def _to_pino(record) -> dict:
    """Convert a loguru record into a Pino-style dict."""
    pino_log = {
        "level": PINO_LEVELS.get(record["level"].name, 30),
        "time": int(record["time"].timestamp() * 1000),
        "msg": record["message"],
        "pid": record["process"].id,
        "run_id": record["extra"].get("run_id", _run_id),
    }

    for key, value in record["extra"].items():
        if key != "run_id":
            pino_log[key] = str(value)

    if record["exception"]:
        pino_log["err"] = {
            "type": record["exception"].type.__name__ if record["exception"].type else "Error",
            "message": str(record["exception"].value) if record["exception"].value else "",
        }

    return pino_log


def pino_compatible_sink(message):
    """Write log records to stderr as NDJSON.

    Never call logger.* inside a sink - it recurses.
    """
    sys.stderr.write(json.dumps(_to_pino(message.record)) + "\n")
    sys.stderr.flush()


# No emojis - output must stay ASCII for Windows consoles
_human_format = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}:{function}:{line}</cyan> - "
    "<level>{message}</level>"
)

logger.level("DEBUG", color="<blue>")
logger.level("INFO", color="<white>")
logger.level("WARNING", color="<yellow>")
logger.level("ERROR", color="<red>")

if _json_mode:
    logger.add(pino_compatible_sink, level=_log_level, colorize=False)
else:
    logger.add(
        sys.stderr,
        level=_log_level,
        format=_human_format,
        colorize=None,  # Auto-detect: colors if TTY, plain if piped
    )

if _log_file:

    def _file_pino_sink(message):
        """Append Pino-format JSON to the configured log file."""
        with open(_log_file, "a", encoding="utf-8") as f:
            f.write(json.dumps(_to_pino(message.record)) + "\n")

    logger.add(_file_pino_sink, level="DEBUG")


__all__ = [
    "logger",
]
