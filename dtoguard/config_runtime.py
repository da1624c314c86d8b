"""Runtime configuration for dtoguard - centralized configuration management."""

import copy
import json
import os
from pathlib import Path
from typing import Any

from dtoguard.rules.base import RuleConfig
from dtoguard.utils.logging import logger

CONFIG_FILE = Path(".dtoguard") / "config.json"

DEFAULTS = {
    "paths": {
        "dto_dir": "common/dto",
    },
    "rules": {
        # Structs holding data read back from storage
        "output_suffixes": ["ResponseDto", "Response"],
        # Output-only structs that do not follow the suffix convention
        "excluded_names": ["SportDto", "CommonStatsDto"],
        "input_suffixes": ["Dto"],
        "input_names": ["Login"],
        "marker": "sanitize",
        "extension": ".go",
        "include_string_aliases": False,
    },
}


def _coerce_env_value(value: str, default_value: Any) -> Any:
    """Convert an environment string to the type of the default."""
    if isinstance(default_value, bool):
        lowered = value.strip().lower()
        if lowered in ("1", "true", "yes", "on"):
            return True
        if lowered in ("0", "false", "no", "off"):
            return False
        raise ValueError(f"expected a boolean, got {value!r}")
    if isinstance(default_value, int):
        return int(value)
    if isinstance(default_value, list):
        return [v.strip() for v in value.split(",") if v.strip()]
    return value


def _matches_default(value: Any, default_value: Any) -> bool:
    """A file value replaces a default only if it has the same shape."""
    if not isinstance(value, type(default_value)):
        return False
    if isinstance(default_value, list):
        return all(isinstance(item, str) for item in value)
    return True


def load_runtime_config(root: str | Path = ".") -> dict[str, Any]:
    """
    Load runtime configuration from .dtoguard/config.json and environment variables.

    Config priority (highest to lowest):
    1. Environment variables (DTOGUARD_<SECTION>_<KEY>)
    2. .dtoguard/config.json under ``root``
    3. Built-in defaults

    Args:
        root: Project directory to look for the config file

    Returns:
        Configuration dictionary with merged values
    """
    cfg = copy.deepcopy(DEFAULTS)

    path = Path(root) / CONFIG_FILE
    try:
        if path.exists():
            with open(path, encoding="utf-8") as f:
                user = json.load(f)

            if isinstance(user, dict):
                for section in cfg:
                    if section in user and isinstance(user[section], dict):
                        for key, value in user[section].items():
                            if key in cfg[section] and _matches_default(value, cfg[section][key]):
                                cfg[section][key] = value
                            else:
                                logger.warning(
                                    "Ignoring config entry {section}.{key} in {path}",
                                    section=section,
                                    key=key,
                                    path=path,
                                )
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Could not load config file from {path}: {err}", path=path, err=e)
        logger.warning("Continuing with default configuration")

    for section in cfg:
        for key in cfg[section]:
            env_var = f"DTOGUARD_{section.upper()}_{key.upper()}"
            if env_var in os.environ:
                value = os.environ[env_var]
                try:
                    cfg[section][key] = _coerce_env_value(value, cfg[section][key])
                except ValueError as e:
                    logger.warning(
                        "Invalid value for environment variable {var}: {value!r} - {err}",
                        var=env_var,
                        value=value,
                        err=e,
                    )

    return cfg


def build_rule_config(cfg: dict[str, Any], include_string_aliases: bool | None = None) -> RuleConfig:
    """Build the immutable RuleConfig from the ``rules`` section."""
    rules = cfg["rules"]
    if include_string_aliases is None:
        include_string_aliases = rules["include_string_aliases"]

    return RuleConfig(
        output_suffixes=tuple(rules["output_suffixes"]),
        excluded_names=frozenset(rules["excluded_names"]),
        input_suffixes=tuple(rules["input_suffixes"]),
        input_names=frozenset(rules["input_names"]),
        marker=rules["marker"],
        extension=rules["extension"],
        include_string_aliases=include_string_aliases,
    )
