"""Tests for runtime configuration loading."""

import json
import os

import pytest

from dtoguard.config_runtime import DEFAULTS, build_rule_config, load_runtime_config
from dtoguard.rules.base import RuleConfig
from dtoguard.utils.logging import logger


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop any DTOGUARD_* variables from the caller's environment."""
    for key in list(os.environ):
        if key.startswith("DTOGUARD_") and not key.startswith("DTOGUARD_LOG"):
            monkeypatch.delenv(key)


def write_config(root, data):
    config_dir = root / ".dtoguard"
    config_dir.mkdir()
    (config_dir / "config.json").write_text(json.dumps(data), encoding="utf-8")


class TestLoadRuntimeConfig:
    def test_defaults(self, tmp_path):
        cfg = load_runtime_config(tmp_path)

        assert cfg == DEFAULTS
        assert cfg is not DEFAULTS

    def test_defaults_match_rule_config(self, tmp_path):
        assert build_rule_config(load_runtime_config(tmp_path)) == RuleConfig()

    def test_config_file_overrides(self, tmp_path):
        write_config(tmp_path, {
            "paths": {"dto_dir": "internal/dto"},
            "rules": {"marker": "escape", "input_names": ["Login", "Credentials"]},
        })

        cfg = load_runtime_config(tmp_path)

        assert cfg["paths"]["dto_dir"] == "internal/dto"
        assert cfg["rules"]["marker"] == "escape"
        assert cfg["rules"]["input_names"] == ["Login", "Credentials"]
        assert cfg["rules"]["input_suffixes"] == ["Dto"]

    def test_wrong_type_in_file_ignored(self, tmp_path):
        write_config(tmp_path, {"rules": {"marker": 3, "unknown": "x"}})

        cfg = load_runtime_config(tmp_path)

        assert cfg["rules"]["marker"] == "sanitize"

    @pytest.mark.parametrize(
        "value",
        [["Dto", 5], ["Dto", ["Request"]], ["Dto", None]],
        ids=["int", "nested-list", "null"],
    )
    def test_non_string_list_items_ignored(self, tmp_path, value):
        write_config(tmp_path, {"rules": {"input_suffixes": value, "excluded_names": value}})

        cfg = load_runtime_config(tmp_path)

        assert cfg["rules"]["input_suffixes"] == ["Dto"]
        assert cfg["rules"]["excluded_names"] == ["SportDto", "CommonStatsDto"]
        rule_config = build_rule_config(cfg)
        assert rule_config.input_suffixes == ("Dto",)

    def test_rejected_entry_logs_warning(self, tmp_path):
        messages = []
        sink_id = logger.add(messages.append, level="WARNING", format="{message}")
        try:
            write_config(tmp_path, {"rules": {"input_suffixes": ["Dto", 5]}})
            load_runtime_config(tmp_path)
        finally:
            logger.remove(sink_id)

        assert any("Ignoring config entry rules.input_suffixes" in m for m in messages)

    def test_malformed_file_keeps_defaults(self, tmp_path):
        config_dir = tmp_path / ".dtoguard"
        config_dir.mkdir()
        (config_dir / "config.json").write_text("{not json", encoding="utf-8")

        assert load_runtime_config(tmp_path) == DEFAULTS

    def test_environment_overrides(self, tmp_path, monkeypatch):
        write_config(tmp_path, {"rules": {"marker": "escape"}})
        monkeypatch.setenv("DTOGUARD_RULES_MARKER", "clean")
        monkeypatch.setenv("DTOGUARD_RULES_EXCLUDED_NAMES", "SportDto, StatsDto")
        monkeypatch.setenv("DTOGUARD_RULES_INCLUDE_STRING_ALIASES", "true")
        monkeypatch.setenv("DTOGUARD_PATHS_DTO_DIR", "pkg/dto")

        cfg = load_runtime_config(tmp_path)

        assert cfg["rules"]["marker"] == "clean"
        assert cfg["rules"]["excluded_names"] == ["SportDto", "StatsDto"]
        assert cfg["rules"]["include_string_aliases"] is True
        assert cfg["paths"]["dto_dir"] == "pkg/dto"

    def test_invalid_boolean_environment_ignored(self, tmp_path, monkeypatch):
        monkeypatch.setenv("DTOGUARD_RULES_INCLUDE_STRING_ALIASES", "maybe")

        cfg = load_runtime_config(tmp_path)

        assert cfg["rules"]["include_string_aliases"] is False


class TestBuildRuleConfig:
    def test_converts_collections(self, tmp_path):
        config = build_rule_config(load_runtime_config(tmp_path))

        assert config.output_suffixes == ("ResponseDto", "Response")
        assert config.excluded_names == frozenset({"SportDto", "CommonStatsDto"})
        assert config.input_suffixes == ("Dto",)
        assert config.input_names == frozenset({"Login"})
        assert config.marker == "sanitize"
        assert config.extension == ".go"

    def test_alias_flag_override(self, tmp_path):
        cfg = load_runtime_config(tmp_path)

        assert build_rule_config(cfg, include_string_aliases=True).include_string_aliases is True
        assert build_rule_config(cfg).include_string_aliases is False
