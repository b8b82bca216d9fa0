"""Tests for engine configuration."""

import logging

import pytest

from formforge.config import EngineConfig
from formforge.core.types import ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("FORMFORGE_MAX_DEPTH", raising=False)
    monkeypatch.delenv("FORMFORGE_LOG_LEVEL", raising=False)


class TestDefaults:
    def test_unguarded_by_default(self):
        config = EngineConfig()
        assert config.max_evaluation_depth is None
        assert config.log_level == "WARNING"
        assert config.logging_level == logging.WARNING

    def test_rejects_non_positive_depth(self):
        with pytest.raises(ConfigError):
            EngineConfig(max_evaluation_depth=0)

    def test_rejects_unknown_log_level(self):
        with pytest.raises(ConfigError):
            EngineConfig(log_level="LOUD")

    def test_log_level_is_case_insensitive(self):
        assert EngineConfig(log_level="debug").logging_level == logging.DEBUG


class TestFromEnv:
    def test_no_env_keeps_defaults(self):
        assert EngineConfig.from_env() == EngineConfig()

    def test_reads_env(self, monkeypatch):
        monkeypatch.setenv("FORMFORGE_MAX_DEPTH", "50")
        monkeypatch.setenv("FORMFORGE_LOG_LEVEL", "INFO")

        config = EngineConfig.from_env()
        assert config.max_evaluation_depth == 50
        assert config.log_level == "INFO"

    @pytest.mark.parametrize("raw", ["", "none", "None"])
    def test_disable_guard(self, monkeypatch, raw):
        monkeypatch.setenv("FORMFORGE_MAX_DEPTH", raw)
        base = EngineConfig(max_evaluation_depth=10)
        assert EngineConfig.from_env(base).max_evaluation_depth is None

    def test_invalid_depth(self, monkeypatch):
        monkeypatch.setenv("FORMFORGE_MAX_DEPTH", "deep")
        with pytest.raises(ConfigError) as excinfo:
            EngineConfig.from_env()
        assert isinstance(excinfo.value.__cause__, ValueError)


class TestFromFile:
    def test_reads_yaml(self, tmp_path):
        path = tmp_path / "formforge.yaml"
        path.write_text("max_evaluation_depth: 25\nlog_level: DEBUG\n")

        config = EngineConfig.from_file(path)
        assert config.max_evaluation_depth == 25
        assert config.log_level == "DEBUG"

    def test_empty_file_is_defaults(self, tmp_path):
        path = tmp_path / "formforge.yaml"
        path.write_text("")
        assert EngineConfig.from_file(path) == EngineConfig()

    def test_unknown_keys(self, tmp_path):
        path = tmp_path / "formforge.yaml"
        path.write_text("max_depth: 3\n")
        with pytest.raises(ConfigError, match="max_depth"):
            EngineConfig.from_file(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "formforge.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ConfigError):
            EngineConfig.from_file(path)

    def test_boolean_depth_is_rejected(self, tmp_path):
        path = tmp_path / "formforge.yaml"
        path.write_text("max_evaluation_depth: true\n")
        with pytest.raises(ConfigError, match="must be an integer"):
            EngineConfig.from_file(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "formforge.yaml"
        path.write_text("max_evaluation_depth: [unclosed\n")
        with pytest.raises(ConfigError):
            EngineConfig.from_file(path)


class TestLoad:
    def test_env_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "formforge.yaml"
        path.write_text("max_evaluation_depth: 25\nlog_level: DEBUG\n")
        monkeypatch.setenv("FORMFORGE_LOG_LEVEL", "ERROR")

        config = EngineConfig.load(path)
        assert config.max_evaluation_depth == 25
        assert config.log_level == "ERROR"

    def test_without_file(self):
        assert EngineConfig.load() == EngineConfig()
