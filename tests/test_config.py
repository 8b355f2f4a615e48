"""Tests for configuration loading."""

import pytest

from abc_gate.config import DEFAULT_FILE_GLOBS, GateConfig, load_config
from abc_gate.exceptions import ConfigurationError, InvalidConfigError


class TestGateConfig:
    def test_defaults(self):
        cfg = GateConfig()
        assert cfg.max_complexity == 15.0
        assert cfg.file_globs == list(DEFAULT_FILE_GLOBS)
        assert cfg.exclusions == []
        assert cfg.parallel is False
        assert cfg.output_format == "rich"

    def test_int_threshold_becomes_float(self):
        assert GateConfig(max_complexity=10).max_complexity == 10.0

    def test_negative_threshold(self):
        with pytest.raises(InvalidConfigError):
            GateConfig(max_complexity=-1)

    def test_zero_workers(self):
        with pytest.raises(InvalidConfigError):
            GateConfig(workers=0)

    def test_unknown_format(self):
        with pytest.raises(InvalidConfigError) as excinfo:
            GateConfig(output_format="xml")
        assert excinfo.value.key == "output_format"

    def test_frozen(self):
        with pytest.raises(AttributeError):
            GateConfig().max_complexity = 3


class TestLoadConfig:
    def test_defaults_without_files(self, isolated_config):
        assert load_config() == GateConfig()

    def test_project_file(self, isolated_config):
        (isolated_config / "abc-gate.toml").write_text(
            'max_complexity = 10\nexclusions = ["Harness#run"]\n'
        )
        cfg = load_config()
        assert cfg.max_complexity == 10.0
        assert cfg.exclusions == ["Harness#run"]

    def test_abc_table(self, isolated_config):
        path = isolated_config / "custom.toml"
        path.write_text('[abc]\nmax_complexity = 12\nfile_globs = ["lib/**/*.rb"]\n')
        cfg = load_config(config_file=path)
        assert cfg.max_complexity == 12.0
        assert cfg.file_globs == ["lib/**/*.rb"]

    def test_explicit_file_beats_project_file(self, isolated_config):
        (isolated_config / "abc-gate.toml").write_text("max_complexity = 10\n")
        path = isolated_config / "custom.toml"
        path.write_text("max_complexity = 20\n")
        assert load_config(config_file=path).max_complexity == 20.0

    def test_env_beats_files(self, isolated_config, monkeypatch):
        (isolated_config / "abc-gate.toml").write_text("max_complexity = 10\n")
        monkeypatch.setenv("ABC_GATE_MAX_COMPLEXITY", "7.5")
        monkeypatch.setenv("ABC_GATE_PARALLEL", "yes")
        cfg = load_config()
        assert cfg.max_complexity == 7.5
        assert cfg.parallel is True

    def test_overrides_beat_env(self, isolated_config, monkeypatch):
        monkeypatch.setenv("ABC_GATE_MAX_COMPLEXITY", "7.5")
        assert load_config(max_complexity=3).max_complexity == 3.0

    def test_none_overrides_ignored(self, isolated_config):
        (isolated_config / "abc-gate.toml").write_text("max_complexity = 10\n")
        assert load_config(max_complexity=None).max_complexity == 10.0

    def test_verbosity_flags(self, isolated_config):
        assert load_config(verbose=True).verbosity == "verbose"
        assert load_config(quiet=True).verbosity == "quiet"
        assert load_config(verbose=False).verbosity == "normal"

    def test_bad_env_value(self, isolated_config, monkeypatch):
        monkeypatch.setenv("ABC_GATE_PARALLEL", "maybe")
        with pytest.raises(ConfigurationError):
            load_config()

    def test_unknown_key(self, isolated_config):
        (isolated_config / "abc-gate.toml").write_text("colour = 'red'\n")
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            load_config()

    def test_missing_explicit_file(self, isolated_config):
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(config_file=isolated_config / "nope.toml")

    def test_malformed_toml(self, isolated_config):
        (isolated_config / "abc-gate.toml").write_text("max_complexity = = 1\n")
        with pytest.raises(ConfigurationError):
            load_config()
