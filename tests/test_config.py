"""Tests for config loading, validation, and env var overrides."""

from pathlib import Path

import pytest

from envaudit.config.defaults import DEFAULT_TOML
from envaudit.config.loader import ConfigError, load_config


class TestConfigLoading:
    def test_default_config(self, tmp_path: Path):
        cfg = load_config(tmp_path)
        assert cfg.output.format == "text"
        assert cfg.threshold.min_score == 0
        assert cfg.source.include_environ is True
        assert cfg.rules.custom_dir == ".envaudit-rules"

    def test_custom_toml(self, tmp_path: Path):
        (tmp_path / ".envaudit.toml").write_text(
            'version = "1.0"\n'
            '[source]\n'
            'env_file = ".env.production"\n'
            '[output]\n'
            'format = "json"\n'
            '[threshold]\n'
            'min_score = 75\n'
            '[rules]\n'
            'disable = ["GCP_SA_KEY"]\n'
        )
        cfg = load_config(tmp_path)
        assert cfg.source.env_file == ".env.production"
        assert cfg.output.format == "json"
        assert cfg.threshold.min_score == 75
        assert cfg.rules.disable == ["GCP_SA_KEY"]

    def test_starter_template_loads(self, tmp_path: Path):
        (tmp_path / ".envaudit.toml").write_text(DEFAULT_TOML)
        cfg = load_config(tmp_path)
        assert cfg.output.format == "text"

    def test_unknown_keys_ignored(self, tmp_path: Path):
        (tmp_path / ".envaudit.toml").write_text('[output]\nformat = "json"\ncolour = "auto"\n')
        assert load_config(tmp_path).output.format == "json"

    def test_config_override_path(self, tmp_path: Path):
        custom = tmp_path / "custom.toml"
        custom.write_text('[threshold]\nmin_score = 90\n')
        cfg = load_config(tmp_path, config_override=str(custom))
        assert cfg.threshold.min_score == 90

    def test_missing_override_raises(self, tmp_path: Path):
        with pytest.raises(ConfigError):
            load_config(tmp_path, config_override="/nonexistent/config.toml")

    def test_invalid_toml_raises(self, tmp_path: Path):
        (tmp_path / ".envaudit.toml").write_text("this is not valid [toml")
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_invalid_format_raises(self, tmp_path: Path):
        (tmp_path / ".envaudit.toml").write_text('[output]\nformat = "sarif"\n')
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_out_of_range_score_raises(self, tmp_path: Path):
        (tmp_path / ".envaudit.toml").write_text('[threshold]\nmin_score = 150\n')
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    @pytest.mark.parametrize("toml", [
        '[rules]\nenable = "JWT_SECRET"\n',
        '[rules]\ndisable = [1, 2]\n',
        '[rules]\ncustom_dir = 7\n',
        '[source]\ninclude_environ = "no"\n',
        '[source]\nenv_file = 3\n',
        '[output]\nshow_summary = "yes"\n',
    ])
    def test_wrongly_typed_values_raise(self, tmp_path: Path, toml):
        (tmp_path / ".envaudit.toml").write_text(toml)
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_section_must_be_table(self, tmp_path: Path):
        (tmp_path / ".envaudit.toml").write_text('output = "json"\n')
        with pytest.raises(ConfigError):
            load_config(tmp_path)


class TestEnvVarOverrides:
    def test_format_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("ENVAUDIT_FORMAT", "json")
        assert load_config(tmp_path).output.format == "json"

    def test_min_score_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("ENVAUDIT_MIN_SCORE", "70")
        assert load_config(tmp_path).threshold.min_score == 70

    def test_disable_rules_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("ENVAUDIT_DISABLE_RULES", "GCP_SA_KEY, EXPO_TOKEN")
        cfg = load_config(tmp_path)
        assert "GCP_SA_KEY" in cfg.rules.disable
        assert "EXPO_TOKEN" in cfg.rules.disable

    def test_env_file_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("ENVAUDIT_ENV_FILE", ".env.ci")
        assert load_config(tmp_path).source.env_file == ".env.ci"

    def test_mistyped_disable_list_raises_before_override(self, tmp_path: Path, monkeypatch):
        (tmp_path / ".envaudit.toml").write_text('[rules]\ndisable = "GCP_SA_KEY"\n')
        monkeypatch.setenv("ENVAUDIT_DISABLE_RULES", "EXPO_TOKEN")
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    @pytest.mark.parametrize("var,value", [
        ("ENVAUDIT_FORMAT", "sarif"),
        ("ENVAUDIT_MIN_SCORE", "high"),
        ("ENVAUDIT_MIN_SCORE", "500"),
    ])
    def test_invalid_env_ignored(self, tmp_path: Path, monkeypatch, var, value):
        monkeypatch.setenv(var, value)
        cfg = load_config(tmp_path)
        assert cfg.output.format == "text"
        assert cfg.threshold.min_score == 0
