"""Tests for configuration loading."""

import os

import pytest

from filestats.config import ScanConfig, load_config, normalize_extensions
from filestats.exceptions import ConfigurationError, InvalidConfigError


@pytest.fixture
def isolated(tmp_path, monkeypatch):
    """No global/project config files and no FILESTATS_* variables."""
    home = tmp_path / "home"
    home.mkdir()
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    for key in list(os.environ):
        if key.startswith("FILESTATS_"):
            monkeypatch.delenv(key)
    return tmp_path


class TestScanConfig:
    def test_defaults(self):
        config = ScanConfig()
        assert config.workers == 1
        assert config.recursive is False
        assert config.output_format == "plain"
        assert config.effective_max_depth == 1

    def test_recursive_depth(self):
        assert ScanConfig(recursive=True).effective_max_depth is None
        assert ScanConfig(recursive=True, max_depth=3).effective_max_depth == 3
        assert ScanConfig(recursive=False, max_depth=3).effective_max_depth == 1

    def test_extensions_normalized(self):
        config = ScanConfig(include_extensions=[".java", "sh", "JAVA"])
        assert config.include_extensions == ["JAVA", "SH"]

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"workers": 0},
            {"max_depth": 0},
            {"output_format": "yaml"},
            {"verbosity": "loud"},
            {"include_extensions": ["a"], "exclude_extensions": ["b"]},
        ],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(InvalidConfigError):
            ScanConfig(**kwargs)


class TestNormalizeExtensions:
    def test_comma_string(self):
        assert normalize_extensions("java, .sh,,txt") == ["JAVA", "SH", "TXT"]

    def test_none(self):
        assert normalize_extensions(None) == []


class TestLoadConfig:
    def test_defaults_when_nothing_configured(self, isolated):
        assert load_config() == ScanConfig()

    def test_project_file(self, isolated):
        (isolated / "work" / "filestats.toml").write_text("workers = 3\nrecursive = true\n")
        config = load_config()
        assert config.workers == 3
        assert config.recursive is True

    def test_filestats_table(self, isolated):
        path = isolated / "custom.toml"
        path.write_text('[filestats]\noutput_format = "json"\nexclude_extensions = ["log"]\n')
        config = load_config(config_file=path)
        assert config.output_format == "json"
        assert config.exclude_extensions == ["LOG"]

    def test_env_overrides_file(self, isolated, monkeypatch):
        (isolated / "work" / "filestats.toml").write_text("workers = 3\n")
        monkeypatch.setenv("FILESTATS_WORKERS", "6")
        monkeypatch.setenv("FILESTATS_INCLUDE_EXTENSIONS", "java,sh")
        monkeypatch.setenv("FILESTATS_RECURSIVE", "yes")
        config = load_config()
        assert config.workers == 6
        assert config.include_extensions == ["JAVA", "SH"]
        assert config.recursive is True

    def test_overrides_win_and_none_is_ignored(self, isolated, monkeypatch):
        monkeypatch.setenv("FILESTATS_WORKERS", "6")
        config = load_config(workers=2, max_depth=None)
        assert config.workers == 2
        assert config.max_depth is None

    def test_verbose_and_quiet_flags(self, isolated):
        assert load_config(verbose=True).verbosity == "verbose"
        assert load_config(quiet=True).verbosity == "quiet"
        assert load_config(verbose=False, quiet=False).verbosity == "normal"

    def test_bad_env_value(self, isolated, monkeypatch):
        monkeypatch.setenv("FILESTATS_RECURSIVE", "maybe")
        with pytest.raises(ConfigurationError, match="FILESTATS_RECURSIVE"):
            load_config()

    def test_missing_explicit_file(self, isolated):
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(config_file=isolated / "nope.toml")

    def test_unknown_key(self, isolated):
        path = isolated / "bad.toml"
        path.write_text("colour = 'red'\n")
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            load_config(config_file=path)

    def test_malformed_toml(self, isolated):
        path = isolated / "bad.toml"
        path.write_text("workers = = 1\n")
        with pytest.raises(ConfigurationError, match="Invalid config file"):
            load_config(config_file=path)


class TestFilterLayering:
    def test_override_include_replaces_file_exclude(self, isolated):
        (isolated / "work" / "filestats.toml").write_text('exclude_extensions = ["log"]\n')
        config = load_config(include_extensions="java")
        assert config.include_extensions == ["JAVA"]
        assert config.exclude_extensions == []

    def test_project_include_replaces_global_exclude(self, isolated):
        (isolated / "home" / ".filestats.toml").write_text('exclude_extensions = ["tmp"]\n')
        (isolated / "work" / "filestats.toml").write_text('include_extensions = ["sh"]\n')
        config = load_config()
        assert config.include_extensions == ["SH"]
        assert config.exclude_extensions == []

    def test_env_exclude_replaces_file_include(self, isolated, monkeypatch):
        (isolated / "work" / "filestats.toml").write_text('include_extensions = ["sh"]\n')
        monkeypatch.setenv("FILESTATS_EXCLUDE_EXTENSIONS", "log")
        config = load_config()
        assert config.include_extensions == []
        assert config.exclude_extensions == ["LOG"]

    def test_unrelated_override_keeps_file_filter(self, isolated):
        (isolated / "work" / "filestats.toml").write_text('exclude_extensions = ["log"]\n')
        assert load_config(workers=2).exclude_extensions == ["LOG"]

    def test_both_in_one_source_rejected(self, isolated):
        (isolated / "work" / "filestats.toml").write_text(
            'include_extensions = ["sh"]\nexclude_extensions = ["log"]\n'
        )
        with pytest.raises(InvalidConfigError):
            load_config()

    def test_recursive_override_false_beats_file(self, isolated):
        (isolated / "work" / "filestats.toml").write_text("recursive = true\n")
        assert load_config(recursive=False).recursive is False
