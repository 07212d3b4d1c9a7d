"""Tests for configuration loading."""

import pytest
from pathlib import Path

from puha.config import load_config
from puha.errors import ConfigError

_ENV_KEYS = ["PUHA_FILE", "PUHA_LOG_LEVEL", "PUHA_INDENT"]


@pytest.fixture(autouse=True)
def clean_env(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


class TestConfig:
    def test_defaults(self):
        config = load_config()
        assert config.file == Path("space.json")
        assert config.log_level == "WARNING"
        assert config.indent == 2

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("PUHA_FILE", "tree.yaml")
        monkeypatch.setenv("PUHA_INDENT", "4")

        config = load_config()
        assert config.file == Path("tree.yaml")
        assert config.indent == 4

    def test_toml_file(self, tmp_path: Path):
        toml_path = tmp_path / "puha.toml"
        toml_path.write_text("""
file = "spaces/main.json"
log_level = "INFO"
indent = 4
""")
        config = load_config(toml_path)
        assert config.file == Path("spaces/main.json")
        assert config.log_level == "INFO"
        assert config.indent == 4

    def test_toml_discovered_in_cwd(self, tmp_path: Path):
        (tmp_path / "puha.toml").write_text('file = "found.json"\n')
        config = load_config()
        assert config.file == Path("found.json")

    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("PUHA_LOG_LEVEL", "DEBUG")

        toml_path = tmp_path / "puha.toml"
        toml_path.write_text("""
log_level = "INFO"
""")
        config = load_config(toml_path)
        assert config.log_level == "DEBUG"  # env wins

    def test_malformed_toml(self, tmp_path: Path):
        toml_path = tmp_path / "puha.toml"
        toml_path.write_text("file = \n")
        with pytest.raises(ConfigError, match="cannot load"):
            load_config(toml_path)

    def test_non_integer_indent(self, monkeypatch):
        monkeypatch.setenv("PUHA_INDENT", "abc")
        with pytest.raises(ConfigError, match="indent must be an integer, got 'abc'"):
            load_config()
