"""Tests for config.load_config and ServerConfig."""

from pathlib import Path

import pytest

from catalog_graph.config import DEFAULT_DATABASE_URI, DEFAULT_PORT, ServerConfig, load_config
from catalog_graph.exceptions import ConfigurationError, InvalidConfigError


class TestServerConfig:
    def test_defaults(self):
        config = ServerConfig()
        assert config.port == 5000
        assert config.database_uri == "sqlite:///catalog.db"
        assert config.verbosity == "normal"

    def test_invalid_port(self):
        with pytest.raises(ValueError):
            ServerConfig(port=0)

    def test_other_scheme_left_to_store(self):
        config = ServerConfig(database_uri="mongodb://localhost/catalog")
        assert config.database_uri == "mongodb://localhost/catalog"

    def test_empty_uri(self):
        with pytest.raises(ValueError):
            ServerConfig(database_uri="")

    def test_bare_path_allowed(self):
        assert ServerConfig(database_uri="data/catalog.db").database_uri == "data/catalog.db"

    def test_verbosity_flags(self):
        assert ServerConfig(verbosity="verbose").verbose
        assert ServerConfig(verbosity="quiet").quiet


class TestLoadConfig:
    def test_defaults(self):
        config = load_config()
        assert config.port == DEFAULT_PORT
        assert config.database_uri == DEFAULT_DATABASE_URI

    def test_port_env(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        assert load_config().port == 8080

    def test_prefixed_env_beats_bare(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("CATALOG_PORT", "9090")
        assert load_config().port == 9090

    def test_mongo_uri_env(self, monkeypatch):
        monkeypatch.setenv("MONGO_URI", "sqlite:///legacy.db")
        assert load_config().database_uri == "sqlite:///legacy.db"

    def test_mongo_uri_env_with_mongo_scheme(self, monkeypatch):
        monkeypatch.setenv("MONGO_URI", "mongodb://localhost:27017/catalog")
        assert load_config().database_uri == "mongodb://localhost:27017/catalog"

    def test_bad_env_value(self, monkeypatch):
        monkeypatch.setenv("CATALOG_PORT", "eighty")
        with pytest.raises(InvalidConfigError) as exc_info:
            load_config()
        assert exc_info.value.key == "CATALOG_PORT"

    def test_project_config_file(self):
        Path("catalog-graph.toml").write_text('[server]\nport = 7000\ndatabase_uri = "sqlite:///x.db"\n')
        config = load_config()
        assert config.port == 7000
        assert config.database_uri == "sqlite:///x.db"

    def test_explicit_config_file_beats_project(self, tmp_path):
        Path("catalog-graph.toml").write_text("port = 7000\n")
        explicit = tmp_path / "explicit.toml"
        explicit.write_text("port = 7100\n")
        assert load_config(config_file=explicit).port == 7100

    def test_env_beats_file(self, monkeypatch):
        Path("catalog-graph.toml").write_text("port = 7000\n")
        monkeypatch.setenv("PORT", "8080")
        assert load_config().port == 8080

    def test_overrides_beat_env(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        assert load_config(port=6000).port == 6000

    def test_none_overrides_ignored(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        assert load_config(port=None).port == 8080

    def test_verbose_override(self):
        assert load_config(verbose=True).verbosity == "verbose"
        assert load_config(quiet=True).verbosity == "quiet"
        assert load_config(verbose=False).verbosity == "normal"

    def test_missing_config_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_config(config_file=tmp_path / "missing.toml")

    def test_malformed_config_file(self, tmp_path):
        bad = tmp_path / "bad.toml"
        bad.write_text("port = = 1\n")
        with pytest.raises(ConfigurationError):
            load_config(config_file=bad)

    def test_unknown_key(self, tmp_path):
        bad = tmp_path / "bad.toml"
        bad.write_text("colour = 'red'\n")
        with pytest.raises(ConfigurationError):
            load_config(config_file=bad)

    def test_invalid_value(self):
        with pytest.raises(ConfigurationError):
            load_config(port=70000)
