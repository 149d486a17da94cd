"""Tests for configuration loading and factory functions."""

from __future__ import annotations

from pathlib import Path
from tempfile import NamedTemporaryFile

import pydantic
import pytest

from tymout_bff.config import (
    CONFIG_PATH_ENV,
    BffConfig,
    EventDirectoryConfig,
    ExploreConfig,
    LoggingConfig,
    ServerConfig,
    create_aggregator,
    create_directory,
    create_from_config,
    get_default_config_path,
    load_config,
    resolve_config,
)
from tymout_bff.directory import HTTPEventDirectory
from tymout_bff.pipeline import ExploreAggregator


def _write_yaml(content: str) -> Path:
    with NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        f.write(content)
        f.flush()
        return Path(f.name)


class TestConfigModels:
    """Tests for Pydantic config models."""

    def test_event_directory_config_defaults(self) -> None:
        config = EventDirectoryConfig()
        assert config.base_url is None
        assert config.timeout_seconds == 10.0

    def test_explore_config_defaults(self) -> None:
        assert ExploreConfig().spotlight_limit == 5

    def test_server_config_defaults(self) -> None:
        config = ServerConfig()
        assert config.host == "0.0.0.0"
        assert config.port == 3000
        assert config.cors_origins == ["*"]

    def test_logging_config_defaults(self) -> None:
        assert LoggingConfig().level == "INFO"

    def test_root_config_defaults(self) -> None:
        config = BffConfig()
        assert isinstance(config.event_directory, EventDirectoryConfig)
        assert isinstance(config.explore, ExploreConfig)

    def test_spotlight_limit_must_be_positive(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            ExploreConfig(spotlight_limit=0)

    def test_timeout_must_be_positive(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            EventDirectoryConfig(timeout_seconds=0)

    def test_config_is_frozen(self) -> None:
        config = ExploreConfig()
        with pytest.raises(pydantic.ValidationError):
            config.spotlight_limit = 10  # type: ignore[misc]


class TestConfigLoader:
    """Tests for YAML config loading."""

    def test_load_config(self) -> None:
        path = _write_yaml(
            """
event_directory:
  base_url: http://events:3002
  timeout_seconds: 2.5
explore:
  spotlight_limit: 3
logging:
  level: DEBUG
"""
        )
        config = load_config(path)

        assert config.event_directory.base_url == "http://events:3002"
        assert config.event_directory.timeout_seconds == 2.5
        assert config.explore.spotlight_limit == 3
        assert config.logging.level == "DEBUG"
        assert config.server.port == 3000

    def test_load_empty_config(self) -> None:
        config = load_config(_write_yaml(""))
        assert config == BffConfig()

    def test_load_invalid_config(self) -> None:
        path = _write_yaml("logging:\n  level: LOUD\n")
        with pytest.raises(pydantic.ValidationError):
            load_config(path)

    def test_load_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_get_default_config_path(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)
        path = get_default_config_path()
        assert path.name == "default.yaml"
        assert "configs" in str(path)

    def test_load_default_config(self) -> None:
        path = get_default_config_path()
        if path.exists():
            config = load_config(path)
            assert isinstance(config, BffConfig)

    def test_default_path_env_override(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        target = tmp_path / "bff.yaml"
        monkeypatch.setenv(CONFIG_PATH_ENV, str(target))
        assert get_default_config_path() == target

    def test_resolve_config_explicit_path(self) -> None:
        path = _write_yaml("explore:\n  spotlight_limit: 2\n")
        assert resolve_config(path).explore.spotlight_limit == 2

    def test_resolve_config_explicit_path_must_exist(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            resolve_config(tmp_path / "missing.yaml")

    def test_resolve_config_uses_env_location(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        target = tmp_path / "bff.yaml"
        target.write_text("server:\n  port: 8080\n")
        monkeypatch.setenv(CONFIG_PATH_ENV, str(target))
        assert resolve_config().server.port == 8080

    def test_resolve_config_falls_back_to_defaults(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv(CONFIG_PATH_ENV, str(tmp_path / "absent.yaml"))
        assert resolve_config() == BffConfig()


class TestFactoryFunctions:
    """Tests for component factory functions."""

    def test_create_directory(self) -> None:
        config = EventDirectoryConfig(base_url="http://events:3002", timeout_seconds=3)
        directory = create_directory(config)
        assert isinstance(directory, HTTPEventDirectory)
        assert directory.base_url == "http://events:3002"

    def test_create_directory_env_fallback(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EVENT_SERVICE_URL", "http://from-env:9000")
        directory = create_directory(EventDirectoryConfig())
        assert isinstance(directory, HTTPEventDirectory)
        assert directory.base_url == "http://from-env:9000"

    def test_create_aggregator(self) -> None:
        directory = create_directory(EventDirectoryConfig(base_url="http://events"))
        aggregator = create_aggregator(ExploreConfig(spotlight_limit=7), directory)
        assert isinstance(aggregator, ExploreAggregator)
        assert aggregator._spotlight_limit == 7

    def test_create_from_config(self) -> None:
        aggregator = create_from_config(BffConfig())
        assert isinstance(aggregator, ExploreAggregator)
