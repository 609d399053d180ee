"""Integration tests for configuration loading with layered precedence.

Tests the real load_config() function with actual YAML files, environment
variables, and CLI overrides to verify precedence: defaults < YAML < ENV < CLI.
"""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from kinolens.infrastructure.config.load import load_config

pytestmark = pytest.mark.integration


@pytest.fixture()
def yaml_config(tmp_path: Path) -> Path:
    """Write a minimal YAML config and return its path."""
    config = {
        "app_name": "kinolens-test",
        "environment": "test",
        "poiskkino": {
            "api_key": "yaml-key",
            "timeout_seconds": 15.0,
            "user_agent": "TestAgent/1.0",
        },
        "logging": {"level": "DEBUG", "format": "console"},
    }
    path = tmp_path / "config.yaml"
    path.write_text(yaml.dump(config), encoding="utf-8")
    return path


class TestDefaultsOnly:
    """Load with no YAML, no ENV, no CLI: pure defaults."""

    def test_defaults_produce_valid_config(self) -> None:
        config = load_config()
        assert config.app_name == "kinolens"
        assert config.environment == "dev"
        assert config.poiskkino.api_key == ""
        assert config.poiskkino.configured is False
        assert config.poiskkino.base_url == "https://api.poiskkino.dev"
        assert config.poiskkino.api_version == "v1.4"
        assert config.poiskkino.timeout_seconds == 120.0
        assert config.poiskkino.search_limit == 3
        assert config.poiskkino.positive_ttl_seconds == 86_400
        assert config.poiskkino.negative_ttl_seconds == 3_600
        assert config.log_level == "INFO"
        assert config.log_format == "console"  # dev → console

    def test_defaults_derive_log_format_from_environment(self) -> None:
        config = load_config(cli_overrides={"environment": "prod"})
        assert config.log_format == "json"


class TestYamlOverrides:
    """YAML values override defaults."""

    def test_yaml_overrides_defaults(self, yaml_config: Path) -> None:
        config = load_config(config_path=yaml_config)
        assert config.app_name == "kinolens-test"
        assert config.environment == "test"
        assert config.poiskkino.api_key == "yaml-key"
        assert config.poiskkino.timeout_seconds == 15.0
        assert config.poiskkino.user_agent == "TestAgent/1.0"
        assert config.log_level == "DEBUG"

    def test_yaml_file_not_found_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(config_path=tmp_path / "nonexistent.yaml")

    def test_yaml_partial_override_preserves_defaults(
        self, tmp_path: Path
    ) -> None:
        """YAML that only sets poiskkino.timeout_seconds keeps other defaults."""
        path = tmp_path / "partial.yaml"
        path.write_text(yaml.dump({"poiskkino": {"timeout_seconds": 99.0}}), encoding="utf-8")

        config = load_config(config_path=path)
        assert config.poiskkino.timeout_seconds == 99.0
        assert config.poiskkino.search_limit == 3  # default preserved
        assert config.app_name == "kinolens"  # default preserved

    def test_empty_yaml_is_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(config_path=path).app_name == "kinolens"

    def test_non_mapping_yaml_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ValueError, match="mapping"):
            load_config(config_path=path)


class TestEnvOverrides:
    """Environment variables override YAML and defaults."""

    def test_env_overrides_yaml(
        self, yaml_config: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("KINOLENS_LOG_LEVEL", "WARNING")
        monkeypatch.setenv("KINOLENS_POISKKINO_TIMEOUT_SECONDS", "60.0")

        config = load_config(config_path=yaml_config)
        assert config.log_level == "WARNING"
        assert config.poiskkino.timeout_seconds == 60.0
        # YAML values not overridden by ENV stay
        assert config.app_name == "kinolens-test"

    def test_env_overrides_defaults(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("KINOLENS_ENVIRONMENT", "prod")

        config = load_config()
        assert config.environment == "prod"
        assert config.log_format == "json"  # prod → json

    def test_short_api_key_variable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("KINOLENS_API_KEY", "short")
        assert load_config().poiskkino.api_key == "short"

    def test_sectioned_api_key_variable_wins(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("KINOLENS_API_KEY", "short")
        monkeypatch.setenv("KINOLENS_POISKKINO_API_KEY", "long")
        assert load_config().poiskkino.api_key == "long"

    def test_dotenv_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        # Register the variable so monkeypatch removes what load_dotenv sets.
        monkeypatch.setenv("KINOLENS_POISKKINO_API_KEY", "placeholder")
        monkeypatch.delenv("KINOLENS_POISKKINO_API_KEY")
        dotenv = tmp_path / ".env"
        dotenv.write_text("KINOLENS_POISKKINO_API_KEY=from-dotenv\n", encoding="utf-8")

        config = load_config(dotenv_path=dotenv)
        assert config.poiskkino.api_key == "from-dotenv"

    def test_dotenv_missing_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(dotenv_path=tmp_path / ".env")


class TestCliOverrides:
    """CLI overrides beat everything (highest precedence)."""

    def test_cli_overrides_yaml_and_env(
        self, yaml_config: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("KINOLENS_LOG_LEVEL", "WARNING")

        config = load_config(
            config_path=yaml_config,
            cli_overrides={"log_level": "ERROR", "api_key": "cli-key"},
        )
        assert config.log_level == "ERROR"
        assert config.poiskkino.api_key == "cli-key"

    def test_cli_overrides_with_sectioned_format(
        self, yaml_config: Path
    ) -> None:
        config = load_config(
            config_path=yaml_config,
            cli_overrides={"poiskkino": {"timeout_seconds": 5.0}},
        )
        assert config.poiskkino.timeout_seconds == 5.0
        assert config.poiskkino.api_key == "yaml-key"


class TestValidation:
    """Invalid values fail at load time."""

    @pytest.mark.parametrize(
        "section",
        [
            {"timeout_seconds": 0},
            {"search_limit": 0},
            {"negative_ttl_seconds": 86_400},
            {"positive_ttl_seconds": 60},
        ],
    )
    def test_invalid_poiskkino_settings(self, section: dict[str, float]) -> None:
        with pytest.raises(ValidationError):
            load_config(cli_overrides={"poiskkino": section})

    def test_invalid_environment(self) -> None:
        with pytest.raises(ValidationError):
            load_config(cli_overrides={"environment": "staging"})

    def test_sectioned_dump_masks_key(self) -> None:
        config = load_config(cli_overrides={"api_key": "secret"})
        dumped = config.to_sectioned_dict()
        assert dumped["poiskkino"]["api_key"] == "***"  # type: ignore[index]
        assert "secret" not in repr(config)
