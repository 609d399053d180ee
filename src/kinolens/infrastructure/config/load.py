from __future__ import annotations

from copy import deepcopy
from pathlib import Path
from typing import Any, Mapping

import yaml
from dotenv import load_dotenv

from .defaults import DEFAULT_CONFIG
from .schema import AppConfig, EnvOverrides


_SECTION_KEYS: set[str] = {"poiskkino", "logging"}


def _deep_merge(base: dict[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """
    Recursively merge `override` into `base` and return `base`.

    Rules:
    - dict + dict => deep merge
    - otherwise => override wins
    """
    for key, value in override.items():
        if (
            key in base
            and isinstance(base[key], dict)
            and isinstance(value, Mapping)
        ):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def _normalize_layer(data: Mapping[str, Any]) -> dict[str, Any]:
    """
    Normalize a layer (defaults/YAML/ENV/CLI) into the canonical *sectioned* shape.

    Canonical top-level keys:
    - app_name, environment
    - poiskkino.api_key, poiskkino.base_url, poiskkino.api_version
    - poiskkino.timeout_seconds, poiskkino.user_agent, poiskkino.search_limit
    - poiskkino.positive_ttl_seconds, poiskkino.negative_ttl_seconds
    - logging.level, logging.format
    """
    out: dict[str, Any] = {}

    for section in _SECTION_KEYS:
        if section in data and isinstance(data[section], Mapping):
            out[section] = dict(data[section])

    if "app_name" in data:
        out["app_name"] = data["app_name"]
    if "environment" in data:
        out["environment"] = data["environment"]

    # Flat -> section mappings
    flat_map: dict[str, tuple[str, str]] = {
        "api_key": ("poiskkino", "api_key"),
        "poiskkino_api_key": ("poiskkino", "api_key"),
        "poiskkino_base_url": ("poiskkino", "base_url"),
        "poiskkino_api_version": ("poiskkino", "api_version"),
        "poiskkino_timeout_seconds": ("poiskkino", "timeout_seconds"),
        "poiskkino_user_agent": ("poiskkino", "user_agent"),
        "poiskkino_search_limit": ("poiskkino", "search_limit"),
        "poiskkino_positive_ttl_seconds": ("poiskkino", "positive_ttl_seconds"),
        "poiskkino_negative_ttl_seconds": ("poiskkino", "negative_ttl_seconds"),
        "log_level": ("logging", "level"),
        "log_format": ("logging", "format"),
    }

    for flat_key, (section, section_key) in flat_map.items():
        if flat_key in data:
            out.setdefault(section, {})
            out[section][section_key] = data[flat_key]

    return out


def _read_yaml_config(config_path: Path) -> dict[str, Any]:
    raw = config_path.read_text(encoding="utf-8")
    parsed = yaml.safe_load(raw)
    if parsed is None:
        return {}
    if not isinstance(parsed, dict):
        raise ValueError(
            f"Config YAML must be a mapping, got: {type(parsed)!r}")
    return parsed


def load_config(
    *,
    config_path: Path | None = None,
    dotenv_path: Path | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> AppConfig:
    """
    Load configuration with strict precedence:
    defaults < YAML file < env vars < cli overrides

    Raises FileNotFoundError for missing explicit paths and
    pydantic.ValidationError for invalid values.
    """
    cli_overrides = cli_overrides or {}

    # .env participates as part of the env-var layer.
    if dotenv_path is not None:
        if not dotenv_path.exists():
            raise FileNotFoundError(dotenv_path)
        load_dotenv(dotenv_path, override=False)

    base = _normalize_layer(deepcopy(DEFAULT_CONFIG))

    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(config_path)
        _deep_merge(base, _normalize_layer(_read_yaml_config(config_path)))

    _deep_merge(base, _normalize_layer(EnvOverrides().to_update_dict()))
    _deep_merge(base, _normalize_layer(cli_overrides))

    return AppConfig.model_validate(base)
