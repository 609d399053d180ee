"""Hardcoded default configuration values."""

from __future__ import annotations

from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {
    "app_name": "kinolens",
    "environment": "dev",
    "poiskkino": {
        "api_key": "",
        "base_url": "https://api.poiskkino.dev",
        "api_version": "v1.4",
        "timeout_seconds": 120.0,
        "user_agent": "Kinolens/0.1.0",
        "search_limit": 3,
        "positive_ttl_seconds": 86_400,  # 24 hours
        "negative_ttl_seconds": 3_600,  # 1 hour
    },
    "logging": {
        "level": "INFO",
        "format": None,  # Derived from environment in schema.py
    },
}
