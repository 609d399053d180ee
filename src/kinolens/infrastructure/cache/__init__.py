"""Cache Infrastructure - in-memory response cache and key derivation."""

from .keys import item_key, normalize_title, search_key, season_key
from .memory_adapter import ResponseCache

__all__ = [
    "ResponseCache",
    "item_key",
    "normalize_title",
    "search_key",
    "season_key",
]
