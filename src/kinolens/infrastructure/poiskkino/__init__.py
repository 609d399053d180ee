"""PoiskKino catalog API integration."""

from .client import PoiskKinoClient
from .gate import RequestGate

__all__ = ["PoiskKinoClient", "RequestGate"]
