"""Helpers for reading error responses of the PoiskKino API."""

from __future__ import annotations

import httpx

UNKNOWN_ERROR = "Unknown error"


def extract_error_message(response: httpx.Response) -> str:
    """Return the ``message`` field of an error body, best effort.

    The API answers 403/429 with ``{"message": "...", ...}``.  Unreadable
    bodies, non-JSON payloads and missing or non-string messages all fall
    back to ``"Unknown error"``.
    """
    try:
        data = response.json()
    except (ValueError, UnicodeDecodeError, httpx.ResponseNotRead):
        return UNKNOWN_ERROR
    if isinstance(data, dict):
        message = data.get("message")
        if isinstance(message, str) and message:
            return message
    return UNKNOWN_ERROR
