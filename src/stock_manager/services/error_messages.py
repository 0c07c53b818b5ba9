"""Normalization of structured error bodies."""

import httpx


def normalize_messages(body: object, fallback: str) -> list[str]:
    """Turn ``{"message": str | list[str]}`` into a list of messages."""
    if not isinstance(body, dict):
        return [fallback]
    message = body.get("message")
    if isinstance(message, str) and message:
        return [message]
    if isinstance(message, list):
        messages = [item for item in message if isinstance(item, str) and item]
        if messages:
            return messages
    return [fallback]


def response_messages(response: httpx.Response, fallback: str) -> list[str]:
    """Parse an error response body, falling back to a single generic message."""
    try:
        body = response.json()
    except ValueError:
        return [fallback]
    return normalize_messages(body, fallback)
