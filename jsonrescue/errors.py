from __future__ import annotations


class JsonRescueError(Exception):
    """Base exception for jsonrescue failures."""


class InvalidInputError(JsonRescueError):
    """Raised when the input is not a non-empty string."""


class NoJsonFoundError(JsonRescueError):
    """Raised when no strategy recovers a JSON object or array."""
