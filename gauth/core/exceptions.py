"""Custom exception hierarchy for gauth."""

from __future__ import annotations

from typing import Any


class GAuthError(Exception):
    """Base exception for all gauth errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context: dict[str, Any] = context or {}


# ── Configuration ────────────────────────────────────────────────

class ConfigurationError(GAuthError):
    """Malformed endpoint/redirect URL or missing client credentials."""


# ── Authorization Code Exchange ──────────────────────────────────

class TokenExchangeError(GAuthError):
    """Authorization code could not be exchanged for an access token."""


class ProfileFetchError(GAuthError):
    """User-info request failed in transport or returned a non-success status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, context)
        self.status_code = status_code


class ProfileParseError(GAuthError):
    """User-info body does not match the expected profile shape."""
