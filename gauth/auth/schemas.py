"""Pydantic V2 schemas for the Google authorization-code flow."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr


# ── Authorization Request ────────────────────────────────────────

@dataclass(frozen=True)
class AuthorizationRequest:
    """A built authorization URL and the anti-forgery token embedded in it.

    Nothing retains this object; a caller that wants CSRF protection must
    store ``state`` itself and compare it with the callback's ``state``.
    """

    url: str
    state: str
    scopes: tuple[str, ...]


# ── Token Endpoint ───────────────────────────────────────────────

class TokenResponse(BaseModel):
    """Successful token endpoint response.

    Only ``access_token`` is read; the other fields are kept as sent.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    access_token: StrictStr = Field(..., min_length=1, repr=False)
    token_type: Any = None
    expires_in: Any = None
    scope: Any = None
    id_token: Any = Field(default=None, repr=False)


# ── User Info ────────────────────────────────────────────────────

class UserProfile(BaseModel):
    """Normalized Google user profile.

    Provider fields are renamed explicitly: ``sub`` -> ``open_id``,
    ``name`` -> ``username``, ``picture`` -> ``profile_url``. Types are
    strict, so a provider sending e.g. ``"email_verified": "true"`` fails
    validation instead of being coerced.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    open_id: StrictStr = Field(..., alias="sub")
    username: StrictStr = Field(..., alias="name")
    given_name: StrictStr | None = None
    family_name: StrictStr | None = None
    profile_url: StrictStr = Field(..., alias="picture")
    email: StrictStr
    email_verified: StrictBool
    locale: StrictStr | None = None
