"""OAuth provider configuration for Google."""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import AnyUrl, TypeAdapter, ValidationError

from gauth.core.constants import (
    GOOGLE_AUTHORIZE_URL,
    GOOGLE_SCOPES,
    GOOGLE_TOKEN_URL,
    GOOGLE_USERINFO_URL,
)
from gauth.core.exceptions import ConfigurationError

_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def validate_url(name: str, value: str) -> str:
    """Check that ``value`` is an absolute URL and return it unchanged.

    Returns the input string, not pydantic's normalised form: the provider
    matches ``redirect_uri`` byte for byte.
    """
    try:
        parsed = _URL_ADAPTER.validate_python(value)
    except ValidationError as exc:
        msg = f"{name} is not a valid URL: {value!r}"
        raise ConfigurationError(msg, context={"field": name}) from exc
    if not parsed.host:
        msg = f"{name} must be an absolute URL with a host: {value!r}"
        raise ConfigurationError(msg, context={"field": name})
    return value


@dataclass(frozen=True)
class ProviderConfig:
    """Immutable OAuth client configuration, validated on construction."""

    client_id: str
    client_secret: str = field(repr=False)
    redirect_url: str
    authorize_url: str = GOOGLE_AUTHORIZE_URL
    token_url: str = GOOGLE_TOKEN_URL
    userinfo_url: str = GOOGLE_USERINFO_URL
    scopes: tuple[str, ...] = GOOGLE_SCOPES
    name: str = "google"

    def __post_init__(self) -> None:
        validate_url("authorize_url", self.authorize_url)
        validate_url("token_url", self.token_url)
        validate_url("userinfo_url", self.userinfo_url)
        validate_url("redirect_url", self.redirect_url)
        if not self.scopes:
            msg = "at least one scope is required"
            raise ConfigurationError(msg, context={"field": "scopes"})
