"""Google OAuth 2.0 authorization-code flow."""

from gauth.auth.oauth import ProviderClient
from gauth.auth.providers import ProviderConfig
from gauth.auth.schemas import AuthorizationRequest, TokenResponse, UserProfile

__all__ = [
    "AuthorizationRequest",
    "ProviderClient",
    "ProviderConfig",
    "TokenResponse",
    "UserProfile",
]
