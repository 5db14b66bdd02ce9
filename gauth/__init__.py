"""gauth — exchange a Google authorization code for a normalized user profile."""

from gauth.auth import (
    AuthorizationRequest,
    ProviderClient,
    ProviderConfig,
    TokenResponse,
    UserProfile,
)
from gauth.core.exceptions import (
    ConfigurationError,
    GAuthError,
    ProfileFetchError,
    ProfileParseError,
    TokenExchangeError,
)

__version__ = "0.1.0"

__all__ = [
    "AuthorizationRequest",
    "ConfigurationError",
    "GAuthError",
    "ProfileFetchError",
    "ProfileParseError",
    "ProviderClient",
    "ProviderConfig",
    "TokenExchangeError",
    "TokenResponse",
    "UserProfile",
]
