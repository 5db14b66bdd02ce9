"""OAuth 2.0 authorization-code flow against Google."""

from __future__ import annotations

import secrets
from typing import Any
from urllib.parse import urlencode

import httpx
from pydantic import ValidationError

from gauth.config.settings import Settings, get_settings
from gauth.core.constants import (
    GRANT_TYPE_AUTHORIZATION_CODE,
    HTTP_TIMEOUT,
    RESPONSE_TYPE_CODE,
    STATE_TOKEN_BYTES,
)
from gauth.core.exceptions import (
    ConfigurationError,
    ProfileFetchError,
    ProfileParseError,
    TokenExchangeError,
)
from gauth.core.logging import get_logger

from .providers import ProviderConfig
from .schemas import AuthorizationRequest, TokenResponse, UserProfile

log = get_logger(__name__)


class ProviderClient:
    """Google OAuth client: builds the consent URL and turns a code into a profile.

    Holds only the immutable ``ProviderConfig``. Every exchange opens its own
    ``httpx.AsyncClient``, so one instance can serve any number of concurrent
    callers.
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        redirect_url: str,
        *,
        timeout: float = HTTP_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = ProviderConfig(
            client_id=client_id,
            client_secret=client_secret,
            redirect_url=redirect_url,
        )
        self._timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> ProviderClient:
        """Build a client from environment settings."""
        settings = settings or get_settings()
        client_secret = settings.google_client_secret.get_secret_value()
        if not settings.google_client_id or not client_secret:
            msg = "GOOGLE_CLIENT_ID and GOOGLE_CLIENT_SECRET must be configured"
            raise ConfigurationError(msg)
        return cls(
            settings.google_client_id,
            client_secret,
            settings.google_redirect_url,
            timeout=settings.oauth_http_timeout,
            transport=transport,
        )

    @property
    def config(self) -> ProviderConfig:
        return self._config

    # ── Authorization URL ────────────────────────────────────────

    def authorization_request(self) -> AuthorizationRequest:
        """Build the consent URL together with its fresh anti-forgery token."""
        cfg = self._config
        state = secrets.token_urlsafe(STATE_TOKEN_BYTES)
        params = {
            "response_type": RESPONSE_TYPE_CODE,
            "client_id": cfg.client_id,
            "state": state,
            "redirect_uri": cfg.redirect_url,
            "scope": " ".join(cfg.scopes),
        }
        separator = "&" if "?" in cfg.authorize_url else "?"
        url = f"{cfg.authorize_url}{separator}{urlencode(params)}"
        log.debug("oauth_authorize_url_built", provider=cfg.name)
        return AuthorizationRequest(url=url, state=state, scopes=cfg.scopes)

    def generate_authorization_url(self) -> str:
        """Return the URL the user's browser should be redirected to.

        The state token embedded in the URL is not kept anywhere; use
        :meth:`authorization_request` to get hold of it.
        """
        return self.authorization_request().url

    # ── Code Exchange ────────────────────────────────────────────

    async def exchange_code_for_profile(self, code: str) -> UserProfile:
        """Exchange an authorization code for the user's Google profile.

        Raises:
            TokenExchangeError: the token request failed or returned no token.
            ProfileFetchError: the user-info request failed or was not 2xx.
            ProfileParseError: the user-info body is not a valid profile.
        """
        async with httpx.AsyncClient(
            timeout=self._timeout, transport=self._transport
        ) as client:
            token = await self._exchange_code(client, code)
            profile = await self._fetch_profile(client, token.access_token)

        log.info("oauth_profile_fetched", provider=self._config.name, open_id=profile.open_id)
        return profile

    async def _exchange_code(self, client: httpx.AsyncClient, code: str) -> TokenResponse:
        cfg = self._config
        try:
            resp = await client.post(
                cfg.token_url,
                data={
                    "grant_type": GRANT_TYPE_AUTHORIZATION_CODE,
                    "code": code,
                    "client_id": cfg.client_id,
                    "client_secret": cfg.client_secret,
                    "redirect_uri": cfg.redirect_url,
                },
                headers={"Accept": "application/json"},
            )
        except httpx.HTTPError as exc:
            log.warning("oauth_token_exchange_failed", provider=cfg.name, error=str(exc))
            msg = "token request failed"
            raise TokenExchangeError(msg, context={"provider": cfg.name}) from exc

        if not resp.is_success:
            context: dict[str, Any] = {
                "provider": cfg.name,
                "status_code": resp.status_code,
                **_provider_error(resp),
            }
            log.warning("oauth_token_exchange_failed", **context)
            msg = f"token endpoint returned HTTP {resp.status_code}"
            raise TokenExchangeError(msg, context=context)

        try:
            return TokenResponse.model_validate(resp.json())
        except (ValueError, ValidationError) as exc:
            log.warning(
                "oauth_token_exchange_failed",
                provider=cfg.name,
                error="malformed token response",
            )
            msg = "token endpoint response has no usable access_token"
            raise TokenExchangeError(msg, context={"provider": cfg.name}) from exc

    async def _fetch_profile(self, client: httpx.AsyncClient, access_token: str) -> UserProfile:
        cfg = self._config
        try:
            resp = await client.get(
                cfg.userinfo_url,
                headers={
                    "Authorization": f"Bearer {access_token}",
                    "Accept": "application/json",
                },
            )
        except httpx.HTTPError as exc:
            log.warning("oauth_profile_fetch_failed", provider=cfg.name, error=str(exc))
            msg = "user-info request failed"
            raise ProfileFetchError(msg, context={"provider": cfg.name}) from exc

        if not resp.is_success:
            log.warning(
                "oauth_profile_fetch_failed",
                provider=cfg.name,
                status_code=resp.status_code,
            )
            msg = f"user-info endpoint returned HTTP {resp.status_code}"
            raise ProfileFetchError(
                msg,
                status_code=resp.status_code,
                context={"provider": cfg.name, "status_code": resp.status_code},
            )

        try:
            return UserProfile.model_validate(resp.json())
        except (ValueError, ValidationError) as exc:
            log.warning(
                "oauth_profile_parse_failed", provider=cfg.name, error=type(exc).__name__
            )
            msg = "user-info response does not match the expected profile shape"
            raise ProfileParseError(msg, context={"provider": cfg.name}) from exc


def _provider_error(resp: httpx.Response) -> dict[str, str]:
    """Pull the RFC 6749 ``error``/``error_description`` pair out of a failed response."""
    try:
        body = resp.json()
    except ValueError:
        return {}
    if not isinstance(body, dict):
        return {}
    return {
        key: str(body[key])
        for key in ("error", "error_description")
        if body.get(key) is not None
    }
