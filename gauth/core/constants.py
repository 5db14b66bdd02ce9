"""Package-wide constants. Endpoint URLs, scopes and timeouts live here."""

from __future__ import annotations

# ── Google Endpoints ─────────────────────────────────────────────
GOOGLE_AUTHORIZE_URL = "https://accounts.google.com/o/oauth2/auth"
GOOGLE_TOKEN_URL = "https://accounts.google.com/o/oauth2/token"
GOOGLE_USERINFO_URL = "https://www.googleapis.com/oauth2/v3/userinfo"

# ── Scopes ───────────────────────────────────────────────────────
SCOPE_OPENID = "openid"
SCOPE_EMAIL = "email"
SCOPE_PROFILE = "profile"
GOOGLE_SCOPES = (SCOPE_OPENID, SCOPE_EMAIL, SCOPE_PROFILE)

# ── Protocol ─────────────────────────────────────────────────────
RESPONSE_TYPE_CODE = "code"
GRANT_TYPE_AUTHORIZATION_CODE = "authorization_code"
STATE_TOKEN_BYTES = 16

# ── Timeouts (seconds) ──────────────────────────────────────────
HTTP_TIMEOUT = 15.0
