"""Tests for the user-profile and token-response schemas."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from gauth.auth.schemas import TokenResponse, UserProfile


def _userinfo(**overrides: object) -> dict[str, object]:
    info: dict[str, object] = {
        "sub": "108",
        "name": "Ada Lovelace",
        "given_name": "Ada",
        "family_name": "Lovelace",
        "picture": "https://lh3.googleusercontent.com/a/ada.png",
        "email": "ada@example.com",
        "email_verified": True,
        "locale": "en-GB",
    }
    info.update(overrides)
    return info


class TestUserProfile:
    def test_renamed_fields(self) -> None:
        profile = UserProfile.model_validate(_userinfo())
        assert profile.open_id == "108"
        assert profile.username == "Ada Lovelace"
        assert profile.profile_url == "https://lh3.googleusercontent.com/a/ada.png"
        assert profile.given_name == "Ada"
        assert profile.family_name == "Lovelace"
        assert profile.locale == "en-GB"

    def test_optional_fields_absent(self) -> None:
        info = _userinfo()
        for key in ("given_name", "family_name", "locale"):
            del info[key]
        profile = UserProfile.model_validate(info)
        assert profile.given_name is None
        assert profile.family_name is None
        assert profile.locale is None

    def test_extra_fields_ignored(self) -> None:
        profile = UserProfile.model_validate(_userinfo(hd="example.com"))
        assert not hasattr(profile, "hd")

    @pytest.mark.parametrize("missing", ["sub", "name", "picture", "email", "email_verified"])
    def test_required_field_missing(self, missing: str) -> None:
        info = _userinfo()
        del info[missing]
        with pytest.raises(ValidationError):
            UserProfile.model_validate(info)

    def test_verified_flag_not_coerced(self) -> None:
        with pytest.raises(ValidationError):
            UserProfile.model_validate(_userinfo(email_verified="true"))

    def test_numeric_sub_rejected(self) -> None:
        with pytest.raises(ValidationError):
            UserProfile.model_validate(_userinfo(sub=108))

    def test_internal_field_names_not_accepted(self) -> None:
        info = _userinfo()
        for alias, name in (("sub", "open_id"), ("name", "username"), ("picture", "profile_url")):
            info[name] = info.pop(alias)
        with pytest.raises(ValidationError):
            UserProfile.model_validate(info)

    def test_dump_by_alias_restores_provider_names(self) -> None:
        dumped = UserProfile.model_validate(_userinfo()).model_dump(by_alias=True)
        assert dumped["sub"] == "108"
        assert dumped["name"] == "Ada Lovelace"
        assert dumped["picture"].endswith("ada.png")

    def test_frozen(self) -> None:
        profile = UserProfile.model_validate(_userinfo())
        with pytest.raises(ValidationError):
            profile.email = "other@example.com"  # type: ignore[misc]


class TestTokenResponse:
    def test_minimal(self) -> None:
        token = TokenResponse.model_validate({"access_token": "ya29.abc"})
        assert token.access_token == "ya29.abc"
        assert token.expires_in is None

    def test_full_google_response(self) -> None:
        token = TokenResponse.model_validate({
            "access_token": "ya29.abc",
            "expires_in": 3599,
            "scope": "openid email profile",
            "token_type": "Bearer",
            "id_token": "eyJ...",
        })
        assert token.token_type == "Bearer"
        assert token.expires_in == 3599

    def test_token_not_in_repr(self) -> None:
        token = TokenResponse.model_validate({"access_token": "ya29.secret-token"})
        assert "ya29.secret-token" not in repr(token)

    @pytest.mark.parametrize("body", [{}, {"access_token": ""}, {"access_token": 12}])
    def test_unusable_access_token(self, body: dict[str, object]) -> None:
        with pytest.raises(ValidationError):
            TokenResponse.model_validate(body)

    def test_unused_fields_kept_as_sent(self) -> None:
        token = TokenResponse.model_validate({
            "access_token": "ya29.abc",
            "scope": ["openid", "email"],
            "expires_in": "3599",
        })
        assert token.access_token == "ya29.abc"
        assert token.scope == ["openid", "email"]
        assert token.expires_in == "3599"
