"""Google OAuth Provider."""

from __future__ import annotations

from apps.social.application.oauth.exceptions import OAuthProviderError
from apps.social.application.oauth.ports import OAuthToken, OAuthUserInfo
from apps.social.infrastructure.oauth.providers.base import BaseOAuthProvider

GOOGLE_AUTH_URL = "https://accounts.google.com/o/oauth2/auth"
GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"
GOOGLE_PROFILE_URL = "https://www.googleapis.com/oauth2/v3/userinfo"


class GoogleOAuthProvider(BaseOAuthProvider):
    """Google OAuth 프로바이더."""

    name = "google"
    auth_url = GOOGLE_AUTH_URL
    token_url = GOOGLE_TOKEN_URL
    userinfo_url = GOOGLE_PROFILE_URL

    @property
    def default_scopes(self) -> tuple[str, ...]:
        return ("openid", "email", "profile")

    async def fetch_user_info(self, token: OAuthToken) -> OAuthUserInfo:
        data = await self._request_json("GET", self.userinfo_url, headers=self._bearer(token))
        if not isinstance(data, dict):
            raise OAuthProviderError(self.name, "unexpected userinfo response")

        email = self._str_field(data, "email")
        if not email:
            raise OAuthProviderError(self.name, "email not provided")
        # name이 없으면 email local part
        username = self._str_field(data, "name") or email.split("@", 1)[0]
        return OAuthUserInfo(email=email, username=username)
