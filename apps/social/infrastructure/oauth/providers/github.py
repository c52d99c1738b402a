"""GitHub OAuth Provider."""

from __future__ import annotations

from apps.social.application.oauth.exceptions import OAuthProviderError
from apps.social.application.oauth.ports import OAuthToken, OAuthUserInfo
from apps.social.infrastructure.oauth.providers.base import BaseOAuthProvider

GITHUB_AUTH_URL = "https://github.com/login/oauth/authorize"
GITHUB_TOKEN_URL = "https://github.com/login/oauth/access_token"
GITHUB_PROFILE_URL = "https://api.github.com/user"
GITHUB_EMAILS_URL = "https://api.github.com/user/emails"


class GitHubOAuthProvider(BaseOAuthProvider):
    """GitHub OAuth 프로바이더.

    프로필에 공개 email이 없으면 /user/emails에서 primary + verified email을 사용합니다.
    """

    name = "github"
    auth_url = GITHUB_AUTH_URL
    token_url = GITHUB_TOKEN_URL
    userinfo_url = GITHUB_PROFILE_URL

    @property
    def default_scopes(self) -> tuple[str, ...]:
        return ("read:user", "user:email")

    def _headers(self, token: OAuthToken) -> dict[str, str]:
        return {**self._bearer(token), "Accept": "application/vnd.github+json"}

    async def fetch_user_info(self, token: OAuthToken) -> OAuthUserInfo:
        data = await self._request_json("GET", self.userinfo_url, headers=self._headers(token))
        if not isinstance(data, dict):
            raise OAuthProviderError(self.name, "unexpected userinfo response")

        email = self._str_field(data, "email") or await self._fetch_primary_email(token)
        username = (
            self._str_field(data, "login")
            or self._str_field(data, "name")
            or email.split("@", 1)[0]
        )
        return OAuthUserInfo(email=email, username=username)

    async def _fetch_primary_email(self, token: OAuthToken) -> str:
        emails = await self._request_json("GET", GITHUB_EMAILS_URL, headers=self._headers(token))
        if not isinstance(emails, list):
            raise OAuthProviderError(self.name, "unexpected emails response")
        for entry in emails:
            if not isinstance(entry, dict):
                raise OAuthProviderError(self.name, "unexpected emails response")
            email = self._str_field(entry, "email")
            if entry.get("primary") is True and entry.get("verified") is True and email:
                return email
        raise OAuthProviderError(self.name, "email not provided")
