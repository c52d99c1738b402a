"""OAuth Exceptions.

플로우 단계별 예외입니다. 모든 플로우 예외는 감지 지점에서 error 레벨로 로깅된 뒤
HTTP 핸들러에서 평문 메시지 응답으로 변환됩니다.
"""

from apps.social.application.common.exceptions.base import ApplicationError


class OAuthProviderError(ApplicationError):
    """OAuth 프로바이더 통신 오류 (전송/HTTP/페이로드)."""

    def __init__(self, provider: str, reason: str) -> None:
        self.provider = provider
        self.reason = reason
        super().__init__(f"OAuth provider error ({provider}): {reason}")


class OAuthFlowError(ApplicationError):
    """OAuth 플로우 실패 기본 예외.

    step은 메트릭 라벨로 사용됩니다.
    """

    status_code = 500
    step = "flow"


class ProviderNotFoundError(OAuthFlowError):
    """등록되지 않은 프로바이더."""

    status_code = 404
    step = "lookup"

    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(f"OAuth2 provider '{provider}' not found")


class StateDecodeError(OAuthFlowError):
    """state 디코딩 실패 (base64 / 인코딩 오류).

    호출자가 보낸 값이지만 기존 동작대로 500으로 응답합니다.
    """

    step = "state"

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to get callback info: {reason}")


class CallbackParseError(StateDecodeError):
    """디코딩된 callback URL 파싱 실패."""


class TokenExchangeError(OAuthFlowError):
    """인증 코드 → 토큰 교환 실패."""

    step = "exchange"

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to exchange OAuth2 code for token: {reason}")


class UserInfoFetchError(OAuthFlowError):
    """사용자 정보 조회 실패."""

    step = "userinfo"

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to get user info from OAuth2 provider: {reason}")


class UserResolutionError(OAuthFlowError):
    """사용자 조회/생성 실패."""

    step = "resolve"

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to find or create user: {reason}")
