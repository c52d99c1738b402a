"""OAuth State Codec.

callback URL(redirect 대상 `r` 파라미터 포함)을 base64 표준 인코딩으로
프로바이더 redirect의 state 파라미터에 실어 왕복시킵니다.

서명/만료는 없습니다. 이 서비스가 발급한 state만 정상 디코딩되므로
프로바이더 측에서 임의 redirect 대상을 주입할 수 없습니다.
"""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass
from urllib.parse import SplitResult, parse_qs, urlencode, urlsplit, urlunsplit

from apps.social.application.oauth.exceptions import CallbackParseError, StateDecodeError

REDIRECT_PARAM = "r"
ERROR_PARAM = "error"


@dataclass(frozen=True, slots=True)
class CallbackTarget:
    """디코딩된 state.

    callback: 쿼리를 제거한 callback URL
    redirect_to: callback URL의 `r` 쿼리 값 (없으면 None)
    """

    callback: str
    redirect_to: str | None = None


def encode_state(callback_url: str) -> str:
    return base64.b64encode(callback_url.encode("utf-8")).decode("ascii")


def _parse_url(url: str) -> SplitResult:
    if any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in url):
        raise CallbackParseError(f"invalid control character in URL {url!r}")
    try:
        parts = urlsplit(url)
        # 잘못된 포트는 접근 시점에 ValueError
        parts.port
    except ValueError as e:
        raise CallbackParseError(f"malformed callback URL: {e}") from e
    return parts


def _check_padding(state: str) -> None:
    # 표준 base64: 길이는 4의 배수, '='는 끝에 최대 2개
    body = state.rstrip("=")
    if len(state) % 4 or len(state) - len(body) > 2 or "=" in body:
        raise StateDecodeError(f"illegal base64 data: invalid length or padding ({len(state)})")


def _decode(state: str | None) -> tuple[str, SplitResult]:
    if not state:
        raise StateDecodeError("state parameter is missing")
    _check_padding(state)
    try:
        raw = base64.b64decode(state, validate=True)
    except (binascii.Error, ValueError) as e:
        raise StateDecodeError(f"illegal base64 data: {e}") from e
    try:
        url = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise StateDecodeError(f"state is not valid UTF-8: {e}") from e
    return url, _parse_url(url)


def decode_state(state: str | None) -> str:
    """state → callback URL.

    Raises:
        StateDecodeError: state 누락, base64/UTF-8 오류
        CallbackParseError: URL 파싱 실패
    """
    return _decode(state)[0]


def parse_callback_state(state: str | None) -> CallbackTarget:
    """state를 디코딩하고 redirect 대상과 쿼리 없는 callback으로 분리."""
    _, parts = _decode(state)
    redirect_values = parse_qs(parts.query).get(REDIRECT_PARAM)
    redirect_to = redirect_values[0] if redirect_values else None
    callback = urlunsplit(parts._replace(query=""))
    return CallbackTarget(callback=callback, redirect_to=redirect_to)


def build_start_callback(
    default_callback: str,
    callback: str | None = None,
    redirect_to: str | None = None,
) -> str:
    """로그인 시작 시 state에 담을 callback URL 구성.

    c가 없으면 default_callback, r이 있으면 `r=<redirect_to>` 쿼리를 덧붙입니다.
    """
    target = callback or default_callback
    if not redirect_to:
        return target

    redirect_query = urlencode({REDIRECT_PARAM: redirect_to}, safe="/")
    parts = urlsplit(target)
    query = f"{parts.query}&{redirect_query}" if parts.query else redirect_query
    return urlunsplit(parts._replace(query=query))


def build_error_redirect(callback: str, error: str) -> str:
    """프로바이더 오류 시 `{callback}?error=<error>` URL."""
    parts = urlsplit(callback)
    return urlunsplit(parts._replace(query=urlencode({ERROR_PARAM: error})))
