"""State codec 단위 테스트."""

import base64

import pytest

from apps.social.application.oauth.exceptions import CallbackParseError, StateDecodeError
from apps.social.application.oauth.services import (
    build_error_redirect,
    build_start_callback,
    decode_state,
    encode_state,
    parse_callback_state,
)

DEFAULT_CALLBACK = "http://localhost:8080/api/oauth/debug/token"


class TestEncodeDecode:
    @pytest.mark.parametrize(
        "url",
        [
            "http://localhost:8080/api/oauth/debug/token",
            "https://app.example.com/login/done?r=/dashboard",
            "https://app.example.com/cb?foo=bar&r=%2Fposts%3Fpage%3D2",
            "https://例え.jp/パス?r=ホーム",
        ],
    )
    def test_round_trip(self, url: str) -> None:
        assert decode_state(encode_state(url)) == url

    def test_encode_uses_standard_base64(self) -> None:
        url = "https://app.example.com/cb?r=/a"
        assert encode_state(url) == base64.b64encode(url.encode()).decode()

    @pytest.mark.parametrize("state", [None, ""])
    def test_missing_state(self, state) -> None:
        with pytest.raises(StateDecodeError):
            decode_state(state)

    @pytest.mark.parametrize(
        "state",
        [
            "not base64!!",
            "abc",
            "%%%%",
            "aHR0cDovL2V4YW1wbGUuY29t===",
            "aHR0cDovL2V4YW1wbGUuY29t====",
            "YQ==YQ==",
            "YQ=",
        ],
    )
    def test_invalid_base64(self, state: str) -> None:
        with pytest.raises(StateDecodeError) as exc_info:
            decode_state(state)
        assert exc_info.value.message.startswith("Failed to get callback info: ")

    def test_invalid_utf8(self) -> None:
        state = base64.b64encode(b"\xff\xfe\xfd").decode()
        with pytest.raises(StateDecodeError):
            decode_state(state)

    @pytest.mark.parametrize(
        "url",
        ["http://example.com:99999/cb", "http://[::1/cb", "http://example.com/\x00cb"],
    )
    def test_malformed_url(self, url: str) -> None:
        with pytest.raises(CallbackParseError):
            decode_state(encode_state(url))

    def test_callback_parse_error_is_state_decode_error(self) -> None:
        assert issubclass(CallbackParseError, StateDecodeError)


class TestParseCallbackState:
    def test_extracts_redirect_and_strips_query(self) -> None:
        state = encode_state("https://app.example.com/done?r=/dashboard&x=1")

        target = parse_callback_state(state)

        assert target.callback == "https://app.example.com/done"
        assert target.redirect_to == "/dashboard"

    def test_without_redirect(self) -> None:
        target = parse_callback_state(encode_state(DEFAULT_CALLBACK))

        assert target.callback == DEFAULT_CALLBACK
        assert target.redirect_to is None

    def test_keeps_fragment(self) -> None:
        target = parse_callback_state(encode_state("https://app.example.com/done?r=/a#top"))

        assert target.callback == "https://app.example.com/done#top"

    def test_rejects_extra_padding(self) -> None:
        state = encode_state("http://example.com") + "="

        with pytest.raises(StateDecodeError):
            parse_callback_state(state)

    def test_malformed_url(self) -> None:
        with pytest.raises(CallbackParseError):
            parse_callback_state(encode_state("http://example.com:99999/cb"))


class TestBuildStartCallback:
    def test_default_callback(self) -> None:
        assert build_start_callback(DEFAULT_CALLBACK) == DEFAULT_CALLBACK

    def test_default_callback_with_redirect(self) -> None:
        result = build_start_callback(DEFAULT_CALLBACK, redirect_to="foo")

        assert result == f"{DEFAULT_CALLBACK}?r=foo"

    def test_explicit_callback_overrides_default(self) -> None:
        result = build_start_callback(DEFAULT_CALLBACK, callback="https://app.example.com/done")

        assert result == "https://app.example.com/done"

    def test_redirect_path_keeps_slashes(self) -> None:
        result = build_start_callback(DEFAULT_CALLBACK, redirect_to="/posts/1")

        assert result == f"{DEFAULT_CALLBACK}?r=/posts/1"

    def test_redirect_appended_to_existing_query(self) -> None:
        result = build_start_callback(
            DEFAULT_CALLBACK,
            callback="https://app.example.com/done?lang=ko",
            redirect_to="/home",
        )

        assert result == "https://app.example.com/done?lang=ko&r=/home"

    def test_redirect_survives_round_trip(self) -> None:
        callback = build_start_callback(DEFAULT_CALLBACK, redirect_to="/posts?page=2")

        target = parse_callback_state(encode_state(callback))

        assert target.callback == DEFAULT_CALLBACK
        assert target.redirect_to == "/posts?page=2"


class TestBuildErrorRedirect:
    def test_appends_error(self) -> None:
        result = build_error_redirect("https://app.example.com/done", "access_denied")

        assert result == "https://app.example.com/done?error=access_denied"

    def test_escapes_error_value(self) -> None:
        result = build_error_redirect("https://app.example.com/done", "bad value&x=1")

        assert result == "https://app.example.com/done?error=bad+value%26x%3D1"
