"""Path parameter helpers."""

from uuid import UUID

from apps.social.application.common.exceptions import ApplicationError


class InvalidIdentifierError(ApplicationError):
    """경로 파라미터 UUID 형식 오류."""

    status_code = 400


def parse_uuid(value: str, message: str = "Invalid UUID format") -> UUID:
    """문자열 → UUID.

    Raises:
        InvalidIdentifierError: UUID 형식이 아님
    """
    try:
        return UUID(value)
    except ValueError as e:
        raise InvalidIdentifierError(message) from e
