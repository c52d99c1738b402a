"""Base Application Exception."""


class ApplicationError(Exception):
    """애플리케이션 계층 기본 예외.

    HTTP 핸들러에서 status_code로 응답 코드를 결정합니다.
    """

    status_code: int = 500

    def __init__(self, message: str = "Application error") -> None:
        self.message = message
        super().__init__(message)
