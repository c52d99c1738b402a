"""Application Settings.

환경변수 + YAML 설정 파일 기반 설정.
env_prefix="SOCIAL_" 사용으로 SOCIAL_GOOGLE_CLIENT_ID 등의 환경변수 매핑.

우선순위: 생성자 인자 > 환경변수 > config.yaml > 기본값
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

from pydantic import field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from apps.social.setup.constants import (
    DEFAULT_CONFIG_FILE,
    DEFAULT_SECRET,
    ENV_KEY_CONFIG_FILE,
)


class ConfigurationError(RuntimeError):
    """필수 설정 누락."""

    def __init__(self, title: str, action: str) -> None:
        self.title = title
        self.action = action
        super().__init__(title)

    def render(self) -> str:
        """터미널 출력용 안내 메시지."""
        return (
            "\n-----------------------------------------\n"
            "Application Failed to Start\n"
            "-----------------------------------------\n\n"
            f"# What's wrong?\n{self.title}\n\n"
            f"# How to fix it?\n{self.action}\n"
        )


def config_file_path() -> Path:
    return Path(os.getenv(ENV_KEY_CONFIG_FILE, DEFAULT_CONFIG_FILE))


class Settings(BaseSettings):
    """애플리케이션 설정.

    예시:
        SOCIAL_DATABASE_URL → database_url
        SOCIAL_GOOGLE_CLIENT_ID → google_client_id
    """

    # Service
    app_name: str = "Social API"
    environment: str = "local"
    debug: bool = False
    host: str = "localhost"
    port: int = 8080
    base_url: str = "http://localhost:8080"
    secret: str = DEFAULT_SECRET
    cors_origins: Optional[str] = None  # 쉼표 구분

    # Database
    database_url: str = ""
    migration_source: str = "migrations/social"
    migrate_on_startup: bool = True

    # OAuth
    oauth_redirect_template: str = "{base_url}/api/oauth/{provider}/callback"
    oauth_http_timeout_seconds: Optional[float] = None

    # OAuth Providers - Google
    google_client_id: str = ""
    google_client_secret: str = ""

    # OAuth Providers - GitHub (client_id가 있을 때만 등록)
    github_client_id: str = ""
    github_client_secret: str = ""

    # Logging
    log_level: Optional[str] = None
    log_format: str = "text"

    # OpenTelemetry
    otel_enabled: bool = False
    otel_exporter_endpoint: str = "localhost:4317"
    otel_sampling_rate: float = 1.0

    model_config = SettingsConfigDict(
        env_prefix="SOCIAL_",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        sources: list[PydanticBaseSettingsSource] = [init_settings, env_settings]
        path = config_file_path()
        if path.is_file():
            sources.append(YamlConfigSettingsSource(settings_cls, yaml_file=path))
        sources.append(file_secret_settings)
        return tuple(sources)

    @field_validator("base_url", mode="after")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("oauth_http_timeout_seconds", mode="before")
    @classmethod
    def _empty_string_to_none(cls, value: Any):
        """빈 문자열을 None으로 변환."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def resolved_log_level(self) -> str:
        if self.log_level:
            return self.log_level.upper()
        return "DEBUG" if self.debug or self.environment == "local" else "INFO"

    def oauth_redirect_uri(self, provider: str) -> str:
        """프로바이더 콜백 URL (예: {base_url}/api/oauth/google/callback)."""
        return self.oauth_redirect_template.format(base_url=self.base_url, provider=provider)

    def validate_required(self) -> None:
        """서버 기동 전 필수 설정 검증.

        Raises:
            ConfigurationError: database_url 미설정
        """
        if not self.database_url:
            raise ConfigurationError(
                "Database URL is required",
                "Please set the SOCIAL_DATABASE_URL environment variable "
                "or provide database_url in the configuration file.",
            )


@dataclass
class _BufferedEntry:
    message: str
    error: Exception | None
    meta: dict[str, str]


@dataclass
class ConfigLogBuffer:
    """로깅 설정 전에 발생한 설정 경고를 보관했다가 나중에 출력."""

    entries: list[_BufferedEntry] = field(default_factory=list)

    def warn(self, message: str, error: Exception | None = None, **meta: str) -> None:
        self.entries.append(_BufferedEntry(message=message, error=error, meta=meta))

    def flush(self, logger: logging.Logger) -> None:
        for entry in self.entries:
            extra = dict(entry.meta)
            if entry.error is not None:
                extra["error"] = str(entry.error)
            logger.warning(entry.message, extra=extra)
        self.entries.clear()


@lru_cache
def load_settings() -> tuple[Settings, ConfigLogBuffer]:
    """Settings와 설정 경고 버퍼를 함께 반환 (프로세스당 1회)."""
    buffer = ConfigLogBuffer()
    path = config_file_path()
    if not path.is_file():
        buffer.warn(
            "Failed to load config from file",
            FileNotFoundError(f"No such file: {path}"),
            path=str(path),
        )

    settings = Settings()
    if settings.secret == DEFAULT_SECRET:
        buffer.warn("Using default secret, override SOCIAL_SECRET outside local development")
    return settings, buffer


def get_settings() -> Settings:
    """캐시된 Settings 인스턴스 반환 (FastAPI 공식 패턴)."""
    return load_settings()[0]
