"""
Service Constants (Single Source of Truth)

정적 상수 정의 - 빌드 타임에 결정되며 환경변수로 변경되지 않음
"""

# =============================================================================
# Service Identity
# =============================================================================
SERVICE_NAME = "social-api"
SERVICE_VERSION = "1.0.0"

# =============================================================================
# Config File
# =============================================================================
ENV_KEY_CONFIG_FILE = "SOCIAL_CONFIG_FILE"
DEFAULT_CONFIG_FILE = "config.yaml"
DEFAULT_SECRET = "default-secret"

# =============================================================================
# Logging Constants
# =============================================================================
ECS_VERSION = "8.11.0"

# LogRecord attributes to exclude from extra fields
# Reference: https://docs.python.org/3/library/logging.html#logrecord-attributes
EXCLUDED_LOG_RECORD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "thread",
        "threadName",
        "taskName",
        "message",
    }
)

# =============================================================================
# PII Masking Configuration
# =============================================================================
# Sensitive field names (case-insensitive substring matching)
SENSITIVE_FIELD_PATTERNS = frozenset(
    {
        "password",
        "secret",  # client_secret, secret
        "token",  # access_token, refresh_token
        "code",  # OAuth authorization code
        "state",  # OAuth state (callback URL)
        "authorization",
    }
)

MASK_PLACEHOLDER = "***REDACTED***"
MASK_PRESERVE_PREFIX = 4
MASK_PRESERVE_SUFFIX = 4
MASK_MIN_LENGTH = 10

# =============================================================================
# OAuth Routes
# =============================================================================
OAUTH_CALLBACK_PATH = "/api/oauth/{provider}/callback"
OAUTH_DEBUG_TOKEN_PATH = "/api/oauth/debug/token"
