"""
Error Taxonomy - Closed Set of Client Failure Kinds

Every failure raised by the SDK is a DeepSeekError carrying a machine-checkable
``kind`` plus a human-readable message. The retry engine relies on the
classification predicates defined here:

- is_retryable: transport failures, rate limits and timeouts
- is_auth_error: authentication failures and API errors with status 401/403
- is_rate_limit: rate limit errors and API errors with status 429
"""

from enum import Enum
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from deepseek_sdk.models.response import ApiErrorDetail


class ErrorKind(str, Enum):
    """Error kinds"""
    HTTP = "http"
    JSON = "json"
    API = "api"
    CONFIG = "config"
    INVALID_PARAMETER = "invalid_parameter"
    RATE_LIMIT = "rate_limit"
    AUTHENTICATION = "authentication"
    ENV_VAR = "env_var"
    IO = "io"
    TIMEOUT = "timeout"
    EMPTY_RESPONSE = "empty_response"
    UNSUPPORTED_FEATURE = "unsupported_feature"


RETRYABLE_KINDS = frozenset({ErrorKind.HTTP, ErrorKind.RATE_LIMIT, ErrorKind.TIMEOUT})
AUTH_STATUSES = frozenset({401, 403})
RATE_LIMIT_STATUS = 429


class DeepSeekError(Exception):
    """Base exception for all DeepSeek API operations"""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def is_retryable(self) -> bool:
        """Check if the error may succeed on a later attempt"""
        return self.kind in RETRYABLE_KINDS

    def status_code(self) -> Optional[int]:
        """HTTP status reported by the API, if any"""
        return None

    def is_auth_error(self) -> bool:
        """Check if this is an authentication error"""
        return self.kind == ErrorKind.AUTHENTICATION or (
            self.kind == ErrorKind.API and self.status_code() in AUTH_STATUSES
        )

    def is_rate_limit(self) -> bool:
        """Check if this is a rate limit error"""
        return self.kind == ErrorKind.RATE_LIMIT or (
            self.kind == ErrorKind.API and self.status_code() == RATE_LIMIT_STATUS
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, message={self.message!r})"


class HttpError(DeepSeekError):
    """HTTP request failed at the transport level"""

    kind = ErrorKind.HTTP

    def __init__(self, message: str, http_status: Optional[int] = None):
        super().__init__(f"HTTP request failed: {message}")
        self.http_status = http_status


class ParseError(DeepSeekError):
    """JSON parsing failed"""

    kind = ErrorKind.JSON

    def __init__(self, message: str):
        super().__init__(f"JSON parsing failed: {message}")


class ApiError(DeepSeekError):
    """The API returned an error response"""

    kind = ErrorKind.API

    def __init__(
        self,
        status: int,
        message: str,
        detail: Optional["ApiErrorDetail"] = None,
    ):
        super().__init__(f"API error (status {status}): {message}")
        self.status = status
        self.api_message = message
        self.detail = detail

    def status_code(self) -> Optional[int]:
        return self.status


class ConfigError(DeepSeekError):
    """Configuration error"""

    kind = ErrorKind.CONFIG

    def __init__(self, message: str):
        super().__init__(f"Configuration error: {message}")


class InvalidParameterError(DeepSeekError):
    """Invalid parameter provided"""

    kind = ErrorKind.INVALID_PARAMETER

    def __init__(self, message: str):
        super().__init__(f"Invalid parameter: {message}")


class RateLimitError(DeepSeekError):
    """Rate limit exceeded"""

    kind = ErrorKind.RATE_LIMIT

    def __init__(self, message: Optional[str] = None):
        text = "Rate limit exceeded. Please wait before making more requests."
        if message:
            text = f"{text} ({message})"
        super().__init__(text)
        self.api_message = message


class AuthenticationError(DeepSeekError):
    """Authentication failed"""

    kind = ErrorKind.AUTHENTICATION

    def __init__(self, message: str):
        super().__init__(f"Authentication failed: {message}")


class EnvVarError(DeepSeekError):
    """Environment variable error"""

    kind = ErrorKind.ENV_VAR

    def __init__(self, message: str):
        super().__init__(f"Environment variable error: {message}")


class IoError(DeepSeekError):
    """IO error"""

    kind = ErrorKind.IO

    def __init__(self, message: str):
        super().__init__(f"IO error: {message}")


class RequestTimeoutError(DeepSeekError):
    """Request did not complete within the configured timeout"""

    kind = ErrorKind.TIMEOUT

    def __init__(self, seconds: float):
        super().__init__(f"Request timed out after {seconds:g} seconds")
        self.seconds = seconds


class EmptyResponseError(DeepSeekError):
    """Received an empty or unreadable success response"""

    kind = ErrorKind.EMPTY_RESPONSE

    def __init__(self, detail: Optional[str] = None):
        text = "Received empty response from API"
        if detail:
            text = f"{text}: {detail}"
        super().__init__(text)
        self.detail = detail


class UnsupportedFeatureError(DeepSeekError):
    """Feature not yet supported"""

    kind = ErrorKind.UNSUPPORTED_FEATURE

    def __init__(self, feature: str):
        super().__init__(f"Feature not yet supported: {feature}")
        self.feature = feature
