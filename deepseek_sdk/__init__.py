"""DeepSeek Python SDK - typed async client for the DeepSeek chat completion API"""

from deepseek_sdk.client import ChatBuilder, DeepSeekClient
from deepseek_sdk.config import DeepSeekConfig
from deepseek_sdk.errors import (
    ApiError,
    AuthenticationError,
    ConfigError,
    DeepSeekError,
    EmptyResponseError,
    EnvVarError,
    ErrorKind,
    HttpError,
    InvalidParameterError,
    IoError,
    ParseError,
    RateLimitError,
    RequestTimeoutError,
    UnsupportedFeatureError,
)
from deepseek_sdk.models import (
    ApiErrorDetail,
    ApiErrorResponse,
    ChatCompletionRequest,
    ChatCompletionResponse,
    Choice,
    DeltaContent,
    FunctionCall,
    Message,
    Model,
    ResponseMessage,
    Role,
    StreamChoice,
    StreamChunk,
    Temperature,
    ToolCall,
    Usage,
    collect_content,
    parse_stream_line,
)
from deepseek_sdk.version import NAME, VERSION

__version__ = VERSION

__all__ = [
    "ApiError",
    "ApiErrorDetail",
    "ApiErrorResponse",
    "AuthenticationError",
    "ChatBuilder",
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "Choice",
    "ConfigError",
    "DeepSeekClient",
    "DeepSeekConfig",
    "DeepSeekError",
    "DeltaContent",
    "EmptyResponseError",
    "EnvVarError",
    "ErrorKind",
    "FunctionCall",
    "HttpError",
    "InvalidParameterError",
    "IoError",
    "Message",
    "Model",
    "NAME",
    "ParseError",
    "RateLimitError",
    "RequestTimeoutError",
    "ResponseMessage",
    "Role",
    "StreamChoice",
    "StreamChunk",
    "Temperature",
    "ToolCall",
    "UnsupportedFeatureError",
    "Usage",
    "VERSION",
    "collect_content",
    "parse_stream_line",
]
