"""Data models for DeepSeek API requests and responses"""

from deepseek_sdk.models.request import (
    ChatCompletionRequest,
    Message,
    Model,
    Role,
    Temperature,
)
from deepseek_sdk.models.response import (
    ApiErrorDetail,
    ApiErrorResponse,
    ChatCompletionResponse,
    Choice,
    FunctionCall,
    ResponseMessage,
    ToolCall,
    Usage,
)
from deepseek_sdk.models.stream import (
    DeltaContent,
    StreamChoice,
    StreamChunk,
    collect_content,
    parse_stream_line,
)

__all__ = [
    "ApiErrorDetail",
    "ApiErrorResponse",
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "Choice",
    "DeltaContent",
    "FunctionCall",
    "Message",
    "Model",
    "ResponseMessage",
    "Role",
    "StreamChoice",
    "StreamChunk",
    "Temperature",
    "ToolCall",
    "Usage",
    "collect_content",
    "parse_stream_line",
]
