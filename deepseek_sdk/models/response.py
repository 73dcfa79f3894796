"""Response models for the DeepSeek chat completion API"""

from typing import Optional, List, Dict, Any, Union
from pydantic import BaseModel, Field, ValidationError

from deepseek_sdk.errors import ParseError

PROMPT_TOKEN_RATE = 0.0001
COMPLETION_TOKEN_RATE = 0.0002


class FunctionCall(BaseModel):
    """Function call information"""
    name: str
    arguments: str = Field(..., description="Arguments as a JSON string")


class ToolCall(BaseModel):
    """Tool call information"""
    id: str
    type: str = "function"
    function: FunctionCall


class ResponseMessage(BaseModel):
    """Message returned by the assistant"""
    role: str
    content: Optional[str] = None
    reasoning_content: Optional[str] = Field(None, description="Reasoning trace (reasoner model only)")
    function_call: Optional[FunctionCall] = None
    tool_calls: Optional[List[ToolCall]] = None

    def has_content(self) -> bool:
        return bool(self.content)

    def has_reasoning(self) -> bool:
        return bool(self.reasoning_content)

    def total_length(self) -> int:
        """Combined length of content and reasoning content"""
        return len(self.content or "") + len(self.reasoning_content or "")


class Choice(BaseModel):
    """Chat completion choice"""
    index: int
    message: ResponseMessage
    finish_reason: Optional[str] = None
    logprobs: Optional[Any] = None


class Usage(BaseModel):
    """Token usage information"""
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int
    reasoning_tokens: Optional[int] = None
    prompt_cache_hit_tokens: Optional[int] = None
    prompt_cache_miss_tokens: Optional[int] = None

    def estimate_cost(self) -> float:
        """
        Rough cost estimate from fixed per-token rates

        The rates are illustrative, not live pricing.
        """
        return self.prompt_tokens * PROMPT_TOKEN_RATE + self.completion_tokens * COMPLETION_TOKEN_RATE


class ChatCompletionResponse(BaseModel):
    """Chat completion response model"""
    id: str
    object: str
    created: int
    model: str
    choices: List[Choice]
    usage: Optional[Usage] = None
    system_fingerprint: Optional[str] = None

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "ChatCompletionResponse":
        """
        Parse a success body

        Raises:
            ParseError: If the body does not match the success shape
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ParseError(str(e)) from None

    def _first_message(self) -> Optional[ResponseMessage]:
        if not self.choices:
            return None
        return self.choices[0].message

    def get_content(self) -> Optional[str]:
        """First choice's content, if any"""
        message = self._first_message()
        return message.content if message else None

    def get_reasoning(self) -> Optional[str]:
        """First choice's reasoning content, if any"""
        message = self._first_message()
        return message.reasoning_content if message else None

    def is_finished(self) -> bool:
        """True when the first choice stopped naturally"""
        if not self.choices:
            return False
        return self.choices[0].finish_reason == "stop"

    def total_tokens(self) -> Optional[int]:
        return self.usage.total_tokens if self.usage else None


class ApiErrorDetail(BaseModel):
    """API error details"""
    message: str
    type: Optional[str] = None
    code: Optional[Union[str, int]] = None
    param: Optional[str] = None


class ApiErrorResponse(BaseModel):
    """API error envelope"""
    error: ApiErrorDetail

    @classmethod
    def try_parse(cls, data: Any) -> Optional["ApiErrorResponse"]:
        """Parse an error body, returning None when it is not an error envelope"""
        try:
            return cls.model_validate(data)
        except ValidationError:
            return None
