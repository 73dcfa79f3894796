"""Request models for the DeepSeek chat completion API"""

from enum import Enum
from typing import Optional, List, Dict, Any, Union
from pydantic import BaseModel, ConfigDict, Field, RootModel, ValidationError, field_validator

from deepseek_sdk.errors import InvalidParameterError, ParseError

TEMPERATURE_MIN = 0.0
TEMPERATURE_MAX = 2.0
TOP_P_MIN = 0.0
TOP_P_MAX = 1.0
PENALTY_MIN = -2.0
PENALTY_MAX = 2.0
N_MIN = 1
N_MAX = 10


class Model(str, Enum):
    """Available DeepSeek models"""
    CHAT = "deepseek-chat"
    REASONER = "deepseek-reasoner"
    CODER = "deepseek-coder"

    def as_str(self) -> str:
        """Wire string for this model"""
        return self.value

    def supports_reasoning(self) -> bool:
        """Only the reasoner returns reasoning content"""
        return self is Model.REASONER

    @classmethod
    def default(cls) -> "Model":
        return cls.CHAT

    @classmethod
    def from_str(cls, value: str) -> "Model":
        """
        Parse a wire string into a Model

        Raises:
            ParseError: If the string names no known model
        """
        try:
            return cls(value)
        except ValueError:
            known = ", ".join(model.value for model in cls)
            raise ParseError(f"unknown model {value!r}, expected one of: {known}") from None

    def __str__(self) -> str:
        return self.value


class Role(str, Enum):
    """Message role in a conversation"""
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"

    def __str__(self) -> str:
        return self.value


class Message(BaseModel):
    """A message in the conversation"""
    model_config = ConfigDict(frozen=True)

    role: Role = Field(..., description="Role: system, user, or assistant")
    content: str = Field(..., description="Message content")

    @classmethod
    def new(cls, role: Role, content: str) -> "Message":
        return cls(role=role, content=content)

    @classmethod
    def system(cls, content: str) -> "Message":
        """Create a system message"""
        return cls(role=Role.SYSTEM, content=content)

    @classmethod
    def user(cls, content: str) -> "Message":
        """Create a user message"""
        return cls(role=Role.USER, content=content)

    @classmethod
    def assistant(cls, content: str) -> "Message":
        """Create an assistant message"""
        return cls(role=Role.ASSISTANT, content=content)

    @property
    def length(self) -> int:
        return len(self.content)

    def is_empty(self) -> bool:
        return not self.content


class Temperature(RootModel[float]):
    """Sampling temperature restricted to [0.0, 2.0]"""
    model_config = ConfigDict(frozen=True, strict=True)

    @field_validator("root")
    @classmethod
    def _check_range(cls, value: float) -> float:
        if not TEMPERATURE_MIN <= value <= TEMPERATURE_MAX:
            raise ValueError(
                f"Temperature must be between {TEMPERATURE_MIN} and {TEMPERATURE_MAX}, got {value}"
            )
        return value

    @classmethod
    def new(cls, value: float) -> "Temperature":
        """
        Create a validated temperature

        Raises:
            InvalidParameterError: If the value is not a number or is outside [0.0, 2.0]
        """
        check_number("Temperature", value)
        try:
            return cls(float(value))
        except ValidationError:
            raise InvalidParameterError(
                f"Temperature must be between {TEMPERATURE_MIN} and {TEMPERATURE_MAX}, got {value}"
            ) from None

    @classmethod
    def new_unchecked(cls, value: float) -> "Temperature":
        """Create a temperature without range validation"""
        return cls.model_construct(value)

    @property
    def value(self) -> float:
        return self.root

    @classmethod
    def very_low(cls) -> "Temperature":
        return cls.new_unchecked(0.1)

    @classmethod
    def low(cls) -> "Temperature":
        return cls.new_unchecked(0.3)

    @classmethod
    def medium(cls) -> "Temperature":
        return cls.new_unchecked(0.7)

    @classmethod
    def high(cls) -> "Temperature":
        return cls.new_unchecked(1.0)

    @classmethod
    def very_high(cls) -> "Temperature":
        return cls.new_unchecked(1.5)

    @classmethod
    def default(cls) -> "Temperature":
        return cls.medium()

    def __str__(self) -> str:
        return str(self.root)


TemperatureInput = Union[Temperature, float]


def check_number(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidParameterError(f"{name} must be a number, got {type(value).__name__}")


def check_top_p(value: float) -> float:
    check_number("top_p", value)
    if not TOP_P_MIN <= value <= TOP_P_MAX:
        raise InvalidParameterError(f"top_p must be between {TOP_P_MIN} and {TOP_P_MAX}, got {value}")
    return value


def check_penalty(name: str, value: float) -> float:
    check_number(name, value)
    if not PENALTY_MIN <= value <= PENALTY_MAX:
        raise InvalidParameterError(
            f"{name} must be between {PENALTY_MIN} and {PENALTY_MAX}, got {value}"
        )
    return value


def check_n(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameterError(f"n must be an integer, got {type(value).__name__}")
    if not N_MIN <= value <= N_MAX:
        raise InvalidParameterError(f"n must be between {N_MIN} and {N_MAX}, got {value}")
    return value


class ChatCompletionRequest(BaseModel):
    """
    Chat completion request

    Unset optional parameters are left out of the wire payload entirely.
    Range checks happen in validate(), which the client runs before every send.
    """
    model: Model = Field(default_factory=Model.default, description="Model to use")
    messages: List[Message] = Field(default_factory=list, description="Conversation messages, in order")
    temperature: Optional[Temperature] = None
    max_tokens: Optional[int] = None
    top_p: Optional[float] = None
    frequency_penalty: Optional[float] = None
    presence_penalty: Optional[float] = None
    stop: Optional[List[str]] = None
    stream: Optional[bool] = None
    n: Optional[int] = None
    user: Optional[str] = Field(None, description="End-user identifier for tracking")

    @classmethod
    def new(cls, messages: List[Message]) -> "ChatCompletionRequest":
        return cls(messages=list(messages))

    @classmethod
    def from_user_message(cls, content: str) -> "ChatCompletionRequest":
        """Create a request with a single user message"""
        return cls(messages=[Message.user(content)])

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "ChatCompletionRequest":
        """
        Parse a wire payload back into a request

        Raises:
            ParseError: If the payload does not match the request shape
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ParseError(str(e)) from None

    def to_payload(self) -> Dict[str, Any]:
        """Wire JSON body with unset fields omitted"""
        return self.model_dump(mode="json", exclude_none=True)

    def with_model(self, model: Model) -> "ChatCompletionRequest":
        return self.model_copy(update={"model": model})

    def with_temperature(self, temperature: Temperature) -> "ChatCompletionRequest":
        return self.model_copy(update={"temperature": temperature})

    def with_max_tokens(self, tokens: int) -> "ChatCompletionRequest":
        return self.model_copy(update={"max_tokens": tokens})

    def with_top_p(self, top_p: float) -> "ChatCompletionRequest":
        return self.model_copy(update={"top_p": top_p})

    def with_frequency_penalty(self, penalty: float) -> "ChatCompletionRequest":
        return self.model_copy(update={"frequency_penalty": penalty})

    def with_presence_penalty(self, penalty: float) -> "ChatCompletionRequest":
        return self.model_copy(update={"presence_penalty": penalty})

    def with_stop(self, stop: List[str]) -> "ChatCompletionRequest":
        return self.model_copy(update={"stop": list(stop)})

    def with_stream(self, stream: bool) -> "ChatCompletionRequest":
        return self.model_copy(update={"stream": stream})

    def with_n(self, n: int) -> "ChatCompletionRequest":
        return self.model_copy(update={"n": n})

    def with_user(self, user: str) -> "ChatCompletionRequest":
        return self.model_copy(update={"user": user})

    def validate(self) -> None:
        """
        Check the request before it is sent

        Checks run in a fixed order and the first failure is raised.

        Raises:
            InvalidParameterError: On an empty transcript, an empty message,
                or a parameter outside its allowed range
        """
        if not self.messages:
            raise InvalidParameterError("At least one message is required")

        for i, message in enumerate(self.messages):
            if message.is_empty():
                raise InvalidParameterError(f"Message at index {i} is empty")

        if self.top_p is not None:
            check_top_p(self.top_p)
        if self.frequency_penalty is not None:
            check_penalty("frequency_penalty", self.frequency_penalty)
        if self.presence_penalty is not None:
            check_penalty("presence_penalty", self.presence_penalty)
        if self.n is not None:
            check_n(self.n)
