"""
DeepSeek Client - Request Builder and Transport/Retry Engine

This module turns validated requests into HTTPS calls against the
chat completion endpoint:
1. Validate the request (no network activity on failure)
2. Serialize it with unset fields omitted
3. POST it with bearer authentication, one fresh connection per attempt
4. Classify the outcome into the error taxonomy
5. Retry retryable failures with exponential backoff
"""

import asyncio
from typing import Optional, List, Dict, Any, Tuple

import httpx
import structlog

from deepseek_sdk.config import DeepSeekConfig
from deepseek_sdk.errors import (
    ApiError,
    ConfigError,
    DeepSeekError,
    RATE_LIMIT_STATUS,
    EmptyResponseError,
    HttpError,
    ParseError,
    RateLimitError,
    RequestTimeoutError,
    UnsupportedFeatureError,
)
from deepseek_sdk.models.request import (
    ChatCompletionRequest,
    Message,
    Model,
    Temperature,
    TemperatureInput,
    check_n,
    check_penalty,
    check_top_p,
)
from deepseek_sdk.models.response import ApiErrorDetail, ApiErrorResponse, ChatCompletionResponse

logger = structlog.get_logger(__name__)


class ChatBuilder:
    """
    Fluent accumulator for a single chat completion request

    Messages keep the order they were added in. Raw parameter values are
    range-checked as soon as they are set; transcript checks are deferred to
    ChatCompletionRequest.validate() at send time. Nothing is reset after
    send(), so the builder can be extended and sent again.
    """

    def __init__(self, client: "DeepSeekClient"):
        self.client = client
        self.messages: List[Message] = []
        self.model: Model = Model.default()
        self.temperature: Optional[Temperature] = None
        self.max_tokens: Optional[int] = None
        self.top_p: Optional[float] = None
        self.frequency_penalty: Optional[float] = None
        self.presence_penalty: Optional[float] = None
        self.stop: Optional[List[str]] = None
        self.stream: Optional[bool] = None
        self.n: Optional[int] = None
        self.user: Optional[str] = None

    def add_message(self, message: Message) -> "ChatBuilder":
        self.messages.append(message)
        return self

    def add_system_message(self, content: str) -> "ChatBuilder":
        return self.add_message(Message.system(content))

    def add_user_message(self, content: str) -> "ChatBuilder":
        return self.add_message(Message.user(content))

    def add_assistant_message(self, content: str) -> "ChatBuilder":
        return self.add_message(Message.assistant(content))

    def with_model(self, model: Model) -> "ChatBuilder":
        self.model = model
        return self

    def with_temperature(self, temperature: TemperatureInput) -> "ChatBuilder":
        """
        Set the sampling temperature

        Raises:
            InvalidParameterError: If a raw value is outside [0.0, 2.0]
        """
        if not isinstance(temperature, Temperature):
            temperature = Temperature.new(temperature)
        self.temperature = temperature
        return self

    def with_max_tokens(self, tokens: int) -> "ChatBuilder":
        self.max_tokens = tokens
        return self

    def with_top_p(self, top_p: float) -> "ChatBuilder":
        self.top_p = check_top_p(top_p)
        return self

    def with_frequency_penalty(self, penalty: float) -> "ChatBuilder":
        self.frequency_penalty = check_penalty("frequency_penalty", penalty)
        return self

    def with_presence_penalty(self, penalty: float) -> "ChatBuilder":
        self.presence_penalty = check_penalty("presence_penalty", penalty)
        return self

    def with_stop(self, stop: List[str]) -> "ChatBuilder":
        self.stop = list(stop)
        return self

    def with_stream(self, stream: bool) -> "ChatBuilder":
        self.stream = stream
        return self

    def with_n(self, n: int) -> "ChatBuilder":
        self.n = check_n(n)
        return self

    def with_user(self, user: str) -> "ChatBuilder":
        self.user = user
        return self

    def build(self) -> ChatCompletionRequest:
        """Snapshot the accumulated state as a request"""
        return ChatCompletionRequest(
            model=self.model,
            messages=list(self.messages),
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            top_p=self.top_p,
            frequency_penalty=self.frequency_penalty,
            presence_penalty=self.presence_penalty,
            stop=list(self.stop) if self.stop is not None else None,
            stream=self.stream,
            n=self.n,
            user=self.user,
        )

    async def send(self) -> ChatCompletionResponse:
        """Build the request and send it through the client"""
        return await self.client.chat_completion(self.build())


class DeepSeekClient:
    """
    Async client for the DeepSeek chat completion API

    The client keeps no request-scoped state, so one instance can serve
    concurrent requests.
    """

    def __init__(
        self,
        config: DeepSeekConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            config: Client configuration, validated here
            transport: Optional httpx transport used for every attempt

        Raises:
            ConfigError: If the configuration is invalid
        """
        config.validate()
        self.config = config
        self._transport = transport

    def chat(self) -> ChatBuilder:
        """Start building a chat request"""
        return ChatBuilder(self)

    async def chat_completion(self, request: ChatCompletionRequest) -> ChatCompletionResponse:
        """
        Send a chat completion request

        Args:
            request: The request to send; validated before any network call

        Returns:
            Parsed completion response

        Raises:
            InvalidParameterError: If the request fails validation
            UnsupportedFeatureError: If streaming was requested
            DeepSeekError: The classified error of the final attempt
        """
        request.validate()
        if request.stream:
            raise UnsupportedFeatureError("streaming responses")

        max_attempts = self.config.max_retries + 1
        for attempt in range(max_attempts):
            logger.debug(
                "request_attempt",
                attempt=attempt + 1,
                max_attempts=max_attempts,
                model=request.model.value,
            )
            try:
                response = await self._send_once(request)
            except DeepSeekError as e:
                if not e.is_retryable() or attempt + 1 >= max_attempts:
                    logger.error(
                        "request_failed",
                        attempt=attempt + 1,
                        error_kind=e.kind.value,
                        status=e.status_code(),
                        retryable=e.is_retryable(),
                    )
                    raise
                delay = self._backoff_delay(attempt)
                logger.warning(
                    "request_retry",
                    attempt=attempt + 1,
                    delay=delay,
                    error_kind=e.kind.value,
                )
                await asyncio.sleep(delay)
            else:
                logger.debug(
                    "request_succeeded",
                    attempt=attempt + 1,
                    model=response.model,
                    total_tokens=response.total_tokens(),
                )
                return response

    async def test_connection(self) -> bool:
        """
        Check that the API is reachable and accepts the key

        Raises:
            DeepSeekError: If the ping request fails
        """
        request = ChatCompletionRequest.from_user_message("ping").with_max_tokens(1)
        await self.chat_completion(request)
        return True

    def _backoff_delay(self, attempt: int) -> float:
        return min(self.config.backoff_factor * (2 ** attempt), self.config.max_backoff)

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.config.api_key.get_secret_value()}",
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": self.config.user_agent,
        }

    def _client_options(self) -> Dict[str, Any]:
        options: Dict[str, Any] = {
            "timeout": self.config.timeout,
            "verify": self.config.validate_certs,
        }
        if self.config.proxy:
            options["proxy"] = self.config.proxy
        if self._transport is not None:
            options["transport"] = self._transport
        return options

    async def _dispatch(self, payload: Dict[str, Any]) -> httpx.Response:
        async with httpx.AsyncClient(**self._client_options()) as client:
            return await client.post(
                self.config.chat_completions_url,
                json=payload,
                headers=self._headers(),
            )

    async def _send_once(self, request: ChatCompletionRequest) -> ChatCompletionResponse:
        """Run one attempt and translate its outcome"""
        payload = request.to_payload()
        try:
            http_response = await asyncio.wait_for(
                self._dispatch(payload),
                timeout=self.config.timeout,
            )
        except asyncio.TimeoutError:
            raise RequestTimeoutError(self.config.timeout) from None
        except httpx.TimeoutException as e:
            raise RequestTimeoutError(self.config.timeout) from e
        except httpx.InvalidURL as e:
            raise ConfigError(f"invalid request URL: {e}") from e
        except httpx.RequestError as e:
            raise self._classify_transport_error(e) from e

        return self._parse_response(http_response)

    @staticmethod
    def _classify_transport_error(error: httpx.RequestError) -> DeepSeekError:
        """Map an httpx failure onto the error taxonomy"""
        detail = str(error) or type(error).__name__
        if isinstance(error, (httpx.UnsupportedProtocol, httpx.LocalProtocolError, httpx.TooManyRedirects)):
            return ConfigError(detail)
        if isinstance(error, httpx.DecodingError):
            return ParseError(detail)
        return HttpError(detail)

    def _parse_response(self, response: httpx.Response) -> ChatCompletionResponse:
        status = response.status_code
        if response.is_success:
            return self._parse_success(response)

        message, detail = self._error_message(response)
        if status == RATE_LIMIT_STATUS:
            raise RateLimitError(message)
        if status >= 500:
            raise HttpError(f"server error {status}: {message}", http_status=status)
        raise ApiError(status, message, detail)

    @staticmethod
    def _parse_success(response: httpx.Response) -> ChatCompletionResponse:
        if not response.content.strip():
            raise EmptyResponseError()
        try:
            data = response.json()
        except ValueError as e:
            raise EmptyResponseError(f"unreadable body: {e}") from e
        try:
            return ChatCompletionResponse.from_payload(data)
        except ParseError as e:
            raise EmptyResponseError(e.message) from e

    @staticmethod
    def _error_message(response: httpx.Response) -> Tuple[str, Optional[ApiErrorDetail]]:
        """Extract the API error message, falling back to the raw body"""
        try:
            data = response.json()
        except ValueError:
            data = None

        envelope = ApiErrorResponse.try_parse(data)
        if envelope:
            return envelope.error.message, envelope.error

        text = response.text.strip()
        return text or response.reason_phrase or f"HTTP {response.status_code}", None
