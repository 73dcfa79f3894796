"""Shared fixtures for SDK tests"""

import copy
from typing import Any, Dict

import httpx
import pytest

from deepseek_sdk import DeepSeekClient, DeepSeekConfig

TEST_API_KEY = "sk-test-secret-key"
TEST_BASE_URL = "https://api.deepseek.test"

SUCCESS_BODY: Dict[str, Any] = {
    "id": "chatcmpl-123",
    "object": "chat.completion",
    "created": 1677652288,
    "model": "deepseek-chat",
    "choices": [{
        "index": 0,
        "message": {
            "role": "assistant",
            "content": "Hello! How can I help you today?",
        },
        "finish_reason": "stop",
    }],
    "usage": {
        "prompt_tokens": 10,
        "completion_tokens": 8,
        "total_tokens": 18,
    },
}


def scripted_transport(*outcomes) -> httpx.MockTransport:
    """
    Mock transport replaying outcomes in order

    Each outcome is an httpx.Response or an exception to raise. The last
    outcome repeats once the script runs out. Received requests are kept on
    ``transport.calls``.
    """
    script = list(outcomes)
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        outcome = script.pop(0) if len(script) > 1 else script[0]
        if isinstance(outcome, Exception):
            raise outcome
        # fresh response per request
        return httpx.Response(
            outcome.status_code,
            headers=outcome.headers,
            content=outcome.content,
        )

    transport = httpx.MockTransport(handler)
    transport.calls = calls
    return transport


@pytest.fixture
def config() -> DeepSeekConfig:
    """Fast-retrying config pointed at a fake host"""
    return (
        DeepSeekConfig.new(TEST_API_KEY)
        .with_base_url(TEST_BASE_URL)
        .with_max_retries(1)
        .with_backoff(0.0)
    )


@pytest.fixture
def make_client(config):
    """Build a client around a scripted transport"""
    def _make(*outcomes, **config_updates) -> DeepSeekClient:
        client_config = config.model_copy(update=config_updates) if config_updates else config
        return DeepSeekClient(client_config, transport=scripted_transport(*outcomes))
    return _make


@pytest.fixture
def api_key() -> str:
    return TEST_API_KEY


@pytest.fixture
def base_url() -> str:
    return TEST_BASE_URL


@pytest.fixture
def success_body() -> Dict[str, Any]:
    """Fresh copy of a completed chat response body"""
    return copy.deepcopy(SUCCESS_BODY)


@pytest.fixture
def error_body():
    """Build an API error envelope around a message"""
    def _build(message: str) -> Dict[str, Any]:
        return {
            "error": {
                "message": message,
                "type": "invalid_request_error",
                "code": "invalid_api_key",
            }
        }
    return _build


@pytest.fixture
def ok(success_body) -> httpx.Response:
    """Successful chat completion response"""
    return httpx.Response(200, json=success_body)
