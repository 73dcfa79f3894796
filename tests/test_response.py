"""Tests for response and streaming models"""

import pytest

from deepseek_sdk import (
    ApiErrorResponse,
    ChatCompletionResponse,
    ParseError,
    ResponseMessage,
    StreamChunk,
    Usage,
    collect_content,
    parse_stream_line,
)


def _response(body, **overrides) -> ChatCompletionResponse:
    body.update(overrides)
    return ChatCompletionResponse.from_payload(body)


def test_response_helpers(success_body):
    """Test accessors over the first choice"""
    body = success_body
    body["choices"][0]["message"]["reasoning_content"] = "Test reasoning"
    response = ChatCompletionResponse.from_payload(body)

    assert response.get_content() == "Hello! How can I help you today?"
    assert response.get_reasoning() == "Test reasoning"
    assert response.is_finished()
    assert response.total_tokens() == 18


def test_missing_values_are_none(success_body):
    """Absent choices or usage yield None rather than errors"""
    response = _response(success_body, choices=[], usage=None)

    assert response.get_content() is None
    assert response.get_reasoning() is None
    assert response.total_tokens() is None
    assert not response.is_finished()


def test_is_finished_requires_stop(success_body):
    """Only a literal "stop" counts as finished"""
    body = success_body
    body["choices"][0]["finish_reason"] = "length"
    assert not ChatCompletionResponse.from_payload(body).is_finished()

    del body["choices"][0]["finish_reason"]
    assert not ChatCompletionResponse.from_payload(body).is_finished()


def test_reasoning_usage_fields(success_body):
    """Optional usage counters are parsed when present"""
    body = success_body
    body["model"] = "deepseek-reasoner"
    body["usage"].update({
        "reasoning_tokens": 5,
        "prompt_cache_hit_tokens": 4,
        "prompt_cache_miss_tokens": 6,
    })
    body["system_fingerprint"] = "fp_abc"

    response = ChatCompletionResponse.from_payload(body)

    assert response.usage.reasoning_tokens == 5
    assert response.usage.prompt_cache_hit_tokens == 4
    assert response.usage.prompt_cache_miss_tokens == 6
    assert response.system_fingerprint == "fp_abc"


def test_tool_calls_parsed(success_body):
    """Function and tool calls are exposed as typed models"""
    body = success_body
    body["choices"][0]["message"] = {
        "role": "assistant",
        "content": None,
        "tool_calls": [{
            "id": "call_1",
            "type": "function",
            "function": {"name": "get_weather", "arguments": "{\"city\": \"Oslo\"}"},
        }],
    }

    message = ChatCompletionResponse.from_payload(body).choices[0].message

    assert not message.has_content()
    assert message.tool_calls[0].function.name == "get_weather"


def test_message_helpers():
    """Test content predicates and combined length"""
    message = ResponseMessage(
        role="assistant",
        content="Hello world!",
        reasoning_content="This is reasoning",
    )

    assert message.has_content()
    assert message.has_reasoning()
    assert message.total_length() == 29

    empty = ResponseMessage(role="assistant", content="")
    assert not empty.has_content()
    assert not empty.has_reasoning()


def test_usage_cost_estimation():
    """100 prompt and 50 completion tokens cost 0.02"""
    usage = Usage(prompt_tokens=100, completion_tokens=50, total_tokens=150)

    assert usage.estimate_cost() == pytest.approx(0.02)


def test_malformed_success_body():
    """Bodies missing required fields raise ParseError"""
    with pytest.raises(ParseError):
        ChatCompletionResponse.from_payload({"id": "x"})


def test_api_error_envelope():
    """Error envelopes parse with optional fields"""
    envelope = ApiErrorResponse.try_parse({
        "error": {"message": "Invalid API key", "type": "auth", "code": 401, "param": None}
    })

    assert envelope.error.message == "Invalid API key"
    assert envelope.error.code == 401
    assert ApiErrorResponse.try_parse({"detail": "nope"}) is None
    assert ApiErrorResponse.try_parse(None) is None


def _chunk_line(content=None, role=None, finish_reason=None) -> str:
    delta = {}
    if role:
        delta["role"] = role
    if content is not None:
        delta["content"] = content
    chunk = {
        "id": "chatcmpl-1",
        "object": "chat.completion.chunk",
        "created": 1,
        "model": "deepseek-chat",
        "choices": [{"index": 0, "delta": delta, "finish_reason": finish_reason}],
    }
    return "data: " + StreamChunk.model_validate(chunk).model_dump_json()


def test_stream_chunks_concatenate_in_order():
    """Content deltas rebuild the full message"""
    lines = [
        _chunk_line(role="assistant", content=""),
        "",
        ": keep-alive",
        _chunk_line(content="Hel"),
        _chunk_line(content="lo"),
        _chunk_line(content="!", finish_reason="stop"),
        "data: [DONE]",
    ]

    chunks = [chunk for chunk in map(parse_stream_line, lines) if chunk is not None]

    assert len(chunks) == 4
    assert chunks[0].choices[0].delta.role == "assistant"
    assert chunks[1].choices[0].delta.role is None
    assert collect_content(chunks) == "Hello!"


def test_stream_line_with_bad_json():
    """Malformed data lines raise ParseError"""
    with pytest.raises(ParseError):
        parse_stream_line("data: {not json")
