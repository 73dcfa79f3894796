"""Streaming chunk models

Chunks arrive as server-sent events (``data: {...}`` lines terminated by
``data: [DONE]``). The helpers here only decode chunks that were already
received; the client does not open streaming connections.
"""

import json
from typing import Optional, List, Iterable
from pydantic import BaseModel, ValidationError

from deepseek_sdk.errors import ParseError

SSE_DATA_PREFIX = "data:"
SSE_DONE = "[DONE]"


class DeltaContent(BaseModel):
    """Delta content in a streaming response"""
    role: Optional[str] = None  # first chunk only
    content: Optional[str] = None
    reasoning_content: Optional[str] = None


class StreamChoice(BaseModel):
    """A choice in a streaming response"""
    index: int
    delta: DeltaContent
    finish_reason: Optional[str] = None


class StreamChunk(BaseModel):
    """Streaming response chunk"""
    id: str
    object: str
    created: int
    model: str
    choices: List[StreamChoice]

    def get_content(self) -> Optional[str]:
        """Content fragment carried by the first choice"""
        if not self.choices:
            return None
        return self.choices[0].delta.content

    def get_reasoning(self) -> Optional[str]:
        if not self.choices:
            return None
        return self.choices[0].delta.reasoning_content


def parse_stream_line(line: str) -> Optional[StreamChunk]:
    """
    Decode one server-sent event line into a chunk

    Args:
        line: Raw line from the event stream

    Returns:
        The chunk, or None for blank lines, comments, non-data fields and
        the [DONE] sentinel

    Raises:
        ParseError: If a data line carries malformed JSON or an unexpected shape
    """
    line = line.strip()
    if not line.startswith(SSE_DATA_PREFIX):
        return None

    data = line[len(SSE_DATA_PREFIX):].strip()
    if not data or data == SSE_DONE:
        return None

    try:
        return StreamChunk.model_validate(json.loads(data))
    except json.JSONDecodeError as e:
        raise ParseError(f"invalid stream chunk: {e}") from None
    except ValidationError as e:
        raise ParseError(str(e)) from None


def collect_content(chunks: Iterable[StreamChunk]) -> str:
    """Concatenate content fragments in arrival order"""
    return "".join(chunk.get_content() or "" for chunk in chunks)
