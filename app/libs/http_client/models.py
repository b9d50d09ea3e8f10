from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

import httpx


class BodyKind(StrEnum):
    EMPTY = "empty"
    TEXT = "text"
    BINARY_STREAM = "binary_stream"
    STRUCTURED = "structured"


def body_kind(body: Any) -> BodyKind:
    """Classify a request body into the wire form it needs."""
    if body is None:
        return BodyKind.EMPTY
    if isinstance(body, str):
        return BodyKind.TEXT
    if isinstance(body, (bytes, bytearray, memoryview)) or callable(getattr(body, "read", None)):
        return BodyKind.BINARY_STREAM
    return BodyKind.STRUCTURED


@dataclass
class Request:
    method: str = "GET"
    url: str = ""
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    body: Any = None
    timeout: float = 30.0
    # decode target handed to the response, None means any JSON value
    response_type: Any = None

    def __post_init__(self) -> None:
        if not isinstance(self.headers, httpx.Headers):
            self.headers = httpx.Headers(self.headers)

    @property
    def body_kind(self) -> BodyKind:
        return body_kind(self.body)

    def with_headers(self, **headers: str) -> "Request":
        self.headers.update(headers)
        return self

    def with_timeout(self, timeout: float) -> "Request":
        self.timeout = timeout
        return self

    def with_body(self, body: Any) -> "Request":
        self.body = body
        return self


@dataclass
class Response:
    status_code: int = 200
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    body: str = ""
    content_type: str | None = None
    # decode target for the JSON body, None means any JSON value
    body_type: Any = None
    body_as_object: Any = None
    latency_ms: int = 0
    request: Request | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.headers, httpx.Headers):
            self.headers = httpx.Headers(self.headers)
        if self.content_type is None:
            self.content_type = self.headers.get("content-type")

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def text(self) -> str:
        return self.body
