import asyncio
import time
from typing import Any

import httpx

from configs import app_config

from .middleware import json_middleware
from .models import BodyKind, Request, Response, body_kind
from .types import Middleware


class HttpClient:
    def __init__(
        self,
        middlewares: list[Middleware] | None = None,
        default_timeout: float | None = None,
        default_headers: dict[str, str] | None = None,
    ):
        self._middlewares = middlewares if middlewares is not None else [json_middleware()]
        self._default_timeout = (
            app_config.HTTP_DEFAULT_TIMEOUT if default_timeout is None else default_timeout
        )
        self._default_headers = default_headers or {}
        self._client: httpx.AsyncClient | None = None

    async def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._default_timeout)
        return self._client

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "HttpClient":
        await self._ensure_client()
        return self

    async def __aexit__(self, *_args: Any) -> None:
        await self.close()

    def _merge_headers(self, headers: dict[str, str] | None) -> httpx.Headers:
        merged = httpx.Headers(self._default_headers)
        if headers:
            merged.update(headers)
        return merged

    @staticmethod
    async def _wire_content(body: Any) -> bytes | str | None:
        match body_kind(body):
            case BodyKind.EMPTY:
                return None
            case BodyKind.TEXT:
                return body
            case BodyKind.BINARY_STREAM:
                if hasattr(body, "read"):
                    # file reads block, keep them off the event loop
                    return await asyncio.to_thread(body.read)
                return bytes(body)
            case BodyKind.STRUCTURED:
                raise TypeError(f"{type(body).__name__} body was not serialized by any middleware")

    async def request(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        body: Any = None,
        timeout: float | None = None,
        response_type: Any = None,
    ) -> Response:
        req = Request(
            method=method,
            url=url,
            headers=self._merge_headers(headers),
            body=body,
            timeout=self._default_timeout if timeout is None else timeout,
            response_type=response_type,
        )
        return await self._execute(req)

    async def _execute(self, request: Request) -> Response:
        if self._middlewares:
            return await self._execute_with_middleware(request, 0)
        return await self._do_request(request)

    async def _execute_with_middleware(self, request: Request, index: int) -> Response:
        if index >= len(self._middlewares):
            return await self._do_request(request)

        middleware = self._middlewares[index]

        async def next_fn(req: Request) -> Response:
            return await self._execute_with_middleware(req, index + 1)

        return await middleware(request, next_fn)

    async def _do_request(self, request: Request) -> Response:
        client = await self._ensure_client()
        start_time = time.time()

        http_response = await client.request(
            method=request.method,
            url=request.url,
            headers=request.headers,
            content=await self._wire_content(request.body),
            timeout=request.timeout,
        )

        latency_ms = int((time.time() - start_time) * 1000)

        return Response(
            status_code=http_response.status_code,
            headers=http_response.headers,
            body=http_response.text,
            body_type=request.response_type,
            latency_ms=latency_ms,
            request=request,
        )

    async def get(self, url: str, **kwargs: Any) -> Response:
        return await self.request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> Response:
        return await self.request("POST", url, **kwargs)

    async def put(self, url: str, **kwargs: Any) -> Response:
        return await self.request("PUT", url, **kwargs)

    async def delete(self, url: str, **kwargs: Any) -> Response:
        return await self.request("DELETE", url, **kwargs)

    async def patch(self, url: str, **kwargs: Any) -> Response:
        return await self.request("PATCH", url, **kwargs)
