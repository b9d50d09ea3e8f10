import json
import logging

import pytest

from exceptions.common import InvalidArgumentError
from extensions.ext_logging import trace_id_var
from libs.http_client.middleware import json_middleware, logging_middleware
from libs.http_client.models import Request, Response


class TestJsonMiddleware:
    @pytest.mark.asyncio
    async def test_serializes_and_deserializes(self, pipeline):
        req = Request(method="POST", url="https://api.example.com/repos", body={"name": "octokit"})
        received_request = None

        async def next_fn(r: Request) -> Response:
            nonlocal received_request
            received_request = r
            return Response(
                status_code=201,
                headers={"Content-Type": "application/json"},
                body=json.dumps({"id": 7}),
                request=r,
            )

        response = await json_middleware(pipeline)(req, next_fn)

        assert received_request is req
        assert received_request.body == '{"name":"octokit"}'
        assert received_request.headers["Accept"] == "application/vnd.github.v3+json; charset=utf-8"
        assert response.body_as_object == {"id": 7}

    @pytest.mark.asyncio
    async def test_leaves_html_response(self):
        async def next_fn(r: Request) -> Response:
            return Response(headers={"Content-Type": "text/html"}, body='"works"', request=r)

        response = await json_middleware()(Request(), next_fn)

        assert response.body_as_object is None

    @pytest.mark.asyncio
    async def test_none_response_raises(self):
        async def next_fn(r: Request) -> Response:
            return None

        with pytest.raises(InvalidArgumentError):
            await json_middleware()(Request(), next_fn)


class TestLoggingMiddleware:
    @pytest.mark.asyncio
    async def test_logs_request_and_response(self, caplog):
        req = Request(method="GET", url="https://example.com")
        seen_trace_id = None

        async def next_fn(r: Request) -> Response:
            nonlocal seen_trace_id
            seen_trace_id = trace_id_var.get()
            return Response(status_code=204, latency_ms=5, request=r)

        logger = logging.getLogger("test.http_client")
        with caplog.at_level(logging.INFO, logger="test.http_client"):
            await logging_middleware(logger)(req, next_fn)

        assert "-> GET https://example.com" in caplog.text
        assert "<- 204 (5ms)" in caplog.text
        assert seen_trace_id
        assert all(record.trace_id == seen_trace_id for record in caplog.records)
        assert trace_id_var.get() is None
