import logging

from extensions.ext_logging import add_trace_id_filter, trace_id_generator, trace_id_var

from .models import Request, Response
from .pipeline import JsonHttpPipeline
from .types import Middleware, NextFn


def json_middleware(pipeline: JsonHttpPipeline | None = None) -> Middleware:
    json_pipeline = pipeline or JsonHttpPipeline()

    async def middleware(request: Request, next: NextFn) -> Response:
        response = await next(json_pipeline.serialize_request(request))
        json_pipeline.deserialize_response(response)
        return response

    return middleware


def logging_middleware(logger: logging.Logger | None = None) -> Middleware:
    log = add_trace_id_filter(logger or logging.getLogger(__name__))

    async def middleware(request: Request, next: NextFn) -> Response:
        token = trace_id_var.set(trace_id_var.get() or trace_id_generator())
        try:
            log.info(f"-> {request.method} {request.url}")
            response = await next(request)
            log.info(f"<- {response.status_code} ({response.latency_ms}ms)")
            return response
        finally:
            trace_id_var.reset(token)

    return middleware
