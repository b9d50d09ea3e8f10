"""HTTP Client module."""

from .client import HttpClient
from .codec import BaseCodec, JsonCodec
from .middleware import json_middleware, logging_middleware
from .models import BodyKind, Request, Response, body_kind
from .pipeline import JsonHttpPipeline, media_type
from .types import Middleware, NextFn

__all__ = [
    "HttpClient",
    "BaseCodec",
    "JsonCodec",
    "JsonHttpPipeline",
    "Request",
    "Response",
    "BodyKind",
    "body_kind",
    "media_type",
    "Middleware",
    "NextFn",
    "json_middleware",
    "logging_middleware",
]
