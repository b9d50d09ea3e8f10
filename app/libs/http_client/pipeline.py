import logging
from typing import Any

from configs import app_config
from exceptions.common import InvalidArgumentError

from .codec import BaseCodec, JsonCodec
from .models import BodyKind, Request, Response

logger = logging.getLogger(__name__)

_DEFAULT_CODEC: Any = object()


def media_type(content_type: str | None) -> str:
    """Return the lower-cased media type of a Content-Type value, without parameters."""
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


class JsonHttpPipeline:
    """
    Serializes outbound requests and deserializes inbound responses for a JSON API.

    Stateless apart from its configuration, so one instance can be shared
    across concurrent calls on distinct request/response objects.
    """

    def __init__(
        self,
        codec: BaseCodec | None = _DEFAULT_CODEC,
        *,
        accept: str | None = None,
        json_media_type: str | None = None,
    ):
        if codec is None:
            raise InvalidArgumentError("codec must not be None")
        self._codec: BaseCodec = JsonCodec() if codec is _DEFAULT_CODEC else codec
        self._accept = accept or app_config.HTTP_ACCEPT_HEADER
        self._json_media_type = media_type(json_media_type or app_config.HTTP_JSON_MEDIA_TYPE)

    @property
    def codec(self) -> BaseCodec:
        return self._codec

    def serialize_request(self, request: Request) -> Request:
        if request is None:
            raise InvalidArgumentError("request must not be None")

        if "Accept" not in request.headers:
            request.headers["Accept"] = self._accept
            logger.debug(f"Set Accept header for {request.method} {request.url}")

        match request.body_kind:
            case BodyKind.EMPTY | BodyKind.TEXT | BodyKind.BINARY_STREAM:
                pass
            case BodyKind.STRUCTURED:
                request.body = self._codec.encode(request.body)
                logger.debug(f"Encoded JSON body for {request.method} {request.url}")
        return request

    def deserialize_response(self, response: Response) -> None:
        if response is None:
            raise InvalidArgumentError("response must not be None")

        if media_type(response.content_type) != self._json_media_type:
            logger.debug(f"Skip decoding response with content type {response.content_type!r}")
            return
        if not response.body:
            return

        response.body_as_object = self._codec.decode(response.body, response.body_type)
