from pydantic import Field, PositiveFloat
from pydantic_settings import BaseSettings


class HttpClientConfig(BaseSettings):
    """
    Configuration for outbound API requests
    """

    HTTP_ACCEPT_HEADER: str = Field(
        description="Accept header sent when the caller did not set one",
        default="application/vnd.github.v3+json; charset=utf-8",
    )

    HTTP_JSON_MEDIA_TYPE: str = Field(
        description="Response media type that is decoded as JSON, parameters are ignored",
        default="application/json",
    )

    HTTP_DEFAULT_TIMEOUT: PositiveFloat = Field(
        description="Default request timeout in seconds",
        default=30.0,
    )
