class HttpClientError(Exception):
    detail: str = "HTTP client error."

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.__class__.detail
        super().__init__(self.detail)


# =============================================================================
# 参数异常
# =============================================================================
class InvalidArgumentError(HttpClientError, ValueError):
    detail = "Invalid argument."


# =============================================================================
# 编解码异常
# =============================================================================
class SerializationError(HttpClientError):
    detail = "Failed to serialize request body."


class DeserializationError(HttpClientError):
    detail = "Failed to deserialize response body."
