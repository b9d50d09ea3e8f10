"""JSON encode/decode capability used by the request pipeline."""

from abc import ABC, abstractmethod
import math
from functools import lru_cache
from typing import Any

from pydantic import PydanticSchemaGenerationError, TypeAdapter

from exceptions.common import DeserializationError, SerializationError


class BaseCodec(ABC):
    """Interface for body codecs."""

    @abstractmethod
    def encode(self, value: Any) -> str:
        """
        Serialize a structured value to wire text.

        Args:
            value: Object to serialize

        Returns:
            Compact JSON text

        Raises:
            SerializationError: value cannot be represented
        """
        raise NotImplementedError

    @abstractmethod
    def decode(self, text: str, target_type: Any = None) -> Any:
        """
        Deserialize wire text into a value of ``target_type``.

        Args:
            text: Response body text
            target_type: Expected type, None for any JSON value

        Raises:
            DeserializationError: text is malformed or does not fit target_type
        """
        raise NotImplementedError


@lru_cache(maxsize=256)
def _adapter(target_type: Any) -> TypeAdapter:
    return TypeAdapter(target_type)


def _find_non_finite(data: Any, path: str = "$") -> str | None:
    """Return the path of the first NaN or infinite float in plain python data."""
    if isinstance(data, float):
        return None if math.isfinite(data) else path
    if isinstance(data, dict):
        items = ((f"{path}.{key}", item) for key, item in data.items())
    elif isinstance(data, (list, tuple, set, frozenset)):
        items = ((f"{path}[{index}]", item) for index, item in enumerate(data))
    else:
        return None
    for item_path, item in items:
        found = _find_non_finite(item, item_path)
        if found:
            return found
    return None


class JsonCodec(BaseCodec):
    def encode(self, value: Any) -> str:
        adapter = _adapter(Any)
        try:
            # JSON has no NaN/Infinity, pydantic would silently write null
            bad_path = _find_non_finite(adapter.dump_python(value))
            if bad_path:
                raise SerializationError(f"Cannot encode non-finite float at {bad_path} as JSON")
            return adapter.dump_json(value).decode("utf-8")
        except ValueError as e:
            raise SerializationError(f"Cannot encode {type(value).__name__} as JSON: {e}") from e

    def decode(self, text: str, target_type: Any = None) -> Any:
        try:
            adapter = _adapter(Any if target_type is None else target_type)
            return adapter.validate_json(text)
        except (ValueError, PydanticSchemaGenerationError) as e:
            raise DeserializationError(f"Cannot decode response body: {e}") from e
