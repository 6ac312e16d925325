"""JSON serializer implementation."""

import json
from datetime import date, datetime
from typing import Any

from shelfql.core.exceptions import SerializationError


class JsonSerializer:
    """JSON serializer for cached responses.

    Dataclass-like objects are encoded through their ``__dict__``;
    dates become ISO strings.
    """

    def serialize(self, value: Any) -> str:
        """Serialize value to a JSON string.

        Raises:
            SerializationError: If the value cannot be serialized.
        """
        try:
            return json.dumps(value, default=self._default_encoder)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Failed to serialize value: {e}") from e

    def deserialize(self, data: str) -> Any:
        """Deserialize a JSON string.

        Raises:
            SerializationError: If the data cannot be deserialized.
        """
        try:
            return json.loads(data)
        except (json.JSONDecodeError, TypeError) as e:
            raise SerializationError(f"Failed to deserialize data: {e}") from e

    def _default_encoder(self, obj: Any) -> Any:
        if isinstance(obj, (datetime, date)):
            return obj.isoformat()
        if hasattr(obj, "__dict__"):
            return obj.__dict__
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
