"""Serialization of events to the transport-neutral JSON text encoding."""

import json

from ..domain.exceptions import SerializationError
from ..domain.models import Event


def serialize_event(event: Event) -> bytes:
    """Encode an event as UTF-8 JSON using its camelCase wire names."""
    try:
        return event.model_dump_json(by_alias=True).encode()
    except Exception as e:
        raise SerializationError(f"Failed to serialize event '{event.id}': {e}") from e


def deserialize_event(data: bytes | str) -> Event:
    """Decode an event produced by ``serialize_event``."""
    try:
        json_str = data.decode() if isinstance(data, bytes) else data
        if not json_str or json_str.isspace():
            raise SerializationError("Empty or whitespace-only JSON data")
        return Event.model_validate(json.loads(json_str))
    except SerializationError:
        raise
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON format: {e}") from e
    except Exception as e:
        raise SerializationError(f"Failed to deserialize event: {e}") from e
