"""JSON output for parsed Link headers."""

import json
from enum import Enum
from typing import Any

from pydantic import BaseModel


def serialize_for_json(obj: Any) -> Any:
    """Convert objects to JSON-serializable format."""
    if isinstance(obj, Enum):
        return obj.value
    elif isinstance(obj, BaseModel):
        return obj.model_dump()
    elif isinstance(obj, dict):
        return {str(k): serialize_for_json(v) for k, v in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [serialize_for_json(item) for item in obj]
    return obj


def links_to_json(links: Any, indent: int = 2) -> str:
    """Serialize parsed link entries to JSON.

    Each ``(relation, record)`` entry becomes a ``[relation, record]`` pair.
    A header map (``link`` plus ``parsed_link``) is serialized as an object.
    """
    return json.dumps(serialize_for_json(links), indent=indent, ensure_ascii=False)
