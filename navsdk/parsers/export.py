"""
Record serialization.

Only tagged fields are exported, padding placeholders are dropped.
Datetimes are written as ISO-8601 by orjson, bytes as UTF-8 text.
"""

from typing import Any, Dict

import orjson

from .schema import schemaFor


def recordToDict(record: Any) -> Dict[str, Any]:
    """Return {fieldName: value} for the tagged fields of record, in token order."""
    return {spec.name: getattr(record, spec.name) for spec in schemaFor(type(record)).taggedFields}


def _default(obj: Any) -> Any:
    if isinstance(obj, bytes):
        return obj.decode('utf-8', errors='replace')
    raise TypeError(f"Type is not JSON serializable: {type(obj).__name__}")


def recordToJson(record: Any) -> bytes:
    """Serialize the tagged fields of record as JSON bytes."""
    return orjson.dumps(recordToDict(record), default=_default)
