from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Mapping

from bson import ObjectId


def as_utc_datetime(value: Any) -> datetime:
    """Coerce a stored timestamp to a timezone-aware UTC datetime.

    The driver hands back naive datetimes unless the client is tz-aware, and
    documents written by other tools may carry ISO strings or epoch numbers.
    """
    try:
        if isinstance(value, datetime):
            dt = value
        elif isinstance(value, str):
            dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
        elif isinstance(value, (int, float)) and not isinstance(value, bool):
            dt = datetime.fromtimestamp(value, tz=timezone.utc)
        else:
            raise ValueError(f"Unsupported timestamp value: {value!r}")
    except (OverflowError, OSError) as e:
        raise ValueError(f"Timestamp out of range: {value!r}") from e

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def document_timestamp(doc: Mapping[str, Any], field: str) -> datetime:
    """Read ``field`` from a stored document as a UTC datetime.

    Documents without the field fall back to the creation time embedded in
    their ObjectId. Raises ValueError when neither is usable.
    """
    value = doc.get(field)
    if value is None:
        oid = doc.get("_id")
        if isinstance(oid, ObjectId):
            return oid.generation_time
        raise ValueError(f"Document has no {field}")
    return as_utc_datetime(value)
