"""JSON encoding and decoding of catalog snapshots and deltas.

Snapshot files look like::

    {"sessions": {"<id>": {"title": ..., "startTimestamp": "...", ...}}}

A bare ``{"<id>": {...}}`` mapping is accepted as well.
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from src.data.models import SessionRecord, Snapshot, SnapshotDelta


class SnapshotFormatError(ValueError):
    """Raised when snapshot data cannot be decoded into session records."""


def _parse_timestamp(value: str | None, session_id: str, key: str) -> datetime | None:
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (ValueError, AttributeError) as e:
        raise SnapshotFormatError(f"session {session_id!r}: bad {key} {value!r}") from e
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _format_timestamp(value: datetime | None) -> str | None:
    if value is None:
        return None
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def _string_list(value: Any, session_id: str, key: str) -> tuple[str, ...] | None:
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise SnapshotFormatError(f"session {session_id!r}: {key} must be a list of strings")
    return tuple(value)


def _typed(value: Any, kind: type, default: Any, session_id: str, key: str) -> Any:
    if value is None:
        return default
    if not isinstance(value, kind):
        raise SnapshotFormatError(f"session {session_id!r}: {key} must be {kind.__name__}")
    return value


def _filters(value: Any, session_id: str) -> dict[str, bool] | None:
    if value is None:
        return None
    if not isinstance(value, dict) or not all(isinstance(v, bool) for v in value.values()):
        raise SnapshotFormatError(f"session {session_id!r}: filters must map names to booleans")
    return dict(value)


def session_from_dict(session_id: str, data: Any) -> SessionRecord:
    """Decode one session object. The ``update`` key is ignored."""
    if not isinstance(data, dict):
        raise SnapshotFormatError(f"session {session_id!r}: expected an object")
    return SessionRecord(
        title=_typed(data.get("title"), str, "", session_id, "title"),
        start_time=_parse_timestamp(data.get("startTimestamp"), session_id, "startTimestamp"),
        end_time=_parse_timestamp(data.get("endTimestamp"), session_id, "endTimestamp"),
        tags=_string_list(data.get("tags"), session_id, "tags"),
        filters=_filters(data.get("filters"), session_id),
        speakers=_string_list(data.get("speakers"), session_id, "speakers"),
        is_live=_typed(data.get("isLivestream"), bool, False, session_id, "isLivestream"),
        video_id=_typed(data.get("youtubeUrl"), str, "", session_id, "youtubeUrl"),
    )


def snapshot_from_dict(data: Any) -> dict[str, SessionRecord]:
    """Decode a full snapshot object."""
    if not isinstance(data, dict):
        raise SnapshotFormatError("snapshot must be a JSON object")
    sessions = data.get("sessions", data)
    if not isinstance(sessions, dict):
        raise SnapshotFormatError("snapshot sessions must be a JSON object")
    return {sid: session_from_dict(sid, s) for sid, s in sessions.items()}


def load_snapshot(path: str | Path) -> dict[str, SessionRecord]:
    """Read and decode a snapshot JSON file."""
    with open(path) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise SnapshotFormatError(f"{path}: invalid JSON ({e})") from e
    return snapshot_from_dict(data)


def session_to_dict(record: SessionRecord) -> dict[str, Any]:
    """Encode a session record; ``update`` is only written when set."""
    out: dict[str, Any] = {
        "title": record.title,
        "startTimestamp": _format_timestamp(record.start_time),
        "endTimestamp": _format_timestamp(record.end_time),
        "tags": list(record.tags or []),
        "filters": dict(record.filters or {}),
        "speakers": list(record.speakers or []),
        "isLivestream": record.is_live,
        "youtubeUrl": record.video_id,
    }
    if record.update_kind:
        out["update"] = record.update_kind
    return out


def snapshot_to_dict(snapshot: Snapshot) -> dict[str, Any]:
    return {"sessions": {sid: session_to_dict(r) for sid, r in snapshot.items()}}


def delta_to_dict(delta: SnapshotDelta) -> dict[str, Any]:
    """Encode a delta for downstream consumers."""
    return {
        "sessions": {sid: session_to_dict(r) for sid, r in delta.sessions.items()},
        "removed": list(delta.removed),
    }
