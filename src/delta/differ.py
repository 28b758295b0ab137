"""Snapshot diff: decide which sessions changed between two catalog states.

The delta holds a copy of every current session that is new or changed,
annotated with its update kind, plus the ids of sessions that disappeared.
Neither input snapshot is modified.
"""

from datetime import datetime, timezone

from src.data.models import UPDATE_NONE, SessionRecord, Snapshot, SnapshotDelta
from src.delta.compare import records_equal
from src.delta.video import compute_update_kind

# Stand-in for a session that did not exist in the previous snapshot
_ABSENT = SessionRecord()


def _resolve_now(now: datetime | None) -> datetime:
    if now is None:
        return datetime.now(timezone.utc)
    if now.tzinfo is None or now.utcoffset() is None:
        raise ValueError(f"now must be timezone-aware, got {now!r}")
    return now


def diff_snapshots(
    previous: Snapshot, current: Snapshot, now: datetime | None = None
) -> SnapshotDelta:
    """Compute the delta from `previous` to `current` as of `now` (default: UTC now)."""
    now = _resolve_now(now)
    delta = SnapshotDelta()

    for session_id, record in current.items():
        before = previous.get(session_id)
        kind = compute_update_kind(before or _ABSENT, record, now)
        if before is not None and kind == UPDATE_NONE and records_equal(before, record):
            continue
        delta.sessions[session_id] = record.with_update(kind)

    delta.removed = sorted(sid for sid in previous if sid not in current)
    return delta
