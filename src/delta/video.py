"""Detect when a finished session's recording has just become watchable."""

from datetime import datetime

from src.data.models import UPDATE_NONE, UPDATE_VIDEO, SessionRecord


def is_concluded(record: SessionRecord, now: datetime) -> bool:
    """A session has concluded once its end time is not after `now`.

    A record without an end time is treated as ended long ago.
    """
    return record.end_time is None or record.end_time <= now


def compute_update_kind(previous: SessionRecord, current: SessionRecord, now: datetime) -> str:
    """Return UPDATE_VIDEO if a recording just became available, else UPDATE_NONE.

    Only concluded sessions qualify. The current state must be non-live with
    a video id, and the (is_live, video_id) pair must have moved since the
    previous record. Going live or losing a video never qualifies.
    """
    if not is_concluded(current, now):
        return UPDATE_NONE
    if current.is_live or not current.video_id:
        return UPDATE_NONE
    if (previous.is_live, previous.video_id) == (current.is_live, current.video_id):
        return UPDATE_NONE
    return UPDATE_VIDEO
