"""Shared test fixtures for eventdelta tests."""

import json
from datetime import datetime, timedelta, timezone

import pytest

from src.data.codec import snapshot_to_dict
from src.data.models import SessionRecord


@pytest.fixture
def now() -> datetime:
    return datetime(2015, 5, 29, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def past(now) -> datetime:
    return now - timedelta(hours=1)


@pytest.fixture
def future(now) -> datetime:
    return now + timedelta(hours=1)


@pytest.fixture
def keynote() -> SessionRecord:
    return SessionRecord(
        title="Keynote",
        start_time=datetime(2015, 5, 28, 9, 30, tzinfo=timezone.utc),
        end_time=datetime(2015, 5, 28, 11, 30, tzinfo=timezone.utc),
        tags=("FLAG_KEYNOTE",),
        filters={"Live streamed": True},
    )


@pytest.fixture
def catalog(keynote, past, future) -> dict[str, SessionRecord]:
    """A small catalog.

    - __keynote__: concluded, recording already available
    - android: concluded, no recording yet
    - web: still running and live streamed
    """
    return {
        "__keynote__": SessionRecord(
            title=keynote.title,
            start_time=keynote.start_time,
            end_time=keynote.end_time,
            tags=keynote.tags,
            filters=dict(keynote.filters),
            video_id="yt-keynote",
        ),
        "android": SessionRecord(
            title="What's new in Android",
            start_time=past - timedelta(hours=1),
            end_time=past,
            tags=("TOPIC_ANDROID", "TYPE_SESSION"),
            speakers=("spk-1", "spk-2"),
            filters={"Live streamed": False},
        ),
        "web": SessionRecord(
            title="Progressive web apps",
            start_time=past,
            end_time=future,
            tags=("TOPIC_WEB",),
            speakers=("spk-3",),
            is_live=True,
            video_id="yt-live-web",
        ),
    }


@pytest.fixture
def write_snapshot(tmp_path):
    """Write a snapshot to a JSON file under tmp_path and return its path."""

    def _write(name: str, snapshot) -> str:
        path = tmp_path / name
        path.write_text(json.dumps(snapshot_to_dict(snapshot)))
        return str(path)

    return _write
