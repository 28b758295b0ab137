"""Event catalog data model: session records, snapshots, and deltas."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Mapping, Optional, Sequence

UPDATE_NONE = ""
UPDATE_VIDEO = "video"


@dataclass(frozen=True)
class SessionRecord:
    """One scheduled talk or event in the catalog.

    `update_kind` is only ever set on records inside a SnapshotDelta;
    it is not part of the catalog data and is ignored by comparisons.
    """

    title: str = ""
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    tags: Optional[Sequence[str]] = None
    filters: Optional[Mapping[str, bool]] = None
    speakers: Optional[Sequence[str]] = None
    is_live: bool = False
    video_id: str = ""
    update_kind: str = UPDATE_NONE

    def with_update(self, kind: str) -> "SessionRecord":
        """Return a copy annotated with the given update kind.

        Collections are copied too, so the result shares no mutable state
        with this record.
        """
        return replace(
            self,
            tags=tuple(self.tags) if self.tags is not None else None,
            filters=dict(self.filters) if self.filters is not None else None,
            speakers=tuple(self.speakers) if self.speakers is not None else None,
            update_kind=kind,
        )

    def __repr__(self) -> str:
        return f"<SessionRecord {self.title!r} live={self.is_live} video={self.video_id!r}>"


# Full catalog state at one point in time, keyed by session id.
Snapshot = Mapping[str, SessionRecord]


@dataclass
class SnapshotDelta:
    """Sessions that changed between two snapshots, plus ids that disappeared."""

    sessions: dict[str, SessionRecord] = field(default_factory=dict)
    removed: list[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.sessions) or bool(self.removed)

    def __len__(self) -> int:
        return len(self.sessions) + len(self.removed)
