"""Field-level comparison of two versions of the same session record.

Collection fields (tags, speakers) compare as sets, with a missing list
treated the same as an empty one. Filters compare strictly: a flag that is
missing on one side and False on the other still counts as a change.
"""

from typing import Any, Mapping, Optional, Sequence

from src.data.models import SessionRecord
from src.delta.sets import deduplicate

# update_kind is an annotation, never compared
COMPARED_FIELDS = (
    "title",
    "start_time",
    "end_time",
    "tags",
    "filters",
    "speakers",
    "is_live",
    "video_id",
)
SET_FIELDS = frozenset({"tags", "speakers"})


def _as_set(values: Optional[Sequence[str]]) -> set[str]:
    return set(deduplicate(values or ()))


def _filters_equal(a: Optional[Mapping[str, bool]], b: Optional[Mapping[str, bool]]) -> bool:
    a, b = a or {}, b or {}
    if a.keys() != b.keys():
        return False
    return all(bool(a[k]) == bool(b[k]) for k in a)


def _field_equal(name: str, a: Any, b: Any) -> bool:
    if name in SET_FIELDS:
        return _as_set(a) == _as_set(b)
    if name == "filters":
        return _filters_equal(a, b)
    return a == b


def changed_fields(previous: SessionRecord, current: SessionRecord) -> list[str]:
    """Names of the fields that differ between the two records, in field order."""
    return [
        name
        for name in COMPARED_FIELDS
        if not _field_equal(name, getattr(previous, name), getattr(current, name))
    ]


def records_equal(previous: SessionRecord, current: SessionRecord) -> bool:
    """True if the two records are the same for notification purposes."""
    return not changed_fields(previous, current)
