"""Order-preserving set operations over string sequences."""

from typing import Iterable


def subtract(source: Iterable[str], *exclude: str) -> list[str]:
    """Return items of `source` that are not in `exclude`, in original order.

    Always returns a new list, even when nothing is excluded.
    """
    skip = set(exclude)
    return [item for item in source if item not in skip]


def deduplicate(source: Iterable[str]) -> list[str]:
    """Drop repeated values, keeping the first occurrence of each."""
    seen: set[str] = set()
    result: list[str] = []
    for item in source:
        if item in seen:
            continue
        seen.add(item)
        result.append(item)
    return result
