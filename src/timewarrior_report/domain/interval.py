from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import FrozenSet, Iterable, List, Optional


@dataclass(frozen=True)
class Interval:
    """One recorded span of tracked time; ``end`` is None while it is still open."""

    start: datetime
    end: Optional[datetime] = None
    id: Optional[int] = None
    tags: FrozenSet[str] = field(default_factory=frozenset)
    annotation: Optional[str] = None

    def __post_init__(self) -> None:
        if self.start.tzinfo is None:
            raise ValueError("start must be timezone-aware")
        if self.end is not None:
            if self.end.tzinfo is None:
                raise ValueError("end must be timezone-aware")
            if self.end < self.start:
                raise ValueError("end must not precede start")
        if not isinstance(self.tags, frozenset):
            object.__setattr__(self, "tags", frozenset(self.tags))

    @property
    def is_open(self) -> bool:
        return self.end is None

    @property
    def duration(self) -> Optional[timedelta]:
        if self.end is None:
            return None
        return self.end - self.start

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags

    def sort_key(self) -> tuple:
        # Intervals without an id sort last, then by start.
        return (self.id is None, self.id or 0, self.start)


def sorted_by_id(intervals: Iterable[Interval]) -> List[Interval]:
    return sorted(intervals, key=Interval.sort_key)
