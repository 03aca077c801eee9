from __future__ import annotations
from typing import Iterable, List, Sequence, TypeVar

from app.schemas.country import PopulationRecord

R = TypeVar("R", bound=PopulationRecord)


def in_window(year: int, start: int = 0, end: int = 0) -> bool:
    # 0 leaves that side of the window open
    return (start == 0 or year >= start) and (end == 0 or year <= end)


def filter_window(records: Iterable[R], start: int = 0, end: int = 0) -> List[R]:
    """Keep records whose year lies in [start, end], in their original order."""
    return [r for r in records if in_window(r.year, start, end)]


def integer_mean(values: Sequence[int]) -> int:
    """Floor of sum/count; 0 for an empty sequence."""
    if not values:
        return 0
    return sum(values) // len(values)
