"""Field-keyed sorting of fork result sets."""

from dataclasses import dataclass
from enum import Enum
from operator import attrgetter
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from forkfinder.domain.fork import ForkRecord


class SortDirection(Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


@dataclass(frozen=True)
class SortState:
    """Active sort key and direction. A key of None means unsorted."""

    key: Optional[str] = None
    direction: SortDirection = SortDirection.ASCENDING


# Sortable fields: strings compare lexicographically, ints numerically,
# datetimes chronologically.
SORT_FIELDS: Dict[str, Callable[[ForkRecord], Any]] = {
    name: attrgetter(name)
    for name in (
        "name",
        "stars",
        "forks",
        "last_updated",
        "url",
        "description",
        "open_issues",
        "watchers",
        "created_at",
        "size",
        "language",
    )
}


def next_sort_state(current: SortState, key: str) -> SortState:
    """
    Compute the sort state produced by selecting ``key``.

    Selecting the active key while ascending flips to descending; anything
    else (a new key, or the active key while descending) sorts ascending.
    """
    if key not in SORT_FIELDS:
        raise ValueError(f"Unknown sort key: {key!r}")

    if current.key == key and current.direction is SortDirection.ASCENDING:
        return SortState(key=key, direction=SortDirection.DESCENDING)
    return SortState(key=key, direction=SortDirection.ASCENDING)


def sort_forks(forks: Sequence[ForkRecord], state: SortState) -> List[ForkRecord]:
    """
    Return a new list ordered by ``state``.

    Absent values go last in either direction. Both directions are stable.
    """
    if state.key is None:
        return list(forks)

    accessor = SORT_FIELDS[state.key]
    present: List[Tuple[Any, ForkRecord]] = []
    absent: List[ForkRecord] = []
    for fork in forks:
        value = accessor(fork)
        if value is None:
            absent.append(fork)
        else:
            present.append((value, fork))

    reverse = state.direction is SortDirection.DESCENDING
    present.sort(key=lambda item: item[0], reverse=reverse)
    return [fork for _, fork in present] + absent
