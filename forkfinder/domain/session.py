"""Session state of the fork finder and its transitions.

Every transition is a pure function returning a new ``SessionState``.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, Tuple

from forkfinder.domain.fork import ForkRecord
from forkfinder.domain.sorting import SortState, next_sort_state, sort_forks


class FetchStatus(Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class SessionState:
    repository: str = ""
    results: Tuple[ForkRecord, ...] = ()
    is_loading: bool = False
    error_message: str = ""
    sort: SortState = field(default_factory=SortState)
    status: FetchStatus = FetchStatus.IDLE


def start_fetch(state: SessionState, repository: str) -> SessionState:
    """Enter loading. Clears the error; the previous results stay visible."""
    return replace(
        state,
        repository=repository,
        is_loading=True,
        error_message="",
        status=FetchStatus.LOADING,
    )


def apply_success(state: SessionState, results: Iterable[ForkRecord]) -> SessionState:
    """Replace the result set wholesale. The sort state is left as is."""
    return replace(state, results=tuple(results), status=FetchStatus.SUCCESS)


def apply_error(state: SessionState, message: str) -> SessionState:
    """Record a failed cycle, leaving results untouched."""
    return replace(state, error_message=message, status=FetchStatus.ERROR)


def finish_fetch(state: SessionState) -> SessionState:
    return replace(state, is_loading=False)


def apply_sort(state: SessionState, key: str) -> SessionState:
    """Toggle or set the sort key and reorder the current results."""
    sort = next_sort_state(state.sort, key)
    return replace(state, sort=sort, results=tuple(sort_forks(state.results, sort)))
