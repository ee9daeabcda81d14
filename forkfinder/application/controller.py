"""Controller driving fetch cycles and sorting over the session state."""

import logging

from forkfinder.application.fork_service import ForkService
from forkfinder.domain.session import (
    SessionState,
    apply_error,
    apply_sort,
    apply_success,
    finish_fetch,
    start_fetch,
)

logger = logging.getLogger(__name__)


class ForkFinderController:
    """Owns the session state and applies transitions to it.

    ``is_loading`` only reflects the cycle in progress; nothing stops a
    caller from starting another fetch while one is running.
    """

    def __init__(self, fork_service: ForkService):
        self.fork_service = fork_service
        self.state = SessionState()

    def fetch(self, repository: str) -> SessionState:
        """Run one fetch cycle and return the resulting state."""
        self.state = start_fetch(self.state, repository)
        try:
            forks = self.fork_service.find_forks(repository)
            self.state = apply_success(self.state, forks)
        except Exception as e:
            logger.error(f"Fetch for {repository!r} failed: {e}")
            self.state = apply_error(self.state, str(e))
        finally:
            self.state = finish_fetch(self.state)
        return self.state

    def sort(self, key: str) -> SessionState:
        """Sort the current results by ``key``, toggling direction on repeat."""
        self.state = apply_sort(self.state, key)
        return self.state
