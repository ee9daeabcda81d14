"""Mapping of failed forks-list responses to user-facing errors."""

import logging
from datetime import datetime
from typing import Callable

import requests

from forkfinder.domain.errors import (
    ForkFinderError,
    GenericHttpError,
    Moved,
    NotFound,
    RateLimited,
    Unauthenticated,
)

logger = logging.getLogger(__name__)


def classify_failure(
    response: requests.Response,
    rate_limit_reset: Callable[[], datetime],
) -> ForkFinderError:
    """
    Turn a non-2xx forks-list response into a domain error.

    Args:
        response: The failed response
        rate_limit_reset: Looks up when the quota resets. Only called on 403;
            any exception it raises propagates instead of RateLimited.

    Returns:
        The error to raise for this fetch cycle
    """
    status = response.status_code
    logger.warning(f"Forks request failed with {status} {response.reason}")

    if status == 404:
        return NotFound()
    elif status == 403:
        return RateLimited(rate_limit_reset())
    elif status == 301:
        return Moved()
    elif status == 401:
        return Unauthenticated()
    else:
        return GenericHttpError(status, response.reason)
