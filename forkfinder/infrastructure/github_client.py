"""GitHub REST API client for repository forks."""

import logging
import os
from datetime import datetime
from typing import Any, Dict, List, Optional

import requests
from requests.adapters import HTTPAdapter

from forkfinder.infrastructure.error_classifier import classify_failure

logger = logging.getLogger(__name__)


class GitHubRestClient:
    """Client for the GitHub REST endpoints used to list and inspect forks."""

    DEFAULT_API_URL = "https://api.github.com"
    PER_PAGE = 100  # single page only; the forks endpoint caps per_page at 100
    FORK_SORT = "stargazers"

    def __init__(self, api_url: Optional[str] = None, timeout: Optional[float] = None):
        """
        Initialize GitHub REST client.

        Args:
            api_url: API base URL. If None, uses GITHUB_API_URL env var or the public API.
            timeout: Per-request timeout in seconds. If None, uses FORKFINDER_TIMEOUT
                env var; unset means requests never time out.
        """
        if api_url is None:
            api_url = os.getenv("GITHUB_API_URL", self.DEFAULT_API_URL)
        if timeout is None and os.getenv("FORKFINDER_TIMEOUT"):
            timeout = float(os.environ["FORKFINDER_TIMEOUT"])

        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()

        # Detail requests fan out up to one per fork
        adapter = HTTPAdapter(pool_maxsize=self.PER_PAGE)
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def _get(self, url: str, **kwargs) -> requests.Response:
        logger.debug(f"GET {url} {kwargs.get('params') or ''}")
        return self.session.get(url, timeout=self.timeout, **kwargs)

    def list_forks(self, repository: str) -> List[Dict[str, Any]]:
        """
        Fetch the first page of forks, most starred first.

        Args:
            repository: "owner/name" identifier, used verbatim in the path

        Returns:
            Raw fork summaries (each with at least url, full_name and html_url)

        Raises:
            ForkFinderError: Classified error for any non-2xx response
            requests.RequestException: If the request itself fails
        """
        url = f"{self.api_url}/repos/{repository}/forks"
        logger.info(f"Fetching forks of {repository}")
        # Redirects are not followed so a renamed repository surfaces as 301
        response = self._get(
            url,
            params={"sort": self.FORK_SORT, "per_page": self.PER_PAGE},
            allow_redirects=False,
        )

        if not 200 <= response.status_code < 300:
            raise classify_failure(response, self.get_rate_limit_reset)

        return response.json()

    def get_fork_details(self, url: str) -> Dict[str, Any]:
        """
        Fetch the full repository object behind a fork's API url.

        Raises:
            requests.HTTPError: On a non-2xx response
            requests.RequestException: If the request itself fails
        """
        response = self._get(url)
        response.raise_for_status()
        return response.json()

    def get_rate_limit_reset(self) -> datetime:
        """
        Look up when the core rate limit resets.

        Returns:
            Reset time as an aware datetime in the local timezone
        """
        response = self._get(f"{self.api_url}/rate_limit")
        response.raise_for_status()
        reset_epoch = response.json()["rate"]["reset"]
        return datetime.fromtimestamp(reset_epoch).astimezone()
