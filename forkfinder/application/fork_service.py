"""Application service for finding and enriching repository forks."""

import logging
from typing import Any, Dict, List

import requests

from forkfinder.application.barrier import join_all
from forkfinder.domain.errors import DetailFetchFailure, EmptyResult
from forkfinder.domain.fork import ForkRecord
from forkfinder.infrastructure.github_client import GitHubRestClient

logger = logging.getLogger(__name__)


class ForkService:
    """Service that lists the forks of a repository and enriches each one."""

    def __init__(self, github_client: GitHubRestClient):
        """
        Initialize fork service.

        Args:
            github_client: GitHub API client
        """
        self.github_client = github_client

    def find_forks(self, repository: str) -> List[ForkRecord]:
        """
        Run one fetch-and-enrich pipeline.

        Args:
            repository: "owner/name" identifier

        Returns:
            One ForkRecord per fork, in API order

        Raises:
            ForkFinderError: Classified list failure, EmptyResult or DetailFetchFailure
        """
        summaries = self.github_client.list_forks(repository)
        if not summaries:
            logger.warning(f"No forks returned for {repository}")
            raise EmptyResult()

        logger.info(f"Fetching details for {len(summaries)} forks of {repository}")
        forks = self.enrich(summaries)
        logger.info(f"Enriched {len(forks)} forks of {repository}")
        return forks

    def enrich(self, summaries: List[Dict[str, Any]]) -> List[ForkRecord]:
        """
        Fetch details for every fork concurrently. All or nothing: one failed
        detail request fails the whole step.
        """
        return join_all([lambda s=summary: self._enrich_one(s) for summary in summaries])

    def _enrich_one(self, summary: Dict[str, Any]) -> ForkRecord:
        try:
            details = self.github_client.get_fork_details(summary["url"])
            return ForkRecord.from_api(summary, details)
        except (requests.RequestException, ValueError, KeyError) as e:
            logger.warning(f"Detail request for {summary.get('full_name')} failed: {e}")
            raise DetailFetchFailure(str(e)) from e
