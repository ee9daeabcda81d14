"""Domain entities for repository forks."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse a GitHub ISO-8601 timestamp, returning None when absent."""
    if not value:
        return None
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


@dataclass(frozen=True)
class ForkRecord:
    """Immutable fork entity, one row of a result set."""

    name: str
    url: str
    stars: Optional[int] = None
    forks: Optional[int] = None
    last_updated: Optional[datetime] = None
    description: Optional[str] = None
    open_issues: Optional[int] = None
    watchers: Optional[int] = None
    created_at: Optional[datetime] = None
    size: Optional[int] = None
    language: Optional[str] = None

    @classmethod
    def from_api(cls, summary: Dict[str, Any], details: Dict[str, Any]) -> "ForkRecord":
        """
        Build a record from a forks-list entry and its detail payload.

        Args:
            summary: Entry of the forks list (provides full_name and html_url)
            details: Per-fork detail response

        Returns:
            ForkRecord with every documented field populated or None
        """
        return cls(
            name=summary["full_name"],
            url=summary["html_url"],
            stars=details.get("stargazers_count"),
            forks=details.get("forks_count"),
            last_updated=parse_timestamp(details.get("updated_at")),
            description=details.get("description"),
            open_issues=details.get("open_issues_count"),
            watchers=details.get("watchers_count"),
            created_at=parse_timestamp(details.get("created_at")),
            size=details.get("size"),
            language=details.get("language"),
        )
