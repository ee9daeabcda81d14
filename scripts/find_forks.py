#!/usr/bin/env python3
"""Script to find the forks of a GitHub repository and print them as a table."""

import argparse
import logging
import os
import sys
from typing import List, Optional, Sequence

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from forkfinder.application.controller import ForkFinderController
from forkfinder.application.fork_service import ForkService
from forkfinder.domain.fork import ForkRecord
from forkfinder.domain.sorting import SORT_FIELDS
from forkfinder.infrastructure.github_client import GitHubRestClient

logging.basicConfig(
    level=os.getenv("FORKFINDER_LOG_LEVEL", "INFO").upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)

COLUMNS = [
    ("Fork Name", "name"),
    ("Stars", "stars"),
    ("Forks", "forks"),
    ("Open Issues", "open_issues"),
    ("Watchers", "watchers"),
    ("Size (KB)", "size"),
    ("Language", "language"),
    ("Created", "created_at"),
    ("Last Updated", "last_updated"),
    ("Description", "description"),
]


def format_cell(value) -> str:
    if value is None:
        return ""
    if hasattr(value, "astimezone"):
        return value.astimezone().strftime("%Y-%m-%d")
    return str(value)


def render_table(forks: Sequence[ForkRecord]) -> str:
    """Render forks as a plain-text table, one row per fork."""
    rows: List[List[str]] = [[title for title, _ in COLUMNS]]
    for fork in forks:
        rows.append([format_cell(getattr(fork, field)) for _, field in COLUMNS])

    widths = [max(len(row[i]) for row in rows) for i in range(len(COLUMNS))]
    lines = ["  ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip() for row in rows]
    lines.insert(1, "  ".join("-" * width for width in widths))
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Fetch forks, apply the requested sorts and print the result."""
    parser = argparse.ArgumentParser(description="Analyze and explore GitHub repository forks")
    parser.add_argument("repository", help="Repository as owner/name")
    parser.add_argument(
        "--sort",
        action="append",
        default=[],
        choices=sorted(SORT_FIELDS),
        help="Sort by field; repeat the same field to toggle descending",
    )
    args = parser.parse_args(argv)

    with GitHubRestClient() as github_client:
        controller = ForkFinderController(ForkService(github_client))
        state = controller.fetch(args.repository)

        if state.error_message:
            print(state.error_message, file=sys.stderr)
            return 1

        for key in args.sort:
            state = controller.sort(key)

    print(render_table(state.results))
    return 0


if __name__ == "__main__":
    sys.exit(main())
