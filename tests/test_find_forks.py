"""Tests for the find_forks command-line script."""

import importlib.util
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from forkfinder.domain.errors import NotFound
from forkfinder.domain.fork import ForkRecord

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "find_forks.py"


@pytest.fixture(scope="module")
def find_forks():
    spec = importlib.util.spec_from_file_location("find_forks", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def make_fork(name: str, stars: int, **fields) -> ForkRecord:
    return ForkRecord(name=name, url=f"https://github.com/{name}", stars=stars, **fields)


class TestRenderTable:
    """Tests for table rendering."""

    def test_header_and_rows(self, find_forks) -> None:
        """Test one header, one rule and one line per fork."""
        forks = [
            make_fork("a/r", 5, language="Python", last_updated=datetime(2024, 3, 1, 12, tzinfo=timezone.utc)),
            make_fork("b/r", 1),
        ]

        lines = find_forks.render_table(forks).splitlines()

        assert len(lines) == 4
        assert lines[0].startswith("Fork Name")
        assert set(lines[1]) <= {"-", " "}
        assert lines[2].startswith("a/r")
        assert "Python" in lines[2]
        assert lines[3].startswith("b/r")

    def test_absent_values_render_empty(self, find_forks) -> None:
        """Test None renders as an empty cell."""
        assert find_forks.format_cell(None) == ""
        assert find_forks.format_cell(42) == "42"


class TestMain:
    """Tests for the script entry point."""

    def test_prints_sorted_table(self, find_forks, capsys) -> None:
        """Test sorts are applied in order before printing."""
        service = MagicMock()
        service.find_forks.return_value = [make_fork("a/r", 5), make_fork("b/r", 1), make_fork("c/r", 9)]

        with patch.object(find_forks, "GitHubRestClient", MagicMock()), \
                patch.object(find_forks, "ForkService", return_value=service):
            code = find_forks.main(["octocat/Hello-World", "--sort", "stars", "--sort", "stars"])

        rows = capsys.readouterr().out.splitlines()[2:]
        assert code == 0
        assert [row.split()[0] for row in rows] == ["c/r", "a/r", "b/r"]

    def test_error_exit_status(self, find_forks, capsys) -> None:
        """Test a failed fetch prints the message and exits non-zero."""
        service = MagicMock()
        service.find_forks.side_effect = NotFound()

        with patch.object(find_forks, "GitHubRestClient", MagicMock()), \
                patch.object(find_forks, "ForkService", return_value=service):
            code = find_forks.main(["octocat/missing"])

        assert code == 1
        assert str(NotFound()) in capsys.readouterr().err
