"""Tests for the repository scanner."""

from pathlib import Path

import pytest

from ghr.git.path_resolver import PartialPath
from ghr.git.scanner import RepositoryScanner


@pytest.fixture
def populated_root(root: Path) -> Path:
    """A root with a few checkouts and some noise."""
    (root / "github.com" / "alice" / "proj").mkdir(parents=True)
    (root / "github.com" / "alice" / "other").mkdir(parents=True)
    (root / "gitlab.com" / "bob" / "tool").mkdir(parents=True)
    # Owner directory without repositories
    (root / "github.com" / "carol").mkdir(parents=True)
    # Files are not repositories
    (root / "github.com" / "alice" / "notes.txt").write_text("notes\n")
    (root / "config.toml").write_text("")
    return root


@pytest.mark.unit
class TestRepositoryScanner:
    """Tests for RepositoryScanner."""

    def test_scan(self, populated_root: Path) -> None:
        scanner = RepositoryScanner(populated_root)
        assert scanner.scan() == [
            PartialPath(host="github.com", owner="alice", repo="other"),
            PartialPath(host="github.com", owner="alice", repo="proj"),
            PartialPath(host="gitlab.com", owner="bob", repo="tool"),
        ]

    def test_scan_ignores_deeper_directories(self, populated_root: Path) -> None:
        (populated_root / "github.com" / "alice" / "proj" / "src").mkdir()
        repos = [p.repo for p in RepositoryScanner(populated_root).scan()]
        assert "src" not in repos

    def test_scan_missing_root(self, tmp_path: Path) -> None:
        assert RepositoryScanner(tmp_path / "missing").scan() == []

    def test_exists(self, populated_root: Path) -> None:
        scanner = RepositoryScanner(populated_root)
        assert scanner.exists(PartialPath(host="github.com", owner="carol")) is True
        assert scanner.exists(PartialPath(host="github.com", owner="dave")) is False
        assert scanner.exists(PartialPath(host="github.com", owner="alice", repo="notes.txt")) is False
