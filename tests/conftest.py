"""Pytest configuration and fixtures."""

import subprocess
from pathlib import Path

import pytest
import structlog

from ghr.config.settings import get_settings
from ghr.core.models.pattern import PatternSet, default_patterns
from ghr.git.url_resolver import URLResolver


@pytest.fixture(autouse=True)
def reset_global_state():
    """Drop cached settings and logging configuration between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def patterns() -> PatternSet:
    return default_patterns()


@pytest.fixture
def resolver(patterns: PatternSet) -> URLResolver:
    return URLResolver(patterns)


@pytest.fixture
def root(tmp_path: Path) -> Path:
    """An empty root directory for managed repositories."""
    path = tmp_path / "root"
    path.mkdir()
    return path


def run_git(*args: str, cwd: Path) -> None:
    subprocess.run(["git", *args], cwd=cwd, capture_output=True, check=True)


@pytest.fixture
def upstream(tmp_path: Path) -> Path:
    """A directory holding one committed repository at alice/project."""
    base = tmp_path / "upstream"
    repo_path = base / "alice" / "project"
    repo_path.mkdir(parents=True)

    run_git("init", cwd=repo_path)
    run_git("config", "user.email", "test@test.com", cwd=repo_path)
    run_git("config", "user.name", "Test", cwd=repo_path)
    (repo_path / "README.md").write_text("# Project\n")
    run_git("add", ".", cwd=repo_path)
    run_git("commit", "-m", "Initial commit", cwd=repo_path)

    return base
