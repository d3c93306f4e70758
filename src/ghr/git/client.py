"""Git command-line client using subprocess."""

import subprocess
from pathlib import Path

import structlog

from ghr.core.exceptions import GitCommandError

logger = structlog.get_logger(__name__)


class GitClient:
    """Runs git commands.

    Uses subprocess + git CLI directly (no gitpython dependency).
    """

    def __init__(self, executable: str = "git") -> None:
        self._executable = executable

    def _run_git(self, *args: str, cwd: Path | None = None) -> str:
        """Run a git command and return stdout."""
        try:
            result = subprocess.run(
                [self._executable, *args],
                cwd=cwd,
                capture_output=True,
                text=True,
                check=True,
            )
        except subprocess.CalledProcessError as e:
            raise GitCommandError(
                f"git {args[0]} failed: {e.stderr.strip()}",
                details={"args": list(args), "returncode": e.returncode},
            ) from e
        except FileNotFoundError as e:
            raise GitCommandError(
                f"git executable not found: {self._executable}",
                details={"args": list(args)},
            ) from e
        return result.stdout.strip()

    def clone(self, url: str, path: Path, recursive: bool = False) -> None:
        """Clone ``url`` into ``path``, creating parent directories."""
        path.parent.mkdir(parents=True, exist_ok=True)
        args = ["clone"]
        if recursive:
            args.append("--recurse-submodules")
        args.extend([url, str(path)])

        logger.info("Cloning repository", url=url, path=str(path))
        self._run_git(*args)

    def init(self, path: Path) -> None:
        """Create an empty repository at ``path``."""
        path.mkdir(parents=True, exist_ok=True)
        self._run_git("init", cwd=path)

    def add_remote(self, path: Path, name: str, url: str) -> None:
        self._run_git("remote", "add", name, url, cwd=path)

    def get_remote_url(self, path: Path, name: str = "origin") -> str | None:
        """Get a remote URL, if available."""
        try:
            url = self._run_git("remote", "get-url", name, cwd=path)
        except GitCommandError:
            return None
        return url or None

    def set_config(self, path: Path, key: str, value: str) -> None:
        """Set a value in the local config of the repository at ``path``."""
        self._run_git("config", "--local", key, value, cwd=path)

    def get_config(self, path: Path, key: str) -> str | None:
        try:
            return self._run_git("config", "--local", "--get", key, cwd=path)
        except GitCommandError:
            return None

    def list_remotes(self, path: Path) -> list[str]:
        """Names of the remotes configured in the repository at ``path``."""
        return self._run_git("remote", cwd=path).splitlines()

    def get_push_url(self, path: Path, name: str = "origin") -> str | None:
        return self.get_config(path, f"remote.{name}.pushurl")

    def get_commit(self, path: Path, rev: str = "HEAD") -> str:
        """Resolve ``rev`` to a commit hash."""
        return self._run_git("rev-parse", "--verify", "--quiet", f"{rev}^{{commit}}", cwd=path)

    def get_head_ref(self, path: Path) -> str:
        """Full name of the reference HEAD points at, or ``HEAD`` when detached.

        Raises ``GitCommandError`` when HEAD has no commit yet.
        """
        self.get_commit(path)
        try:
            return self._run_git("symbolic-ref", "--quiet", "HEAD", cwd=path)
        except GitCommandError:
            return "HEAD"
