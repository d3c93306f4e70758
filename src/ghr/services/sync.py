"""Snapshot of the repositories managed under the root."""

from pathlib import Path

import structlog
import tomli_w
from pydantic import BaseModel

from ghr.core.exceptions import GitCommandError
from ghr.git.client import GitClient
from ghr.git.path_resolver import PartialPath
from ghr.git.scanner import RepositoryScanner

logger = structlog.get_logger(__name__)


class Remote(BaseModel):
    name: str
    url: str
    push_url: str | None = None


class RepositoryRecord(BaseModel):
    """Where a checkout lives, which ref it is on and where it came from."""

    host: str
    owner: str
    repo: str
    ref: str
    remotes: list[Remote] = []


class SyncService:
    """Collects a ``RepositoryRecord`` for every checkout under the root."""

    def __init__(self, root: Path, client: GitClient | None = None) -> None:
        self._root = root
        self._client = client or GitClient()
        self._scanner = RepositoryScanner(root)

    def dump(self) -> list[RepositoryRecord]:
        """Record each repository; checkouts that cannot be recorded are skipped."""
        records = []
        for found in self._scanner.scan():
            path = found.to_path(self._root)
            try:
                records.append(self._record(found, path))
            except GitCommandError as e:
                logger.warning("Skipped repository", path=str(path), error=e.message)
        return records

    def dump_toml(self) -> str:
        repositories = [record.model_dump(exclude_none=True) for record in self.dump()]
        return tomli_w.dumps({"repositories": repositories})

    def _record(self, found: PartialPath, path: Path) -> RepositoryRecord:
        if not (path / ".git").exists():
            raise GitCommandError(f"Not a Git repository: {path}", details={"path": str(path)})

        ref = self._client.get_head_ref(path)
        self._warn_if_unsynced(path, ref)

        remotes = []
        for name in self._client.list_remotes(path):
            remotes.append(
                Remote(
                    name=name,
                    url=self._client.get_remote_url(path, name) or "",
                    push_url=self._client.get_push_url(path, name),
                )
            )

        return RepositoryRecord(
            host=found.host,
            owner=found.owner,
            repo=found.repo,
            ref=ref,
            remotes=remotes,
        )

    def _warn_if_unsynced(self, path: Path, ref: str) -> None:
        if not ref.startswith("refs/heads/"):
            logger.warning("Repository is not on a branch", path=str(path), ref=ref)
            return

        try:
            upstream = self._client.get_commit(path, "@{upstream}")
        except GitCommandError:
            logger.warning("Branch has never been pushed to a remote", path=str(path), ref=ref)
            return

        if upstream != self._client.get_commit(path):
            logger.warning("Branch is not synced with its upstream", path=str(path), ref=ref)
