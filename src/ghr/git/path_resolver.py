"""Local paths of managed repositories."""

from pathlib import Path

from pydantic import BaseModel

from ghr.core.models.identity import Identity


def resolve_path(root: Path, identity: Identity) -> Path:
    """Return ``<root>/<host>/<owner>/<repo>`` for an identity."""
    return root / str(identity.host) / identity.owner / identity.repo


class PartialPath(BaseModel):
    """A path below the root where trailing parts may be absent.

    Used to look up a host or owner directory as well as a repository.
    """

    host: str | None = None
    owner: str | None = None
    repo: str | None = None

    def to_path(self, root: Path) -> Path:
        """Join the present parts onto ``root``, stopping at the first absent one."""
        path = root
        for part in (self.host, self.owner, self.repo):
            if part is None:
                break
            path = path / part
        return path

    def display(self, host: bool = True, owner: bool = True) -> str:
        """Render as ``host/owner/repo``, optionally leaving out host or owner."""
        parts = []
        if host:
            parts.append(self.host)
        if owner:
            parts.append(self.owner)
        parts.append(self.repo)
        return "/".join(part for part in parts if part)
