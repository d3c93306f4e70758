"""Scanner for repositories checked out under the root."""

from pathlib import Path

import structlog

from ghr.git.path_resolver import PartialPath

logger = structlog.get_logger(__name__)

# <root>/<host>/<owner>/<repo>
REPOSITORY_DEPTH = 3


class RepositoryScanner:
    """Scans the root directory for managed repositories."""

    def __init__(self, root: Path) -> None:
        self._root = root

    def scan(self) -> list[PartialPath]:
        """Return every directory exactly three levels below the root.

        Results are sorted by host, owner and repo.
        """
        if not self._root.is_dir():
            logger.debug("Root directory does not exist", root=str(self._root))
            return []

        found = []
        for path in self._root.glob("/".join(["*"] * REPOSITORY_DEPTH)):
            if not path.is_dir():
                continue
            host, owner, repo = path.relative_to(self._root).parts
            found.append(PartialPath(host=host, owner=owner, repo=repo))

        return sorted(found, key=lambda p: (p.host, p.owner, p.repo))

    def exists(self, path: PartialPath) -> bool:
        """Check whether a (partial) path is an existing directory."""
        return path.to_path(self._root).is_dir()
