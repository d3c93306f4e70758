"""Cloning service."""

import shutil
from pathlib import Path

import structlog
from pydantic import BaseModel, ConfigDict

from ghr.config.loader import Config
from ghr.core.exceptions import (
    RepositoryExistsError,
    RepositoryNotFoundError,
    ResolutionError,
)
from ghr.core.models.identity import Identity
from ghr.core.models.profile import Profile
from ghr.git.client import GitClient
from ghr.git.path_resolver import resolve_path
from ghr.git.url_resolver import URLResolver

logger = structlog.get_logger(__name__)


class Resolution(BaseModel):
    """Everything derived from a single repository reference."""

    model_config = ConfigDict(frozen=True)

    identity: Identity
    url: str
    path: Path
    profile_name: str | None = None
    profile: Profile | None = None


class CloneService:
    """Service for resolving, cloning, adopting and deleting repositories."""

    def __init__(self, root: Path, config: Config, client: GitClient | None = None) -> None:
        self._root = root
        self._config = config
        self._client = client or GitClient()
        self._resolver = URLResolver(config.pattern_set(), config.defaults.owner)

    def resolve(self, reference: str) -> Resolution:
        """Resolve a reference to its URL, local path and profile."""
        identity = self._resolver.resolve(reference)

        profile_name = None
        profile = None
        rule = self._config.rules.resolve(identity)
        if rule is not None:
            resolved = self._config.profiles.resolve(rule.profile)
            if resolved is None:
                logger.warning("Rule refers to an unknown profile", profile=rule.profile.name)
            else:
                profile_name, profile = resolved

        return Resolution(
            identity=identity,
            url=identity.render(),
            path=resolve_path(self._root, identity),
            profile_name=profile_name,
            profile=profile,
        )

    def clone(self, reference: str, recursive: bool = False) -> Resolution:
        """Clone a repository and apply the profile selected by the rules."""
        resolution = self.resolve(reference)
        self._client.clone(resolution.url, resolution.path, recursive=recursive)
        self._apply_profile(resolution)
        return resolution

    def init(self, reference: str) -> Resolution:
        """Create an empty repository with ``origin`` set to the resolved URL."""
        resolution = self.resolve(reference)
        self._client.init(resolution.path)
        self._client.add_remote(resolution.path, "origin", resolution.url)
        self._apply_profile(resolution)
        return resolution

    def locate(self, source: Path) -> Resolution:
        """Resolve an existing checkout from the URLs of its remotes.

        The first remote URL that resolves wins.
        """
        if not (source / ".git").exists():
            raise RepositoryNotFoundError(
                f"Not a Git repository: {source}", details={"path": str(source)}
            )

        for name in self._client.list_remotes(source):
            url = self._client.get_remote_url(source, name)
            if url is None:
                continue
            try:
                return self.resolve(url)
            except ResolutionError as e:
                logger.debug("Skipped unsupported remote", remote=name, url=url, error=e.message)

        raise ResolutionError(
            "Could not find a supported remote in the repository.",
            details={"path": str(source)},
        )

    def add(self, source: Path, resolution: Resolution | None = None) -> Resolution:
        """Move an existing checkout under the root and apply its profile."""
        resolution = resolution or self.locate(source)
        if resolution.path.exists():
            raise RepositoryExistsError(
                f"The destination already exists: {resolution.path}",
                details={"path": str(resolution.path)},
            )

        resolution.path.parent.mkdir(parents=True, exist_ok=True)
        shutil.move(str(source), str(resolution.path))
        logger.info("Added repository", source=str(source), path=str(resolution.path))

        self._apply_profile(resolution)
        return resolution

    def delete(self, reference: str) -> Resolution:
        """Remove the checkout a reference resolves to."""
        resolution = self.resolve(reference)
        if not resolution.path.is_dir():
            raise RepositoryNotFoundError(
                f"The repository does not exist: {resolution.path}",
                details={"path": str(resolution.path)},
            )

        shutil.rmtree(resolution.path)
        logger.info("Deleted repository", path=str(resolution.path))
        return resolution

    def _apply_profile(self, resolution: Resolution) -> None:
        if resolution.profile is None:
            return
        resolution.profile.apply(self._client, resolution.path)
        logger.info(
            "Attached profile",
            profile=resolution.profile_name,
            path=str(resolution.path),
        )
