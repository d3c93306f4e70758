"""Exception hierarchy for ghr."""

from typing import Any


class GhrError(Exception):
    """Base exception for all ghr errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(GhrError):
    """Raised when the configuration file cannot be loaded."""


class ResolutionError(GhrError):
    """Base class for failures while resolving a repository reference."""


class NoPatternMatchedError(ResolutionError):
    """The input matched no pattern and is not an absolute URL."""


class MissingOwnerError(ResolutionError):
    """The owner could not be determined from the input or the default."""


class MalformedUrlError(ResolutionError):
    """An absolute URL could not be split into its parts."""


class MissingRepoError(MalformedUrlError):
    """An absolute URL has no repository segment."""


class UnknownSchemeError(ResolutionError, ValueError):
    """A scheme token is not one of the recognized literals."""


class UnknownVcsError(ResolutionError, ValueError):
    """A VCS token is not one of the recognized literals."""


class InvalidIdentityError(ResolutionError):
    """A resolved host, owner or repo cannot name a directory under the root."""


class GitCommandError(GhrError):
    """Raised when a git subprocess fails."""


class ProfileNotFoundError(GhrError):
    """Raised when a profile name is not configured."""


class RepositoryNotFoundError(GhrError):
    """Raised when a managed repository does not exist locally."""


class RepositoryExistsError(GhrError):
    """Raised when the destination of a repository is already taken."""
