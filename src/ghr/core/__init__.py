"""Core domain models and exceptions for ghr."""

from ghr.core.exceptions import (
    ConfigurationError,
    GhrError,
    GitCommandError,
    MalformedUrlError,
    MissingOwnerError,
    MissingRepoError,
    NoPatternMatchedError,
    ProfileNotFoundError,
    RepositoryNotFoundError,
    ResolutionError,
    UnknownSchemeError,
    UnknownVcsError,
)
from ghr.core.models import (
    Host,
    Identity,
    KnownHost,
    Match,
    PartialIdentity,
    Pattern,
    PatternSet,
    Profile,
    ProfileRef,
    Profiles,
    Rule,
    RuleSet,
    Scheme,
    UnknownHost,
    Vcs,
    default_patterns,
)

__all__ = [
    # Models
    "Vcs",
    "Scheme",
    "Host",
    "KnownHost",
    "UnknownHost",
    "PartialIdentity",
    "Identity",
    "Match",
    "Pattern",
    "PatternSet",
    "default_patterns",
    "ProfileRef",
    "Rule",
    "RuleSet",
    "Profile",
    "Profiles",
    # Exceptions
    "GhrError",
    "ConfigurationError",
    "ResolutionError",
    "NoPatternMatchedError",
    "MissingOwnerError",
    "MalformedUrlError",
    "MissingRepoError",
    "UnknownSchemeError",
    "UnknownVcsError",
    "GitCommandError",
    "ProfileNotFoundError",
    "RepositoryNotFoundError",
]
