"""Repository identity models.

A reference typed by the user is first parsed into a ``PartialIdentity``
(every field optional except the repository name) and then promoted to a
fully-resolved ``Identity`` by ``Identity.from_partial``.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from ghr.core.exceptions import (
    InvalidIdentityError,
    MissingOwnerError,
    UnknownSchemeError,
    UnknownVcsError,
)

GITHUB_COM = "github.com"

GIT_EXTENSION = ".git"
EXTENSIONS = (GIT_EXTENSION,)

# Names that would escape or alias a directory when joined onto the root
RESERVED_SEGMENTS = frozenset({".", ".."})
PATH_SEPARATORS = ("/", "\\")


class Vcs(str, Enum):
    """Version control system of a repository."""

    GIT = "git"

    def __str__(self) -> str:
        return self.value

    @property
    def extension(self) -> str:
        """File extension appended to the repository name on render."""
        return GIT_EXTENSION

    @classmethod
    def parse(cls, token: str) -> "Vcs":
        lowered = token.lower()
        for member in cls:
            if member.value == lowered:
                return member
        raise UnknownVcsError(f"Unknown VCS found: {token}", details={"token": token})

    @classmethod
    def from_url(cls, url: str) -> "Vcs | None":
        if url.endswith(GIT_EXTENSION):
            return cls.GIT
        return None


class Scheme(str, Enum):
    """Transport scheme used to clone a repository."""

    HTTPS = "https"
    SSH = "ssh"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, token: str) -> "Scheme":
        lowered = token.lower()
        for member in cls:
            if member.value == lowered:
                return member
        raise UnknownSchemeError(
            f"Unknown URL scheme found: {token}", details={"token": token}
        )


class KnownHost(str, Enum):
    """Hosts ghr knows by name."""

    GITHUB = GITHUB_COM

    def __str__(self) -> str:
        return self.value


class UnknownHost(BaseModel):
    """Any other host, kept as typed."""

    model_config = ConfigDict(frozen=True)

    name: str

    def __str__(self) -> str:
        return self.name


Host = KnownHost | UnknownHost


def parse_host(value: str) -> Host:
    """Parse a hostname, recognizing well-known hosts case-insensitively."""
    lowered = value.lower()
    for member in KnownHost:
        if member.value == lowered:
            return member
    return UnknownHost(name=value)


def remove_extensions(repo: str) -> str:
    """Strip the first known VCS extension found at the end of ``repo``.

    Repeated suffixes are all removed, so stripping is idempotent.
    """
    for extension in EXTENSIONS:
        stripped = repo
        while stripped.endswith(extension):
            stripped = stripped[: -len(extension)]
        if stripped != repo:
            return stripped
    return repo


def check_path_segment(value: str) -> str:
    """Reject values that cannot be used as a single directory name."""
    if not value or value in RESERVED_SEGMENTS or any(sep in value for sep in PATH_SEPARATORS):
        raise ValueError(f"{value!r} cannot be used as a directory name")
    return value


def coerce_host(value: object) -> object:
    if isinstance(value, str):
        return parse_host(value)
    return value


def coerce_vcs(value: object) -> object:
    if isinstance(value, str) and not isinstance(value, Vcs):
        return Vcs.parse(value)
    return value


def coerce_scheme(value: object) -> object:
    if isinstance(value, str) and not isinstance(value, Scheme):
        return Scheme.parse(value)
    return value


class PartialIdentity(BaseModel):
    """Result of a single pattern match or absolute URL parse."""

    model_config = ConfigDict(frozen=True)

    vcs: Vcs | None = None
    scheme: Scheme | None = None
    user: str | None = None
    host: Host | None = None
    owner: str | None = None
    repo: str = Field(min_length=1)
    raw: str | None = None

    normalize_host = field_validator("host", mode="before")(coerce_host)
    normalize_vcs = field_validator("vcs", mode="before")(coerce_vcs)
    normalize_scheme = field_validator("scheme", mode="before")(coerce_scheme)

    @field_validator("repo")
    @classmethod
    def strip_repo_extensions(cls, value: str) -> str:
        stripped = remove_extensions(value)
        if not stripped:
            raise ValueError(f"{value!r} has no repository name besides its extension")
        return stripped


class Identity(BaseModel):
    """Canonical, fully-resolved repository address."""

    model_config = ConfigDict(frozen=True)

    vcs: Vcs = Vcs.GIT
    scheme: Scheme = Scheme.HTTPS
    user: str | None = None
    host: Host = KnownHost.GITHUB
    owner: str = Field(min_length=1)
    repo: str = Field(min_length=1)
    raw: str | None = None

    normalize_host = field_validator("host", mode="before")(coerce_host)
    normalize_vcs = field_validator("vcs", mode="before")(coerce_vcs)
    normalize_scheme = field_validator("scheme", mode="before")(coerce_scheme)

    @model_validator(mode="after")
    def check_path_segments(self) -> "Identity":
        # host, owner and repo each become one directory below the root
        for value in (str(self.host), self.owner, self.repo):
            check_path_segment(value)
        return self

    @classmethod
    def from_partial(
        cls, partial: PartialIdentity, default_owner: str | None = None
    ) -> "Identity":
        """Apply defaults to a partial identity.

        The owner comes from the partial identity, then from
        ``default_owner``; if neither is set, ``MissingOwnerError`` is raised.
        Host, owner or repo that cannot name a directory raise
        ``InvalidIdentityError``.
        """
        owner = partial.owner or default_owner
        if not owner:
            raise MissingOwnerError(
                "Repository owner is not specified in the URL or pattern, "
                "and the default owner is not configured.",
                details={"repo": partial.repo},
            )

        try:
            return cls(
                vcs=partial.vcs or Vcs.GIT,
                scheme=partial.scheme or Scheme.HTTPS,
                user=partial.user,
                host=partial.host or KnownHost.GITHUB,
                owner=owner,
                repo=partial.repo,
                raw=partial.raw,
            )
        except ValidationError as e:
            raise InvalidIdentityError(
                f"Invalid repository identity: {e.errors()[0]['msg']}",
                details={"host": str(partial.host), "owner": owner, "repo": partial.repo},
            ) from e

    @property
    def authority(self) -> str:
        if self.user:
            return f"{self.user}@{self.host}"
        return str(self.host)

    def render(self) -> str:
        """Render the identity as a URL that git can clone."""
        if self.raw is not None:
            return self.raw

        if self.scheme is Scheme.SSH:
            return f"{self.authority}:{self.owner}/{self.repo}{self.vcs.extension}"
        return f"https://{self.authority}/{self.owner}/{self.repo}{self.vcs.extension}"

    def __str__(self) -> str:
        return self.render()
