"""URL resolver for repository references."""

from urllib.parse import urlsplit

import structlog
from pydantic import ValidationError

from ghr.core.exceptions import (
    InvalidIdentityError,
    MalformedUrlError,
    MissingOwnerError,
    MissingRepoError,
    NoPatternMatchedError,
)
from ghr.core.models.identity import Identity, PartialIdentity, Scheme, Vcs, parse_host
from ghr.core.models.pattern import Match, PatternSet, default_patterns

logger = structlog.get_logger(__name__)


class URLResolver:
    """Resolves a repository reference to an ``Identity``.

    Supports:
    - Shorthands matched by the pattern set (``git@host:owner/repo``,
      ``host:owner/repo``, ``owner/repo``, ``repo`` and custom patterns)
    - Absolute URLs: https://github.com/owner/repo.git, ssh://git@host/owner/repo
    """

    def __init__(
        self,
        patterns: PatternSet | None = None,
        default_owner: str | None = None,
    ) -> None:
        self._patterns = patterns if patterns is not None else default_patterns()
        self._default_owner = default_owner

    @property
    def patterns(self) -> PatternSet:
        return self._patterns

    def resolve(self, reference: str) -> Identity:
        """Resolve a reference, applying scheme, VCS, host and owner defaults."""
        partial = self.parse(reference)
        identity = Identity.from_partial(partial, self._default_owner)
        logger.debug(
            "Resolved repository reference",
            reference=reference,
            host=str(identity.host),
            owner=identity.owner,
            repo=identity.repo,
        )
        return identity

    def parse(self, reference: str) -> PartialIdentity:
        """Parse a reference without applying defaults.

        Patterns are tried first; references containing ``://`` fall back
        to absolute URL parsing.
        """
        try:
            match = self._patterns.matches(reference)
            if match is not None:
                return self._from_match(match)

            if "://" in reference:
                return self._parse_url(reference)
        except ValidationError as e:
            raise InvalidIdentityError(
                f"Invalid repository reference {reference}: {e.errors()[0]['msg']}",
                details={"reference": reference},
            ) from e

        raise NoPatternMatchedError(
            f"The input did not match any pattern: {reference}",
            details={"reference": reference},
        )

    @staticmethod
    def _from_match(match: Match) -> PartialIdentity:
        return PartialIdentity(
            vcs=match.vcs,
            scheme=match.scheme,
            user=match.user,
            host=match.host,
            owner=match.owner,
            repo=match.repo,
            raw=match.raw,
        )

    @staticmethod
    def _parse_url(url: str) -> PartialIdentity:
        """Split an absolute URL into its parts.

        Only the first two path segments are used, as owner and repo.
        HTTPS URLs keep the input as ``raw`` so cloning uses it verbatim;
        git does not accept ``ssh://`` in the same places, so SSH URLs are
        rendered from parts.
        """
        try:
            parts = urlsplit(url)
            hostname = parts.hostname
        except ValueError as e:
            raise MalformedUrlError(
                f"Could not parse the URL: {url}", details={"url": url}
            ) from e

        scheme = Scheme.parse(parts.scheme)

        if not hostname:
            raise MalformedUrlError(
                f"Could not find a host in the URL: {url}", details={"url": url}
            )

        segments = parts.path.split("/")[1:]
        owner = segments[0] if segments else ""
        repo = segments[1] if len(segments) > 1 else ""

        if not owner:
            raise MissingOwnerError(
                f"Could not find repository owner from the URL: {url}",
                details={"url": url},
            )
        if not repo:
            raise MissingRepoError(
                f"Could not find repository name from the URL: {url}",
                details={"url": url},
            )

        return PartialIdentity(
            vcs=Vcs.from_url(url),
            scheme=scheme,
            user=parts.username or None,
            host=parse_host(hostname),
            owner=owner,
            repo=repo,
            raw=url if scheme is Scheme.HTTPS else None,
        )


def resolve(
    reference: str,
    patterns: PatternSet | None = None,
    default_owner: str | None = None,
) -> Identity:
    """Resolve ``reference`` with a one-off ``URLResolver``."""
    return URLResolver(patterns, default_owner).resolve(reference)
