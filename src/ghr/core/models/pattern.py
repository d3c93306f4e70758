"""Patterns for shorthand repository references.

Each pattern is a regular expression with named groups (``vcs``, ``scheme``,
``user``, ``host``, ``owner``, ``repo``) plus fixed values for the fields the
expression does not capture. The expression is applied to the whole input.
"""

import re
from collections.abc import Callable, Iterable, Iterator
from typing import TypeVar

from pydantic import BaseModel, ConfigDict, field_validator

from ghr.core.exceptions import ResolutionError
from ghr.core.models.identity import (
    Host,
    Scheme,
    Vcs,
    coerce_host,
    coerce_scheme,
    coerce_vcs,
    parse_host,
)

T = TypeVar("T")

# git@github.com:owner/repo(.git)
SSH_PATTERN = re.compile(
    r"(?P<user>[0-9A-Za-z\-]+)@(?P<host>[0-9A-Za-z\.\-]+):"
    r"(?P<owner>[0-9A-Za-z_\.\-]+)/(?P<repo>[0-9A-Za-z_\.\-]+)"
)

# github.com:owner/repo or github.com/owner/repo
HOST_OWNER_REPO_PATTERN = re.compile(
    r"(?P<host>[0-9A-Za-z\.\-]+)[:/](?P<owner>[0-9A-Za-z_\.\-]+)/(?P<repo>[0-9A-Za-z_\.\-]+)"
)

# owner/repo
OWNER_REPO_PATTERN = re.compile(r"(?P<owner>[0-9A-Za-z_\.\-]+)/(?P<repo>[0-9A-Za-z_\.\-]+)")

# repo
REPO_PATTERN = re.compile(r"(?P<repo>[0-9A-Za-z_\.\-]+)")


class Match(BaseModel):
    """Fields captured by a single pattern."""

    model_config = ConfigDict(frozen=True)

    vcs: Vcs | None = None
    scheme: Scheme | None = None
    user: str | None = None
    host: Host | None = None
    owner: str | None = None
    repo: str
    raw: str | None = None


def _parse_or_none(parse: Callable[[str], T], token: str | None) -> T | None:
    if token is None:
        return None
    try:
        return parse(token)
    except ResolutionError:
        return None


class Pattern(BaseModel):
    """A single shorthand grammar.

    When ``infer`` is false the match carries a ``raw`` URL: the ``url``
    template with ``{{field}}`` placeholders substituted, or the input
    itself when no template is configured.
    """

    model_config = ConfigDict(frozen=True)

    regex: re.Pattern[str]
    vcs: Vcs | None = None
    scheme: Scheme | None = None
    user: str | None = None
    host: Host | None = None
    owner: str | None = None
    url: str | None = None
    infer: bool = False

    normalize_host = field_validator("host", mode="before")(coerce_host)
    normalize_vcs = field_validator("vcs", mode="before")(coerce_vcs)
    normalize_scheme = field_validator("scheme", mode="before")(coerce_scheme)

    def matches(self, value: str) -> Match | None:
        found = self.regex.fullmatch(value)
        if found is None:
            return None

        groups = {name: text for name, text in found.groupdict().items() if text is not None}
        repo = groups.get("repo")
        if not repo:
            return None

        # An unrecognized captured token falls back to the fixed value.
        vcs = _parse_or_none(Vcs.parse, groups.get("vcs")) or self.vcs
        scheme = _parse_or_none(Scheme.parse, groups.get("scheme")) or self.scheme
        user = groups.get("user", self.user)
        host = parse_host(groups["host"]) if "host" in groups else self.host
        owner = groups.get("owner", self.owner)

        fields = {
            "vcs": vcs,
            "scheme": scheme,
            "user": user,
            "host": host,
            "owner": owner,
            "repo": repo,
        }

        raw = None
        if not self.infer:
            raw = self._render_template(fields) if self.url else value

        return Match(raw=raw, **fields)

    def _render_template(self, fields: dict[str, object]) -> str:
        url = self.url or ""
        for name, field in fields.items():
            url = url.replace("{{" + name + "}}", "" if field is None else str(field))
        return url


class PatternSet:
    """Ordered patterns; the first pattern that matches wins."""

    def __init__(self, patterns: Iterable[Pattern] = ()) -> None:
        self._patterns = tuple(patterns)

    def __iter__(self) -> Iterator[Pattern]:
        return iter(self._patterns)

    def __len__(self) -> int:
        return len(self._patterns)

    def with_pattern(self, pattern: Pattern) -> "PatternSet":
        return PatternSet((*self._patterns, pattern))

    def extend(self, patterns: Iterable[Pattern]) -> "PatternSet":
        return PatternSet((*self._patterns, *patterns))

    def matches(self, value: str) -> Match | None:
        for pattern in self._patterns:
            match = pattern.matches(value)
            if match is not None:
                return match
        return None


def default_patterns() -> PatternSet:
    """Build the default shorthand grammars, most specific first."""
    return PatternSet(
        [
            Pattern(regex=SSH_PATTERN, scheme=Scheme.SSH, infer=True),
            Pattern(regex=HOST_OWNER_REPO_PATTERN, infer=True),
            Pattern(regex=OWNER_REPO_PATTERN, infer=True),
            Pattern(regex=REPO_PATTERN, infer=True),
        ]
    )
