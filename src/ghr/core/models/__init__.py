"""Domain models for ghr."""

from ghr.core.models.identity import (
    Host,
    Identity,
    KnownHost,
    PartialIdentity,
    Scheme,
    UnknownHost,
    Vcs,
    parse_host,
)
from ghr.core.models.pattern import Match, Pattern, PatternSet, default_patterns
from ghr.core.models.profile import Profile, Profiles
from ghr.core.models.rule import ProfileRef, Rule, RuleSet

__all__ = [
    "Vcs",
    "Scheme",
    "Host",
    "KnownHost",
    "UnknownHost",
    "parse_host",
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
]
