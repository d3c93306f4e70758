"""Configuration file loader.

Reads ``<root>/config.toml``:

    [defaults]
    owner = "alice"

    [[patterns]]
    regex = '^(?P<scheme>https)://(?P<host>git\\.kernel\\.org)/pub/scm/linux/kernel/git/(?P<owner>.+)/(?P<repo>.+)\\.git'

    [profiles.work]
    user.name = "Alice"
    user.email = "alice@example.com"

    [[rules]]
    profile.name = "work"
    host = "gitlab.com"
"""

import tomllib
from pathlib import Path

import structlog
from pydantic import BaseModel, Field, ValidationError

from ghr.config.settings import CONFIG_FILE_NAME
from ghr.core.exceptions import ConfigurationError
from ghr.core.models.pattern import Pattern, PatternSet, default_patterns
from ghr.core.models.profile import Profiles
from ghr.core.models.rule import RuleSet

logger = structlog.get_logger(__name__)


class Defaults(BaseModel):
    """Fallback values used during resolution."""

    owner: str | None = None


class Config(BaseModel):
    """Deserialized contents of the configuration file."""

    defaults: Defaults = Field(default_factory=Defaults)
    patterns: list[Pattern] = Field(default_factory=list)
    profiles: Profiles = Field(default_factory=Profiles)
    rules: RuleSet = Field(default_factory=RuleSet)

    def pattern_set(self) -> PatternSet:
        """Default patterns followed by the configured ones."""
        return default_patterns().extend(self.patterns)


def load_config(root: Path) -> Config:
    """Load the configuration file under ``root``.

    A missing file yields the default configuration.
    """
    path = root / CONFIG_FILE_NAME
    if not path.exists():
        logger.debug("No configuration file found, using defaults", path=str(path))
        return Config()

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(
            f"Could not parse configuration file: {e}",
            details={"path": str(path)},
        ) from e

    try:
        config = Config.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration file: {path}\n{e}",
            details={"path": str(path)},
        ) from e

    logger.debug(
        "Loaded configuration",
        path=str(path),
        patterns=len(config.patterns),
        rules=len(config.rules),
        profiles=len(config.profiles.root),
    )
    return config
