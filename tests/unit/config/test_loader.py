"""Tests for configuration loading."""

from pathlib import Path

import pytest

from ghr.config.loader import Config, load_config
from ghr.core.exceptions import ConfigurationError
from ghr.core.models.identity import Scheme, UnknownHost
from tests.factories import IdentityFactory

CONFIG = """
[defaults]
owner = "alice"

[[patterns]]
regex = '^(?P<scheme>https)://(?P<host>git\\.kernel\\.org)/pub/scm/linux/kernel/git/(?P<owner>.+)/(?P<repo>.+)\\.git'
scheme = "https"

[[patterns]]
regex = 'gl\\+(?P<owner>\\w+)\\+(?P<repo>\\w+)'
host = "gitlab.com"
scheme = "SSH"
user = "git"
infer = true

[profiles.work.user]
name = "Alice"
email = "alice@work.example.com"

[profiles.home]
user.name = "Alice"

[[rules]]
profile.name = "work"
host = "gitlab.com"

[[rules]]
profile.name = "home"
"""


@pytest.mark.unit
class TestLoadConfig:
    """Tests for load_config."""

    def test_missing_file_defaults(self, root: Path) -> None:
        config = load_config(root)
        assert config.defaults.owner is None
        assert config.patterns == []
        assert len(config.rules) == 0
        assert config.profiles.names() == []

    def test_load(self, root: Path) -> None:
        (root / "config.toml").write_text(CONFIG)
        config = load_config(root)

        assert config.defaults.owner == "alice"
        assert len(config.patterns) == 2
        assert config.patterns[1].scheme is Scheme.SSH
        assert config.patterns[1].host == UnknownHost(name="gitlab.com")
        assert config.patterns[1].infer is True
        assert config.profiles.names() == ["home", "work"]
        assert config.profiles.get("work").configs == {
            "user.name": "Alice",
            "user.email": "alice@work.example.com",
        }

        gitlab = IdentityFactory(host=UnknownHost(name="gitlab.com"))
        assert config.rules.resolve(gitlab).profile.name == "work"
        assert config.rules.resolve(IdentityFactory()).profile.name == "home"

    def test_pattern_set_appends_custom_patterns(self, root: Path) -> None:
        (root / "config.toml").write_text(CONFIG)
        patterns = load_config(root).pattern_set()
        assert len(patterns) == 6

        match = patterns.matches("gl+bob+tool")
        assert match is not None
        assert match.host == UnknownHost(name="gitlab.com")
        assert match.scheme is Scheme.SSH
        assert match.owner == "bob"

        # The default host:owner/repo grammar is tried first
        match = patterns.matches("gl:bob/tool")
        assert match is not None
        assert match.host == UnknownHost(name="gl")

    def test_invalid_toml(self, root: Path) -> None:
        (root / "config.toml").write_text("[defaults\n")
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(root)
        assert exc_info.value.details["path"] == str(root / "config.toml")

    def test_invalid_scheme(self, root: Path) -> None:
        (root / "config.toml").write_text("[[patterns]]\nregex = '(?P<repo>.+)'\nscheme = 'ftp'\n")
        with pytest.raises(ConfigurationError):
            load_config(root)

    def test_rule_without_profile(self, root: Path) -> None:
        (root / "config.toml").write_text("[[rules]]\nhost = 'gitlab.com'\n")
        with pytest.raises(ConfigurationError):
            load_config(root)

    def test_default_config(self) -> None:
        assert len(Config().pattern_set()) == 4
