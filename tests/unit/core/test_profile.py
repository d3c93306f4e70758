"""Tests for profiles."""

import tomllib
from pathlib import Path

import pytest

from ghr.core.models.profile import Profile, Profiles, expand_configs, flatten_configs
from ghr.core.models.rule import ProfileRef


class RecordingClient:
    """Stands in for GitClient and records config writes."""

    def __init__(self) -> None:
        self.calls: list[tuple[Path, str, str]] = []

    def set_config(self, path: Path, key: str, value: str) -> None:
        self.calls.append((path, key, value))


@pytest.mark.unit
class TestProfile:
    """Tests for Profile."""

    def test_flatten_nested_tables(self) -> None:
        flat = flatten_configs({"user": {"name": "Alice", "email": "a@example.com"}, "core.x": "y"})
        assert flat == {"user.name": "Alice", "user.email": "a@example.com", "core.x": "y"}

    def test_non_string_values_dropped(self) -> None:
        assert flatten_configs({"user": {"name": "Alice", "age": 3}, "flag": True}) == {
            "user.name": "Alice"
        }

    def test_validate_flattens(self) -> None:
        profile = Profile.model_validate({"user": {"name": "Alice"}})
        assert profile.configs == {"user.name": "Alice"}
        assert profile.get("user.name") == "Alice"
        assert profile.get("user.email") is None

    def test_expand_configs(self) -> None:
        expanded = expand_configs({"user.name": "Alice", "user.email": "a@example.com", "x": "y"})
        assert expanded == {"user": {"email": "a@example.com", "name": "Alice"}, "x": "y"}

    def test_expand_configs_longer_key_wins(self) -> None:
        assert expand_configs({"core": "x", "core.editor": "vim"}) == {"core": {"editor": "vim"}}

    def test_to_toml_nested_tables(self) -> None:
        profile = Profile.model_validate({"user": {"name": "Alice", "email": "a@example.com"}})
        rendered = profile.to_toml()
        assert "[user]" in rendered
        assert tomllib.loads(rendered) == {"user": {"email": "a@example.com", "name": "Alice"}}

    def test_to_toml_escapes_values(self) -> None:
        data = {"user": {"name": 'A "B" C'}, "core": {"sshCommand": "ssh -i C:\\key"}}
        rendered = Profile.model_validate(data).to_toml()
        assert tomllib.loads(rendered) == data

    def test_to_toml_round_trips_through_validation(self) -> None:
        profile = Profile.model_validate({"user": {"name": "Alice"}, "commit": {"gpgsign": "true"}})
        assert Profile.model_validate(tomllib.loads(profile.to_toml())) == profile

    def test_apply_writes_each_value(self, tmp_path: Path) -> None:
        profile = Profile.model_validate({"user": {"name": "Alice", "email": "a@example.com"}})
        client = RecordingClient()
        profile.apply(client, tmp_path)
        assert client.calls == [
            (tmp_path, "user.email", "a@example.com"),
            (tmp_path, "user.name", "Alice"),
        ]


@pytest.mark.unit
class TestProfiles:
    """Tests for Profiles."""

    def test_resolve(self) -> None:
        profiles = Profiles.model_validate({"work": {"user": {"name": "Alice"}}, "home": {}})
        name, profile = profiles.resolve(ProfileRef(name="work"))
        assert name == "work"
        assert profile.configs == {"user.name": "Alice"}

    def test_resolve_unknown(self) -> None:
        assert Profiles().resolve(ProfileRef(name="missing")) is None

    def test_names_sorted(self) -> None:
        profiles = Profiles.model_validate({"work": {}, "home": {}})
        assert profiles.names() == ["home", "work"]
