"""Profiles: named bundles of git config values."""

from pathlib import Path
from typing import TYPE_CHECKING, Any

import tomli_w
from pydantic import RootModel, model_validator

from ghr.core.models.rule import ProfileRef

if TYPE_CHECKING:
    from ghr.git.client import GitClient


def flatten_configs(data: dict[str, Any], prefix: str = "") -> dict[str, str]:
    """Flatten nested tables into dotted git config keys.

    Only string leaves are kept:
        {"user": {"name": "Alice"}} -> {"user.name": "Alice"}
    """
    flat: dict[str, str] = {}
    for key, value in data.items():
        dotted = f"{prefix}.{key}" if prefix else key
        if isinstance(value, str):
            flat[dotted] = value
        elif isinstance(value, dict):
            flat.update(flatten_configs(value, dotted))
    return flat


def expand_configs(configs: dict[str, str]) -> dict[str, Any]:
    """Expand dotted git config keys back into nested tables.

        {"user.name": "Alice"} -> {"user": {"name": "Alice"}}

    A key that is also the prefix of another key keeps the longer one.
    """
    expanded: dict[str, Any] = {}
    for key in sorted(configs):
        *parents, leaf = key.split(".")
        table = expanded
        for segment in parents:
            if not isinstance(table.get(segment), dict):
                table[segment] = {}
            table = table[segment]
        table[leaf] = configs[key]
    return expanded


class Profile(RootModel[dict[str, str]]):
    """Git config values applied to a repository."""

    root: dict[str, str] = {}

    @model_validator(mode="before")
    @classmethod
    def flatten(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return flatten_configs(data)
        return data

    @property
    def configs(self) -> dict[str, str]:
        return self.root

    def get(self, key: str) -> str | None:
        return self.root.get(key)

    def to_toml(self) -> str:
        """Render the values as a TOML document of nested tables."""
        return tomli_w.dumps(expand_configs(self.root))

    def apply(self, client: "GitClient", path: Path) -> None:
        """Write every value into the git config of the repository at ``path``."""
        for key in sorted(self.root):
            client.set_config(path, key, self.root[key])


class Profiles(RootModel[dict[str, Profile]]):
    """Profiles by name."""

    root: dict[str, Profile] = {}

    def get(self, name: str) -> Profile | None:
        return self.root.get(name)

    def names(self) -> list[str]:
        return sorted(self.root)

    def resolve(self, ref: ProfileRef) -> tuple[str, Profile] | None:
        profile = self.root.get(ref.name)
        if profile is None:
            return None
        return ref.name, profile
