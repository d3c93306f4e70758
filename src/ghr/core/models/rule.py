"""Rules selecting a profile for a repository."""

from pydantic import BaseModel, RootModel

from ghr.core.models.identity import Identity


class ProfileRef(BaseModel):
    """Reference to a profile by name."""

    name: str


class Rule(BaseModel):
    """Maps optional host, owner and repo matchers to a profile.

    Absent matchers are wildcards. The host is compared against the
    rendered hostname of the identity.
    """

    profile: ProfileRef
    host: str | None = None
    owner: str | None = None
    repo: str | None = None

    def matches(self, identity: Identity) -> bool:
        if self.host is not None and self.host != str(identity.host):
            return False
        if self.owner is not None and self.owner != identity.owner:
            return False
        if self.repo is not None and self.repo != identity.repo:
            return False
        return True


class RuleSet(RootModel[list[Rule]]):
    """Rules in declaration order."""

    root: list[Rule] = []

    def __len__(self) -> int:
        return len(self.root)

    def resolve(self, identity: Identity) -> Rule | None:
        """Return the first rule matching ``identity``, if any."""
        for rule in self.root:
            if rule.matches(identity):
                return rule
        return None
