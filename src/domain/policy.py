from collections.abc import Iterable, Mapping

from src.domain.errors import PermissionDenied
from src.rules.models import Rules

DEFAULT_ROLE_CAPABILITIES: dict[str, frozenset[str]] = {
    "admin": frozenset(
        {
            "view",
            "edit",
            "delete",
            "publish",
            "approve_review",
            "submit_for_review",
            "archive",
            "manage_team",
            "change_settings",
        }
    ),
    "editor": frozenset({"view", "edit", "submit_for_review"}),
    "viewer": frozenset({"view"}),
}


class RoleCapabilityModel:
    """
    Maps a role to the set of actions it may perform.

    Lookups are exact: an unrecognised role has no capabilities at all.
    """

    def __init__(self, roles: Mapping[str, Iterable[str]] | None = None):
        source = DEFAULT_ROLE_CAPABILITIES if roles is None else roles
        self._roles: dict[str, frozenset[str]] = {
            role: frozenset(caps) for role, caps in source.items()
        }

    @classmethod
    def from_rules(cls, rules: Rules) -> "RoleCapabilityModel":
        return cls(rules.workflow.roles)

    def capabilities(self, role: str | None) -> frozenset[str]:
        if not role:
            return frozenset()
        return self._roles.get(role, frozenset())

    def has(self, role: str | None, capability: str) -> bool:
        return capability in self.capabilities(role)

    def require(self, role: str | None, capability: str, action: str | None = None) -> None:
        """Raise PermissionDenied unless the role holds the capability."""
        if not self.has(role, capability):
            raise PermissionDenied(role or "", capability, action)

    def can_view(self, role: str | None) -> bool:
        return self.has(role, "view")

    def can_edit(self, role: str | None) -> bool:
        return self.has(role, "edit")

    def can_delete(self, role: str | None) -> bool:
        return self.has(role, "delete")

    def can_publish(self, role: str | None) -> bool:
        return self.has(role, "publish")

    def can_approve_review(self, role: str | None) -> bool:
        return self.has(role, "approve_review")

    def can_submit_for_review(self, role: str | None) -> bool:
        return self.has(role, "submit_for_review")

    def can_archive(self, role: str | None) -> bool:
        return self.has(role, "archive")

    def can_manage_team(self, role: str | None) -> bool:
        return self.has(role, "manage_team")

    def can_change_settings(self, role: str | None) -> bool:
        return self.has(role, "change_settings")


DEFAULT_MODEL = RoleCapabilityModel()


def can_edit(role: str | None) -> bool:
    return DEFAULT_MODEL.can_edit(role)


def can_delete(role: str | None) -> bool:
    return DEFAULT_MODEL.can_delete(role)


def can_publish(role: str | None) -> bool:
    return DEFAULT_MODEL.can_publish(role)


def can_approve_review(role: str | None) -> bool:
    return DEFAULT_MODEL.can_approve_review(role)


def can_submit_for_review(role: str | None) -> bool:
    return DEFAULT_MODEL.can_submit_for_review(role)


def can_archive(role: str | None) -> bool:
    return DEFAULT_MODEL.can_archive(role)
