from collections.abc import Mapping

from component_tracking.domain.entities import ASSIGNABLE_ROLES, Identity, Role
from component_tracking.rules.models import RegistryRules


class RolePolicy:
    def __init__(self, rules: RegistryRules, admin: Identity | None = None):
        self.rules = rules
        # Admin is fixed once a registry exists; rules only supply the default
        self.admin = admin if admin is not None else rules.admin

    def is_admin(self, caller: Identity) -> bool:
        return caller == self.admin

    def can_record(self, caller: Identity, roles: Mapping[Identity, int]) -> bool:
        """
        Check if the caller may write production data.

        Any assigned role is enough; the admin is always allowed even
        without an entry in the role table.
        """
        if roles.get(caller, Role.NONE) != Role.NONE:
            return True
        return self.is_admin(caller)

    def is_assignable(self, role: int) -> bool:
        # ADMIN is fixed at construction and never handed out
        return role in ASSIGNABLE_ROLES

    def is_valid_target(self, user: Identity) -> bool:
        return user != self.rules.burn_identity
