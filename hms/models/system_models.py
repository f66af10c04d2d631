# /hms/models/system_models.py
from dataclasses import dataclass, field
from typing import Dict

from hms.models.user_models import Action, Role


@dataclass
class AccessRights:
    """Per-role permission flags, keyed by action in the role's fixed order."""
    role: Role
    flags: Dict[Action, bool] = field(default_factory=dict)

    @classmethod
    def all_enabled(cls, role: Role) -> 'AccessRights':
        return cls(role=role, flags={action: True for action in role.actions})

    def is_enabled(self, action: Action) -> bool:
        return self.flags.get(action, False)

    def toggled(self, action: Action) -> 'AccessRights':
        """Returns a copy with one flag flipped."""
        flags = dict(self.flags)
        flags[action] = not flags[action]
        return AccessRights(role=self.role, flags=flags)

    def matches_role(self) -> bool:
        """True when the flag set covers exactly the role's actions."""
        return set(self.flags) == set(self.role.actions)

    def ordered(self):
        """(action, enabled) pairs in rights-file order."""
        return [(action, self.flags[action]) for action in self.role.actions]
