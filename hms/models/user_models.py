# /hms/models/user_models.py
from dataclasses import dataclass
from enum import Enum

import bcrypt


class Action(str, Enum):
    """Gated operations a role may be allowed to perform."""
    VIEW = 'view'
    UPDATE = 'update'
    DELETE = 'delete'
    REGISTER = 'register'


class Role(Enum):
    """The fixed operator roles.

    Each member carries its label (used in menus and as the rights file key),
    its gated actions in rights-file order, and the menu choice that logs out.
    """
    ADMIN = ('Admin', (), 3)
    DOCTOR = ('Doctor', (Action.VIEW, Action.UPDATE, Action.DELETE), 4)
    # View comes first for every role, matching the rights file's positional layout
    RECEPTIONIST = ('Receptionist', (Action.VIEW, Action.REGISTER), 3)

    def __init__(self, label, actions, logout_choice):
        self.label = label
        self.actions = actions
        self.logout_choice = logout_choice

    @property
    def has_gated_actions(self) -> bool:
        return bool(self.actions)

    @classmethod
    def gated(cls):
        """Roles that own a line in the rights file."""
        return [role for role in cls if role.has_gated_actions]


@dataclass(frozen=True)
class Credential:
    """A role's fixed username and bcrypt password hash."""
    role: Role
    username: str
    password_hash: bytes

    @classmethod
    def create(cls, role: Role, username: str, password: str, rounds: int = 12) -> 'Credential':
        """Hashes the plaintext password for the given role."""
        hashed = bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt(rounds=rounds))
        return cls(role=role, username=username, password_hash=hashed)

    def check(self, username: str, password: str) -> bool:
        if username != self.username:
            return False
        return bcrypt.checkpw(password.encode('utf-8'), self.password_hash)
