# /hms/permissions.py
import logging

from hms.exceptions import PermissionDeniedError
from hms.models.user_models import Action, Role

logger = logging.getLogger(__name__)


class PermissionGate:
    """Enforces the rights file before a gated action runs.

    Rights are re-read on every check, so a change saved by the administrator
    applies to the very next gated call.
    """

    def __init__(self, rights_store):
        self.rights_store = rights_store

    def check_allowed(self, role: Role, action: Action) -> bool:
        if action not in role.actions:
            logger.warning(f"{role.label} has no gated action '{action.value}'")
            raise PermissionDeniedError(role.label, action.value)

        rights = self.rights_store.get_rights(role)
        if not rights.is_enabled(action):
            logger.info(f"Denied '{action.value}' for {role.label}")
            raise PermissionDeniedError(role.label, action.value)
        return True
