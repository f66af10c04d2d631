# /hms/storage/rights_store.py
import os
import logging

from hms.exceptions import InvalidInputError, RoleNotFoundError, StorageError
from hms.models.system_models import AccessRights
from hms.models.user_models import Role
from hms.storage import codec
from hms.storage.files import read_lines, rewrite_lines

logger = logging.getLogger(__name__)


class AccessRightsStore:
    """Per-role permission flags kept in the rights file, one line per role."""

    def __init__(self, path: str):
        self.path = path

    def initialize_if_absent(self) -> bool:
        """Seeds the file with every flag enabled. Returns True if it was created."""
        if os.path.exists(self.path):
            return False

        rewrite_lines(self.path, [
            codec.encode_rights(AccessRights.all_enabled(role)) for role in Role.gated()
        ])
        logger.info(f"Created access rights file {self.path} with all flags enabled")
        return True

    def get_rights(self, role: Role) -> AccessRights:
        for line in self._lines():
            if codec.role_label(line) == role.label:
                return codec.decode_rights(line, role)
        raise RoleNotFoundError(role.label)

    def set_rights(self, rights: AccessRights) -> None:
        if not rights.matches_role():
            raise InvalidInputError(
                f"{rights.role.label} rights must cover exactly: "
                + ", ".join(action.value for action in rights.role.actions))

        lines = self._lines()
        found = False
        for index, line in enumerate(lines):
            if codec.role_label(line) == rights.role.label:
                lines[index] = codec.encode_rights(rights)
                found = True
                break
        if not found:
            raise RoleNotFoundError(rights.role.label)

        rewrite_lines(self.path, lines)
        logger.info(f"Updated access rights: {codec.encode_rights(rights)}")

    def _lines(self):
        lines = read_lines(self.path)
        if lines is None:
            raise StorageError("Could not open access rights file", self.path)
        return [line for line in lines if line.strip()]
