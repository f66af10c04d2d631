# /hms/session.py
from enum import Enum

from hms.exceptions import HospitalError, InvalidCredentialsError
from hms.models.user_models import Action, Role


class SessionState(Enum):
    LOGGED_OUT = 'logged_out'
    LOGGED_IN = 'logged_in'
    TERMINATED = 'terminated'


class SessionError(HospitalError):
    """An operation was attempted from the wrong session state."""


class Session:
    """The single operator session: who is logged in, if anyone."""

    def __init__(self, app):
        self.app = app
        self.state = SessionState.LOGGED_OUT
        self.role = None

    @property
    def is_logged_in(self) -> bool:
        return self.state is SessionState.LOGGED_IN

    def login(self, role: Role, username: str, password: str) -> Role:
        if self.state is not SessionState.LOGGED_OUT:
            raise SessionError(f"Cannot log in while {self.state.value}")

        try:
            self.app.credentials.authenticate(role, username, password)
        except InvalidCredentialsError:
            self._audit('USER_LOGIN', 'authentication', False, role, 'Invalid credentials')
            raise

        self.role = role
        self.state = SessionState.LOGGED_IN
        self._audit('USER_LOGIN', 'authentication', True, role, 'Login successful')
        return role

    def logout(self) -> None:
        if not self.is_logged_in:
            raise SessionError("No operator is logged in")
        role = self.role
        self.role = None
        self.state = SessionState.LOGGED_OUT
        self._audit('USER_LOGOUT', 'authentication', True, role, 'Logged out')

    def exit(self) -> None:
        if self.state is not SessionState.LOGGED_OUT:
            raise SessionError("Log out before exiting")
        self.state = SessionState.TERMINATED

    def require(self, action: Action) -> bool:
        """Runs the permission gate for the logged-in role."""
        if not self.is_logged_in:
            raise SessionError("No operator is logged in")
        return self.app.gate.check_allowed(self.role, action)

    def _audit(self, action, resource, success, role, details):
        log = self.app.audit_logger.info if success else self.app.audit_logger.warning
        log(f"Action='{action}', Resource='{resource}', Role='{role.label}', "
            f"Success='{success}', Details='{details}'")
