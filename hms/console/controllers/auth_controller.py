# /hms/console/controllers/auth_controller.py
import logging

from hms.exceptions import InvalidCredentialsError
from hms.models.user_models import Role

logger = logging.getLogger(__name__)

CANCEL = '0'


def login_user(session, console, role: Role) -> bool:
    """Prompts for the role's credentials until they match or the operator cancels."""
    console.echo(f"\n---{role.label} Login--- (enter {CANCEL} as username to go back)")
    while True:
        username = console.prompt("Username:").strip()
        if username == CANCEL:
            return False
        password = console.prompt("Password:", hide_input=True)

        try:
            session.login(role, username, password)
        except InvalidCredentialsError as e:
            logger.info(f"Failed login attempt for {role.label}")
            console.echo(str(e))
            continue

        console.echo(f"Welcome, {role.label}.")
        return True


def logout_user(session, console):
    session.logout()
    console.echo("Logged out.")
