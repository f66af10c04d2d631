# /hms/console/routes.py
from hms.console.controllers import (
    admin_controller, auth_controller, doctor_controller, receptionist_controller,
)
from hms.console.io import ask
from hms.console.views import menu
from hms.exceptions import InvalidInputError
from hms.models.user_models import Role
from hms.session import Session, SessionState
from hms.utils.error_handlers import handle_action_errors
from hms.utils.validators import parse_int


# --- Menu tables: (label, handler) in choice order; "Back" follows at role.logout_choice ---
ROLE_MENUS = {
    Role.ADMIN: [
        ("Manage doctor's menu", admin_controller.manage_doctor_menu),
        ("Manage receptionist's menu", admin_controller.manage_receptionist_menu),
    ],
    Role.DOCTOR: [
        ("View Patient Records", doctor_controller.view_patient_records),
        ("Update Patient Record", doctor_controller.update_patient_record),
        ("Delete Patient Record", doctor_controller.delete_patient_record),
    ],
    Role.RECEPTIONIST: [
        ("Register Patient", receptionist_controller.register_patient),
        ("View Patient Records", receptionist_controller.view_patient_records),
    ],
}

MAIN_MENU = [Role.ADMIN, Role.DOCTOR, Role.RECEPTIONIST]
EXIT_CHOICE = len(MAIN_MENU) + 1


def choice_parser(highest):
    def parse(value):
        choice = parse_int(value)
        if not 1 <= choice <= highest:
            raise InvalidInputError(f"Invalid input: choose 1 to {highest}")
        return choice
    return parse


def role_menu(session, console):
    """Dispatches the logged-in role's menu until the operator logs out."""
    role = session.role
    entries = ROLE_MENUS[role]
    labels = [label for label, _ in entries] + ["Back"]

    while session.state is SessionState.LOGGED_IN:
        console.echo(menu(role.label, labels))
        choice = ask(console, "Enter your choice:", choice_parser(role.logout_choice))
        if choice == role.logout_choice:
            auth_controller.logout_user(session, console)
            return

        _, handler = entries[choice - 1]
        handle_action_errors(handler)(session, console)


def run_console(app, console):
    """Top-level loop: select a role, log in, use its menu, until Exit."""
    session = Session(app)
    labels = [role.label for role in MAIN_MENU] + ["Exit"]

    while session.state is not SessionState.TERMINATED:
        console.echo(menu("Hospital Records", labels))
        choice = ask(console, "Select your role:", choice_parser(EXIT_CHOICE))
        if choice == EXIT_CHOICE:
            session.exit()
            console.echo("Goodbye.")
            break

        role = MAIN_MENU[choice - 1]
        if auth_controller.login_user(session, console, role):
            role_menu(session, console)

    return session
