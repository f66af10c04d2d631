# /hms/console/controllers/admin_controller.py
from hms.console.io import ask
from hms.models.user_models import Role
from hms.utils.decorators import admin_required, audit_log
from hms.utils.validators import parse_yes_no


def _status(enabled):
    return "ENABLED" if enabled else "DISABLED"


@audit_log("UPDATE_ACCESS_RIGHTS", "access_rights")
@admin_required
def manage_menu(session, console, role: Role):
    """Shows a role's flags, asks to flip each one, then applies all or nothing."""
    rights_store = session.app.rights
    current = rights_store.get_rights(role)

    console.echo(f"\n{role.label} Current Status\n--------------------------------")
    for action, enabled in current.ordered():
        console.echo(f"{action.value.capitalize()} - {_status(enabled)}")

    pending = current
    for action, enabled in current.ordered():
        verb = "Disable" if enabled else "Enable"
        if ask(console, f"{verb} {action.value}? (Y/N):", parse_yes_no):
            pending = pending.toggled(action)

    if pending.flags == current.flags:
        console.echo("No changes applied!")
        return current

    if not ask(console, "Apply changes? (Y/N):", parse_yes_no):
        console.echo("Changes discarded.")
        return current

    rights_store.set_rights(pending)
    console.echo("Changes applied!")
    return pending


def manage_doctor_menu(session, console):
    return manage_menu(session, console, Role.DOCTOR)


def manage_receptionist_menu(session, console):
    return manage_menu(session, console, Role.RECEPTIONIST)
