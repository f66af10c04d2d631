# /hms/console/controllers/receptionist_controller.py
from hms.console.controllers.patient_controller import show_patient_records
from hms.console.io import ask
from hms.models.patient_models import Patient
from hms.models.user_models import Action
from hms.utils.decorators import audit_log, require_permission
from hms.utils.validators import (
    validate_age, validate_contact, validate_gender, validate_text,
)


@audit_log("REGISTER_PATIENT", "patients")
@require_permission(Action.REGISTER)
def register_patient(session, console):
    """Collects a new patient's details and stores them under the next free id."""
    name = ask(console, "Enter patient name:", lambda value: validate_text(value, 'name'))
    age = ask(console, "Enter patient age:", validate_age)
    gender = ask(console, "Enter patient gender (M/F/O):", validate_gender)
    address = ask(console, "Enter patient address:", lambda value: validate_text(value, 'address'))
    contact = ask(console, "Enter patient contact number:", validate_contact)
    diagnosis = ask(console, "Enter patient diagnosis:",
                    lambda value: validate_text(value, 'diagnosis', required=False))

    store = session.app.patients
    patient = Patient(
        id=store.next_id(),
        name=name,
        age=age,
        gender=gender,
        address=address,
        contact_number=contact,
        diagnosis=diagnosis,
    )
    store.append(patient)
    console.echo(f"Patient registered successfully with ID: {patient.id}")
    return patient


@audit_log("VIEW_PATIENTS", "patients")
@require_permission(Action.VIEW)
def view_patient_records(session, console):
    return show_patient_records(session, console)
