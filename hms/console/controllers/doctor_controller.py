# /hms/console/controllers/doctor_controller.py
from hms.console.controllers.patient_controller import (
    choose_patient, list_patients, show_patient_records,
)
from hms.console.io import ask
from hms.models.user_models import Action
from hms.utils.decorators import audit_log, require_permission
from hms.utils.validators import parse_yes_no, validate_text


@audit_log("VIEW_PATIENTS", "patients")
@require_permission(Action.VIEW)
def view_patient_records(session, console):
    return show_patient_records(session, console)


@audit_log("UPDATE_DIAGNOSIS", "patients")
@require_permission(Action.UPDATE)
def update_patient_record(session, console):
    """Replaces one patient's diagnosis."""
    patients = list_patients(session, console)
    if not patients:
        return None

    patient = choose_patient(console, patients, "Enter patient ID to update")
    if patient is None:
        return None

    console.echo(f"\nCurrent Diagnosis: {patient.diagnosis or 'No diagnosis'}")
    diagnosis = ask(console, "Enter new diagnosis:",
                    lambda value: validate_text(value, 'diagnosis', required=False))

    updated = patient.with_diagnosis(diagnosis)
    session.app.patients.update_by_id(updated)
    console.echo("Diagnosis updated!")
    return updated


@audit_log("DELETE_PATIENT", "patients")
@require_permission(Action.DELETE)
def delete_patient_record(session, console):
    patients = list_patients(session, console)
    if not patients:
        return None

    patient = choose_patient(console, patients, "Enter patient ID to delete")
    if patient is None:
        return None

    if not ask(console, "Confirm deletion? (Y/N):", parse_yes_no):
        console.echo("Deletion cancelled.")
        return None

    session.app.patients.delete_by_id(patient.id)
    console.echo("Patient record deleted.")
    return patient
