# /hms/console/controllers/patient_controller.py
from hms.console.io import ask
from hms.console.views import patient_detail, patient_short
from hms.utils.validators import parse_int

CANCEL = 0


def list_patients(session, console):
    """Prints the short patient list. Returns the loaded records."""
    patients = session.app.patients.load_all()
    if not patients:
        console.echo("No patients registered yet.")
        return []

    console.echo("\nPatient List:")
    for patient in patients:
        console.echo(patient_short(patient))
    return patients


def choose_patient(console, patients, prompt_text, retry=True):
    """Asks for an id from ``patients``; None when the operator cancels.

    With ``retry`` an unknown id re-prompts, otherwise it is reported and
    None is returned.
    """
    by_id = {patient.id: patient for patient in patients}
    while True:
        patient_id = ask(console, f"\n{prompt_text} ({CANCEL} to cancel):", parse_int)
        if patient_id == CANCEL:
            return None
        if patient_id in by_id:
            return by_id[patient_id]
        if not retry:
            console.echo("Patient not found.")
            return None
        console.echo("Patient not found. Please try again.")


def show_patient_records(session, console):
    """List every patient, then show one in detail."""
    patients = list_patients(session, console)
    if not patients:
        return None

    patient = choose_patient(console, patients, "Enter patient ID to view details", retry=False)
    if patient is None:
        return None

    console.echo("\nPatient Details:")
    console.echo(patient_detail(patient))
    return patient
