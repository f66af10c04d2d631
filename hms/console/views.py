# /hms/console/views.py
from hms.models.patient_models import Patient


def patient_short(patient: Patient) -> str:
    return f"ID: {patient.id} - Name: {patient.name}"


def patient_detail(patient: Patient) -> str:
    return "\n".join([
        f"Patient ID: {patient.id}",
        f"Name: {patient.name}",
        f"Age: {patient.age}",
        f"Gender: {patient.gender}",
        f"Address: {patient.address}",
        f"Contact: {patient.contact_number}",
        f"Diagnosis: {patient.diagnosis or 'No diagnosis'}",
    ])


def menu(title: str, options) -> str:
    lines = [f"\n---{title}---"]
    lines += [f"{number}. {label}" for number, label in enumerate(options, start=1)]
    return "\n".join(lines)
