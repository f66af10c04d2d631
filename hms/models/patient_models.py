# /hms/models/patient_models.py
from dataclasses import dataclass, replace


@dataclass
class Patient:
    """A patient record as stored in the records file."""
    id: int
    name: str
    age: int
    gender: str
    address: str
    contact_number: str
    diagnosis: str = ''

    def with_diagnosis(self, diagnosis: str) -> 'Patient':
        return replace(self, diagnosis=diagnosis)
