# /hms/storage/patient_store.py
import logging
from typing import List

from hms.exceptions import RecordFormatError, RecordNotFoundError
from hms.models.patient_models import Patient
from hms.storage import codec
from hms.storage.files import append_line, read_lines, rewrite_lines

logger = logging.getLogger(__name__)


class PatientStore:
    """CRUD over the patient records file.

    The file is the only source of truth: every call re-reads it, and every
    update or delete rewrites it whole.
    """

    def __init__(self, path: str):
        self.path = path

    def load_all(self) -> List[Patient]:
        """All records in file order; an absent file is an empty store."""
        lines = read_lines(self.path)
        if lines is None:
            return []

        patients = []
        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                patients.append(codec.decode(line))
            except RecordFormatError as e:
                logger.error(f"Undecodable record in {self.path} at line {line_number}: {e.reason}")
                raise RecordFormatError(e.reason, line, line_number) from None
        return patients

    def append(self, patient: Patient) -> None:
        append_line(self.path, codec.encode(patient))
        logger.info(f"Appended patient {patient.id}")

    def update_by_id(self, patient: Patient) -> None:
        patients = self.load_all()
        for index, existing in enumerate(patients):
            if existing.id == patient.id:
                patients[index] = patient
                break
        else:
            raise RecordNotFoundError(patient.id)

        self._rewrite(patients)
        logger.info(f"Updated patient {patient.id}")

    def delete_by_id(self, patient_id: int) -> None:
        patients = self.load_all()
        remaining = [p for p in patients if p.id != patient_id]
        if len(remaining) == len(patients):
            raise RecordNotFoundError(patient_id)

        self._rewrite(remaining)
        logger.info(f"Deleted patient {patient_id}")

    def find_by_id(self, patient_id: int) -> Patient:
        for patient in self.load_all():
            if patient.id == patient_id:
                return patient
        raise RecordNotFoundError(patient_id)

    def next_id(self) -> int:
        """One past the highest stored id, or 1 for an empty store."""
        return max((p.id for p in self.load_all()), default=0) + 1

    def _rewrite(self, patients):
        rewrite_lines(self.path, [codec.encode(p) for p in patients])
