# /hms/storage/codec.py
"""
Line codec for the flat text stores.

A patient record is one line of seven fields joined by ``|`` in the order
id, name, age, gender, address, contact number, diagnosis. A rights line is
the role label followed by one ``1``/``0`` flag per gated action, in the
role's fixed action order. Field values are not escaped: a ``|`` inside a
free-text field produces a line that will not decode.
"""
from hms.exceptions import RecordFormatError
from hms.models.patient_models import Patient
from hms.models.system_models import AccessRights
from hms.models.user_models import Role

SEPARATOR = '|'
PATIENT_FIELD_COUNT = 7


def encode(patient: Patient) -> str:
    """Joins the record's fields into a single line (no trailing newline)."""
    return SEPARATOR.join([
        str(patient.id),
        patient.name,
        str(patient.age),
        patient.gender,
        patient.address,
        patient.contact_number,
        patient.diagnosis,
    ])


def _parse_int(value: str, name: str, line: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise RecordFormatError(f"{name} is not an integer: {value!r}", line) from None


def decode(line: str) -> Patient:
    """Parses one stored line, failing closed on any malformed shape."""
    line = line.rstrip('\r\n')
    fields = line.split(SEPARATOR)
    if len(fields) != PATIENT_FIELD_COUNT:
        raise RecordFormatError(
            f"expected {PATIENT_FIELD_COUNT} fields, found {len(fields)}", line)

    patient_id, name, age, gender, address, contact_number, diagnosis = fields
    return Patient(
        id=_parse_int(patient_id, 'id', line),
        name=name,
        age=_parse_int(age, 'age', line),
        gender=gender,
        address=address,
        contact_number=contact_number,
        diagnosis=diagnosis,
    )


def encode_rights(rights: AccessRights) -> str:
    flags = ['1' if enabled else '0' for _, enabled in rights.ordered()]
    return SEPARATOR.join([rights.role.label] + flags)


def decode_rights(line: str, role: Role) -> AccessRights:
    """Parses a rights line already known to belong to ``role``."""
    line = line.rstrip('\r\n')
    label, *tokens = line.split(SEPARATOR)
    if label != role.label:
        raise RecordFormatError(f"rights line belongs to {label!r}, not {role.label!r}", line)
    if len(tokens) != len(role.actions):
        raise RecordFormatError(
            f"{role.label} expects {len(role.actions)} flags, found {len(tokens)}", line)
    if any(token not in ('0', '1') for token in tokens):
        raise RecordFormatError("flags must be 1 or 0", line)

    return AccessRights(
        role=role,
        flags={action: token == '1' for action, token in zip(role.actions, tokens)},
    )


def role_label(line: str) -> str:
    """First field of a stored line."""
    return line.rstrip('\r\n').split(SEPARATOR, 1)[0]
