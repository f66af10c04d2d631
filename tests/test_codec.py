import pytest

from hms.exceptions import RecordFormatError
from hms.models.patient_models import Patient
from hms.models.system_models import AccessRights
from hms.models.user_models import Action, Role
from hms.storage import codec


def test_encode_joins_fields_in_fixed_order(make_patient):
    patient = make_patient(diagnosis='Flu')
    assert codec.encode(patient) == '1|Jane Doe|30|F|1 Main St|5551234|Flu'


def test_encode_keeps_empty_diagnosis_as_trailing_field(make_patient):
    assert codec.encode(make_patient()).endswith('|5551234|')


@pytest.mark.parametrize('diagnosis', ['', 'Type 2 diabetes', 'fever, cough'])
def test_round_trip(make_patient, diagnosis):
    patient = make_patient(patient_id=42, diagnosis=diagnosis)
    assert codec.decode(codec.encode(patient)) == patient


def test_decode_strips_line_ending():
    patient = codec.decode('7|Ann|5|O|Road 9|123|\r\n')
    assert patient == Patient(7, 'Ann', 5, 'O', 'Road 9', '123', '')


@pytest.mark.parametrize('line', [
    '',
    '1|Jane|30|F|1 Main St|5551234',
    '1|Jane|30|F|1 Main St|5551234|Flu|extra',
    'x|Jane|30|F|1 Main St|5551234|',
    '1|Jane|thirty|F|1 Main St|5551234|',
])
def test_decode_fails_closed(line):
    with pytest.raises(RecordFormatError):
        codec.decode(line)


def test_separator_inside_free_text_breaks_decoding(make_patient):
    patient = make_patient(name='Jane | Doe')
    line = codec.encode(patient)
    with pytest.raises(RecordFormatError):
        codec.decode(line)


def test_rights_line_round_trip():
    rights = AccessRights(Role.DOCTOR, {Action.VIEW: True, Action.UPDATE: False, Action.DELETE: True})
    line = codec.encode_rights(rights)
    assert line == 'Doctor|1|0|1'
    assert codec.decode_rights(line, Role.DOCTOR) == rights


def test_rights_line_uses_role_action_order():
    rights = AccessRights(Role.RECEPTIONIST, {Action.REGISTER: False, Action.VIEW: True})
    assert codec.encode_rights(rights) == 'Receptionist|1|0'


@pytest.mark.parametrize('line', ['Doctor|1|1', 'Doctor|1|1|1|1', 'Doctor|1|yes|1', 'Receptionist|1|1'])
def test_decode_rights_rejects_bad_lines(line):
    with pytest.raises(RecordFormatError):
        codec.decode_rights(line, Role.DOCTOR)
