import pytest

from hms import create_app
from hms.console.io import Console
from hms.models.patient_models import Patient
from hms.models.user_models import Role
from hms.session import Session

PASSWORDS = {
    Role.ADMIN: ('admin', 'admin123'),
    Role.DOCTOR: ('doctor', 'doctor123'),
    Role.RECEPTIONIST: ('receptionist', 'reception123'),
}


class ScriptedConsole(Console):
    """Replays canned answers and records everything shown to the operator."""

    def __init__(self, answers=()):
        self.answers = list(answers)
        self.lines = []

    def feed(self, *answers):
        self.answers.extend(answers)

    def echo(self, text=''):
        self.lines.append(text)

    def prompt(self, text, hide_input=False):
        self.lines.append(text)
        if not self.answers:
            raise AssertionError(f"No scripted answer left for prompt {text!r}")
        return self.answers.pop(0)

    @property
    def output(self):
        return "\n".join(self.lines)


@pytest.fixture
def app(tmp_path):
    app = create_app('testing',
                     DATA_DIR=str(tmp_path / 'data'),
                     LOG_DIR=str(tmp_path / 'logs'))
    app.rights.initialize_if_absent()
    return app


@pytest.fixture
def console():
    return ScriptedConsole()


@pytest.fixture
def login(app):
    """Returns a factory for sessions already logged in as a role."""
    def _login(role):
        session = Session(app)
        username, password = PASSWORDS[role]
        session.login(role, username, password)
        return session
    return _login


@pytest.fixture
def make_patient():
    def _make(patient_id=1, name='Jane Doe', diagnosis=''):
        return Patient(id=patient_id, name=name, age=30, gender='F',
                       address='1 Main St', contact_number='5551234',
                       diagnosis=diagnosis)
    return _make


@pytest.fixture
def seeded(app, make_patient):
    """Store holding patients 1, 2 and 3."""
    for patient_id, name in [(1, 'Jane Doe'), (2, 'John Roe'), (3, 'Ann Poe')]:
        app.patients.append(make_patient(patient_id, name))
    return app
