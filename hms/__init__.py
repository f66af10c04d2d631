import os
import logging

from config import config as config_by_name
from hms.auth import CredentialStore
from hms.permissions import PermissionGate
from hms.storage.patient_store import PatientStore
from hms.storage.rights_store import AccessRightsStore


class HospitalApp:
    """Application context: configuration, loggers and the stores.

    One instance is built per process by create_app() and handed to the
    session and commands that need it.
    """

    def __init__(self, config_object, **overrides):
        self.config = {key: getattr(config_object, key)
                       for key in dir(config_object) if key.isupper()}
        self.config.update(overrides)
        self.logger = logging.getLogger('hms')
        self.audit_logger = None

    def data_path(self, filename):
        return os.path.join(self.config['DATA_DIR'], filename)


def create_app(config_name='default', **overrides):
    config_object = config_by_name[config_name]
    app = HospitalApp(config_object, **overrides)

    # Initialize logging for the selected configuration
    config_object.init_app(app)

    # Stores are owned by the app, not module globals
    app.patients = PatientStore(app.data_path(app.config['PATIENT_FILE']))
    app.rights = AccessRightsStore(app.data_path(app.config['RIGHTS_FILE']))
    app.gate = PermissionGate(app.rights)
    app.credentials = CredentialStore.from_config(app.config)

    app.logger.debug(f"Using data directory {app.config['DATA_DIR']}")
    return app
