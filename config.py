# /config.py
import os
import logging
from logging.handlers import RotatingFileHandler

from dotenv import find_dotenv, load_dotenv

# Settings below are read at import, so .env from the working directory goes first
load_dotenv(find_dotenv(usecwd=True))

DEFAULT_PASSWORDS = {'admin123', 'doctor123', 'reception123'}


def _credential(role, username, password):
    """Reads a role's username/password pair, falling back to the defaults."""
    prefix = f'HMS_{role.upper()}'
    return (os.environ.get(f'{prefix}_USERNAME') or username,
            os.environ.get(f'{prefix}_PASSWORD') or password)


class Config:
    """Base configuration for the records console"""
    # Storage
    DATA_DIR = os.environ.get('HMS_DATA_DIR') or 'data'
    PATIENT_FILE = 'patients.txt'
    RIGHTS_FILE = 'access_rights.txt'

    # Logging
    LOG_DIR = os.environ.get('HMS_LOG_DIR') or 'logs'
    LOG_MAX_BYTES = 10240000
    LOG_BACKUP_COUNT = 10
    AUDIT_BACKUP_COUNT = 20

    # Security
    BCRYPT_LOG_ROUNDS = 12

    # Fixed operator credentials, keyed by role label
    CREDENTIALS = {
        'Admin': _credential('admin', 'admin', 'admin123'),
        'Doctor': _credential('doctor', 'doctor', 'doctor123'),
        'Receptionist': _credential('receptionist', 'receptionist', 'reception123'),
    }

    DEBUG = False
    TESTING = False

    @staticmethod
    def init_app(app):
        """Initialize application-specific configuration"""
        log_dir = app.config['LOG_DIR']
        if not os.path.exists(log_dir):
            os.makedirs(log_dir)

        # Main application logging with rotation
        if not app.logger.handlers:
            file_handler = RotatingFileHandler(
                os.path.join(log_dir, 'hms.log'),
                maxBytes=app.config['LOG_MAX_BYTES'],
                backupCount=app.config['LOG_BACKUP_COUNT'])
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
            ))
            file_handler.setLevel(logging.INFO)
            app.logger.addHandler(file_handler)
            app.logger.setLevel(logging.INFO)
        app.logger.info('Records console startup')

        # Audit trail of logins and gated actions
        audit_logger = logging.getLogger('HMS_AUDIT')
        if not audit_logger.handlers:
            audit_handler = RotatingFileHandler(
                os.path.join(log_dir, 'hms_audit.log'),
                maxBytes=app.config['LOG_MAX_BYTES'],
                backupCount=app.config['AUDIT_BACKUP_COUNT'])
            audit_handler.setFormatter(logging.Formatter(
                '%(asctime)s - %(message)s'
            ))
            audit_logger.addHandler(audit_handler)
            audit_logger.setLevel(logging.INFO)
            audit_logger.propagate = False  # Prevent duplicate logs

        app.audit_logger = audit_logger


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True

    @staticmethod
    def init_app(app):
        Config.init_app(app)

        # Echo application logs to stderr while developing
        if not any(isinstance(h, logging.StreamHandler) and not isinstance(h, RotatingFileHandler)
                   for h in app.logger.handlers):
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(logging.Formatter(
                '%(asctime)s %(levelname)s: %(message)s'
            ))
            app.logger.addHandler(console_handler)
            app.logger.setLevel(logging.DEBUG)


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    BCRYPT_LOG_ROUNDS = 4  # Fast hashing for tests
    CREDENTIALS = {
        'Admin': ('admin', 'admin123'),
        'Doctor': ('doctor', 'doctor123'),
        'Receptionist': ('receptionist', 'reception123'),
    }

    @staticmethod
    def init_app(app):
        # No file handlers; records propagate so tests can capture them
        app.logger.setLevel(logging.DEBUG)
        audit_logger = logging.getLogger('HMS_AUDIT')
        audit_logger.setLevel(logging.INFO)
        audit_logger.propagate = True
        app.audit_logger = audit_logger


class ProductionConfig(Config):
    """Production configuration"""

    @classmethod
    def init_app(cls, app):
        Config.init_app(app)

        # Refuse to run with the well-known default passwords
        for role, (username, password) in app.config['CREDENTIALS'].items():
            if password in DEFAULT_PASSWORDS:
                app.logger.error(f'Default password in use for role {role} in production!')
                raise ValueError(f'HMS_{role.upper()}_PASSWORD must be set in production')


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': Config
}
