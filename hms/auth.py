# /hms/auth.py
"""
Operator authentication.

Each role has exactly one fixed username/password pair, read from the
configuration at startup and kept only as a bcrypt hash.
"""
from hms.exceptions import InvalidCredentialsError
from hms.models.user_models import Credential, Role


class CredentialStore:
    def __init__(self, credentials):
        self._credentials = {credential.role: credential for credential in credentials}

    @classmethod
    def from_config(cls, config) -> 'CredentialStore':
        """Builds the store from the CREDENTIALS mapping (role label -> (username, password))."""
        rounds = config.get('BCRYPT_LOG_ROUNDS', 12)
        credentials = []
        for role in Role:
            username, password = config['CREDENTIALS'][role.label]
            credentials.append(Credential.create(role, username, password, rounds=rounds))
        return cls(credentials)

    def authenticate(self, role: Role, username: str, password: str) -> Role:
        credential = self._credentials.get(role)
        if credential is None or not credential.check(username, password):
            raise InvalidCredentialsError()
        return role
