# /hms/exceptions.py


class HospitalError(Exception):
    """Base class for every operator-visible error."""
    message = "Operation failed"

    def __init__(self, message: str = None):
        super().__init__(message or self.message)


class InvalidCredentialsError(HospitalError):
    message = "Invalid username or password"


class InvalidInputError(HospitalError):
    message = "Invalid input"


class StorageError(HospitalError):
    def __init__(self, message: str, path: str = None):
        self.path = path
        super().__init__(f"{message}: {path}" if path else message)


class RecordFormatError(HospitalError):
    def __init__(self, reason: str, line: str = None, line_number: int = None):
        self.reason = reason
        self.line = line
        self.line_number = line_number
        where = f" (line {line_number})" if line_number else ""
        super().__init__(f"Malformed stored record{where}: {reason}")


class RecordNotFoundError(HospitalError):
    def __init__(self, patient_id: int = None):
        self.patient_id = patient_id
        super().__init__("Patient not found")


class RoleNotFoundError(HospitalError):
    def __init__(self, role: str):
        self.role = role
        super().__init__(f"Role not found: {role}")


class PermissionDeniedError(HospitalError):
    def __init__(self, role: str = None, action: str = None):
        self.role = role
        self.action = action
        super().__init__(
            "Permission denied: The administrator has restricted your access to this function"
        )
