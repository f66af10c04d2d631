# /hms/utils/validators.py
from hms.exceptions import InvalidInputError
from hms.storage.codec import SEPARATOR

MAX_AGE = 150
GENDER_CODES = ('M', 'F', 'O')


def parse_int(value: str) -> int:
    try:
        return int(value.strip())
    except (ValueError, AttributeError):
        raise InvalidInputError("Invalid input: please enter a whole number") from None


def validate_text(value: str, field: str, required: bool = True) -> str:
    """Free text must not contain the field separator."""
    value = value.strip()
    if required and not value:
        raise InvalidInputError(f"Invalid input: {field} is required")
    if SEPARATOR in value:
        raise InvalidInputError(f"Invalid input: {field} may not contain '{SEPARATOR}'")
    return value


def validate_age(value: str) -> int:
    age = parse_int(value)
    if not 0 <= age <= MAX_AGE:
        raise InvalidInputError(f"Invalid input: age must be between 0 and {MAX_AGE}")
    return age


def validate_gender(value: str) -> str:
    gender = value.strip().upper()
    if gender not in GENDER_CODES:
        raise InvalidInputError(f"Invalid input: gender must be one of {'/'.join(GENDER_CODES)}")
    return gender


def validate_contact(value: str) -> str:
    contact = value.strip()
    if not (contact.isascii() and contact.isdigit()):
        raise InvalidInputError("Invalid input: contact number must contain digits only")
    return contact


def parse_yes_no(value: str) -> bool:
    answer = value.strip().upper()
    if answer in ('Y', 'YES'):
        return True
    if answer in ('N', 'NO'):
        return False
    raise InvalidInputError("Invalid input: please answer Y or N")
