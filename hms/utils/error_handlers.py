# /hms/utils/error_handlers.py
import logging
from functools import wraps

from hms.exceptions import (
    HospitalError, PermissionDeniedError, RecordFormatError, RecordNotFoundError,
)

logger = logging.getLogger(__name__)


def handle_action_errors(f):
    """Reports domain errors raised by a menu action and keeps the session alive."""
    @wraps(f)
    def decorated_function(session, console, *args, **kwargs):
        try:
            return f(session, console, *args, **kwargs)
        except (PermissionDeniedError, RecordNotFoundError) as e:
            console.echo(str(e))
        except RecordFormatError as e:
            logger.error(f"Stored data is corrupt: {e}")
            console.echo(f"{e}. The records file needs repair.")
        except HospitalError as e:
            logger.error(f"Action {f.__name__} failed: {e}")
            console.echo(str(e))
        return None
    return decorated_function
