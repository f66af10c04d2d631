# /hms/utils/decorators.py
from functools import wraps

from hms.exceptions import PermissionDeniedError
from hms.models.user_models import Role


def audit_log(action, resource):
    """Writes one audit line per attempt of the decorated console action."""
    def decorator(f):
        @wraps(f)
        def decorated_function(session, console, *args, **kwargs):
            audit_logger = session.app.audit_logger
            role = session.role.label if session.role else None

            try:
                result = f(session, console, *args, **kwargs)
            except Exception as e:
                details = f"An error occurred: {str(e)}"
                audit_logger.warning(
                    f"Action='{action}', Resource='{resource}', Role='{role}', Success='False', Details='{details}'"
                )
                raise

            audit_logger.info(
                f"Action='{action}', Resource='{resource}', Role='{role}', Success='True', Details='Completed'"
            )
            return result

        return decorated_function
    return decorator


def admin_required(f):
    """Restricts a console action to the Admin role."""
    @wraps(f)
    def decorated_function(session, console, *args, **kwargs):
        if not session.is_logged_in or session.role is not Role.ADMIN:
            raise PermissionDeniedError(session.role.label if session.role else None, 'admin')
        return f(session, console, *args, **kwargs)
    return decorated_function


def require_permission(action):
    """Checks the logged-in role's flag for ``action`` before running the handler."""
    def decorator(f):
        @wraps(f)
        def decorated_function(session, console, *args, **kwargs):
            if not session.is_logged_in:
                raise PermissionDeniedError(None, action.value)

            session.require(action)
            return f(session, console, *args, **kwargs)
        return decorated_function
    return decorator
