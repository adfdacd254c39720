"""
Base domain exceptions shared by every app.

Services raise subclasses of these; the API exception handler in
``config.exceptions`` maps each base class to an HTTP status. Nothing in the
services layer catches one kind and re-raises it as another.

Exception Hierarchy:
    ServiceError (base)
    ├── NotFoundError              -> 404
    ├── AccessDeniedError          -> 403
    ├── InvalidInputError          -> 400
    ├── ConflictError              -> 409
    └── AuthenticationFailedError  -> 401

Usage:
    from apps.core.exceptions import NotFoundError

    class ScheduleNotFoundError(NotFoundError):
        code = 'SCHEDULE_NOT_FOUND'
"""


class ServiceError(Exception):
    """Base exception for all service errors."""

    code = 'SERVICE_ERROR'
    default_message = 'Service error.'

    def __init__(self, message=None):
        super().__init__(message or self.default_message)


class NotFoundError(ServiceError):
    """Referenced entity does not exist."""

    code = 'NOT_FOUND'
    default_message = 'Resource not found.'


class AccessDeniedError(ServiceError):
    """Entity exists but the caller may not touch it."""

    code = 'ACCESS_DENIED'
    default_message = 'You do not have access to this resource.'


class InvalidInputError(ServiceError):
    """An entity invariant was violated."""

    code = 'INVALID_INPUT'
    default_message = 'Invalid input.'


class ConflictError(ServiceError):
    """Operation conflicts with current state (duplicates, in-use rows)."""

    code = 'CONFLICT'
    default_message = 'Conflict with current state.'


class AuthenticationFailedError(ServiceError):
    """Credentials were rejected."""

    code = 'AUTHENTICATION_FAILED'
    default_message = 'Authentication failed.'
