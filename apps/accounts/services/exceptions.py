"""Domain-specific exceptions for accounts services."""

from apps.core.exceptions import (
    AuthenticationFailedError,
    ConflictError,
    InvalidInputError,
    NotFoundError,
)


class DuplicateEmailError(ConflictError):
    """Raised when the email is already registered."""

    code = 'DUPLICATE_EMAIL'

    def __init__(self, email):
        self.email = email
        super().__init__(f"Email is already in use: {email}")


class InvalidCredentialsError(AuthenticationFailedError):
    """Raised when authentication credentials are invalid."""

    code = 'INVALID_CREDENTIALS'
    default_message = 'Invalid email or password'


class InactiveAccountError(AuthenticationFailedError):
    """Raised when account is deactivated."""

    code = 'INACTIVE_ACCOUNT'
    default_message = 'Account is deactivated'


class UserNotFoundError(NotFoundError):
    """Raised when user does not exist."""

    code = 'USER_NOT_FOUND'

    def __init__(self, identifier):
        self.identifier = identifier
        super().__init__(f"User not found: {identifier}")


class InvalidProfileError(InvalidInputError):
    """Raised when profile fields break user invariants."""

    code = 'INVALID_PROFILE'
