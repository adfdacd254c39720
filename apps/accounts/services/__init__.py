"""Services for accounts business logic."""

from .exceptions import (
    DuplicateEmailError,
    InvalidCredentialsError,
    InactiveAccountError,
    UserNotFoundError,
    InvalidProfileError,
)
from .user_registration import register_user
from .user_authentication import authenticate_user
from .account_management import (
    get_user_by_id,
    get_user_by_email,
    update_profile,
    validate_profile,
)

__all__ = [
    # Exceptions
    'DuplicateEmailError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'UserNotFoundError',
    'InvalidProfileError',
    # Services
    'register_user',
    'authenticate_user',
    'get_user_by_id',
    'get_user_by_email',
    'update_profile',
    'validate_profile',
]
