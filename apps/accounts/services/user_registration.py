"""User registration service."""

import logging

from django.db import transaction
from django.contrib.auth import get_user_model

from .exceptions import DuplicateEmailError
from .account_management import validate_profile

logger = logging.getLogger(__name__)

User = get_user_model()


@transaction.atomic
def register_user(
    *,
    email: str,
    password: str,
    nickname: str,
    color_code: str,
    profile_image_url: str = None
) -> User:
    """
    Register a new user together with their personal calendar.

    Every user owns exactly one PERSONAL group, created here in the same
    transaction as the account itself.

    Args:
        email: User's email address
        password: User's password (will be hashed)
        nickname: Display nickname (2-10 characters)
        color_code: One of AVAILABLE_COLORS
        profile_image_url: Optional avatar URL

    Returns:
        Created User instance

    Raises:
        DuplicateEmailError: If the email is already registered
        InvalidProfileError: If nickname or color are invalid
    """
    # Deferred: groups.services imports accounts.services
    from apps.groups.services import create_personal_group

    email = User.objects.normalize_email(email)
    if User.objects.filter(email__iexact=email).exists():
        raise DuplicateEmailError(email)

    validate_profile(nickname=nickname, color_code=color_code)

    user = User.objects.create_user(
        email=email,
        password=password,
        nickname=nickname,
        color_code=color_code,
        profile_image_url=profile_image_url,
    )

    create_personal_group(user=user, name=f"{nickname}'s calendar")

    logger.info("Registered user %s", user.id)
    return user
