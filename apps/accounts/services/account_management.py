"""Account management service."""

from typing import Optional
from uuid import UUID

from django.db import transaction
from django.contrib.auth import get_user_model

from apps.accounts.models import AVAILABLE_COLORS

from .exceptions import InvalidProfileError, UserNotFoundError

User = get_user_model()


def validate_profile(*, nickname: Optional[str] = None, color_code: Optional[str] = None) -> None:
    """Raise InvalidProfileError if nickname or color break user invariants."""
    if nickname is not None and not 2 <= len(nickname.strip()) <= 10:
        raise InvalidProfileError("Nickname must be 2-10 characters")
    if color_code is not None and color_code not in AVAILABLE_COLORS:
        raise InvalidProfileError(f"Invalid color code: {color_code}")


def get_user_by_id(*, user_id: UUID) -> User:
    try:
        return User.objects.get(id=user_id)
    except User.DoesNotExist:
        raise UserNotFoundError(user_id)


def get_user_by_email(*, email: str) -> User:
    try:
        return User.objects.get(email__iexact=email)
    except User.DoesNotExist:
        raise UserNotFoundError(email)


@transaction.atomic
def update_profile(
    *,
    user_id: UUID,
    nickname: Optional[str] = None,
    color_code: Optional[str] = None,
    personal_asset_color: Optional[str] = None,
    profile_image_url: Optional[str] = None
) -> User:
    """
    Update the mutable profile fields of a user.

    Only fields that are not None are touched.

    Raises:
        UserNotFoundError: If user doesn't exist
        InvalidProfileError: If nickname or color are invalid
    """
    try:
        user = (
            User.objects
            .select_for_update()
            .get(id=user_id)
        )
    except User.DoesNotExist:
        raise UserNotFoundError(user_id)

    validate_profile(nickname=nickname, color_code=color_code)

    update_fields = []
    if nickname is not None:
        user.nickname = nickname.strip()
        update_fields.append('nickname')
    if color_code is not None:
        user.color_code = color_code
        update_fields.append('color_code')
    if personal_asset_color is not None:
        user.personal_asset_color = personal_asset_color
        update_fields.append('personal_asset_color')
    if profile_image_url is not None:
        user.profile_image_url = profile_image_url
        update_fields.append('profile_image_url')

    if update_fields:
        user.save(update_fields=update_fields)

    return user
