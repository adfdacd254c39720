"""
Group management service.

Handles group CRUD operations with proper transaction safety.
"""

import logging
from typing import List, Optional
from uuid import UUID

from django.db import transaction
from django.utils import timezone

from apps.accounts.models import User
from apps.groups.models import (
    Group,
    GroupMembership,
    GroupRole,
    GroupType,
    MembershipStatus,
    validate_group_fields,
)

from .access import find_group
from .exceptions import (
    CannotDeletePersonalGroupError,
    GroupNotFoundError,
    InvalidGroupError,
    NotGroupHostError,
)

logger = logging.getLogger(__name__)


def _create_group(
    *,
    user: User,
    name: str,
    group_type: str,
    joint_asset_color: Optional[str] = None,
    budget_start_day: Optional[int] = None
) -> Group:
    # Deferred: categories.services imports groups.services
    from apps.categories.services import create_default_categories

    group = Group(
        name=name,
        type=group_type,
        host=user,
    )
    if joint_asset_color is not None:
        group.joint_asset_color = joint_asset_color
    if budget_start_day is not None:
        group.budget_start_day = budget_start_day

    error = validate_group_fields(name=group.name, budget_start_day=group.budget_start_day)
    if error:
        raise InvalidGroupError(error)

    group.save()

    GroupMembership.objects.create(
        group=group,
        user=user,
        role=GroupRole.HOST,
        status=MembershipStatus.ACCEPTED,
        joined_at=timezone.now(),
    )

    create_default_categories(group=group)

    logger.info("Created %s group %s", group_type, group.id)
    return group


@transaction.atomic
def create_personal_group(*, user: User, name: str) -> Group:
    """
    Create the user's PERSONAL calendar.

    Called once at signup. The user becomes host with an accepted
    membership and the group receives the default categories.
    """
    return _create_group(user=user, name=name, group_type=GroupType.PERSONAL)


@transaction.atomic
def create_shared_group(
    *,
    user: User,
    name: str,
    joint_asset_color: Optional[str] = None,
    budget_start_day: Optional[int] = None
) -> Group:
    """
    Create a SHARED calendar hosted by the user.

    Args:
        user: Creator, becomes host
        name: Calendar name (1-30 characters)
        joint_asset_color: Hex color for joint records (default #2196F3)
        budget_start_day: First day of the budget month, 1-28 (default 1)

    Returns:
        Created Group instance

    Raises:
        InvalidGroupError: If name or budget start day are invalid
    """
    return _create_group(
        user=user,
        name=name,
        group_type=GroupType.SHARED,
        joint_asset_color=joint_asset_color,
        budget_start_day=budget_start_day,
    )


def get_group_by_id(*, group_id: UUID) -> Group:
    """
    Get a group by ID.

    Raises:
        GroupNotFoundError: If group doesn't exist
    """
    try:
        return Group.objects.select_related('host').get(id=group_id)
    except Group.DoesNotExist:
        raise GroupNotFoundError(group_id)


def get_user_groups(*, user: User) -> List[Group]:
    """Groups where the user holds an accepted membership, oldest first."""
    return list(
        Group.objects
        .filter(
            memberships__user=user,
            memberships__status=MembershipStatus.ACCEPTED,
        )
        .select_related('host')
        .order_by('created_at')
    )


@transaction.atomic
def update_group(
    *,
    group_id: UUID,
    user: User,
    name: Optional[str] = None,
    joint_asset_color: Optional[str] = None,
    budget_start_day: Optional[int] = None
) -> Group:
    """
    Update group settings (host only).

    Uses select_for_update to prevent concurrent modifications.

    Raises:
        GroupNotFoundError: If group doesn't exist
        NotGroupHostError: If user is not the host
        InvalidGroupError: If the new values break group invariants
    """
    try:
        group = (
            Group.objects
            .select_for_update()
            .get(id=group_id)
        )
    except Group.DoesNotExist:
        raise GroupNotFoundError(group_id)

    if group.host_id != user.id:
        raise NotGroupHostError(group_id)

    update_fields = ['updated_at']

    if name is not None:
        group.name = name
        update_fields.append('name')

    if joint_asset_color is not None:
        group.joint_asset_color = joint_asset_color
        update_fields.append('joint_asset_color')

    if budget_start_day is not None:
        group.budget_start_day = budget_start_day
        update_fields.append('budget_start_day')

    error = validate_group_fields(name=group.name, budget_start_day=group.budget_start_day)
    if error:
        raise InvalidGroupError(error)

    group.save(update_fields=update_fields)

    return group


@transaction.atomic
def delete_group(*, group_id: UUID, user: User) -> None:
    """
    Delete a shared group (host only).

    Cascading deletes remove memberships, invites and every schedule,
    transaction, category and asset source of the group.

    Raises:
        GroupNotFoundError: If group doesn't exist
        CannotDeletePersonalGroupError: If group is the user's personal calendar
        NotGroupHostError: If user is not the host
    """
    group = find_group(group_id=group_id)

    if group.type == GroupType.PERSONAL:
        raise CannotDeletePersonalGroupError()

    if group.host_id != user.id:
        raise NotGroupHostError(group_id)

    group.delete()
    logger.info("Deleted group %s", group_id)
