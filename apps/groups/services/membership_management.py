"""
Membership management service.

Listing, removing and leaving group memberships.
"""

import logging
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet

from apps.accounts.models import User
from apps.groups.models import GroupMembership

from .access import find_group, verify_group_access
from .exceptions import (
    CannotLeaveAsHostError,
    CannotRemoveHostError,
    GroupAccessDeniedError,
    MemberNotFoundError,
    NotGroupHostError,
)

logger = logging.getLogger(__name__)


def get_group_members(*, group_id: UUID, user: User) -> QuerySet:
    """
    Get all members of a group with user details.

    Raises:
        GroupNotFoundError: If group doesn't exist
        GroupAccessDeniedError: If user is not an accepted member
    """
    find_group(group_id=group_id)
    verify_group_access(group_id=group_id, user_id=user.id)

    return (
        GroupMembership.objects
        .filter(group_id=group_id)
        .select_related('user')
        .order_by('joined_at', 'created_at')
    )


@transaction.atomic
def remove_member(*, group_id: UUID, host: User, user_id: UUID) -> None:
    """
    Remove a member from the group (host only).

    Raises:
        GroupNotFoundError: If group doesn't exist
        NotGroupHostError: If the acting user is not the host
        CannotRemoveHostError: If the target is the host
        MemberNotFoundError: If the target is not in the group
    """
    group = find_group(group_id=group_id)

    if group.host_id != host.id:
        raise NotGroupHostError(group_id)

    if group.host_id == user_id:
        raise CannotRemoveHostError()

    deleted, _ = GroupMembership.objects.filter(group_id=group_id, user_id=user_id).delete()
    if not deleted:
        raise MemberNotFoundError(user_id)

    logger.info("Removed member %s from group %s", user_id, group_id)


@transaction.atomic
def leave_group(*, group_id: UUID, user: User) -> None:
    """
    Leave a group.

    Raises:
        GroupNotFoundError: If group doesn't exist
        CannotLeaveAsHostError: If user is the host
        GroupAccessDeniedError: If user is not a member
    """
    group = find_group(group_id=group_id)

    if group.host_id == user.id:
        raise CannotLeaveAsHostError()

    deleted, _ = GroupMembership.objects.filter(group_id=group_id, user=user).delete()
    if not deleted:
        raise GroupAccessDeniedError(group_id)

    logger.info("User %s left group %s", user.id, group_id)
