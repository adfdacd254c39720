"""
Group access checks.

Every service that reads or writes group-scoped data calls
``verify_group_access`` before touching anything else. Other apps import
this module directly rather than the package, so it must stay free of
imports from their services.
"""

from uuid import UUID

from apps.groups.models import Group, GroupMembership

from .exceptions import GroupAccessDeniedError, GroupNotFoundError


def find_group(*, group_id: UUID) -> Group:
    """
    Fetch a group by id.

    Raises:
        GroupNotFoundError: If group doesn't exist
    """
    try:
        return Group.objects.get(id=group_id)
    except Group.DoesNotExist:
        raise GroupNotFoundError(group_id)


def is_accepted_member(*, group_id: UUID, user_id: UUID) -> bool:
    """Return True if the user holds an ACCEPTED membership in the group."""
    return (
        GroupMembership.objects
        .accepted()
        .filter(group_id=group_id, user_id=user_id)
        .exists()
    )


def verify_group_access(*, group_id: UUID, user_id: UUID) -> None:
    """
    Ensure the user may read and write the group's data.

    Pure read. Invited-but-not-accepted members are rejected the same way
    as strangers.

    Raises:
        GroupAccessDeniedError: If the user is not an accepted member
    """
    if not is_accepted_member(group_id=group_id, user_id=user_id):
        raise GroupAccessDeniedError(group_id)
