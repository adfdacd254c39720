"""
Groups app services layer.

Services contain business logic and orchestrate operations across models.
All state-changing operations use transactions and concurrency protection.
"""

from .exceptions import (
    GroupNotFoundError,
    GroupAccessDeniedError,
    NotGroupHostError,
    InvalidGroupError,
    CannotDeletePersonalGroupError,
    CannotLeaveAsHostError,
    CannotRemoveHostError,
    SelfInviteError,
    GroupFullError,
    AlreadyGroupMemberError,
    InviteAlreadyExistsError,
    InviteNotFoundError,
    InviteNotPendingError,
    MemberNotFoundError,
)

from .access import (
    find_group,
    is_accepted_member,
    verify_group_access,
)

from .group_management import (
    create_personal_group,
    create_shared_group,
    get_group_by_id,
    get_user_groups,
    update_group,
    delete_group,
)

from .membership_management import (
    get_group_members,
    remove_member,
    leave_group,
)

from .invite_management import (
    invite_member,
    get_pending_invites,
    accept_invite,
    reject_invite,
)


__all__ = [
    # Exceptions
    'GroupNotFoundError',
    'GroupAccessDeniedError',
    'NotGroupHostError',
    'InvalidGroupError',
    'CannotDeletePersonalGroupError',
    'CannotLeaveAsHostError',
    'CannotRemoveHostError',
    'SelfInviteError',
    'GroupFullError',
    'AlreadyGroupMemberError',
    'InviteAlreadyExistsError',
    'InviteNotFoundError',
    'InviteNotPendingError',
    'MemberNotFoundError',

    # Access
    'find_group',
    'is_accepted_member',
    'verify_group_access',

    # Group Management
    'create_personal_group',
    'create_shared_group',
    'get_group_by_id',
    'get_user_groups',
    'update_group',
    'delete_group',

    # Membership Management
    'get_group_members',
    'remove_member',
    'leave_group',

    # Invites
    'invite_member',
    'get_pending_invites',
    'accept_invite',
    'reject_invite',
]
