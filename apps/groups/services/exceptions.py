"""
Domain-specific exceptions for groups app.

Each one subclasses a base kind from ``apps.core.exceptions`` so the API
exception handler can map it to a status code.
"""

from apps.core.exceptions import (
    AccessDeniedError,
    ConflictError,
    InvalidInputError,
    NotFoundError,
)


class GroupNotFoundError(NotFoundError):
    """Raised when a group does not exist."""

    code = 'GROUP_NOT_FOUND'

    def __init__(self, group_id):
        self.group_id = group_id
        super().__init__(f"Group not found: {group_id}")


class GroupAccessDeniedError(AccessDeniedError):
    """Raised when the user is not an accepted member of the group."""

    code = 'GROUP_ACCESS_DENIED'

    def __init__(self, group_id):
        self.group_id = group_id
        super().__init__(f"No access to group: {group_id}")


class NotGroupHostError(AccessDeniedError):
    """Raised when a host-only action is attempted by a guest."""

    code = 'NOT_GROUP_HOST'

    def __init__(self, group_id):
        self.group_id = group_id
        super().__init__(f"Only the host can do this in group: {group_id}")


class InvalidGroupError(InvalidInputError):
    """Raised when group fields break group invariants."""

    code = 'INVALID_GROUP'


class CannotDeletePersonalGroupError(InvalidInputError):
    code = 'CANNOT_DELETE_PERSONAL_GROUP'
    default_message = 'A personal calendar cannot be deleted'


class CannotLeaveAsHostError(InvalidInputError):
    code = 'CANNOT_LEAVE_AS_HOST'
    default_message = 'The host cannot leave the group'


class SelfInviteError(InvalidInputError):
    code = 'SELF_INVITE'
    default_message = 'You cannot invite yourself'


class GroupFullError(ConflictError):
    """Raised when the group already has MAX_MEMBERS accepted members."""

    code = 'GROUP_FULL'

    def __init__(self, group_id):
        self.group_id = group_id
        super().__init__(f"Group is full: {group_id}")


class AlreadyGroupMemberError(ConflictError):
    code = 'ALREADY_GROUP_MEMBER'

    def __init__(self, email):
        super().__init__(f"Already a member: {email}")


class InviteAlreadyExistsError(ConflictError):
    code = 'INVITE_ALREADY_EXISTS'

    def __init__(self, email):
        super().__init__(f"Invite already pending for: {email}")


class InviteNotFoundError(NotFoundError):
    code = 'INVITE_NOT_FOUND'

    def __init__(self, invite_id):
        self.invite_id = invite_id
        super().__init__(f"Invite not found: {invite_id}")


class InviteNotPendingError(InvalidInputError):
    code = 'INVITE_NOT_PENDING'
    default_message = 'Invite has already been answered'


class MemberNotFoundError(NotFoundError):
    code = 'MEMBER_NOT_FOUND'

    def __init__(self, user_id):
        self.user_id = user_id
        super().__init__(f"Member not found: {user_id}")


class CannotRemoveHostError(InvalidInputError):
    code = 'CANNOT_REMOVE_HOST'
    default_message = 'The host cannot be removed from the group'
