"""
Invite management service.

A host invites another registered user by email; the invitee accepts or
rejects. Accepting creates an ACCEPTED GUEST membership.
"""

import logging
from typing import List
from uuid import UUID

from django.db import transaction
from django.utils import timezone

from apps.accounts.models import User
from apps.accounts.services import get_user_by_email
from apps.groups.models import (
    Group,
    GroupMembership,
    GroupRole,
    Invite,
    InviteStatus,
    MembershipStatus,
)

from .exceptions import (
    AlreadyGroupMemberError,
    GroupFullError,
    GroupNotFoundError,
    InviteAlreadyExistsError,
    InviteNotFoundError,
    InviteNotPendingError,
    NotGroupHostError,
    SelfInviteError,
)

logger = logging.getLogger(__name__)


def _ensure_capacity(group: Group) -> None:
    if group.accepted_member_count() >= Group.MAX_MEMBERS:
        raise GroupFullError(group.id)


@transaction.atomic
def invite_member(*, group_id: UUID, inviter: User, invitee_email: str) -> Invite:
    """
    Invite a registered user to the group (host only).

    A previously answered invite for the same user is reopened rather than
    duplicated.

    Raises:
        GroupNotFoundError: If group doesn't exist
        NotGroupHostError: If inviter is not the host
        UserNotFoundError: If no user has that email
        SelfInviteError: If the host invites themselves
        AlreadyGroupMemberError: If invitee is already an accepted member
        InviteAlreadyExistsError: If a pending invite exists
        GroupFullError: If the group has reached MAX_MEMBERS
    """
    try:
        group = (
            Group.objects
            .select_for_update()
            .get(id=group_id)
        )
    except Group.DoesNotExist:
        raise GroupNotFoundError(group_id)

    if group.host_id != inviter.id:
        raise NotGroupHostError(group_id)

    invitee = get_user_by_email(email=invitee_email)

    if invitee.id == inviter.id:
        raise SelfInviteError()

    if GroupMembership.objects.accepted().filter(group=group, user=invitee).exists():
        raise AlreadyGroupMemberError(invitee_email)

    existing = Invite.objects.filter(group=group, invitee=invitee).first()
    if existing is not None and existing.status == InviteStatus.PENDING:
        raise InviteAlreadyExistsError(invitee_email)

    _ensure_capacity(group)

    if existing is not None:
        existing.inviter = inviter
        existing.status = InviteStatus.PENDING
        existing.save(update_fields=['inviter', 'status', 'updated_at'])
        invite = existing
    else:
        invite = Invite.objects.create(group=group, inviter=inviter, invitee=invitee)

    logger.info("Invite %s created for group %s", invite.id, group_id)
    return invite


def get_pending_invites(*, user: User) -> List[Invite]:
    """Pending invites addressed to the user, newest first."""
    return list(
        Invite.objects
        .filter(invitee=user, status=InviteStatus.PENDING)
        .select_related('group', 'inviter')
        .order_by('-created_at')
    )


def _get_own_pending_invite(invite_id: UUID, user: User) -> Invite:
    try:
        invite = (
            Invite.objects
            .select_for_update()
            .select_related('group')
            .get(id=invite_id)
        )
    except Invite.DoesNotExist:
        raise InviteNotFoundError(invite_id)

    # Someone else's invite is reported as missing
    if invite.invitee_id != user.id:
        raise InviteNotFoundError(invite_id)

    if invite.status != InviteStatus.PENDING:
        raise InviteNotPendingError()

    return invite


@transaction.atomic
def accept_invite(*, invite_id: UUID, user: User) -> GroupMembership:
    """
    Accept a pending invite and join the group as GUEST.

    Raises:
        InviteNotFoundError: If invite doesn't exist or is not addressed to user
        InviteNotPendingError: If invite was already answered
        GroupFullError: If the group filled up since the invite was sent
    """
    invite = _get_own_pending_invite(invite_id, user)

    _ensure_capacity(invite.group)

    invite.status = InviteStatus.ACCEPTED
    invite.save(update_fields=['status', 'updated_at'])

    membership, _ = GroupMembership.objects.update_or_create(
        group=invite.group,
        user=user,
        defaults={
            'role': GroupRole.GUEST,
            'status': MembershipStatus.ACCEPTED,
            'joined_at': timezone.now(),
        },
    )

    logger.info("User %s joined group %s", user.id, invite.group_id)
    return membership


@transaction.atomic
def reject_invite(*, invite_id: UUID, user: User) -> None:
    """
    Reject a pending invite.

    Raises:
        InviteNotFoundError: If invite doesn't exist or is not addressed to user
        InviteNotPendingError: If invite was already answered
    """
    invite = _get_own_pending_invite(invite_id, user)
    invite.status = InviteStatus.REJECTED
    invite.save(update_fields=['status', 'updated_at'])
