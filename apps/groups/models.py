# ==========================================
# apps/groups/models.py
# ==========================================

from django.core.exceptions import ValidationError
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
import uuid


DEFAULT_JOINT_ASSET_COLOR = '#2196F3'
DEFAULT_BUDGET_START_DAY = 1


class GroupType(models.TextChoices):
    PERSONAL = 'PERSONAL', 'Personal'
    SHARED = 'SHARED', 'Shared'


class GroupRole(models.TextChoices):
    HOST = 'HOST', 'Host'
    GUEST = 'GUEST', 'Guest'


class MembershipStatus(models.TextChoices):
    INVITED = 'INVITED', 'Invited'
    ACCEPTED = 'ACCEPTED', 'Accepted'


class InviteStatus(models.TextChoices):
    PENDING = 'PENDING', 'Pending'
    ACCEPTED = 'ACCEPTED', 'Accepted'
    REJECTED = 'REJECTED', 'Rejected'


def validate_group_fields(*, name, budget_start_day):
    """Return an error message if group fields break invariants, else None."""
    if not name or not name.strip():
        return "Calendar name is required"
    if len(name) > 30:
        return "Calendar name must be at most 30 characters"
    if not 1 <= budget_start_day <= 28:
        return "Budget start day must be between 1 and 28"
    return None


class Group(models.Model):
    """Calendar/budget namespace shared by one or more users."""

    MAX_MEMBERS = 10

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=30)
    type = models.CharField(max_length=10, choices=GroupType.choices, editable=False)
    host = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='hosted_groups')
    joint_asset_color = models.CharField(max_length=7, default=DEFAULT_JOINT_ASSET_COLOR)
    # Capped at 28 so every month has that day
    budget_start_day = models.PositiveSmallIntegerField(
        default=DEFAULT_BUDGET_START_DAY,
        validators=[MinValueValidator(1), MaxValueValidator(28)]
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'calendar_groups'
        indexes = [
            models.Index(fields=['host', 'created_at'], name='calendar_gr_host_id_7c1b2e_idx'),
        ]
        ordering = ['created_at']

    def __str__(self):
        return self.name

    def clean(self):
        error = validate_group_fields(name=self.name, budget_start_day=self.budget_start_day)
        if error:
            raise ValidationError(error)

    @property
    def is_personal(self):
        return self.type == GroupType.PERSONAL

    def accepted_member_count(self):
        return self.memberships.filter(status=MembershipStatus.ACCEPTED).count()


class GroupMembershipQuerySet(models.QuerySet):

    def accepted(self):
        return self.filter(status=MembershipStatus.ACCEPTED)


class GroupMembership(models.Model):
    """User membership in a group with role and acceptance status."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='group_memberships')
    group = models.ForeignKey(Group, on_delete=models.CASCADE, related_name='memberships')
    role = models.CharField(max_length=10, choices=GroupRole.choices, default=GroupRole.GUEST)
    status = models.CharField(max_length=10, choices=MembershipStatus.choices, default=MembershipStatus.INVITED)
    joined_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = GroupMembershipQuerySet.as_manager()

    class Meta:
        db_table = 'group_members'
        constraints = [
            models.UniqueConstraint(fields=['group', 'user'], name='unique_group_member'),
        ]
        indexes = [
            models.Index(fields=['group', 'user', 'status'], name='group_membe_group_i_3f0d7a_idx'),
        ]
        ordering = ['joined_at', 'created_at']

    def __str__(self):
        return f"{self.user.nickname} in {self.group.name} ({self.role}, {self.status})"


class Invite(models.Model):
    """Invitation from a group host to another user."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    group = models.ForeignKey(Group, on_delete=models.CASCADE, related_name='invites')
    inviter = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='sent_invites')
    invitee = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='received_invites')
    status = models.CharField(max_length=10, choices=InviteStatus.choices, default=InviteStatus.PENDING)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'invites'
        constraints = [
            models.UniqueConstraint(fields=['group', 'invitee'], name='unique_group_invitee'),
        ]
        indexes = [
            models.Index(fields=['invitee', 'status'], name='invites_invitee_9a2c41_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.inviter.nickname} -> {self.invitee.nickname} ({self.group.name})"
