import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from apps.accounts.models import AVAILABLE_COLORS
from apps.accounts.services import register_user
from apps.groups.models import GroupMembership, GroupRole, MembershipStatus
from apps.groups.services import accept_invite, create_shared_group, invite_member

TEST_PASSWORD = 'TestPass123!'


def make_user(email, nickname, color_index=0):
    """Register a user the way the API does, personal calendar included."""
    return register_user(
        email=email,
        password=TEST_PASSWORD,
        nickname=nickname,
        color_code=AVAILABLE_COLORS[color_index],
    )


def client_for(user):
    """Return a fresh API client authenticated as user."""
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def host(db):
    """User who hosts the shared calendar."""
    return make_user('host@example.com', 'Host', 0)


@pytest.fixture
def guest(db):
    """User who joins the shared calendar as guest."""
    return make_user('guest@example.com', 'Guest', 1)


@pytest.fixture
def outsider(db):
    """User with no access to the shared calendar."""
    return make_user('outsider@example.com', 'Outsider', 2)


@pytest.fixture
def host_client(host):
    return client_for(host)


@pytest.fixture
def guest_client(guest):
    return client_for(guest)


@pytest.fixture
def outsider_client(outsider):
    return client_for(outsider)


@pytest.fixture
def shared_group(host):
    """Shared calendar with the host as its only member."""
    return create_shared_group(user=host, name='Our home')


@pytest.fixture
def group_with_guest(shared_group, host, guest):
    """Shared calendar with host and an accepted guest."""
    invite = invite_member(group_id=shared_group.id, inviter=host, invitee_email=guest.email)
    accept_invite(invite_id=invite.id, user=guest)
    return shared_group


@pytest.fixture
def invited_user(db, shared_group):
    """User holding only an INVITED (not accepted) membership."""
    user = make_user('invited@example.com', 'Invited', 3)
    GroupMembership.objects.create(
        group=shared_group,
        user=user,
        role=GroupRole.GUEST,
        status=MembershipStatus.INVITED,
    )
    return user
