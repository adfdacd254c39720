import pytest
from django.urls import reverse
from rest_framework import status

from apps.accounts.models import User, AVAILABLE_COLORS
from apps.categories.models import Category
from apps.groups.models import Group, GroupMembership, GroupRole, GroupType, MembershipStatus


# =============================================================================
# Registration Tests
# =============================================================================

@pytest.mark.django_db
class TestRegistration:
    """Tests for POST /api/auth/register/"""

    def _payload(self, **overrides):
        data = {
            'email': 'newuser@example.com',
            'password': 'SecurePass123!',
            'password_confirm': 'SecurePass123!',
            'nickname': 'Newbie',
            'color_code': AVAILABLE_COLORS[2],
        }
        data.update(overrides)
        return data

    def test_register_success(self, api_client):
        """Successfully register a new user."""
        url = reverse('users:register')
        response = api_client.post(url, self._payload())

        assert response.status_code == status.HTTP_201_CREATED
        assert 'access' in response.data['tokens']
        assert 'refresh' in response.data['tokens']
        assert response.data['user']['nickname'] == 'Newbie'
        assert User.objects.filter(email='newuser@example.com').exists()

    def test_register_creates_personal_calendar(self, api_client):
        """Every new user gets a personal group they host."""
        url = reverse('users:register')
        api_client.post(url, self._payload())

        user = User.objects.get(email='newuser@example.com')
        group = Group.objects.get(host=user)
        assert group.type == GroupType.PERSONAL

        membership = GroupMembership.objects.get(group=group, user=user)
        assert membership.role == GroupRole.HOST
        assert membership.status == MembershipStatus.ACCEPTED

        # Default categories are seeded with the group
        assert Category.objects.filter(group=group, is_default=True).count() == 9

    def test_register_duplicate_email(self, api_client, host):
        """Cannot register with existing email."""
        url = reverse('users:register')
        response = api_client.post(url, self._payload(email=host.email))

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.data['code'] == 'DUPLICATE_EMAIL'

    def test_register_password_mismatch(self, api_client):
        """Registration fails when passwords don't match."""
        url = reverse('users:register')
        response = api_client.post(url, self._payload(password_confirm='DifferentPass123!'))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'password_confirm' in response.data

    def test_register_unknown_color(self, api_client):
        """Only palette colors are accepted."""
        url = reverse('users:register')
        response = api_client.post(url, self._payload(color_code='#000000'))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'color_code' in response.data

    def test_register_short_nickname(self, api_client):
        url = reverse('users:register')
        response = api_client.post(url, self._payload(nickname='A'))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert not User.objects.filter(email='newuser@example.com').exists()


# =============================================================================
# Login Tests
# =============================================================================

@pytest.mark.django_db
class TestLogin:
    """Tests for POST /api/auth/login/"""

    def test_login_success(self, api_client, host):
        url = reverse('users:login')
        response = api_client.post(url, {'email': host.email, 'password': 'TestPass123!'})

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data['tokens']
        assert response.data['user']['email'] == host.email

    def test_login_is_case_insensitive_on_email(self, api_client, host):
        url = reverse('users:login')
        response = api_client.post(url, {'email': host.email.upper(), 'password': 'TestPass123!'})

        assert response.status_code == status.HTTP_200_OK

    def test_login_wrong_password(self, api_client, host):
        url = reverse('users:login')
        response = api_client.post(url, {'email': host.email, 'password': 'WrongPass123!'})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['code'] == 'INVALID_CREDENTIALS'

    def test_login_unknown_email(self, api_client):
        url = reverse('users:login')
        response = api_client.post(url, {'email': 'nobody@example.com', 'password': 'TestPass123!'})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_login_inactive_account(self, api_client, host):
        host.is_active = False
        host.save()

        url = reverse('users:login')
        response = api_client.post(url, {'email': host.email, 'password': 'TestPass123!'})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['code'] == 'INACTIVE_ACCOUNT'


# =============================================================================
# Profile Tests
# =============================================================================

@pytest.mark.django_db
class TestCurrentUser:
    """Tests for GET/PATCH /api/auth/me/"""

    def test_get_profile(self, host_client, host):
        url = reverse('users:current-user')
        response = host_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['email'] == host.email
        assert response.data['color_code'] == host.color_code

    def test_get_profile_unauthenticated(self, api_client):
        url = reverse('users:current-user')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_update_profile(self, host_client, host):
        url = reverse('users:current-user')
        response = host_client.patch(url, {
            'nickname': 'Renamed',
            'personal_asset_color': '#123ABC',
        })

        assert response.status_code == status.HTTP_200_OK
        host.refresh_from_db()
        assert host.nickname == 'Renamed'
        assert host.personal_asset_color == '#123ABC'

    def test_update_profile_invalid_asset_color(self, host_client):
        url = reverse('users:current-user')
        response = host_client.patch(url, {'personal_asset_color': 'blue'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestPlainHttp:
    """Requests over plain HTTP are served, not redirected to HTTPS."""

    def test_health_check(self, api_client):
        response = api_client.get(reverse('health-check'))

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {'status': 'ok'}

    def test_login_not_redirected(self, api_client, host):
        response = api_client.post(reverse('users:login'), {'email': host.email, 'password': 'TestPass123!'})

        assert response.status_code == status.HTTP_200_OK
