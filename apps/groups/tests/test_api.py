import pytest
from uuid import uuid4
from django.urls import reverse
from rest_framework import status

from apps.groups.models import Group, GroupType, Invite, InviteStatus
from apps.groups.services import invite_member, is_accepted_member


# =============================================================================
# Group CRUD Tests
# =============================================================================

@pytest.mark.django_db
class TestGroupList:
    """Tests for GET /api/groups/"""

    def test_list_groups_returns_personal_and_shared(self, host_client, shared_group):
        url = reverse('groups:group-list')
        response = host_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        types = sorted(g['type'] for g in response.data)
        assert types == [GroupType.PERSONAL, GroupType.SHARED]

    def test_list_groups_excludes_non_member_groups(self, outsider_client, shared_group):
        url = reverse('groups:group-list')
        response = outsider_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert all(g['type'] == GroupType.PERSONAL for g in response.data)

    def test_list_groups_unauthenticated(self, api_client):
        url = reverse('groups:group-list')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestGroupCreate:
    """Tests for POST /api/groups/"""

    def test_create_group(self, host_client, host):
        url = reverse('groups:group-list')
        response = host_client.post(url, {'name': 'Trip fund', 'budget_start_day': 15})

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['type'] == GroupType.SHARED
        assert response.data['host']['id'] == str(host.id)
        assert response.data['member_count'] == 1

    def test_create_group_budget_day_out_of_range(self, host_client):
        url = reverse('groups:group-list')
        response = host_client.post(url, {'name': 'Trip fund', 'budget_start_day': 31})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_group_blank_name(self, host_client):
        url = reverse('groups:group-list')
        response = host_client.post(url, {'name': '   '})

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestGroupDetail:
    """Tests for GET/PATCH/DELETE /api/groups/{id}/"""

    def test_retrieve_as_member(self, guest_client, group_with_guest):
        url = reverse('groups:group-detail', kwargs={'pk': group_with_guest.id})
        response = guest_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['member_count'] == 2

    def test_retrieve_as_outsider(self, outsider_client, shared_group):
        url = reverse('groups:group-detail', kwargs={'pk': shared_group.id})
        response = outsider_client.get(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_retrieve_unknown_group(self, host_client):
        url = reverse('groups:group-detail', kwargs={'pk': uuid4()})
        response = host_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_update_as_host(self, host_client, shared_group):
        url = reverse('groups:group-detail', kwargs={'pk': shared_group.id})
        response = host_client.patch(url, {'joint_asset_color': '#00FF00'})

        assert response.status_code == status.HTTP_200_OK
        shared_group.refresh_from_db()
        assert shared_group.joint_asset_color == '#00FF00'

    def test_update_as_guest(self, guest_client, group_with_guest):
        url = reverse('groups:group-detail', kwargs={'pk': group_with_guest.id})
        response = guest_client.patch(url, {'name': 'Mine now'})

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data['code'] == 'NOT_GROUP_HOST'

    def test_delete_as_host(self, host_client, shared_group):
        url = reverse('groups:group-detail', kwargs={'pk': shared_group.id})
        response = host_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Group.objects.filter(id=shared_group.id).exists()

    def test_delete_personal_group(self, host_client, host):
        personal = Group.objects.get(host=host, type=GroupType.PERSONAL)
        url = reverse('groups:group-detail', kwargs={'pk': personal.id})
        response = host_client.delete(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['code'] == 'CANNOT_DELETE_PERSONAL_GROUP'


# =============================================================================
# Membership Tests
# =============================================================================

@pytest.mark.django_db
class TestMembers:
    """Tests for member actions on /api/groups/{id}/"""

    def test_list_members(self, guest_client, group_with_guest, host, guest):
        url = reverse('groups:group-members', kwargs={'pk': group_with_guest.id})
        response = guest_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [m['user']['id'] for m in response.data] == [str(host.id), str(guest.id)]
        assert [m['role'] for m in response.data] == ['HOST', 'GUEST']

    def test_list_members_as_outsider(self, outsider_client, shared_group):
        url = reverse('groups:group-members', kwargs={'pk': shared_group.id})
        response = outsider_client.get(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_remove_member(self, host_client, group_with_guest, guest):
        url = reverse('groups:group-remove-member', kwargs={'pk': group_with_guest.id, 'user_id': guest.id})
        response = host_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not is_accepted_member(group_id=group_with_guest.id, user_id=guest.id)

    def test_remove_host(self, host_client, shared_group, host):
        url = reverse('groups:group-remove-member', kwargs={'pk': shared_group.id, 'user_id': host.id})
        response = host_client.delete(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_leave(self, guest_client, group_with_guest, guest):
        url = reverse('groups:group-leave', kwargs={'pk': group_with_guest.id})
        response = guest_client.post(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not is_accepted_member(group_id=group_with_guest.id, user_id=guest.id)

    def test_host_cannot_leave(self, host_client, shared_group):
        url = reverse('groups:group-leave', kwargs={'pk': shared_group.id})
        response = host_client.post(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['code'] == 'CANNOT_LEAVE_AS_HOST'


# =============================================================================
# Invite Tests
# =============================================================================

@pytest.mark.django_db
class TestInvites:
    """Tests for /api/groups/{id}/invites/ and /api/invites/"""

    def test_invite_by_email(self, host_client, shared_group, guest):
        url = reverse('groups:group-invites', kwargs={'pk': shared_group.id})
        response = host_client.post(url, {'email': guest.email})

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['status'] == InviteStatus.PENDING
        assert response.data['group_name'] == shared_group.name

    def test_invite_unknown_email(self, host_client, shared_group):
        url = reverse('groups:group-invites', kwargs={'pk': shared_group.id})
        response = host_client.post(url, {'email': 'nobody@example.com'})

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_invite_duplicate_pending(self, host_client, shared_group, host, guest):
        invite_member(group_id=shared_group.id, inviter=host, invitee_email=guest.email)

        url = reverse('groups:group-invites', kwargs={'pk': shared_group.id})
        response = host_client.post(url, {'email': guest.email})

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_pending_invites_inbox(self, guest_client, shared_group, host, guest):
        invite = invite_member(group_id=shared_group.id, inviter=host, invitee_email=guest.email)

        url = reverse('groups:invite-list')
        response = guest_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [i['id'] for i in response.data] == [str(invite.id)]

    def test_accept_invite(self, guest_client, shared_group, host, guest):
        invite = invite_member(group_id=shared_group.id, inviter=host, invitee_email=guest.email)

        url = reverse('groups:invite-accept', kwargs={'pk': invite.id})
        response = guest_client.post(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['role'] == 'GUEST'
        assert is_accepted_member(group_id=shared_group.id, user_id=guest.id)

    def test_accept_someone_elses_invite(self, outsider_client, shared_group, host, guest):
        invite = invite_member(group_id=shared_group.id, inviter=host, invitee_email=guest.email)

        url = reverse('groups:invite-accept', kwargs={'pk': invite.id})
        response = outsider_client.post(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_reject_invite(self, guest_client, shared_group, host, guest):
        invite = invite_member(group_id=shared_group.id, inviter=host, invitee_email=guest.email)

        url = reverse('groups:invite-reject', kwargs={'pk': invite.id})
        response = guest_client.post(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert Invite.objects.get(id=invite.id).status == InviteStatus.REJECTED
