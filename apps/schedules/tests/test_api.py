import pytest
from datetime import date
from uuid import uuid4
from django.urls import reverse
from rest_framework import status

from apps.groups.models import Group, GroupType
from apps.schedules.models import RepeatType, Schedule
from apps.schedules.services import create_schedule


def list_url(group):
    return reverse('schedules:schedule-list', kwargs={'group_id': group.id})


def detail_url(schedule):
    return reverse('schedules:schedule-detail', kwargs={'group_id': schedule.group_id, 'pk': schedule.id})


# =============================================================================
# List & Create
# =============================================================================

@pytest.mark.django_db
class TestScheduleList:
    """Tests for GET /api/groups/{group_id}/schedules/"""

    def test_list_in_range(self, host_client, shared_group, host):
        create_schedule(
            group_id=shared_group.id, user=host, title='Conference',
            start_date=date(2026, 1, 28), end_date=date(2026, 2, 5),
        )
        create_schedule(group_id=shared_group.id, user=host, title='March', start_date=date(2026, 3, 2))

        response = host_client.get(list_url(shared_group), {'start_date': '2026-02-01', 'end_date': '2026-02-28'})

        assert response.status_code == status.HTTP_200_OK
        assert [s['title'] for s in response.data] == ['Conference']
        assert response.data[0]['user']['nickname'] == host.nickname

    def test_list_requires_range(self, host_client, shared_group):
        response = host_client.get(list_url(shared_group))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'start_date' in response.data

    def test_list_as_outsider(self, outsider_client, shared_group):
        response = outsider_client.get(list_url(shared_group), {'start_date': '2026-02-01', 'end_date': '2026-02-28'})

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data['code'] == 'GROUP_ACCESS_DENIED'

    def test_list_unauthenticated(self, api_client, shared_group):
        response = api_client.get(list_url(shared_group), {'start_date': '2026-02-01', 'end_date': '2026-02-28'})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestScheduleCreate:
    """Tests for POST /api/groups/{group_id}/schedules/"""

    def test_create_all_day(self, guest_client, group_with_guest, guest):
        response = guest_client.post(list_url(group_with_guest), {
            'title': 'Anniversary',
            'start_date': '2026-02-14',
            'category': 'ANNIVERSARY',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['is_all_day'] is True
        assert response.data['start_time'] is None
        assert response.data['user']['id'] == str(guest.id)

    def test_create_weekly_series(self, host_client, shared_group):
        response = host_client.post(list_url(shared_group), {
            'title': 'Groceries',
            'start_date': '2026-02-01',
            'repeat_type': 'WEEKLY',
            'repeat_end_date': '2026-03-01',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['repeat_group_id'] == response.data['id']
        assert Schedule.objects.filter(repeat_group_id=response.data['id']).count() == 5

    def test_create_end_before_start(self, host_client, shared_group):
        response = host_client.post(list_url(shared_group), {
            'title': 'Backwards',
            'start_date': '2026-02-10',
            'end_date': '2026-02-01',
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['code'] == 'INVALID_SCHEDULE'

    def test_create_timed_without_times(self, host_client, shared_group):
        response = host_client.post(list_url(shared_group), {
            'title': 'Meeting',
            'start_date': '2026-02-10',
            'is_all_day': False,
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_title_too_long(self, host_client, shared_group):
        response = host_client.post(list_url(shared_group), {
            'title': 'x' * 51,
            'start_date': '2026-02-10',
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert not Schedule.objects.exists()

    def test_create_as_outsider(self, outsider_client, shared_group):
        response = outsider_client.post(list_url(shared_group), {
            'title': 'Sneaky',
            'start_date': '2026-02-10',
        }, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert not Schedule.objects.exists()

    def test_create_in_unknown_group(self, host_client):
        url = reverse('schedules:schedule-list', kwargs={'group_id': uuid4()})
        response = host_client.post(url, {'title': 'Lost', 'start_date': '2026-02-10'}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND


# =============================================================================
# Detail
# =============================================================================

@pytest.mark.django_db
class TestScheduleDetail:
    """Tests for /api/groups/{group_id}/schedules/{id}/"""

    @pytest.fixture
    def schedule(self, shared_group, host):
        return create_schedule(group_id=shared_group.id, user=host, title='Dentist', start_date=date(2026, 2, 10))

    def test_retrieve(self, host_client, schedule):
        response = host_client.get(detail_url(schedule))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['title'] == 'Dentist'

    def test_retrieve_missing(self, host_client, shared_group):
        url = reverse('schedules:schedule-detail', kwargs={'group_id': shared_group.id, 'pk': uuid4()})
        response = host_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['code'] == 'SCHEDULE_NOT_FOUND'

    def test_update(self, host_client, schedule):
        response = host_client.put(detail_url(schedule), {
            'title': 'Dentist (moved)',
            'start_date': '2026-02-12',
            'is_all_day': False,
            'start_time': '08:00',
            'end_time': '08:30',
        }, format='json')

        assert response.status_code == status.HTTP_200_OK
        schedule.refresh_from_db()
        assert schedule.start_date == date(2026, 2, 12)
        assert schedule.is_all_day is False

    def test_update_as_outsider(self, outsider_client, schedule):
        response = outsider_client.put(detail_url(schedule), {
            'title': 'Mine',
            'start_date': '2026-02-12',
        }, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_destroy(self, host_client, schedule):
        response = host_client.delete(detail_url(schedule))

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Schedule.objects.filter(id=schedule.id).exists()


@pytest.mark.django_db
class TestRepeatGroupDelete:
    """Tests for DELETE /api/groups/{group_id}/schedules/repeat-group/{id}/"""

    def test_delete_series(self, host_client, shared_group, host):
        seed = create_schedule(
            group_id=shared_group.id, user=host, title='Standup', start_date=date(2026, 2, 1),
            repeat_type=RepeatType.WEEKLY, repeat_end_date=date(2026, 2, 22),
        )
        url = reverse(
            'schedules:schedule-repeat-group',
            kwargs={'group_id': shared_group.id, 'repeat_group_id': seed.id},
        )

        response = host_client.delete(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'deleted': 4}

        response = host_client.delete(url)
        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestScheduleRoutedThroughOtherGroup:
    """Schedules are only reachable under the group that owns them."""

    @pytest.fixture
    def personal_group(self, host):
        return Group.objects.get(host=host, type=GroupType.PERSONAL)

    @pytest.fixture
    def schedule(self, shared_group, host):
        return create_schedule(group_id=shared_group.id, user=host, title='Dentist', start_date=date(2026, 2, 10))

    def other_group_url(self, group, schedule):
        return reverse('schedules:schedule-detail', kwargs={'group_id': group.id, 'pk': schedule.id})

    def test_retrieve_through_other_group(self, host_client, personal_group, schedule):
        response = host_client.get(self.other_group_url(personal_group, schedule))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['code'] == 'SCHEDULE_NOT_FOUND'

    def test_update_through_other_group(self, host_client, personal_group, schedule):
        response = host_client.put(self.other_group_url(personal_group, schedule), {
            'title': 'Moved',
            'start_date': '2026-02-12',
        }, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        schedule.refresh_from_db()
        assert schedule.title == 'Dentist'

    def test_destroy_through_other_group(self, host_client, personal_group, schedule):
        response = host_client.delete(self.other_group_url(personal_group, schedule))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert Schedule.objects.filter(id=schedule.id).exists()

    def test_delete_series_through_other_group(self, host_client, personal_group, shared_group, host):
        seed = create_schedule(
            group_id=shared_group.id, user=host, title='Standup', start_date=date(2026, 2, 1),
            repeat_type=RepeatType.WEEKLY, repeat_end_date=date(2026, 2, 22),
        )
        url = reverse(
            'schedules:schedule-repeat-group',
            kwargs={'group_id': personal_group.id, 'repeat_group_id': seed.id},
        )

        response = host_client.delete(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert Schedule.objects.filter(repeat_group_id=seed.id).count() == 4
