import pytest
from django.urls import reverse
from rest_framework import status

from apps.categories.models import Category
from apps.groups.models import Group, GroupType


def list_url(group):
    return reverse('categories:category-list', kwargs={'group_id': group.id})


@pytest.mark.django_db
class TestCategoryApi:
    """Tests for /api/groups/{group_id}/categories/"""

    def test_list_expense_categories(self, host_client, shared_group):
        response = host_client.get(list_url(shared_group), {'type': 'EXPENSE'})

        assert response.status_code == status.HTTP_200_OK
        assert [c['name'] for c in response.data] == ['Food', 'Transport', 'Shopping', 'Medical', 'Culture', 'Other']

    def test_list_invalid_type(self, host_client, shared_group):
        response = host_client.get(list_url(shared_group), {'type': 'GIFT'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_list_as_outsider(self, outsider_client, shared_group):
        response = outsider_client.get(list_url(shared_group))

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_create(self, host_client, shared_group):
        response = host_client.post(list_url(shared_group), {'name': 'Pets', 'type': 'EXPENSE'})

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['is_default'] is False

    def test_update(self, host_client, shared_group):
        food = Category.objects.get(group=shared_group, name='Food')
        url = reverse('categories:category-detail', kwargs={'group_id': shared_group.id, 'pk': food.id})

        response = host_client.put(url, {'name': 'Dining'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['name'] == 'Dining'

    def test_delete_default(self, host_client, shared_group):
        food = Category.objects.get(group=shared_group, name='Food')
        url = reverse('categories:category-detail', kwargs={'group_id': shared_group.id, 'pk': food.id})

        response = host_client.delete(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['code'] == 'DEFAULT_CATEGORY_UNDELETABLE'

    def test_update_through_other_group(self, host_client, shared_group, host):
        food = Category.objects.get(group=shared_group, name='Food')
        personal = Group.objects.get(host=host, type=GroupType.PERSONAL)
        url = reverse('categories:category-detail', kwargs={'group_id': personal.id, 'pk': food.id})

        response = host_client.put(url, {'name': 'Dining'})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['code'] == 'CATEGORY_NOT_FOUND'
        food.refresh_from_db()
        assert food.name == 'Food'
