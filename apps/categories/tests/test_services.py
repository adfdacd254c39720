import pytest
from uuid import uuid4

from apps.categories.models import Category
from apps.categories.services import (
    DEFAULT_CATEGORIES,
    create_category,
    get_categories,
    update_category,
    delete_category,
)
from apps.categories.services.exceptions import (
    CategoryNotFoundError,
    DefaultCategoryUndeletableError,
    InvalidCategoryError,
)
from apps.core.choices import TransactionType
from apps.groups.services.exceptions import GroupAccessDeniedError


@pytest.mark.django_db
class TestCategories:

    def test_new_group_has_defaults(self, shared_group, host):
        categories = get_categories(group_id=shared_group.id, user=host)

        assert len(categories) == len(DEFAULT_CATEGORIES)
        assert all(c.is_default for c in categories)
        assert [c.sort_order for c in categories] == list(range(len(DEFAULT_CATEGORIES)))

    def test_filter_by_type(self, shared_group, host):
        income = get_categories(group_id=shared_group.id, user=host, type=TransactionType.INCOME)

        assert [c.name for c in income] == ['Salary', 'Allowance', 'Other']

    def test_create_appends_to_end(self, shared_group, host):
        category = create_category(
            group_id=shared_group.id,
            user=host,
            name='Pets',
            type=TransactionType.EXPENSE,
            icon='🐶',
        )

        assert category.is_default is False
        assert category.sort_order == len(DEFAULT_CATEGORIES)
        assert get_categories(group_id=shared_group.id, user=host)[-1] == category

    @pytest.mark.parametrize('name', ['', '  ', 'x' * 31])
    def test_create_invalid_name(self, shared_group, host, name):
        with pytest.raises(InvalidCategoryError):
            create_category(group_id=shared_group.id, user=host, name=name, type=TransactionType.EXPENSE)

    def test_create_outsider_denied(self, shared_group, outsider):
        with pytest.raises(GroupAccessDeniedError):
            create_category(group_id=shared_group.id, user=outsider, name='Pets', type=TransactionType.EXPENSE)

    def test_rename_default_category(self, shared_group, host):
        food = Category.objects.get(group=shared_group, name='Food')

        updated = update_category(category_id=food.id, user=host, name='Groceries', icon='🛒')

        assert updated.name == 'Groceries'
        assert updated.is_default is True

    def test_delete_custom_category(self, group_with_guest, host, guest):
        category = create_category(group_id=group_with_guest.id, user=host, name='Pets', type=TransactionType.EXPENSE)

        delete_category(category_id=category.id, user=guest)

        assert not Category.objects.filter(id=category.id).exists()

    def test_delete_default_category_rejected(self, shared_group, host):
        food = Category.objects.get(group=shared_group, name='Food')

        with pytest.raises(DefaultCategoryUndeletableError):
            delete_category(category_id=food.id, user=host)

    def test_delete_unknown(self, host):
        with pytest.raises(CategoryNotFoundError):
            delete_category(category_id=uuid4(), user=host)
