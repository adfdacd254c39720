"""
Category management service.

Every group starts with a fixed set of default categories; members may add,
rename and remove their own.
"""

import logging
from typing import List, Optional
from uuid import UUID

from django.db import transaction

from apps.accounts.models import User
from apps.categories.models import Category, validate_category_name
from apps.core.choices import TransactionType
from apps.core.querysets import in_group
from apps.groups.models import Group
from apps.groups.services.access import find_group, verify_group_access

from .exceptions import (
    CategoryNotFoundError,
    DefaultCategoryUndeletableError,
    InvalidCategoryError,
)

logger = logging.getLogger(__name__)

# (name, icon, type) in display order
DEFAULT_CATEGORIES = [
    ('Food', '🍚', TransactionType.EXPENSE),
    ('Transport', '🚌', TransactionType.EXPENSE),
    ('Shopping', '🛍️', TransactionType.EXPENSE),
    ('Medical', '🏥', TransactionType.EXPENSE),
    ('Culture', '🎬', TransactionType.EXPENSE),
    ('Other', '📦', TransactionType.EXPENSE),
    ('Salary', '💰', TransactionType.INCOME),
    ('Allowance', '💵', TransactionType.INCOME),
    ('Other', '📦', TransactionType.INCOME),
]


def _check_name(name: str) -> None:
    error = validate_category_name(name)
    if error:
        raise InvalidCategoryError(error)


def create_default_categories(*, group: Group) -> List[Category]:
    """Give a freshly created group its default categories."""
    return Category.objects.bulk_create([
        Category(
            group=group,
            name=name,
            icon=icon,
            type=category_type,
            is_default=True,
            sort_order=index,
        )
        for index, (name, icon, category_type) in enumerate(DEFAULT_CATEGORIES)
    ])


@transaction.atomic
def create_category(
    *,
    group_id: UUID,
    user: User,
    name: str,
    type: str,
    icon: Optional[str] = None
) -> Category:
    """
    Add a custom category at the end of the group's list.

    Raises:
        GroupNotFoundError: If group doesn't exist
        GroupAccessDeniedError: If user is not an accepted member
        InvalidCategoryError: If name is blank or too long
    """
    group = find_group(group_id=group_id)
    verify_group_access(group_id=group.id, user_id=user.id)
    _check_name(name)

    category = Category.objects.create(
        group=group,
        name=name,
        icon=icon,
        type=type,
        sort_order=Category.objects.filter(group=group).count(),
    )

    logger.info("Created category %s in group %s", category.id, group.id)
    return category


def get_categories(*, group_id: UUID, user: User, type: Optional[str] = None) -> List[Category]:
    """Categories of a group ordered by sort_order, optionally of one type."""
    verify_group_access(group_id=group_id, user_id=user.id)

    categories = Category.objects.filter(group_id=group_id)
    if type is not None:
        categories = categories.filter(type=type)

    return list(categories.order_by('sort_order'))


def _get_category(category_id: UUID, group_id: Optional[UUID] = None) -> Category:
    try:
        return in_group(Category.objects.all(), group_id).get(id=category_id)
    except Category.DoesNotExist:
        raise CategoryNotFoundError(category_id)


@transaction.atomic
def update_category(
    *,
    category_id: UUID,
    user: User,
    name: str,
    icon: Optional[str] = None,
    group_id: Optional[UUID] = None
) -> Category:
    """
    Rename a category and replace its icon.

    Raises:
        CategoryNotFoundError: If category doesn't exist
        GroupAccessDeniedError: If user is not a member of its group
        InvalidCategoryError: If name is blank or too long
    """
    category = _get_category(category_id, group_id)
    verify_group_access(group_id=category.group_id, user_id=user.id)
    _check_name(name)

    category.name = name
    category.icon = icon
    category.save(update_fields=['name', 'icon', 'updated_at'])

    return category


@transaction.atomic
def delete_category(*, category_id: UUID, user: User, group_id: Optional[UUID] = None) -> None:
    """
    Delete a custom category.

    Raises:
        CategoryNotFoundError: If category doesn't exist
        GroupAccessDeniedError: If user is not a member of its group
        DefaultCategoryUndeletableError: If category is one of the defaults
    """
    category = _get_category(category_id, group_id)
    verify_group_access(group_id=category.group_id, user_id=user.id)

    if category.is_default:
        raise DefaultCategoryUndeletableError()

    category.delete()
    logger.info("Deleted category %s", category_id)
