"""
Categories app services layer.
"""

from .exceptions import (
    CategoryNotFoundError,
    InvalidCategoryError,
    DefaultCategoryUndeletableError,
)

from .category_management import (
    DEFAULT_CATEGORIES,
    create_default_categories,
    create_category,
    get_categories,
    update_category,
    delete_category,
)


__all__ = [
    # Exceptions
    'CategoryNotFoundError',
    'InvalidCategoryError',
    'DefaultCategoryUndeletableError',

    # Category Management
    'DEFAULT_CATEGORIES',
    'create_default_categories',
    'create_category',
    'get_categories',
    'update_category',
    'delete_category',
]
