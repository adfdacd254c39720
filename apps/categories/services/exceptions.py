"""Domain-specific exceptions for categories services."""

from apps.core.exceptions import InvalidInputError, NotFoundError


class CategoryNotFoundError(NotFoundError):
    code = 'CATEGORY_NOT_FOUND'

    def __init__(self, category_id):
        self.category_id = category_id
        super().__init__(f"Category not found: {category_id}")


class InvalidCategoryError(InvalidInputError):
    code = 'INVALID_CATEGORY'


class DefaultCategoryUndeletableError(InvalidInputError):
    """Raised when deleting one of the categories every group starts with."""

    code = 'DEFAULT_CATEGORY_UNDELETABLE'
    default_message = 'Default categories cannot be deleted'
