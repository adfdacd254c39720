# ==========================================
# apps/categories/models.py
# ==========================================

from django.core.exceptions import ValidationError
from django.db import models
import uuid

from apps.core.choices import TransactionType

NAME_MAX_LENGTH = 30


def validate_category_name(name):
    """Return an error message if the name is unusable, else None."""
    if not name or not name.strip():
        return "Category name is required"
    if len(name) > NAME_MAX_LENGTH:
        return f"Category name must be at most {NAME_MAX_LENGTH} characters"
    return None


class Category(models.Model):
    """Budget category of a group, for expenses or for income."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    group = models.ForeignKey('groups.Group', on_delete=models.CASCADE, related_name='categories')
    name = models.CharField(max_length=NAME_MAX_LENGTH)
    icon = models.CharField(max_length=10, null=True, blank=True)
    type = models.CharField(max_length=10, choices=TransactionType.choices, editable=False)
    is_default = models.BooleanField(default=False, editable=False)
    sort_order = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'categories'
        indexes = [
            models.Index(fields=['group', 'sort_order'], name='idx_category_group'),
        ]
        ordering = ['sort_order']
        verbose_name_plural = 'categories'

    def __str__(self):
        return f"{self.name} ({self.type})"

    def clean(self):
        error = validate_category_name(self.name)
        if error:
            raise ValidationError({'name': error})
