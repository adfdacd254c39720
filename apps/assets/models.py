# ==========================================
# apps/assets/models.py
# ==========================================

from django.core.exceptions import ValidationError
from django.db import models
import uuid

NAME_MAX_LENGTH = 30
DESCRIPTION_MAX_LENGTH = 100


class AssetSourceType(models.TextChoices):
    CASH = 'CASH', 'Cash'
    BANK = 'BANK', 'Bank account'
    CARD = 'CARD', 'Card'
    ETC = 'ETC', 'Other'


def validate_asset_source_fields(*, name, description=None):
    """Return (field, message) for the first broken rule, or None."""
    if not name or not name.strip():
        return 'name', "Asset name is required"
    if len(name) > NAME_MAX_LENGTH:
        return 'name', f"Asset name must be at most {NAME_MAX_LENGTH} characters"
    if description is not None and len(description) > DESCRIPTION_MAX_LENGTH:
        return 'description', f"Description must be at most {DESCRIPTION_MAX_LENGTH} characters"
    return None


class AssetSource(models.Model):
    """Where money is held: a wallet, account or card shared by the group."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    group = models.ForeignKey('groups.Group', on_delete=models.CASCADE, related_name='asset_sources')
    name = models.CharField(max_length=NAME_MAX_LENGTH)
    type = models.CharField(max_length=10, choices=AssetSourceType.choices, editable=False)
    description = models.CharField(max_length=DESCRIPTION_MAX_LENGTH, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'asset_sources'
        ordering = ['created_at']

    def __str__(self):
        return f"{self.name} ({self.type})"

    def clean(self):
        error = validate_asset_source_fields(name=self.name, description=self.description)
        if error:
            field, message = error
            raise ValidationError({field: message})
