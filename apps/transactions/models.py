# ==========================================
# apps/transactions/models.py
# ==========================================

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models
import uuid

from apps.core.choices import AssetType, TransactionType

CATEGORY_NAME_MAX_LENGTH = 30
DESCRIPTION_MAX_LENGTH = 200


def validate_transaction_fields(*, amount, category_name, description=None):
    """Return (field, message) for the first broken rule, or None."""
    if amount is None or amount <= 0:
        return 'amount', "Amount must be greater than zero"
    if not category_name or not category_name.strip():
        return 'category_name', "Category is required"
    if len(category_name) > CATEGORY_NAME_MAX_LENGTH:
        return 'category_name', f"Category must be at most {CATEGORY_NAME_MAX_LENGTH} characters"
    if description is not None and len(description) > DESCRIPTION_MAX_LENGTH:
        return 'description', f"Description must be at most {DESCRIPTION_MAX_LENGTH} characters"
    return None


class Transaction(models.Model):
    """Income or expense recorded in a group's budget."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    group = models.ForeignKey('groups.Group', on_delete=models.CASCADE, related_name='transactions')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='transactions')

    # Financial details
    amount = models.DecimalField(
        max_digits=15,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    transaction_type = models.CharField(max_length=10, choices=TransactionType.choices)
    asset_type = models.CharField(max_length=10, choices=AssetType.choices, default=AssetType.PERSONAL)

    # Category is stored by name so deleting a category keeps history intact
    category_name = models.CharField(max_length=CATEGORY_NAME_MAX_LENGTH)
    asset_source = models.ForeignKey(
        'assets.AssetSource',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='transactions'
    )

    date = models.DateField()
    description = models.CharField(max_length=DESCRIPTION_MAX_LENGTH, null=True, blank=True)
    schedule = models.ForeignKey(
        'schedules.Schedule',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='transactions'
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'transactions'
        indexes = [
            models.Index(fields=['group', 'date'], name='idx_transaction_group_date'),
            models.Index(fields=['group', 'transaction_type', 'date'], name='transaction_group_i_5d8e2b_idx'),
        ]
        ordering = ['-date', '-created_at']

    def __str__(self):
        return f"{self.transaction_type} {self.amount} ({self.category_name}, {self.date})"

    def clean(self):
        error = validate_transaction_fields(
            amount=self.amount,
            category_name=self.category_name,
            description=self.description,
        )
        if error:
            field, message = error
            raise ValidationError({field: message})
