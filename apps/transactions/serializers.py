from decimal import Decimal

from rest_framework import serializers

from apps.accounts.serializers import UserMinimalSerializer
from apps.core.choices import AssetType, TransactionType
from .models import Transaction


class TransactionSerializer(serializers.ModelSerializer):
    """Read serializer for transactions."""

    user = UserMinimalSerializer(read_only=True)
    asset_source_name = serializers.CharField(source='asset_source.name', read_only=True, default=None)

    class Meta:
        model = Transaction
        fields = [
            'id',
            'group',
            'user',
            'amount',
            'transaction_type',
            'asset_type',
            'category_name',
            'asset_source',
            'asset_source_name',
            'date',
            'description',
            'schedule',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class TransactionWriteSerializer(serializers.Serializer):
    """Input serializer for create and full update."""

    amount = serializers.DecimalField(max_digits=15, decimal_places=2, min_value=Decimal('0.01'))
    transaction_type = serializers.ChoiceField(choices=TransactionType.choices)
    asset_type = serializers.ChoiceField(choices=AssetType.choices, default=AssetType.PERSONAL)
    category_name = serializers.CharField(max_length=30)
    date = serializers.DateField()
    asset_source_id = serializers.UUIDField(required=False, allow_null=True, default=None)
    description = serializers.CharField(max_length=200, required=False, allow_null=True, allow_blank=True, default=None)
    schedule_id = serializers.UUIDField(required=False, allow_null=True, default=None)


class TransactionRangeQuerySerializer(serializers.Serializer):
    start_date = serializers.DateField()
    end_date = serializers.DateField()
    asset_type = serializers.ChoiceField(choices=AssetType.choices, required=False)


class SummaryQuerySerializer(serializers.Serializer):
    start_date = serializers.DateField()
    end_date = serializers.DateField()


class CategorySummarySerializer(serializers.Serializer):
    category_name = serializers.CharField()
    transaction_type = serializers.CharField()
    total = serializers.DecimalField(max_digits=17, decimal_places=2)


class TransactionSummarySerializer(serializers.Serializer):
    start_date = serializers.DateField()
    end_date = serializers.DateField()
    total_expense = serializers.DecimalField(max_digits=17, decimal_places=2)
    total_income = serializers.DecimalField(max_digits=17, decimal_places=2)
    balance = serializers.DecimalField(max_digits=17, decimal_places=2)
    category_breakdown = CategorySummarySerializer(many=True)
