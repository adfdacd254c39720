"""
Serializers for statistics app.

Input Serializers:
    PeriodQuerySerializer - Validates period and date range parameters

Response Serializers:
    BudgetOverviewSerializer - Totals and balance
    CategoryBreakdownSerializer - Totals per category
    DailyTrendSerializer - Totals per day
    MemberComparisonSerializer - Totals per member
"""

from calendar import monthrange
from datetime import date

from rest_framework import serializers


# =============================================================================
# Input Serializers (Query Parameter Validation)
# =============================================================================

class PeriodQuerySerializer(serializers.Serializer):
    """
    Validate period and date range query parameters.

    Query Parameters:
        period (str): Month period in YYYY-MM format (e.g., '2026-02')
        start_date (date): Start of date range
        end_date (date): End of date range

    Note:
        If 'period' is provided, it takes precedence and is converted
        to start_date and end_date for the full month. Otherwise both
        start_date and end_date are required.
    """

    period = serializers.RegexField(
        regex=r'^\d{4}-(0[1-9]|1[0-2])$',
        required=False,
        allow_blank=True,
        help_text='Month period in YYYY-MM format'
    )
    start_date = serializers.DateField(required=False)
    end_date = serializers.DateField(required=False)

    def validate(self, attrs):
        """Parse period into date range if provided."""
        period = attrs.pop('period', None)

        if period:
            year, month = (int(part) for part in period.split('-'))
            attrs['start_date'] = date(year, month, 1)
            attrs['end_date'] = date(year, month, monthrange(year, month)[1])

        start = attrs.get('start_date')
        end = attrs.get('end_date')
        if start is None or end is None:
            raise serializers.ValidationError(
                'Provide either period or both start_date and end_date'
            )
        if start > end:
            raise serializers.ValidationError({
                'start_date': 'Start date must be before end date'
            })

        return attrs


# =============================================================================
# Response Serializers
# =============================================================================

class BudgetOverviewSerializer(serializers.Serializer):
    start_date = serializers.DateField()
    end_date = serializers.DateField()
    budget_start_day = serializers.IntegerField()
    total_expense = serializers.DecimalField(max_digits=17, decimal_places=2)
    total_income = serializers.DecimalField(max_digits=17, decimal_places=2)
    balance = serializers.DecimalField(max_digits=17, decimal_places=2)


class CategoryBreakdownItemSerializer(serializers.Serializer):
    category_name = serializers.CharField()
    transaction_type = serializers.CharField()
    total = serializers.DecimalField(max_digits=17, decimal_places=2)


class CategoryBreakdownSerializer(serializers.Serializer):
    start_date = serializers.DateField()
    end_date = serializers.DateField()
    total_expense = serializers.DecimalField(max_digits=17, decimal_places=2)
    total_income = serializers.DecimalField(max_digits=17, decimal_places=2)
    items = CategoryBreakdownItemSerializer(many=True)


class DailyTrendItemSerializer(serializers.Serializer):
    date = serializers.DateField()
    transaction_type = serializers.CharField()
    total = serializers.DecimalField(max_digits=17, decimal_places=2)


class DailyTrendSerializer(serializers.Serializer):
    start_date = serializers.DateField()
    end_date = serializers.DateField()
    items = DailyTrendItemSerializer(many=True)


class MemberComparisonItemSerializer(serializers.Serializer):
    user_id = serializers.UUIDField()
    nickname = serializers.CharField()
    color_code = serializers.CharField()
    transaction_type = serializers.CharField()
    total = serializers.DecimalField(max_digits=17, decimal_places=2)


class MemberComparisonSerializer(serializers.Serializer):
    start_date = serializers.DateField()
    end_date = serializers.DateField()
    items = MemberComparisonItemSerializer(many=True)
