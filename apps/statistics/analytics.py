"""
Statistics Module
==================

Read-only aggregate queries over a group's transactions, powering the
budget dashboard and charts.

Classes:
    StatisticsQueries: Static methods for the budget statistics endpoints.

Example:
    Monthly overview for a group::

        from apps.statistics.analytics import StatisticsQueries

        overview = StatisticsQueries.budget_overview(
            group_id=group.id,
            user_id=user.id,
            start_date=date(2026, 2, 1),
            end_date=date(2026, 2, 28),
        )
        print(f"Balance: {overview['balance']}")

Note:
    Every method first checks that the caller is an accepted member of the
    group and raises GroupAccessDeniedError otherwise. Results are plain
    dictionaries and lists, ready for JSON serialization.
"""

from decimal import Decimal

from django.db.models import DecimalField, Q, Sum
from django.db.models.functions import Coalesce

from apps.core.choices import TransactionType
from apps.groups.services.access import find_group, verify_group_access
from apps.transactions.models import Transaction

ZERO = Decimal('0.00')


def _in_range(group_id, start_date, end_date):
    return Transaction.objects.filter(
        group_id=group_id,
        date__gte=start_date,
        date__lte=end_date,
    )


class StatisticsQueries:
    """
    Aggregations behind the statistics endpoints.

    Methods:
        budget_overview: Income/expense totals and balance for a range.
        category_breakdown: Totals per category and type.
        daily_trend: Totals per day and type, oldest first.
        member_comparison: Totals per member and type.
    """

    @staticmethod
    def budget_overview(group_id, user_id, start_date, end_date):
        """
        Calculate the group's income, expense and balance for a date range.

        Args:
            group_id (UUID): The group's unique identifier.
            user_id (UUID): The requesting user, must be an accepted member.
            start_date (date): First day of the range (inclusive).
            end_date (date): Last day of the range (inclusive).

        Returns:
            dict: A dictionary containing:
                - start_date, end_date (date): The requested range.
                - budget_start_day (int): Day of month the group's budget resets.
                - total_expense (Decimal): Sum of expenses.
                - total_income (Decimal): Sum of income.
                - balance (Decimal): total_income - total_expense.

        Raises:
            GroupAccessDeniedError: If the user is not an accepted member.
            GroupNotFoundError: If the group doesn't exist.
        """
        verify_group_access(group_id=group_id, user_id=user_id)
        group = find_group(group_id=group_id)

        totals = _in_range(group_id, start_date, end_date).aggregate(
            total_expense=Coalesce(
                Sum('amount', filter=Q(transaction_type=TransactionType.EXPENSE)),
                ZERO,
                output_field=DecimalField(),
            ),
            total_income=Coalesce(
                Sum('amount', filter=Q(transaction_type=TransactionType.INCOME)),
                ZERO,
                output_field=DecimalField(),
            ),
        )

        return {
            'start_date': start_date,
            'end_date': end_date,
            'budget_start_day': group.budget_start_day,
            'total_expense': totals['total_expense'],
            'total_income': totals['total_income'],
            'balance': totals['total_income'] - totals['total_expense'],
        }

    @staticmethod
    def category_breakdown(group_id, user_id, start_date, end_date):
        """
        Sum transactions per (category_name, transaction_type).

        Returns:
            dict: A dictionary containing:
                - start_date, end_date (date): The requested range.
                - total_expense, total_income (Decimal): Sums over all items.
                - items (list[dict]): category_name, transaction_type and
                  total, largest total first.
        """
        verify_group_access(group_id=group_id, user_id=user_id)

        items = list(
            _in_range(group_id, start_date, end_date)
            .values('category_name', 'transaction_type')
            .annotate(total=Sum('amount'))
            .order_by('-total', 'category_name')
        )

        total_expense = sum(
            (item['total'] for item in items if item['transaction_type'] == TransactionType.EXPENSE),
            ZERO,
        )
        total_income = sum(
            (item['total'] for item in items if item['transaction_type'] == TransactionType.INCOME),
            ZERO,
        )

        return {
            'start_date': start_date,
            'end_date': end_date,
            'total_expense': total_expense,
            'total_income': total_income,
            'items': items,
        }

    @staticmethod
    def daily_trend(group_id, user_id, start_date, end_date):
        """
        Sum transactions per day and type for line charts.

        Days without transactions are omitted.

        Returns:
            dict: start_date, end_date and items (list[dict] of date,
            transaction_type and total, ordered by date ascending).
        """
        verify_group_access(group_id=group_id, user_id=user_id)

        items = list(
            _in_range(group_id, start_date, end_date)
            .values('date', 'transaction_type')
            .annotate(total=Sum('amount'))
            .order_by('date', 'transaction_type')
        )

        return {
            'start_date': start_date,
            'end_date': end_date,
            'items': items,
        }

    @staticmethod
    def member_comparison(group_id, user_id, start_date, end_date):
        """
        Sum transactions per member and type.

        Returns:
            dict: start_date, end_date and items (list[dict] of user_id,
            nickname, color_code, transaction_type and total, largest total
            first).

        Note:
            Members without transactions in the range do not appear.
        """
        verify_group_access(group_id=group_id, user_id=user_id)

        rows = (
            _in_range(group_id, start_date, end_date)
            .values('user', 'user__nickname', 'user__color_code', 'transaction_type')
            .annotate(total=Sum('amount'))
            .order_by('-total', 'user__nickname')
        )

        items = [
            {
                'user_id': row['user'],
                'nickname': row['user__nickname'],
                'color_code': row['user__color_code'],
                'transaction_type': row['transaction_type'],
                'total': row['total'],
            }
            for row in rows
        ]

        return {
            'start_date': start_date,
            'end_date': end_date,
            'items': items,
        }
