"""
Transaction management service.

Income and expense records of a group. Linked asset sources and schedules
must belong to the same group as the transaction.
"""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import DecimalField, Q, QuerySet, Sum
from django.db.models.functions import Coalesce

from apps.accounts.models import User
from apps.assets.models import AssetSource
from apps.assets.services import AssetSourceNotFoundError
from apps.core.choices import TransactionType
from apps.core.querysets import in_group
from apps.groups.services.access import find_group, verify_group_access
from apps.schedules.models import Schedule
from apps.schedules.services import ScheduleNotFoundError
from apps.transactions.models import Transaction, validate_transaction_fields

from .exceptions import InvalidTransactionError, TransactionNotFoundError

logger = logging.getLogger(__name__)

ZERO = Decimal('0.00')


def _check_fields(amount: Decimal, category_name: str, description: Optional[str]) -> None:
    error = validate_transaction_fields(
        amount=amount,
        category_name=category_name,
        description=description,
    )
    if error:
        _, message = error
        raise InvalidTransactionError(message)


def _resolve_links(group_id: UUID, asset_source_id: Optional[UUID], schedule_id: Optional[UUID]):
    """Load the optional asset source and schedule, scoped to the group."""
    asset_source = None
    if asset_source_id is not None:
        try:
            asset_source = AssetSource.objects.get(id=asset_source_id, group_id=group_id)
        except AssetSource.DoesNotExist:
            raise AssetSourceNotFoundError(asset_source_id)

    schedule = None
    if schedule_id is not None:
        try:
            schedule = Schedule.objects.get(id=schedule_id, group_id=group_id)
        except Schedule.DoesNotExist:
            raise ScheduleNotFoundError(schedule_id)

    return asset_source, schedule


@transaction.atomic
def create_transaction(
    *,
    group_id: UUID,
    user: User,
    amount: Decimal,
    transaction_type: str,
    asset_type: str,
    category_name: str,
    date: date,
    asset_source_id: Optional[UUID] = None,
    description: Optional[str] = None,
    schedule_id: Optional[UUID] = None
) -> Transaction:
    """
    Record an income or expense.

    Raises:
        GroupNotFoundError: If group doesn't exist
        GroupAccessDeniedError: If user is not an accepted member
        AssetSourceNotFoundError: If asset source is not in the group
        ScheduleNotFoundError: If schedule is not in the group
        InvalidTransactionError: If amount, category or description are invalid
    """
    group = find_group(group_id=group_id)
    verify_group_access(group_id=group.id, user_id=user.id)

    asset_source, schedule = _resolve_links(group.id, asset_source_id, schedule_id)
    _check_fields(amount, category_name, description)

    txn = Transaction.objects.create(
        group=group,
        user=user,
        amount=amount,
        transaction_type=transaction_type,
        asset_type=asset_type,
        category_name=category_name,
        asset_source=asset_source,
        date=date,
        description=description,
        schedule=schedule,
    )

    logger.info("Created transaction %s in group %s", txn.id, group.id)
    return txn


def get_transactions_by_date_range(
    *,
    group_id: UUID,
    user: User,
    start_date: date,
    end_date: date,
    asset_type: Optional[str] = None
) -> QuerySet:
    """Transactions dated within [start_date, end_date], newest first."""
    verify_group_access(group_id=group_id, user_id=user.id)

    transactions = Transaction.objects.filter(
        group_id=group_id,
        date__gte=start_date,
        date__lte=end_date,
    )
    if asset_type is not None:
        transactions = transactions.filter(asset_type=asset_type)

    return (
        transactions
        .select_related('user', 'asset_source')
        .order_by('-date', '-created_at')
    )


def _get_transaction(transaction_id: UUID, group_id: Optional[UUID] = None) -> Transaction:
    try:
        return (
            in_group(Transaction.objects.select_related('user', 'asset_source'), group_id)
            .get(id=transaction_id)
        )
    except Transaction.DoesNotExist:
        raise TransactionNotFoundError(transaction_id)


def get_transaction_by_id(*, transaction_id: UUID, user: User, group_id: Optional[UUID] = None) -> Transaction:
    txn = _get_transaction(transaction_id, group_id)
    verify_group_access(group_id=txn.group_id, user_id=user.id)
    return txn


@transaction.atomic
def update_transaction(
    *,
    transaction_id: UUID,
    user: User,
    amount: Decimal,
    transaction_type: str,
    asset_type: str,
    category_name: str,
    date: date,
    asset_source_id: Optional[UUID] = None,
    description: Optional[str] = None,
    schedule_id: Optional[UUID] = None,
    group_id: Optional[UUID] = None
) -> Transaction:
    """
    Replace every editable field of a transaction.

    Raises:
        TransactionNotFoundError: If transaction doesn't exist
        GroupAccessDeniedError: If user is not a member of its group
        AssetSourceNotFoundError: If asset source is not in the group
        ScheduleNotFoundError: If schedule is not in the group
        InvalidTransactionError: If amount, category or description are invalid
    """
    txn = _get_transaction(transaction_id, group_id)
    verify_group_access(group_id=txn.group_id, user_id=user.id)

    asset_source, schedule = _resolve_links(txn.group_id, asset_source_id, schedule_id)
    _check_fields(amount, category_name, description)

    txn.amount = amount
    txn.transaction_type = transaction_type
    txn.asset_type = asset_type
    txn.category_name = category_name
    txn.asset_source = asset_source
    txn.date = date
    txn.description = description
    txn.schedule = schedule
    txn.save()

    return txn


@transaction.atomic
def delete_transaction(*, transaction_id: UUID, user: User, group_id: Optional[UUID] = None) -> None:
    txn = _get_transaction(transaction_id, group_id)
    verify_group_access(group_id=txn.group_id, user_id=user.id)

    txn.delete()
    logger.info("Deleted transaction %s", transaction_id)


def _sum(**filters):
    return Coalesce(Sum('amount', filter=Q(**filters)), ZERO, output_field=DecimalField())


def get_transaction_summary(*, group_id: UUID, user: User, start_date: date, end_date: date) -> dict:
    """
    Totals of a group's transactions within [start_date, end_date].

    Returns:
        dict with keys:
            - start_date, end_date: The requested range
            - total_expense, total_income (Decimal)
            - balance (Decimal): total_income - total_expense
            - category_breakdown (list[dict]): category_name,
              transaction_type and total, largest total first
    """
    verify_group_access(group_id=group_id, user_id=user.id)

    transactions = Transaction.objects.filter(
        group_id=group_id,
        date__gte=start_date,
        date__lte=end_date,
    )

    totals = transactions.aggregate(
        total_expense=_sum(transaction_type=TransactionType.EXPENSE),
        total_income=_sum(transaction_type=TransactionType.INCOME),
    )

    category_breakdown = list(
        transactions
        .values('category_name', 'transaction_type')
        .annotate(total=Sum('amount'))
        .order_by('-total', 'category_name')
    )

    return {
        'start_date': start_date,
        'end_date': end_date,
        'total_expense': totals['total_expense'],
        'total_income': totals['total_income'],
        'balance': totals['total_income'] - totals['total_expense'],
        'category_breakdown': category_breakdown,
    }
