import pytest
from datetime import date
from decimal import Decimal

from apps.core.choices import AssetType, TransactionType
from apps.transactions.services import create_transaction


@pytest.fixture
def budget(group_with_guest, host, guest):
    """February income and expenses from both members, plus one March expense."""
    entries = [
        (host, TransactionType.INCOME, 'Salary', '3000.00', date(2026, 2, 1)),
        (guest, TransactionType.INCOME, 'Salary', '2500.00', date(2026, 2, 1)),
        (host, TransactionType.EXPENSE, 'Food', '100.00', date(2026, 2, 1)),
        (guest, TransactionType.EXPENSE, 'Food', '50.00', date(2026, 2, 14)),
        (guest, TransactionType.EXPENSE, 'Culture', '30.00', date(2026, 2, 14)),
        (host, TransactionType.EXPENSE, 'Food', '70.00', date(2026, 3, 1)),
    ]
    for user, transaction_type, category_name, amount, day in entries:
        create_transaction(
            group_id=group_with_guest.id,
            user=user,
            amount=Decimal(amount),
            transaction_type=transaction_type,
            asset_type=AssetType.JOINT,
            category_name=category_name,
            date=day,
        )
    return group_with_guest
