import pytest
from datetime import date
from decimal import Decimal

from apps.assets.models import AssetSourceType
from apps.assets.services import create_asset_source
from apps.core.choices import AssetType, TransactionType
from apps.transactions.services import create_transaction


@pytest.fixture
def wallet(shared_group, host):
    return create_asset_source(group_id=shared_group.id, user=host, name='Wallet', type=AssetSourceType.CASH)


@pytest.fixture
def february_transactions(group_with_guest, host, guest):
    """A small February budget: two incomes and three expenses."""
    entries = [
        (host, TransactionType.INCOME, AssetType.PERSONAL, 'Salary', '3000.00', date(2026, 2, 1)),
        (guest, TransactionType.INCOME, AssetType.PERSONAL, 'Allowance', '200.00', date(2026, 2, 2)),
        (host, TransactionType.EXPENSE, AssetType.JOINT, 'Food', '80.00', date(2026, 2, 2)),
        (guest, TransactionType.EXPENSE, AssetType.JOINT, 'Food', '45.50', date(2026, 2, 10)),
        (guest, TransactionType.EXPENSE, AssetType.PERSONAL, 'Transport', '20.00', date(2026, 2, 28)),
        # Outside the month
        (host, TransactionType.EXPENSE, AssetType.JOINT, 'Shopping', '999.00', date(2026, 3, 1)),
    ]
    return [
        create_transaction(
            group_id=group_with_guest.id,
            user=user,
            amount=Decimal(amount),
            transaction_type=transaction_type,
            asset_type=asset_type,
            category_name=category_name,
            date=day,
        )
        for user, transaction_type, asset_type, category_name, amount, day in entries
    ]
