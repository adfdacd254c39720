"""
Transactions app services layer.
"""

from .exceptions import (
    TransactionNotFoundError,
    InvalidTransactionError,
)

from .transaction_management import (
    create_transaction,
    get_transactions_by_date_range,
    get_transaction_by_id,
    update_transaction,
    delete_transaction,
    get_transaction_summary,
)


__all__ = [
    # Exceptions
    'TransactionNotFoundError',
    'InvalidTransactionError',

    # Transaction Management
    'create_transaction',
    'get_transactions_by_date_range',
    'get_transaction_by_id',
    'update_transaction',
    'delete_transaction',
    'get_transaction_summary',
]
