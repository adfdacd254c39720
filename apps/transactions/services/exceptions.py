"""Domain-specific exceptions for transactions services."""

from apps.core.exceptions import InvalidInputError, NotFoundError


class TransactionNotFoundError(NotFoundError):
    code = 'TRANSACTION_NOT_FOUND'

    def __init__(self, transaction_id):
        self.transaction_id = transaction_id
        super().__init__(f"Transaction not found: {transaction_id}")


class InvalidTransactionError(InvalidInputError):
    """Raised when transaction fields break transaction invariants."""

    code = 'INVALID_TRANSACTION'
