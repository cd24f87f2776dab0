"""Transaction providers - authoritative payment lookups."""

from packages.payments.providers.transaction.interface import (
    TransactionProviderInterface,
)
from packages.payments.providers.transaction.factory import get_transaction_provider

__all__ = [
    "TransactionProviderInterface",
    "get_transaction_provider",
]
