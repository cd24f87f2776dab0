"""
Interface for transaction providers.

Abstracts the authoritative transaction lookup away from a specific payment
platform (Mercado Pago today).
"""

from abc import ABC, abstractmethod

from packages.payments.models.domain.transaction import TransactionRecord


class TransactionProviderInterface(ABC):
    """Abstract interface for transaction lookups."""

    @abstractmethod
    async def get_transaction(
        self, transaction_id: str, access_token: str
    ) -> TransactionRecord:
        """
        Fetch the current state of a transaction.

        Args:
            transaction_id: Provider transaction id taken from the notification
            access_token: Provider API credential

        Returns:
            TransactionRecord with status, payer and metadata

        Raises:
            TransactionLookupError: On a non-success response, a transport
                failure or an unreadable payload
        """
        pass
