"""
Service for confirming notified transactions against the provider.
"""

from typing import Optional

from common.core.config import settings
from common.core.telemetry import trace_span, get_logger
from packages.payments.exceptions import MissingAccessTokenError
from packages.payments.models.domain.transaction import TransactionRecord
from packages.payments.providers.transaction.factory import get_transaction_provider

logger = get_logger(__name__)


class TransactionVerifier:
    """Fetches the authoritative state of a transaction."""

    def __init__(self, access_token: Optional[str] = None):
        self.access_token = access_token or settings.provider_access_token
        self.provider = get_transaction_provider()

    @trace_span
    async def verify(self, transaction_id: str) -> TransactionRecord:
        """
        Look up a transaction with the provider.

        Raises:
            MissingAccessTokenError: No access token configured; no call is made
            TransactionLookupError: The provider lookup failed
        """
        if not self.access_token:
            raise MissingAccessTokenError(
                "Provider access token is not configured; cannot verify payments"
            )

        record = await self.provider.get_transaction(transaction_id, self.access_token)

        logger.info(
            f"Fetched transaction {record.id} (status={record.status})",
            extra={"transaction_id": record.id, "status": record.status},
        )
        return record
