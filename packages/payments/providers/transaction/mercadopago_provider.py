"""
Mercado Pago implementation of transaction provider.
"""

from typing import Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from common.core.config import settings
from common.core.telemetry import trace_span, get_logger
from packages.payments.exceptions import TransactionLookupError
from packages.payments.models.domain.transaction import TransactionRecord
from packages.payments.providers.transaction.interface import (
    TransactionProviderInterface,
)

logger = get_logger(__name__)

# Provider error bodies are kept in logs and exceptions, truncated
_MAX_ERROR_TEXT = 500


class MercadoPagoTransactionProvider(TransactionProviderInterface):
    """Looks up payments through the Mercado Pago REST API."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.provider_api_base_url).rstrip("/")
        self.transport = transport

    def _payment_url(self, transaction_id: str) -> str:
        # The id comes from an unauthenticated request; never let it alter the path
        return f"{self.base_url}/v1/payments/{quote(transaction_id, safe='')}"

    @trace_span
    async def get_transaction(
        self, transaction_id: str, access_token: str
    ) -> TransactionRecord:
        """
        GET /v1/payments/{id} with bearer authorization.

        Args:
            transaction_id: Mercado Pago payment id
            access_token: Mercado Pago private access token (APP_USR-...)

        Returns:
            TransactionRecord parsed from the payment resource
        """
        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.get(
                    self._payment_url(transaction_id),
                    headers={
                        "Authorization": f"Bearer {access_token}",
                        "Content-Type": "application/json",
                    },
                )
        except httpx.HTTPError as e:
            raise TransactionLookupError(
                f"Mercado Pago request failed for payment {transaction_id}: {e}"
            ) from e

        if not response.is_success:
            raise TransactionLookupError(
                f"Mercado Pago returned {response.status_code} for payment {transaction_id}",
                status_code=response.status_code,
                response_text=response.text[:_MAX_ERROR_TEXT],
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise TransactionLookupError(
                f"Mercado Pago returned a non-JSON body for payment {transaction_id}",
                status_code=response.status_code,
                response_text=response.text[:_MAX_ERROR_TEXT],
            ) from e

        if not isinstance(payload, dict):
            raise TransactionLookupError(
                f"Mercado Pago returned an unexpected body for payment {transaction_id}",
                status_code=response.status_code,
            )

        if payload.get("id") in (None, ""):
            payload["id"] = transaction_id

        try:
            return TransactionRecord.model_validate(payload)
        except ValidationError as e:
            raise TransactionLookupError(
                f"Invalid Mercado Pago payment payload for {transaction_id}: {e}",
                status_code=response.status_code,
            ) from e
