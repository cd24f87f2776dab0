"""
Service that runs one payment notification through the relay pipeline:
normalize, authenticate, verify with the provider, grant the entitlement.
"""

import json
from typing import Any, Mapping, Optional

from common.core.config import settings
from common.core.telemetry import trace_span, get_logger
from packages.payments.exceptions import (
    MissingAccessTokenError,
    TransactionLookupError,
)
from packages.payments.models.domain.notification import Notification
from packages.payments.models.domain.webhook_result import WebhookResult
from packages.payments.services.notification_normalizer import normalize_notification
from packages.payments.services.transaction_verifier import TransactionVerifier
from packages.payments.services.webhook_authenticator import is_authentic
from packages.users.exceptions import UnattributableTransactionError
from packages.users.services.entitlement_service import EntitlementService

logger = get_logger(__name__)


def _raw_text(body: Any, query: Optional[Mapping[str, Any]]) -> str:
    """Render the raw request for log messages."""
    return json.dumps({"body": body, "query": dict(query or {})}, default=str)


class PaymentWebhookService:
    """Handles payment notifications. Every call ends in a WebhookResult."""

    def __init__(
        self,
        verifier: Optional[TransactionVerifier] = None,
        entitlement_service: Optional[EntitlementService] = None,
        shared_secret: Optional[str] = None,
    ):
        self.verifier = verifier or TransactionVerifier()
        self.entitlement_service = entitlement_service or EntitlementService()
        self.shared_secret = shared_secret or settings.webhook_shared_secret

    @trace_span
    async def handle(
        self,
        body: Any,
        query: Optional[Mapping[str, Any]],
        headers: Mapping[str, str],
    ) -> WebhookResult:
        """
        Process one webhook call.

        Nothing raised inside the pipeline escapes; unexpected faults become
        WebhookResult.ERROR.
        """
        try:
            notification = normalize_notification(body, query)
            return await self._process(notification, headers)
        except Exception:
            logger.exception(
                f"Unexpected error while handling payment webhook: {_raw_text(body, query)}",
                extra={"body": body, "query": dict(query or {})},
            )
            return WebhookResult.ERROR

    async def _process(
        self, notification: Notification, headers: Mapping[str, str]
    ) -> WebhookResult:
        if notification.is_ignorable:
            logger.info(
                "Webhook received but ignored (not a valid payment notification): "
                f"{_raw_text(notification.body, notification.query)}",
                extra=notification.raw(),
            )
            return WebhookResult.IGNORED

        if not is_authentic(self.shared_secret, headers):
            logger.warning(
                "Webhook rejected: shared secret missing or invalid",
                extra={"transaction_id": notification.transaction_id},
            )
            return WebhookResult.UNAUTHORIZED

        transaction_id = notification.transaction_id
        try:
            record = await self.verifier.verify(transaction_id)
        except MissingAccessTokenError:
            logger.error(
                "Cannot verify payment: provider access token not configured: "
                f"{_raw_text(notification.body, notification.query)}",
                extra=notification.raw(),
            )
            return WebhookResult.MISSING_ACCESS_TOKEN
        except TransactionLookupError as e:
            # Provider simulators send ids that do not exist; redelivery is harmless
            logger.error(
                f"Error fetching transaction {transaction_id} from provider: {e}: "
                f"{_raw_text(notification.body, notification.query)}",
                extra={
                    **notification.raw(),
                    "provider_status": e.status_code,
                    "provider_response": e.response_text,
                },
            )
            return WebhookResult.FETCH_FAILED

        if not record.is_approved:
            logger.info(
                f"Payment {transaction_id} not approved yet (status={record.status})",
                extra={"transaction_id": transaction_id, "status": record.status},
            )
            return WebhookResult.NOT_APPROVED

        try:
            await self.entitlement_service.grant_premium(record)
        except UnattributableTransactionError:
            logger.error(
                f"Payment {transaction_id} approved but has no payer email; nobody to credit: "
                f"{_raw_text(notification.body, notification.query)}",
                extra={**notification.raw(), "metadata": record.metadata},
            )
            return WebhookResult.MISSING_EMAIL

        return WebhookResult.GRANTED
