"""
Service for granting entitlements from confirmed payments.
"""

from typing import Any, Optional

from common.core.telemetry import trace_span, get_logger
from packages.payments.models.domain.transaction import TransactionRecord
from packages.users.exceptions import UnattributableTransactionError
from packages.users.models.domain.user_entitlement import EntitlementGrant
from packages.users.repositories.user_entitlement_repository import (
    UserEntitlementRepository,
)
from packages.users.utils.user_keys import email_to_user_id

logger = get_logger(__name__)

# Metadata keys the app sets at checkout, checked in order. The app's own
# login email wins over the payer email, which can differ from it.
APP_EMAIL_METADATA_KEYS = ("app_email", "user_email", "email")


def _non_empty(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


class EntitlementService:
    """Service for premium entitlement grants."""

    def __init__(self, repository: Optional[UserEntitlementRepository] = None):
        self.repository = repository or UserEntitlementRepository()

    @staticmethod
    def select_email(record: TransactionRecord) -> str:
        """
        Pick the email that identifies the user to credit.

        Raises:
            UnattributableTransactionError: Neither metadata nor payer carry an email
        """
        for key in APP_EMAIL_METADATA_KEYS:
            email = _non_empty(record.metadata.get(key))
            if email:
                return email

        email = _non_empty(record.payer_email)
        if email:
            return email

        raise UnattributableTransactionError(record.id)

    @trace_span
    async def grant_premium(self, record: TransactionRecord) -> EntitlementGrant:
        """
        Mark the user behind an approved transaction as premium.

        Safe to repeat: replaying the same transaction leaves the same document.
        """
        email = self.select_email(record)
        user_id = email_to_user_id(email)

        await self.repository.grant_premium(user_id, record.id)

        logger.info(
            f"User {email} granted premium",
            extra={"user_id": user_id, "transaction_id": record.id},
        )
        return EntitlementGrant(user_id=user_id, email=email, transaction_id=record.id)
