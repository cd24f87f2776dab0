"""Domain models for payments."""

from packages.payments.models.domain.notification import (
    Notification,
    NotificationType,
)
from packages.payments.models.domain.transaction import (
    TransactionPayer,
    TransactionRecord,
    TransactionStatus,
)
from packages.payments.models.domain.webhook_result import WebhookResult

__all__ = [
    # Notifications
    "Notification",
    "NotificationType",
    # Transactions
    "TransactionPayer",
    "TransactionRecord",
    "TransactionStatus",
    # Webhooks
    "WebhookResult",
]
