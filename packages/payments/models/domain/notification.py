"""
Domain model for inbound payment notifications.
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class NotificationType(str, Enum):
    """Notification event types we act on."""

    PAYMENT = "payment"


class Notification(BaseModel):
    """Canonical form of one webhook call, whatever shape it arrived in."""

    event_type: Optional[str] = None
    transaction_id: Optional[str] = None

    # Raw request kept for forensic logging
    body: Any = None
    query: Dict[str, Any] = Field(default_factory=dict)

    @property
    def is_ignorable(self) -> bool:
        """
        True for notifications that are not about a payment we can look up.

        A missing event type is accepted; a present one must be "payment".
        """
        if self.event_type is not None and self.event_type != NotificationType.PAYMENT:
            return True
        return self.transaction_id is None

    def raw(self) -> Dict[str, Any]:
        """Raw request fields for log records."""
        return {"body": self.body, "query": self.query}
