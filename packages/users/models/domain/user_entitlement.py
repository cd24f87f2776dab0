"""
Domain models for the entitlement fields of a user document.

Field names on the stored document are camelCase because client apps read
the same documents.
"""

from typing import Any, Dict

from pydantic import BaseModel

from common.providers.document_store.interface import SERVER_TIMESTAMP


class PremiumGrantUpdate(BaseModel):
    """Partial update that marks a user premium."""

    last_transaction_id: str

    def to_document(self) -> Dict[str, Any]:
        """Fields merged into the user document."""
        return {
            "premium": True,
            "premiumLastUpdate": SERVER_TIMESTAMP,
            "lastTransactionId": self.last_transaction_id,
        }


class EntitlementGrant(BaseModel):
    """Result of granting premium for a transaction."""

    user_id: str
    email: str
    transaction_id: str
