from typing import Optional

from common.core.config import settings
from common.core.telemetry import trace_span, get_logger
from common.providers.document_store.factory import get_document_store
from common.providers.document_store.interface import DocumentStoreInterface
from packages.users.models.domain.user_entitlement import PremiumGrantUpdate

logger = get_logger(__name__)


class UserEntitlementRepository:
    """Merges entitlement fields into user documents."""

    def __init__(
        self,
        store: Optional[DocumentStoreInterface] = None,
        collection: Optional[str] = None,
    ):
        self._store = store
        self.collection = collection or settings.users_collection

    @property
    def store(self) -> DocumentStoreInterface:
        # Resolved on use so that constructing the repository never touches the store
        return self._store or get_document_store()

    @trace_span
    async def grant_premium(self, user_id: str, transaction_id: str) -> None:
        """Upsert-merge the premium flag onto a user document."""
        update = PremiumGrantUpdate(last_transaction_id=transaction_id)
        await self.store.upsert_merge(self.collection, user_id, update.to_document())
        logger.debug(f"Merged premium grant into {self.collection}/{user_id}")
