import copy
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from common.core.telemetry import get_logger
from .interface import DocumentStoreInterface, SERVER_TIMESTAMP

logger = get_logger(__name__)


class MemoryDocumentStore(DocumentStoreInterface):
    """In-memory document store with merge semantics."""

    def __init__(self):
        self._collections: Dict[str, Dict[str, Dict[str, Any]]] = {}
        logger.info("Memory document store initialized")

    @staticmethod
    def _resolve(fields: Dict[str, Any]) -> Dict[str, Any]:
        now = datetime.now(timezone.utc)
        return {
            name: (now if value is SERVER_TIMESTAMP else copy.deepcopy(value))
            for name, value in fields.items()
        }

    async def upsert_merge(
        self, collection: str, key: str, fields: Dict[str, Any]
    ) -> None:
        """Create or merge a document."""
        documents = self._collections.setdefault(collection, {})
        document = documents.setdefault(key, {})
        document.update(self._resolve(fields))
        logger.debug(f"Merged {sorted(fields)} into {collection}/{key}")

    async def get(self, collection: str, key: str) -> Optional[Dict[str, Any]]:
        """Read a copy of a document."""
        document = self._collections.get(collection, {}).get(key)
        if document is None:
            return None
        return copy.deepcopy(document)

    async def close(self) -> None:
        self._collections.clear()
