from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class _ServerTimestamp:
    """Field-value sentinel replaced by the backend's own write time."""

    _instance: Optional["_ServerTimestamp"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "SERVER_TIMESTAMP"


SERVER_TIMESTAMP = _ServerTimestamp()


class DocumentStoreInterface(ABC):
    """Interface for keyed document stores."""

    @abstractmethod
    async def upsert_merge(
        self, collection: str, key: str, fields: Dict[str, Any]
    ) -> None:
        """
        Create the document if absent, otherwise merge the given fields into it.

        Fields not named in `fields` are left untouched. Any value equal to
        SERVER_TIMESTAMP is stored as the store-assigned write time.

        Args:
            collection: Collection name
            key: Document key within the collection
            fields: Partial document to merge

        Raises:
            DocumentStoreError: If the write fails
        """
        pass

    @abstractmethod
    async def get(self, collection: str, key: str) -> Optional[Dict[str, Any]]:
        """
        Read a document.

        Args:
            collection: Collection name
            key: Document key within the collection

        Returns:
            The document fields, or None if the document does not exist
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release clients and credentials held by the store."""
        pass
