import threading
from typing import Optional

from common.core.config import settings
from common.core.constants import DocumentStoreProvider
from common.core.telemetry import get_logger

from .exceptions import DocumentStoreNotInitializedError
from .interface import DocumentStoreInterface

logger = get_logger(__name__)

# Process-wide store, set by init_document_store() and cleared at shutdown
_document_store: Optional[DocumentStoreInterface] = None
_init_lock = threading.Lock()


def _create_document_store(provider: DocumentStoreProvider) -> DocumentStoreInterface:
    match provider:
        case DocumentStoreProvider.FIRESTORE:
            from .firestore_store import FirestoreDocumentStore

            return FirestoreDocumentStore()
        case DocumentStoreProvider.MEMORY:
            from .memory_store import MemoryDocumentStore

            return MemoryDocumentStore()
        case _:
            raise ValueError(f"Unknown document store provider: {provider}")


def init_document_store(
    provider: Optional[DocumentStoreProvider] = None,
) -> DocumentStoreInterface:
    """
    Construct the process-wide document store exactly once.

    Repeated calls return the already-initialized store.

    Args:
        provider: Backend to construct. Defaults to settings.document_store_provider.

    Returns:
        DocumentStoreInterface: The initialized store
    """
    global _document_store

    with _init_lock:
        if _document_store is None:
            provider = provider or settings.document_store_provider
            _document_store = _create_document_store(provider)
            logger.info(f"Initialized {provider.value} document store")
    return _document_store


def get_document_store() -> DocumentStoreInterface:
    """
    Get the process-wide document store.

    Raises:
        DocumentStoreNotInitializedError: If init_document_store() has not run
    """
    if _document_store is None:
        raise DocumentStoreNotInitializedError("Document store is not initialized")
    return _document_store


async def close_document_store() -> None:
    """Tear down the process-wide document store. Called at process exit."""
    global _document_store

    with _init_lock:
        store, _document_store = _document_store, None
    if store is not None:
        await store.close()
        logger.info("Document store closed")
