from .interface import DocumentStoreInterface, SERVER_TIMESTAMP
from .exceptions import DocumentStoreError, DocumentStoreNotInitializedError
from .factory import init_document_store, get_document_store, close_document_store
from .memory_store import MemoryDocumentStore

__all__ = [
    "DocumentStoreInterface",
    "SERVER_TIMESTAMP",
    "DocumentStoreError",
    "DocumentStoreNotInitializedError",
    "init_document_store",
    "get_document_store",
    "close_document_store",
    "MemoryDocumentStore",
]
