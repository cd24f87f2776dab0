from typing import Any, Dict, Optional

import firebase_admin
from firebase_admin import credentials, firestore, firestore_async
from google.api_core.exceptions import GoogleAPICallError

from common.core.config import settings
from common.core.telemetry import trace_span, get_logger
from .exceptions import DocumentStoreError
from .interface import DocumentStoreInterface, SERVER_TIMESTAMP

logger = get_logger(__name__)

FIREBASE_APP_NAME = "payment-relay"


def _initialize_firebase_app() -> firebase_admin.App:
    """Initialize the Firebase Admin app used by the store."""
    # Load credentials explicitly if a service-account file is configured.
    # Otherwise None makes the SDK fall back to application default credentials.
    cred = None
    if settings.firebase_credentials_path:
        cred = credentials.Certificate(settings.firebase_credentials_path)

    options = {}
    if settings.firebase_project_id:
        options["projectId"] = settings.firebase_project_id

    app = firebase_admin.initialize_app(
        credential=cred, options=options, name=FIREBASE_APP_NAME
    )
    logger.info(f"Firebase Admin SDK initialized for project: {app.project_id}")
    return app


class FirestoreDocumentStore(DocumentStoreInterface):
    """Firestore implementation of the document store."""

    def __init__(self, app: Optional[firebase_admin.App] = None):
        self.app = app or _initialize_firebase_app()
        self.client = firestore_async.client(app=self.app)

    @staticmethod
    def _resolve(fields: Dict[str, Any]) -> Dict[str, Any]:
        return {
            name: (firestore.SERVER_TIMESTAMP if value is SERVER_TIMESTAMP else value)
            for name, value in fields.items()
        }

    @trace_span
    async def upsert_merge(
        self, collection: str, key: str, fields: Dict[str, Any]
    ) -> None:
        """Create or merge a document with set(merge=True)."""
        document = self.client.collection(collection).document(key)
        try:
            await document.set(self._resolve(fields), merge=True)
        except GoogleAPICallError as e:
            raise DocumentStoreError(
                f"Failed to write {collection}/{key}: {e}"
            ) from e

    @trace_span
    async def get(self, collection: str, key: str) -> Optional[Dict[str, Any]]:
        """Read a document snapshot."""
        try:
            snapshot = await self.client.collection(collection).document(key).get()
        except GoogleAPICallError as e:
            raise DocumentStoreError(f"Failed to read {collection}/{key}: {e}") from e
        if not snapshot.exists:
            return None
        return snapshot.to_dict()

    async def close(self) -> None:
        firebase_admin.delete_app(self.app)
        logger.info("Firebase Admin SDK app deleted")
