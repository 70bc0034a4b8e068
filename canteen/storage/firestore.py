"""
Firestore storage backend.

Each entity is one document. Timestamps are stored as native Firestore
timestamps and exposed as ISO-8601 strings. Client errors are logged and
downgraded to empty results.
"""
import logging
from datetime import datetime
from typing import Any, Dict, Optional

from google.api_core import exceptions as google_exceptions
from google.cloud import firestore
from google.cloud.firestore_v1.base_query import FieldFilter

from canteen.core.timestamps import parse_iso, to_iso, utcnow_iso
from canteen.storage.base import Collection, StorageBackend

logger = logging.getLogger(__name__)

TIMESTAMP_FIELDS = {
    Collection.USERS: ("createdAt",),
    Collection.MENU: (),
    Collection.ORDERS: ("createdAt", "updatedAt"),
    Collection.NOTIFICATIONS: ("createdAt",),
}

BACKEND_ERRORS = (google_exceptions.GoogleAPICallError, google_exceptions.RetryError)


class FirestoreStorage(StorageBackend):
    """Asynchronous backend over ``firestore.AsyncClient``"""

    def __init__(self, client):
        self.client = client

    @classmethod
    def from_settings(cls, settings) -> "FirestoreStorage":
        client = firestore.AsyncClient(
            project=settings.FIRESTORE_PROJECT_ID or None,
            database=settings.FIRESTORE_DATABASE,
        )
        return cls(client)

    # Conversion helpers

    def _to_firestore(self, collection: Collection, fields: Dict[str, Any]) -> Dict[str, Any]:
        data = {key: value for key, value in fields.items() if key != "id"}
        for field in TIMESTAMP_FIELDS[collection]:
            if isinstance(data.get(field), str):
                data[field] = parse_iso(data[field])
        return data

    def _from_firestore(self, collection: Collection, doc_id: str, data: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        document = dict(data or {})
        for field in TIMESTAMP_FIELDS[collection]:
            value = document.get(field)
            if isinstance(value, datetime):
                document[field] = to_iso(value)
            elif not value:
                document[field] = utcnow_iso()
        if collection == Collection.MENU:
            document["reviews"] = document.get("reviews") or []
            document["averageRating"] = document.get("averageRating") or 0
        document["id"] = doc_id
        return document

    def _log_failure(self, action: str, collection: Collection, exc: Exception):
        logger.error("Error %s %s: %s", action, collection.value, exc)
        if isinstance(exc, google_exceptions.PermissionDenied):
            logger.error("Permission denied. Check Firestore security rules.")
        elif isinstance(exc, google_exceptions.ServiceUnavailable):
            logger.error("Firestore service unavailable. Check your Firebase configuration.")

    # Contract

    async def list_documents(self, collection, where=None, order_by=None, descending=False):
        if order_by is None and collection == Collection.MENU:
            order_by = "name"
        query = self.client.collection(collection.value)
        for field, value in (where or {}).items():
            query = query.where(filter=FieldFilter(field, "==", value))
        if order_by:
            direction = firestore.Query.DESCENDING if descending else firestore.Query.ASCENDING
            query = query.order_by(order_by, direction=direction)
        try:
            documents = []
            async for snapshot in query.stream():
                documents.append(self._from_firestore(collection, snapshot.id, snapshot.to_dict()))
            return documents
        except BACKEND_ERRORS as exc:
            self._log_failure("fetching", collection, exc)
            return []

    async def get_document(self, collection, doc_id):
        try:
            snapshot = await self.client.collection(collection.value).document(doc_id).get()
        except BACKEND_ERRORS as exc:
            self._log_failure("fetching", collection, exc)
            return None
        if not snapshot.exists:
            return None
        return self._from_firestore(collection, snapshot.id, snapshot.to_dict())

    async def create_document(self, collection, fields):
        doc_ref = self.client.collection(collection.value).document()
        try:
            await doc_ref.set(self._to_firestore(collection, fields))
        except BACKEND_ERRORS as exc:
            self._log_failure("creating", collection, exc)
            return None
        return {**fields, "id": doc_ref.id}

    async def update_document(self, collection, doc_id, fields):
        doc_ref = self.client.collection(collection.value).document(doc_id)
        try:
            await doc_ref.update(self._to_firestore(collection, fields))
        except BACKEND_ERRORS as exc:
            self._log_failure("updating", collection, exc)
            return False
        return True

    async def _delete(self, collection, doc_id):
        try:
            await self.client.collection(collection.value).document(doc_id).delete()
        except BACKEND_ERRORS as exc:
            self._log_failure("deleting", collection, exc)
            return False
        return True
