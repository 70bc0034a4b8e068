"""
Local storage backend.

A key-value store persisted through SQLAlchemy stands in for browser
localStorage. Each collection is one JSON array under a fixed key; every
write reads the whole array, mutates it and writes it back.
"""
import json
import logging
import uuid
from copy import deepcopy
from typing import Any, Dict, List, Optional

from sqlalchemy import Column, String, Text
from sqlalchemy.orm import sessionmaker

from canteen.core.constants import DEFAULT_MENU, STORAGE_KEYS
from canteen.core.database import Base
from canteen.storage.base import Collection, StorageBackend

logger = logging.getLogger(__name__)

ID_PREFIXES = {
    Collection.USERS: "user",
    Collection.MENU: "item",
    Collection.ORDERS: "order",
    Collection.NOTIFICATIONS: "notif",
}


class KeyValueEntry(Base):
    """One localStorage slot"""
    __tablename__ = "local_storage"

    key = Column(String(100), primary_key=True)
    value = Column(Text, nullable=False)


class LocalKeyValueStore:
    """getItem/setItem/removeItem over a SQL table"""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def get_item(self, key: str) -> Optional[str]:
        db = self.session_factory()
        try:
            entry = db.get(KeyValueEntry, key)
            return entry.value if entry else None
        finally:
            db.close()

    def set_item(self, key: str, value: str):
        db = self.session_factory()
        try:
            entry = db.get(KeyValueEntry, key)
            if entry:
                entry.value = value
            else:
                db.add(KeyValueEntry(key=key, value=value))
            db.commit()
        finally:
            db.close()

    def remove_item(self, key: str):
        db = self.session_factory()
        try:
            db.query(KeyValueEntry).filter(KeyValueEntry.key == key).delete()
            db.commit()
        finally:
            db.close()


class LocalStorage(StorageBackend):
    """Synchronous backend; its coroutines never suspend"""

    def __init__(self, kv_store: LocalKeyValueStore):
        self.kv = kv_store

    def _read(self, collection: Collection) -> List[Dict[str, Any]]:
        data = self.kv.get_item(STORAGE_KEYS[collection.value])
        if data is None:
            if collection == Collection.MENU:
                logger.info("Seeding default menu with %d items", len(DEFAULT_MENU))
                menu = deepcopy(DEFAULT_MENU)
                self._write(collection, menu)
                return menu
            return []
        return json.loads(data)

    def _write(self, collection: Collection, documents: List[Dict[str, Any]]):
        self.kv.set_item(STORAGE_KEYS[collection.value], json.dumps(documents))

    async def list_documents(self, collection, where=None, order_by=None, descending=False):
        documents = self._read(collection)
        if where:
            documents = [
                doc for doc in documents
                if all(doc.get(field) == value for field, value in where.items())
            ]
        if order_by:
            documents.sort(key=lambda doc: doc.get(order_by) or "", reverse=descending)
        return documents

    async def get_document(self, collection, doc_id):
        for doc in self._read(collection):
            if doc.get("id") == doc_id:
                return doc
        return None

    async def create_document(self, collection, fields):
        documents = self._read(collection)
        document = {**deepcopy(fields), "id": f"{ID_PREFIXES[collection]}-{uuid.uuid4().hex[:12]}"}
        documents.append(document)
        self._write(collection, documents)
        return deepcopy(document)

    async def update_document(self, collection, doc_id, fields):
        documents = self._read(collection)
        for doc in documents:
            if doc.get("id") == doc_id:
                doc.update(deepcopy(fields))
                doc["id"] = doc_id
                self._write(collection, documents)
                return True
        return False

    async def _delete(self, collection, doc_id):
        documents = self._read(collection)
        remaining = [doc for doc in documents if doc.get("id") != doc_id]
        if len(remaining) == len(documents):
            return False
        self._write(collection, remaining)
        return True
