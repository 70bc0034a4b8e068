"""
Storage contract shared by the local and Firestore backends.

Documents are plain dicts with camelCase keys and an ``id`` entry. Every
operation is a coroutine so callers are written once for both backends.
Failures never raise: reads return ``[]``/``None`` and writes return
``None``/``False``.
"""
import abc
import enum
from typing import Any, Dict, List, Optional


class Collection(str, enum.Enum):
    USERS = "users"
    MENU = "menu"
    ORDERS = "orders"
    NOTIFICATIONS = "notifications"


DELETABLE_COLLECTIONS = frozenset({Collection.MENU})


class StorageBackend(abc.ABC):
    """Create/read/update/delete over the four canteen collections"""

    @abc.abstractmethod
    async def list_documents(
        self,
        collection: Collection,
        where: Optional[Dict[str, Any]] = None,
        order_by: Optional[str] = None,
        descending: bool = False,
    ) -> List[Dict[str, Any]]:
        """Documents matching every equality filter in ``where``"""

    @abc.abstractmethod
    async def get_document(self, collection: Collection, doc_id: str) -> Optional[Dict[str, Any]]:
        ...

    @abc.abstractmethod
    async def create_document(self, collection: Collection, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Store ``fields`` under a new id and return them with the id"""

    @abc.abstractmethod
    async def update_document(self, collection: Collection, doc_id: str, fields: Dict[str, Any]) -> bool:
        """Merge ``fields`` into an existing document"""

    async def delete_document(self, collection: Collection, doc_id: str) -> bool:
        if collection not in DELETABLE_COLLECTIONS:
            raise ValueError(f"Documents in {collection.value} cannot be deleted")
        return await self._delete(collection, doc_id)

    @abc.abstractmethod
    async def _delete(self, collection: Collection, doc_id: str) -> bool:
        ...
