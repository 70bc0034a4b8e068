"""
Typed access to the canteen collections.

Wraps whichever ``StorageBackend`` was configured at startup and converts
between stored documents and the pydantic entities.
"""
from typing import Any, Dict, List, Optional

from pydantic.alias_generators import to_camel
from pydantic_core import to_jsonable_python

from canteen.models.menu import MenuItem, MenuItemBase
from canteen.models.notification import Notification, NotificationBase
from canteen.models.order import Order, OrderBase
from canteen.models.user import User, UserBase
from canteen.storage.base import Collection, StorageBackend


def to_changes(changes: Dict[str, Any]) -> Dict[str, Any]:
    """Partial update keyed by attribute name -> stored document fields"""
    return {
        to_camel(name): to_jsonable_python(value, by_alias=True)
        for name, value in changes.items()
    }


class CanteenRepository:
    """Per-collection operations returning entities"""

    def __init__(self, backend: StorageBackend):
        self.backend = backend

    # =========================================================================
    # USERS
    # =========================================================================

    async def list_users(self) -> List[User]:
        documents = await self.backend.list_documents(Collection.USERS)
        return [User.model_validate(doc) for doc in documents]

    async def get_user(self, user_id: str) -> Optional[User]:
        doc = await self.backend.get_document(Collection.USERS, user_id)
        return User.model_validate(doc) if doc else None

    async def get_user_by_email(self, email: str) -> Optional[User]:
        documents = await self.backend.list_documents(Collection.USERS, where={"email": email})
        return User.model_validate(documents[0]) if documents else None

    async def create_user(self, user: UserBase) -> Optional[User]:
        doc = await self.backend.create_document(Collection.USERS, user.to_document())
        return User.model_validate(doc) if doc else None

    async def update_user(self, user_id: str, **changes) -> bool:
        return await self.backend.update_document(Collection.USERS, user_id, to_changes(changes))

    # =========================================================================
    # MENU
    # =========================================================================

    async def list_menu(self) -> List[MenuItem]:
        documents = await self.backend.list_documents(Collection.MENU)
        return [MenuItem.model_validate(doc) for doc in documents]

    async def get_menu_item(self, item_id: str) -> Optional[MenuItem]:
        doc = await self.backend.get_document(Collection.MENU, item_id)
        return MenuItem.model_validate(doc) if doc else None

    async def create_menu_item(self, item: MenuItemBase) -> Optional[MenuItem]:
        fields = {**item.to_document(), "reviews": [], "averageRating": 0}
        doc = await self.backend.create_document(Collection.MENU, fields)
        return MenuItem.model_validate(doc) if doc else None

    async def update_menu_item(self, item_id: str, **changes) -> bool:
        return await self.backend.update_document(Collection.MENU, item_id, to_changes(changes))

    async def delete_menu_item(self, item_id: str) -> bool:
        return await self.backend.delete_document(Collection.MENU, item_id)

    # =========================================================================
    # ORDERS
    # =========================================================================

    async def list_orders(self) -> List[Order]:
        documents = await self.backend.list_documents(
            Collection.ORDERS, order_by="createdAt", descending=True
        )
        return [Order.model_validate(doc) for doc in documents]

    async def list_orders_for_user(self, user_id: str) -> List[Order]:
        documents = await self.backend.list_documents(
            Collection.ORDERS, where={"userId": user_id}, order_by="createdAt", descending=True
        )
        return [Order.model_validate(doc) for doc in documents]

    async def get_order(self, order_id: str) -> Optional[Order]:
        doc = await self.backend.get_document(Collection.ORDERS, order_id)
        return Order.model_validate(doc) if doc else None

    async def create_order(self, order: OrderBase) -> Optional[Order]:
        doc = await self.backend.create_document(Collection.ORDERS, order.to_document())
        return Order.model_validate(doc) if doc else None

    async def update_order(self, order_id: str, **changes) -> bool:
        return await self.backend.update_document(Collection.ORDERS, order_id, to_changes(changes))

    # =========================================================================
    # NOTIFICATIONS
    # =========================================================================

    async def list_notifications(self) -> List[Notification]:
        documents = await self.backend.list_documents(
            Collection.NOTIFICATIONS, order_by="createdAt", descending=True
        )
        return [Notification.model_validate(doc) for doc in documents]

    async def list_notifications_for_user(self, user_id: str) -> List[Notification]:
        documents = await self.backend.list_documents(
            Collection.NOTIFICATIONS, where={"userId": user_id}, order_by="createdAt", descending=True
        )
        return [Notification.model_validate(doc) for doc in documents]

    async def create_notification(self, notification: NotificationBase) -> Optional[Notification]:
        doc = await self.backend.create_document(Collection.NOTIFICATIONS, notification.to_document())
        return Notification.model_validate(doc) if doc else None

    async def update_notification(self, notification_id: str, **changes) -> bool:
        return await self.backend.update_document(
            Collection.NOTIFICATIONS, notification_id, to_changes(changes)
        )
