"""
Order notifications: fan-out on order changes and read tracking
"""
import logging
from typing import List, Optional

from canteen.models.notification import Notification, NotificationBase
from canteen.models.order import Order
from canteen.storage.repository import CanteenRepository

logger = logging.getLogger(__name__)


class NotificationService:
    def __init__(self, repo: CanteenRepository):
        self.repo = repo

    async def notify(self, order: Order, message: str) -> Optional[Notification]:
        """Tell the order's owner about a change. A lost write is only logged."""
        notification = await self.repo.create_notification(
            NotificationBase(user_id=order.user_id, order_id=order.id, message=message)
        )
        if notification is None:
            logger.warning("Notification for order %s was not stored: %s", order.id, message)
        return notification

    async def list_for_user(self, user_id: str) -> List[Notification]:
        return await self.repo.list_notifications_for_user(user_id)

    async def unread_count(self, user_id: str) -> int:
        notifications = await self.repo.list_notifications_for_user(user_id)
        return len([n for n in notifications if not n.read])

    async def mark_read(self, notification_id: str) -> bool:
        return await self.repo.update_notification(notification_id, read=True)

    async def clear_all(self, user_id: str) -> int:
        """Mark every unread notification of the user as read; returns how many"""
        cleared = 0
        for notification in await self.repo.list_notifications_for_user(user_id):
            if notification.read:
                continue
            if await self.repo.update_notification(notification.id, read=True):
                cleared += 1
        return cleared
