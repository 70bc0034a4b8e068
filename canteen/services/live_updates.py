"""
Polled live view of the menu and a user's notifications
"""
from typing import Any, Dict

from canteen.storage.repository import CanteenRepository


class LiveUpdates:
    """Re-reads storage every ``interval`` seconds; callers push changed snapshots"""

    def __init__(self, repo: CanteenRepository, interval: float):
        self.repo = repo
        self.interval = interval

    async def snapshot(self, user_id: str) -> Dict[str, Any]:
        menu = await self.repo.list_menu()
        notifications = await self.repo.list_notifications_for_user(user_id)
        return {
            "menu": [item.model_dump(by_alias=True, mode="json") for item in menu],
            "notifications": [n.model_dump(by_alias=True, mode="json") for n in notifications],
            "unreadCount": len([n for n in notifications if not n.read]),
        }
