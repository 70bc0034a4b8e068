"""
Order notification models
"""
from pydantic import Field
from canteen.core.timestamps import utcnow_iso
from canteen.models.base import CamelModel

class NotificationBase(CamelModel):
    user_id: str
    order_id: str
    message: str
    read: bool = False
    created_at: str = Field(default_factory=utcnow_iso)

class Notification(NotificationBase):
    id: str
