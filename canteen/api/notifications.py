"""
Notifications API router
"""
from typing import Any, List
from fastapi import APIRouter, Depends, HTTPException, status
from canteen.api.auth import get_current_user, get_services
from canteen.models.notification import Notification
from canteen.models.user import User
from canteen.services import CanteenServices

router = APIRouter(prefix="/notifications", tags=["notifications"])

@router.get("", response_model=List[Notification])
async def get_notifications(
    current_user: User = Depends(get_current_user),
    services: CanteenServices = Depends(get_services)
) -> Any:
    """Get the signed-in user's notifications, newest first"""
    return await services.notifications.list_for_user(current_user.id)

@router.get("/unread-count")
async def get_unread_count(
    current_user: User = Depends(get_current_user),
    services: CanteenServices = Depends(get_services)
) -> Any:
    """Number of unread notifications"""
    return {"unreadCount": await services.notifications.unread_count(current_user.id)}

@router.post("/clear")
async def clear_notifications(
    current_user: User = Depends(get_current_user),
    services: CanteenServices = Depends(get_services)
) -> Any:
    """Mark all notifications as read"""
    cleared = await services.notifications.clear_all(current_user.id)
    return {"cleared": cleared}

@router.post("/{notification_id}/read")
async def mark_notification_read(
    notification_id: str,
    current_user: User = Depends(get_current_user),
    services: CanteenServices = Depends(get_services)
) -> Any:
    """Mark one notification as read"""
    owned = {n.id for n in await services.notifications.list_for_user(current_user.id)}
    if notification_id not in owned or not await services.notifications.mark_read(notification_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Notification not found"
        )
    return {"message": "Notification marked as read"}
