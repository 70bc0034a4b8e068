"""
User administration API router
"""
from typing import Any, List
from fastapi import APIRouter, Depends, HTTPException, status
from canteen.api.auth import get_services, require_role
from canteen.models.user import User, UserPublic, UserRole
from canteen.services import CanteenServices

router = APIRouter(prefix="/users", tags=["users"])

@router.get("", response_model=List[UserPublic])
async def list_users(
    admin: User = Depends(require_role(UserRole.ADMIN)),
    services: CanteenServices = Depends(get_services)
) -> Any:
    """List registered customers (admin)"""
    return await services.accounts.list_users()

@router.post("/{user_id}/toggle-active", response_model=UserPublic)
async def toggle_user_active(
    user_id: str,
    admin: User = Depends(require_role(UserRole.ADMIN)),
    services: CanteenServices = Depends(get_services)
) -> Any:
    """Activate or deactivate a customer (admin)"""
    user = await services.accounts.toggle_active(user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Failed to update user status"
        )
    return user
