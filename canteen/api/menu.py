"""
Menu API router
"""
from typing import Any, List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from canteen.api.auth import get_services, require_role
from canteen.models.menu import MenuItem, MenuItemCreate, MenuItemType, MenuItemUpdate, ReviewCreate
from canteen.models.user import User, UserRole
from canteen.services import CanteenServices
from canteen.services.ratings import build_review

router = APIRouter(prefix="/menu", tags=["menu"])

@router.get("", response_model=List[MenuItem])
async def list_menu(
    search: Optional[str] = None,
    type: Optional[MenuItemType] = None,
    cuisine: Optional[str] = None,
    services: CanteenServices = Depends(get_services)
) -> Any:
    """Browse the menu with optional name search, type and cuisine filters"""
    return await services.menu.list_menu(search=search, item_type=type, cuisine=cuisine)

@router.get("/cuisines", response_model=List[str])
async def list_cuisines(
    services: CanteenServices = Depends(get_services)
) -> Any:
    """Distinct cuisines on the menu"""
    return await services.menu.cuisines()

@router.get("/{item_id}", response_model=MenuItem)
async def get_menu_item(
    item_id: str,
    services: CanteenServices = Depends(get_services)
) -> Any:
    """Get one menu item with its reviews"""
    item = await services.menu.get_item(item_id)
    if not item:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Menu item not found"
        )
    return item

@router.post("", response_model=MenuItem, status_code=status.HTTP_201_CREATED)
async def create_menu_item(
    item_data: MenuItemCreate,
    admin: User = Depends(require_role(UserRole.ADMIN)),
    services: CanteenServices = Depends(get_services)
) -> Any:
    """Add a menu item (admin)"""
    item = await services.menu.create_item(item_data)
    if not item:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Failed to save menu item"
        )
    return item

@router.put("/{item_id}", response_model=MenuItem)
async def update_menu_item(
    item_id: str,
    item_update: MenuItemUpdate,
    admin: User = Depends(require_role(UserRole.ADMIN)),
    services: CanteenServices = Depends(get_services)
) -> Any:
    """Edit a menu item (admin)"""
    item = await services.menu.update_item(item_id, item_update)
    if not item:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Failed to save menu item"
        )
    return item

@router.delete("/{item_id}")
async def delete_menu_item(
    item_id: str,
    admin: User = Depends(require_role(UserRole.ADMIN)),
    services: CanteenServices = Depends(get_services)
) -> Any:
    """Remove a menu item (admin). Past orders keep their snapshot."""
    if not await services.menu.delete_item(item_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Failed to delete menu item"
        )
    return {"message": "Menu item deleted"}

@router.post("/{item_id}/reviews", response_model=MenuItem, status_code=status.HTTP_201_CREATED)
async def add_review(
    item_id: str,
    review_data: ReviewCreate,
    current_user: User = Depends(require_role(UserRole.USER)),
    services: CanteenServices = Depends(get_services)
) -> Any:
    """Rate a menu item"""
    review = build_review(current_user, review_data.rating, review_data.comment)
    if not await services.ratings.add_review(item_id, review):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Failed to submit rating"
        )
    return await services.menu.get_item(item_id)
