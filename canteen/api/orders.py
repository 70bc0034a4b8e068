"""
Orders API router
"""
from typing import Any, List
from fastapi import APIRouter, Depends, HTTPException, status
from canteen.api.auth import get_current_user, get_services, require_role
from canteen.models.order import Order, OrderCreate, OrderStatusUpdate, PrepTimeUpdate, ShopQueues
from canteen.models.user import User, UserRole
from canteen.services import CanteenServices
from canteen.services.orders import shop_queues

router = APIRouter(prefix="/orders", tags=["orders"])

def order_not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Order not found"
    )

@router.post("", response_model=Order, status_code=status.HTTP_201_CREATED)
async def create_order(
    order_data: OrderCreate,
    current_user: User = Depends(require_role(UserRole.USER)),
    services: CanteenServices = Depends(get_services)
) -> Any:
    """Check out the cart as a new pending order"""
    order = await services.orders.place_order(current_user, order_data.items, order_data.payment_mode)
    if not order:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Failed to place order"
        )
    return order

@router.get("/mine", response_model=List[Order])
async def get_user_orders(
    current_user: User = Depends(require_role(UserRole.USER)),
    services: CanteenServices = Depends(get_services)
) -> Any:
    """Get the signed-in user's orders, newest first"""
    return await services.orders.list_orders_for_user(current_user.id)

@router.get("", response_model=List[Order])
async def get_all_orders(
    staff: User = Depends(require_role(UserRole.SHOP, UserRole.ADMIN)),
    services: CanteenServices = Depends(get_services)
) -> Any:
    """Get every order, newest first (shop/admin)"""
    return await services.orders.list_orders()

@router.get("/queues", response_model=ShopQueues)
async def get_shop_queues(
    staff: User = Depends(require_role(UserRole.SHOP, UserRole.ADMIN)),
    services: CanteenServices = Depends(get_services)
) -> Any:
    """Pending, approved and finished orders for the shop screen"""
    return shop_queues(await services.orders.list_orders())

@router.get("/{order_id}", response_model=Order)
async def get_order_details(
    order_id: str,
    current_user: User = Depends(get_current_user),
    services: CanteenServices = Depends(get_services)
) -> Any:
    """Get one order"""
    order = await services.orders.get_order(order_id)
    if not order or (current_user.role == UserRole.USER and order.user_id != current_user.id):
        raise order_not_found()
    return order

@router.put("/{order_id}/status", response_model=Order)
async def update_order_status(
    order_id: str,
    status_update: OrderStatusUpdate,
    shop: User = Depends(require_role(UserRole.SHOP)),
    services: CanteenServices = Depends(get_services)
) -> Any:
    """Approve, decline, mark ready or complete an order (shop)"""
    order = await services.orders.transition(order_id, status_update.status)
    if not order:
        raise order_not_found()
    return order

@router.put("/{order_id}/prep-time", response_model=Order)
async def update_prep_time(
    order_id: str,
    prep_time_update: PrepTimeUpdate,
    shop: User = Depends(require_role(UserRole.SHOP)),
    services: CanteenServices = Depends(get_services)
) -> Any:
    """Change the estimated preparation time (shop)"""
    order = await services.orders.update_prep_time(order_id, prep_time_update.prep_time)
    if not order:
        raise order_not_found()
    return order

@router.post("/{order_id}/cancel", response_model=Order)
async def cancel_order(
    order_id: str,
    current_user: User = Depends(require_role(UserRole.USER, UserRole.SHOP)),
    services: CanteenServices = Depends(get_services)
) -> Any:
    """Cancel an order (its owner or the shop)"""
    if current_user.role == UserRole.USER:
        order = await services.orders.get_order(order_id)
        if not order or order.user_id != current_user.id:
            raise order_not_found()

    order = await services.orders.cancel(order_id)
    if not order:
        raise order_not_found()
    return order
