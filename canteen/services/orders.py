"""
Order lifecycle: checkout, status transitions, preparation time and
the notifications each change produces.
"""
import logging
from typing import Dict, List, Optional

from canteen.core.exceptions import InvalidTransition, ValidationFailed
from canteen.core.timestamps import utcnow_iso
from canteen.models.menu import MenuItemBase
from canteen.models.order import (
    ALLOWED_TRANSITIONS, CartLine, Order, OrderBase, OrderItem,
    OrderStatus, PaymentMode, ShopQueues
)
from canteen.models.user import User
from canteen.services.locks import KeyedLocks
from canteen.services.notifications import NotificationService
from canteen.storage.repository import CanteenRepository

logger = logging.getLogger(__name__)

SNAPSHOT_FIELDS = set(MenuItemBase.model_fields) | {"id"}


def short_id(order_id: str) -> str:
    return order_id[-6:]


def shop_queues(orders: List[Order]) -> ShopQueues:
    """Split orders the way the shop works through them, newest first"""
    ordered = sorted(orders, key=lambda o: o.created_at, reverse=True)
    return ShopQueues(
        pending=[o for o in ordered if o.status == OrderStatus.PENDING],
        active=[o for o in ordered if o.status == OrderStatus.APPROVED],
        history=[o for o in ordered if o.status not in (OrderStatus.PENDING, OrderStatus.APPROVED)],
    )


class OrderLifecycleManager:
    def __init__(self, repo: CanteenRepository, notifications: NotificationService):
        self.repo = repo
        self.notifications = notifications
        self.locks = KeyedLocks()

    async def place_order(
        self, user: User, cart: List[CartLine], payment_mode: PaymentMode = PaymentMode.CASH
    ) -> Optional[Order]:
        """Snapshot the cart's menu items into a new pending order"""
        if not cart:
            raise ValidationFailed("Your cart is empty")

        quantities: Dict[str, int] = {}
        for line in cart:
            quantities[line.menu_item_id] = quantities.get(line.menu_item_id, 0) + line.quantity

        items = []
        for menu_item_id, quantity in quantities.items():
            menu_item = await self.repo.get_menu_item(menu_item_id)
            if menu_item is None:
                raise ValidationFailed(f"Menu item {menu_item_id} is not available")
            items.append(OrderItem(**menu_item.model_dump(include=SNAPSHOT_FIELDS), quantity=quantity))

        now = utcnow_iso()
        order = await self.repo.create_order(OrderBase(
            user_id=user.id,
            user_name=user.name,
            items=items,
            total=sum(item.price * item.quantity for item in items),
            status=OrderStatus.PENDING,
            payment_mode=payment_mode,
            created_at=now,
            updated_at=now,
            prep_time=max(item.prep_time for item in items),
        ))
        if order:
            logger.info("Order %s placed by %s, total %.2f", order.id, user.id, order.total)
        return order

    async def list_orders(self) -> List[Order]:
        return await self.repo.list_orders()

    async def list_orders_for_user(self, user_id: str) -> List[Order]:
        return await self.repo.list_orders_for_user(user_id)

    async def get_order(self, order_id: str) -> Optional[Order]:
        return await self.repo.get_order(order_id)

    async def transition(
        self, order_id: str, new_status: OrderStatus, message: Optional[str] = None
    ) -> Optional[Order]:
        """Move an order along the state machine and notify its owner.

        Returns None when the order does not exist or the status write
        fails. The notification is written after the order; if that second
        write fails the order keeps its new status.
        """
        new_status = OrderStatus(new_status)
        async with self.locks.hold(order_id):
            order = await self.repo.get_order(order_id)
            if order is None:
                return None
            if new_status not in ALLOWED_TRANSITIONS[order.status]:
                raise InvalidTransition(order.status.value, new_status.value)

            now = utcnow_iso()
            if not await self.repo.update_order(order_id, status=new_status, updated_at=now):
                return None
            updated = order.model_copy(update={"status": new_status, "updated_at": now})
            logger.info("Order %s: %s -> %s", order_id, order.status.value, new_status.value)

            await self.notifications.notify(
                updated, message or f"Your order #{short_id(order_id)} has been {new_status.value}"
            )
            return updated

    async def cancel(self, order_id: str) -> Optional[Order]:
        return await self.transition(
            order_id,
            OrderStatus.CANCELLED,
            message=f"Your order #{short_id(order_id)} has been cancelled",
        )

    async def update_prep_time(self, order_id: str, minutes: int) -> Optional[Order]:
        if minutes is None or minutes <= 0:
            raise ValidationFailed("Please enter a valid preparation time")

        async with self.locks.hold(order_id):
            order = await self.repo.get_order(order_id)
            if order is None:
                return None

            now = utcnow_iso()
            if not await self.repo.update_order(order_id, prep_time=minutes, updated_at=now):
                return None
            updated = order.model_copy(update={"prep_time": minutes, "updated_at": now})

            await self.notifications.notify(
                updated,
                f"Preparation time updated to {minutes} minutes for order #{short_id(order_id)}",
            )
            return updated
