"""
Order management data models and the order status state machine
"""
import enum
from typing import List
from pydantic import Field
from canteen.core.timestamps import utcnow_iso
from canteen.models.base import CamelModel
from canteen.models.menu import MenuItemBase

# Enums

class OrderStatus(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    DECLINED = "declined"
    READY = "ready"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return not ALLOWED_TRANSITIONS.get(self)

class PaymentMode(str, enum.Enum):
    CASH = "cash"
    UPI = "upi"
    CARD = "card"

ALLOWED_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.APPROVED, OrderStatus.DECLINED, OrderStatus.CANCELLED},
    OrderStatus.APPROVED: {OrderStatus.READY, OrderStatus.CANCELLED},
    OrderStatus.READY: {OrderStatus.COMPLETED, OrderStatus.CANCELLED},
    OrderStatus.DECLINED: set(),
    OrderStatus.COMPLETED: set(),
    OrderStatus.CANCELLED: set(),
}

# Stored entities

class OrderItem(MenuItemBase):
    """Snapshot of a menu item at checkout time"""
    id: str
    quantity: int = Field(..., ge=1)

class OrderBase(CamelModel):
    user_id: str
    user_name: str
    items: List[OrderItem]
    total: float
    status: OrderStatus = OrderStatus.PENDING
    payment_mode: PaymentMode = PaymentMode.CASH
    created_at: str = Field(default_factory=utcnow_iso)
    updated_at: str = Field(default_factory=utcnow_iso)
    prep_time: int  # minutes

class Order(OrderBase):
    id: str

# Pydantic Models for API

class CartLine(CamelModel):
    menu_item_id: str
    quantity: int = Field(1, ge=1)

class OrderCreate(CamelModel):
    items: List[CartLine] = []
    payment_mode: PaymentMode = PaymentMode.CASH

class OrderStatusUpdate(CamelModel):
    status: OrderStatus

class PrepTimeUpdate(CamelModel):
    prep_time: int

class ShopQueues(CamelModel):
    pending: List[Order] = []
    active: List[Order] = []
    history: List[Order] = []
