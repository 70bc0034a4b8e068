"""
Sales report models
"""
from typing import List
from canteen.models.base import CamelModel

class ItemCount(CamelModel):
    name: str
    quantity: int

class SalesReport(CamelModel):
    total_orders: int = 0
    total_sales: float = 0
    pending_orders: int = 0
    completed_orders: int = 0
    most_ordered: List[ItemCount] = []
