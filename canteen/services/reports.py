"""
Sales statistics computed from a loaded order list
"""
from typing import Dict, List

from canteen.models.order import Order, OrderStatus
from canteen.models.report import ItemCount, SalesReport

TOP_ITEMS = 5


def build_sales_report(orders: List[Order]) -> SalesReport:
    item_counts: Dict[str, int] = {}
    for order in orders:
        for item in order.items:
            item_counts[item.name] = item_counts.get(item.name, 0) + item.quantity

    # sorted() is stable: ties keep the order items were first seen
    most_ordered = sorted(item_counts.items(), key=lambda entry: entry[1], reverse=True)[:TOP_ITEMS]

    return SalesReport(
        total_orders=len(orders),
        total_sales=sum(order.total for order in orders),
        pending_orders=len([o for o in orders if o.status == OrderStatus.PENDING]),
        completed_orders=len([
            o for o in orders if o.status in (OrderStatus.READY, OrderStatus.COMPLETED)
        ]),
        most_ordered=[ItemCount(name=name, quantity=quantity) for name, quantity in most_ordered],
    )
