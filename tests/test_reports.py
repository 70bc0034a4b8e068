from canteen.models.order import Order, OrderItem, OrderStatus
from canteen.services.reports import build_sales_report


def make_order(order_id, status, *lines):
    items = [
        OrderItem(id=name.lower(), name=name, price=price, type="veg", cuisine="Indian", prep_time=10, quantity=qty)
        for name, price, qty in lines
    ]
    return Order(
        id=order_id,
        user_id="user-1",
        user_name="Asha",
        items=items,
        total=sum(price * qty for _, price, qty in lines),
        status=status,
        prep_time=10,
    )


def test_empty_report():
    report = build_sales_report([])

    assert report.total_orders == 0
    assert report.total_sales == 0
    assert report.pending_orders == 0
    assert report.completed_orders == 0
    assert report.most_ordered == []


def test_totals_and_status_counts():
    orders = [
        make_order("o1", OrderStatus.PENDING, ("Masala Dosa", 60, 2)),
        make_order("o2", OrderStatus.READY, ("Chicken Biryani", 120, 1)),
        make_order("o3", OrderStatus.COMPLETED, ("Cold Coffee", 50, 1)),
        make_order("o4", OrderStatus.CANCELLED, ("Masala Dosa", 60, 1)),
    ]

    report = build_sales_report(orders)

    assert report.total_orders == 4
    assert report.total_sales == 350
    assert report.pending_orders == 1
    assert report.completed_orders == 2


def test_most_ordered_top_five_with_ties_in_first_seen_order():
    orders = [
        make_order("o1", OrderStatus.PENDING, ("Tea", 10, 2), ("Samosa", 15, 3)),
        make_order("o2", OrderStatus.PENDING, ("Idli", 40, 2), ("Vada", 30, 1), ("Poori", 45, 1)),
        make_order("o3", OrderStatus.PENDING, ("Coffee", 20, 2), ("Upma", 35, 1)),
    ]

    report = build_sales_report(orders)

    assert [(c.name, c.quantity) for c in report.most_ordered] == [
        ("Samosa", 3), ("Tea", 2), ("Idli", 2), ("Coffee", 2), ("Vada", 1),
    ]


def test_report_serializes_camel_case():
    data = build_sales_report([make_order("o1", OrderStatus.PENDING, ("Tea", 10, 1))]).model_dump(by_alias=True)

    assert data["totalOrders"] == 1
    assert data["mostOrdered"] == [{"name": "Tea", "quantity": 1}]
