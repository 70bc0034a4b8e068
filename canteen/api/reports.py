"""
Sales reports API router
"""
from typing import Any
from fastapi import APIRouter, Depends
from canteen.api.auth import get_services, require_role
from canteen.models.report import SalesReport
from canteen.models.user import User, UserRole
from canteen.services import CanteenServices
from canteen.services.reports import build_sales_report

router = APIRouter(prefix="/reports", tags=["reports"])

@router.get("/sales", response_model=SalesReport)
async def get_sales_report(
    admin: User = Depends(require_role(UserRole.ADMIN)),
    services: CanteenServices = Depends(get_services)
) -> Any:
    """Totals, status counts and the five most ordered items (admin)"""
    return build_sales_report(await services.orders.list_orders())
