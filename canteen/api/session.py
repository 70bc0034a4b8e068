"""
Session preferences API router
"""
from typing import Any
from fastapi import APIRouter, Depends
from canteen.api.auth import get_services
from canteen.models.user import Preferences
from canteen.services import CanteenServices

router = APIRouter(prefix="/session", tags=["session"])

@router.get("/preferences", response_model=Preferences)
async def get_preferences(
    services: CanteenServices = Depends(get_services)
) -> Any:
    """Get display preferences"""
    return Preferences(dark_mode=services.session.dark_mode)

@router.put("/preferences", response_model=Preferences)
async def update_preferences(
    preferences: Preferences,
    services: CanteenServices = Depends(get_services)
) -> Any:
    """Persist display preferences"""
    services.session.set_dark_mode(preferences.dark_mode)
    return Preferences(dark_mode=services.session.dark_mode)
