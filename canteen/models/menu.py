"""
Menu catalog data models
"""
import enum
from typing import List, Optional
from pydantic import Field
from canteen.core.timestamps import utcnow_iso
from canteen.models.base import CamelModel

# Enums

class MenuItemType(str, enum.Enum):
    VEG = "veg"
    NON_VEG = "non-veg"
    BEVERAGE = "beverage"

# Stored entities

class Review(CamelModel):
    """A rating embedded in a menu item. Immutable once written."""
    user_id: str
    user_name: str
    rating: int = Field(..., ge=1, le=5)
    comment: Optional[str] = None
    created_at: str = Field(default_factory=utcnow_iso)

class MenuItemBase(CamelModel):
    name: str
    price: float = Field(..., ge=0)
    type: MenuItemType
    cuisine: str
    prep_time: int = Field(..., gt=0)  # minutes
    image: str = ""
    description: str = ""

class MenuItem(MenuItemBase):
    id: str
    reviews: List[Review] = []
    average_rating: float = 0

# Pydantic Models for API

class MenuItemCreate(CamelModel):
    """Admin form; required fields are checked by the menu service"""
    name: str = ""
    price: float = 0
    type: MenuItemType = MenuItemType.VEG
    cuisine: str = ""
    prep_time: int = 0
    image: str = ""
    description: str = ""

class MenuItemUpdate(CamelModel):
    name: Optional[str] = None
    price: Optional[float] = None
    type: Optional[MenuItemType] = None
    cuisine: Optional[str] = None
    prep_time: Optional[int] = None
    image: Optional[str] = None
    description: Optional[str] = None

class ReviewCreate(CamelModel):
    rating: int = 0
    comment: Optional[str] = None
