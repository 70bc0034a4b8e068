"""
User data models
"""
import enum
from pydantic import EmailStr, Field
from canteen.core.timestamps import utcnow_iso
from canteen.models.base import CamelModel

# Enums

class UserRole(str, enum.Enum):
    USER = "user"
    SHOP = "shop"
    ADMIN = "admin"

# Stored entities

class UserBase(CamelModel):
    email: str
    password: str
    role: UserRole = UserRole.USER
    name: str
    active: bool = True
    created_at: str = Field(default_factory=utcnow_iso)

class User(UserBase):
    id: str

# Pydantic Models for API

class UserPublic(CamelModel):
    """User as returned by the API (no password)"""
    id: str
    email: str
    role: UserRole
    name: str
    active: bool
    created_at: str

class UserCreate(CamelModel):
    name: str
    email: EmailStr
    password: str

class LoginRequest(CamelModel):
    email: str
    password: str

class Preferences(CamelModel):
    dark_mode: bool = False
