"""
Authentication API router
"""
from typing import Any
from fastapi import APIRouter, Depends, HTTPException, Request, status
from canteen.models.user import LoginRequest, User, UserCreate, UserPublic, UserRole
from canteen.services import CanteenServices

router = APIRouter(prefix="/auth", tags=["authentication"])

def get_services(request: Request) -> CanteenServices:
    """Service container built at startup"""
    return request.app.state.services

async def get_current_user(
    services: CanteenServices = Depends(get_services)
) -> User:
    """Identity held by the process-wide session"""
    user = await services.accounts.current_user()
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not signed in"
        )
    return user

def require_role(*roles: UserRole):
    """Dependency that admits only the given roles"""
    async def dependency(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role not in roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Not allowed for this account"
            )
        return current_user
    return dependency

@router.post("/signup", response_model=UserPublic, status_code=status.HTTP_201_CREATED)
async def sign_up(
    user_data: UserCreate,
    services: CanteenServices = Depends(get_services)
) -> Any:
    """Register a new customer and sign them in"""
    user = await services.accounts.sign_up(user_data.name, user_data.email, user_data.password)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Failed to create account"
        )
    return user

@router.post("/login", response_model=UserPublic)
async def login(
    credentials: LoginRequest,
    services: CanteenServices = Depends(get_services)
) -> Any:
    """Sign in with email and password"""
    return await services.accounts.sign_in(credentials.email, credentials.password)

@router.post("/logout")
async def logout(
    services: CanteenServices = Depends(get_services)
) -> Any:
    """Clear the current session"""
    services.accounts.sign_out()
    return {"message": "Successfully logged out"}

@router.get("/me", response_model=UserPublic)
async def read_users_me(
    current_user: User = Depends(get_current_user)
) -> Any:
    """Get the signed-in identity"""
    return current_user
