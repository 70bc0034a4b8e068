"""
Sign-up, sign-in and account activation
"""
import logging
from typing import List, Optional

from email_validator import EmailNotValidError, validate_email
from werkzeug.security import check_password_hash, generate_password_hash

from canteen.core.constants import PREDEFINED_ACCOUNTS
from canteen.core.exceptions import (
    AccountDeactivated, EmailAlreadyRegistered, InvalidCredentials, ValidationFailed
)
from canteen.models.user import User, UserBase, UserRole
from canteen.services.session import SessionState
from canteen.storage.repository import CanteenRepository

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> Optional[str]:
    """Canonical form of an address (domain lowercased), None if it is not one"""
    try:
        return validate_email(email, check_deliverability=False).normalized
    except EmailNotValidError:
        return None


def predefined_account(email: str, password: Optional[str] = None) -> Optional[User]:
    """The built-in shop/admin account for ``email`` (and ``password`` if given)"""
    for account in PREDEFINED_ACCOUNTS.values():
        if account["email"] == email and (password is None or account["password"] == password):
            return User(**account)
    return None


class AccountService:
    def __init__(self, repo: CanteenRepository, session: SessionState):
        self.repo = repo
        self.session = session

    async def sign_up(self, name: str, email: str, password: str) -> Optional[User]:
        """Register a customer and sign them in. None if the write failed."""
        name, email = (name or "").strip(), (email or "").strip()
        if not name or not email or not password:
            raise ValidationFailed("Please fill all fields")

        if predefined_account(email):
            raise EmailAlreadyRegistered()
        email = normalize_email(email)
        if email is None:
            raise ValidationFailed("Please enter a valid email address")
        if await self.repo.get_user_by_email(email):
            raise EmailAlreadyRegistered()

        user = await self.repo.create_user(UserBase(
            email=email,
            password=generate_password_hash(password),
            role=UserRole.USER,
            name=name,
            active=True,
        ))
        if user is None:
            return None

        logger.info("Registered user %s", user.id)
        self.session.sign_in(user)
        return user

    async def sign_in(self, email: str, password: str) -> User:
        email = (email or "").strip()
        if not email or not password:
            raise ValidationFailed("Please fill all fields")

        user = predefined_account(email, password)
        if user is None:
            normalized = normalize_email(email)
            user = await self.repo.get_user_by_email(normalized) if normalized else None
            if user is None or not check_password_hash(user.password, password):
                raise InvalidCredentials()
            if not user.active:
                raise AccountDeactivated()

        self.session.sign_in(user)
        return user

    async def current_user(self) -> Optional[User]:
        """The session identity, re-checked against storage for customers.

        A customer deactivated while signed in is signed out here.
        """
        user = self.session.current_user
        if user is None or user.role != UserRole.USER:
            return user
        stored = await self.repo.get_user(user.id)
        if stored is not None and not stored.active:
            logger.info("Signing out deactivated user %s", user.id)
            self.session.sign_out()
            raise AccountDeactivated()
        return user

    def sign_out(self):
        self.session.sign_out()

    async def list_users(self) -> List[User]:
        return await self.repo.list_users()

    async def toggle_active(self, user_id: str) -> Optional[User]:
        """Flip a customer's active flag. Predefined accounts are not stored and cannot be toggled."""
        user = await self.repo.get_user(user_id)
        if user is None:
            return None
        if not await self.repo.update_user(user_id, active=not user.active):
            return None
        logger.info("User %s %s", user_id, "deactivated" if user.active else "activated")
        return user.model_copy(update={"active": not user.active})
