"""
Menu browsing and admin menu management
"""
import logging
from typing import List, Optional

from canteen.core.constants import DEFAULT_ITEM_IMAGE
from canteen.core.exceptions import ValidationFailed
from canteen.models.menu import MenuItem, MenuItemBase, MenuItemCreate, MenuItemType, MenuItemUpdate
from canteen.storage.repository import CanteenRepository

logger = logging.getLogger(__name__)


def _check_required(item) -> None:
    if (
        not item.name.strip()
        or not item.cuisine.strip()
        or item.price <= 0
        or item.prep_time <= 0
    ):
        raise ValidationFailed("Please fill all required fields")


class MenuService:
    def __init__(self, repo: CanteenRepository):
        self.repo = repo

    async def list_menu(
        self,
        search: Optional[str] = None,
        item_type: Optional[MenuItemType] = None,
        cuisine: Optional[str] = None,
    ) -> List[MenuItem]:
        items = await self.repo.list_menu()
        if search:
            items = [item for item in items if search.lower() in item.name.lower()]
        if item_type:
            items = [item for item in items if item.type == item_type]
        if cuisine:
            items = [item for item in items if item.cuisine == cuisine]
        return items

    async def cuisines(self) -> List[str]:
        return list(dict.fromkeys(item.cuisine for item in await self.repo.list_menu()))

    async def get_item(self, item_id: str) -> Optional[MenuItem]:
        return await self.repo.get_menu_item(item_id)

    async def create_item(self, form: MenuItemCreate) -> Optional[MenuItem]:
        _check_required(form)
        item = await self.repo.create_menu_item(MenuItemBase(
            name=form.name.strip(),
            price=form.price,
            type=form.type,
            cuisine=form.cuisine.strip(),
            prep_time=form.prep_time,
            image=form.image or DEFAULT_ITEM_IMAGE,
            description=form.description or "",
        ))
        if item:
            logger.info("Menu item %s added: %s", item.id, item.name)
        return item

    async def update_item(self, item_id: str, update: MenuItemUpdate) -> Optional[MenuItem]:
        existing = await self.repo.get_menu_item(item_id)
        if existing is None:
            return None

        changes = update.model_dump(exclude_unset=True, exclude_none=True)
        if "image" in changes and not changes["image"]:
            changes["image"] = DEFAULT_ITEM_IMAGE
        updated = existing.model_copy(update=changes)
        _check_required(updated)

        if not await self.repo.update_menu_item(item_id, **changes):
            return None
        return updated

    async def delete_item(self, item_id: str) -> bool:
        if await self.repo.get_menu_item(item_id) is None:
            return False
        deleted = await self.repo.delete_menu_item(item_id)
        if deleted:
            logger.info("Menu item %s deleted", item_id)
        return deleted
