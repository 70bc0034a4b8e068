"""
Process-wide session: the signed-in identity and the dark-mode flag.

Always persisted in the local key-value store, whichever data backend is
active, so a restart restores the session without touching Firestore.
"""
import logging
from typing import Optional

from pydantic import ValidationError

from canteen.core.constants import STORAGE_KEYS
from canteen.models.user import User
from canteen.storage.local import LocalKeyValueStore

logger = logging.getLogger(__name__)


class SessionState:
    def __init__(self, kv_store: LocalKeyValueStore):
        self.kv = kv_store
        self.current_user: Optional[User] = None
        self.dark_mode = False

    def load(self):
        """Restore the persisted session; call once on startup"""
        self.dark_mode = self.kv.get_item(STORAGE_KEYS["dark_mode"]) == "true"
        data = self.kv.get_item(STORAGE_KEYS["current_user"])
        self.current_user = None
        if data:
            try:
                self.current_user = User.model_validate_json(data)
            except ValidationError as exc:
                logger.warning("Discarding unreadable stored session: %s", exc)
                self.kv.remove_item(STORAGE_KEYS["current_user"])

    def sign_in(self, user: User):
        self.current_user = user
        self.kv.set_item(STORAGE_KEYS["current_user"], user.model_dump_json(by_alias=True))

    def sign_out(self):
        self.current_user = None
        self.kv.remove_item(STORAGE_KEYS["current_user"])

    def set_dark_mode(self, enabled: bool):
        self.dark_mode = bool(enabled)
        self.kv.set_item(STORAGE_KEYS["dark_mode"], "true" if self.dark_mode else "false")

    def toggle_dark_mode(self) -> bool:
        self.set_dark_mode(not self.dark_mode)
        return self.dark_mode
