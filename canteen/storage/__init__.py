"""
Storage backends and the startup-time backend selection
"""
import logging

from canteen.storage.base import Collection, StorageBackend
from canteen.storage.local import LocalKeyValueStore, LocalStorage
from canteen.storage.repository import CanteenRepository

logger = logging.getLogger(__name__)


def create_storage(settings, kv_store: LocalKeyValueStore) -> StorageBackend:
    """Pick the data backend named by ``STORAGE_BACKEND``"""
    backend = settings.STORAGE_BACKEND.lower()
    if backend == "local":
        logger.info("Using local key-value storage at %s", settings.DATABASE_URL)
        return LocalStorage(kv_store)
    if backend == "firestore":
        from canteen.storage.firestore import FirestoreStorage

        logger.info("Using Firestore storage (project=%s)", settings.FIRESTORE_PROJECT_ID or "<default>")
        return FirestoreStorage.from_settings(settings)
    raise ValueError(f"Unknown STORAGE_BACKEND: {settings.STORAGE_BACKEND}")


__all__ = [
    "CanteenRepository",
    "Collection",
    "LocalKeyValueStore",
    "LocalStorage",
    "StorageBackend",
    "create_storage",
]
