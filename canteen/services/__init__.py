"""
Service container built once at startup
"""
import logging

from canteen.core.database import build_engine, build_session_factory, create_tables
from canteen.services.accounts import AccountService
from canteen.services.live_updates import LiveUpdates
from canteen.services.menu import MenuService
from canteen.services.notifications import NotificationService
from canteen.services.orders import OrderLifecycleManager
from canteen.services.ratings import RatingAggregator
from canteen.services.session import SessionState
from canteen.storage import CanteenRepository, LocalKeyValueStore, create_storage

logger = logging.getLogger(__name__)


class CanteenServices:
    """Wires the storage backend, session and services together"""

    def __init__(self, settings, backend=None):
        self.settings = settings
        self.engine = build_engine(settings.DATABASE_URL)
        create_tables(self.engine)
        self.kv = LocalKeyValueStore(build_session_factory(self.engine))

        self.backend = backend or create_storage(settings, self.kv)
        self.repo = CanteenRepository(self.backend)

        self.session = SessionState(self.kv)
        self.session.load()

        self.notifications = NotificationService(self.repo)
        self.orders = OrderLifecycleManager(self.repo, self.notifications)
        self.ratings = RatingAggregator(self.repo)
        self.menu = MenuService(self.repo)
        self.accounts = AccountService(self.repo, self.session)
        self.live = LiveUpdates(self.repo, settings.POLL_INTERVAL_SECONDS)

    def close(self):
        self.engine.dispose()
