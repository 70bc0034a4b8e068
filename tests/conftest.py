import uuid
from collections import defaultdict
from copy import deepcopy

import pytest
from fastapi.testclient import TestClient
from google.api_core import exceptions as google_exceptions

from canteen.core.config import Settings
from canteen.core.constants import DEFAULT_MENU
from canteen.core.database import build_engine, build_session_factory, create_tables, drop_tables
from canteen.main import create_app
from canteen.models.user import User
from canteen.services.accounts import AccountService
from canteen.services.menu import MenuService
from canteen.services.notifications import NotificationService
from canteen.services.orders import OrderLifecycleManager
from canteen.services.ratings import RatingAggregator
from canteen.services.session import SessionState
from canteen.storage import CanteenRepository, LocalKeyValueStore, LocalStorage
from canteen.storage.firestore import FirestoreStorage


# =============================================================================
# In-memory stand-in for google.cloud.firestore.AsyncClient
# =============================================================================

class FakeSnapshot:
    def __init__(self, doc_id, data):
        self.id = doc_id
        self._data = data

    @property
    def exists(self):
        return self._data is not None

    def to_dict(self):
        return deepcopy(self._data)


class FakeDocumentRef:
    def __init__(self, client, collection, doc_id):
        self.client = client
        self.collection = collection
        self.id = doc_id

    async def get(self):
        self.client.check()
        return FakeSnapshot(self.id, deepcopy(self.client.data[self.collection].get(self.id)))

    async def set(self, data):
        self.client.check()
        self.client.data[self.collection][self.id] = deepcopy(data)

    async def update(self, data):
        self.client.check()
        if self.id not in self.client.data[self.collection]:
            raise google_exceptions.NotFound(f"No document to update: {self.id}")
        self.client.data[self.collection][self.id].update(deepcopy(data))

    async def delete(self):
        self.client.check()
        self.client.data[self.collection].pop(self.id, None)


class FakeQuery:
    def __init__(self, client, collection, filters=(), order=None):
        self.client = client
        self.collection = collection
        self.filters = filters
        self.order = order

    def where(self, filter=None):
        return FakeQuery(self.client, self.collection, self.filters + (filter,), self.order)

    def order_by(self, field, direction="ASCENDING"):
        return FakeQuery(self.client, self.collection, self.filters, (field, direction))

    async def stream(self):
        self.client.check()
        self.client.queries.append((self.collection, self.filters, self.order))
        documents = list(self.client.data[self.collection].items())
        for field_filter in self.filters:
            assert field_filter.op_string == "=="
            documents = [
                (doc_id, data) for doc_id, data in documents
                if data.get(field_filter.field_path) == field_filter.value
            ]
        if self.order:
            field, direction = self.order
            documents.sort(key=lambda entry: entry[1][field], reverse=direction == "DESCENDING")
        for doc_id, data in documents:
            yield FakeSnapshot(doc_id, deepcopy(data))


class FakeCollection(FakeQuery):
    def document(self, doc_id=None):
        return FakeDocumentRef(self.client, self.collection, doc_id or uuid.uuid4().hex[:20])


class FakeFirestoreClient:
    def __init__(self):
        self.data = defaultdict(dict)
        self.queries = []
        self.error = None

    def collection(self, name):
        return FakeCollection(self, name)

    def check(self):
        if self.error is not None:
            raise self.error

    def seed_menu(self):
        for item in DEFAULT_MENU:
            self.data["menu"][item["id"]] = {k: v for k, v in item.items() if k != "id"}


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def settings(tmp_path):
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'canteen.db'}",
        STORAGE_BACKEND="local",
        POLL_INTERVAL_SECONDS=0.05,
    )


@pytest.fixture
def kv_store(settings):
    engine = build_engine(settings.DATABASE_URL)
    create_tables(engine)
    yield LocalKeyValueStore(build_session_factory(engine))
    drop_tables(engine)
    engine.dispose()


@pytest.fixture
def firestore_client():
    return FakeFirestoreClient()


@pytest.fixture(params=["local", "firestore"])
def backend(request, kv_store, firestore_client):
    """Every test using this runs once per storage backend"""
    if request.param == "local":
        return LocalStorage(kv_store)
    firestore_client.seed_menu()
    return FirestoreStorage(firestore_client)


@pytest.fixture
def repo(backend):
    return CanteenRepository(backend)


@pytest.fixture
def session_state(kv_store):
    session = SessionState(kv_store)
    session.load()
    return session


@pytest.fixture
def notifications(repo):
    return NotificationService(repo)


@pytest.fixture
def orders(repo, notifications):
    return OrderLifecycleManager(repo, notifications)


@pytest.fixture
def ratings(repo):
    return RatingAggregator(repo)


@pytest.fixture
def menu(repo):
    return MenuService(repo)


@pytest.fixture
def accounts(repo, session_state):
    return AccountService(repo, session_state)


@pytest.fixture
def customer():
    return User(
        id="user-0a1b2c3d4e5f",
        email="asha@example.com",
        password="not-used",
        name="Asha",
    )


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client
