# Standard Library
import copy
from typing import Any, AsyncGenerator, Dict, Optional, Tuple

# Third-Party Libraries
import pytest
import pytest_asyncio

from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, AsyncEngine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

# First-Party Libraries
from storefront.main import app
from storefront.database import get_db_session
from storefront.records.domain.exceptions import RecordConflictException, RecordStoreException
from storefront.records.domain.repositories import AbstractRecordStore, RecordSnapshot
from storefront.records.interfaces.dependencies import get_record_store

# URL de base pour la DB en mémoire
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# --- Fixtures de Base ---

@pytest_asyncio.fixture(scope="function")
async def db_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Engine en mémoire (une seule connexion partagée) avec les tables créées."""
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    await engine.dispose()

@pytest_asyncio.fixture(scope="function")
async def db_session(db_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with TestingSessionLocal() as session:
        yield session

@pytest_asyncio.fixture(scope="function")
async def test_client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Fournit un AsyncClient httpx qui utilise la session DB de test isolée."""
    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    app.dependency_overrides[get_db_session] = override_get_db_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    del app.dependency_overrides[get_db_session]

# --- Stockage en mémoire ---

class InMemoryRecordStore(AbstractRecordStore):
    """Stockage simulé: mêmes règles de révision que SQLRecordStore, sans base."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self.records: Dict[str, Tuple[Any, int]] = {}
        self.writes = 0
        for key, value in (initial or {}).items():
            self.records[key] = (copy.deepcopy(value), 1)

    def value(self, key: str) -> Any:
        return copy.deepcopy(self.records.get(key, (None, 0))[0])

    async def get(self, key: str) -> RecordSnapshot:
        value, revision = self.records.get(key, (None, 0))
        return RecordSnapshot(key=key, value=copy.deepcopy(value), revision=revision)

    async def set(self, key: str, value: Any, expected_revision: Optional[int] = None) -> int:
        _, current = self.records.get(key, (None, 0))
        if expected_revision is not None and expected_revision != current:
            raise RecordConflictException(key, expected_revision)
        self.records[key] = (copy.deepcopy(value), current + 1)
        self.writes += 1
        return current + 1

    async def ping(self) -> bool:
        return True

class ConcurrentWriterStore(InMemoryRecordStore):
    """Simule un autre écrivain qui modifie l'enregistrement juste avant nos `conflicts` premières écritures."""

    def __init__(self, initial: Dict[str, Any], key: str, concurrent_item: Dict[str, Any], conflicts: int = 1):
        super().__init__(initial)
        self.key = key
        self.concurrent_item = concurrent_item
        self.remaining_conflicts = conflicts

    async def set(self, key: str, value: Any, expected_revision: Optional[int] = None) -> int:
        if key == self.key and self.remaining_conflicts > 0:
            self.remaining_conflicts -= 1
            items, revision = self.records.get(key, ([], 0))
            items = copy.deepcopy(items) + [copy.deepcopy(self.concurrent_item)]
            self.records[key] = (items, revision + 1)
        return await super().set(key, value, expected_revision)

class FailingRecordStore(InMemoryRecordStore):
    """Stockage dont toutes les opérations échouent."""

    async def get(self, key: str) -> RecordSnapshot:
        raise RecordStoreException(key, "lecture", "stockage indisponible")

    async def set(self, key: str, value: Any, expected_revision: Optional[int] = None) -> int:
        raise RecordStoreException(key, "écriture", "stockage indisponible")

    async def ping(self) -> bool:
        return False

@pytest.fixture
def memory_store() -> InMemoryRecordStore:
    return InMemoryRecordStore()

@pytest.fixture
def use_record_store():
    """Remplace le stockage utilisé par les requêtes HTTP pendant le test."""
    def install(store: AbstractRecordStore) -> AbstractRecordStore:
        app.dependency_overrides[get_record_store] = lambda: store
        return store

    yield install
    app.dependency_overrides.pop(get_record_store, None)

# --- Données d'exemple ---

@pytest.fixture
def sample_product() -> Dict[str, Any]:
    return {
        "name": "Télécommande universelle",
        "description": "Compatible avec la plupart des téléviseurs",
        "category": "telecommandes",
        "price": 25.5,
        "stock": 12,
        "image": "https://example.com/telecommande.png",
        "featured": True,
    }

@pytest.fixture
def sample_order() -> Dict[str, Any]:
    return {
        "customerInfo": {
            "name": "Amira Ben Salah",
            "email": "amira@example.com",
            "phone": "+216 20 000 000",
            "address": "12 rue de Carthage, Tunis",
        },
        "items": [
            {"id": 1, "name": "Télécommande universelle", "price": 25.5, "category": "telecommandes", "quantity": 2},
        ],
        "total": 51.0,
    }
