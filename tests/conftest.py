"""
Shared test fixtures — SQLite test database, test client, in-memory catalog.
"""

import os
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Point the app at the test database before importing app modules
os.environ["DATABASE_URL"] = "sqlite:///./test.db"

from balcony_estimator import schemas
from balcony_estimator.catalog import CatalogStore, CategoryCache, MaterialLookup
from balcony_estimator.database import Base, get_db
from balcony_estimator.estimate_engine import EstimateEngine
from balcony_estimator.main import app


TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_database():
    """Create all tables before each test, drop after."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    """FastAPI test client with a fresh category cache."""
    app.state.category_cache = CategoryCache(ttl_seconds=300)
    return TestClient(app)


@pytest.fixture
def db():
    """Direct database session for test setup/assertions."""
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


# --- In-memory catalog ---

class FakeCatalogStore(CatalogStore):
    """
    Dict-backed CatalogStore that records every request.
    Categories listed in `failing_categories` raise on list(); with
    `failing_from_page` set, every page at or past it raises.
    """

    def __init__(self):
        self.materials = {}
        self.get_requests = []
        self.page_requests = []
        self.failing_categories = set()
        self.failing_from_page = None

    def put(self, name, categories, price=100.0, unit="шт.", dimensions=None,
            quantity=0.0, is_hidden=False, material_id=None):
        material_id = material_id or f"m{len(self.materials) + 1:03d}"
        material = schemas.Material(
            id=material_id,
            name=name,
            categories=list(categories),
            price=price,
            quantity=quantity,
            unit=unit,
            dimensions=dimensions,
            is_hidden=is_hidden,
        )
        self.materials[material_id] = material
        return material

    def get(self, material_id):
        self.get_requests.append(material_id)
        return self.materials.get(material_id)

    def list(self, category, page, page_size):
        self.page_requests.append((category, page, page_size))
        if category in self.failing_categories:
            raise ConnectionError(f"catalog unavailable for {category}")
        if self.failing_from_page is not None and page >= self.failing_from_page:
            raise ConnectionError(f"catalog read failed on page {page}")
        matching = [
            m for _, m in sorted(self.materials.items())
            if category is None or category in m.categories
        ]
        start = page * page_size
        return schemas.MaterialPage(items=matching[start:start + page_size], total=len(matching))


def key_for(material, category=None):
    """Composite key the UI would post for a material."""
    category = category or (material.categories[0] if material.categories else "")
    return f"{material.id}:{category}:{material.name}"


@pytest.fixture
def store():
    return FakeCatalogStore()


@pytest.fixture
def lookup(store):
    return MaterialLookup(store, page_size=100)


@pytest.fixture
def estimate_engine(lookup):
    return EstimateEngine(lookup)
