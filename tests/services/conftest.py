"""Route test fixtures - FastAPI test client over the in-memory database.

Invariants:
    - get_db dependency overridden to use the test engine
    - db_manager patched so readiness probes see the test engine
    - Overrides and db_manager restored after each test
"""

import pytest
from httpx import ASGITransport, AsyncClient

import car_api.infrastructure.database as db_module
from car_api.infrastructure.database import get_db
from car_api.main import app
from car_api.models.car import Car


@pytest.fixture
async def client(fake_manager):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with fake_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_car(test_db):
    """Insert a car directly into the test DB."""
    car = Car(id="abc123", attributes={"model": "Civic", "year": 2019})
    test_db.add(car)
    await test_db.commit()
    return car
