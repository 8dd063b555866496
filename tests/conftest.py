"""
Pytest configuration and shared fixtures.

Este módulo provee fixtures reutilizables para:
- Reloj e id generator deterministas
- Repositorios in-memory y su unidad de trabajo
- Datos de prueba (auto de referencia, usuarios con licencia)
- Casos de uso cableados sobre los repositorios in-memory
- Cliente HTTP de prueba (FastAPI TestClient)
- Sesión SQLAlchemy sobre SQLite in-memory
"""

from datetime import date
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from car_rental.api.dependencies import build_use_cases, get_use_cases
from car_rental.application.interfaces.clock import FakeClock
from car_rental.application.interfaces.id_generator import FakeIdGenerator
from car_rental.config import Settings
from car_rental.domain.entities.car import Car
from car_rental.domain.entities.user import User
from car_rental.infrastructure.db.tables import metadata
from car_rental.infrastructure.in_memory import (
    InMemoryBookingRepo,
    InMemoryCarRepo,
    InMemoryTransactionManager,
    InMemoryUserRepo,
    KeyedLockManager,
)
from car_rental.main import app
from tests.builders import NOW, make_car, make_user


# ============================================================================
# FIXTURES IN-MEMORY
# ============================================================================

@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(NOW)


@pytest.fixture
def id_generator() -> FakeIdGenerator:
    return FakeIdGenerator(prefix="booking")


@pytest.fixture
def car_repo() -> InMemoryCarRepo:
    return InMemoryCarRepo()


@pytest.fixture
def user_repo() -> InMemoryUserRepo:
    return InMemoryUserRepo()


@pytest.fixture
def booking_repo() -> InMemoryBookingRepo:
    return InMemoryBookingRepo()


@pytest.fixture
def tx_manager(car_repo, user_repo, booking_repo) -> InMemoryTransactionManager:
    return InMemoryTransactionManager(car_repo, user_repo, booking_repo)


@pytest.fixture
def lock_manager() -> KeyedLockManager:
    return KeyedLockManager()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        use_in_memory=True,
        seed_demo_data=False,
        booking_retry_base_delay=0,
    )


@pytest.fixture
def use_cases(settings, car_repo, user_repo, booking_repo, tx_manager, lock_manager, id_generator, clock):
    """Todos los casos de uso cableados sobre los repositorios in-memory."""
    return build_use_cases(
        settings=settings,
        car_repo=car_repo,
        user_repo=user_repo,
        booking_repo=booking_repo,
        tx_manager=tx_manager,
        lock_manager=lock_manager,
        id_generator=id_generator,
        clock=clock,
    )


@pytest_asyncio.fixture
async def yaris(car_repo) -> Car:
    car = make_car()
    await car_repo.save(car)
    return car


@pytest_asyncio.fixture
async def john(user_repo) -> User:
    user = make_user("user-john")
    await user_repo.save(user)
    return user


@pytest_asyncio.fixture
async def jane(user_repo) -> User:
    user = make_user("user-jane", expiry=date(2029, 7, 15))
    await user_repo.save(user)
    return user


# ============================================================================
# FIXTURES DE API
# ============================================================================

@pytest.fixture
def client(use_cases):
    """
    TestClient con los casos de uso in-memory inyectados.

    No se entra al lifespan: los tests cargan sus propios datos.
    """
    app.dependency_overrides[get_use_cases] = lambda: use_cases
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


# ============================================================================
# FIXTURES DE BASE DE DATOS
# ============================================================================

@pytest_asyncio.fixture
async def sql_engine():
    """Engine SQLite in-memory compartido por todas las sesiones del test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(sql_engine) -> AsyncGenerator[AsyncSession, None]:
    session_factory = async_sessionmaker(sql_engine, expire_on_commit=False)
    async with session_factory() as session:
        yield session
