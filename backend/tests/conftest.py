import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app import database
from app.database import Base
from app.main import app
from app.models.patient_record import PatientRecord
from app.repositories.patient_record_repository import InMemoryPatientRecordRepository
from app.routers.patients import get_patient_record_service
from app.services.patient_record_service import PatientRecordService


def make_records() -> list[PatientRecord]:
    return [
        PatientRecord(patient_id=1, name="Rayven Yor", age=23, address="Cebu Philippines"),
        PatientRecord(patient_id=2, name="David Landup", age=27, address="New York USA"),
        PatientRecord(patient_id=3, name="Jane Doe", age=31, address="New York USA"),
    ]


@pytest.fixture
def repository() -> InMemoryPatientRecordRepository:
    return InMemoryPatientRecordRepository(make_records())


@pytest.fixture
def service(repository) -> PatientRecordService:
    return PatientRecordService(repository)


@pytest.fixture
def client(service):
    app.dependency_overrides[get_patient_record_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def session_factory():
    """Session factory on a throwaway in-memory SQLite database."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def db_client(session_factory, monkeypatch):
    """HTTP client running the real get_db -> SQLAlchemy repository chain against SQLite."""
    monkeypatch.setattr(database, "async_session", session_factory)
    async with session_factory() as session:
        session.add_all(make_records())
        await session.commit()

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as http:
        yield http
