# tests/conftest.py
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import get_session
from main import app
from models import Accommodation, Base, Event, Lease, User, UserRole
from services.access_service import AccessGate, GateMode



@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    Session = sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def users(db):
    """owner (1, OWNER), tenant (2, TENANT), other_owner (3, OWNER)."""
    owner = User(id=1, email="owner@example.com", role=UserRole.OWNER)
    tenant = User(id=2, email="tenant@example.com", role=UserRole.TENANT)
    other_owner = User(id=3, email="other@example.com", role=UserRole.OWNER)
    db.add_all([owner, tenant, other_owner])
    db.commit()
    return {"owner": owner, "tenant": tenant, "other_owner": other_owner}


@pytest.fixture
def make_accommodation(db):
    def _make(owner_id=1, availability=True, **fields):
        accommodation = Accommodation(
            name=fields.get("name", "Test House"),
            type=fields.get("type", "House"),
            description=fields.get("description", "A test house"),
            address=fields.get("address", "123 Main St"),
            availability=availability,
            owner_id=owner_id,
        )
        db.add(accommodation)
        db.commit()
        db.refresh(accommodation)
        return accommodation

    return _make


@pytest.fixture
def add_lease(db):
    def _add(accommodation_id, active=True, tenant_id=2):
        lease = Lease(accommodation_id=accommodation_id, tenant_id=tenant_id, active=active)
        db.add(lease)
        db.commit()
        return lease

    return _add


@pytest.fixture
def add_event(db):
    def _add(accommodation_id, title="Visit"):
        event = Event(accommodation_id=accommodation_id, title=title)
        db.add(event)
        db.commit()
        return event

    return _add


@pytest.fixture
def client(db):
    """API client backed by the in-memory database, with the access gate disabled."""
    original_gate = app.state.access_gate
    app.dependency_overrides[get_session] = lambda: db
    app.state.access_gate = AccessGate(GateMode.DISABLED)
    yield TestClient(app)
    app.dependency_overrides.clear()
    app.state.access_gate = original_gate


@pytest.fixture
def broken_db():
    """Install a session whose calls are configured by the test to fail."""
    session = MagicMock()
    app.dependency_overrides[get_session] = lambda: session
    yield session
    app.dependency_overrides.pop(get_session, None)
