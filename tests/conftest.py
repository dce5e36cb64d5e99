import os

# Must be set before cleansync.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["LOGIN_RATE_LIMIT_ENABLED"] = "false"
os.environ["BOOKING_WEBHOOK_URL"] = ""
os.environ["BOOKING_WEBHOOK_SECRET"] = ""
os.environ["OPENAI_API_KEY"] = ""
os.environ["DB_LOG_SLOW_QUERIES"] = "false"

from datetime import date, datetime, time, timedelta  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from cleansync.database import Base, SessionLocal, engine  # noqa: E402
from cleansync.main import app  # noqa: E402
from cleansync.models import Booking, Client  # noqa: E402


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_client(db):
    def _make(name="Jane Doe", pin="1234", email="jane@example.com"):
        client = Client(name=name, pin=pin, email=email)
        db.add(client)
        db.commit()
        db.refresh(client)
        return client

    return _make


@pytest.fixture
def make_booking(db):
    def _make(client, scheduled_at, status="pending", notes=None):
        booking = Booking(client_id=client.id, scheduled_at=scheduled_at, status=status, notes=notes)
        db.add(booking)
        db.commit()
        db.refresh(booking)
        return booking

    return _make


@pytest.fixture
def api():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def logged_in(api, make_client):
    """A seeded client whose session cookie is held by `api`"""
    client = make_client()
    response = api.post("/api/auth/login", json={"pin": "1234"})
    assert response.status_code == 200
    return client


@pytest.fixture
def next_weekday():
    """A Monday-Friday date at least a week out"""
    day = date.today() + timedelta(days=7)
    while day.weekday() >= 5:
        day += timedelta(days=1)
    return day


def at(day, hour, minute=0):
    return datetime.combine(day, time(hour=hour, minute=minute))
