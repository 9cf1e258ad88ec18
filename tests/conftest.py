import os

# Must be set before the app modules read their settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["ENVIRONMENT"] = "test"

import pytest
from fastapi.testclient import TestClient

from main import app
from db import Base, engine, SessionLocal
from core.config import settings
from api.deps.db import get_db
from api.crud.admin_crud import seed_default_admin
from api.crud.tournament_crud import seed_tournaments


# ----------------------------------------------------------------------
# Fixtures
# ----------------------------------------------------------------------
@pytest.fixture(scope="function")
def db_session():
    """Fresh in-memory DB with the admin and the six tournaments seeded."""
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    seed_default_admin(session, settings.admin_username, settings.admin_password)
    seed_tournaments(session, settings.default_qr_code_url)
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """FastAPI client that uses the test DB session."""
    def _get_test_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = _get_test_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(client):
    response = client.post(
        "/api/admin/login",
        json={"username": settings.admin_username, "password": settings.admin_password},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


# ----------------------------------------------------------------------
# Helpers
# ----------------------------------------------------------------------
def build_registration(game_type="bgmi", tournament_type="solo", **overrides):
    payload = {
        "gameType": game_type,
        "tournamentType": tournament_type,
        "playerName": "Rohan Sharma",
        "gameId": "5123456789",
        "whatsapp": "9876543210",
        "transactionId": "TXN100200300",
    }
    if tournament_type in ("duo", "squad"):
        payload.update({"teamName": "Night Owls", "player2Name": "Aman", "player2GameId": "5123456790"})
    if tournament_type == "squad":
        payload.update({
            "player3Name": "Kabir", "player3GameId": "5123456791",
            "player4Name": "Dev", "player4GameId": "5123456792",
        })
    payload.update(overrides)
    return payload


@pytest.fixture
def registration_payload():
    return build_registration


@pytest.fixture
def register(client, registration_payload):
    """Submit a registration and return the response JSON"""
    def _register(game_type="bgmi", tournament_type="solo", **overrides):
        response = client.post("/api/registrations", json=registration_payload(game_type, tournament_type, **overrides))
        assert response.status_code == 201, response.text
        return response.json()
    return _register


@pytest.fixture
def tournament_count(db_session):
    """Stored registered_count for a tournament variant"""
    from models.tournament import Tournament

    def _count(game_type="bgmi", tournament_type="solo"):
        db_session.expire_all()
        tournament = db_session.query(Tournament).filter(
            Tournament.game_type == game_type,
            Tournament.tournament_type == tournament_type
        ).first()
        return tournament.registered_count
    return _count
