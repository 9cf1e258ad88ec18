"""
Admin login and token checks
"""
from datetime import timedelta

from core.auth import create_access_token, hash_password, verify_password
from core.config import settings
from models.admin import Admin


def _login(client, username=None, password=None):
    return client.post(
        "/api/admin/login",
        json={"username": username or settings.admin_username, "password": password or settings.admin_password}
    )


class TestLogin:

    def test_login_success(self, client):
        response = _login(client)
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["token"]
        assert data["admin"]["username"] == settings.admin_username

    def test_wrong_password(self, client):
        response = _login(client, password="wrong-password")
        assert response.status_code == 401
        assert response.json() == {"error": "Invalid credentials"}
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_unknown_user(self, client):
        assert _login(client, username="nobody").status_code == 401

    def test_no_lockout_after_failures(self, client):
        for _ in range(3):
            assert _login(client, password="wrong-password").status_code == 401
        assert _login(client).status_code == 200

    def test_missing_fields(self, client):
        response = client.post("/api/admin/login", json={"username": "admin"})
        assert response.status_code == 400
        assert response.json() == {"error": "Username and password are required"}

    def test_logout(self, client):
        assert client.post("/api/admin/logout").json() == {"success": True}


class TestTokens:

    def test_validate_with_token(self, client, auth_headers):
        response = client.get("/api/admin/validate", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["valid"] is True

    def test_validate_without_token(self, client):
        response = client.get("/api/admin/validate")
        assert response.status_code == 401
        assert response.json() == {"error": "No valid authorization token provided"}

    def test_invalid_token(self, client):
        response = client.get("/api/admin/validate", headers={"Authorization": "Bearer not-a-jwt"})
        assert response.status_code == 401
        assert response.json() == {"error": "Invalid token"}

    def test_expired_token(self, client, db_session):
        admin = db_session.query(Admin).filter(Admin.username == settings.admin_username).first()
        token = create_access_token(admin.id, admin.username, expires_delta=timedelta(minutes=-1))

        response = client.get("/api/admin/validate", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401
        assert response.json() == {"error": "Token expired"}

    def test_token_for_deleted_admin(self, client):
        token = create_access_token("no-such-admin", "ghost")
        response = client.get("/api/admin/validate", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401
        assert response.json() == {"error": "Admin not found"}

    def test_check_reports_state(self, client, auth_headers):
        assert client.get("/api/admin/check").json() == {"authenticated": False, "admin": None}

        data = client.get("/api/admin/check", headers=auth_headers).json()
        assert data["authenticated"] is True
        assert data["admin"]["username"] == settings.admin_username


def test_password_hashing():
    hashed = hash_password("s3cret-pass")
    assert hashed != "s3cret-pass"
    assert verify_password("s3cret-pass", hashed)
    assert not verify_password("other", hashed)
    assert not verify_password("s3cret-pass", "not-a-bcrypt-hash")
