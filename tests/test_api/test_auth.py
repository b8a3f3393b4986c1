"""
API tests for admin authentication and service endpoints
"""
from unittest.mock import patch, MagicMock

from stylehub.core.auth import create_access_token, hash_password, verify_admin_credentials
from stylehub.core.config import settings


class TestAdminCredentials:

    def test_plain_password_fallback(self, monkeypatch):
        monkeypatch.setattr(settings, "ADMIN_PASSWORD_HASH", "")
        monkeypatch.setattr(settings, "ADMIN_PASSWORD", "admin123")

        assert verify_admin_credentials(settings.ADMIN_USERNAME, "admin123") is True
        assert verify_admin_credentials(settings.ADMIN_USERNAME, "wrong") is False
        assert verify_admin_credentials("someone", "admin123") is False

    def test_bcrypt_hash_wins(self, monkeypatch):
        monkeypatch.setattr(settings, "ADMIN_PASSWORD_HASH", hash_password("s3cret-pass"))
        monkeypatch.setattr(settings, "ADMIN_PASSWORD", "admin123")

        assert verify_admin_credentials(settings.ADMIN_USERNAME, "s3cret-pass") is True
        assert verify_admin_credentials(settings.ADMIN_USERNAME, "admin123") is False


class TestAuthEndpoints:

    def test_login_success(self, client, monkeypatch):
        monkeypatch.setattr(settings, "ADMIN_PASSWORD_HASH", "")
        monkeypatch.setattr(settings, "ADMIN_PASSWORD", "admin123")

        response = client.post("/api/v1/auth/login", json={
            "username": settings.ADMIN_USERNAME, "password": "admin123",
        })

        assert response.status_code == 200
        body = response.json()
        assert body["token_type"] == "bearer"
        assert body["expires_in"] == settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60

        me = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {body['access_token']}"})
        assert me.status_code == 200
        assert me.json() == {"username": settings.ADMIN_USERNAME, "role": "admin"}

    def test_login_wrong_password(self, client, monkeypatch):
        monkeypatch.setattr(settings, "ADMIN_PASSWORD_HASH", "")

        response = client.post("/api/v1/auth/login", json={
            "username": settings.ADMIN_USERNAME, "password": "nope",
        })

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid username or password"

    def test_me_without_token(self, client):
        response = client.get("/api/v1/auth/me")

        assert response.status_code == 401
        assert response.json()["detail"] == "Authentication required"

    def test_expired_token(self, client):
        token = create_access_token("admin", expires_minutes=-5)

        response = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json()["detail"] == "Token has expired"


class TestServiceEndpoints:

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "online"

    @patch('stylehub.main.get_db_connection_with_retry')
    def test_health_degraded_without_database(self, mock_connect, client):
        mock_connect.side_effect = Exception("could not connect to server")

        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "degraded"
        assert body["database"]["status"] == "disconnected"

    @patch('stylehub.main.get_db_connection_with_retry')
    def test_health_ok(self, mock_connect, client):
        mock_connect.return_value = MagicMock()

        response = client.get("/health")

        assert response.json()["status"] == "healthy"
        mock_connect.assert_called_once_with(max_retries=1, retry_delay=0.5)
