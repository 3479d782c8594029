"""Integration tests for the /api/auth endpoints."""

from fastapi.testclient import TestClient

from tests.conftest import ADMIN_EMAIL, ADMIN_PASSWORD


class TestLogin:
    """Tests for POST /api/auth/login."""

    def test_login_success(self, client: TestClient):
        """Correct credentials return a token and the public user fields."""
        response = client.post(
            "/api/auth/login",
            json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["token"]
        assert data["user"]["email"] == ADMIN_EMAIL
        assert data["user"]["username"] == "admin"
        assert data["user"]["role"] == "admin"
        assert "password" not in data["user"]

    def test_wrong_password_and_unknown_email_look_the_same(self, client: TestClient):
        """Both failures return the same 401 body."""
        wrong_password = client.post(
            "/api/auth/login",
            json={"email": ADMIN_EMAIL, "password": "not-it"},
        )
        unknown_email = client.post(
            "/api/auth/login",
            json={"email": "nobody@example.com", "password": ADMIN_PASSWORD},
        )

        assert wrong_password.status_code == 401
        assert unknown_email.status_code == 401
        assert wrong_password.json() == unknown_email.json() == {"message": "Invalid credentials"}

    def test_malformed_body(self, client: TestClient):
        """A missing password or invalid email is a 400."""
        for body in ({"email": ADMIN_EMAIL}, {"email": "not-an-email", "password": "x"}, {}):
            response = client.post("/api/auth/login", json=body)
            assert response.status_code == 400
            assert response.json() == {"message": "Invalid request data"}

    def test_non_json_body(self, client: TestClient):
        response = client.post(
            "/api/auth/login",
            content="email=admin",
            headers={"Content-Type": "text/plain"},
        )
        assert response.status_code == 400

    def test_login_refreshes_last_active(self, client: TestClient, seeded_store):
        user = seeded_store.get_user_by_email("jane.cooper@example.com")
        client.post(
            "/api/auth/login",
            json={"email": "jane.cooper@example.com", "password": "password123"},
        )
        assert seeded_store.users.get(user.id).lastActive > user.lastActive


class TestGetProfile:
    """Tests for GET /api/auth/profile."""

    def test_token_resolves_to_logged_in_user(self, client: TestClient, auth_headers: dict, admin_user):
        response = client.get("/api/auth/profile", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == admin_user.id
        assert data["email"] == ADMIN_EMAIL
        assert data["bio"] == admin_user.bio
        assert "password" not in data

    def test_missing_token(self, client: TestClient):
        response = client.get("/api/auth/profile")

        assert response.status_code == 401
        assert response.json() == {"message": "No token provided"}
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_invalid_token(self, client: TestClient):
        response = client.get(
            "/api/auth/profile",
            headers={"Authorization": "Bearer made-up-token"},
        )

        assert response.status_code == 401
        assert response.json() == {"message": "Invalid token"}

    def test_non_bearer_scheme(self, client: TestClient, admin_token: str):
        """A token sent under another scheme is rejected as invalid, not missing."""
        response = client.get(
            "/api/auth/profile",
            headers={"Authorization": f"Token {admin_token}"},
        )

        assert response.status_code == 401
        assert response.json() == {"message": "Invalid token"}

    def test_user_deleted_after_login(self, client: TestClient, auth_headers: dict, admin_user):
        client.delete(f"/api/users/{admin_user.id}")

        response = client.get("/api/auth/profile", headers=auth_headers)
        assert response.status_code == 404
        assert response.json() == {"message": "User not found"}


class TestUpdateProfile:
    """Tests for PUT /api/auth/profile."""

    def test_update_own_profile(self, client: TestClient, auth_headers: dict):
        response = client.put(
            "/api/auth/profile",
            headers=auth_headers,
            json={"firstName": "Johnny", "timezone": "UTC+1"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["firstName"] == "Johnny"
        assert data["timezone"] == "UTC+1"
        assert data["lastName"] == "Admin"
        assert "password" not in data

    def test_earlier_token_sees_update(self, client: TestClient, auth_headers: dict):
        """Sessions resolve the live user, not a snapshot taken at login."""
        client.put("/api/auth/profile", headers=auth_headers, json={"bio": "Updated bio"})

        response = client.get("/api/auth/profile", headers=auth_headers)
        assert response.json()["bio"] == "Updated bio"

    def test_role_and_status_cannot_be_self_assigned(self, client: TestClient, seeded_store):
        login = client.post(
            "/api/auth/login",
            json={"email": "jane.cooper@example.com", "password": "password123"},
        )
        headers = {"Authorization": f"Bearer {login.json()['token']}"}

        for body in ({"role": "admin"}, {"status": "active"}, {"password": "new"}, {"username": "jane"}):
            response = client.put("/api/auth/profile", headers=headers, json=body)
            assert response.status_code == 400

        jane = seeded_store.get_user_by_email("jane.cooper@example.com")
        assert jane.role == "user"
        assert jane.username == "jane.cooper"

    def test_email_already_taken(self, client: TestClient, auth_headers: dict):
        response = client.put(
            "/api/auth/profile",
            headers=auth_headers,
            json={"email": "jane.cooper@example.com"},
        )
        assert response.status_code == 409

    def test_new_email_used_for_next_login(self, client: TestClient, auth_headers: dict):
        client.put("/api/auth/profile", headers=auth_headers, json={"email": "boss@example.com"})

        old = client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
        new = client.post("/api/auth/login", json={"email": "boss@example.com", "password": ADMIN_PASSWORD})
        assert old.status_code == 401
        assert new.status_code == 200

    def test_requires_token(self, client: TestClient):
        response = client.put("/api/auth/profile", json={"firstName": "X"})
        assert response.status_code == 401


class TestLogout:
    """Tests for POST /api/auth/logout."""

    def test_logout_revokes_token(self, client: TestClient, auth_headers: dict):
        response = client.post("/api/auth/logout", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {"message": "Logged out successfully"}

        response = client.get("/api/auth/profile", headers=auth_headers)
        assert response.status_code == 401
        assert response.json() == {"message": "Invalid token"}

    def test_logout_without_token(self, client: TestClient):
        response = client.post("/api/auth/logout")
        assert response.status_code == 401
