"""
Unit tests for authentication endpoints.

Tests:
- Signup (roles, duplicate email, input validation)
- Login
- Current user lookup
"""

from app.core.security import decode_token, verify_password
from app.models.user import User, UserRole


class TestSignup:
    """Test signup endpoint"""

    def test_signup_success(self, client, db_session):
        """Scenario: a seeker signs up and receives a token"""
        response = client.post(
            "/api/auth/signup",
            json={"email": "a@x.com", "password": "secret1", "role": "job_seeker"}
        )

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["data"]["token"]
        assert body["data"]["user"]["email"] == "a@x.com"
        assert body["data"]["user"]["role"] == "job_seeker"
        assert "password" not in body["data"]["user"]
        assert "hashedPassword" not in body["data"]["user"]

        user = db_session.query(User).filter(User.email == "a@x.com").first()
        assert user.role == UserRole.JOB_SEEKER
        assert user.hashed_password != "secret1"
        assert verify_password("secret1", user.hashed_password)

    def test_token_carries_identity(self, client):
        """Token encodes user id, email and role"""
        response = client.post(
            "/api/auth/signup",
            json={"email": "boss@x.com", "password": "secret1", "role": "job_provider"}
        )
        data = response.json()["data"]

        payload = decode_token(data["token"])
        assert payload["sub"] == data["user"]["id"]
        assert payload["email"] == "boss@x.com"
        assert payload["role"] == "job_provider"
        assert "exp" in payload

    def test_signup_normalizes_email_and_role(self, client):
        """Email is trimmed and lower-cased, role is case-insensitive"""
        response = client.post(
            "/api/auth/signup",
            json={"email": "  Worker@Example.COM ", "password": "secret1", "role": "JOB_SEEKER"}
        )

        assert response.status_code == 201
        assert response.json()["data"]["user"]["email"] == "worker@example.com"

    def test_signup_duplicate_email(self, client):
        """Second signup with the same email fails; first account can still log in"""
        payload = {"email": "dup@x.com", "password": "secret1", "role": "job_seeker"}
        assert client.post("/api/auth/signup", json=payload).status_code == 201

        response = client.post(
            "/api/auth/signup",
            json={"email": "DUP@x.com", "password": "another1", "role": "job_provider"}
        )
        assert response.status_code == 400
        assert response.json()["success"] is False
        assert "already exists" in response.json()["message"].lower()

        login = client.post("/api/auth/login", json={"email": "dup@x.com", "password": "secret1"})
        assert login.status_code == 200

    def test_signup_invalid_role(self, client):
        """Roles outside the enum are rejected before any user is created"""
        response = client.post(
            "/api/auth/signup",
            json={"email": "a@x.com", "password": "secret1", "role": "admin"}
        )

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Validation failed"
        assert any(e["field"] == "role" for e in body["errors"])

    def test_signup_short_password(self, client):
        """Passwords under six characters are rejected"""
        response = client.post(
            "/api/auth/signup",
            json={"email": "a@x.com", "password": "123", "role": "job_seeker"}
        )
        assert response.status_code == 400

    def test_signup_password_spaces_count_toward_length(self, client):
        """Spaces are part of the password, so five characters plus a space is long enough"""
        response = client.post(
            "/api/auth/signup",
            json={"email": "a@x.com", "password": "abcde ", "role": "job_seeker"}
        )
        assert response.status_code == 201

    def test_signup_invalid_email(self, client):
        """Malformed emails are rejected"""
        response = client.post(
            "/api/auth/signup",
            json={"email": "not-an-email", "password": "secret1", "role": "job_seeker"}
        )
        assert response.status_code == 400

    def test_signup_unknown_field(self, client):
        """Unknown body fields are rejected"""
        response = client.post(
            "/api/auth/signup",
            json={"email": "a@x.com", "password": "secret1", "role": "job_seeker", "isAdmin": True}
        )
        assert response.status_code == 400


class TestLogin:
    """Test login endpoint"""

    def test_login_success(self, client):
        """Scenario: login with the signup credentials returns a token"""
        client.post("/api/auth/signup", json={"email": "a@x.com", "password": "secret1", "role": "job_seeker"})

        response = client.post("/api/auth/login", json={"email": "a@x.com", "password": "secret1"})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["token"]
        assert data["user"]["email"] == "a@x.com"
        assert data["user"]["role"] == "job_seeker"

    def test_login_wrong_password(self, client):
        """Wrong password is 401"""
        client.post("/api/auth/signup", json={"email": "a@x.com", "password": "secret1", "role": "job_seeker"})

        response = client.post("/api/auth/login", json={"email": "a@x.com", "password": "wrong-pass"})

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid email or password"

    def test_login_nonexistent_user(self, client):
        """Unknown email gives the same answer as a wrong password"""
        response = client.post("/api/auth/login", json={"email": "ghost@x.com", "password": "secret1"})

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid email or password"

    def test_password_whitespace_is_significant(self, client):
        """A password with a trailing space only works when typed exactly"""
        client.post("/api/auth/signup", json={"email": "a@x.com", "password": "secret1 ", "role": "job_seeker"})

        trimmed = client.post("/api/auth/login", json={"email": "a@x.com", "password": "secret1"})
        exact = client.post("/api/auth/login", json={"email": "a@x.com", "password": "secret1 "})

        assert trimmed.status_code == 401
        assert exact.status_code == 200

    def test_login_empty_password(self, client):
        """An empty password fails validation"""
        response = client.post("/api/auth/login", json={"email": "a@x.com", "password": ""})
        assert response.status_code == 400


class TestCurrentUser:
    """Test /auth/me"""

    def test_me(self, client, seeker):
        """The token resolves to the signed-up user"""
        response = client.get("/api/auth/me", headers=seeker["headers"])

        assert response.status_code == 200
        assert response.json()["data"]["id"] == seeker["user"]["id"]

    def test_me_requires_token(self, client):
        """No token is 401 with a Bearer challenge"""
        response = client.get("/api/auth/me")

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"
