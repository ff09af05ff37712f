"""
Tests for the register, login and me endpoints.

Runs the real auth service, hasher and token code against an in-memory
user store.
"""

import time
from datetime import datetime, timedelta, timezone

import jwt


ANN = {"name": "Ann", "email": "ann@x.com", "password": "secret1"}


def register(client, **overrides):
    return client.post("/api/auth/register", json={**ANN, **overrides})


class TestRegister:
    """Tests for POST /api/auth/register"""

    def test_register_returns_token(self, client, token_verifier, user_repository):
        """Should create the user and return a token for it."""
        response = register(client)

        assert response.status_code == 200
        token = response.json()["token"]
        user = token_verifier.verify(token)
        assert user.id in user_repository.users

    def test_register_stores_hash_not_password(self, client, user_repository):
        """The stored password should be a bcrypt hash."""
        register(client)

        record = next(iter(user_repository.users.values()))
        assert record.password_hash != "secret1"
        assert record.password_hash.startswith("$2")

    def test_register_sets_gravatar(self, client, user_repository):
        register(client)

        record = next(iter(user_repository.users.values()))
        assert record.avatar.startswith("https://www.gravatar.com/avatar/")
        assert "d=mm" in record.avatar

    def test_register_normalizes_email(self, client, user_repository):
        register(client, email="  Ann@X.com ")

        record = next(iter(user_repository.users.values()))
        assert record.email == "ann@x.com"

    def test_register_duplicate_email(self, client, user_repository):
        """Second registration with the same email should fail with 400."""
        register(client)
        response = register(client, name="Other", password="another1")

        assert response.status_code == 400
        assert response.json() == {"errors": [{"msg": "User already exists"}]}
        assert len(user_repository.users) == 1

    def test_register_duplicate_email_differs_in_case(self, client):
        register(client)
        response = register(client, email="ANN@x.com")

        assert response.status_code == 400

    def test_register_validation_messages(self, client, user_repository):
        """Every failed rule should be reported with its field."""
        response = client.post("/api/auth/register", json={"email": "nope", "password": "123"})

        assert response.status_code == 400
        errors = response.json()["errors"]
        by_param = {e["param"]: e["msg"] for e in errors}
        assert by_param == {
            "name": "Name is required",
            "email": "Please include a valid email",
            "password": "Please enter a password with 6 or more characters",
        }
        assert all(e["location"] == "body" for e in errors)
        assert user_repository.users == {}

    def test_register_blank_name(self, client):
        response = register(client, name="   ")

        assert response.status_code == 400
        assert response.json()["errors"][0]["msg"] == "Name is required"

    def test_register_password_exactly_six(self, client):
        response = register(client, password="abcdef")
        assert response.status_code == 200

    def test_two_registrations_get_distinct_tokens(self, client):
        first = register(client).json()["token"]
        second = register(client, email="bob@x.io").json()["token"]
        assert first != second


class TestLogin:
    """Tests for POST /api/auth/login"""

    def test_login_success(self, client, token_verifier):
        register(client)
        response = client.post(
            "/api/auth/login", json={"email": "ann@x.com", "password": "secret1"}
        )

        assert response.status_code == 200
        assert token_verifier.verify(response.json()["token"]).id

    def test_login_email_is_case_insensitive(self, client):
        register(client)
        response = client.post(
            "/api/auth/login", json={"email": "ANN@X.COM", "password": "secret1"}
        )
        assert response.status_code == 200

    def test_login_tokens_differ(self, client):
        """Two logins in the same second should still get different tokens."""
        register(client)
        body = {"email": "ann@x.com", "password": "secret1"}

        first = client.post("/api/auth/login", json=body).json()["token"]
        second = client.post("/api/auth/login", json=body).json()["token"]

        assert first != second

    def test_wrong_password_and_unknown_email_are_identical(self, client):
        """The two failure modes must not be distinguishable."""
        register(client)

        wrong_password = client.post(
            "/api/auth/login", json={"email": "ann@x.com", "password": "wrong!!"}
        )
        unknown_email = client.post(
            "/api/auth/login", json={"email": "ghost@x.io", "password": "secret1"}
        )

        assert wrong_password.status_code == unknown_email.status_code == 400
        assert wrong_password.content == unknown_email.content
        assert wrong_password.json() == {"errors": [{"msg": "Invalid Credentials"}]}

    def test_login_missing_password(self, client):
        response = client.post("/api/auth/login", json={"email": "ann@x.com"})

        assert response.status_code == 400
        assert response.json()["errors"] == [
            {"msg": "Password is required", "param": "password", "location": "body"}
        ]

    def test_login_empty_password(self, client):
        response = client.post(
            "/api/auth/login", json={"email": "ann@x.com", "password": ""}
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["msg"] == "Password is required"

    def test_login_whitespace_password(self, client, token_verifier):
        """A password of spaces that was accepted at registration must log in."""
        registered = register(client, password="      ")
        assert registered.status_code == 200

        response = client.post(
            "/api/auth/login", json={"email": "ann@x.com", "password": "      "}
        )

        assert response.status_code == 200
        assert (
            token_verifier.verify(response.json()["token"]).id
            == token_verifier.verify(registered.json()["token"]).id
        )

    def test_login_invalid_email(self, client):
        response = client.post(
            "/api/auth/login", json={"email": "ann", "password": "secret1"}
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["msg"] == "Please include a valid email"


class TestMe:
    """Tests for GET /api/auth/me"""

    def test_me_returns_user_without_password(self, client):
        token = register(client).json()["token"]

        response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Ann"
        assert data["email"] == "ann@x.com"
        assert "password" not in data
        assert "password_hash" not in data
        assert set(data) == {"id", "name", "email", "avatar", "date"}

    def test_me_with_legacy_header(self, client):
        token = register(client).json()["token"]

        response = client.get("/api/auth/me", headers={"x-auth-token": token})

        assert response.status_code == 200
        assert response.json()["name"] == "Ann"

    def test_me_without_token(self, client):
        response = client.get("/api/auth/me")

        assert response.status_code == 401
        assert response.json() == {"errors": [{"msg": "No token, authorization denied"}]}
        assert response.headers["www-authenticate"] == "Bearer"

    def test_me_with_garbage_token(self, client):
        response = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-jwt"})

        assert response.status_code == 401
        assert response.json() == {"errors": [{"msg": "Token is not valid"}]}

    def test_me_with_expired_token(self, client, token_settings):
        register(client)
        past = datetime.now(timezone.utc) - timedelta(hours=2)
        token = jwt.encode(
            {"sub": "someone", "iat": past, "exp": past + timedelta(hours=1)},
            token_settings.secret,
            algorithm="HS256",
        )

        response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json()["errors"][0]["msg"] == "Token is not valid"

    def test_me_with_token_signed_by_other_secret(self, client):
        now = int(time.time())
        token = jwt.encode(
            {"sub": "someone", "iat": now, "exp": now + 3600},
            "a-completely-different-secret-value-xyz",
            algorithm="HS256",
        )

        response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401

    def test_me_for_deleted_user_is_server_error(self, app, client, user_repository):
        """A valid token whose user is gone is a consistency fault."""
        from fastapi.testclient import TestClient

        token = register(client).json()["token"]
        user_repository.users.clear()

        response = TestClient(app, raise_server_exceptions=False).get(
            "/api/auth/me", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 500
        assert response.text == "Server Error"


class TestAnnScenario:
    """Register, use the token, fail a login, log in again."""

    def test_full_flow(self, client, token_verifier, user_repository):
        token = register(client).json()["token"]
        ann_id = token_verifier.verify(token).id
        assert user_repository.users[ann_id].name == "Ann"

        me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert me.json()["id"] == ann_id
        assert me.json()["email"] == "ann@x.com"

        bad = client.post("/api/auth/login", json={"email": "ann@x.com", "password": "wrong"})
        assert bad.status_code == 400
        assert bad.json() == {"errors": [{"msg": "Invalid Credentials"}]}

        good = client.post("/api/auth/login", json={"email": "ann@x.com", "password": "secret1"})
        assert good.status_code == 200
        second_token = good.json()["token"]
        assert second_token != token
        assert token_verifier.verify(second_token).id == ann_id
        assert token_verifier.verify(token).id == ann_id
