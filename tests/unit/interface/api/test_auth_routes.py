"""API tests for authentication and user routes."""

from uuid import uuid4

from tests.unit.interface.api.helpers import register


class TestAuthRoutes:
    """Tests for /auth."""

    def test_register_login_and_me(self, client):
        alice = register(client, "alice")

        login = client.post(
            "/auth/login", json={"email": "alice@example.com", "password": "secret123"}
        )
        assert login.status_code == 200
        token = login.json()["access_token"]

        me = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert me.status_code == 200
        assert me.json()["id"] == alice["id"]
        assert "password" not in me.json()

    def test_duplicate_registration_is_409(self, client):
        register(client, "alice")

        response = client.post(
            "/auth/register",
            json={
                "email": "alice@example.com",
                "username": "alice2",
                "password": "secret123",
            },
        )

        assert response.status_code == 409

    def test_wrong_password_is_401(self, client):
        register(client, "alice")

        response = client.post(
            "/auth/login", json={"email": "alice@example.com", "password": "nope"}
        )

        assert response.status_code == 401

    def test_me_without_token_is_401(self, client):
        assert client.get("/auth/me").status_code == 401

    def test_me_with_bad_token_is_401(self, client):
        response = client.get("/auth/me", headers={"Authorization": "Bearer junk"})

        assert response.status_code == 401

    def test_password_over_72_bytes_is_422(self, client):
        response = client.post(
            "/auth/register",
            json={
                "email": "alice@example.com",
                "username": "alice",
                "password": "\u00e9" * 72,
            },
        )

        assert response.status_code == 422
        assert client.get("/users/isvalid/alice").json() == {"is_taken": False}

    def test_short_username_is_422(self, client):
        response = client.post(
            "/auth/register",
            json={"email": "a@example.com", "username": "ab", "password": "secret123"},
        )

        assert response.status_code == 422


class TestUserRoutes:
    """Tests for /users."""

    def test_lookups_and_availability(self, client):
        alice = register(client, "alice")

        assert client.get(f"/users/{alice['id']}").json()["username"] == "alice"
        assert client.get("/users/username/alice").json()["id"] == alice["id"]
        assert (
            client.get("/users/email/alice@example.com").json()["id"] == alice["id"]
        )
        assert client.get("/users/isvalid/alice").json() == {"is_taken": True}
        assert client.get("/users/isvalid/bob@example.com").json() == {
            "is_taken": False
        }
        assert client.get(f"/users/{uuid4()}").status_code == 404
        assert len(client.get("/users").json()["users"]) == 1

    def test_profile_update_and_password_change(self, client):
        alice = register(client, "alice")

        updated = client.patch(
            "/users/me", json={"bio": "Writer"}, headers=alice["headers"]
        )
        assert updated.status_code == 200
        assert updated.json()["bio"] == "Writer"

        wrong = client.patch(
            "/users/me/password",
            json={"old_password": "wrong", "new_password": "another1"},
            headers=alice["headers"],
        )
        assert wrong.status_code == 401

        changed = client.patch(
            "/users/me/password",
            json={"old_password": "secret123", "new_password": "another1"},
            headers=alice["headers"],
        )
        assert changed.status_code == 200

        login = client.post(
            "/auth/login", json={"email": "alice@example.com", "password": "another1"}
        )
        assert login.status_code == 200

    def test_new_password_over_72_bytes_is_422(self, client):
        alice = register(client, "alice")

        response = client.patch(
            "/users/me/password",
            json={"old_password": "secret123", "new_password": "\u00e9" * 72},
            headers=alice["headers"],
        )

        assert response.status_code == 422

    def test_cannot_edit_or_delete_other_users(self, client):
        alice = register(client, "alice")
        bob = register(client, "bob")

        edit = client.patch(
            f"/users/{bob['id']}", json={"bio": "pwned"}, headers=alice["headers"]
        )
        delete = client.delete(f"/users/{bob['id']}", headers=alice["headers"])

        assert edit.status_code == 403
        assert delete.status_code == 403

    def test_taken_username_is_409(self, client):
        alice = register(client, "alice")
        register(client, "bob")

        response = client.patch(
            "/users/me", json={"username": "bob"}, headers=alice["headers"]
        )

        assert response.status_code == 409

    def test_only_admins_create_users(self, client):
        alice = register(client, "alice")

        response = client.post(
            "/users",
            json={"email": "c@example.com", "username": "carol", "password": "pw1234"},
            headers=alice["headers"],
        )

        assert response.status_code == 403
