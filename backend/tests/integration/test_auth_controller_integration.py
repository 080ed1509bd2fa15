"""Integration tests for sign-up, login and logout."""

import pytest


@pytest.mark.auth
class TestAuthController:
    def test_signup_signs_in(self, client):
        response = client.post(
            "/auth/signup", json={"email": "ana@example.com", "password": "secret1"}
        )

        assert response.status_code == 201
        me = client.get("/auth/me").get_json()
        assert me["data"]["email"] == "ana@example.com"

    def test_duplicate_signup(self, client):
        payload = {"email": "ana@example.com", "password": "secret1"}
        client.post("/auth/signup", json=payload)

        response = client.post("/auth/signup", json=payload)

        assert response.status_code == 400
        assert response.get_json()["message"] == "Email already registered"

    def test_login_logout_cycle(self, app):
        first = app.test_client()
        first.post("/auth/signup", json={"email": "bia@example.com", "password": "secret1"})

        second = app.test_client()
        assert second.get("/auth/me").status_code == 401

        login = second.post(
            "/auth/login", json={"email": "BIA@example.com", "password": "secret1"}
        )
        assert login.status_code == 200
        assert second.get("/auth/me").status_code == 200

        second.post("/auth/logout")
        assert second.get("/auth/me").status_code == 401

    def test_login_wrong_password(self, client):
        client.post("/auth/signup", json={"email": "ana@example.com", "password": "secret1"})
        client.post("/auth/logout")

        response = client.post(
            "/auth/login", json={"email": "ana@example.com", "password": "nope"}
        )

        assert response.status_code == 401
        assert response.get_json()["success"] is False

    def test_signup_validation(self, client):
        response = client.post("/auth/signup", json={"email": "bad", "password": "1"})
        assert response.status_code == 400

    def test_me_when_account_row_is_gone(self, auth_client, monkeypatch):
        from agendapro.repositories.user_repo import UserRepository

        monkeypatch.setattr(UserRepository, "get_by_id", lambda self, user_id: None)

        response = auth_client.get("/auth/me")

        assert response.status_code == 401
        assert response.get_json()["success"] is False
