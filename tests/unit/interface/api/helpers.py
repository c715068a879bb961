"""Helpers for driving the API through a TestClient."""

from fastapi.testclient import TestClient


def register(client: TestClient, username: str, password: str = "secret123") -> dict:
    """Register a user and return ``{"id", "token", "headers"}``."""
    response = client.post(
        "/auth/register",
        json={
            "email": f"{username}@example.com",
            "username": username,
            "password": password,
        },
    )
    assert response.status_code == 201, response.text
    body = response.json()
    return {
        "id": body["user"]["id"],
        "token": body["access_token"],
        "headers": {"Authorization": f"Bearer {body['access_token']}"},
    }


def create_article(client: TestClient, user: dict, title: str = "Hello Quill") -> dict:
    response = client.post(
        "/articles",
        json={"title": title, "content": "The body of a test article."},
        headers=user["headers"],
    )
    assert response.status_code == 201, response.text
    return response.json()


def create_comment(
    client: TestClient, user: dict, parent_id: str, content: str = "Nice post"
) -> dict:
    response = client.post(
        "/articles/comments",
        json={"parent_id": parent_id, "content": content},
        headers=user["headers"],
    )
    assert response.status_code == 201, response.text
    return response.json()
