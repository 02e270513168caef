"""HTTP tests for bearer-token authentication on profile routes."""

import pytest

from core.security import create_access_token


@pytest.mark.parametrize(
    "method,path",
    [
        ("get", "/api/v1/profile/me"),
        ("post", "/api/v1/profile/setup"),
        ("put", "/api/v1/profile"),
        ("post", "/api/v1/profile/upload-photo"),
        ("post", "/api/v1/profile/upload-resume"),
    ],
)
def test_requires_authentication(test_app_client, method, path):
    response = getattr(test_app_client, method)(path)

    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"


def test_invalid_token(test_app_client):
    response = test_app_client.get(
        "/api/v1/profile/me", headers={"Authorization": "Bearer not-a-jwt"}
    )

    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid authentication credentials"


def test_token_without_numeric_subject(test_app_client):
    token = create_access_token({"sub": "someone@example.com"})

    response = test_app_client.get(
        "/api/v1/profile/me", headers={"Authorization": f"Bearer {token}"}
    )

    assert response.status_code == 401


def test_valid_bearer_token(test_app_client, seeded_user):
    token = create_access_token({"sub": str(seeded_user.id)})

    response = test_app_client.get(
        "/api/v1/profile/me", headers={"Authorization": f"Bearer {token}"}
    )

    assert response.status_code == 200
    assert response.json()["email"] == "api@example.com"


def test_valid_cookie_token(test_app_client, seeded_user):
    test_app_client.cookies.set("access_token", create_access_token({"sub": str(seeded_user.id)}))

    response = test_app_client.get("/api/v1/profile/me")

    assert response.status_code == 200


def test_token_for_missing_user_is_server_error(test_app_client):
    token = create_access_token({"sub": "999999"})

    response = test_app_client.put(
        "/api/v1/profile",
        json={"bio": "ghost"},
        headers={"Authorization": f"Bearer {token}"},
    )

    assert response.status_code == 500
    assert response.json()["detail"] == "Internal server error"


def test_request_id_echoed(test_app_client):
    response = test_app_client.get("/health", headers={"X-Request-ID": "abc123"})

    assert response.status_code == 200
    assert response.headers["x-request-id"] == "abc123"


def test_readiness(test_app_client):
    response = test_app_client.get("/health/ready")

    assert response.status_code == 200
    assert response.json()["checks"] == {"database": True, "storage": True}
