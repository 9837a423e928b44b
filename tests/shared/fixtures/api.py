"""Helpers for driving the HTTP API in integration tests."""

from fastapi.testclient import TestClient

from tests.shared.fixtures.fakes import RecordingEmailService

USER_PASSWORD = "coach-pass-123"


def image_file(name: str = "photo.png") -> tuple[str, bytes, str]:
    """A multipart file tuple for an image upload."""
    return (name, b"\x89PNG fake image", "image/png")


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def login(client: TestClient, prefix: str, email: str, password: str) -> str:
    response = client.post(
        f"{prefix}/auth/login",
        json={"email": email, "password": password},
    )
    assert response.status_code == 200, response.text
    return response.json()["token"]


def signup_and_verify(
    client: TestClient,
    prefix: str,
    outbox: RecordingEmailService,
    email: str,
    name: str = "Coach",
) -> dict:
    """Sign a coach up through the API and return the verification response."""
    response = client.post(
        f"{prefix}/auth/signup",
        data={
            "name": name,
            "email": email,
            "password": USER_PASSWORD,
            "domain_url": f"{name.lower()}.example.com",
        },
    )
    assert response.status_code == 201, response.text

    response = client.post(
        f"{prefix}/auth/verify-signup-otp",
        json={"email": email, "otp": outbox.last_code_for(email)},
    )
    assert response.status_code == 200, response.text
    return response.json()
