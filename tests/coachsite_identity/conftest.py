"""
Pytest configuration for coachsite_identity tests.

This conftest provides fixtures specific to the identity package
(users, one-time codes, tokens).
"""

import pytest

from coachsite_identity import User, UserRole


@pytest.fixture
def test_user() -> User:
    """Create a standard, unverified test user."""
    return User.create("test@example.com", name="Test Coach")


@pytest.fixture
def admin_user() -> User:
    """Create a verified admin test user."""
    return User.create(
        "admin@example.com",
        name="Admin",
        role=UserRole.ADMIN,
        is_verified=True,
    )
