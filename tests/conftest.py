"""Root pytest configuration.

Test Structure:
    tests/
    ├── coachsite/             # Homepage content, media, API and CLI
    │   ├── unit/              # Fast, isolated tests
    │   └── integration/       # HTTP API against a throwaway SQLite file
    ├── coachsite_identity/    # Users, one-time codes, tokens, email
    │   └── unit/
    └── shared/                # Shared fixtures and fakes

Tests load ``config/.env.test`` when present; otherwise every setting a
test needs is passed explicitly.
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from coachsite_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.test").exists():
    load_dotenv(CONFIG_DIR / ".env.test")


@pytest.fixture(autouse=True)
def fresh_settings_cache():
    """Never let one test's settings leak into another."""
    clear_settings_cache()
    yield
    clear_settings_cache()
