"""
Pytest Configuration and Shared Fixtures

Provides sample content and API client fixtures for all test modules.
"""

import pytest
from fastapi.testclient import TestClient

from src.utils.config import Settings, get_settings


# ============================================================================
# Sample Content
# ============================================================================

# Short, on-topic sentences with no prohibited phrases or risky claims
CLEAN_CONTENT = (
    "Index funds track a market index at low cost. "
    "Most index funds charge fees under one percent. "
    "Investors can buy index funds through a broker. "
    "Diversification lowers the impact of one stock."
)

# 21 words, 11 prohibited phrases
WEAK_CONTENT = (
    "Let us delve into the realm of bespoke, cutting-edge synergy. "
    "It is a game-changing paradigm. "
    "Basically, it is really very seamless."
)

# Two indicators for each E-E-A-T component, three for trust
RICH_EEAT_CONTENT = (
    "In my experience, hands-on experience matters. "
    "Research shows and studies indicate steady gains. "
    "Featured in Forbes and award-winning. "
    "Fact-checked, sources cited, with a disclaimer."
)


@pytest.fixture
def clean_content() -> str:
    return CLEAN_CONTENT


@pytest.fixture
def weak_content() -> str:
    return WEAK_CONTENT


@pytest.fixture
def rich_eeat_content() -> str:
    return RICH_EEAT_CONTENT


# ============================================================================
# API Clients
# ============================================================================

@pytest.fixture
def app():
    from api.analyze import app as fastapi_app

    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """Client with default settings (auth disabled)."""
    return TestClient(app)


@pytest.fixture
def auth_settings() -> Settings:
    return Settings(REQUIRE_AUTH=True, API_KEYS="test-key, second-key")


@pytest.fixture
def auth_client(app, auth_settings):
    """Client with API key auth enforced."""
    app.dependency_overrides[get_settings] = lambda: auth_settings
    return TestClient(app)
