"""
Pytest Configuration and Shared Fixtures

Provides audit-server payloads, settings and a stub fetcher for all test modules.
"""

from typing import Any, Dict

import pytest

from gbp_audit.config import Settings
from gbp_audit.errors import ConnectivityError, ServerError
from gbp_audit.models import ProfileMetrics

SHARE_LINK = "https://maps.app.goo.gl/AbCdEf123"


# ============================================================================
# Mock Data Fixtures
# ============================================================================

@pytest.fixture
def share_link() -> str:
    return SHARE_LINK


@pytest.fixture
def optimized_payload() -> Dict[str, Any]:
    """Audit server body for a profile that passes every criterion."""
    return {
        "businessName": "Mile High Plumbing",
        "address": "123 Main St, Denver, CO",
        "isVerified": True,
        "rating": 4.5,
        "reviewCount": 60,
        "photoCount": 25,
        "posts": {"recentPost": True},
        "qAndA": {"totalQuestions": 5, "answeredQuestions": 5},
        "hasWebsite": True,
    }


@pytest.fixture
def neglected_payload() -> Dict[str, Any]:
    """Audit server body for a profile that fails every criterion (no posts / Q&A)."""
    return {
        "businessName": "Corner Bakery",
        "address": "9 Elm Rd, Boulder, CO",
        "isVerified": False,
        "rating": 3.2,
        "reviewCount": 10,
        "photoCount": 5,
        "hasWebsite": False,
    }


@pytest.fixture
def optimized_metrics(optimized_payload) -> ProfileMetrics:
    return ProfileMetrics.from_dict(optimized_payload)


@pytest.fixture
def neglected_metrics(neglected_payload) -> ProfileMetrics:
    return ProfileMetrics.from_dict(neglected_payload)


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def settings() -> Settings:
    return Settings(endpoint="http://audit.test/api/audit", timeout=5.0)


class StubFetcher:
    """Stands in for the audit server: records calls, returns or raises a canned outcome."""

    def __init__(self, outcome=None):
        self.outcome = outcome
        self.calls = []

    async def __call__(self, link: str, settings: Settings) -> ProfileMetrics:
        self.calls.append(link)
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return self.outcome


@pytest.fixture
def stub_fetcher(optimized_metrics) -> StubFetcher:
    return StubFetcher(optimized_metrics)


@pytest.fixture
def server_error() -> ServerError:
    return ServerError("Server responded with an error (HTTP 500).", status_code=500)


@pytest.fixture
def connectivity_error() -> ConnectivityError:
    return ConnectivityError("Request to http://audit.test/api/audit failed: ConnectError()")
