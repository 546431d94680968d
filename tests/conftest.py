"""
Pytest configuration and shared fixtures for requester tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides a local HTTP server fixture
3. Configures pytest markers
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

from fixtures.server import (  # noqa: E402
    LOCALHOST_CERT,
    LocalHTTPServer,
    closed_port,
    localhost_tls_context,
)


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def http_server():
    """Provide a running local HTTP server that records every request."""
    server = LocalHTTPServer().start()
    try:
        yield server
    finally:
        server.stop()


@pytest.fixture
def https_server():
    """Provide a running local HTTPS server with a self-signed localhost certificate."""
    server = LocalHTTPServer(ssl_context=localhost_tls_context()).start()
    try:
        yield server
    finally:
        server.stop()


@pytest.fixture
def localhost_ca_bundle():
    """Path to the self-signed certificate, usable as a CA bundle."""
    return str(LOCALHOST_CERT)


@pytest.fixture
def refused_url():
    """URL on localhost where nothing is listening."""
    return f"http://127.0.0.1:{closed_port()}/"


@pytest.fixture(autouse=True)
def _clean_requester_env(monkeypatch):
    """Keep REQUESTER_* variables from the developer's shell out of tests."""
    import os
    for name in list(os.environ):
        if name.startswith("REQUESTER_"):
            monkeypatch.delenv(name, raising=False)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
