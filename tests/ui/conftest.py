"""
Fixtures for the offline UI suite.

This module serves the local replica of the portfolio (see site_app.py)
and exposes it as ``site_url``, so the shared page-object fixtures in
``tests/conftest.py`` point at it instead of the live deployment.

Key Concepts Demonstrated:
- Live server fixture for Playwright
- Ephemeral ports so parallel workers never collide
- Readiness polling instead of fixed sleeps
"""

from __future__ import annotations

import threading
from collections.abc import Generator

import pytest
from flask import Flask
from werkzeug.serving import make_server

from shared.live_site import wait_for_site_reachable
from tests.ui.site_app import create_site_app


# -----------------------------------------------------------------------------
# Server Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def site_app() -> Flask:
    """Create the replica site application."""
    return create_site_app()


@pytest.fixture(scope="session")
def live_server(site_app: Flask) -> Generator[str, None, None]:
    """
    Serve the replica site from a background thread.

    Port 0 lets the OS pick a free port.

    Yields:
        str: Base URL of the running server.
    """
    server = make_server("127.0.0.1", 0, site_app, threaded=True)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()

    base_url = f"http://127.0.0.1:{server.server_port}"
    wait_for_site_reachable(f"{base_url}/", timeout=10)

    yield base_url

    server.shutdown()
    thread.join(timeout=5)


@pytest.fixture(scope="session")
def site_url(live_server: str) -> str:
    """Root URL that page objects are built against."""
    return live_server
