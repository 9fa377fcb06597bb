"""Shared live-site helpers for the browser and HTTP test suites."""

from __future__ import annotations

import logging
import time
from collections.abc import Generator

import pytest
import requests

logger = logging.getLogger(__name__)


def is_site_reachable(url: str, timeout: int = 5) -> bool:
    """Return True when the site root answers with a 2xx status."""
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException:
        return False
    return response.ok


def wait_for_site_reachable(url: str, timeout: int = 30, interval: int = 1) -> None:
    """Poll the site root until it answers or the timeout elapses."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        if is_site_reachable(url, timeout=min(interval * 5, timeout)):
            return
        time.sleep(interval)
    raise RuntimeError(f"Site at {url} not reachable after {timeout}s")


def live_site_url(
    *,
    website_url: str,
    suite_name: str,
    timeout: int = 30,
) -> Generator[str, None, None]:
    """
    Yield the configured site URL once it is reachable.

    The site is hosted externally, so an unreachable site skips the suite
    rather than failing it.
    """
    base_url = website_url.rstrip("/")
    try:
        wait_for_site_reachable(f"{base_url}/", timeout=timeout)
    except RuntimeError as exc:
        pytest.skip(f"{exc}; set WEBSITE_URL to run {suite_name} tests")
    logger.info("Running %s tests against %s", suite_name, base_url)
    yield base_url


def link_status(url: str, timeout: int = 10) -> int:
    """
    Status code for an outbound link.

    HEAD first; sites that reject HEAD get a streamed GET.
    """
    response = requests.head(url, allow_redirects=True, timeout=timeout)
    if response.status_code in (403, 405):
        response = requests.get(url, allow_redirects=True, timeout=timeout, stream=True)
        response.close()
    return response.status_code
