"""
Page-level helpers shared by the browser suites.

These functions work on a raw Playwright ``Page`` rather than a page
object, so any suite can use them: animation settling, full-page
screenshots, timing metrics, console-error capture, network emulation
and generated contact data.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from faker import Faker
from playwright.sync_api import ConsoleMessage, Page

from config import get_config

logger = logging.getLogger(__name__)

fake = Faker()

# Console noise that is not the site's fault
IGNORED_CONSOLE_FRAGMENTS = ("chrome-extension", "favicon.ico", "third-party", "analytics")

NetworkCondition = Literal["slow3g", "fast3g", "offline"]

NETWORK_CONDITIONS: dict[str, dict[str, float]] = {
    "slow3g": {"downloadThroughput": 50000, "uploadThroughput": 50000, "latency": 2000},
    "fast3g": {"downloadThroughput": 150000, "uploadThroughput": 150000, "latency": 562.5},
    "offline": {"downloadThroughput": 0, "uploadThroughput": 0, "latency": 0},
}


# -----------------------------------------------------------------------------
# Waiting and Scrolling
# -----------------------------------------------------------------------------

def wait_for_animation(page: Page, selector: str, timeout: int = 5000) -> None:
    """
    Wait for an element to appear and its CSS animations to finish.

    Raises:
        TimeoutError: If the element or its animations do not settle in time.
    """
    page.locator(selector).first.wait_for(timeout=timeout)
    page.wait_for_function(
        """selector => {
            const el = document.querySelector(selector);
            if (!el) return true;
            return el.getAnimations().every(a => a.playState === 'finished');
        }""",
        arg=selector,
        timeout=timeout,
    )


def scroll_to_bottom(page: Page, settle_ms: int = 1000) -> None:
    """Scroll to the end of the document and give lazy content time to load."""
    page.evaluate("() => window.scrollTo(0, document.body.scrollHeight)")
    page.wait_for_timeout(settle_ms)


def scroll_to_top(page: Page) -> None:
    page.evaluate("() => window.scrollTo(0, 0)")


# -----------------------------------------------------------------------------
# Screenshots
# -----------------------------------------------------------------------------

def take_full_page_screenshot(page: Page, name: str) -> str:
    """
    Capture the whole scrollable page to a timestamped file.

    Returns:
        Path to the saved screenshot.
    """
    results_dir = Path(get_config().RESULTS_DIR)
    results_dir.mkdir(parents=True, exist_ok=True)
    path = results_dir / f"{name}-{int(time.time() * 1000)}.png"
    page.screenshot(path=str(path), full_page=True)
    logger.info("Full-page screenshot saved: %s", path)
    return str(path)


# -----------------------------------------------------------------------------
# Performance Metrics
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PageLoadMetrics:
    """Navigation timing durations in milliseconds."""

    dom_content_loaded: float
    load_complete: float
    first_paint: float
    first_contentful_paint: float


def get_page_load_metrics(page: Page) -> PageLoadMetrics:
    """Read navigation and paint timings from the Performance API."""
    raw = page.evaluate(
        """() => {
            const nav = performance.getEntriesByType('navigation')[0];
            const paint = name => (performance.getEntriesByName(name)[0] || {}).startTime || 0;
            return {
                domContentLoaded: nav ? nav.domContentLoadedEventEnd - nav.domContentLoadedEventStart : 0,
                loadComplete: nav ? nav.loadEventEnd - nav.loadEventStart : 0,
                firstPaint: paint('first-paint'),
                firstContentfulPaint: paint('first-contentful-paint'),
            };
        }"""
    )
    return PageLoadMetrics(
        dom_content_loaded=raw["domContentLoaded"],
        load_complete=raw["loadComplete"],
        first_paint=raw["firstPaint"],
        first_contentful_paint=raw["firstContentfulPaint"],
    )


def measure_first_contentful_paint(page: Page, fallback_ms: int = 3000) -> float:
    """
    First Contentful Paint in milliseconds, or 0 when none is reported.

    Uses a buffered PerformanceObserver so a paint that already happened
    is still seen.
    """
    return float(
        page.evaluate(
            """fallback => new Promise(resolve => {
                const observer = new PerformanceObserver(list => {
                    const entry = list.getEntries().find(e => e.name === 'first-contentful-paint');
                    if (entry) resolve(entry.startTime);
                });
                observer.observe({type: 'paint', buffered: true});
                setTimeout(() => resolve(0), fallback);
            })""",
            fallback_ms,
        )
    )


@dataclass(frozen=True)
class ResourceMetrics:
    """Counts of resources fetched by the current document."""

    total: int
    css: int
    js: int
    images: int


def get_resource_metrics(page: Page) -> ResourceMetrics:
    raw = page.evaluate(
        """() => {
            const names = performance.getEntriesByType('resource').map(r => r.name);
            return {
                total: names.length,
                css: names.filter(n => n.includes('.css')).length,
                js: names.filter(n => n.includes('.js')).length,
                images: names.filter(n => /\\.(jpg|jpeg|png|gif|webp|svg)/.test(n)).length,
            };
        }"""
    )
    return ResourceMetrics(**raw)


def measure_load_time(page: Page, url: str) -> float:
    """Milliseconds from navigation start until the network goes idle."""
    start = time.perf_counter()
    page.goto(url)
    page.wait_for_load_state("networkidle")
    elapsed = (time.perf_counter() - start) * 1000
    logger.info("%s loaded in %.0fms", url, elapsed)
    return elapsed


# -----------------------------------------------------------------------------
# Console Errors
# -----------------------------------------------------------------------------

@dataclass
class ConsoleErrorCollector:
    """
    Record console errors emitted by a page.

    Attach before the navigation you care about; ``relevant_errors``
    drops known third-party noise.
    """

    ignored: tuple[str, ...] = IGNORED_CONSOLE_FRAGMENTS
    errors: list[str] = field(default_factory=list)

    def attach(self, page: Page) -> "ConsoleErrorCollector":
        page.on("console", self._on_console)
        return self

    def detach(self, page: Page) -> None:
        page.remove_listener("console", self._on_console)

    def _on_console(self, message: ConsoleMessage) -> None:
        if message.type == "error":
            self.errors.append(message.text)

    @property
    def relevant_errors(self) -> list[str]:
        return [
            error
            for error in self.errors
            if not any(fragment in error for fragment in self.ignored)
        ]


# -----------------------------------------------------------------------------
# Network Emulation
# -----------------------------------------------------------------------------

def simulate_network_conditions(page: Page, condition: NetworkCondition) -> None:
    """
    Throttle the page's network through the Chrome DevTools Protocol.

    Raises:
        ValueError: For an unknown condition name.
        NotImplementedError: On browsers without CDP (Firefox, WebKit).
    """
    if condition not in NETWORK_CONDITIONS:
        raise ValueError(
            f"Unknown network condition {condition!r}; expected one of {sorted(NETWORK_CONDITIONS)}"
        )
    browser_name = page.context.browser.browser_type.name if page.context.browser else ""
    if browser_name != "chromium":
        raise NotImplementedError(f"Network emulation needs Chromium, not {browser_name!r}")

    session = page.context.new_cdp_session(page)
    session.send(
        "Network.emulateNetworkConditions",
        {"offline": condition == "offline", **NETWORK_CONDITIONS[condition]},
    )
    logger.info("Emulating %s network on %s", condition, page.url)


# -----------------------------------------------------------------------------
# Generated Data
# -----------------------------------------------------------------------------

def generate_random_email() -> str:
    return fake.email()


def generate_random_string(length: int) -> str:
    """Random ASCII-letter string of exactly ``length`` characters."""
    return fake.pystr(min_chars=length, max_chars=length)
