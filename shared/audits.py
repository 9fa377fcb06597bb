"""
Accessibility, SEO and security audits for rendered pages.

Collection (``collect_*``, ``*_on_page``) talks to the browser; scoring
and pattern checks are plain functions so they can be unit tested
without one.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

from playwright.sync_api import Page

logger = logging.getLogger(__name__)

SENSITIVE_PATTERNS = (
    re.compile(r"password\s*[:=]\s*[\"'][^\"']+[\"']", re.IGNORECASE),
    re.compile(r"api[_-]?key\s*[:=]\s*[\"'][^\"']+[\"']", re.IGNORECASE),
    re.compile(r"secret\s*[:=]\s*[\"'][^\"']+[\"']", re.IGNORECASE),
)
ADMIN_CREDENTIAL_PATTERN = re.compile(r"admin.*password.*[a-zA-Z0-9]{8,}", re.IGNORECASE)

SEMANTIC_LANDMARKS = "main, nav, header, footer, section, article"
SCORE_PER_CHECK = 20


# -----------------------------------------------------------------------------
# Pure checks
# -----------------------------------------------------------------------------

def find_sensitive_patterns(html: str, admin: bool = False) -> list[str]:
    """
    Return snippets of page source that look like leaked credentials.

    Args:
        html: Full page source.
        admin: Also apply the stricter admin-credential pattern.
    """
    patterns = SENSITIVE_PATTERNS + ((ADMIN_CREDENTIAL_PATTERN,) if admin else ())
    return [match.group(0) for pattern in patterns for match in pattern.finditer(html)]


def overflows_horizontally(scroll_width: int, viewport_width: int, tolerance: int = 20) -> bool:
    """True when content is wider than the viewport plus tolerance."""
    return scroll_width > viewport_width + tolerance


def length_within(text: Optional[str], minimum: int, maximum: int) -> bool:
    """Strict bounds check used for titles and meta descriptions."""
    return text is not None and minimum < len(text) < maximum


@dataclass(frozen=True)
class AccessibilitySignals:
    """Raw counts gathered from one page."""

    h1_count: int
    image_count: int
    images_with_alt: int
    focus_reached: bool
    semantic_count: int
    link_count: int
    links_with_text: int


def score_accessibility(signals: AccessibilitySignals) -> int:
    """
    Score a page out of 100, twenty points per passing check.

    Checks: exactly one h1; every image has alt text (pages with no images
    do not earn these points); Tab reaches an element; at least one
    semantic landmark; at least one of the sampled links has real text.
    """
    score = 0
    if signals.h1_count == 1:
        score += SCORE_PER_CHECK
    if signals.image_count > 0 and signals.images_with_alt == signals.image_count:
        score += SCORE_PER_CHECK
    if signals.focus_reached:
        score += SCORE_PER_CHECK
    if signals.semantic_count > 0:
        score += SCORE_PER_CHECK
    if signals.link_count > 0 and signals.links_with_text > 0:
        score += SCORE_PER_CHECK
    return score


# -----------------------------------------------------------------------------
# Browser collection
# -----------------------------------------------------------------------------

def collect_accessibility_signals(page: Page, link_sample: int = 5) -> AccessibilitySignals:
    """Gather the counts ``score_accessibility`` needs from the live page."""
    images = page.locator("img")
    alts = [image.get_attribute("alt") for image in images.all()]

    page.keyboard.press("Tab")
    focus_reached = page.locator(":focus").count() > 0

    links = page.locator("a").all()[:link_sample]
    links_with_text = sum(
        1 for link in links if len((link.text_content() or "").strip()) > 2
    )

    signals = AccessibilitySignals(
        h1_count=page.locator("h1").count(),
        image_count=len(alts),
        images_with_alt=sum(1 for alt in alts if alt),
        focus_reached=focus_reached,
        semantic_count=page.locator(SEMANTIC_LANDMARKS).count(),
        link_count=page.locator("a").count(),
        links_with_text=links_with_text,
    )
    logger.debug("Accessibility signals for %s: %s", page.url, signals)
    return signals


def images_without_alt(page: Page) -> list[str]:
    """``src`` of images that have no alt attribute and are not decorative."""
    missing = []
    for image in page.locator("img").all():
        if image.get_attribute("alt") is None and image.get_attribute("role") != "presentation":
            missing.append(image.get_attribute("src") or "<no src>")
    return missing


def unlabelled_interactive_elements(page: Page, sample: int = 5) -> list[str]:
    """Outer HTML of sampled buttons/links/inputs with no accessible label."""
    unlabelled = []
    elements = page.locator('button, a, input, [role="button"]').all()[:sample]
    for element in elements:
        label = (
            element.get_attribute("aria-label")
            or (element.text_content() or "").strip()
            or element.get_attribute("title")
        )
        if not label:
            unlabelled.append(element.evaluate("el => el.outerHTML.slice(0, 120)"))
    return unlabelled


def empty_headings(page: Page) -> int:
    """Number of h1-h6 elements without text."""
    headings = page.locator("h1, h2, h3, h4, h5, h6").all()
    return sum(1 for heading in headings if not (heading.text_content() or "").strip())


def focused_tags_after_tabbing(page: Page, presses: int = 10) -> list[str]:
    """Tag names that receive focus over ``presses`` Tab key presses."""
    tags = []
    for _ in range(presses):
        page.keyboard.press("Tab")
        focused = page.locator(":focus")
        if focused.count() > 0:
            tags.append(focused.first.evaluate("el => el.tagName.toLowerCase()"))
    return tags


def meta_content(page: Page, selector: str) -> Optional[str]:
    """``content`` of the first matching meta tag, or None when absent."""
    meta = page.locator(selector)
    if meta.count() == 0:
        return None
    return meta.first.get_attribute("content")


def inputs_without_identifier(page: Page) -> list[str]:
    """Form controls lacking id, name, aria-label and placeholder."""
    missing = []
    for control in page.locator("form input, form textarea, form select").all():
        identifiers = [
            control.get_attribute(attribute)
            for attribute in ("id", "name", "aria-label", "placeholder")
        ]
        if not any(identifiers):
            missing.append(control.evaluate("el => el.outerHTML.slice(0, 120)"))
    return missing


def text_colors(page: Page, sample: int = 5) -> list[str]:
    """Computed ``color`` of a sample of text elements."""
    elements = page.locator("p, h1, h2, h3, h4, h5, h6, a, button, span").all()[:sample]
    return [element.evaluate("el => getComputedStyle(el).color") for element in elements]
