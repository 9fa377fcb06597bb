"""
Suite configuration module.

This module defines configuration classes for the environments the
browser suite can target (production, staging, local). Values are
loaded from environment variables with sensible defaults, so the suite
can be pointed at another deployment without source edits.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent


class SiteConfig:
    """Base configuration with default settings."""

    WEBSITE_URL: str = os.environ.get(
        "WEBSITE_URL", "https://san-aoun.github.io/personal-site-monorepo"
    )

    # Bounded waits, in milliseconds (Playwright convention)
    DEFAULT_TIMEOUT_MS: int = int(os.environ.get("DEFAULT_TIMEOUT_MS", "10000"))
    NAVIGATION_TIMEOUT_MS: int = int(os.environ.get("NAVIGATION_TIMEOUT_MS", "30000"))

    SCREENSHOT_DIR: Path = Path(os.environ.get("SCREENSHOT_DIR", "screenshots"))
    RESULTS_DIR: Path = Path(
        os.environ.get("RESULTS_DIR", "test-results/screenshots")
    )

    THRESHOLDS_FILE: Path = Path(
        os.environ.get(
            "THRESHOLDS_FILE", str(BASE_DIR / "tests" / "e2e" / "thresholds.yml")
        )
    )


class ProductionConfig(SiteConfig):
    """The public GitHub Pages deployment."""


class StagingConfig(SiteConfig):
    """Preview deployment configuration."""

    WEBSITE_URL: str = os.environ.get(
        "WEBSITE_URL", "https://san-aoun.github.io/personal-site-monorepo-staging"
    )


class LocalConfig(SiteConfig):
    """Local `vite preview` server configuration."""

    WEBSITE_URL: str = os.environ.get(
        "WEBSITE_URL", "http://localhost:4173/personal-site-monorepo"
    )
    NAVIGATION_TIMEOUT_MS: int = 10000


# Configuration mapping for easy access
config = {
    "production": ProductionConfig,
    "staging": StagingConfig,
    "local": LocalConfig,
    "default": ProductionConfig,
}


def get_config(env: str | None = None) -> type[SiteConfig]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (production, staging, local).
             If None, uses the SITE_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("SITE_ENV", "production")
    return config.get(env, config["default"])


@dataclass(frozen=True)
class QualityThresholds:
    """Performance, SEO and accessibility budgets for the live site."""

    max_load_time_ms: int = 5000
    max_first_contentful_paint_ms: int = 2500
    max_resources: int = 50
    min_accessibility_score: int = 60
    overflow_tolerance_px: int = 20
    min_title_length: int = 5
    max_title_length: int = 60
    min_description_length: int = 20
    max_description_length: int = 160


def load_thresholds(path: Path | str | None = None) -> QualityThresholds:
    """
    Load quality thresholds from a YAML file.

    Keys absent from the file keep their dataclass defaults; unknown keys
    are ignored.

    Args:
        path: YAML file to read. Defaults to the active config's
              THRESHOLDS_FILE.

    Returns:
        Populated QualityThresholds instance.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    path = Path(path) if path is not None else get_config().THRESHOLDS_FILE
    with path.open("r", encoding="utf-8") as handle:
        raw: dict[str, Any] = yaml.safe_load(handle) or {}

    known = {field.name for field in fields(QualityThresholds)}
    values = {key: int(value) for key, value in raw.items() if key in known}
    return QualityThresholds(**values)
