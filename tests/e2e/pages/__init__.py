"""
Page Object Model (POM) classes for the portfolio site.

This package contains page objects that encapsulate page-specific
locators and workflows. The POM pattern provides:
- Separation of test logic from page details
- Reusable page interactions
- One place to update when the site's markup changes
"""

from tests.e2e.pages.admin_page import AdminPage
from tests.e2e.pages.base_page import BasePage, NavigationError
from tests.e2e.pages.blog_page import BlogPage
from tests.e2e.pages.contact_page import ContactPage
from tests.e2e.pages.cv_page import CvPage
from tests.e2e.pages.home_page import HomePage, InvalidSectionError, Section
from tests.e2e.pages.locators import ByCss, ByRole, ByTestId, ByText, LocatorHandle

__all__ = [
    "AdminPage",
    "BasePage",
    "BlogPage",
    "ByCss",
    "ByRole",
    "ByTestId",
    "ByText",
    "ContactPage",
    "CvPage",
    "HomePage",
    "InvalidSectionError",
    "LocatorHandle",
    "NavigationError",
    "Section",
]
