"""
Browser-free unit tests.

These tests cover configuration, audits, selector strategies and page
object logic with mocked Playwright objects, so they run without a
browser or network.
"""
