"""
Smoke-test bodies that run against a BrowserManager session.

Public API: `from browser_smoke.features import check_title`.
"""

from .title_check import check_title, open_page, read_title, verify_title

__all__ = ["check_title", "open_page", "read_title", "verify_title"]
