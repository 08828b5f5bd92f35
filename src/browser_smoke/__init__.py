"""
browser-smoke: multi-browser smoke tests on Selenium WebDriver.

Open a Chrome, Firefox or Edge session, load a page, check its title, and
always close the browser afterwards.
"""

from .core.browser_manager import (
    BrowserManager,
    BrowserSession,
    NavigationError,
    SessionClosedError,
    SessionStartError,
    resolve_driver_factory,
)
from .data_models import BrowserKind, BrowserSettings, SessionState, TitleCheck

__all__ = [
    "BrowserKind",
    "BrowserManager",
    "BrowserSession",
    "BrowserSettings",
    "NavigationError",
    "SessionClosedError",
    "SessionStartError",
    "SessionState",
    "TitleCheck",
    "resolve_driver_factory",
]
