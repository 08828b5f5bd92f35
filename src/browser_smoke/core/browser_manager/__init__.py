"""
Browser manager package.

Public API:
- BrowserManager: opens, drives and closes Selenium browser sessions.
- BrowserSession: one browser instance and its lifecycle state.
- resolve_driver_factory: maps a browser name to the factory that launches it.
- SessionStartError, NavigationError, SessionClosedError: harness errors.
"""

from .drivers import DriverFactory, SeleniumDriverFactory, default_driver_factories, parse_browser_kind, resolve_driver_factory
from .errors import HarnessError, NavigationError, SessionClosedError, SessionStartError
from .service import BrowserManager
from .session import BrowserSession

__all__ = [
    "BrowserManager",
    "BrowserSession",
    "DriverFactory",
    "SeleniumDriverFactory",
    "default_driver_factories",
    "parse_browser_kind",
    "resolve_driver_factory",
    "HarnessError",
    "NavigationError",
    "SessionClosedError",
    "SessionStartError",
]
