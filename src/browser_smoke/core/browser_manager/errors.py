from typing import Optional


class HarnessError(Exception):
    """Base class for errors raised by the browser session harness."""


class SessionStartError(HarnessError):
    """The driver failed to launch, or the launched window could not be set up."""

    def __init__(self, message: str, browser_kind: Optional[str] = None):
        super().__init__(message)
        self.browser_kind = browser_kind


class NavigationError(HarnessError):
    """Loading a page or reading its title failed in the driver."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class SessionClosedError(HarnessError):
    """An operation was attempted on a session that is not open."""
