from typing import Any, Optional

from ...data_models import BrowserKind, SessionState
from .errors import SessionClosedError


class BrowserSession:
    """
    One browser instance and its lifecycle state: created -> open -> closed.

    Only BrowserManager moves a session between states. `handle` is set while the
    session is open and cleared when it closes; `closed` is terminal.
    """

    def __init__(self, browser_kind: BrowserKind):
        self.browser_kind = browser_kind
        self.handle: Optional[Any] = None
        self.state = SessionState.CREATED

    @property
    def is_open(self) -> bool:
        return self.state == SessionState.OPEN

    @property
    def is_closed(self) -> bool:
        return self.state == SessionState.CLOSED

    def require_open(self) -> Any:
        if not self.is_open:
            raise SessionClosedError(f"{self.browser_kind.value} session is {self.state.value}, not open.")
        return self.handle

    def _mark_open(self, handle: Any) -> None:
        if self.state != SessionState.CREATED:
            raise SessionClosedError(f"Cannot open a session that is already {self.state.value}.")
        self.handle = handle
        self.state = SessionState.OPEN

    def _mark_closed(self) -> Optional[Any]:
        handle, self.handle = self.handle, None
        self.state = SessionState.CLOSED
        return handle

    def __repr__(self) -> str:
        return f"BrowserSession(browser_kind={self.browser_kind.value!r}, state={self.state.value!r})"
