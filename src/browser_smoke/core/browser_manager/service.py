import logging
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, Optional, TypeVar

from ...data_models import BrowserKind, BrowserSettings
from ...utils.selenium_waits import wait_for_title
from ..config_loader import ConfigLoader
from .constants import set_wdm_ssl_verify
from .drivers import DriverFactory, default_driver_factories, resolve_driver_factory
from .errors import NavigationError, SessionStartError
from .session import BrowserSession

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BrowserManager:
    """
    Opens, drives and closes browser sessions.

    The manager keeps no per-session state: every session it opens is handed
    back to the caller, so one manager can serve several tests at once.
    """

    def __init__(
        self,
        config_loader: Optional[ConfigLoader] = None,
        *,
        settings: Optional[BrowserSettings] = None,
        factories: Optional[Dict[BrowserKind, DriverFactory]] = None,
    ):
        if settings is None:
            settings = (config_loader if config_loader else ConfigLoader()).get_browser_settings()
        self.browser_settings = settings

        if settings.webdriver_manager_ssl_verify is not None:
            set_wdm_ssl_verify(settings.webdriver_manager_ssl_verify)
            logger.info("WebDriver Manager SSL verification set.")

        self.factories = factories if factories is not None else default_driver_factories(settings)

    def resolve_driver_factory(self, browser_kind: Optional[str]) -> DriverFactory:
        return resolve_driver_factory(browser_kind, self.factories)

    def open_session(self, browser_kind: Optional[str]) -> BrowserSession:
        factory = self.resolve_driver_factory(browser_kind)
        session = BrowserSession(factory.kind)
        name = factory.kind.value

        try:
            handle = factory.launch()
        except Exception as e:
            session._mark_closed()
            logger.error(f"Failed to launch {name} driver: {e}", exc_info=True)
            raise SessionStartError(f"Could not launch {name}: {e}", browser_kind=name) from e

        try:
            handle.maximize_window()
        except Exception as e:
            logger.error(f"Failed to maximize {name} window: {e}", exc_info=True)
            self._quit(handle, name)
            session._mark_closed()
            raise SessionStartError(f"Could not maximize {name} window: {e}", browser_kind=name) from e

        session._mark_open(handle)
        logger.info(f"Opened {name} session.")
        return session

    def navigate_and_get_title(self, session: BrowserSession, url: str) -> str:
        handle = session.require_open()
        try:
            logger.info(f"Navigating to {url}")
            handle.get(url)
            if self.browser_settings.title_wait_seconds > 0:
                if wait_for_title(handle, self.browser_settings.title_wait_seconds) is None:
                    logger.warning(f"Title of {url} still empty after {self.browser_settings.title_wait_seconds}s.")
            title = handle.title
        except Exception as e:
            logger.error(f"Error navigating to {url}: {e}", exc_info=True)
            raise NavigationError(f"Could not load {url}: {e}", url=url) from e
        logger.debug(f"Title of {url}: {title!r}")
        return title

    def close_session(self, session: BrowserSession) -> None:
        if session.is_closed:
            logger.debug(f"{session!r} already closed.")
            return
        handle = session._mark_closed()
        if handle is not None:
            self._quit(handle, session.browser_kind.value)

    @contextmanager
    def session(self, browser_kind: Optional[str]) -> Iterator[BrowserSession]:
        """Open a session for the duration of a `with` block; it is closed however the block exits."""
        browser_session = self.open_session(browser_kind)
        try:
            yield browser_session
        finally:
            self.close_session(browser_session)

    def run(self, browser_kind: Optional[str], body: Callable[[BrowserSession], T]) -> T:
        with self.session(browser_kind) as browser_session:
            return body(browser_session)

    @staticmethod
    def _quit(handle: Any, name: str) -> None:
        try:
            handle.quit()
            logger.info(f"{name.capitalize()} WebDriver session closed.")
        except Exception as e:
            logger.error(f"Error closing {name} WebDriver: {e}", exc_info=True)
