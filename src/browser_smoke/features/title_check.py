import logging
from typing import Optional

from ..core.browser_manager import BrowserManager, BrowserSession
from ..data_models import TitleCheck, TitleCheckResult, DEFAULT_TITLE_CHECK

logger = logging.getLogger(__name__)


def verify_title(actual_title: Optional[str], expected_title: str) -> None:
    if actual_title != expected_title:
        raise AssertionError(f"Expected page title '{expected_title}' but got '{actual_title}'")


def read_title(manager: BrowserManager, session: BrowserSession, check: TitleCheck) -> TitleCheckResult:
    """Navigate an open session to `check.url` and record the title, without asserting."""
    actual = manager.navigate_and_get_title(session, check.url)
    return TitleCheckResult(
        browser_kind=session.browser_kind,
        url=check.url,
        expected_title=check.expected_title,
        actual_title=actual,
    )


def check_title(manager: BrowserManager, browser_kind: Optional[str],
                check: TitleCheck = DEFAULT_TITLE_CHECK) -> TitleCheckResult:
    """
    Open a browser, load the page and compare its title.

    The browser is closed before this returns, whether the title matched, the
    assertion failed, or navigation raised.

    Raises:
        SessionStartError: the browser could not be started.
        NavigationError: the page could not be loaded.
        AssertionError: the title did not match.
    """
    with manager.session(browser_kind) as session:
        result = read_title(manager, session, check)
        logger.info(f"[{result.browser_kind.value}] {check.url} -> '{result.actual_title}'")
        verify_title(result.actual_title, check.expected_title)
    return result


def open_page(manager: BrowserManager, browser_kind: Optional[str], url: str) -> str:
    """Open a browser on `url` and close it again; returns the title it saw."""
    with manager.session(browser_kind) as session:
        title = manager.navigate_and_get_title(session, url)
    logger.info(f"[{session.browser_kind.value}] Opened {url}")
    return title
