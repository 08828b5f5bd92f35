from typing import Optional

from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.support.ui import WebDriverWait
from selenium.common.exceptions import TimeoutException


def wait_for_title(driver: WebDriver, timeout: float = 10, poll_frequency: float = 0.2) -> Optional[str]:
    """
    Waits until the page title is non-empty.
    Returns the title, or None if it stayed empty for the whole timeout.
    """
    try:
        return WebDriverWait(driver, timeout, poll_frequency=poll_frequency).until(lambda d: d.title)
    except TimeoutException:
        return None
