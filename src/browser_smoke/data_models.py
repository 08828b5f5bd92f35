from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class BrowserKind(str, Enum):
    CHROME = "chrome"
    FIREFOX = "firefox"
    EDGE = "edge"


DEFAULT_BROWSER_KIND = BrowserKind.CHROME


class SessionState(str, Enum):
    CREATED = "created"
    OPEN = "open"
    CLOSED = "closed"


class BrowserSettings(BaseModel):
    headless: bool = Field(False, description="Run the browser without a visible window.")
    window_size: Optional[str] = Field(None, description="Initial window size as 'width,height'. Maximize still applies.")
    driver_options: List[str] = Field(default_factory=list, description="Extra command-line arguments passed to the browser.")

    chrome_driver_path: Optional[str] = Field(None, description="Path to a local chromedriver binary.")
    gecko_driver_path: Optional[str] = Field(None, description="Path to a local geckodriver binary.")
    edge_driver_path: Optional[str] = Field(None, description="Path to a local msedgedriver binary.")

    page_load_timeout_seconds: int = Field(30, description="Driver-side page load timeout.")
    title_wait_seconds: float = Field(0.0, description="Wait up to this long for a non-empty title after navigation. 0 disables the wait.")

    webdriver_manager_ssl_verify: Optional[bool] = None
    webdriver_manager_cache_path: Optional[str] = None


class TitleCheck(BaseModel):
    url: str
    expected_title: str


DEFAULT_TITLE_CHECK = TitleCheck(url="https://www.saucedemo.com", expected_title="Swag Labs")


class TitleCheckResult(BaseModel):
    browser_kind: BrowserKind
    url: str
    expected_title: str
    actual_title: Optional[str] = None

    @property
    def passed(self) -> bool:
        return self.actual_title == self.expected_title
