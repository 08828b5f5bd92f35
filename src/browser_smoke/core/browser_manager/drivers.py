import logging
import shutil
from typing import Callable, Dict, Optional

from selenium import webdriver
from selenium.webdriver.chrome.service import Service as ChromeService
from selenium.webdriver.edge.service import Service as EdgeService
from selenium.webdriver.firefox.service import Service as FirefoxService
from selenium.webdriver.remote.webdriver import WebDriver
from webdriver_manager.chrome import ChromeDriverManager
from webdriver_manager.core.driver_cache import DriverCacheManager
from webdriver_manager.firefox import GeckoDriverManager
from webdriver_manager.microsoft import EdgeChromiumDriverManager

from ...data_models import BrowserKind, BrowserSettings, DEFAULT_BROWSER_KIND
from .constants import (
    CHROME_DRIVER_BINARY,
    EDGE_DRIVER_BINARY,
    GECKO_DRIVER_BINARY,
    resolve_cache_dir,
)
from .options import DriverOptions, configure_driver_options, new_driver_options

logger = logging.getLogger(__name__)


def _cache_manager(cache_path: Optional[str]) -> DriverCacheManager:
    root = resolve_cache_dir(cache_path)
    root.mkdir(parents=True, exist_ok=True)
    return DriverCacheManager(root_dir=str(root))


def init_chrome_driver(
    options: DriverOptions,
    *,
    configured_path: Optional[str],
    cache_path: Optional[str] = None,
) -> WebDriver:
    local_driver = configured_path or shutil.which(CHROME_DRIVER_BINARY)
    if local_driver:
        logger.info(f"Using local chromedriver at: {local_driver}")
        service = ChromeService(executable_path=local_driver)
    else:
        logger.info("Local chromedriver not found. Falling back to webdriver_manager (requires internet).")
        service = ChromeService(ChromeDriverManager(cache_manager=_cache_manager(cache_path)).install())
    return webdriver.Chrome(service=service, options=options)


def init_firefox_driver(
    options: DriverOptions,
    *,
    configured_path: Optional[str],
    cache_path: Optional[str] = None,
) -> WebDriver:
    local_driver = configured_path or shutil.which(GECKO_DRIVER_BINARY)
    if local_driver:
        logger.info(f"Using local geckodriver at: {local_driver}")
        service = FirefoxService(executable_path=local_driver)
    else:
        logger.info("Local geckodriver not found. Falling back to webdriver_manager (requires internet).")
        service = FirefoxService(GeckoDriverManager(cache_manager=_cache_manager(cache_path)).install())
    return webdriver.Firefox(service=service, options=options)


def init_edge_driver(
    options: DriverOptions,
    *,
    configured_path: Optional[str],
    cache_path: Optional[str] = None,
) -> WebDriver:
    local_driver = configured_path or shutil.which(EDGE_DRIVER_BINARY)
    if local_driver:
        logger.info(f"Using local msedgedriver at: {local_driver}")
        service = EdgeService(executable_path=local_driver)
    else:
        logger.info("Local msedgedriver not found. Falling back to webdriver_manager (requires internet).")
        service = EdgeService(EdgeChromiumDriverManager(cache_manager=_cache_manager(cache_path)).install())
    return webdriver.Edge(service=service, options=options)


_INIT_FUNCTIONS: Dict[BrowserKind, Callable[..., WebDriver]] = {
    BrowserKind.CHROME: init_chrome_driver,
    BrowserKind.FIREFOX: init_firefox_driver,
    BrowserKind.EDGE: init_edge_driver,
}


class DriverFactory:
    """
    Launches one kind of browser.

    `launch()` returns a driver handle supporting `maximize_window()`, `get(url)`,
    `title` and `quit()`; the harness relies on nothing else.
    """

    def __init__(self, kind: BrowserKind):
        self.kind = kind

    def launch(self):
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind.value!r})"


class SeleniumDriverFactory(DriverFactory):
    def __init__(self, kind: BrowserKind, settings: Optional[BrowserSettings] = None):
        super().__init__(kind)
        self.settings = settings if settings else BrowserSettings()

    def configured_driver_path(self) -> Optional[str]:
        if self.kind == BrowserKind.FIREFOX:
            return self.settings.gecko_driver_path
        if self.kind == BrowserKind.EDGE:
            return self.settings.edge_driver_path
        return self.settings.chrome_driver_path

    def launch(self) -> WebDriver:
        options = configure_driver_options(
            new_driver_options(self.kind),
            self.kind,
            headless=self.settings.headless,
            window_size=self.settings.window_size,
            additional_options=self.settings.driver_options,
        )
        driver = _INIT_FUNCTIONS[self.kind](
            options,
            configured_path=self.configured_driver_path(),
            cache_path=self.settings.webdriver_manager_cache_path,
        )
        try:
            driver.set_page_load_timeout(self.settings.page_load_timeout_seconds)
        except Exception:
            driver.quit()
            raise
        logger.info(f"{self.kind.value.capitalize()} WebDriver initialized successfully.")
        return driver


def default_driver_factories(settings: Optional[BrowserSettings] = None) -> Dict[BrowserKind, DriverFactory]:
    return {kind: SeleniumDriverFactory(kind, settings) for kind in BrowserKind}


def parse_browser_kind(browser_kind: Optional[str]) -> BrowserKind:
    """Case-insensitive lookup; unknown or empty names fall back to the default browser."""
    normalized = (browser_kind or '').strip().lower()
    try:
        return BrowserKind(normalized)
    except ValueError:
        logger.debug(f"Unsupported browser '{browser_kind}', falling back to {DEFAULT_BROWSER_KIND.value}.")
        return DEFAULT_BROWSER_KIND


def resolve_driver_factory(
    browser_kind: Optional[str],
    factories: Optional[Dict[BrowserKind, DriverFactory]] = None,
) -> DriverFactory:
    table = factories if factories is not None else default_driver_factories()
    factory = table.get(parse_browser_kind(browser_kind))
    if factory is not None:
        return factory
    if DEFAULT_BROWSER_KIND not in table:
        raise KeyError(f"No factory for '{browser_kind}' and no {DEFAULT_BROWSER_KIND.value} fallback in the table.")
    return table[DEFAULT_BROWSER_KIND]
