"""
Pytest configuration and fixtures for browser-smoke tests.

Unit tests run against fake drivers. Tests marked `live` launch a real browser
and are skipped unless `--run-live` is given.
"""
import pytest

from browser_smoke.core.browser_manager import BrowserManager, DriverFactory
from browser_smoke.data_models import BrowserKind, BrowserSettings

pytest_plugins = ["browser_smoke.pytest_plugin", "pytester"]


class FakeDriver:
    """Stands in for a Selenium WebDriver; records every call."""

    def __init__(self, kind, title='Swag Labs', titles=None,
                 maximize_error=None, get_error=None, quit_error=None):
        self.kind = kind
        self._titles = list(titles) if titles else None
        self._title = title
        self.maximize_error = maximize_error
        self.get_error = get_error
        self.quit_error = quit_error
        self.maximize_calls = 0
        self.quit_calls = 0
        self.title_reads = 0
        self.visited = []

    def maximize_window(self):
        self.maximize_calls += 1
        if self.maximize_error:
            raise self.maximize_error

    def get(self, url):
        self.visited.append(url)
        if self.get_error:
            raise self.get_error

    @property
    def title(self):
        self.title_reads += 1
        if self._titles:
            return self._titles.pop(0)
        return self._title

    def quit(self):
        self.quit_calls += 1
        if self.quit_error:
            raise self.quit_error


class FakeDriverFactory(DriverFactory):
    def __init__(self, kind, launch_error=None, **driver_kwargs):
        super().__init__(kind)
        self.launch_error = launch_error
        self.driver_kwargs = driver_kwargs
        self.launched = []

    def launch(self):
        if self.launch_error:
            raise self.launch_error
        driver = FakeDriver(self.kind, **self.driver_kwargs)
        self.launched.append(driver)
        return driver

    @property
    def quit_calls(self):
        return sum(driver.quit_calls for driver in self.launched)


@pytest.fixture
def make_factory():
    """Build a fake factory: make_factory(BrowserKind.CHROME, title='...', launch_error=...)."""
    return FakeDriverFactory


@pytest.fixture
def fake_factories():
    return {kind: FakeDriverFactory(kind) for kind in BrowserKind}


@pytest.fixture
def settings():
    return BrowserSettings()


@pytest.fixture
def manager(settings, fake_factories):
    return BrowserManager(settings=settings, factories=fake_factories)

