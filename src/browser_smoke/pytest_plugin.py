"""
Pytest hooks for browser smoke tests.

Load with `pytest_plugins = ["browser_smoke.pytest_plugin"]` in a top-level
conftest. Provides the `--browser` option and a `browser_session` fixture that
opens a browser before each test and closes it afterwards, whatever the outcome.
Tests marked `live` are skipped unless `--run-live` is given.
"""
import pytest

from .core.browser_manager import BrowserManager
from .core.config_loader import ConfigLoader
from .data_models import DEFAULT_BROWSER_KIND, DEFAULT_TITLE_CHECK


def pytest_addoption(parser):
    group = parser.getgroup('browser-smoke')
    group.addoption(
        '--browser',
        action='store',
        default=DEFAULT_BROWSER_KIND.value,
        help='Browser for tests using browser_session (chrome, firefox, edge)'
    )
    group.addoption(
        '--run-live',
        action='store_true',
        default=False,
        help='Run tests that launch real browsers'
    )
    group.addoption(
        '--base-url',
        action='store',
        default=DEFAULT_TITLE_CHECK.url,
        help='Page opened by live title tests'
    )
    group.addoption(
        '--expected-title',
        action='store',
        default=DEFAULT_TITLE_CHECK.expected_title,
        help='Title live title tests expect'
    )


def pytest_configure(config):
    config.addinivalue_line(
        'markers', 'live: launches a real browser and reaches the network (enable with --run-live)'
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption('--run-live'):
        return
    skip_live = pytest.mark.skip(reason='needs --run-live to launch real browsers')
    for item in items:
        if 'live' in item.keywords:
            item.add_marker(skip_live)


@pytest.fixture(scope='session')
def browser_name(request):
    return request.config.getoption('--browser')


@pytest.fixture(scope='session')
def base_url(request):
    return request.config.getoption('--base-url')


@pytest.fixture(scope='session')
def expected_title(request):
    return request.config.getoption('--expected-title')


@pytest.fixture(scope='session')
def browser_manager():
    """Override to swap the driver factories or settings."""
    return BrowserManager(ConfigLoader())


@pytest.fixture
def browser_session(browser_manager, browser_name):
    """Open a browser before the test and close it after, however the test ends."""
    session = browser_manager.open_session(browser_name)
    yield session
    browser_manager.close_session(session)
