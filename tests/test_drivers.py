import pytest
from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.edge.options import Options as EdgeOptions
from selenium.webdriver.firefox.options import Options as FirefoxOptions

from browser_smoke.core.browser_manager import (
    SeleniumDriverFactory,
    default_driver_factories,
    parse_browser_kind,
    resolve_driver_factory,
)
from browser_smoke.core.browser_manager.constants import DEFAULT_WDM_CACHE_DIR, resolve_cache_dir
from browser_smoke.core.browser_manager.options import (
    configure_driver_options,
    new_driver_options,
    parse_window_size,
)
from browser_smoke.data_models import BrowserKind, BrowserSettings


@pytest.mark.parametrize("name, expected", [
    ("chrome", BrowserKind.CHROME),
    ("CHROME", BrowserKind.CHROME),
    ("firefox", BrowserKind.FIREFOX),
    ("FireFox", BrowserKind.FIREFOX),
    ("edge", BrowserKind.EDGE),
    (" Edge ", BrowserKind.EDGE),
    ("safari", BrowserKind.CHROME),
    ("", BrowserKind.CHROME),
    (None, BrowserKind.CHROME),
])
def test_parse_browser_kind(name, expected):
    assert parse_browser_kind(name) == expected


def test_parse_accepts_enum_members():
    assert parse_browser_kind(BrowserKind.EDGE) == BrowserKind.EDGE


def test_resolve_uses_default_selenium_table():
    factory = resolve_driver_factory("Firefox")
    assert isinstance(factory, SeleniumDriverFactory)
    assert factory.kind == BrowserKind.FIREFOX


def test_resolve_falls_back_to_chrome_entry(fake_factories):
    assert resolve_driver_factory("opera", fake_factories) is fake_factories[BrowserKind.CHROME]
    assert resolve_driver_factory("edge", fake_factories) is fake_factories[BrowserKind.EDGE]


def test_resolve_table_without_chrome_entry(make_factory):
    firefox = make_factory(BrowserKind.FIREFOX)
    table = {BrowserKind.FIREFOX: firefox}

    assert resolve_driver_factory("firefox", table) is firefox
    with pytest.raises(KeyError):
        resolve_driver_factory("safari", table)


def test_resolve_does_not_launch(fake_factories):
    for name in ("chrome", "firefox", "edge", "safari"):
        resolve_driver_factory(name, fake_factories)
    assert all(not factory.launched for factory in fake_factories.values())


def test_default_table_covers_every_kind():
    settings = BrowserSettings(chrome_driver_path="/opt/chromedriver",
                               gecko_driver_path="/opt/geckodriver",
                               edge_driver_path="/opt/msedgedriver")
    table = default_driver_factories(settings)

    assert set(table) == set(BrowserKind)
    assert table[BrowserKind.CHROME].configured_driver_path() == "/opt/chromedriver"
    assert table[BrowserKind.FIREFOX].configured_driver_path() == "/opt/geckodriver"
    assert table[BrowserKind.EDGE].configured_driver_path() == "/opt/msedgedriver"


@pytest.mark.parametrize("kind, options_class", [
    (BrowserKind.CHROME, ChromeOptions),
    (BrowserKind.FIREFOX, FirefoxOptions),
    (BrowserKind.EDGE, EdgeOptions),
])
def test_new_driver_options(kind, options_class):
    assert isinstance(new_driver_options(kind), options_class)


def test_chrome_headless_and_window_size():
    options = configure_driver_options(
        ChromeOptions(), BrowserKind.CHROME,
        headless=True, window_size="1280,720", additional_options=["--incognito"],
    )
    assert "--headless=new" in options.arguments
    assert "--window-size=1280,720" in options.arguments
    assert "--incognito" in options.arguments


def test_firefox_headless_and_window_size():
    options = configure_driver_options(
        FirefoxOptions(), BrowserKind.FIREFOX,
        headless=True, window_size="1280x720", additional_options=None,
    )
    assert "-headless" in options.arguments
    assert "--width=1280" in options.arguments
    assert "--height=720" in options.arguments


def test_non_string_options_are_ignored(caplog):
    options = configure_driver_options(
        EdgeOptions(), BrowserKind.EDGE,
        headless=False, window_size=None, additional_options=["--inprivate", 42],
    )
    assert options.arguments == ["--inprivate"]
    assert "Ignoring non-string driver option" in caplog.text


@pytest.mark.parametrize("raw, expected", [
    ("1920,1080", (1920, 1080)),
    ("800x600", (800, 600)),
    (None, None),
    ("", None),
    ("wide", None),
    ("0,100", None),
    ("a,b", None),
])
def test_parse_window_size(raw, expected):
    assert parse_window_size(raw) == expected


def test_cache_dir_defaults_to_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    assert resolve_cache_dir(None) == tmp_path / DEFAULT_WDM_CACHE_DIR


def test_relative_and_default_cache_dirs_share_an_anchor(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    assert resolve_cache_dir(".wdm_cache") == resolve_cache_dir(None)
    assert resolve_cache_dir("drivers/cache") == tmp_path / "drivers" / "cache"


def test_absolute_cache_dir_is_kept(tmp_path):
    assert resolve_cache_dir(str(tmp_path / "wdm")) == tmp_path / "wdm"
