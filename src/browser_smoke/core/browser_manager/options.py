import logging
from typing import Union, Optional, Tuple

from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.edge.options import Options as EdgeOptions
from selenium.webdriver.firefox.options import Options as FirefoxOptions

from ...data_models import BrowserKind

logger = logging.getLogger(__name__)

DriverOptions = Union[ChromeOptions, FirefoxOptions, EdgeOptions]


def new_driver_options(browser_kind: BrowserKind) -> DriverOptions:
    if browser_kind == BrowserKind.FIREFOX:
        return FirefoxOptions()
    if browser_kind == BrowserKind.EDGE:
        return EdgeOptions()
    return ChromeOptions()


def parse_window_size(window_size: Optional[str]) -> Optional[Tuple[int, int]]:
    """Parse 'width,height' (or 'widthxheight'); returns None for anything unusable."""
    if not window_size:
        return None
    parts = window_size.lower().replace('x', ',').split(',')
    if len(parts) != 2:
        logger.warning(f"Ignoring window size '{window_size}': expected 'width,height'.")
        return None
    try:
        width, height = int(parts[0].strip()), int(parts[1].strip())
    except ValueError:
        logger.warning(f"Ignoring window size '{window_size}': dimensions must be integers.")
        return None
    if width <= 0 or height <= 0:
        logger.warning(f"Ignoring window size '{window_size}': dimensions must be positive.")
        return None
    return width, height


def configure_driver_options(
    options: DriverOptions,
    browser_kind: BrowserKind,
    *,
    headless: bool,
    window_size: Optional[str],
    additional_options: Optional[list],
) -> DriverOptions:
    if headless:
        if browser_kind == BrowserKind.FIREFOX:
            options.add_argument('-headless')
        else:
            options.add_argument('--headless=new')
            options.add_argument('--disable-gpu')

    size = parse_window_size(window_size)
    if size:
        width, height = size
        if browser_kind == BrowserKind.FIREFOX:
            options.add_argument(f"--width={width}")
            options.add_argument(f"--height={height}")
        else:
            options.add_argument(f"--window-size={width},{height}")

    if isinstance(additional_options, list):
        for opt in additional_options:
            if isinstance(opt, str):
                options.add_argument(opt)
            else:
                logger.warning(f"Ignoring non-string driver option: {opt}")
    elif additional_options is not None:
        logger.warning(f"'driver_options' in config is not a list: {additional_options}")

    return options
