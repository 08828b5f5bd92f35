import os
from pathlib import Path
from typing import Optional

# webdriver_manager download cache, relative to the working directory unless absolute
DEFAULT_WDM_CACHE_DIR = ".wdm_cache"

# Environment variable key used by webdriver_manager to control SSL verification
WDM_SSL_VERIFY_ENV = "WDM_SSL_VERIFY"

# Driver binaries looked up on PATH before falling back to webdriver_manager
CHROME_DRIVER_BINARY = "chromedriver"
GECKO_DRIVER_BINARY = "geckodriver"
EDGE_DRIVER_BINARY = "msedgedriver"


def set_wdm_ssl_verify(enabled: bool) -> None:
    os.environ[WDM_SSL_VERIFY_ENV] = '1' if enabled else '0'


def resolve_cache_dir(cache_path: Optional[str]) -> Path:
    path = Path(cache_path or DEFAULT_WDM_CACHE_DIR).expanduser()
    return path if path.is_absolute() else Path.cwd() / path
