# This file makes browser_smoke.core a Python package and exposes key classes.

from .browser_manager import BrowserManager
from .config_loader import ConfigLoader

__all__ = [
    "BrowserManager",
    "ConfigLoader",
]
