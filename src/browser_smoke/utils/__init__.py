# This file makes browser_smoke.utils a Python package and exposes key utilities.

from .selenium_waits import wait_for_title
from .logger import setup_logger

__all__ = [
    "setup_logger",
    "wait_for_title",
]
