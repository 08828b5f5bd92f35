import argparse
import logging
import sys
from typing import List, Optional

from .core.browser_manager import BrowserManager, NavigationError, SessionStartError
from .core.config_loader import ConfigLoader
from .data_models import BrowserKind, TitleCheck, DEFAULT_BROWSER_KIND, DEFAULT_TITLE_CHECK
from .features.title_check import check_title
from .utils.logger import setup_logger

logger = logging.getLogger(__name__)

EXIT_PASSED = 0
EXIT_TITLE_MISMATCH = 1
EXIT_HARNESS_ERROR = 2


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="browser-smoke",
        description="Open a browser, load a page and verify its title.",
    )
    parser.add_argument(
        "--browser",
        default=DEFAULT_BROWSER_KIND.value,
        help=f"Browser to launch: {', '.join(k.value for k in BrowserKind)}. "
             f"Anything else falls back to {DEFAULT_BROWSER_KIND.value}.",
    )
    parser.add_argument("--url", default=DEFAULT_TITLE_CHECK.url, help="Page to open.")
    parser.add_argument("--expected-title", default=DEFAULT_TITLE_CHECK.expected_title,
                        help="Title the page must have.")
    parser.add_argument("--settings", default=None, help="Path to a settings JSON file (default: $BROWSER_SMOKE_SETTINGS, then ./config/settings.json).")
    parser.add_argument("--headless", action="store_true", help="Run without a visible browser window.")
    parser.add_argument("--log-level", default=None, help="Override the configured log level.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    config_loader = ConfigLoader(args.settings) if args.settings else ConfigLoader()
    setup_logger(config_loader, level_override=args.log_level)

    settings = config_loader.get_browser_settings()
    if args.headless:
        settings = settings.model_copy(update={"headless": True})

    manager = BrowserManager(settings=settings)
    check = TitleCheck(url=args.url, expected_title=args.expected_title)

    try:
        result = check_title(manager, args.browser, check)
    except AssertionError as e:
        logger.error(f"Title check failed: {e}")
        return EXIT_TITLE_MISMATCH
    except (SessionStartError, NavigationError) as e:
        logger.error(f"Title check could not run: {e}")
        return EXIT_HARNESS_ERROR

    logger.info(f"Title check passed in {result.browser_kind.value}: '{result.actual_title}'")
    return EXIT_PASSED


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.info("Run interrupted by user.")
        sys.exit(130)
