"""
waiter/cli.py
-------------
Command-line smoke check for the wait helpers.

Usage:
    waiter open https://example.com                         # Load page, wait for readyState
    waiter open https://example.com --expect-url /login \\
        --match contains --ignore-case                       # Then wait for a redirect
    waiter open https://example.com --visible "#main"       # Then wait for an element
    waiter config                                           # Show resolved defaults
"""
import argparse
import logging
import sys


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure console logging."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Reduce noise from selenium/urllib3
    logging.getLogger("selenium").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    return logging.getLogger(__name__)


def cmd_open(args):
    """Open a URL in Chrome and run the requested waits."""
    from selenium.webdriver.common.by import By

    from waiter import actions
    from waiter.browser import chrome
    from waiter.config import browser_config

    logger = setup_logging(args.verbose)

    with chrome(browser_config()) as driver:
        actions.get(driver, args.url, args.timeout)
        logger.info(f"Page loaded: {driver.current_url}")

        if args.expect_url:
            actions.wait_for_url(
                driver,
                args.expect_url,
                args.timeout,
                relation=args.match,
                ignore_case=args.ignore_case,
            )
            logger.info(f"URL matched: {driver.current_url}")

        if args.visible:
            actions.wait_for_element_visible(driver, (By.CSS_SELECTOR, args.visible), args.timeout)
            logger.info(f"Element visible: {args.visible}")


def cmd_config(args):
    """Show the resolved wait and browser defaults."""
    from waiter.config import browser_config, default_config

    cfg = default_config()
    browser = browser_config()

    print("Waiter Defaults")
    print("=" * 50)
    print(f"  Timeout:        {cfg.timeout_sec}s")
    print(f"  Poll interval:  {cfg.poll_interval_sec}s")
    print()
    print("Browser:")
    print(f"  Headless:       {browser.headless}")
    print(f"  Window:         {browser.window_width}x{browser.window_height}")
    print(f"  Page load:      {browser.page_load_timeout_sec}s")
    print(f"  Implicit wait:  {browser.implicit_wait_sec}s")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="waiter",
        description="Selenium wait helpers - smoke check against a live page",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # open command
    open_parser = subparsers.add_parser(
        "open",
        help="Open a URL and wait for it to load",
    )
    open_parser.add_argument("url", help="URL to open")
    open_parser.add_argument(
        "--timeout",
        type=float,
        metavar="SECONDS",
        help="Seconds to wait for each step (default: WAITER_TIMEOUT)",
    )
    open_parser.add_argument(
        "--expect-url",
        metavar="TEXT",
        help="Wait for the browser URL to match TEXT after loading",
    )
    open_parser.add_argument(
        "--match",
        choices=["equals", "contains", "starts-with"],
        default="equals",
        help="How --expect-url is compared (default: equals)",
    )
    open_parser.add_argument(
        "--ignore-case",
        action="store_true",
        help="Compare --expect-url case-insensitively",
    )
    open_parser.add_argument(
        "--visible",
        metavar="CSS",
        help="Wait for the element matching this CSS selector to be visible",
    )
    open_parser.add_argument("-v", "--verbose", action="store_true", help="Log every poll attempt")
    open_parser.set_defaults(func=cmd_open)

    # config command
    config_parser = subparsers.add_parser(
        "config",
        help="Show resolved defaults",
    )
    config_parser.set_defaults(func=cmd_config)

    return parser


def main(argv=None):
    """Main entry point for CLI."""
    from waiter.exceptions import WaiterError

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        args.func(args)
    except WaiterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
