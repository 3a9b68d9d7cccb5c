"""
waiter/browser.py
-----------------
Context manager to create and tear down a Selenium ChromeDriver
for the `waiter open` smoke check.

- Configures Chrome window size and headless mode from `BrowserConfig`.
- Yields a `driver` object; the wait helpers never create or close one.
- Ensures proper cleanup with `driver.quit()` after use.

Use:
    with chrome(browser_config()) as driver:
        actions.get(driver, "...")
"""
from __future__ import annotations
from contextlib import contextmanager
import logging
from selenium import webdriver
from selenium.webdriver.chrome.service import Service
from selenium.webdriver.chrome.options import Options
from webdriver_manager.chrome import ChromeDriverManager
from .config import BrowserConfig

logger = logging.getLogger(__name__)


def chrome_options(cfg: BrowserConfig) -> Options:
    opts = Options()
    if cfg.headless:
        opts.add_argument("--headless=new")
    opts.add_argument(f"--window-size={cfg.window_width},{cfg.window_height}")
    opts.add_argument("--disable-gpu")
    opts.add_argument("--no-sandbox")
    opts.add_argument("--disable-dev-shm-usage")
    return opts


@contextmanager
def chrome(cfg: BrowserConfig):
    options = chrome_options(cfg)
    driver = webdriver.Chrome(service=Service(ChromeDriverManager().install()),
                              options=options)
    driver.set_page_load_timeout(cfg.page_load_timeout_sec)
    driver.implicitly_wait(cfg.implicit_wait_sec)
    logger.debug(f"Started Chrome (headless={cfg.headless})")
    try:
        yield driver
    finally:
        driver.quit()
