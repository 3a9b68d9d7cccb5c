"""
scripts/verify_setup.py
-----------------------
Verify selenium-waiter setup and dependencies.

Checks:
- Python version >= 3.9
- Required distributions import, and Selenium's WebDriverWait is usable
- Wait defaults from the environment (.env) parse and are positive
- A Chrome/Chromium binary is available for `waiter open` (optional)

Usage:
    python -m scripts.verify_setup
    python scripts/verify_setup.py
"""

import importlib
import shutil
import sys

# (import name, distribution name)
DEPENDENCIES = [
    ("dotenv", "python-dotenv"),
    ("selenium", "selenium"),
    ("webdriver_manager", "webdriver-manager"),
    ("waiter", "selenium-waiter"),
]

CHROME_BINARIES = ("google-chrome", "google-chrome-stable", "chromium", "chromium-browser", "chrome")


def python_version():
    version = sys.version_info
    return version >= (3, 9), f"{version.major}.{version.minor}.{version.micro}"


def importable(module_name):
    def check():
        try:
            module = importlib.import_module(module_name)
        except ImportError as e:
            return False, str(e)
        return True, getattr(module, "__version__", "")
    return check


def webdriver_wait():
    """WebDriverWait must poll a plain object, which every helper relies on."""
    from selenium.webdriver.support.ui import WebDriverWait

    value = WebDriverWait(object(), 1, poll_frequency=0.01).until(lambda subject: "ready")
    return value == "ready", "until() returned the condition value"


def wait_defaults():
    from waiter.config import default_config
    from waiter.exceptions import ConfigurationError

    try:
        cfg = default_config()
    except ConfigurationError as e:
        return False, str(e)
    passed = cfg.timeout_sec > 0 and cfg.poll_interval_sec > 0
    return passed, f"timeout={cfg.timeout_sec}s, poll={cfg.poll_interval_sec}s"


def chrome_binary():
    found = [path for path in map(shutil.which, CHROME_BINARIES) if path]
    if found:
        return True, found[0]
    return False, "not on PATH, only needed for 'waiter open'"


SECTIONS = [
    ("Python", [("Python >= 3.9", python_version)]),
    ("Dependencies", [(f"import {dist}", importable(name)) for name, dist in DEPENDENCIES]
        + [("selenium WebDriverWait", webdriver_wait)]),
    ("Configuration", [("WAITER_TIMEOUT / WAITER_POLL_INTERVAL", wait_defaults)]),
    ("Optional", [("Chrome browser", chrome_binary)]),
]


def run_check(check):
    try:
        return check()
    except Exception as e:
        return False, f"{type(e).__name__}: {e}"


def main():
    """Run every check and print one line per result."""
    print("selenium-waiter setup check")
    results = []

    for section, checks in SECTIONS:
        print(f"\n[{section}]")
        for label, check in checks:
            passed, detail = run_check(check)
            results.append(passed)
            line = f"  {'ok  ' if passed else 'FAIL'} {label}"
            print(f"{line} ({detail})" if detail else line)

    failed = results.count(False)
    print(f"\n{len(results) - failed}/{len(results)} checks passed")
    if failed:
        print("Most failures are fixed by: pip install -e \".[test]\"")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
