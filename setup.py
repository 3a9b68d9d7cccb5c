"""
selenium-waiter - setup.py
--------------------------
Installs the waiter package and provides the CLI entry point.

Usage:
    pip install -e .
    pip install -e ".[test]"
    waiter open --help
"""
from setuptools import setup, find_packages

setup(
    name="selenium-waiter",
    version="0.1.0",
    description="Named Selenium wait helpers built on one polling primitive",
    author="selenium-waiter",
    packages=find_packages(include=["waiter", "waiter.*"]),
    python_requires=">=3.9",
    install_requires=[
        "selenium>=4.11",
        "webdriver-manager",
        "python-dotenv",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "waiter=waiter.cli:main",
        ],
    },
)
