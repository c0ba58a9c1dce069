"""
Headless Browser Engine

Thin adapter over Selenium WebDriver exposing the two calls a render
session needs:

    load(script)          run a script for its side effects
    evaluate(expression)  evaluate an expression, awaiting a returned promise

WebDriver's "execute script" awaits promises returned from the script body,
so evaluate() is a plain blocking call even though MermaidJS renders
asynchronously inside the page.
"""

import os
from typing import Any, Optional, Protocol

from dotenv import load_dotenv
from selenium import webdriver
from selenium.webdriver.chrome.options import Options

load_dotenv()
CHROME_BINARY = os.getenv("CHROME_BINARY")

CHROME_ARGUMENTS = [
    "--headless=new",
    "--disable-gpu",
    "--no-sandbox",
    "--disable-dev-shm-usage",
]


class Engine(Protocol):
    """Call contract of the remote rendering engine."""

    def load(self, script: str) -> None: ...

    def evaluate(self, expression: str) -> Any: ...

    def close(self) -> None: ...


class ChromeEngine:
    """
    Headless Chrome driven through Selenium WebDriver.

    The browser is launched in the constructor and stays on about:blank for
    its whole life; every script runs in that one page.

    Raises:
        selenium.common.exceptions.WebDriverException: If Chrome cannot be started
    """

    def __init__(self, binary_location: Optional[str] = CHROME_BINARY):
        options = Options()
        for argument in CHROME_ARGUMENTS:
            options.add_argument(argument)
        if binary_location:
            options.binary_location = binary_location

        self.driver = webdriver.Chrome(options=options)

    def load(self, script: str) -> None:
        self.driver.execute_script(script)

    def evaluate(self, expression: str) -> Any:
        return self.driver.execute_script(f"return {expression};")

    def close(self) -> None:
        self.driver.quit()
