"""Loads a documentation page into a queryable tree.

Local files are parsed as-is. URLs are rendered in headless Chromium and the
snapshot is taken once the page has settled, so extraction never has to wait
on the browser.
"""

from pathlib import Path

from bs4 import BeautifulSoup
from playwright.sync_api import sync_playwright

from docs2openapi.log import get_logger

logger = get_logger(__name__)


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def load_document(
    source: str,
    wait_until: str = "networkidle",
    timeout_ms: int = 60000,
    headless: bool = True,
) -> BeautifulSoup:
    """Return the parsed tree for a local HTML file or a URL."""
    if is_url(source):
        html = render_page(source, wait_until=wait_until, timeout_ms=timeout_ms, headless=headless)
    else:
        logger.info("Reading %s", source)
        html = Path(source).read_text(encoding="utf-8")
    return BeautifulSoup(html, "html.parser")


def render_page(url: str, wait_until: str = "networkidle", timeout_ms: int = 60000, headless: bool = True) -> str:
    """Render ``url`` with Playwright and return the settled HTML."""
    logger.info("Rendering %s (wait until %s)", url, wait_until)
    with sync_playwright() as p:
        browser = p.chromium.launch(headless=headless)
        try:
            page = browser.new_page()
            page.goto(url, wait_until=wait_until, timeout=timeout_ms)
            return page.content()
        finally:
            browser.close()
