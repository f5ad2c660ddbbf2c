"""Reduce parsed HTML documents to prompt-ready text."""

from __future__ import annotations

from typing import Iterable
from urllib.parse import urljoin

from bs4 import BeautifulSoup

from utils.text import collapse_whitespace

NON_CONTENT_TAGS = ("script", "style", "noscript")


def parse_html(html_text: str) -> BeautifulSoup:
    return BeautifulSoup(html_text or "", "html.parser")


def find_icon_url(soup: BeautifulSoup, base_url: str, selectors: Iterable[str]) -> str:
    """Return the logo/icon image URL chosen by the first matching selector.

    Relative ``src`` values are resolved against ``base_url``. An empty string
    means no selector matched or the matched image had no ``src``.
    """
    for selector in selectors:
        element = soup.select_one(selector)
        if element is None:
            continue
        icon_url = (element.get("src") or "").strip()
        if icon_url and not icon_url.startswith("http"):
            icon_url = urljoin(base_url, icon_url)
        return icon_url
    return ""


def strip_non_content(soup: BeautifulSoup) -> BeautifulSoup:
    for element in soup.find_all(NON_CONTENT_TAGS):
        element.decompose()
    return soup


def reduce_to_text(soup: BeautifulSoup) -> str:
    """Visible body text with script/style/noscript removed and whitespace collapsed."""
    strip_non_content(soup)
    root = soup.body if soup.body is not None else soup
    return collapse_whitespace(root.get_text(" "))
