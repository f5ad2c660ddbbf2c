"""Single-page HTTP fetching with failure isolation."""

from __future__ import annotations

import logging
import random
from typing import Optional

import requests
from bs4 import BeautifulSoup
from requests.exceptions import RequestException, Timeout, TooManyRedirects

from config.scraper_config import BROWSER_HEADERS, DEFAULT_SCRAPER_CONFIG, ScraperConfig
from models.schemas import PageContent
from scraper.content import find_icon_url, parse_html, reduce_to_text

logger = logging.getLogger(__name__)


class PageFetcher:
    """Fetch hackathon pages; every failure degrades to empty content."""

    def __init__(self, config: Optional[ScraperConfig] = None, rng: Optional[random.Random] = None):
        self.config = config or DEFAULT_SCRAPER_CONFIG
        self._rng = rng or random.Random()

    def _headers(self) -> dict:
        headers = dict(BROWSER_HEADERS)
        headers["User-Agent"] = self._rng.choice(self.config.user_agents)
        return headers

    def fetch_html(self, url: str) -> Optional[str]:
        """GET ``url`` and return its body, or None on any failure."""
        session = requests.Session()
        session.max_redirects = self.config.max_redirects
        resp = None
        try:
            resp = session.get(
                url,
                headers=self._headers(),
                timeout=self.config.request_timeout_seconds,
                allow_redirects=True,
            )
            resp.raise_for_status()
            return resp.text
        except Timeout:
            logger.warning(f"Timed out fetching {url} after {self.config.request_timeout_seconds}s")
        except TooManyRedirects:
            logger.warning(f"Too many redirects (> {self.config.max_redirects}) fetching {url}")
        except RequestException as e:
            logger.warning(f"Failed to fetch {url}: {e}")
        except Exception as e:
            logger.error(f"Unexpected error fetching {url}: {e}")
        finally:
            try:
                if resp is not None:
                    resp.close()
            finally:
                session.close()
        return None

    def fetch_document(self, url: str) -> Optional[BeautifulSoup]:
        html_text = self.fetch_html(url)
        if html_text is None:
            return None
        try:
            return parse_html(html_text)
        except Exception as e:
            logger.warning(f"Failed to parse HTML from {url}: {e}")
            return None

    def fetch_page(self, url: str, extract_icon: bool = False) -> PageContent:
        """Fetch ``url`` and reduce it to text, optionally locating its icon."""
        soup = self.fetch_document(url)
        if soup is None:
            return PageContent.empty()

        icon_url = ""
        if extract_icon:
            icon_url = find_icon_url(soup, url, self.config.icon_selectors)
        text = reduce_to_text(soup)
        logger.debug(f"Fetched {url}: {len(text)} chars of text")
        return PageContent(text=text, icon_url=icon_url)
