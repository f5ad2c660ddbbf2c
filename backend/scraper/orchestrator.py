"""Multi-page content acquisition for hackathon listings."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from config.scraper_config import DEFAULT_SCRAPER_CONFIG, ScraperConfig
from models.schemas import PageContent
from scraper.fetcher import PageFetcher
from scraper.platforms import PlatformProfile, join_subpage

logger = logging.getLogger(__name__)

MAIN_LABEL = "MAIN PAGE:"
PRIZES_LABEL = "PRIZES PAGE:"
SCHEDULE_LABEL = "SCHEDULE PAGE:"


def include_prizes_section(prizes_text: str, threshold: int) -> bool:
    """The prizes page replaces main-only content only when it carries real text."""
    return bool(prizes_text) and len(prizes_text) > threshold


def include_schedule_section(schedule_text: str, threshold: int) -> bool:
    """The schedule page is appended whenever it carries real text.

    Evaluated independently of the prizes decision.
    """
    return bool(schedule_text) and len(schedule_text) > threshold


def combine_sections(main_text: str, prizes_text: str, schedule_text: str, threshold: int) -> str:
    if include_prizes_section(prizes_text, threshold):
        combined = f"{MAIN_LABEL}\n{main_text}\n\n{PRIZES_LABEL}\n{prizes_text}"
    else:
        logger.info("Prizes page returned minimal content, using main page only")
        combined = main_text

    if include_schedule_section(schedule_text, threshold):
        combined += f"\n\n{SCHEDULE_LABEL}\n{schedule_text}"
        logger.info("Added schedule page content for timezone extraction")
    else:
        logger.info("Schedule page returned minimal content")
    return combined


class MultiPageOrchestrator:
    """Fetch the pages a platform spreads its event details over and merge their text."""

    def __init__(self, fetcher: Optional[PageFetcher] = None, config: Optional[ScraperConfig] = None):
        self.config = config or DEFAULT_SCRAPER_CONFIG
        self.fetcher = fetcher or PageFetcher(self.config)

    def collect(self, profile: PlatformProfile, canonical_url: str) -> PageContent:
        """Return combined page text plus the main page's icon URL."""
        if not profile.multi_page:
            page = self.fetcher.fetch_page(canonical_url, extract_icon=True)
            logger.info(f"Scraped {len(page.text)} chars from {canonical_url}")
            return page

        prizes_url = join_subpage(canonical_url, self.config.prizes_suffix)
        schedule_url = join_subpage(canonical_url, self.config.schedule_suffix)
        main, prizes, schedule = self._fetch_all(canonical_url, prizes_url, schedule_url)
        logger.info(
            f"{profile.name} page lengths: main={len(main.text)} "
            f"prizes={len(prizes.text)} schedule={len(schedule.text)}"
        )

        combined = combine_sections(main.text, prizes.text, schedule.text, self.config.min_section_chars)
        logger.debug(f"Sample of combined content: {combined[:500]}")
        return PageContent(text=combined, icon_url=main.icon_url)

    def _fetch_all(self, main_url: str, prizes_url: str, schedule_url: str):
        if not self.config.concurrent_subpages:
            return (
                self.fetcher.fetch_page(main_url, extract_icon=True),
                self.fetcher.fetch_page(prizes_url, extract_icon=False),
                self.fetcher.fetch_page(schedule_url, extract_icon=False),
            )

        with ThreadPoolExecutor(max_workers=3, thread_name_prefix="page-fetch") as executor:
            main_future = executor.submit(self.fetcher.fetch_page, main_url, True)
            prizes_future = executor.submit(self.fetcher.fetch_page, prizes_url, False)
            schedule_future = executor.submit(self.fetcher.fetch_page, schedule_url, False)
            return main_future.result(), prizes_future.result(), schedule_future.result()
