"""Hackathon scraping pipeline: detect, fetch, extract, normalize."""

from datetime import datetime
from typing import Callable, Optional
import logging

from config.scraper_config import ScraperConfig, load_scraper_config
from extractors.hackathon_extractor import HackathonExtractor, fallback_record
from models.schemas import ExtractionRecord
from scraper.fetcher import PageFetcher
from scraper.orchestrator import MultiPageOrchestrator
from scraper.platforms import canonicalize_url, detect_platform
from scraper.timezones import normalize_record

logger = logging.getLogger(__name__)


class ScraperService:
    """Runs the extraction pipeline for one URL at a time.

    Holds only immutable configuration and stateless collaborators, so one
    instance can serve concurrent calls for different URLs.
    """

    def __init__(
        self,
        config: Optional[ScraperConfig] = None,
        fetcher: Optional[PageFetcher] = None,
        extractor: Optional[HackathonExtractor] = None,
        generate: Optional[Callable[[str], str]] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.config = config or load_scraper_config()
        self.fetcher = fetcher or PageFetcher(self.config)
        self.orchestrator = MultiPageOrchestrator(self.fetcher, self.config)
        self.extractor = extractor or HackathonExtractor(generate=generate, scraper_config=self.config)
        self.clock = clock

    def scrape_hackathon(self, url: str) -> ExtractionRecord:
        """Scrape ``url`` into an ExtractionRecord. Never raises."""
        try:
            return self._run(url)
        except Exception as e:
            logger.exception(f"Scraping pipeline failed for {url}: {e}")
            return fallback_record(url)

    def _run(self, url: str) -> ExtractionRecord:
        logger.info(f"Starting hackathon scraping for URL: {url}")
        profile = detect_platform(url)
        canonical_url = canonicalize_url(url, profile)
        logger.info(f"Detected platform: {profile.name}; canonical URL: {canonical_url}")

        page = self.orchestrator.collect(profile, canonical_url)
        logger.info(f"Scraped content length: {len(page.text)}; icon URL: {page.icon_url!r}")

        record = self.extractor.extract(page.text, original_url=url, platform=profile.name)
        record = record.model_copy(update={"icon": page.icon_url})

        now = self.clock() if self.clock else None
        record = normalize_record(record, now=now)
        logger.info(
            f"Final timezone={record.timezone!r} endDate={record.end_date!r} "
            f"endDateTime={record.end_date_time!r}"
        )
        return record


# Global service instance
_scraper_service: Optional[ScraperService] = None


def get_scraper_service() -> ScraperService:
    """Get the shared scraper service instance."""
    global _scraper_service
    if _scraper_service is None:
        _scraper_service = ScraperService()
    return _scraper_service


def scrape_hackathon(url: str) -> ExtractionRecord:
    return get_scraper_service().scrape_hackathon(url)
