"""Configuration for hackathon page scraping."""

import logging
import os
from dataclasses import dataclass
from typing import Callable, Tuple, Union

logger = logging.getLogger(__name__)

USER_AGENTS = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36",
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36",
)

# Ordered by priority: the first selector with any match wins
ICON_SELECTORS = (
    'img[class*="logo"]',
    'img[class*="icon"]',
    'img[class*="brand"]',
    'img[alt*="logo"]',
    'img[alt*="icon"]',
    ".logo img",
    ".icon img",
    "header img",
    "nav img",
)

BROWSER_HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
    "Accept-Encoding": "gzip, deflate",
    "Connection": "keep-alive",
    "Upgrade-Insecure-Requests": "1",
    "Cache-Control": "no-cache",
}


@dataclass(frozen=True)
class ScraperConfig:
    user_agents: Tuple[str, ...] = USER_AGENTS
    icon_selectors: Tuple[str, ...] = ICON_SELECTORS
    request_timeout_seconds: float = 15.0
    max_redirects: int = 5
    # Sub-pages at or below this many characters are treated as empty
    min_section_chars: int = 100
    max_prompt_chars: int = 15000
    prizes_suffix: str = "/prizes"
    schedule_suffix: str = "/schedule"
    concurrent_subpages: bool = True


DEFAULT_SCRAPER_CONFIG = ScraperConfig()


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes")


def _env_number(name: str, default: Union[int, float], cast: Callable[[str], Union[int, float]]) -> Union[int, float]:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = cast(raw.strip())
    except ValueError:
        logger.warning(f"Ignoring invalid {name}={raw!r}, using default {default}")
        return default
    if not value > 0:
        logger.warning(f"Ignoring non-positive {name}={raw!r}, using default {default}")
        return default
    return value


def load_scraper_config() -> ScraperConfig:
    """Build a ScraperConfig from environment overrides.

    Malformed overrides are logged and replaced by the defaults.
    """
    return ScraperConfig(
        request_timeout_seconds=_env_number(
            "SCRAPER_TIMEOUT_SECONDS", DEFAULT_SCRAPER_CONFIG.request_timeout_seconds, float
        ),
        max_prompt_chars=_env_number("SCRAPER_MAX_PROMPT_CHARS", DEFAULT_SCRAPER_CONFIG.max_prompt_chars, int),
        concurrent_subpages=_env_flag("SCRAPER_CONCURRENT_SUBPAGES", DEFAULT_SCRAPER_CONFIG.concurrent_subpages),
    )
