"""LLM-backed extraction of hackathon metadata from scraped page text."""

import logging
from typing import Any, Callable, Dict, Optional
from urllib.parse import urlparse

from config.scraper_config import ScraperConfig
from extractors.base_extractor import BaseExtractor
from models.schemas import ExtractionRecord
from prompts import build_hackathon_extraction_prompt
from schemas.extraction_schema import REQUIRED_FIELD_DEFAULTS
from utils.json_blocks import parse_first_json_object

logger = logging.getLogger(__name__)

TBD = "TBD"


def _default_generate(prompt: str) -> str:
    from llm import complete

    return complete(prompt)


def hostname_of(url: str) -> str:
    try:
        return urlparse(url).hostname or url
    except ValueError:
        return url


def fallback_record(original_url: str) -> ExtractionRecord:
    """Minimal well-formed record used whenever extraction cannot succeed."""
    return ExtractionRecord(
        title=f"Hackathon from {hostname_of(original_url)}",
        start_date=TBD,
        end_date=TBD,
        tracks=[],
        prizes=[],
        rules=[],
        link=original_url,
    )


def apply_field_defaults(data: Dict[str, Any], original_url: str) -> Dict[str, Any]:
    """Fill each missing or empty required field independently; returns a new dict."""
    result = dict(data)
    for key, default in REQUIRED_FIELD_DEFAULTS.items():
        if not result.get(key):
            result[key] = list(default) if isinstance(default, list) else default
    if not result.get("link"):
        result["link"] = original_url
    return result


class HackathonExtractor(BaseExtractor):
    """Turn combined page text into an ExtractionRecord with one model call."""

    def __init__(
        self,
        generate: Optional[Callable[[str], str]] = None,
        scraper_config: Optional[ScraperConfig] = None,
    ):
        super().__init__(scraper_config)
        self.generate = generate or _default_generate

    def build_prompt(self, text: str, original_url: str, platform: str) -> str:
        return build_hackathon_extraction_prompt(
            text, original_url, platform, max_chars=self.config.max_prompt_chars
        )

    def extract(self, text: str, **kwargs) -> ExtractionRecord:
        """Extract a record; never raises.

        Keyword args: ``original_url`` (required) and ``platform``.
        """
        return self._safe_extract(text, **kwargs)

    def _extract_structured(self, text: str, **kwargs) -> ExtractionRecord:
        original_url = kwargs["original_url"]
        platform = kwargs.get("platform", "generic")

        prompt = self.build_prompt(text, original_url, platform)
        logger.debug(f"Extraction prompt is {len(prompt)} chars for {original_url}")
        response_text = self.generate(prompt)

        data = parse_first_json_object(response_text)
        record = ExtractionRecord.model_validate(apply_field_defaults(data, original_url))
        logger.info(
            f"Extracted title={record.title!r} start={record.start_date!r} "
            f"end={record.end_date!r} timezone={record.timezone!r}"
        )
        return record

    def extract_fallback(self, text: str, **kwargs) -> ExtractionRecord:
        original_url = kwargs.get("original_url", "")
        return fallback_record(original_url)
