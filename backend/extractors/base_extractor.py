"""Base extractor class for structured information extraction."""

import logging
from typing import Any, Optional
from abc import ABC, abstractmethod

from config.scraper_config import DEFAULT_SCRAPER_CONFIG, ScraperConfig

logger = logging.getLogger(__name__)


class BaseExtractor(ABC):
    """Base class for extractors that must always produce a result.

    Subclasses implement the model-backed ``_extract_structured`` and a
    ``extract_fallback`` that cannot fail; ``_safe_extract`` routes any error
    from the former to the latter.
    """

    def __init__(self, config: Optional[ScraperConfig] = None):
        """Initialize the extractor with configuration."""
        self.config = config or DEFAULT_SCRAPER_CONFIG

    @abstractmethod
    def extract(self, text: str, **kwargs) -> Any:
        """Extract structured information from text."""
        pass

    @abstractmethod
    def _extract_structured(self, text: str, **kwargs) -> Any:
        """Extract using the language model (may raise)."""
        pass

    @abstractmethod
    def extract_fallback(self, text: str, **kwargs) -> Any:
        """Minimal result used when structured extraction fails."""
        pass

    def _safe_extract(self, text: str, **kwargs) -> Any:
        """Safely extract with fallback on any error."""
        try:
            return self._extract_structured(text, **kwargs)
        except Exception as e:
            logger.warning(f"{type(self).__name__} extraction failed: {e}, using fallback result")
            return self.extract_fallback(text, **kwargs)
