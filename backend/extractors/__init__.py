"""Extractors package for structured information extraction."""

from .base_extractor import BaseExtractor
from .hackathon_extractor import HackathonExtractor

__all__ = ["BaseExtractor", "HackathonExtractor"]
