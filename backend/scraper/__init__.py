"""Hackathon page acquisition and date normalization."""

from .platforms import Platform, PlatformProfile, canonicalize_url, detect_platform
from .fetcher import PageFetcher
from .orchestrator import MultiPageOrchestrator, combine_sections
from .timezones import compute_end_datetime, normalize_record

__all__ = [
    "Platform",
    "PlatformProfile",
    "canonicalize_url",
    "detect_platform",
    "PageFetcher",
    "MultiPageOrchestrator",
    "combine_sections",
    "compute_end_datetime",
    "normalize_record",
]
