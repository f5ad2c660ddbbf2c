"""Hackathon platform detection and URL canonicalization."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Tuple
from urllib.parse import urlparse

logger = logging.getLogger(__name__)


class Platform(str, Enum):
    DEVFOLIO = "devfolio"
    DEVPOST = "devpost"
    MLH = "mlh"
    HACKATHON = "hackathon"
    GENERIC = "generic"


@dataclass(frozen=True)
class PlatformProfile:
    platform: Platform
    host_marker: str = ""
    # Event details are split across main/prizes/schedule pages
    multi_page: bool = False

    @property
    def name(self) -> str:
        return self.platform.value


# Order matters: first hostname match wins
PLATFORM_PROFILES: Tuple[PlatformProfile, ...] = (
    PlatformProfile(Platform.DEVFOLIO, "devfolio.co", multi_page=True),
    PlatformProfile(Platform.DEVPOST, "devpost.com"),
    PlatformProfile(Platform.MLH, "mlh.io"),
    PlatformProfile(Platform.HACKATHON, "hackathon.com"),
)

GENERIC_PROFILE = PlatformProfile(Platform.GENERIC)


def _hostname(url: str) -> str:
    try:
        return (urlparse(url).hostname or "").lower()
    except ValueError:
        return ""


def detect_platform(url: str) -> PlatformProfile:
    """Classify ``url`` by hostname; unknown hosts map to the generic profile."""
    hostname = _hostname(url)
    if hostname:
        for profile in PLATFORM_PROFILES:
            if profile.host_marker in hostname:
                return profile
    return GENERIC_PROFILE


def canonicalize_url(url: str, profile: PlatformProfile) -> str:
    """Normalize ``url`` for fetching.

    Multi-page platforms keep the path (minus one trailing slash) so sub-page
    suffixes can be appended; every other platform is reduced to scheme and host.
    """
    try:
        parsed = urlparse(url)
        hostname = parsed.hostname
    except ValueError:
        return url
    if not parsed.scheme or not hostname:
        return url

    if profile.multi_page:
        path = parsed.path
        if path.endswith("/") and len(path) > 1:
            path = path[:-1]
        if path == "/":
            path = ""
        return f"{parsed.scheme}://{hostname}{path}"
    return f"{parsed.scheme}://{hostname}"


def join_subpage(base_url: str, suffix: str) -> str:
    """Append ``suffix`` to ``base_url`` without doubling the slash."""
    base = base_url[:-1] if base_url.endswith("/") else base_url
    return f"{base}{suffix}"
