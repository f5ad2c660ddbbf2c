from __future__ import annotations

import pytest

from config.scraper_config import ICON_SELECTORS, USER_AGENTS, load_scraper_config
from services.scraper_service import ScraperService


def test_defaults_without_env(monkeypatch):
    for name in ("SCRAPER_TIMEOUT_SECONDS", "SCRAPER_MAX_PROMPT_CHARS", "SCRAPER_CONCURRENT_SUBPAGES"):
        monkeypatch.delenv(name, raising=False)
    config = load_scraper_config()
    assert config.request_timeout_seconds == 15.0
    assert config.max_prompt_chars == 15000
    assert config.concurrent_subpages is True
    assert config.min_section_chars == 100
    assert tuple(config.user_agents) == tuple(USER_AGENTS)
    assert tuple(config.icon_selectors) == tuple(ICON_SELECTORS)


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("SCRAPER_TIMEOUT_SECONDS", "3.5")
    monkeypatch.setenv("SCRAPER_MAX_PROMPT_CHARS", "500")
    monkeypatch.setenv("SCRAPER_CONCURRENT_SUBPAGES", "off")
    config = load_scraper_config()
    assert config.request_timeout_seconds == 3.5
    assert config.max_prompt_chars == 500
    assert config.concurrent_subpages is False


@pytest.mark.parametrize("name, raw", [("SCRAPER_TIMEOUT_SECONDS", "fifteen"), ("SCRAPER_MAX_PROMPT_CHARS", "-5")])
def test_invalid_overrides_fall_back_to_defaults(monkeypatch, name, raw):
    monkeypatch.setenv(name, raw)
    config = load_scraper_config()
    assert config.request_timeout_seconds == 15.0
    assert config.max_prompt_chars == 15000


def test_service_builds_with_malformed_env(monkeypatch):
    monkeypatch.setenv("SCRAPER_TIMEOUT_SECONDS", "abc")
    monkeypatch.setenv("SCRAPER_MAX_PROMPT_CHARS", "lots")
    service = ScraperService(generate=lambda prompt: "{}")
    assert service.config.request_timeout_seconds == 15.0
    assert service.config.max_prompt_chars == 15000
