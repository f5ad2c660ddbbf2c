from __future__ import annotations

import json
from typing import List

from config.scraper_config import DEFAULT_SCRAPER_CONFIG, ScraperConfig
from extractors.hackathon_extractor import HackathonExtractor, apply_field_defaults, fallback_record

URL = "https://ethindia.devfolio.co/overview"

FULL_RESPONSE = {
    "title": "ETHIndia 2024",
    "startDate": "December 6, 2024",
    "endDate": "December 8, 2024",
    "timezone": "UTC+5:30",
    "totalPrizePool": "$100,000",
    "tracks": [
        {
            "name": "Polygon",
            "totalPrize": "$10,000",
            "subTracks": [
                {
                    "name": "Best ZK App",
                    "description": "Build with zkEVM",
                    "prizes": {"first": "$5,000", "second": "$3,000", "third": "$2,000"},
                }
            ],
        }
    ],
    "prizes": [{"amount": "$20,000", "description": "Grand prize"}],
    "rules": ["Teams of up to 4"],
    "link": URL,
}


class RecordingModel:
    def __init__(self, response: str):
        self.response = response
        self.prompts: List[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.response


def test_extracts_full_record_from_fenced_response():
    model = RecordingModel("Sure! ```json\n" + json.dumps(FULL_RESPONSE) + "\n```")
    record = HackathonExtractor(generate=model).extract("page text", original_url=URL, platform="devfolio")

    assert record.title == "ETHIndia 2024"
    assert record.timezone == "UTC+5:30"
    assert record.total_prize_pool == "$100,000"
    assert record.tracks[0].sub_tracks[0].prizes.second == "$3,000"
    assert record.prizes[0].amount == "$20,000"
    assert record.rules == ["Teams of up to 4"]
    assert len(model.prompts) == 1


def test_prose_wrapped_and_bare_responses_match():
    bare = HackathonExtractor(generate=RecordingModel(json.dumps(FULL_RESPONSE))).extract(
        "text", original_url=URL, platform="devfolio"
    )
    wrapped = HackathonExtractor(
        generate=RecordingModel("Here you go:\n" + json.dumps(FULL_RESPONSE) + "\nHope this helps!")
    ).extract("text", original_url=URL, platform="devfolio")
    assert bare == wrapped


def test_prompt_embeds_truncated_content_and_platform_note():
    model = RecordingModel("{}")
    extractor = HackathonExtractor(generate=model, scraper_config=ScraperConfig(max_prompt_chars=50))
    extractor.extract("A" * 40 + "B" * 100, original_url=URL, platform="devfolio")

    prompt = model.prompts[0]
    assert "A" * 40 + "B" * 10 in prompt
    assert "B" * 11 not in prompt
    assert f"Original URL: {URL}" in prompt
    assert "Platform: devfolio" in prompt
    assert "IMPORTANT: This content includes MAIN PAGE, PRIZES PAGE, and SCHEDULE PAGE" in prompt
    assert "PREFER UTC OFFSETS" in prompt
    assert "Extract ALL available sponsor tracks" in prompt
    assert f'"link": "{URL}"' in prompt


def test_prompt_for_generic_platform_has_no_devfolio_note():
    model = RecordingModel("{}")
    HackathonExtractor(generate=model).extract("text", original_url="https://example.org", platform="generic")
    assert "IMPORTANT: This content includes MAIN PAGE" not in model.prompts[0]


def test_partial_response_is_defaulted_field_by_field():
    model = RecordingModel('{"title": "Partial Hack", "timezone": "GMT-8", "tracks": null}')
    record = HackathonExtractor(generate=model).extract("text", original_url=URL, platform="devfolio")

    assert record.title == "Partial Hack"
    assert record.timezone == "GMT-8"
    assert record.start_date == "TBD"
    assert record.end_date == "TBD"
    assert record.tracks == [] and record.prizes == [] and record.rules == []
    assert record.link == URL


def test_empty_object_gets_untitled_title():
    record = HackathonExtractor(generate=RecordingModel("{}")).extract("text", original_url=URL)
    assert record.title == "Untitled Hackathon"
    assert record.link == URL


def test_malformed_entries_are_dropped_not_fatal():
    payload = {
        "title": "Messy",
        "tracks": ["just a string", {"name": "AWS", "subTracks": "none", "totalPrize": 5000}],
        "prizes": [{"amount": 1000}, 42],
        "rules": ["No plagiarism", None, 7],
    }
    record = HackathonExtractor(generate=RecordingModel(json.dumps(payload))).extract("t", original_url=URL)

    assert [t.name for t in record.tracks] == ["AWS"]
    assert record.tracks[0].total_prize == "5000"
    assert record.tracks[0].sub_tracks == []
    assert record.prizes[0].amount == "1000" and record.prizes[0].description == ""
    assert record.rules == ["No plagiarism", "7"]


def test_invalid_json_returns_fallback():
    record = HackathonExtractor(generate=RecordingModel("{title: oops}")).extract("t", original_url=URL)
    assert record == fallback_record(URL)
    assert record.title == "Hackathon from ethindia.devfolio.co"


def test_response_without_json_returns_fallback():
    record = HackathonExtractor(generate=RecordingModel("I cannot help with that.")).extract("t", original_url=URL)
    assert record.title == "Hackathon from ethindia.devfolio.co"
    assert record.start_date == "TBD" and record.end_date == "TBD"


def test_model_error_returns_fallback():
    def failing_model(prompt: str) -> str:
        raise RuntimeError("quota exceeded")

    record = HackathonExtractor(generate=failing_model).extract("t", original_url=URL, platform="devfolio")
    assert record.title == "Hackathon from ethindia.devfolio.co"
    assert record.tracks == [] and record.prizes == [] and record.rules == []
    assert record.link == URL
    assert record.end_date_time is None


def test_apply_field_defaults_is_pure():
    data = {"title": "", "rules": ["r"]}
    result = apply_field_defaults(data, URL)
    assert data == {"title": "", "rules": ["r"]}
    assert result["title"] == "Untitled Hackathon"
    assert result["rules"] == ["r"]
    assert result["tracks"] == [] and result["link"] == URL


def test_extractor_config_is_the_scraper_config():
    custom = ScraperConfig(max_prompt_chars=10)
    assert HackathonExtractor(generate=RecordingModel("{}"), scraper_config=custom).config is custom
    assert HackathonExtractor(generate=RecordingModel("{}")).config is DEFAULT_SCRAPER_CONFIG
