from __future__ import annotations

from schemas.extraction_schema import render_schema
from utils.text import truncate


HACKATHON_EXTRACTION_INTRO = (
    "You are an expert at analyzing hackathon websites and extracting structured information.\n\n"
    "Please analyze the following scraped content from a hackathon website and extract the key "
    "information into a JSON object."
)


DEVFOLIO_SECTIONS_NOTE = """IMPORTANT: This content includes MAIN PAGE, PRIZES PAGE, and SCHEDULE PAGE from Devfolio.
- The PRIZES PAGE section contains detailed sponsor track information with specific challenge categories and prize breakdowns.
- The SCHEDULE PAGE section contains timezone information and event timing details.
Pay special attention to both sections for extracting sponsor tracks, subtracks, and timezone information."""


HACKATHON_EXTRACTION_GUIDELINES = """Important guidelines:
- Extract the TOTAL PRIZE POOL prominently displayed on the page (e.g., "$239,500" from main header/banner)
- Extract TIMEZONE information from the schedule page - PREFER UTC OFFSETS (UTC+5:30, GMT-8, +05:30) over timezone names when possible
- Look for phrases like "All times are in EST", "Schedule (IST)", "Times shown in PST", "UTC-8", "GMT+5:30", etc.
- If only timezone names are available (EST, PST, IST), extract those, but UTC offsets are preferred for accuracy
- For Devfolio hackathons, look carefully at the PRIZES PAGE section for detailed sponsor information
- Each track should represent a COMPANY/SPONSOR (e.g., ElizaOS, AWS, Google, etc.)
- Each sponsor track should have multiple subTracks which are the actual challenge categories
- Each subTrack MUST have its own specific description and prize breakdown (1st, 2nd, 3rd place amounts)
- Extract ALL available sponsor tracks and their subtracks - don't limit to just a few
- If dates are not found, use "TBD"
- If timezone is not found, leave it as empty string ""
- Main hackathon prizes (not sponsor-specific) should go in the "prizes" array
- Ensure all dates are in a readable format
- Extract only factual information, do not make assumptions
- Return ONLY the JSON object, no additional text
- The totalPrizePool should be the overall prize amount shown on the main page"""


def build_hackathon_extraction_prompt(content: str, original_url: str, platform: str, max_chars: int) -> str:
    parts = [
        HACKATHON_EXTRACTION_INTRO,
        f"Original URL: {original_url}\nPlatform: {platform}",
        f"Scraped Content:\n{truncate(content, max_chars)}",
    ]
    if platform == "devfolio":
        parts.append(DEVFOLIO_SECTIONS_NOTE)
    parts.append(
        "Please extract and return ONLY a valid JSON object with the following structure:\n\n"
        + render_schema(original_url)
    )
    parts.append(HACKATHON_EXTRACTION_GUIDELINES)
    parts.append("JSON Response:")
    return "\n\n".join(parts)
