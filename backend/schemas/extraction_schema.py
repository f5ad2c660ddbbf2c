"""Target JSON layout the model is asked to fill for a hackathon listing."""

import json
from typing import Any, Dict

REQUIRED_FIELD_DEFAULTS: Dict[str, Any] = {
    "title": "Untitled Hackathon",
    "startDate": "TBD",
    "endDate": "TBD",
    "tracks": [],
    "prizes": [],
    "rules": [],
}

# Values are descriptions for the model, not defaults
HACKATHON_EXTRACTION_SCHEMA: Dict[str, Any] = {
    "title": "Hackathon Name",
    "startDate": "YYYY-MM-DD or date string",
    "endDate": "YYYY-MM-DD or date string",
    "timezone": "Timezone (e.g., EST, PST, IST, UTC+5:30, America/New_York)",
    "totalPrizePool": "Total prize pool amount (e.g., $239,500)",
    "tracks": [
        {
            "name": "Company/Sponsor Name (e.g., ElizaOS)",
            "totalPrize": "Total prize pool for this sponsor",
            "subTracks": [
                {
                    "name": "Track name (e.g., DeFi & Web3 Agents)",
                    "description": "Detailed description of what they're looking for",
                    "prizes": {
                        "first": "1st place prize amount",
                        "second": "2nd place prize amount",
                        "third": "3rd place prize amount",
                    },
                }
            ],
        }
    ],
    "prizes": [
        {
            "amount": "Main Prize Amount",
            "description": "Main Prize Description",
        }
    ],
    "rules": ["Rule 1", "Rule 2"],
    "link": "",
}


def render_schema(link: str) -> str:
    """Schema as indented JSON with the listing URL filled into ``link``."""
    schema = dict(HACKATHON_EXTRACTION_SCHEMA)
    schema["link"] = link
    return json.dumps(schema, indent=2, ensure_ascii=False)
