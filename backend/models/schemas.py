from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    if isinstance(value, str):
        return value
    return str(value)


def _dict_items(value: Any) -> List[Dict[str, Any]]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class PageContent(BaseModel):
    text: str = ""
    icon_url: str = ""

    @classmethod
    def empty(cls) -> "PageContent":
        return cls()


class SubTrackPrizes(_CamelModel):
    first: str = ""
    second: str = ""
    third: str = ""

    @field_validator("first", "second", "third", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return _as_text(value)


class SubTrack(_CamelModel):
    name: str = ""
    description: str = ""
    prizes: SubTrackPrizes = Field(default_factory=SubTrackPrizes)

    @field_validator("name", "description", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return _as_text(value)

    @field_validator("prizes", mode="before")
    @classmethod
    def _coerce_prizes(cls, value: Any) -> Any:
        return value if isinstance(value, dict) else {}


class Track(_CamelModel):
    name: str = ""
    total_prize: str = Field(default="", alias="totalPrize")
    sub_tracks: List[SubTrack] = Field(default_factory=list, alias="subTracks")

    @field_validator("name", "total_prize", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return _as_text(value)

    @field_validator("sub_tracks", mode="before")
    @classmethod
    def _coerce_sub_tracks(cls, value: Any) -> List[Dict[str, Any]]:
        return _dict_items(value)


class Prize(_CamelModel):
    amount: str = ""
    description: str = ""

    @field_validator("amount", "description", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return _as_text(value)


class ExtractionRecord(_CamelModel):
    """Structured hackathon metadata produced by the scraping pipeline.

    Required text/list fields always hold a value: lenient validators turn
    ``None`` into the field default and drop malformed list entries, so a
    partially filled model response still yields a usable record.
    """

    title: str = ""
    start_date: str = Field(default="TBD", alias="startDate")
    end_date: str = Field(default="TBD", alias="endDate")
    timezone: str = ""
    total_prize_pool: str = Field(default="", alias="totalPrizePool")
    tracks: List[Track] = Field(default_factory=list)
    prizes: List[Prize] = Field(default_factory=list)
    rules: List[str] = Field(default_factory=list)
    link: str = ""
    icon: str = ""
    end_date_time: Optional[str] = Field(default=None, alias="endDateTime")

    @field_validator("title", "timezone", "total_prize_pool", "link", "icon", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return _as_text(value)

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _coerce_date(cls, value: Any) -> str:
        text = _as_text(value).strip()
        return text or "TBD"

    @field_validator("tracks", "prizes", mode="before")
    @classmethod
    def _coerce_items(cls, value: Any) -> List[Dict[str, Any]]:
        return _dict_items(value)

    @field_validator("rules", mode="before")
    @classmethod
    def _coerce_rules(cls, value: Any) -> List[str]:
        if not isinstance(value, list):
            return []
        return [_as_text(rule) for rule in value if rule is not None]

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict for the persistence layer, camelCase keys."""
        data = self.model_dump(by_alias=True)
        if data.get("endDateTime") is None:
            data.pop("endDateTime", None)
        return data
