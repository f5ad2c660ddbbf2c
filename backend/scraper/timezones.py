"""Date and timezone normalization for extracted hackathon end dates.

Two steps run over an ``ExtractionRecord``:

1. An IANA zone name (anything containing ``/``) is replaced by its fixed
   ``UTC±HH:MM`` offset. The offset is resolved for the current instant, not
   for the event date, so DST state reflects today.
2. ``endDate`` is parsed into a reference instant anchored in UTC and shifted
   by exactly one offset source: a ``UTC±H[:MM]``/``GMT±H[:MM]`` timezone
   string, or, when no timezone was extracted at all, the US-Eastern DST rule.
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime, timedelta, timezone
from typing import Optional, Tuple

from dateutil import parser as date_parser
from dateutil import tz

from models.schemas import ExtractionRecord

logger = logging.getLogger(__name__)

TBD = "TBD"

_ISO_DATE_ONLY = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_TEXTUAL_DATE = re.compile(r"(\w+)\s+(\d{1,2}),?\s+(\d{4})")
_IANA_NAME = re.compile(r"^[A-Za-z][A-Za-z0-9_+\-]*(?:/[A-Za-z0-9_+\-]+)+$")
_UTC_OFFSET = re.compile(r"(?:utc|gmt)\s*([+-])\s*(\d{1,2})(?::?(\d{2}))?", re.IGNORECASE)

_MONTHS = {
    "january": 1,
    "february": 2,
    "march": 3,
    "april": 4,
    "may": 5,
    "june": 6,
    "july": 7,
    "august": 8,
    "september": 9,
    "october": 10,
    "november": 11,
    "december": 12,
}
_MONTH_ABBREVIATIONS = {name[:3]: number for name, number in _MONTHS.items()}
_MONTH_ABBREVIATIONS["sept"] = 9

EASTERN_DST_OFFSET_HOURS = 4
EASTERN_STANDARD_OFFSET_HOURS = 5


# ---------------------------------------------------------
# IANA zone -> fixed offset
# ---------------------------------------------------------

def format_utc_offset(offset: timedelta) -> str:
    """Render an offset as ``UTC+HH:MM`` / ``UTC-HH:MM``."""
    total_minutes = int(offset.total_seconds() // 60)
    sign = "+" if total_minutes >= 0 else "-"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"UTC{sign}{hours:02d}:{minutes:02d}"


def iana_to_utc_offset(zone_name: str, now: Optional[datetime] = None) -> str:
    """Resolve ``zone_name`` to its offset at ``now`` (defaults to the current instant).

    Only names backed by a zone file are accepted; gettz's POSIX-string and
    file-path interpretations raise ValueError like unknown names do.
    """
    name = zone_name.strip()
    if not _IANA_NAME.match(name) or ".." in name:
        raise ValueError(f"Not an IANA timezone name: {zone_name!r}")
    zone = tz.gettz(name)
    if not isinstance(zone, (tz.tzfile, tz.tzutc)):
        raise ValueError(f"Unknown timezone {zone_name!r}")
    moment = now or datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    offset = moment.astimezone(zone).utcoffset()
    if offset is None:
        raise ValueError(f"Timezone {zone_name!r} has no UTC offset")
    return format_utc_offset(offset)


def resolve_timezone(timezone_text: str, now: Optional[datetime] = None) -> str:
    """Replace an IANA zone name with its fixed offset; leave anything else untouched."""
    if not timezone_text or "/" not in timezone_text:
        return timezone_text
    try:
        resolved = iana_to_utc_offset(timezone_text, now=now)
    except Exception as e:
        logger.warning(f"Could not convert IANA timezone {timezone_text} to UTC offset: {e}")
        return timezone_text
    logger.info(f"Converting IANA timezone {timezone_text} to UTC offset: {resolved}")
    return resolved


# ---------------------------------------------------------
# US-Eastern DST rule
# ---------------------------------------------------------

def nth_sunday_of_month(year: int, month: int, n: int) -> date:
    first_day = date(year, month, 1)
    # weekday(): Monday == 0, Sunday == 6
    first_sunday = first_day + timedelta(days=(6 - first_day.weekday()) % 7)
    return first_sunday + timedelta(days=(n - 1) * 7)


def us_eastern_dst_window(year: int) -> Tuple[datetime, datetime]:
    """Naive local start/end of US-Eastern DST: 02:00 on the 2nd Sunday of March to 02:00 on the 1st Sunday of November."""
    start = datetime.combine(nth_sunday_of_month(year, 3, 2), datetime.min.time()).replace(hour=2)
    end = datetime.combine(nth_sunday_of_month(year, 11, 1), datetime.min.time()).replace(hour=2)
    return start, end


def is_us_eastern_dst(local_wall_time: datetime) -> bool:
    naive = local_wall_time.replace(tzinfo=None)
    start, end = us_eastern_dst_window(naive.year)
    return start <= naive < end


def us_eastern_offset_hours(local_wall_time: datetime) -> int:
    return EASTERN_DST_OFFSET_HOURS if is_us_eastern_dst(local_wall_time) else EASTERN_STANDARD_OFFSET_HOURS


# ---------------------------------------------------------
# End-date parsing
# ---------------------------------------------------------

def _end_of_day(value: datetime) -> datetime:
    return value.replace(hour=23, minute=59, second=59, microsecond=999000, tzinfo=timezone.utc)


def _month_number(name: str) -> Optional[int]:
    lowered = name.lower()
    return _MONTHS.get(lowered) or _MONTH_ABBREVIATIONS.get(lowered)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def has_time_component(date_text: str) -> bool:
    return not (_ISO_DATE_ONLY.match(date_text) or ":" not in date_text)


def parse_reference_instant(date_text: str) -> datetime:
    """Parse an extracted end date into a UTC-anchored reference instant.

    Dates without a time are pinned to 23:59:59.999 UTC on that calendar day.
    Raises ValueError (or OverflowError) when the text is not a date.
    """
    text = (date_text or "").strip()
    if not text:
        raise ValueError("Empty date string")

    if not has_time_component(text):
        match = _TEXTUAL_DATE.search(text)
        if match:
            month = _month_number(match.group(1))
            if month is not None:
                return datetime(
                    int(match.group(3)), month, int(match.group(2)), 23, 59, 59, 999000, tzinfo=timezone.utc
                )
        return _end_of_day(date_parser.parse(text))

    return _as_utc(date_parser.parse(text))


def parse_offset_hours(timezone_text: str) -> Optional[float]:
    """Signed fractional-hour offset from ``UTC±H[:MM]``/``GMT±H[:MM]`` text, else None."""
    match = _UTC_OFFSET.search(timezone_text or "")
    if not match:
        return None
    sign = 1 if match.group(1) == "+" else -1
    hours = int(match.group(2))
    minutes = int(match.group(3)) if match.group(3) else 0
    return sign * (hours + minutes / 60)


def convert_to_utc(date_text: str, timezone_text: str) -> datetime:
    """Interpret ``date_text`` as wall time in ``timezone_text`` and return the UTC instant.

    A timezone without a recognizable UTC/GMT offset applies no shift.
    """
    reference = parse_reference_instant(date_text)
    offset_hours = parse_offset_hours(timezone_text)
    if offset_hours is None:
        logger.info(f"Timezone {timezone_text!r} has no UTC offset, using reference time as UTC")
        offset_hours = 0.0
    return reference - timedelta(hours=offset_hours)


def convert_us_eastern_to_utc(date_text: str) -> datetime:
    """Interpret ``date_text`` as US-Eastern wall time using the manual DST rule."""
    reference = parse_reference_instant(date_text)
    return reference + timedelta(hours=us_eastern_offset_hours(reference))


def format_utc_instant(value: datetime) -> str:
    """ISO-8601 with millisecond precision and a ``Z`` suffix."""
    utc_value = value.astimezone(timezone.utc)
    return utc_value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc_value.microsecond // 1000:03d}Z"


def compute_end_datetime(end_date: str, timezone_text: str) -> Optional[str]:
    """Countdown instant for ``end_date``; None when it is TBD or cannot be parsed."""
    if not end_date or end_date.strip() == TBD:
        return None
    try:
        if timezone_text:
            instant = convert_to_utc(end_date, timezone_text)
        else:
            logger.info("No timezone extracted, falling back to US-Eastern time")
            instant = convert_us_eastern_to_utc(end_date)
        result = format_utc_instant(instant)
    except Exception as e:
        logger.warning(f"Could not parse end date {end_date!r}: {e}")
        return None
    logger.info(f"{end_date} ({timezone_text or 'US-Eastern fallback'}) converted to UTC: {result}")
    return result


def normalize_record(record: ExtractionRecord, now: Optional[datetime] = None) -> ExtractionRecord:
    """Resolve the record's timezone and attach ``endDateTime``; returns a new record."""
    resolved_timezone = resolve_timezone(record.timezone, now=now)
    end_date_time = compute_end_datetime(record.end_date, resolved_timezone)
    return record.model_copy(update={"timezone": resolved_timezone, "end_date_time": end_date_time})
