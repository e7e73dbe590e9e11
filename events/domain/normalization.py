"""Event normalization: slug derivation, date/time canonicalization and
required-field checks.

Every function here is pure. ``normalize_event`` is the single entry point the
service layer calls before any event write; it either returns the fields to
store or raises a ``DomainError`` subclass describing the first problem found.
"""

import re
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from dateutil import parser as date_parser

from events.domain.errors import (
    InvalidDateError,
    InvalidTimeError,
    RequiredFieldError,
    SlugDerivationError,
)
from events.domain.models import Event, EventFields

REQUIRED_STRING_FIELDS: tuple[str, ...] = (
    "title",
    "description",
    "overview",
    "image",
    "venue",
    "location",
    "date",
    "time",
    "mode",
    "audience",
    "organizer",
)
REQUIRED_LIST_FIELDS: tuple[str, ...] = ("agenda", "tags")

_APOSTROPHES = re.compile(r"['’]")
_DISALLOWED = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")

_TIME_24H = re.compile(r"([0-9]{1,2}):([0-9]{1,2})")
_TIME_12H = re.compile(r"([0-9]{1,2}):([0-9]{2})\s*([AaPp][Mm])")

# Parsing twice with different fills exposes date parts missing from the input.
_DATE_FILL_A = datetime(2000, 1, 1)
_DATE_FILL_B = datetime(2001, 2, 2)


def slugify(title: str) -> str:
    """Derive a lowercase, URL-safe slug from an event title.

    Raises:
        SlugDerivationError: If nothing URL-safe is left of the title.
    """
    base = title.strip().lower()
    base = _APOSTROPHES.sub("", base)
    base = _DISALLOWED.sub("", base)
    base = _WHITESPACE.sub("-", base)
    base = _HYPHENS.sub("-", base)
    slug = base.strip("-")
    if not slug:
        raise SlugDerivationError(title)
    return slug


def normalize_date(value: str) -> str:
    """Return ``value`` as an ISO calendar date (YYYY-MM-DD).

    The input must name a year, month and day; dateutil would otherwise fill
    the gaps from today. Timezone-aware inputs are converted to UTC first.

    Raises:
        InvalidDateError: If the value is not a complete, recognizable date.
    """
    raw = value.strip()
    try:
        parsed = date_parser.parse(raw, default=_DATE_FILL_A)
        if parsed.date() != date_parser.parse(raw, default=_DATE_FILL_B).date():
            raise InvalidDateError(value)
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError) as exc:
        raise InvalidDateError(value) from exc
    return parsed.date().isoformat()


def normalize_time(value: str) -> str:
    """Return ``value`` as a zero-padded 24-hour HH:mm string.

    Accepts ``H:mm``/``HH:mm`` (24-hour) and ``H:mm AM/PM`` (12-hour).

    Raises:
        InvalidTimeError: On an unknown format or out-of-range hour/minute.
    """
    raw = value.strip()

    match = _TIME_24H.fullmatch(raw)
    if match:
        hour, minute = int(match.group(1)), int(match.group(2))
        if not (0 <= hour <= 23 and 0 <= minute <= 59):
            raise InvalidTimeError(
                value,
                "Invalid time value. 24-hour times need an hour of 0-23 "
                "and a minute of 0-59.",
            )
        return f"{hour:02d}:{minute:02d}"

    match = _TIME_12H.fullmatch(raw)
    if match:
        hour, minute = int(match.group(1)), int(match.group(2))
        meridiem = match.group(3).lower()
        if not (1 <= hour <= 12 and 0 <= minute <= 59):
            raise InvalidTimeError(
                value,
                "Invalid time value. AM/PM times need an hour of 1-12 "
                "and a minute of 0-59.",
            )
        if meridiem == "pm" and hour != 12:
            hour += 12
        elif meridiem == "am" and hour == 12:
            hour = 0
        return f"{hour:02d}:{minute:02d}"

    raise InvalidTimeError(
        value, "Invalid time format. Expected HH:mm or h:mm AM/PM."
    )


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def validate_required_fields(data: Mapping[str, Any]) -> None:
    """Check that every required scalar is a non-blank string and every
    required list is a non-empty list of non-blank strings.

    Raises:
        RequiredFieldError: For the first offending field.
    """
    for field in REQUIRED_STRING_FIELDS:
        if _is_blank(data.get(field)):
            raise RequiredFieldError(field, f"Event {field} is required.")

    for field in REQUIRED_LIST_FIELDS:
        items = data.get(field)
        if not isinstance(items, (list, tuple)) or not items:
            raise RequiredFieldError(field, f"Event {field} {_verb(field)} required.")
        if any(_is_blank(item) for item in items):
            raise RequiredFieldError(
                field, f"Event {field} must not contain blank entries."
            )


def _verb(field: str) -> str:
    return "are" if field.endswith("s") else "is"


def normalize_event(data: Mapping[str, Any], current: Event | None = None) -> EventFields:
    """Validate and canonicalize event input.

    ``data`` may be partial when ``current`` is given; missing keys fall back
    to the stored values. The slug is derived only for new events, when the
    trimmed title changed, or when the stored slug is empty.
    """
    merged: dict[str, Any] = {}
    if current is not None:
        merged.update(
            {field: getattr(current, field) for field in REQUIRED_STRING_FIELDS}
        )
        merged.update({field: list(getattr(current, field)) for field in REQUIRED_LIST_FIELDS})
    merged.update(
        {
            key: value
            for key, value in data.items()
            if key in REQUIRED_STRING_FIELDS or key in REQUIRED_LIST_FIELDS
        }
    )

    validate_required_fields(merged)

    scalars = {field: merged[field].strip() for field in REQUIRED_STRING_FIELDS}
    lists = {
        field: tuple(item.strip() for item in merged[field])
        for field in REQUIRED_LIST_FIELDS
    }

    title = scalars["title"]
    if current is None or not current.slug or title != current.title:
        slug = slugify(title)
    else:
        slug = current.slug

    scalars["date"] = normalize_date(scalars["date"])
    scalars["time"] = normalize_time(scalars["time"])

    return EventFields(slug=slug, **scalars, **lists)
