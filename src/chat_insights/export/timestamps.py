"""Parse the timestamp strings found in chat export markup."""

from __future__ import annotations

import re
from datetime import datetime

import dateutil.parser as parser

# Fills components the text leaves out, so parsing never reads the clock.
_DEFAULT = datetime(1970, 1, 1)

_YEAR = re.compile(r"(?<!\d)\d{4}(?!\d)")

# Telegram title attribute: "01.02.2024 09:05:00 UTC+03:00" (day first).
_TELEGRAM_TITLE = re.compile(
    r"^(\d{2})\.(\d{2})\.(\d{4}) (\d{2}):(\d{2})(?::(\d{2}))?(?: UTC[+-]\d{2}:?\d{2})?$"
)

# Meta/Instagram export: "May 19, 2023, 8:41 PM".
EXPORT_DATE_PATTERN = re.compile(
    r"^(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)[a-z]*\s\d{1,2},\s\d{4},?\s\d{1,2}:\d{2}\s(?:AM|PM)$",
    re.IGNORECASE,
)


def parse_timestamp(text: str | None) -> datetime | None:
    """Parse an export timestamp; returns None when it is not a full date.

    Timezone information is dropped and the wall-clock value kept, since the
    analytics bucket messages by the hour the participants saw.
    """
    if not text:
        return None
    t = " ".join(text.split())
    if not t or not _YEAR.search(t):
        return None

    m = _TELEGRAM_TITLE.match(t)
    if m:
        day, month, year, hour, minute, second = m.groups()
        try:
            return datetime(
                int(year), int(month), int(day),
                int(hour), int(minute), int(second or 0),
            )
        except ValueError:
            return None

    try:
        parsed = parser.parse(t, default=_DEFAULT)
    except (ValueError, OverflowError):
        return None
    return parsed.replace(tzinfo=None)


def looks_like_export_date(text: str) -> bool:
    """Strict check for the Meta export date/time string."""
    return bool(EXPORT_DATE_PATTERN.match(text))
