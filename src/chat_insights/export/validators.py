"""Tell a sender's display name apart from timestamps and UI labels."""

from __future__ import annotations

import re

MAX_SENDER_LENGTH = 80

_CLOCK_TIME = re.compile(r"^\d{1,2}:\d{2}")
_MERIDIEM = re.compile(r"^(AM|PM)$", re.IGNORECASE)
_LONG_DATE = re.compile(
    r"^(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)[a-z]*\.?\s\d{1,2},?\s\d{4}",
    re.IGNORECASE,
)
_SLASH_DATE = re.compile(r"^\d{1,2}/\d{1,2}/\d{2,4}")

_UI_LABELS = frozenset({
    "sent", "seen", "liked", "reacted", "reply", "replied",
    "message", "chat", "conversation", "participants",
    "search", "loading", "active", "now", "edited",
    "unsent", "forwarded", "admin",
    "you sent an attachment.", "sent an attachment.",
    "attachment", "video chat", "audio call",
    "missed voice call", "missed video call",
})


def is_plausible_sender_name(text: str | None) -> bool:
    """Return True if ``text`` could be a sender's display name.

    Conservative: a real name that happens to look like a date is rejected,
    but a timestamp or UI label is never accepted.
    """
    if not text:
        return False
    t = text.strip()
    if not t or len(t) > MAX_SENDER_LENGTH:
        return False
    if _CLOCK_TIME.match(t) or _MERIDIEM.match(t):
        return False
    if _LONG_DATE.match(t) or _SLASH_DATE.match(t):
        return False

    lowered = t.lower()
    if lowered in _UI_LABELS:
        return False
    if "sent an attachment" in lowered:
        return False
    return True
