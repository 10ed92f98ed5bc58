"""Public result models for one analyzed chat export."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Mapping


@dataclass(frozen=True)
class SenderStat:
    """Per-sender statistics, ranked and coloured for display."""

    name: str
    count: int
    color: str
    word_counts: Mapping[str, int]
    reel_count: int
    attachment_count: int
    avg_message_length: int
    avg_reply_time_minutes: int  # how fast this sender replies to others
    fastest_reply_seconds: int
    slowest_reply_minutes: int
    longest_streak_messages: int
    emojis: Mapping[str, int]
    initiated_conversations: int
    late_night_messages: int  # 00:00 - 04:00
    morning_messages: int  # 04:00 - 12:00
    afternoon_messages: int  # 12:00 - 20:00
    evening_messages: int  # 20:00 - 24:00
    reply_gaps_minutes: tuple[float, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "count": self.count,
            "color": self.color,
            "wordCounts": dict(self.word_counts),
            "reelCount": self.reel_count,
            "attachmentCount": self.attachment_count,
            "avgMessageLength": self.avg_message_length,
            "avgReplyTimeMinutes": self.avg_reply_time_minutes,
            "fastestReplySeconds": self.fastest_reply_seconds,
            "slowestReplyMinutes": self.slowest_reply_minutes,
            "longestStreakMessages": self.longest_streak_messages,
            "emojis": dict(self.emojis),
            "initiatedConversations": self.initiated_conversations,
            "lateNightMessages": self.late_night_messages,
            "morningMessages": self.morning_messages,
            "afternoonMessages": self.afternoon_messages,
            "eveningMessages": self.evening_messages,
            "replyGapsMinutes": list(self.reply_gaps_minutes),
        }


@dataclass(frozen=True)
class BusiestDay:
    date: str  # "YYYY-MM-DD", empty when there were no messages
    count: int


@dataclass(frozen=True)
class ResultMetadata:
    detected_format: str
    raw_node_count: int
    parsed_at: datetime | None = None
    other_attributes: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))


@dataclass(frozen=True)
class ChatAnalysisResult:
    """Analytics for one export document. Built once, never mutated.

    Mapping fields are read-only views.
    """

    file_name: str
    total_messages: int
    senders: tuple[SenderStat, ...]
    hourly_stats: Mapping[str, int]  # "0" .. "23"
    timeline_stats: Mapping[str, int]  # "YYYY-MM-DD"
    total_days: int
    first_message_date: datetime | None
    last_message_date: datetime | None
    longest_gap_days: int
    longest_day_streak: int
    active_days_pct: int
    busiest_day: BusiestDay
    busiest_month: str  # "YYYY-MM"
    metadata: ResultMetadata

    def sender(self, name: str) -> SenderStat | None:
        for stat in self.senders:
            if stat.name == name:
                return stat
        return None

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready mapping in the shape the dashboard consumes."""
        return {
            "fileName": self.file_name,
            "totalMessages": self.total_messages,
            "senders": [s.to_dict() for s in self.senders],
            "hourlyStats": dict(self.hourly_stats),
            "timelineStats": dict(self.timeline_stats),
            "totalDays": self.total_days,
            "firstMessageDate": _iso(self.first_message_date),
            "lastMessageDate": _iso(self.last_message_date),
            "longestGapDays": self.longest_gap_days,
            "longestDayStreak": self.longest_day_streak,
            "activeDaysPct": self.active_days_pct,
            "busiestDay": {"date": self.busiest_day.date, "count": self.busiest_day.count},
            "busiestMonth": self.busiest_month,
            "metadata": {
                "parsedAt": _iso(self.metadata.parsed_at),
                "rawNodeCount": self.metadata.raw_node_count,
                "detectedFormat": self.metadata.detected_format,
                "otherAttributes": dict(self.metadata.other_attributes),
            },
        }


@dataclass(frozen=True)
class ParseFailure:
    """A file that could not be analyzed in a batch."""

    file_name: str
    error: str


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None
