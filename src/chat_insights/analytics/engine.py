"""Single-pass temporal analytics over a chronologically sorted message list."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date, datetime
from types import MappingProxyType

from chat_insights.analytics.models import SenderStat
from chat_insights.analytics.text import accumulate_words, extract_emoji
from chat_insights.export.models import MessageKind, RawMessage

# A reply after more than six hours of silence starts a new conversation.
DEFAULT_INITIATION_GAP_MINUTES = 360


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


@dataclass
class SenderAccumulator:
    """Running totals for one sender during a single analytics pass."""

    name: str
    count: int = 0
    reel_count: int = 0
    attachment_count: int = 0
    total_length: int = 0
    reply_gaps: list[float] = field(default_factory=list)
    consecutive: int = 0
    max_consecutive: int = 0
    word_counts: dict[str, int] = field(default_factory=dict)
    emojis: dict[str, int] = field(default_factory=dict)
    initiated: int = 0
    late_night: int = 0
    morning: int = 0
    afternoon: int = 0
    evening: int = 0

    def add(self, msg: RawMessage) -> None:
        self.count += 1
        if msg.kind is MessageKind.REEL:
            self.reel_count += 1
        elif msg.kind is MessageKind.ATTACHMENT:
            self.attachment_count += 1
        self.total_length += len(msg.content)

        accumulate_words(msg.content, self.word_counts)
        for glyph in extract_emoji(msg.content):
            self.emojis[glyph] = self.emojis.get(glyph, 0) + 1

        hour = msg.timestamp.hour
        if hour < 4:
            self.late_night += 1
        elif hour < 12:
            self.morning += 1
        elif hour < 20:
            self.afternoon += 1
        else:
            self.evening += 1

    def start_streak(self) -> None:
        self.consecutive = 1
        self.max_consecutive = max(self.max_consecutive, 1)

    def extend_streak(self) -> None:
        self.consecutive += 1
        if self.consecutive > self.max_consecutive:
            self.max_consecutive = self.consecutive

    def to_stat(self, color: str) -> SenderStat:
        gaps = self.reply_gaps
        avg_reply = sum(gaps) / len(gaps) if gaps else 0.0
        fastest = min(gaps) * 60 if gaps else 0.0
        slowest = max(gaps) if gaps else 0.0
        return SenderStat(
            name=self.name,
            count=self.count,
            color=color,
            word_counts=MappingProxyType(dict(self.word_counts)),
            reel_count=self.reel_count,
            attachment_count=self.attachment_count,
            avg_message_length=round_half_up(self.total_length / self.count) if self.count else 0,
            avg_reply_time_minutes=round_half_up(avg_reply),
            fastest_reply_seconds=round_half_up(fastest),
            slowest_reply_minutes=round_half_up(slowest),
            longest_streak_messages=self.max_consecutive,
            emojis=MappingProxyType(dict(self.emojis)),
            initiated_conversations=self.initiated,
            late_night_messages=self.late_night,
            morning_messages=self.morning,
            afternoon_messages=self.afternoon,
            evening_messages=self.evening,
            reply_gaps_minutes=tuple(gaps),
        )


@dataclass
class ConversationStats:
    """Everything one pass produces, before ranking and packaging."""

    total_messages: int
    senders: dict[str, SenderAccumulator]  # first-seen order
    hourly: list[int]
    timeline: dict[str, int]
    months: dict[str, int]
    first_message: datetime | None
    last_message: datetime | None
    active_days: list[date]
    longest_day_streak: int
    longest_gap_days: int
    busiest_day: tuple[str, int]
    busiest_month: str
    active_days_pct: int


def compute_statistics(
    messages: list[RawMessage],
    initiation_gap_minutes: float = DEFAULT_INITIATION_GAP_MINUTES,
) -> ConversationStats:
    """Run the analytics pass over ``messages`` (sorted oldest first)."""
    senders: dict[str, SenderAccumulator] = {}
    hourly = [0] * 24
    timeline: dict[str, int] = {}
    months: dict[str, int] = {}
    previous: RawMessage | None = None

    for msg in messages:
        sender = senders.get(msg.sender)
        if sender is None:
            sender = senders[msg.sender] = SenderAccumulator(name=msg.sender)

        sender.add(msg)
        hourly[msg.timestamp.hour] += 1
        day_key = msg.timestamp.strftime("%Y-%m-%d")
        month_key = msg.timestamp.strftime("%Y-%m")
        timeline[day_key] = timeline.get(day_key, 0) + 1
        months[month_key] = months.get(month_key, 0) + 1

        if previous is None:
            sender.initiated += 1
            sender.start_streak()
        elif previous.sender != msg.sender:
            gap = (msg.timestamp - previous.timestamp).total_seconds() / 60
            sender.reply_gaps.append(gap)
            if gap > initiation_gap_minutes:
                sender.initiated += 1
            senders[previous.sender].consecutive = 0
            sender.start_streak()
        else:
            sender.extend_streak()
        previous = msg

    active_days = sorted(date.fromisoformat(key) for key in timeline)
    first = messages[0].timestamp if messages else None
    last = messages[-1].timestamp if messages else None

    return ConversationStats(
        total_messages=len(messages),
        senders=senders,
        hourly=hourly,
        timeline=timeline,
        months=months,
        first_message=first,
        last_message=last,
        active_days=active_days,
        longest_day_streak=longest_day_streak(active_days),
        longest_gap_days=longest_gap_days(active_days),
        busiest_day=_busiest(timeline),
        busiest_month=_busiest(months)[0],
        active_days_pct=active_days_pct(len(active_days), first, last),
    )


def longest_day_streak(days: list[date]) -> int:
    """Longest run of consecutive calendar days in sorted ``days``."""
    if not days:
        return 0
    best = current = 1
    for prev, curr in zip(days, days[1:]):
        if (curr - prev).days == 1:
            current += 1
        else:
            current = 1
        best = max(best, current)
    return best


def longest_gap_days(days: list[date]) -> int:
    return max(((curr - prev).days for prev, curr in zip(days, days[1:])), default=0)


def active_days_pct(active_days: int, first: datetime | None, last: datetime | None) -> int:
    """Share of the first-to-last span that had messages, 0 for a zero span."""
    if first is None or last is None or active_days < 2:
        return 0
    span_days = (last - first).total_seconds() / 86400
    if span_days <= 0:
        return 0
    return min(100, round_half_up(100 * active_days / span_days))


def _busiest(counts: dict[str, int]) -> tuple[str, int]:
    # Strict comparison keeps the first key on ties.
    best_key, best_count = "", 0
    for key, count in counts.items():
        if count > best_count:
            best_key, best_count = key, count
    return best_key, best_count
