"""Shape a finished analytics pass into the public result."""

from __future__ import annotations

from datetime import datetime
from types import MappingProxyType
from typing import Any, Mapping, Sequence

from chat_insights.analytics.engine import ConversationStats
from chat_insights.analytics.models import BusiestDay, ChatAnalysisResult, ResultMetadata

COLORS = (
    "#4F46E5", "#EC4899", "#10B981", "#F59E0B",
    "#6366F1", "#8B5CF6", "#EF4444", "#3B82F6",
)


def assemble_result(
    stats: ConversationStats,
    file_name: str,
    detected_format: str,
    raw_node_count: int,
    palette: Sequence[str] = COLORS,
    parsed_at: datetime | None = None,
    other_attributes: Mapping[str, Any] | None = None,
) -> ChatAnalysisResult:
    """Rank senders by message count and package everything.

    Ties keep first-seen order. Colours cycle through ``palette`` by rank.
    """
    ranked = sorted(stats.senders.values(), key=lambda s: -s.count)
    senders = tuple(
        acc.to_stat(palette[rank % len(palette)])
        for rank, acc in enumerate(ranked)
    )

    day, day_count = stats.busiest_day
    return ChatAnalysisResult(
        file_name=file_name,
        total_messages=stats.total_messages,
        senders=senders,
        hourly_stats=MappingProxyType({str(hour): n for hour, n in enumerate(stats.hourly)}),
        timeline_stats=MappingProxyType(dict(stats.timeline)),
        total_days=len(stats.active_days),
        first_message_date=stats.first_message,
        last_message_date=stats.last_message,
        longest_gap_days=stats.longest_gap_days,
        longest_day_streak=stats.longest_day_streak,
        active_days_pct=stats.active_days_pct,
        busiest_day=BusiestDay(date=day, count=day_count),
        busiest_month=stats.busiest_month,
        metadata=ResultMetadata(
            detected_format=detected_format,
            raw_node_count=raw_node_count,
            parsed_at=parsed_at,
            other_attributes=MappingProxyType(dict(other_attributes or {})),
        ),
    )
