"""Per-sender and global analytics for parsed chat messages."""

from chat_insights.analytics.assembler import COLORS, assemble_result
from chat_insights.analytics.engine import ConversationStats, compute_statistics
from chat_insights.analytics.models import (
    BusiestDay,
    ChatAnalysisResult,
    ParseFailure,
    ResultMetadata,
    SenderStat,
)
from chat_insights.analytics.text import STOP_WORDS, accumulate_words, extract_emoji

__all__ = [
    "COLORS",
    "assemble_result",
    "ConversationStats",
    "compute_statistics",
    "BusiestDay",
    "ChatAnalysisResult",
    "ParseFailure",
    "ResultMetadata",
    "SenderStat",
    "STOP_WORDS",
    "accumulate_words",
    "extract_emoji",
]
