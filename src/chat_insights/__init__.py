"""Behavioral analytics for exported chat logs.

Usage:
    from chat_insights import analyze_document
    result = analyze_document(html_text, "message_1.html")
"""

from chat_insights.analyzer import ChatAnalyzer, analyze_document
from chat_insights.analytics.models import (
    BusiestDay,
    ChatAnalysisResult,
    ParseFailure,
    ResultMetadata,
    SenderStat,
)
from chat_insights.exceptions import (
    ChatInsightsError,
    ChatParseError,
    EmptyInputError,
    ExportReadError,
    FormatNotRecognizedError,
    MalformedDocumentError,
)

__all__ = [
    "ChatAnalyzer",
    "analyze_document",
    "BusiestDay",
    "ChatAnalysisResult",
    "ParseFailure",
    "ResultMetadata",
    "SenderStat",
    "ChatInsightsError",
    "ChatParseError",
    "EmptyInputError",
    "ExportReadError",
    "FormatNotRecognizedError",
    "MalformedDocumentError",
]
