"""Message extraction from exported chat-log HTML (Meta/Instagram, Telegram)."""

from chat_insights.export.cascade import STRATEGIES, extract_messages
from chat_insights.export.models import MessageKind, RawMessage
from chat_insights.export.timestamps import parse_timestamp
from chat_insights.export.validators import is_plausible_sender_name

__all__ = [
    "STRATEGIES",
    "extract_messages",
    "MessageKind",
    "RawMessage",
    "parse_timestamp",
    "is_plausible_sender_name",
]
