"""Data models for the export module."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class MessageKind(str, Enum):
    TEXT = "text"
    ATTACHMENT = "attachment"
    REEL = "reel"


@dataclass(frozen=True)
class RawMessage:
    """One message recovered from an export document."""

    sender: str
    timestamp: datetime  # naive, wall-clock time as written in the export
    content: str
    kind: MessageKind = MessageKind.TEXT
