"""Try each extraction strategy in priority order until one finds messages."""

from __future__ import annotations

import logging
from typing import Callable

from bs4 import BeautifulSoup

from chat_insights.exceptions import FormatNotRecognizedError
from chat_insights.export.models import RawMessage
from chat_insights.export.strategies import (
    extract_meta_by_class,
    extract_meta_heuristic,
    extract_telegram,
)

logger = logging.getLogger(__name__)

META_CLASS_FORMAT = "Meta/Instagram Export (Class)"
META_HEURISTIC_FORMAT = "Meta/Instagram Export (Heuristic)"
TELEGRAM_FORMAT = "Telegram Export"

# The heuristic scan stays behind the class-anchored strategy: it trades
# precision for recall.
STRATEGIES: tuple[tuple[str, Callable[[BeautifulSoup], list[RawMessage]]], ...] = (
    (META_CLASS_FORMAT, extract_meta_by_class),
    (META_HEURISTIC_FORMAT, extract_meta_heuristic),
    (TELEGRAM_FORMAT, extract_telegram),
)


def extract_messages(soup: BeautifulSoup) -> tuple[list[RawMessage], str]:
    """Return the messages of the first strategy that finds any, and its label.

    Raises:
        FormatNotRecognizedError: every strategy came back empty.
    """
    for label, strategy in STRATEGIES:
        messages = strategy(soup)
        if messages:
            logger.info("Detected %s with %d messages", label, len(messages))
            return messages, label
        logger.debug("Strategy %s found no messages", label)

    raise FormatNotRecognizedError("No messages found or format unrecognized.")
