"""Format-specific message extraction strategies.

Each strategy takes a parsed document tree and returns the messages it could
recover, possibly none. Strategies never raise for unrecognized markup; the
cascade decides what an empty result means.
"""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from chat_insights.export.models import MessageKind, RawMessage
from chat_insights.export.timestamps import looks_like_export_date, parse_timestamp
from chat_insights.export.validators import is_plausible_sender_name

# Meta/Instagram class markers. Meta renames these between export versions.
META_CONTAINER_SELECTOR = ".pam, ._3-96, ._a6-g"
META_HEADER_SELECTOR = "h2, h3, h4, ._2lem, ._27_v, ._a6-h"
META_TIME_SELECTOR = "._3-94, ._a6-o, ._a72d"
META_CONTENT_SELECTOR = "div._a6-p, div.message, div._3-96, div._2let"

_ATTACHMENT_PHRASES = ("sent an attachment", "sent a photo")
_REEL_LINK_MARKERS = ("instagram.com/reel", "/reel/")

# The heuristic scan only considers short nodes.
_MAX_DATE_NODE_LENGTH = 50

TELEGRAM_CONTAINER_SELECTOR = ".message"


def _text(node: Tag | None) -> str:
    if node is None:
        return ""
    return " ".join(node.get_text(" ").split())


def _contains(ancestor: Tag, node: Tag | None) -> bool:
    # Tag.__eq__ compares markup, so identity checks are needed here.
    if node is None:
        return False
    if node is ancestor:
        return True
    return any(parent is ancestor for parent in node.parents)


def _meta_content_node(container: Tag, header: Tag | None, time_node: Tag | None) -> Tag | None:
    content = container.select_one(META_CONTENT_SELECTOR)
    if content is not None and not _contains(content, header):
        return content

    children = [
        child for child in container.children
        if isinstance(child, Tag) and child is not header and child is not time_node
    ]
    if children and not _contains(children[-1], header):
        return children[-1]
    return None


def _meta_kind(container: Tag, content: str) -> MessageKind:
    lowered = content.lower()
    if not any(phrase in lowered for phrase in _ATTACHMENT_PHRASES):
        return MessageKind.TEXT
    for link in container.find_all("a", href=True):
        href = link["href"]
        if any(marker in href for marker in _REEL_LINK_MARKERS):
            return MessageKind.REEL
    return MessageKind.ATTACHMENT


def extract_meta_by_class(soup: BeautifulSoup) -> list[RawMessage]:
    """Meta/Instagram exports that still carry the known structural classes."""
    messages: list[RawMessage] = []
    for container in soup.select(META_CONTAINER_SELECTOR):
        header = container.select_one(META_HEADER_SELECTOR)
        name = _text(header)
        if not is_plausible_sender_name(name):
            continue

        time_node = container.select_one(META_TIME_SELECTOR)
        timestamp = parse_timestamp(_text(time_node))
        if timestamp is None:
            continue

        content = _text(_meta_content_node(container, header, time_node))
        if not content:
            divs = container.find_all("div")
            if divs:
                content = _text(divs[-1])

        messages.append(RawMessage(
            sender=name,
            timestamp=timestamp,
            content=content,
            kind=_meta_kind(container, content),
        ))
    return messages


def _nearby_sender(date_node: Tag) -> str:
    for prev in date_node.find_previous_siblings():
        text = _text(prev)
        if is_plausible_sender_name(text):
            return text

    parent = date_node.parent
    if parent is not None:
        parent_prev = parent.find_previous_sibling()
        if parent_prev is not None:
            text = _text(parent_prev)
            if is_plausible_sender_name(text):
                return text
    return ""


def _nearby_content(date_node: Tag) -> str:
    following = date_node.find_next_sibling()
    if following is not None:
        return _text(following)
    parent = date_node.parent
    if parent is not None:
        return _text(parent.find_next_sibling())
    return ""


def extract_meta_heuristic(soup: BeautifulSoup) -> list[RawMessage]:
    """Find export-style date strings anywhere and look around them.

    Handles two layouts: sender, date and content as siblings, or a header
    row holding sender and date followed by a content sibling. Trades
    precision for recall; unusual layouts can be misattributed.
    """
    messages: list[RawMessage] = []
    for div in soup.find_all("div"):
        text = _text(div)
        if not text or len(text) >= _MAX_DATE_NODE_LENGTH:
            continue
        if not looks_like_export_date(text):
            continue
        timestamp = parse_timestamp(text)
        if timestamp is None:
            continue

        sender = _nearby_sender(div)
        if not sender:
            continue

        content = _nearby_content(div)
        kind = MessageKind.TEXT
        if "sent an attachment" in content.lower():
            kind = MessageKind.ATTACHMENT
        messages.append(RawMessage(sender=sender, timestamp=timestamp, content=content, kind=kind))
    return messages


def extract_telegram(soup: BeautifulSoup) -> list[RawMessage]:
    """Telegram Desktop HTML exports.

    Telegram drops the name block on follow-up messages from the same author
    and marks them ``joined``; those inherit the previous sender.
    """
    messages: list[RawMessage] = []
    last_sender = ""
    for container in soup.select(TELEGRAM_CONTAINER_SELECTOR):
        name_node = container.select_one(".from_name")
        if name_node is not None:
            name = _text(name_node)
        elif "joined" in (container.get("class") or []):
            name = last_sender
        else:
            continue
        if not is_plausible_sender_name(name):
            continue

        date_node = container.select_one(".date")
        date_text = ""
        if date_node is not None:
            date_text = date_node.get("title") or _text(date_node)
        timestamp = parse_timestamp(date_text)
        if timestamp is None:
            continue

        kind = MessageKind.TEXT
        if container.select_one(".photo") is not None:
            kind = MessageKind.ATTACHMENT
        if container.select_one(".video") is not None:
            kind = MessageKind.REEL

        last_sender = name
        messages.append(RawMessage(
            sender=name,
            timestamp=timestamp,
            content=_text(container.select_one(".text")),
            kind=kind,
        ))
    return messages
