"""Word and emoji counting over message text."""

from __future__ import annotations

import re
from typing import Iterator, MutableMapping

import regex

STOP_WORDS = frozenset({
    "the", "be", "to", "of", "and", "a", "in", "that", "have", "i", "it", "for",
    "not", "on", "with", "he", "as", "you", "do", "at", "this", "but", "his",
    "by", "from", "they", "we", "say", "her", "she", "or", "an", "will", "my",
    "one", "all", "would", "there", "their", "what", "so", "up", "out", "if",
    "about", "who", "get", "which", "go", "me", "when", "make", "can", "like",
    "time", "no", "just", "him", "know", "take", "people", "into", "year",
    "your", "good", "some", "could", "them", "see", "other", "than", "then",
    "now", "look", "only", "come", "its", "over", "think", "also", "back",
    "after", "use", "two", "how", "our", "work", "first", "well", "way", "even",
    "new", "want", "because", "any", "these", "give", "day", "most", "us", "is",
    "are", "was", "were", "had", "has",
    # export noise
    "sent", "attachment", "message", "chat", "pm", "am", "om",
    "ok", "okay", "lol", "yeah", "yes",
})

_NON_WORD = re.compile(r"[^\w\s]")

# stdlib re has no Unicode property classes.
_EMOJI = regex.compile(r"\p{Emoji_Presentation}")


def accumulate_words(text: str, into: MutableMapping[str, int]) -> None:
    """Count non-stop-word tokens of ``text`` into ``into``."""
    for word in _NON_WORD.sub("", text.lower()).split():
        if len(word) > 1 and word not in STOP_WORDS:
            into[word] = into.get(word, 0) + 1


def extract_emoji(text: str) -> Iterator[str]:
    """Yield every emoji glyph in ``text``, repeats included."""
    for match in _EMOJI.finditer(text):
        yield match.group()
