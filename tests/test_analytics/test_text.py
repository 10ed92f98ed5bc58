"""Tests for word and emoji counting."""

from chat_insights.analytics.text import STOP_WORDS, accumulate_words, extract_emoji


def test_accumulate_words_filters_and_counts():
    counts = {}
    accumulate_words("Hello, hello WORLD! the a I sent pm", counts)
    assert counts == {"hello": 2, "world": 1}


def test_accumulate_words_adds_to_existing_mapping():
    counts = {"pizza": 3}
    accumulate_words("pizza tonight? PIZZA!", counts)
    assert counts == {"pizza": 5, "tonight": 1}


def test_accumulate_words_strips_punctuation_inside_tokens():
    counts = {}
    accumulate_words("don't stop-it", counts)
    assert counts == {"dont": 1, "stopit": 1}


def test_stop_words_include_export_noise():
    assert {"attachment", "sent", "pm", "am"} <= STOP_WORDS


def test_extract_emoji_keeps_repeats():
    assert list(extract_emoji("hi \U0001F600\U0001F600 ok \U0001F389")) == [
        "\U0001F600", "\U0001F600", "\U0001F389",
    ]


def test_extract_emoji_is_single_use():
    glyphs = extract_emoji("\U0001F525")
    assert list(glyphs) == ["\U0001F525"]
    assert list(glyphs) == []


def test_extract_emoji_plain_text():
    assert list(extract_emoji("no emoji here: 123 #")) == []
