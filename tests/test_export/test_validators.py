"""Tests for the sender name validator."""

import pytest

from chat_insights.export.validators import MAX_SENDER_LENGTH, is_plausible_sender_name


@pytest.mark.parametrize("name", ["Ann", "Ben Carter", "  Zoë  ", "you", "DJ 2000"])
def test_accepts_names(name):
    assert is_plausible_sender_name(name) is True


@pytest.mark.parametrize("text", [
    None,
    "",
    "   ",
    "9:41",
    "12:05 PM",
    "PM",
    "am",
    "Jan 5, 2024",
    "May 19 2023, 8:41 PM",
    "January 1, 2024, 9:00 AM",
    "September 3, 2023",
    "JAN 5, 2024",
    "Sept. 3, 2023",
    "1/2/24",
    "12/31/2023 10:00",
])
def test_rejects_timestamps_and_blanks(text):
    assert is_plausible_sender_name(text) is False


@pytest.mark.parametrize("label", [
    "Seen", "reacted", "Missed video call", "sent an attachment.", "ADMIN", "Video chat",
])
def test_rejects_ui_labels(label):
    assert is_plausible_sender_name(label) is False


def test_rejects_attachment_phrase_anywhere():
    assert is_plausible_sender_name("Ann Sent An Attachment to the group") is False


def test_length_cap():
    assert is_plausible_sender_name("x" * MAX_SENDER_LENGTH) is True
    assert is_plausible_sender_name("x" * (MAX_SENDER_LENGTH + 1)) is False
