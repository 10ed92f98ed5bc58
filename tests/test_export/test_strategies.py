"""Tests for the individual extraction strategies."""

from datetime import datetime

from bs4 import BeautifulSoup

from chat_insights.export.models import MessageKind
from chat_insights.export.strategies import (
    extract_meta_by_class,
    extract_meta_heuristic,
    extract_telegram,
)


def _meta_block(sender, when, body, extra=""):
    return (
        '<div class="pam _3-95 _2ph- _a6-g uiBoxWhite noborder">'
        f'<div class="_3-95 _2pim _a6-h _a6-i">{sender}</div>'
        f'<div class="_3-95 _a6-p"><div><div></div><div>{body}</div>{extra}</div></div>'
        f'<div class="_3-94 _a6-o">{when}</div>'
        "</div>"
    )


def _soup(*blocks):
    return BeautifulSoup("<html><body>" + "".join(blocks) + "</body></html>", "html.parser")


def test_meta_class_extracts_text_message():
    soup = _soup(_meta_block("Ann", "Jan 01, 2024 9:00 am", "Hello there"))
    messages = extract_meta_by_class(soup)
    assert len(messages) == 1
    msg = messages[0]
    assert msg.sender == "Ann"
    assert msg.timestamp == datetime(2024, 1, 1, 9, 0)
    assert msg.content == "Hello there"
    assert msg.kind is MessageKind.TEXT


def test_meta_class_classifies_attachment_and_reel():
    soup = _soup(
        _meta_block("Ann", "Jan 01, 2024 9:00 am", "Ann sent an attachment."),
        _meta_block(
            "Ben", "Jan 01, 2024 9:05 am", "Ben sent an attachment.",
            extra='<a href="https://www.instagram.com/reel/Cxyz/">reel</a>',
        ),
        _meta_block(
            "Ann", "Jan 01, 2024 9:06 am", "look",
            extra='<a href="https://www.instagram.com/reel/Cxyz/">reel</a>',
        ),
    )
    kinds = [m.kind for m in extract_meta_by_class(soup)]
    assert kinds == [MessageKind.ATTACHMENT, MessageKind.REEL, MessageKind.TEXT]


def test_meta_class_drops_invalid_sender_or_date():
    soup = _soup(
        _meta_block("Seen", "Jan 01, 2024 9:00 am", "x"),
        _meta_block("9:00 AM", "Jan 01, 2024 9:00 am", "x"),
        _meta_block("Ann", "yesterday", "x"),
        _meta_block("Ben", "Jan 01, 2024 9:10 am", "kept"),
    )
    messages = extract_meta_by_class(soup)
    assert [m.sender for m in messages] == ["Ben"]


def test_meta_class_content_falls_back_to_last_child():
    html = (
        '<div class="pam">'
        "<h3>Ann</h3>"
        '<div class="_3-94">Jan 02, 2024 10:00 pm</div>'
        "<div>fallback body</div>"
        "</div>"
    )
    messages = extract_meta_by_class(_soup(html))
    assert len(messages) == 1
    assert messages[0].content == "fallback body"
    assert messages[0].timestamp == datetime(2024, 1, 2, 22, 0)


def test_meta_class_returns_empty_without_markers():
    assert extract_meta_by_class(_soup("<div><p>nothing here</p></div>")) == []


def test_heuristic_header_row_layout():
    html = (
        "<div><div><div>Ann</div><div>January 1, 2024, 9:00 AM</div></div>"
        "<div>Hello</div></div>"
    )
    messages = extract_meta_heuristic(_soup(html))
    assert len(messages) == 1
    assert messages[0].sender == "Ann"
    assert messages[0].content == "Hello"
    assert messages[0].timestamp == datetime(2024, 1, 1, 9, 0)


def test_heuristic_sibling_layout():
    html = (
        "<div><div>Ben</div><div>January 1, 2024, 9:20 AM</div>"
        "<div>Ben sent an attachment.</div></div>"
    )
    messages = extract_meta_heuristic(_soup(html))
    assert len(messages) == 1
    assert messages[0].sender == "Ben"
    assert messages[0].kind is MessageKind.ATTACHMENT


def test_heuristic_takes_nearest_plausible_sibling():
    # Best effort: the nearest plausible text wins, even if it is content.
    html = "<div><div>Ann</div><div>hi</div><div>January 1, 2024, 9:00 AM</div></div>"
    messages = extract_meta_heuristic(_soup(html))
    assert [m.sender for m in messages] == ["hi"]


def test_heuristic_never_uses_a_date_as_sender():
    html = (
        "<div><div>January 1, 2024, 9:00 AM</div>"
        "<div>January 1, 2024, 9:05 AM</div><div>hi</div></div>"
    )
    assert extract_meta_heuristic(_soup(html)) == []


def test_heuristic_skips_dates_without_sender():
    html = "<div><div>12:00 PM</div><div>January 1, 2024, 9:00 AM</div></div>"
    assert extract_meta_heuristic(_soup(html)) == []


TELEGRAM_HTML = """
<div class="history">
 <div class="message service" id="message-1"><div class="body details">1 January 2024</div></div>
 <div class="message default clearfix" id="message1">
  <div class="body">
   <div class="pull_right date details" title="01.01.2024 09:00:00 UTC+03:00">09:00</div>
   <div class="from_name">Ann</div>
   <div class="text">Hello \U0001F600</div>
  </div>
 </div>
 <div class="message default clearfix joined" id="message2">
  <div class="body">
   <div class="pull_right date details" title="01.01.2024 09:05:00 UTC+03:00">09:05</div>
   <div class="text">Still me</div>
  </div>
 </div>
 <div class="message default clearfix" id="message3">
  <div class="body">
   <div class="pull_right date details" title="01.01.2024 09:20:00 UTC+03:00">09:20</div>
   <div class="from_name">Ben</div>
   <div class="media_wrap clearfix"><a class="photo_wrap" href="photos/p.jpg"><img class="photo" src="photos/p_thumb.jpg"/></a></div>
  </div>
 </div>
 <div class="message default clearfix" id="message4">
  <div class="body">
   <div class="pull_right date details">02.01.2024 07:30:00</div>
   <div class="from_name">Ann</div>
   <div class="media_wrap clearfix"><div class="video">clip</div></div>
  </div>
 </div>
</div>
"""


def test_telegram_extracts_messages():
    messages = extract_telegram(BeautifulSoup(TELEGRAM_HTML, "html.parser"))
    assert [m.sender for m in messages] == ["Ann", "Ann", "Ben", "Ann"]
    assert messages[0].content == "Hello \U0001F600"
    assert messages[0].timestamp == datetime(2024, 1, 1, 9, 0)
    assert messages[1].content == "Still me"
    assert messages[2].kind is MessageKind.ATTACHMENT
    assert messages[2].content == ""
    assert messages[3].kind is MessageKind.REEL
    assert messages[3].timestamp == datetime(2024, 1, 2, 7, 30)


def test_telegram_joined_without_previous_sender_is_dropped():
    html = (
        '<div class="message default joined"><div class="body">'
        '<div class="date" title="01.01.2024 09:00:00">09:00</div>'
        '<div class="text">orphan</div></div></div>'
    )
    assert extract_telegram(BeautifulSoup(html, "html.parser")) == []
