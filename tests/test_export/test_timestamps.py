"""Tests for export timestamp parsing."""

from datetime import datetime

from chat_insights.export.timestamps import looks_like_export_date, parse_timestamp


def test_parse_meta_format():
    assert parse_timestamp("May 19, 2023, 8:41 PM") == datetime(2023, 5, 19, 20, 41)
    assert parse_timestamp("Jan 01, 2024 9:00 am") == datetime(2024, 1, 1, 9, 0)


def test_parse_telegram_title_is_day_first():
    assert parse_timestamp("02.01.2024 09:05:30 UTC+03:00") == datetime(2024, 1, 2, 9, 5, 30)


def test_parse_keeps_wall_clock_for_aware_input():
    result = parse_timestamp("2024-01-01T09:00:00+02:00")
    assert result == datetime(2024, 1, 1, 9, 0)
    assert result.tzinfo is None


def test_parse_rejects_time_without_date():
    assert parse_timestamp("9:00 AM") is None
    assert parse_timestamp("09:00") is None


def test_parse_rejects_garbage():
    assert parse_timestamp("") is None
    assert parse_timestamp(None) is None
    assert parse_timestamp("garbage 2024 nonsense") is None
    assert parse_timestamp("31.02.2024 10:00:00") is None


def test_strict_export_date_check():
    assert looks_like_export_date("January 1, 2024, 9:00 AM")
    assert looks_like_export_date("Jan 12, 2024 10:30 pm")
    assert not looks_like_export_date("2024-01-01 09:00")
    assert not looks_like_export_date("Ann January 1, 2024, 9:00 AM")
