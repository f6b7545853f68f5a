from datetime import datetime, timedelta, timezone

from eduscan.common.datetime_utils import parse_iso_datetime


def test_javascript_iso_string_is_accepted():
    value = parse_iso_datetime("2026-02-02T08:15:00.000Z")
    assert value == datetime(2026, 2, 2, 8, 15, tzinfo=timezone.utc)


def test_offset_and_naive_forms_are_unchanged():
    assert parse_iso_datetime("2026-02-02T08:15:00") == datetime(2026, 2, 2, 8, 15)
    assert parse_iso_datetime("2026-02-02T08:15:00+07:00").utcoffset() == timedelta(hours=7)
