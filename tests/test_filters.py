"""Tests for date and markup filters."""

from datetime import date, datetime

import pytest

from newspaper_editor.content.filters import format_pretty_date, strip_markup, today_pretty


class TestFormatPrettyDate:
    """Tests for format_pretty_date."""

    def test_date(self):
        """Dates are formatted without a leading zero on the day."""
        assert format_pretty_date(date(2025, 10, 5)) == "Oct 5, 2025"

    def test_datetime(self):
        """Datetimes drop the time part."""
        assert format_pretty_date(datetime(2025, 10, 25, 14, 30)) == "Oct 25, 2025"

    @pytest.mark.parametrize(
        "text",
        ["2025-10-25", "2025-10-25 06:51:50", "2025-10-25T06:51:50", "Oct 25, 2025", "October 25, 2025"],
    )
    def test_string_inputs(self, text):
        """Common date strings are parsed and reformatted."""
        assert format_pretty_date(text) == "Oct 25, 2025"

    @pytest.mark.parametrize("text", ["", "not a date", "2025-13-40"])
    def test_invalid_string(self, text):
        """Unparseable input yields empty text instead of raising."""
        assert format_pretty_date(text) == ""

    def test_non_date_value(self):
        """Values that are not dates yield empty text."""
        assert format_pretty_date(42) == ""

    def test_today(self):
        """today_pretty formats the current date."""
        assert today_pretty() == format_pretty_date(date.today())


class TestStripMarkup:
    """Tests for strip_markup."""

    def test_paragraph_with_nbsp(self):
        """Tags are removed and &nbsp; becomes a plain space."""
        assert strip_markup("<p>Hello&nbsp;world</p>") == "Hello world"

    def test_entities_decoded(self):
        """HTML entities are decoded."""
        assert strip_markup("<p>Fish &amp; chips</p>") == "Fish & chips"

    def test_nested_tags(self):
        """Text inside nested inline markup is kept."""
        assert strip_markup("<p>A <strong>bold</strong> move</p>") == "A bold move"

    def test_plain_text(self):
        """Text without markup is unchanged."""
        assert strip_markup("Just words") == "Just words"

    def test_literal_nbsp(self):
        """Non-breaking space characters become plain spaces."""
        assert strip_markup("a\u00a0b") == "a b"

    def test_empty(self):
        """Empty content stays empty."""
        assert strip_markup("") == ""
