"""Text filters for article dates and body markup."""

import html
import re
from datetime import date, datetime

import lxml.html
from lxml import etree

# Accepted string inputs for format_pretty_date, tried in order
DATE_INPUT_FORMATS = [
    "%Y-%m-%d",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%dT%H:%M:%S",
    "%b %d, %Y",
    "%B %d, %Y",
    "%m/%d/%Y",
]


def format_pretty_date(value: date | datetime | str) -> str:
    """Format a date as a short display string.

    Args:
        value: A date, datetime, or date string in one of DATE_INPUT_FORMATS

    Returns:
        Formatted date like "Oct 5, 2025", or "" if the input is not a date

    Examples:
        >>> format_pretty_date(date(2025, 10, 5))
        'Oct 5, 2025'
        >>> format_pretty_date("not a date")
        ''
    """
    if isinstance(value, str):
        parsed = _parse_date(value.strip())
        if parsed is None:
            return ""
        value = parsed
    if not isinstance(value, date):
        return ""
    return f"{value:%b} {value.day}, {value.year}"


def today_pretty() -> str:
    """Today's date in display format."""
    return format_pretty_date(date.today())


def _parse_date(text: str) -> date | None:
    if not text:
        return None
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    for fmt in DATE_INPUT_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def strip_markup(content: str) -> str:
    """Reduce rich-text markup to its plain text.

    Tags are dropped, entities decoded, and non-breaking spaces turned into
    ordinary spaces.

    Args:
        content: Article body, possibly containing HTML

    Returns:
        Plain text equivalent of the body

    Examples:
        >>> strip_markup("<p>Hello&nbsp;world</p>")
        'Hello world'
    """
    if not content:
        return ""
    try:
        fragment = lxml.html.fragment_fromstring(content, create_parent="div")
        text = str(fragment.text_content())
    except etree.ParserError:
        # lxml refuses whole-document input such as a bare <html> wrapper
        text = html.unescape(re.sub(r"<[^>]+>", "", content))
    return text.replace("\u00a0", " ")
