"""Lenient normalization of imported article data.

Imported JSON comes from hand edits, older exports, and other tools, so
any field may be missing or mistyped. Each wire field has a coercion rule
in FIELD_RULES; a rule always produces a usable value, falling back to a
default, so normalization never fails and never reports what it repaired.
"""

import logging
import math
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from newspaper_editor.content.filters import today_pretty
from newspaper_editor.options import (
    ACCENT_OPTIONS,
    BORDER_OPTIONS,
    CATEGORY_OPTIONS,
    NORMALIZED_TITLE,
)
from schemas.article import Article

logger = logging.getLogger(__name__)

Rule = Callable[[Mapping, int], Any]


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _truthy(value: Any) -> bool:
    """JavaScript truthiness: empty containers count as true, NaN as false."""
    if isinstance(value, (list, dict, tuple)):
        return True
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)


def _text(value: Any, default: str) -> str:
    if isinstance(value, str):
        return value
    if _is_number(value):
        return str(value)
    return default


def _text_rule(key: str, default: Callable[[], str]) -> Rule:
    def rule(item: Mapping, position: int) -> str:
        value = item.get(key)
        if value is None:
            return default()
        return _text(value, default())

    return rule


def _id_rule(item: Mapping, position: int) -> int:
    value = item.get("id")
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    return position + 1


def _featured_rule(item: Mapping, position: int) -> bool:
    return _truthy(item.get("isFeatured"))


def _inline_image(raw: Any) -> dict:
    if not isinstance(raw, Mapping):
        raw = {}
    return {
        "url": _text(raw.get("url"), ""),
        "caption": _text(raw.get("caption"), ""),
    }


def _inline_images_rule(item: Mapping, position: int) -> list[dict]:
    value = item.get("inlineImages")
    if not isinstance(value, (list, tuple)):
        return []
    return [_inline_image(image) for image in value]


def _content_rule(item: Mapping, position: int) -> str:
    value = item.get("content")
    return value if isinstance(value, str) else ""


def _const(value: str) -> Callable[[], str]:
    return lambda: value


FIELD_RULES: dict[str, Rule] = {
    "id": _id_rule,
    "isFeatured": _featured_rule,
    "category": _text_rule("category", _const(CATEGORY_OPTIONS[0])),
    "title": _text_rule("title", _const(NORMALIZED_TITLE)),
    "author": _text_rule("author", _const("")),
    "date": _text_rule("date", today_pretty),
    "summary": _text_rule("summary", _const("")),
    "image": _text_rule("image", _const("")),
    "accentColorClass": _text_rule("accentColorClass", _const(ACCENT_OPTIONS[0])),
    "borderColorClass": _text_rule("borderColorClass", _const(BORDER_OPTIONS[0])),
    "inlineImages": _inline_images_rule,
    "content": _content_rule,
}


def normalize_article(item: Any, position: int) -> Article:
    """Coerce one loosely-typed record into an Article.

    Args:
        item: Raw decoded JSON value; non-objects are treated as empty
        position: 0-based position of the record in its sequence

    Returns:
        A complete Article
    """
    if not isinstance(item, Mapping):
        item = {}
    data = {key: rule(item, position) for key, rule in FIELD_RULES.items()}
    return Article.model_validate(data)


def normalize_articles(raw: Iterable[Any]) -> list[Article]:
    """Coerce a sequence of loosely-typed records into Articles.

    Output has one article per input element, in input order. Ids are
    kept as given, so duplicates in the input remain duplicates.

    Args:
        raw: Decoded JSON array (or any iterable of records)

    Returns:
        List of Articles
    """
    articles = [normalize_article(item, i) for i, item in enumerate(raw)]
    logger.debug(f"Normalized {len(articles)} article(s)")
    return articles
