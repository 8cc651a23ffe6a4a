"""Strict shape check for article records."""

from collections.abc import Mapping
from typing import Any

from schemas.article import ARTICLE_FIELDS, Article

REQUIRED_KEYS = tuple(ARTICLE_FIELDS.values())


def is_valid_article_shape(candidate: Any) -> bool:
    """Check that a candidate has the full article shape.

    Every wire key must be present, ``id`` must be a number and ``title``
    a string. Nothing is coerced; this is for conformance checks, not for
    repairing input (see normalize_articles).

    Args:
        candidate: A mapping with wire keys, or an Article

    Returns:
        True if the candidate conforms
    """
    if isinstance(candidate, Article):
        candidate = candidate.model_dump(by_alias=True)
    if not isinstance(candidate, Mapping):
        return False
    if not all(key in candidate for key in REQUIRED_KEYS):
        return False
    article_id = candidate["id"]
    if isinstance(article_id, bool) or not isinstance(article_id, (int, float)):
        return False
    return isinstance(candidate["title"], str)
