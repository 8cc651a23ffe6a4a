"""Schema definitions for the newspaper editor."""

from .article import ARTICLE_FIELDS, Article, InlineImage
from .check import CheckResult

__all__ = [
    "ARTICLE_FIELDS",
    "Article",
    "CheckResult",
    "InlineImage",
]
