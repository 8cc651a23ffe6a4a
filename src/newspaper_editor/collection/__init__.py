"""Article collection store and sample data."""

from .examples import get_example_articles
from .store import ArticleStore

__all__ = ["ArticleStore", "get_example_articles"]
