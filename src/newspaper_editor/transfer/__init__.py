"""Import, export, and validation of article collections."""

from .exceptions import EditorError, ImportFormatError, UnknownFieldError
from .exporter import project, to_json, write_export
from .importer import parse_articles, read_articles
from .normalizer import FIELD_RULES, normalize_article, normalize_articles
from .validator import is_valid_article_shape

__all__ = [
    "EditorError",
    "ImportFormatError",
    "UnknownFieldError",
    "FIELD_RULES",
    "is_valid_article_shape",
    "normalize_article",
    "normalize_articles",
    "parse_articles",
    "project",
    "read_articles",
    "to_json",
    "write_export",
]
