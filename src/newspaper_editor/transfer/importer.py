"""Parsing of imported article JSON."""

import json
import logging
from pathlib import Path

from schemas.article import Article

from .exceptions import ImportFormatError
from .normalizer import normalize_articles

logger = logging.getLogger(__name__)


def parse_articles(text: str) -> list[Article]:
    """Parse JSON text into normalized articles.

    The root must be an array; its elements are normalized leniently.

    Args:
        text: Full JSON document

    Returns:
        Normalized articles in document order

    Raises:
        ImportFormatError: If the text is not JSON or the root is not an array
    """
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as e:
        raise ImportFormatError(f"Invalid JSON: {e}", errors=[e.msg]) from e

    if not isinstance(parsed, list):
        raise ImportFormatError("JSON root must be an array of articles.")

    return normalize_articles(parsed)


def read_articles(path: Path) -> list[Article]:
    """Read and parse an article JSON file.

    The whole file is read before parsing begins.

    Args:
        path: JSON file to import

    Returns:
        Normalized articles

    Raises:
        ImportFormatError: If the contents are not a JSON array
    """
    text = path.read_text(encoding="utf-8")
    logger.debug(f"Read {len(text)} characters from {path}")
    return parse_articles(text)
