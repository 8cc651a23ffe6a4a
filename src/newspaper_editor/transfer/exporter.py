"""Export projection for article collections.

The same projection feeds the live preview, the clipboard, and the
downloaded file, so all three produce identical text for the same
collection and plain-text flag.
"""

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from newspaper_editor.content.filters import strip_markup as strip_markup_filter
from newspaper_editor.options import EXPORT_FILENAME
from schemas.article import Article

logger = logging.getLogger(__name__)


def project(articles: Iterable[Article], strip_markup: bool = False) -> list[dict]:
    """Project articles into exportable plain objects.

    Args:
        articles: Articles to export; left unmodified
        strip_markup: Replace each body with its plain text

    Returns:
        One dict per article, keyed by wire name
    """
    projected = []
    for article in articles:
        data = article.model_dump(by_alias=True)
        if strip_markup:
            data["content"] = strip_markup_filter(article.content)
        projected.append(data)
    return projected


def to_json(articles: Iterable[Article], strip_markup: bool = False) -> str:
    """Serialize the export projection as indented JSON text."""
    return json.dumps(project(articles, strip_markup), indent=2, ensure_ascii=False)


def write_export(
    articles: Iterable[Article],
    directory: Path,
    strip_markup: bool = False,
    filename: str = EXPORT_FILENAME,
) -> Path:
    """Write the export projection to a JSON file.

    Args:
        articles: Articles to export
        directory: Directory to write into (created if missing)
        strip_markup: Replace each body with its plain text
        filename: Output file name

    Returns:
        Path to the written file
    """
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / filename
    path.write_bytes(to_json(articles, strip_markup).encode("utf-8"))
    logger.info(f"Exported articles to {path}")
    return path
