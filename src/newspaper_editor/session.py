"""Editor session: the boundary a user interface talks to.

The session wraps an ArticleStore with the view state an editing screen
keeps (search term, category filter, plain-text export flag) and turns
import and export into single calls that produce user-facing messages.
"""

import logging
from pathlib import Path

from newspaper_editor.collection import ArticleStore, get_example_articles
from newspaper_editor.diagnostics import format_results, run_self_checks
from newspaper_editor.options import ALL_CATEGORIES
from newspaper_editor.transfer import (
    ImportFormatError,
    parse_articles,
    read_articles,
    to_json,
    write_export,
)
from schemas.article import Article

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for an editor front end."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


class EditorSession:
    """View state and import/export boundary around an ArticleStore.

    Example:
        session = EditorSession()
        session.load_example()
        session.search = "debate"
        titles = [a.title for a in session.visible_articles()]
        session.download(Path("./out"))

    Attributes:
        store: The article store
        search: Current search term
        category_filter: Category to show, or ALL_CATEGORIES
        export_plain_text: Strip markup from bodies on export
    """

    def __init__(self, store: ArticleStore | None = None, export_plain_text: bool = False):
        self.store = store or ArticleStore()
        self.search = ""
        self.category_filter = ALL_CATEGORIES
        self.export_plain_text = export_plain_text

    def visible_articles(self) -> list[Article]:
        return self.store.filter(self.search, self.category_filter)

    def preview(self) -> str:
        """JSON text of the current export projection."""
        return to_json(self.store.articles, self.export_plain_text)

    def copy_text(self) -> str:
        """Text to place on the clipboard; identical to the preview."""
        return self.preview()

    def download(self, directory: Path) -> Path:
        """Write the export file into a directory."""
        return write_export(self.store.articles, directory, self.export_plain_text)

    def import_text(self, text: str) -> str:
        """Replace the collection with articles parsed from JSON text.

        On failure the collection and selection are left untouched.

        Returns:
            Message for the user describing the outcome
        """
        try:
            articles = parse_articles(text)
        except ImportFormatError as e:
            logger.error(f"Import failed: {e.message}")
            return f"Import failed: {e.message}"

        self.store.replace_all(articles)
        logger.info(f"Imported {len(articles)} article(s)")
        return f"Imported {len(articles)} article(s)."

    def import_file(self, path: Path) -> str:
        """Replace the collection with articles from a JSON file.

        The file is read completely before anything changes. File system
        errors propagate to the caller.
        """
        try:
            articles = read_articles(path)
        except ImportFormatError as e:
            logger.error(f"Import of {path} failed: {e.message}")
            return f"Import failed: {e.message}"

        self.store.replace_all(articles)
        logger.info(f"Imported {len(articles)} article(s) from {path}")
        return f"Imported {len(articles)} article(s)."

    def load_example(self) -> None:
        """Replace the collection with the sample newspaper."""
        self.store.replace_all(get_example_articles())
        logger.info("Loaded example articles")

    def run_self_checks(self) -> str:
        """Run the built-in checks and return a printable summary."""
        results = run_self_checks()
        failed = [r.name for r in results if not r.passed]
        if failed:
            logger.warning(f"Self checks failed: {', '.join(failed)}")
        return format_results(results)
