"""Ordered, copy-on-write store of newspaper articles."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from newspaper_editor.content.filters import today_pretty
from newspaper_editor.content.tokens import insert_token
from newspaper_editor.options import (
    ACCENT_OPTIONS,
    ALL_CATEGORIES,
    BORDER_OPTIONS,
    CATEGORY_OPTIONS,
    COPY_SUFFIX,
    DEFAULT_TITLE,
)
from newspaper_editor.transfer.exceptions import UnknownFieldError
from schemas.article import ARTICLE_FIELDS, Article, InlineImage

logger = logging.getLogger(__name__)

# Accepts both attribute names and wire keys
_FIELD_NAMES = {
    **{name: name for name in ARTICLE_FIELDS},
    **{alias: name for name, alias in ARTICLE_FIELDS.items()},
}

_SEARCHED_FIELDS = ("title", "author", "summary", "category")


class ArticleStore:
    """Owns the ordered article collection and the current selection.

    Every mutation builds a new tuple and installs it in one assignment,
    so readers always see a complete snapshot. Operations that change
    nothing return the existing tuple unchanged, which lets callers detect
    changes with an identity check.

    The selection is an article id, not an index, since positions shift
    as articles move.

    Config keys:
        category_options: Categories offered for new articles
        accent_options: Accent colour classes
        border_options: Border colour classes
    """

    def __init__(self, articles: Iterable[Article] = (), config: dict | None = None):
        self._config = config or {}
        self._articles: tuple[Article, ...] = tuple(articles)
        self._selected_id: int | None = None

    @property
    def category_options(self) -> list[str]:
        return list(self._config.get("category_options", CATEGORY_OPTIONS))

    @property
    def accent_options(self) -> list[str]:
        return list(self._config.get("accent_options", ACCENT_OPTIONS))

    @property
    def border_options(self) -> list[str]:
        return list(self._config.get("border_options", BORDER_OPTIONS))

    @property
    def articles(self) -> tuple[Article, ...]:
        return self._articles

    @property
    def selected_id(self) -> int | None:
        return self._selected_id

    @property
    def selected(self) -> Article | None:
        """The selected article, looked up by id in the current snapshot."""
        if self._selected_id is None:
            return None
        return self.get(self._selected_id)

    def __len__(self) -> int:
        return len(self._articles)

    def get(self, article_id: int) -> Article | None:
        index = self._index_of(article_id)
        return None if index == -1 else self._articles[index]

    def _index_of(self, article_id: int | None) -> int:
        for i, article in enumerate(self._articles):
            if article.id == article_id:
                return i
        return -1

    def next_id(self) -> int:
        """Next free id: one more than the largest id, or 1 when empty."""
        if not self._articles:
            return 1
        return max(article.id for article in self._articles) + 1

    def select(self, article_id: int | None) -> None:
        self._selected_id = article_id

    def add(self) -> tuple[Article, ...]:
        """Append a blank article with default options and select it."""
        article = Article(
            id=self.next_id(),
            is_featured=False,
            category=self.category_options[0],
            title=DEFAULT_TITLE,
            date=today_pretty(),
            accent_color_class=self.accent_options[0],
            border_color_class=self.border_options[0],
        )
        self._articles = (*self._articles, article)
        self._selected_id = article.id
        logger.debug(f"Added article {article.id}")
        return self._articles

    def duplicate(self, article_id: int) -> tuple[Article, ...]:
        """Append a copy of an article with a new id and select it.

        The copy goes to the end of the collection, not next to its source.
        """
        source = self.get(article_id)
        if source is None:
            return self._articles
        copy = source.model_copy(
            update={"id": self.next_id(), "title": source.title + COPY_SUFFIX}
        )
        self._articles = (*self._articles, copy)
        self._selected_id = copy.id
        logger.debug(f"Duplicated article {article_id} as {copy.id}")
        return self._articles

    def delete(self, article_id: int) -> tuple[Article, ...]:
        """Remove every article with the id, clearing the selection if it matched."""
        remaining = tuple(a for a in self._articles if a.id != article_id)
        if len(remaining) == len(self._articles):
            return self._articles
        self._articles = remaining
        if self._selected_id == article_id:
            self._selected_id = None
        logger.debug(f"Deleted article {article_id}")
        return self._articles

    def move(self, article_id: int, direction: int) -> tuple[Article, ...]:
        """Swap an article with its neighbour.

        Args:
            article_id: Article to move
            direction: -1 to move up, 1 to move down

        Returns:
            The resulting snapshot; unchanged at either end of the collection
        """
        if direction not in (-1, 1):
            raise ValueError(f"direction must be -1 or 1, got {direction!r}")
        index = self._index_of(article_id)
        if index == -1:
            return self._articles
        target = index + direction
        if target < 0 or target >= len(self._articles):
            return self._articles
        articles = list(self._articles)
        articles[index], articles[target] = articles[target], articles[index]
        self._articles = tuple(articles)
        return self._articles

    def update(self, article_id: int, patch: Mapping[str, Any]) -> tuple[Article, ...]:
        """Replace one article with a copy that has the patched fields.

        Does nothing while no article is selected or if the id is unknown;
        patch keys are only checked once an article will be replaced.

        Args:
            article_id: Article to update
            patch: Field values keyed by attribute name or wire key

        Raises:
            UnknownFieldError: If a key is not an article field
            pydantic.ValidationError: If a value has the wrong type
        """
        if self._selected_id is None:
            return self._articles
        index = self._index_of(article_id)
        if index == -1:
            return self._articles

        changes = {}
        for key, value in patch.items():
            if key not in _FIELD_NAMES:
                raise UnknownFieldError(key)
            changes[_FIELD_NAMES[key]] = value

        current = self._articles[index]
        updated = Article.model_validate({**current.model_dump(), **changes})
        articles = list(self._articles)
        articles[index] = updated
        self._articles = tuple(articles)
        return self._articles

    def update_selected(self, patch: Mapping[str, Any]) -> tuple[Article, ...]:
        """Update the selected article."""
        if self._selected_id is None:
            return self._articles
        return self.update(self._selected_id, patch)

    def replace_all(self, articles: Iterable[Article]) -> tuple[Article, ...]:
        """Install a whole new collection, selecting its first article."""
        self._articles = tuple(articles)
        self._selected_id = self._articles[0].id if self._articles else None
        return self._articles

    def filter(self, search: str = "", category: str = ALL_CATEGORIES) -> list[Article]:
        """Articles matching a search term and a category, in collection order.

        The term matches case-insensitively against title, author, summary,
        and category; an empty term matches everything. ``ALL_CATEGORIES``
        disables the category match.
        """
        term = search.strip().lower()
        return [
            article
            for article in self._articles
            if (not term or any(term in getattr(article, name).lower() for name in _SEARCHED_FIELDS))
            and (category == ALL_CATEGORIES or article.category == category)
        ]

    def add_inline_image(self) -> tuple[Article, ...]:
        """Append an empty inline image to the selected article."""
        selected = self.selected
        if selected is None:
            return self._articles
        images = [*selected.inline_images, InlineImage(url="", caption="")]
        return self.update_selected({"inline_images": images})

    def update_inline_image(self, index: int, field: str, value: str) -> tuple[Article, ...]:
        """Set the url or caption of one inline image on the selected article.

        Raises:
            UnknownFieldError: If ``field`` is not ``url`` or ``caption``
            IndexError: If ``index`` is outside the image list
        """
        selected = self.selected
        if selected is None:
            return self._articles
        if field not in InlineImage.model_fields:
            raise UnknownFieldError(field)
        images = list(selected.inline_images)
        if not 0 <= index < len(images):
            raise IndexError(f"No inline image at index {index}")
        images[index] = images[index].model_copy(update={field: value})
        return self.update_selected({"inline_images": images})

    def remove_inline_image(self, index: int) -> tuple[Article, ...]:
        """Drop one inline image from the selected article.

        Image tokens in the body are not renumbered.
        """
        selected = self.selected
        if selected is None:
            return self._articles
        images = [image for i, image in enumerate(selected.inline_images) if i != index]
        return self.update_selected({"inline_images": images})

    def insert_image_token(self, ordinal: int, caret: int | None = None) -> int | None:
        """Insert ``<image-N>`` into the selected article's body.

        Args:
            ordinal: 1-based image ordinal; not range-checked
            caret: Editor caret position; None appends to the body

        Returns:
            Caret position after the token, or None if nothing is selected
        """
        selected = self.selected
        if selected is None:
            return None
        content, new_caret = insert_token(selected.content, ordinal, caret)
        self.update_selected({"content": content})
        return new_caret
