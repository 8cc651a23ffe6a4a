"""Inline image reference tokens.

An article body refers to its inline images with tokens like
``<image-2>``, where the number is the 1-based position of the image in
``Article.inline_images`` at the time the token was inserted. Tokens are
plain text: reordering or removing images does not touch the body, so a
token may end up pointing at a different image or at nothing.

The helpers below only read or rewrite tokens when called explicitly.
"""

import re

from schemas.article import Article, InlineImage

TOKEN_PATTERN = re.compile(r"<image-(\d+)>")


def image_token(ordinal: int) -> str:
    """Token text for the given 1-based image ordinal.

    Examples:
        >>> image_token(3)
        '<image-3>'
    """
    return f"<image-{ordinal}>"


def insert_token(content: str, ordinal: int, caret: int | None = None) -> tuple[str, int]:
    """Insert an image token into body text.

    Args:
        content: Current body text
        ordinal: 1-based image ordinal; not range-checked
        caret: Insert position, clamped to the text; None appends

    Returns:
        Tuple of (new content, caret position just after the token)
    """
    token = image_token(ordinal)
    if caret is None:
        position = len(content)
    else:
        position = max(0, min(caret, len(content)))
    return content[:position] + token + content[position:], position + len(token)


def find_token_ordinals(content: str) -> list[int]:
    """Ordinals of all tokens in the body, in order of appearance."""
    return [int(match.group(1)) for match in TOKEN_PATTERN.finditer(content)]


def resolve_tokens(article: Article) -> list[tuple[int, InlineImage | None]]:
    """Pair each token in an article body with the image at its position.

    Returns:
        List of (ordinal, image) tuples; image is None when no image sits
        at that position
    """
    images = article.inline_images
    return [
        (ordinal, images[ordinal - 1] if 1 <= ordinal <= len(images) else None)
        for ordinal in find_token_ordinals(article.content)
    ]


def dangling_ordinals(article: Article) -> list[int]:
    """Ordinals referenced in the body that have no matching image."""
    return [ordinal for ordinal, image in resolve_tokens(article) if image is None]


def renumber_tokens(content: str, mapping: dict[int, int]) -> str:
    """Rewrite token ordinals through an explicit mapping.

    Tokens whose ordinal is not in the mapping are left as they are.

    Args:
        content: Body text
        mapping: Old ordinal to new ordinal

    Returns:
        Body text with tokens renumbered
    """

    def replace(match: re.Match) -> str:
        ordinal = int(match.group(1))
        if ordinal not in mapping:
            return match.group(0)
        return image_token(mapping[ordinal])

    return TOKEN_PATTERN.sub(replace, content)
