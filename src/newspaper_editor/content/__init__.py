"""Article body helpers: text filters and image reference tokens."""

from .filters import format_pretty_date, strip_markup, today_pretty
from .tokens import (
    TOKEN_PATTERN,
    dangling_ordinals,
    find_token_ordinals,
    image_token,
    insert_token,
    renumber_tokens,
    resolve_tokens,
)

__all__ = [
    "TOKEN_PATTERN",
    "dangling_ordinals",
    "find_token_ordinals",
    "format_pretty_date",
    "image_token",
    "insert_token",
    "renumber_tokens",
    "resolve_tokens",
    "strip_markup",
    "today_pretty",
]
