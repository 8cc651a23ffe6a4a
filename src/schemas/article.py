"""Article schemas for the newspaper editor.

Attribute names are snake_case; the exported JSON uses the camelCase keys
expected by the newspaper front end, so every multi-word field carries an
alias and ``populate_by_name`` lets callers use either form.
"""

from pydantic import BaseModel, Field


class InlineImage(BaseModel):
    """An image placed inside an article body.

    Attributes:
        url: Image URL
        caption: Caption shown under the image, empty when there is none
    """

    url: str
    caption: str = ""

    model_config = {"frozen": True}


class Article(BaseModel):
    """A single article in the newspaper.

    Articles are immutable; the store replaces a record with a modified
    copy instead of editing it in place.

    Attributes:
        id: Identity key, unique within a live collection
        is_featured: Display-only flag
        category: Section name (e.g., "Sports")
        title: Headline
        author: Byline
        date: Pre-formatted display date (e.g., "Oct 25, 2025")
        summary: Short teaser text
        image: Hero image URL
        accent_color_class: CSS class for the accent colour
        border_color_class: CSS class for the card border
        inline_images: Images referenced from the body by ``<image-N>``
        content: Body text, possibly with markup and image tokens
    """

    id: int
    is_featured: bool = Field(default=False, alias="isFeatured")
    category: str
    title: str
    author: str = ""
    date: str = ""
    summary: str = ""
    image: str = ""
    accent_color_class: str = Field(alias="accentColorClass")
    border_color_class: str = Field(alias="borderColorClass")
    inline_images: list[InlineImage] = Field(default=[], alias="inlineImages")
    content: str = ""

    model_config = {"frozen": True, "populate_by_name": True}


# Wire keys in declaration order, e.g. "isFeatured" for is_featured.
ARTICLE_FIELDS: dict[str, str] = {
    name: (info.alias or name) for name, info in Article.model_fields.items()
}
