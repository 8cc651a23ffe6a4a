"""Tests for the export projection."""

import json

from newspaper_editor.options import EXPORT_FILENAME
from newspaper_editor.transfer import (
    normalize_articles,
    parse_articles,
    project,
    to_json,
    write_export,
)
from schemas.article import ARTICLE_FIELDS, InlineImage


class TestProject:
    """Tests for project."""

    def test_keeps_markup_by_default(self, make_article):
        """Without stripping, content is passed through byte for byte."""
        article = make_article(99, content="<p>Hello&nbsp;world</p>")

        assert project([article])[0]["content"] == "<p>Hello&nbsp;world</p>"

    def test_strips_markup(self, make_article):
        """Stripping removes tags and turns non-breaking spaces into spaces."""
        article = make_article(99, content="<p>Hello&nbsp;world</p>")

        assert project([article], strip_markup=True)[0]["content"] == "Hello world"

    def test_only_content_changes(self, make_article):
        """Stripping leaves every other field unchanged."""
        article = make_article(
            5,
            summary="<b>not stripped</b>",
            content="<p>Body</p>",
            inline_images=[InlineImage(url="a.jpg", caption="A")],
        )

        plain = project([article], strip_markup=True)[0]
        rich = project([article])[0]
        plain.pop("content")
        rich.pop("content")
        assert plain == rich
        assert plain["summary"] == "<b>not stripped</b>"

    def test_uses_wire_keys_in_order(self, make_article):
        """Projected records use camelCase keys in schema order."""
        record = project([make_article(1)])[0]

        assert list(record) == list(ARTICLE_FIELDS.values())

    def test_uncaptioned_image_exports_empty_caption(self, make_article):
        """Images without a caption still export a caption key."""
        article = make_article(1, inline_images=[InlineImage(url="a.jpg")])

        assert project([article])[0]["inlineImages"] == [{"url": "a.jpg", "caption": ""}]

    def test_does_not_mutate_source(self, make_article):
        """The source articles are unchanged after projecting."""
        article = make_article(1, content="<p>Keep</p>")
        before = article.model_dump()

        record = project([article], strip_markup=True)[0]
        record["title"] = "changed"

        assert article.model_dump() == before

    def test_preserves_order(self, sample_articles):
        """Records come out in collection order."""
        assert [r["id"] for r in project(reversed(sample_articles))] == [3, 2, 1]


class TestToJson:
    """Tests for to_json."""

    def test_indented_json(self, make_article):
        """Output is two-space indented JSON."""
        text = to_json([make_article(1)])

        assert text.startswith('[\n  {\n    "id": 1,')
        assert json.loads(text)[0]["title"] == "Article 1"

    def test_non_ascii_kept(self, make_article):
        """Non-ASCII text is written as-is."""
        text = to_json([make_article(1, title="Café Opens")])

        assert "Café Opens" in text

    def test_empty_collection(self):
        """An empty collection exports as an empty array."""
        assert to_json([]) == "[]"

    def test_round_trip(self, sample_articles):
        """Export then normalize reproduces the original records."""
        restored = normalize_articles(json.loads(to_json(sample_articles)))

        assert restored == sample_articles

    def test_round_trip_uncaptioned_image(self, make_article):
        """An image without a caption survives export and re-import."""
        articles = [
            make_article(
                1,
                inline_images=[InlineImage(url="x.jpg"), InlineImage(url="y.jpg", caption="Y")],
                content="<image-1><image-2>",
            )
        ]

        assert parse_articles(to_json(articles)) == articles


class TestWriteExport:
    """Tests for write_export."""

    def test_writes_fixed_filename(self, tmp_path, sample_articles):
        """The export file uses the fixed name and the same bytes as to_json."""
        path = write_export(sample_articles, tmp_path)

        assert path == tmp_path / EXPORT_FILENAME
        assert path.read_bytes() == to_json(sample_articles).encode("utf-8")

    def test_plain_text_flag(self, tmp_path, sample_articles):
        """The plain-text flag applies to the written file."""
        path = write_export(sample_articles, tmp_path, strip_markup=True)

        content = json.loads(path.read_text(encoding="utf-8"))[2]["content"]
        assert content.startswith("Curtain")
        assert "<p>" not in content

    def test_creates_directory(self, tmp_path, sample_articles):
        """Missing output directories are created."""
        path = write_export(sample_articles, tmp_path / "out" / "nested")

        assert path.exists()
