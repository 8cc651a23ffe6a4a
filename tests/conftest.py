"""Pytest fixtures for newspaper editor tests."""

import json

import pytest

from newspaper_editor.collection import ArticleStore
from schemas.article import Article, InlineImage


@pytest.fixture
def sample_article_record():
    """Sample exported article record with camelCase wire keys."""
    return {
        "id": 7,
        "isFeatured": True,
        "category": "Sports",
        "title": "Bears Win Opener",
        "author": "John Smith",
        "date": "Oct 24, 2025",
        "summary": "A 35-7 win to start the season.",
        "image": "https://example.com/hero.jpg",
        "accentColorClass": "text-bowman-secondary",
        "borderColorClass": "border-bowman-secondary/30",
        "inlineImages": [
            {"url": "https://example.com/one.jpg", "caption": "First"},
            {"url": "https://example.com/two.jpg", "caption": "Second"},
        ],
        "content": "<p>Kickoff</p><image-1><p>Final&nbsp;whistle</p><image-2>",
    }


def _make_article(article_id: int, **overrides) -> Article:
    """Build an article with sensible defaults for tests."""
    data = {
        "id": article_id,
        "category": "News",
        "title": f"Article {article_id}",
        "author": "Staff",
        "date": "Oct 1, 2025",
        "accent_color_class": "text-bowman-highlight",
        "border_color_class": "border-bowman-secondary/30",
    }
    data.update(overrides)
    return Article(**data)


@pytest.fixture
def sample_articles():
    """Three articles with ids 1, 2, 3 in order."""
    return [
        _make_article(1, title="Debate Team Wins", author="Jane Doe", category="Campus Life"),
        _make_article(2, title="Football Opener", author="John Smith", category="Sports"),
        _make_article(
            3,
            title="Our Town Review",
            author="Alex Johnson",
            category="Arts & Culture",
            summary="A poignant debate about life",
            inline_images=[InlineImage(url="https://example.com/stage.jpg", caption="Stage")],
            content="<p>Curtain</p><image-1>",
        ),
    ]


@pytest.fixture
def store(sample_articles):
    """Store holding the sample articles with article 1 selected."""
    store = ArticleStore(sample_articles)
    store.select(1)
    return store


@pytest.fixture
def sample_json_file(tmp_path, sample_article_record):
    """Create a JSON file holding one exported article."""
    path = tmp_path / "import.json"
    path.write_text(json.dumps([sample_article_record], indent=2), encoding="utf-8")
    return path


@pytest.fixture
def make_article():
    """Factory for articles with test defaults."""
    return _make_article
