"""Built-in conformance checks, runnable from inside the editor."""

from newspaper_editor.collection.examples import get_example_articles
from newspaper_editor.content.tokens import image_token
from newspaper_editor.options import ACCENT_OPTIONS, BORDER_OPTIONS, CATEGORY_OPTIONS
from newspaper_editor.transfer.exporter import project
from newspaper_editor.transfer.normalizer import normalize_articles
from newspaper_editor.transfer.validator import is_valid_article_shape
from schemas.article import Article
from schemas.check import CheckResult


def run_self_checks() -> list[CheckResult]:
    """Run the normalization, export, example, and token checks."""
    results = []

    normalized = normalize_articles([{"title": "Only Title"}])
    results.append(CheckResult(
        name="Normalize fills defaults",
        passed=(
            len(normalized) == 1
            and isinstance(normalized[0].id, int)
            and normalized[0].category == CATEGORY_OPTIONS[0]
            and normalized[0].title == "Only Title"
            and normalized[0].inline_images == []
        ),
    ))

    html_article = Article(
        id=99,
        category="News",
        title="HTML Check",
        author="QA",
        date="Oct 27, 2025",
        accent_color_class=ACCENT_OPTIONS[0],
        border_color_class=BORDER_OPTIONS[0],
        content="<p>Hello&nbsp;world</p>",
    )
    kept = project([html_article])[0]["content"]
    stripped = project([html_article], strip_markup=True)[0]["content"]
    results.append(CheckResult(
        name="Export keeps HTML by default",
        passed="<p>" in kept and "&nbsp;" in kept,
    ))
    results.append(CheckResult(
        name="Export strips HTML when plain",
        passed=stripped == "Hello world",
        info=None if stripped == "Hello world" else f"got {stripped!r}",
    ))

    examples = get_example_articles()
    results.append(CheckResult(
        name="Example has 5 articles",
        passed=len(examples) == 5,
        info=f"found {len(examples)}",
    ))
    results.append(CheckResult(
        name="Example shape valid",
        passed=all(is_valid_article_shape(article) for article in examples),
    ))

    results.append(CheckResult(
        name="Image token formatting",
        passed=image_token(3) == "<image-3>",
    ))
    return results


def format_results(results: list[CheckResult]) -> str:
    """One line per check, prefixed with PASS or FAIL."""
    lines = []
    for result in results:
        line = f"{'PASS' if result.passed else 'FAIL'} {result.name}"
        if result.info:
            line += f" ({result.info})"
        lines.append(line)
    return "\n".join(lines)
