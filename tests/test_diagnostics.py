"""Tests for built-in self checks and the example payload."""

from newspaper_editor.collection import get_example_articles
from newspaper_editor.content import dangling_ordinals
from newspaper_editor.diagnostics import format_results, run_self_checks
from newspaper_editor.transfer import is_valid_article_shape
from schemas.check import CheckResult


class TestRunSelfChecks:
    """Tests for run_self_checks."""

    def test_all_checks_pass(self):
        """Every built-in check passes."""
        results = run_self_checks()

        assert len(results) == 6
        assert all(result.passed for result in results), format_results(results)

    def test_format_results(self):
        """Results are rendered one per line with an optional detail."""
        results = [
            CheckResult(name="First", passed=True),
            CheckResult(name="Second", passed=False, info="got 'x'"),
        ]

        assert format_results(results) == "PASS First\nFAIL Second (got 'x')"


class TestExampleArticles:
    """Tests for the sample newspaper."""

    def test_examples_valid(self):
        """All example articles pass the shape check."""
        examples = get_example_articles()

        assert len(examples) == 5
        assert all(is_valid_article_shape(article) for article in examples)

    def test_examples_unique_ids(self):
        """Example ids are unique and sequential."""
        assert [a.id for a in get_example_articles()] == [1, 2, 3, 4, 5]

    def test_example_tokens_resolve(self):
        """The example image token points at an existing image."""
        first = get_example_articles()[0]

        assert "<image-1>" in first.content
        assert dangling_ordinals(first) == []

    def test_fresh_list_each_call(self):
        """Each call returns a new list."""
        assert get_example_articles() is not get_example_articles()
