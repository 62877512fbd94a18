"""Unit tests for literal placeholder substitution."""

import pytest

from curriculum.contexts.scaffolding import CatalogEntry, load_document_template, render_placeholders

ENTRY = CatalogEntry(
    "11",
    "Conditional Logic",
    "Dynamic resource creation patterns, conditional expressions, and environment-based logic",
)


@pytest.mark.unit
def test_replaces_all_three_tokens():
    template = "PROBLEM_NUM|PROBLEM_TITLE|PROBLEM_FOCUS|PROBLEM_NUM"
    assert render_placeholders(template, ENTRY) == (
        f"11|Conditional Logic|{ENTRY.focus}|11"
    )


@pytest.mark.unit
def test_substitution_is_case_sensitive():
    assert render_placeholders("problem_num Problem_Num", ENTRY) == "problem_num Problem_Num"


@pytest.mark.unit
def test_substituted_values_not_rescanned():
    """A value containing token text is inserted verbatim."""
    entry = CatalogEntry("7", "About PROBLEM_NUM", "See PROBLEM_TITLE")
    rendered = render_placeholders("PROBLEM_TITLE / PROBLEM_FOCUS", entry)
    assert rendered == "About PROBLEM_NUM / See PROBLEM_TITLE"


@pytest.mark.unit
def test_values_with_regex_metacharacters():
    entry = CatalogEntry("1", r"Paths \1 and $0", r"[a-z]+ \g<0>")
    rendered = render_placeholders("PROBLEM_TITLE PROBLEM_FOCUS", entry)
    assert rendered == r"Paths \1 and $0 [a-z]+ \g<0>"


@pytest.mark.unit
def test_template_without_tokens_unchanged():
    assert render_placeholders("no tokens here {{ x }}", ENTRY) == "no tokens here {{ x }}"


@pytest.mark.unit
def test_hands_on_template_header():
    rendered = render_placeholders(load_document_template(), ENTRY)

    assert rendered.startswith("# Problem 11: Conditional Logic - Hands-On Exercises\n")
    assert "mkdir problem-11-exercise" in rendered
    for token in ("PROBLEM_NUM", "PROBLEM_TITLE", "PROBLEM_FOCUS"):
        assert token not in rendered
