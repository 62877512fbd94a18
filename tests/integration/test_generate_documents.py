"""
Integration tests for hands-on exercise generation.
Tests: catalog + template -> HANDS-ON-EXERCISES.md in pre-existing problem directories.
"""

import pytest

from curriculum.contexts.scaffolding import (
    DEFAULT_CATALOG,
    CatalogEntry,
    generate_documents,
    load_document_template,
)

TOKENS = ("PROBLEM_NUM", "PROBLEM_TITLE", "PROBLEM_FOCUS")


@pytest.fixture
def template():
    return load_document_template()


@pytest.fixture
def solutions(tmp_path):
    """Solutions tree where only Problems 11 and 12 were provisioned."""
    (tmp_path / "Problem-11-Conditional-Logic").mkdir()
    (tmp_path / "Problem-12-Locals-Functions").mkdir()
    return tmp_path


@pytest.mark.integration
def test_writes_into_existing_directories(solutions, template):
    result = generate_documents(DEFAULT_CATALOG, template, solutions)

    output = solutions / "Problem-11-Conditional-Logic" / "HANDS-ON-EXERCISES.md"
    assert result.written == [
        output,
        solutions / "Problem-12-Locals-Functions" / "HANDS-ON-EXERCISES.md",
    ]
    assert result.success

    text = output.read_text(encoding="utf-8")
    assert "Problem 11: Conditional Logic - Hands-On Exercises" in text
    for token in TOKENS:
        assert token not in text


@pytest.mark.integration
def test_skips_missing_directories(solutions, template):
    """Absent problem directories are reported and never created."""
    result = generate_documents(DEFAULT_CATALOG, template, solutions)

    assert [entry.identifier for entry in result.skipped] == [str(n) for n in range(13, 21)]
    assert sorted(path.name for path in solutions.iterdir()) == [
        "Problem-11-Conditional-Logic",
        "Problem-12-Locals-Functions",
    ]


@pytest.mark.integration
def test_nonexistent_entry_creates_nothing(tmp_path, template):
    catalog = (CatalogEntry("99", "Nonexistent", "n/a"),)

    result = generate_documents(catalog, template, tmp_path)

    assert result.written == []
    assert result.skipped == list(catalog)
    assert not (tmp_path / "Problem-99-Nonexistent").exists()


@pytest.mark.integration
def test_second_run_is_byte_identical(solutions, template):
    generate_documents(DEFAULT_CATALOG, template, solutions)
    output = solutions / "Problem-12-Locals-Functions" / "HANDS-ON-EXERCISES.md"
    first = output.read_bytes()

    generate_documents(DEFAULT_CATALOG, template, solutions)

    assert output.read_bytes() == first


@pytest.mark.integration
def test_overwrites_existing_file(solutions, template):
    output = solutions / "Problem-11-Conditional-Logic" / "HANDS-ON-EXERCISES.md"
    output.write_text("stale content\n", encoding="utf-8")

    generate_documents(DEFAULT_CATALOG, template, solutions)

    assert "stale content" not in output.read_text(encoding="utf-8")


@pytest.mark.integration
def test_dry_run_writes_nothing(solutions, template):
    result = generate_documents(DEFAULT_CATALOG, template, solutions, dry_run=True)

    assert len(result.written) == 2
    assert result.dry_run
    assert not (solutions / "Problem-11-Conditional-Logic" / "HANDS-ON-EXERCISES.md").exists()


@pytest.mark.integration
def test_custom_filename(solutions):
    generate_documents(
        DEFAULT_CATALOG[:1], "PROBLEM_FOCUS\n", solutions, filename="FOCUS.md"
    )

    output = solutions / "Problem-11-Conditional-Logic" / "FOCUS.md"
    assert output.read_text(encoding="utf-8") == DEFAULT_CATALOG[0].focus + "\n"


@pytest.mark.integration
def test_write_failure_recorded_and_batch_continues(solutions, template):
    """A directory in the way of the output file fails that entry only."""
    (solutions / "Problem-11-Conditional-Logic" / "HANDS-ON-EXERCISES.md").mkdir()

    result = generate_documents(DEFAULT_CATALOG, template, solutions)

    assert not result.success
    assert [entry.identifier for entry, _ in result.failed] == ["11"]
    assert result.written == [solutions / "Problem-12-Locals-Functions" / "HANDS-ON-EXERCISES.md"]
