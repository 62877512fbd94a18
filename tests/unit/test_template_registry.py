"""Unit tests for TemplateRegistry class."""

from pathlib import Path

import pytest
from jinja2 import TemplateNotFound

from curriculum.contexts.auditing.report import AUDIT_TEMPLATES_PATH
from curriculum.contexts.scaffolding import TemplateRegistry, TemplateRenderError, load_document_template


@pytest.mark.unit
def test_template_registry_init():
    """Test TemplateRegistry initialization."""
    registry = TemplateRegistry()
    assert registry.templates_path.exists()
    assert registry._source_cache == {}
    assert registry._template_cache == {}


@pytest.mark.unit
def test_get_source_hands_on_exercises():
    """Static templates come back verbatim, placeholders intact."""
    registry = TemplateRegistry()
    source = registry.get_source("hands_on_exercises.md")

    assert source.startswith("# Problem PROBLEM_NUM: PROBLEM_TITLE - Hands-On Exercises")
    assert "hands_on_exercises.md" in registry._source_cache


@pytest.mark.unit
def test_source_caching():
    """Test that sources are cached after first load."""
    registry = TemplateRegistry()

    source1 = registry.get_source("hands_on_exercises.md")
    assert registry.is_cached("hands_on_exercises.md")

    source2 = registry.get_source("hands_on_exercises.md")
    assert source1 is source2


@pytest.mark.unit
def test_get_source_not_found():
    """Test error handling for missing template."""
    registry = TemplateRegistry()

    with pytest.raises(TemplateNotFound):
        registry.get_source("nonexistent.md")


@pytest.mark.unit
def test_load_document_template_wraps_missing(tmp_path):
    registry = TemplateRegistry(tmp_path)

    with pytest.raises(TemplateRenderError) as exc_info:
        load_document_template("missing.md", registry=registry)

    assert exc_info.value.template_name == "missing.md"
    assert exc_info.value.template_path == tmp_path / "missing.md"


@pytest.mark.unit
def test_get_template_path():
    """Test getting template file path."""
    registry = TemplateRegistry()
    path = registry.get_template_path("hands_on_exercises.md")

    assert isinstance(path, Path)
    assert path.name == "hands_on_exercises.md"


@pytest.mark.unit
def test_clear_cache():
    """Test cache clearing."""
    registry = TemplateRegistry()

    registry.get_source("hands_on_exercises.md")
    assert len(registry._source_cache) == 1

    registry.clear_cache()
    assert len(registry._source_cache) == 0


@pytest.mark.unit
def test_get_template_caches_jinja_templates():
    registry = TemplateRegistry(AUDIT_TEMPLATES_PATH)

    template1 = registry.get_template("audit_report.md.jinja")
    template2 = registry.get_template("audit_report.md.jinja")

    assert template1 is template2
    assert registry.is_cached("audit_report.md.jinja")


@pytest.mark.unit
def test_custom_templates_path(tmp_path):
    (tmp_path / "readme.md").write_text("# PROBLEM_TITLE\n", encoding="utf-8")
    registry = TemplateRegistry(tmp_path)

    assert registry.get_source("readme.md") == "# PROBLEM_TITLE\n"
