"""
Scaffolding Context

Responsibilities:
- Holds the problem catalog (identifier, title, focus)
- Loads static document templates
- Renders templates by literal placeholder substitution
- Writes rendered documents into pre-existing problem directories

Owns: Catalog model, document templates, generation runs
Never: Creates problem directories
"""

from curriculum.contexts.scaffolding.catalog import (
    CatalogEntry,
    build_catalog,
    load_catalog,
    title_to_slug,
)
from curriculum.contexts.scaffolding.defaults import DEFAULT_CATALOG
from curriculum.contexts.scaffolding.exceptions import CatalogError, TemplateRenderError
from curriculum.contexts.scaffolding.generator import (
    GenerationResult,
    generate_documents,
    load_document_template,
    render_placeholders,
)
from curriculum.contexts.scaffolding.registries import TemplateRegistry

__all__ = [
    # Catalog model
    "CatalogEntry",
    "build_catalog",
    "load_catalog",
    "title_to_slug",
    "DEFAULT_CATALOG",
    # Generation
    "GenerationResult",
    "generate_documents",
    "load_document_template",
    "render_placeholders",
    "TemplateRegistry",
    # Errors
    "CatalogError",
    "TemplateRenderError",
]
