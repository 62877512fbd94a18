"""
Template Registry

Centralized registry for loading and caching document templates.

Two kinds of templates live side by side in the templates directory:
- Static documents (e.g. hands_on_exercises.md) holding literal PROBLEM_* tokens.
  These are read verbatim with get_source() and never evaluated by Jinja2.
- Report templates (*.jinja) rendered with get_template().
"""

import os
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound

load_dotenv()
TEMPLATES_PATH = Path(
    os.getenv("CURRICULUM_TEMPLATES_PATH", Path(__file__).resolve().parent / "templates")
)


class TemplateRegistry:
    """Registry for loading and caching templates from a templates directory."""

    def __init__(self, templates_path: Path = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Directory holding the templates. Defaults to
                            CURRICULUM_TEMPLATES_PATH from environment
        """
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = Path(templates_path)
        self._source_cache: Dict[str, str] = {}
        self._template_cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def get_source(self, name: str) -> str:
        """
        Get the raw text of a template, loading and caching it if necessary.

        Args:
            name: Template filename (e.g., 'hands_on_exercises.md')

        Returns:
            Template text, unevaluated

        Raises:
            TemplateNotFound: If template file doesn't exist
        """
        if name in self._source_cache:
            return self._source_cache[name]

        try:
            source, _, _ = self.env.loader.get_source(self.env, name)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template '{name}' not found at {self.get_template_path(name)}"
            ) from e

        self._source_cache[name] = source
        return source

    def get_template(self, name: str) -> Template:
        """
        Get a Jinja2 template by name, loading and caching it if necessary.

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if name in self._template_cache:
            return self._template_cache[name]

        try:
            template = self.env.get_template(name)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template '{name}' not found at {self.get_template_path(name)}"
            ) from e

        self._template_cache[name] = template
        return template

    def get_template_path(self, name: str) -> Path:
        """Get the file path for a template."""
        return self.templates_path / name

    def clear_cache(self):
        """Clear both template caches."""
        self._source_cache.clear()
        self._template_cache.clear()

    def is_cached(self, name: str) -> bool:
        """Check if a template (static or Jinja2) is in the cache."""
        return name in self._source_cache or name in self._template_cache
