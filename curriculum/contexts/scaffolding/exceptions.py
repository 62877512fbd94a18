"""Custom exceptions for the scaffolding context."""

from pathlib import Path
from typing import Optional


class CatalogError(ValueError):
    """
    Exception raised when a problem catalog is malformed.

    Raised for catalogs missing the 'problems' list, entries missing one of
    identifier/title/focus, and duplicate identifiers.
    """

    pass


class TemplateRenderError(Exception):
    """
    Exception raised when a document template cannot be loaded or rendered.

    Attributes:
        message: Error description
        template_name: Name of the template (e.g., 'hands_on_exercises.md')
        template_path: Path to the template file
        original_error: The underlying Jinja2 or I/O error
    """

    def __init__(
        self,
        message: str,
        template_name: Optional[str] = None,
        template_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.template_name = template_name
        self.template_path = template_path
        self.original_error = original_error

        parts = [message]

        if template_name and template_path:
            parts.append(f"\nTemplate: {template_path}")
            parts.append(f"Name: {template_name}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))
