"""
Document Generator

Renders a static document template once per catalog entry and writes the
result into the entry's problem directory. Problem directories are provisioned
elsewhere; an entry whose directory is absent is skipped and nothing is created
for it.
"""

import re
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from jinja2 import TemplateNotFound

from curriculum.contexts.scaffolding.catalog import CatalogEntry
from curriculum.contexts.scaffolding.defaults import (
    DEFAULT_OUTPUT_FILENAME,
    DEFAULT_TEMPLATE_NAME,
    PLACEHOLDER_FOCUS,
    PLACEHOLDER_NUM,
    PLACEHOLDER_TITLE,
)
from curriculum.contexts.scaffolding.exceptions import TemplateRenderError
from curriculum.contexts.scaffolding.logger import (
    _log_debug,
    _log_error,
    _log_info,
    _log_warning,
    log_generation_result,
    log_generation_start,
)
from curriculum.contexts.scaffolding.registries import TemplateRegistry

# All three tokens in one alternation so substituted values are never re-scanned
_PLACEHOLDER_PATTERN = re.compile(
    "|".join(re.escape(token) for token in (PLACEHOLDER_NUM, PLACEHOLDER_TITLE, PLACEHOLDER_FOCUS))
)


@dataclass
class GenerationResult:
    """Outcome of generate_documents()."""

    written: List[Path] = field(default_factory=list)
    skipped: List[CatalogEntry] = field(default_factory=list)
    failed: List[Tuple[CatalogEntry, str]] = field(default_factory=list)
    time_s: float = 0.0
    dry_run: bool = False

    @property
    def success(self) -> bool:
        return not self.failed


def render_placeholders(template: str, entry: CatalogEntry) -> str:
    """
    Substitute an entry's values into a template.

    Every PROBLEM_NUM, PROBLEM_TITLE and PROBLEM_FOCUS token is replaced
    literally and case-sensitively. Replacement happens in a single pass, so
    values containing token text come through unchanged.

    Args:
        template: Template text with placeholder tokens
        entry: Catalog entry supplying the values

    Returns:
        Rendered text

    Example:
        >>> entry = CatalogEntry("11", "Conditional Logic", "...")
        >>> render_placeholders("# Problem PROBLEM_NUM: PROBLEM_TITLE", entry)
        '# Problem 11: Conditional Logic'
    """
    values = {
        PLACEHOLDER_NUM: entry.identifier,
        PLACEHOLDER_TITLE: entry.title,
        PLACEHOLDER_FOCUS: entry.focus,
    }
    return _PLACEHOLDER_PATTERN.sub(lambda match: values[match.group(0)], template)


def load_document_template(
    name: str = DEFAULT_TEMPLATE_NAME, registry: Optional[TemplateRegistry] = None
) -> str:
    """
    Load a static document template by name.

    Raises:
        TemplateRenderError: If the template can't be found or read
    """
    registry = registry or TemplateRegistry()
    try:
        return registry.get_source(name)
    except (TemplateNotFound, OSError) as e:
        raise TemplateRenderError(
            "Unable to load document template",
            template_name=name,
            template_path=registry.get_template_path(name),
            original_error=e,
        ) from e


def generate_documents(
    catalog: Iterable[CatalogEntry],
    template: str,
    solutions_path: Path,
    filename: str = DEFAULT_OUTPUT_FILENAME,
    dry_run: bool = False,
) -> GenerationResult:
    """
    Render and write one document per catalog entry.

    Entries are processed in catalog order. For each one:
    1. Locate solutions_path / entry.directory_name
    2. Skip the entry if that directory doesn't exist
    3. Render the template with the entry's values
    4. Write it to <directory>/<filename>, overwriting any existing file

    A write failure is recorded for that entry and the batch continues.

    Args:
        catalog: Ordered catalog entries
        template: Template text with placeholder tokens
        solutions_path: Directory holding the problem directories
        filename: Output filename inside each problem directory
        dry_run: Report what would be written without touching the filesystem

    Returns:
        GenerationResult listing written paths, skipped entries and failures
    """
    catalog = tuple(catalog)
    start_time = time.time()
    result = GenerationResult(dry_run=dry_run)

    log_generation_start(len(catalog), solutions_path, filename)

    for entry in catalog:
        problem_dir = solutions_path / entry.directory_name

        if not problem_dir.is_dir():
            _log_warning(f"Skipping Problem {entry.identifier}: {problem_dir} does not exist")
            result.skipped.append(entry)
            continue

        output_path = problem_dir / filename
        content = render_placeholders(template, entry)

        if dry_run:
            _log_info(f"Would write {output_path}")
            result.written.append(output_path)
            continue

        _log_info(f"Creating exercises for Problem {entry.identifier}: {entry.title}")
        try:
            output_path.write_text(content, encoding="utf-8")
        except OSError as e:
            _log_error(f"Failed to write {output_path}: {e}")
            result.failed.append((entry, str(e)))
            continue

        _log_debug(f"Wrote {len(content)} characters to {output_path}")
        result.written.append(output_path)

    result.time_s = time.time() - start_time
    log_generation_result(result)
    return result
