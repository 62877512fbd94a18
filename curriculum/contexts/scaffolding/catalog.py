"""
Problem Catalog

A catalog is an ordered, immutable tuple of CatalogEntry values. The built-in
catalog lives in defaults.py; alternative catalogs can be loaded from YAML:

    problems:
      - identifier: "11"
        title: Conditional Logic
        focus: Dynamic resource creation patterns, conditional expressions, ...

Identifiers must be quoted: unquoted 07 is read as octal 7 while 08 stays "08".
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Tuple

import yaml
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from curriculum.contexts.scaffolding.exceptions import CatalogError

CATALOG_FIELDS = ("identifier", "title", "focus")


def title_to_slug(title: str) -> str:
    """Replace each space in a title with one hyphen; nothing else changes."""
    return title.replace(" ", "-")


@dataclass(frozen=True)
class CatalogEntry:
    """One problem of the curriculum: identifier, title and focus line."""

    identifier: str
    title: str
    focus: str

    @property
    def directory_name(self) -> str:
        """Problem directory name, e.g. 'Problem-12-Locals-Functions'."""
        return f"Problem-{self.identifier}-{title_to_slug(self.title)}"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CatalogEntry":
        """
        Build an entry from a mapping with identifier/title/focus keys.

        Raises:
            CatalogError: If any of the three fields is missing or the
                          identifier isn't a string
        """
        missing = [field for field in CATALOG_FIELDS if data.get(field) is None]
        if missing:
            raise CatalogError(f"Catalog entry {dict(data)} is missing field(s): {missing}")

        identifier = data["identifier"]
        if not isinstance(identifier, str):
            raise CatalogError(
                f"Identifier {identifier!r} of '{data['title']}' must be a string; "
                f"quote it in the catalog (e.g. identifier: \"07\")"
            )

        return cls(
            identifier=identifier,
            title=str(data["title"]),
            focus=str(data["focus"]),
        )


def build_catalog(entries: Iterable[CatalogEntry]) -> Tuple[CatalogEntry, ...]:
    """
    Freeze entries into a catalog, preserving order.

    Raises:
        CatalogError: If two entries share an identifier
    """
    catalog = tuple(entries)

    seen = set()
    for entry in catalog:
        if entry.identifier in seen:
            raise CatalogError(f"Duplicate problem identifier in catalog: {entry.identifier}")
        seen.add(entry.identifier)

    return catalog


def load_catalog(catalog_path: Path) -> Tuple[CatalogEntry, ...]:
    """
    Load a catalog from a YAML file.

    Args:
        catalog_path: YAML file with a top-level 'problems' list

    Returns:
        Catalog tuple in file order

    Raises:
        CatalogError: If the file doesn't hold a valid catalog
    """
    # Titles and focus lines are free text; ${...} is Terraform syntax, not an interpolation
    try:
        data = OmegaConf.to_container(OmegaConf.load(catalog_path), resolve=False)
    except (yaml.YAMLError, OmegaConfBaseException) as e:
        raise CatalogError(f"Unable to parse catalog {catalog_path}: {e}") from e

    if not isinstance(data, dict) or "problems" not in data:
        raise CatalogError(f"Catalog {catalog_path} must contain a 'problems' key at root level")

    problems = data["problems"]
    if not isinstance(problems, list):
        raise CatalogError(f"'problems' in {catalog_path} must be a list")

    for item in problems:
        if not isinstance(item, dict):
            raise CatalogError(f"Catalog entry {item!r} in {catalog_path} must be a mapping")

    return build_catalog(CatalogEntry.from_dict(item) for item in problems)


def describe_range(catalog: Tuple[CatalogEntry, ...]) -> str:
    """Human-readable identifier range, e.g. '11-20' (or '11' for one entry)."""
    if not catalog:
        return ""
    first, last = catalog[0].identifier, catalog[-1].identifier
    return first if first == last else f"{first}-{last}"
