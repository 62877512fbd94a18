"""
Curriculum Scaffold - tooling for the Terraform Zero-to-Hero curriculum tree

Maintains the per-problem directories (Solutions/Problem-<id>-<Title>/) that hold
the curriculum's learning material.

Architecture:
- Scaffolding Context: Catalog-driven generation of boilerplate markdown documents
- Auditing Context: Completeness scoring of problem directories
"""

__version__ = "0.1.0"
