"""
Default values for document scaffolding.

Provides the built-in problem catalog (Problems 11-20), the placeholder
tokens substituted into document templates, and the default output filename.
"""

from curriculum.contexts.scaffolding.catalog import CatalogEntry, build_catalog

# Placeholder tokens, replaced verbatim during rendering
PLACEHOLDER_NUM = "PROBLEM_NUM"
PLACEHOLDER_TITLE = "PROBLEM_TITLE"
PLACEHOLDER_FOCUS = "PROBLEM_FOCUS"

DEFAULT_TEMPLATE_NAME = "hands_on_exercises.md"
DEFAULT_OUTPUT_FILENAME = "HANDS-ON-EXERCISES.md"

DEFAULT_CATALOG = build_catalog(
    [
        CatalogEntry(
            "11",
            "Conditional Logic",
            "Dynamic resource creation patterns, conditional expressions, and environment-based logic",
        ),
        CatalogEntry(
            "12",
            "Locals Functions",
            "Data transformation, reuse patterns, and built-in function mastery",
        ),
        CatalogEntry(
            "13",
            "Resource Dependencies",
            "Explicit and implicit dependency management, dependency graphs",
        ),
        CatalogEntry(
            "14",
            "Lifecycle Rules",
            "Advanced resource lifecycle management, create_before_destroy, ignore_changes",
        ),
        CatalogEntry(
            "15",
            "Workspaces Environments",
            "Multi-environment management, workspace strategies, state isolation",
        ),
        CatalogEntry(
            "16",
            "File Organization",
            "Project structure, best practices, team collaboration patterns",
        ),
        CatalogEntry(
            "17",
            "Error Handling",
            "Debugging techniques, troubleshooting, error prevention strategies",
        ),
        CatalogEntry(
            "18",
            "Security Fundamentals",
            "Security best practices, encryption, access control, compliance",
        ),
        CatalogEntry(
            "19",
            "Performance Optimization",
            "Optimization techniques, cost management, resource efficiency",
        ),
        CatalogEntry(
            "20",
            "Troubleshooting",
            "Common issues, debugging tools, resolution strategies, prevention",
        ),
    ]
)
