"""Markdown report rendering for curriculum audits."""

from pathlib import Path

from curriculum.contexts.auditing.auditor import MAX_SCORE, CurriculumAudit
from curriculum.contexts.scaffolding.registries import TemplateRegistry
from curriculum.utils.timestamp import now_exact

AUDIT_TEMPLATES_PATH = Path(__file__).resolve().parent / "templates"
REPORT_TEMPLATE_NAME = "audit_report.md.jinja"


def render_audit_report(audit: CurriculumAudit, registry: TemplateRegistry = None) -> str:
    """
    Render an audit as a markdown report.

    Args:
        audit: CurriculumAudit from audit_curriculum()
        registry: Registry to load the report template from. Defaults to the
                  auditing context's templates directory

    Returns:
        Markdown text
    """
    registry = registry or TemplateRegistry(AUDIT_TEMPLATES_PATH)
    template = registry.get_template(REPORT_TEMPLATE_NAME)
    return template.render(audit=audit, max_score=MAX_SCORE, generated_at=now_exact())
