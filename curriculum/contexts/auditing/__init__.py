"""
Auditing Context

Responsibilities:
- Scores problem directories against the files a complete problem carries
- Aggregates per-problem scores into a curriculum quality report
- Runs curriculum-wide enterprise readiness checks

Owns: Completeness rules, audit reports
Never: Writes into problem directories
"""

from curriculum.contexts.auditing.auditor import (
    CurriculumAudit,
    ProblemAudit,
    RangeSummary,
    audit_curriculum,
    audit_problem,
    find_problem_dir,
)
from curriculum.contexts.auditing.readiness import (
    EnterpriseReadiness,
    ReadinessCheck,
    assess_enterprise_readiness,
)
from curriculum.contexts.auditing.report import render_audit_report

__all__ = [
    "CurriculumAudit",
    "ProblemAudit",
    "RangeSummary",
    "EnterpriseReadiness",
    "ReadinessCheck",
    "assess_enterprise_readiness",
    "audit_curriculum",
    "audit_problem",
    "find_problem_dir",
    "render_audit_report",
]
