"""
Enterprise Readiness

Curriculum-wide feature checks run over the whole solutions tree, on top of
the per-problem completeness scores:

    Comprehensive Guides        COMPREHENSIVE-*-GUIDE.md     >= 20
    Hands-On Exercises          *HANDS-ON*                   >= 15
    Troubleshooting Guides      TROUBLESHOOTING-GUIDE.md     >= 30
    Enterprise Patterns         *ENTERPRISE*                 >= 10
    Documentation Volume        lines across problems        >= 60000
    Advanced Topics Coverage    GitOps, Multi-Cloud, ...     all 4
    Production Readiness        keyword hits in *.md files   >= 100
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

ADVANCED_TOPICS = ("GitOps", "Multi-Cloud", "Policy-as-Code", "Infrastructure-Testing")
PRODUCTION_KEYWORDS = ("production", "enterprise", "security", "monitoring", "compliance")

GRADES = (
    (90, "A+ (World-Class)"),
    (80, "A (Excellent)"),
    (70, "B+ (Good)"),
)
LOWEST_GRADE = "B (Needs Improvement)"


@dataclass
class ReadinessCheck:
    """One curriculum-wide feature check."""

    name: str
    value: int
    threshold: int
    detail: str = ""
    passed_label: str = "Excellent"
    failed_label: str = "Needs more"

    @property
    def passed(self) -> bool:
        return self.value >= self.threshold

    @property
    def label(self) -> str:
        return self.passed_label if self.passed else self.failed_label

    def describe(self) -> str:
        """e.g. 'Comprehensive Guides: 12 (Needs more)'."""
        return f"{self.name}: {self.detail or self.value} ({self.label})"


@dataclass
class EnterpriseReadiness:
    checks: List[ReadinessCheck] = field(default_factory=list)

    @property
    def features(self) -> int:
        return sum(1 for check in self.checks if check.passed)

    @property
    def score(self) -> int:
        if not self.checks:
            return 0
        return self.features * 100 // len(self.checks)

    @property
    def grade(self) -> str:
        for threshold, grade in GRADES:
            if self.score >= threshold:
                return grade
        return LOWEST_GRADE


def _count_matches(root: Path, pattern: str) -> int:
    return sum(1 for _ in root.rglob(pattern))


def count_keyword_references(root: Path, keywords=PRODUCTION_KEYWORDS) -> int:
    """
    Sum, over keywords, of markdown files mentioning the keyword.

    Matching is case-sensitive, so a file mentioning two keywords counts twice.
    """
    texts = [
        path.read_text(encoding="utf-8", errors="replace")
        for path in root.rglob("*.md")
        if path.is_file()
    ]
    return sum(1 for keyword in keywords for text in texts if keyword in text)


def assess_enterprise_readiness(solutions_path: Path, total_lines: int) -> EnterpriseReadiness:
    """
    Run the curriculum-wide feature checks.

    Args:
        solutions_path: Directory holding the problem directories
        total_lines: Documentation lines counted across audited problems

    Returns:
        EnterpriseReadiness with one ReadinessCheck per feature
    """
    covered_topics = sum(
        1 for topic in ADVANCED_TOPICS if any(solutions_path.rglob(f"*{topic}*"))
    )
    references = count_keyword_references(solutions_path)

    return EnterpriseReadiness(
        checks=[
            ReadinessCheck(
                "Comprehensive Guides", _count_matches(solutions_path, "COMPREHENSIVE-*-GUIDE.md"), 20
            ),
            ReadinessCheck("Hands-On Exercises", _count_matches(solutions_path, "*HANDS-ON*"), 15),
            ReadinessCheck(
                "Troubleshooting Guides",
                _count_matches(solutions_path, "TROUBLESHOOTING-GUIDE.md"),
                30,
            ),
            ReadinessCheck("Enterprise Patterns", _count_matches(solutions_path, "*ENTERPRISE*"), 10),
            ReadinessCheck(
                "Documentation Volume", total_lines, 60000, detail=f"{total_lines} lines"
            ),
            ReadinessCheck(
                "Advanced Topics Coverage",
                covered_topics,
                len(ADVANCED_TOPICS),
                detail=f"{covered_topics}/{len(ADVANCED_TOPICS)}",
                passed_label="Complete",
                failed_label="Incomplete",
            ),
            ReadinessCheck(
                "Production Readiness",
                references,
                100,
                detail=f"{references} references",
            ),
        ]
    )
