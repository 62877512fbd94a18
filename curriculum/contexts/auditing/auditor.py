"""
Curriculum Auditor

Scores each problem directory against the files a complete problem carries:

    README.md, main.tf, variables.tf,
    outputs.tf, terraform.tfvars.example     1 point each
    COMPREHENSIVE-*-GUIDE.md                  2 points
    HANDS-ON-EXERCISES.md (or COMPREHENSIVE-
    HANDS-ON-EXERCISES.md)                    2 points
    TROUBLESHOOTING-GUIDE.md                  1 point (optional)

Problems scoring 80% or more are EXCELLENT and count as validated. A
curriculum is world-class when at least 90% of problems validate and the
enterprise readiness score (see readiness.py) is 80% or more.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from curriculum.contexts.auditing.logger import (
    _log_debug,
    _log_info,
    _log_warning,
    log_audit_result,
)
from curriculum.contexts.auditing.readiness import EnterpriseReadiness, assess_enterprise_readiness

REQUIRED_FILES = (
    "README.md",
    "main.tf",
    "variables.tf",
    "outputs.tf",
    "terraform.tfvars.example",
)
GUIDE_PATTERN = "COMPREHENSIVE-*-GUIDE.md"
EXERCISE_FILES = ("HANDS-ON-EXERCISES.md", "COMPREHENSIVE-HANDS-ON-EXERCISES.md")
TROUBLESHOOTING_FILE = "TROUBLESHOOTING-GUIDE.md"
COUNTED_SUFFIXES = {".md", ".tf"}

MAX_SCORE = 10
GUIDE_POINTS = 2
EXERCISE_POINTS = 2

EXCELLENT_THRESHOLD = 80
GOOD_THRESHOLD = 60
DEFAULT_TOTAL_PROBLEMS = 40
WORLD_CLASS_SUCCESS_RATE = 90
WORLD_CLASS_READINESS_SCORE = 80

PROBLEM_RANGES = (
    ("Foundation", 1, 10),
    ("Intermediate", 11, 20),
    ("Advanced", 21, 30),
    ("Expert", 31, 40),
)


@dataclass
class ProblemAudit:
    """Audit result for one problem directory."""

    name: str
    path: Path
    score: int = 0
    missing: List[str] = field(default_factory=list)
    file_count: int = 0
    line_count: int = 0
    number: Optional[int] = None

    @property
    def percentage(self) -> int:
        return self.score * 100 // MAX_SCORE

    @property
    def grade(self) -> str:
        if self.percentage >= EXCELLENT_THRESHOLD:
            return "EXCELLENT"
        elif self.percentage >= GOOD_THRESHOLD:
            return "GOOD"
        return "NEEDS IMPROVEMENT"


@dataclass
class RangeSummary:
    """Totals for one curriculum level, e.g. Foundation (Problems 1-10)."""

    name: str
    start: int
    end: int
    file_count: int = 0
    line_count: int = 0


@dataclass
class CurriculumAudit:
    """Audit result for a whole solutions tree."""

    solutions_path: Path
    total_problems: int
    problems: List[ProblemAudit] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)
    readiness: Optional[EnterpriseReadiness] = None

    @property
    def validated(self) -> int:
        return sum(1 for problem in self.problems if problem.grade == "EXCELLENT")

    @property
    def success_rate(self) -> int:
        if self.total_problems == 0:
            return 0
        return self.validated * 100 // self.total_problems

    @property
    def total_files(self) -> int:
        return sum(problem.file_count for problem in self.problems)

    @property
    def total_lines(self) -> int:
        return sum(problem.line_count for problem in self.problems)

    @property
    def range_breakdown(self) -> List[RangeSummary]:
        """File and line totals per curriculum level, for levels within total_problems."""
        summaries = []
        for name, start, end in PROBLEM_RANGES:
            if start > self.total_problems:
                break
            in_range = [p for p in self.problems if p.number is not None and start <= p.number <= end]
            summaries.append(
                RangeSummary(
                    name=name,
                    start=start,
                    end=end,
                    file_count=sum(p.file_count for p in in_range),
                    line_count=sum(p.line_count for p in in_range),
                )
            )
        return summaries

    @property
    def world_class(self) -> bool:
        return (
            self.readiness is not None
            and self.success_rate >= WORLD_CLASS_SUCCESS_RATE
            and self.readiness.score >= WORLD_CLASS_READINESS_SCORE
        )


def _count_lines(path: Path) -> int:
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return sum(1 for _ in f)


def audit_problem(problem_dir: Path) -> ProblemAudit:
    """
    Score a single problem directory.

    Args:
        problem_dir: Path to a Problem-<id>-<Title> directory

    Returns:
        ProblemAudit with score, missing components and file/line counts
    """
    name = problem_dir.name
    audit = ProblemAudit(name=name, path=problem_dir)

    for filename in REQUIRED_FILES:
        if (problem_dir / filename).is_file():
            audit.score += 1
        else:
            audit.missing.append(f"{name}: Missing {filename}")

    if any(problem_dir.glob(GUIDE_PATTERN)):
        audit.score += GUIDE_POINTS
    else:
        audit.missing.append(f"{name}: Missing comprehensive guide")

    if any((problem_dir / filename).is_file() for filename in EXERCISE_FILES):
        audit.score += EXERCISE_POINTS
    else:
        audit.missing.append(f"{name}: Missing hands-on exercises")

    if (problem_dir / TROUBLESHOOTING_FILE).is_file():
        audit.score += 1

    counted = [
        path for path in problem_dir.rglob("*") if path.is_file() and path.suffix in COUNTED_SUFFIXES
    ]
    audit.file_count = len(counted)
    audit.line_count = sum(_count_lines(path) for path in counted)

    _log_debug(f"{name}: {audit.percentage}% ({audit.score}/{MAX_SCORE}) - {audit.grade}")
    return audit


def find_problem_dir(solutions_path: Path, number: int) -> Optional[Path]:
    """
    Find the directory for problem number, e.g. 7 -> Problem-07-*.

    Returns the first match in sorted order, or None.
    """
    matches = sorted(path for path in solutions_path.glob(f"Problem-{number:02d}-*") if path.is_dir())
    return matches[0] if matches else None


def audit_curriculum(
    solutions_path: Path, total_problems: int = DEFAULT_TOTAL_PROBLEMS
) -> CurriculumAudit:
    """
    Audit problems 1..total_problems under solutions_path.

    Args:
        solutions_path: Directory holding the problem directories
        total_problems: Number of problems the curriculum should contain

    Returns:
        CurriculumAudit with per-problem results and missing components
    """
    _log_info(f"Auditing {total_problems} problem(s) in {solutions_path}")
    audit = CurriculumAudit(solutions_path=solutions_path, total_problems=total_problems)

    for number in range(1, total_problems + 1):
        problem_dir = find_problem_dir(solutions_path, number)

        if problem_dir is None:
            _log_warning(f"Problem {number}: Directory not found")
            audit.missing.append(f"Problem-{number}: Directory missing")
            continue

        problem = audit_problem(problem_dir)
        problem.number = number
        audit.problems.append(problem)
        audit.missing.extend(problem.missing)

    audit.readiness = assess_enterprise_readiness(solutions_path, audit.total_lines)

    log_audit_result(audit)
    return audit
