"""
Auditing context logger.

Provides logging interface for auditing context with automatic [audit] prefix.
"""

from pathlib import Path

from loguru import logger

from curriculum.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[audit]"


def setup_auditing_logger(log_dir: Path, solutions_path: Path) -> Path:
    """Setup logger for auditing context. Returns path to log file."""
    return _setup_logger(
        context_name="audit",
        log_dir=log_dir,
        extra_provenance={"Solutions path": solutions_path},
    )


def _log_info(message: str) -> None:
    """Log info message with [audit] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [audit] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [audit] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [audit] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_audit_result(audit) -> None:
    """
    Log summary of a curriculum audit.

    Args:
        audit: CurriculumAudit from audit_curriculum()
    """
    summary = (
        f"{audit.validated}/{audit.total_problems} validated ({audit.success_rate}%), "
        f"{audit.total_files} files, {audit.total_lines} lines"
    )
    if audit.readiness is not None:
        summary += f", enterprise readiness {audit.readiness.score}% ({audit.readiness.grade})"
    if audit.missing:
        _log_warning(f"Audit finished: {summary}, {len(audit.missing)} missing component(s)")
    else:
        _log_success(f"Audit finished: {summary}")
