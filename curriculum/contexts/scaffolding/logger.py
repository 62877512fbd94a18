"""
Scaffolding context logger.

Provides logging interface for scaffolding context with automatic [scaffold] prefix.
All scaffolding modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from curriculum.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[scaffold]"


def setup_scaffolding_logger(log_dir: Path, solutions_path: Path, dry_run: bool = False) -> Path:
    """
    Setup logger for scaffolding context.

    Args:
        log_dir: Directory for this scaffolding session
        solutions_path: Directory holding the problem directories
        dry_run: Recorded in the provenance header

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="scaffold",
        log_dir=log_dir,
        extra_provenance={"Solutions path": solutions_path, "Dry run": dry_run},
    )


# Wrapper functions with automatic [scaffold] prefix


def _log_info(message: str) -> None:
    """Log info message with [scaffold] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [scaffold] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [scaffold] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [scaffold] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [scaffold] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level scaffolding-specific logging helpers


def log_generation_start(count: int, solutions_path: Path, filename: str) -> None:
    """Log start of a generation run."""
    _log_info(f"Generating {filename} for {count} problem(s)")
    _log_debug(f"Solutions path: {solutions_path}")


def log_generation_result(result) -> None:
    """
    Log summary of a generation run.

    Args:
        result: GenerationResult from generate_documents()
    """
    summary = (
        f"written: {len(result.written)}, skipped: {len(result.skipped)}, "
        f"failed: {len(result.failed)} ({result.time_s:.2f}s)"
    )
    if result.success:
        _log_success(f"Generation finished ({summary})")
    else:
        _log_error(f"Generation finished with errors ({summary})")
        for entry, error in result.failed:
            _log_error(f"  Problem {entry.identifier}: {error}")
