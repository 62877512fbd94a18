"""Unit tests for run log setup."""

import pytest
from loguru import logger

from curriculum.contexts.scaffolding.logger import _log_info, setup_scaffolding_logger


@pytest.mark.unit
def test_setup_scaffolding_logger_writes_provenance(tmp_path):
    log_dir = tmp_path / "logs" / "generate_20251114_123456"

    log_file = setup_scaffolding_logger(log_dir, tmp_path / "Solutions", dry_run=True)
    _log_info("Generating HANDS-ON-EXERCISES.md for 10 problem(s)")
    logger.remove()

    assert log_file == log_dir / "scaffold.log"
    text = log_file.read_text(encoding="utf-8")
    assert "Working directory:" in text
    assert f"Solutions path: {tmp_path / 'Solutions'}" in text
    assert "Dry run: True" in text
    assert "[scaffold] Generating HANDS-ON-EXERCISES.md for 10 problem(s)" in text
