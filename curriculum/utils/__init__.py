"""
Shared utilities for the curriculum tooling.

Common functionality used across contexts:
- Logger setup with provenance tracking
- Timestamps for run directories
"""

from curriculum.utils.timestamp import now, now_exact

__all__ = ["now", "now_exact"]
