"""
Registry component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol


class ClockPort(Protocol):
    """Port for logical time - enables deterministic testing."""

    def now(self) -> int:
        """Get current logical time."""
        ...
