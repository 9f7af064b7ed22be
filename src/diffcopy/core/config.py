"""Configuration for the diff-copy engine.

This module defines the buffer size used for chunk comparison.
"""

from __future__ import annotations

from dataclasses import dataclass

# Bytes read from each side per comparison step
BUFFER_SIZE = 8 * 1024


@dataclass
class CopyConfig:
    """Tuning for a single diff-copy call.

    Attributes:
        buffer_size: Maximum bytes read from source and destination per
            comparison step (default 8 KiB).
    """

    buffer_size: int = BUFFER_SIZE

    def __post_init__(self) -> None:
        """Validate buffer size."""
        if isinstance(self.buffer_size, bool) or not isinstance(self.buffer_size, int):
            raise ValueError(f"buffer_size must be an integer, got {self.buffer_size!r}")
        if self.buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {self.buffer_size}")
