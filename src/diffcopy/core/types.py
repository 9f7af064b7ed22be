"""Shared types for diffcopy.

This module defines the per-chunk comparison outcome and the result
returned by a diff-copy call.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ChunkOutcome(str, Enum):
    """Result of comparing one destination chunk against one source chunk."""

    MATCH = "match"
    MISMATCH = "mismatch"
    DEST_LONGER = "dest_longer"
    DEST_SHORTER = "dest_shorter"


@dataclass
class CopyResult:
    """Outcome of a diff-copy call.

    Attributes:
        bytes_copied: Final destination length, equal to the number of
            bytes drained from the source.
        bytes_written: Bytes actually written to the destination.
        bytes_truncated: Stale trailing bytes removed from the destination.
        outcome: Outcome of the last compared chunk, None for an empty source.
    """

    bytes_copied: int
    bytes_written: int = 0
    bytes_truncated: int = 0
    outcome: ChunkOutcome | None = None

    @property
    def changed(self) -> bool:
        """Return True if the destination content or length was modified."""
        return self.bytes_written > 0 or self.bytes_truncated > 0
