"""Core module - Diff-copy engine, config, and result types."""

from diffcopy.core.config import BUFFER_SIZE, CopyConfig
from diffcopy.core.engine import classify_chunk, copy, copy_bytes, diff_copy
from diffcopy.core.types import ChunkOutcome, CopyResult

__all__ = [
    # Config
    "BUFFER_SIZE",
    "CopyConfig",
    # Engine
    "classify_chunk",
    "copy",
    "copy_bytes",
    "diff_copy",
    # Types
    "ChunkOutcome",
    "CopyResult",
]
