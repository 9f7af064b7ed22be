"""diffcopy - Rewrite a file from a byte stream, skipping bytes that already match."""

from diffcopy.core import (
    BUFFER_SIZE,
    ChunkOutcome,
    CopyConfig,
    CopyResult,
    classify_chunk,
    copy,
    copy_bytes,
    diff_copy,
)

__version__ = "0.1.0"

__all__ = [
    "BUFFER_SIZE",
    "ChunkOutcome",
    "CopyConfig",
    "CopyResult",
    "classify_chunk",
    "copy",
    "copy_bytes",
    "diff_copy",
]
