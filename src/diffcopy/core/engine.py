"""Diff-copy engine.

This module brings a destination file into byte-for-byte agreement with a
source stream while writing as little as possible:
- Source and destination are read in lockstep, one buffer at a time
- Nothing is written while the chunks keep matching
- From the first diverging chunk on, the rest of the source is written verbatim
- The destination is finally truncated to the number of source bytes
"""

from __future__ import annotations

import io
import logging
import os
from typing import BinaryIO

from diffcopy.core.config import CopyConfig
from diffcopy.core.types import ChunkOutcome, CopyResult

logger = logging.getLogger(__name__)

StrPath = str | os.PathLike[str]


def classify_chunk(dest_chunk: bytes, source_chunk: bytes) -> ChunkOutcome:
    """Compare a destination chunk with the source chunk read at the same offset.

    Args:
        dest_chunk: Bytes returned by one destination read.
        source_chunk: Bytes returned by one source read.

    Returns:
        The ChunkOutcome for this pair.
    """
    dest_len = len(dest_chunk)
    source_len = len(source_chunk)
    if dest_len == source_len:
        if dest_chunk == source_chunk:
            return ChunkOutcome.MATCH
        return ChunkOutcome.MISMATCH
    if dest_len > source_len:
        return ChunkOutcome.DEST_LONGER
    return ChunkOutcome.DEST_SHORTER


def _open_destination(path: StrPath) -> BinaryIO:
    """Open path for reading and writing, creating it without truncation."""
    flags = os.O_RDWR | os.O_CREAT | getattr(os, "O_BINARY", 0)
    fd = os.open(path, flags, 0o666)
    try:
        return os.fdopen(fd, "r+b")
    except BaseException:
        os.close(fd)
        raise


def _copy_remaining(source: BinaryIO, dest: BinaryIO, buffer_size: int) -> int:
    """Write every remaining source byte to dest, returning the count."""
    copied = 0
    while True:
        buf = source.read(buffer_size)
        if not buf:
            break
        dest.write(buf)
        copied += len(buf)
    return copied


def _finalize_length(dest: BinaryIO, length: int) -> int:
    """Truncate dest to length if it differs, returning the bytes removed.

    No truncate call is issued when the size already matches, so an
    untouched file keeps its modification time.
    """
    size = dest.seek(0, os.SEEK_END)
    if size == length:
        return 0
    dest.truncate(length)
    return max(size - length, 0)


def diff_copy(
    source: BinaryIO,
    destination: StrPath,
    config: CopyConfig | None = None,
) -> CopyResult:
    """Make destination hold exactly the bytes of source.

    Reads both sides chunk by chunk. While chunks match nothing is written.
    At the first chunk that differs in content or length, the destination
    is rewound to the start of that chunk, overwritten with the source
    chunk, and every remaining source byte is written after it without
    further comparison. The destination is then truncated to the total
    number of source bytes.

    Args:
        source: Binary stream read until it returns no bytes.
        destination: Path of the file to update. Created if absent; its
            parent directory must exist.
        config: Optional tuning (buffer size).

    Returns:
        CopyResult describing what was copied, written and truncated.

    Raises:
        OSError: Any open, read, write, seek or truncate failure,
            propagated unchanged. The destination is left as the last
            completed write produced it.
    """
    config = config or CopyConfig()
    buffer_size = config.buffer_size

    with _open_destination(destination) as dest:
        result = CopyResult(bytes_copied=0)
        while True:
            source_chunk = source.read(buffer_size)
            if not source_chunk:
                break

            offset = dest.tell()
            dest_chunk = dest.read(buffer_size)
            result.outcome = classify_chunk(dest_chunk, source_chunk)
            if result.outcome is ChunkOutcome.MATCH:
                result.bytes_copied += len(source_chunk)
                continue

            logger.debug(
                f"{os.fspath(destination)} diverges at offset {offset} "
                f"({result.outcome.value})"
            )
            dest.seek(offset)
            dest.write(source_chunk)
            result.bytes_copied += len(source_chunk)
            result.bytes_written += len(source_chunk)

            # A longer destination chunk usually means the source hit EOF,
            # but a short source read is not proof of it.
            copied = _copy_remaining(source, dest, buffer_size)
            result.bytes_copied += copied
            result.bytes_written += copied
            break

        result.bytes_truncated = _finalize_length(dest, result.bytes_copied)

    logger.info(
        f"Synced {os.fspath(destination)}: {result.bytes_copied} bytes, "
        f"{result.bytes_written} written, {result.bytes_truncated} truncated"
    )
    return result


def copy(
    source: BinaryIO,
    destination: StrPath,
    config: CopyConfig | None = None,
) -> int:
    """Copy source into destination, writing only from the first difference.

    Args:
        source: Binary stream read until exhaustion.
        destination: Path of the file to update.
        config: Optional tuning (buffer size).

    Returns:
        Number of bytes now in the destination, equal to the bytes read
        from source.

    Raises:
        OSError: Propagated unchanged from the underlying I/O.
    """
    return diff_copy(source, destination, config).bytes_copied


def copy_bytes(
    data: bytes | bytearray | memoryview,
    destination: StrPath,
    config: CopyConfig | None = None,
) -> int:
    """Copy an in-memory buffer into destination.

    Same as copy() with the buffer wrapped in a stream.
    """
    return copy(io.BytesIO(data), destination, config)
