"""Tests for shared result types."""

from diffcopy.core.types import ChunkOutcome, CopyResult


class TestChunkOutcome:
    """Tests for ChunkOutcome enum."""

    def test_values(self) -> None:
        """Outcomes should compare equal to their string values."""
        assert ChunkOutcome.MATCH == "match"
        assert ChunkOutcome.MISMATCH == "mismatch"
        assert ChunkOutcome.DEST_LONGER == "dest_longer"
        assert ChunkOutcome.DEST_SHORTER == "dest_shorter"


class TestCopyResult:
    """Tests for CopyResult dataclass."""

    def test_defaults(self) -> None:
        """Only bytes_copied is required."""
        result = CopyResult(bytes_copied=8)
        assert result.bytes_written == 0
        assert result.bytes_truncated == 0
        assert result.outcome is None
        assert not result.changed

    def test_changed_when_written(self) -> None:
        """Writes mark the result as changed."""
        assert CopyResult(bytes_copied=8, bytes_written=4).changed

    def test_changed_when_truncated(self) -> None:
        """Truncation alone marks the result as changed."""
        assert CopyResult(bytes_copied=0, bytes_truncated=3).changed
