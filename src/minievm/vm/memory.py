"""
Linear memory for the minievm engine.

Memory is a byte buffer that starts empty and grows, zero-filled, to cover
every store. It never shrinks.
"""
import logging
import sys
from typing import Optional

from .errors import MemoryLimitExceeded
from .word import WORD_BYTES, to_bytes

logger = logging.getLogger("minievm.vm.memory")

# Suggested cap on memory size (16 MiB), used by the CLI
DEFAULT_MEMORY_LIMIT = 16 * 1024 * 1024

# Largest buffer the host can index; applies even when unbounded
ADDRESSABLE_LIMIT = sys.maxsize


class LinearMemory:
    """Byte-addressable, auto-expanding memory."""

    __slots__ = ("_data", "limit")

    def __init__(self, limit: Optional[int] = None):
        """
        Args:
            limit: Maximum size in bytes (None = unbounded)
        """
        self._data = bytearray()
        self.limit = limit

    def _expand(self, offset: int, size: int) -> None:
        end = offset + size
        limit = ADDRESSABLE_LIMIT if self.limit is None else self.limit
        if end > limit:
            raise MemoryLimitExceeded(offset, size, limit)
        if end > len(self._data):
            logger.debug("memory grows %d -> %d bytes", len(self._data), end)
            self._data.extend(bytes(end - len(self._data)))

    def store32(self, offset: int, value: int) -> None:
        """Write ``value`` as a 32-byte big-endian word at ``offset``."""
        self._expand(offset, WORD_BYTES)
        self._data[offset:offset + WORD_BYTES] = to_bytes(value, WORD_BYTES)

    def store8(self, offset: int, value: int) -> None:
        """
        Write the least significant byte of ``value`` at ``offset``.

        Growth follows the same rule as ``store32`` (a full word past
        ``offset``), so the remaining new bytes stay zero.
        """
        self._expand(offset, WORD_BYTES)
        self._data[offset] = value & 0xFF

    def read(self, offset: int, size: int) -> bytes:
        """Copy ``size`` bytes from ``offset``; bytes beyond the end read as zero."""
        chunk = bytes(self._data[offset:offset + size])
        return chunk.ljust(size, b"\x00")

    def snapshot(self) -> bytes:
        return bytes(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self):
        return f"LinearMemory({len(self._data)} bytes)"
