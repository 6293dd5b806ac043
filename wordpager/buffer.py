"""Fixed-capacity byte window over a blocking byte source.

The buffer holds a logical window ``[start, end]`` (inclusive) of bytes that
have been read from the source but not yet consumed. Bytes outside the window
are stale. Callers that need more bytes than the window holds compact the
unconsumed prefix to the front of the store and then call :meth:`refill`.
"""

from __future__ import annotations

import logging
from typing import Optional

from .constants import PagerConstants

logger = logging.getLogger(__name__)


class SourceReadError(OSError):
    """Raised when the underlying byte source fails to produce bytes."""

    def __init__(self, cause: OSError):
        super().__init__(f"error reading source: {cause}")
        self.cause = cause


class CircularBuffer:
    """Sliding window over a fixed ``bytearray`` backing store.

    Invariant: ``0 <= start <= end + 1 <= capacity``.
    """

    def __init__(self, source, capacity: int = PagerConstants.BUFFER_SIZE):
        """Initialize an empty window over ``source``.

        Args:
            source: Object with a ``readinto`` method (e.g. a file opened
                with ``buffering=0`` or ``io.BytesIO``)
            capacity: Size of the backing store in bytes
        """
        if capacity < 1:
            raise ValueError(f"Buffer capacity must be positive, got {capacity}")
        self.source = source
        self.capacity = capacity
        self.store = bytearray(capacity)
        self.start = 0
        self.end = -1
        self.has_data = True  # Nothing has been read yet, so not exhausted

    def __len__(self) -> int:
        """Number of unconsumed bytes in the window."""
        return self.end - self.start + 1

    @property
    def exhausted(self) -> bool:
        """True when the window is empty and the last refill read nothing."""
        return not self.has_data and len(self) == 0

    def byte_at(self, offset: int) -> int:
        """Return the byte ``offset`` positions past the window start."""
        return self.store[self.start + offset]

    def compact(self, count: int) -> None:
        """Move the first ``count`` window bytes to the front of the store."""
        if count > len(self):
            raise ValueError(f"Cannot preserve {count} bytes from a window of {len(self)}")
        if count and self.start:
            self.store[0:count] = self.store[self.start:self.start + count]
        self.start = 0
        self.end = count - 1

    def refill(self, preserved_count: int) -> int:
        """Read fresh bytes after the ``preserved_count`` bytes at offset 0.

        Returns:
            Number of bytes read; 0 when the source is exhausted

        Raises:
            SourceReadError: if the source read fails. The window is left
                holding the preserved bytes.
        """
        if not 0 <= preserved_count <= self.capacity:
            raise ValueError(f"Cannot preserve {preserved_count} bytes in a {self.capacity}-byte store")
        self.start = 0
        self.end = preserved_count - 1
        try:
            number_of_bytes: Optional[int] = self.source.readinto(
                memoryview(self.store)[preserved_count:]
            )
        except OSError as e:
            self.has_data = False
            logger.warning(f"Read from byte source failed: {e}")
            raise SourceReadError(e) from e
        # Non-blocking sources may report None; treat as no data
        number_of_bytes = number_of_bytes or 0
        self.has_data = number_of_bytes > 0
        self.end += number_of_bytes
        logger.debug(
            f"Refilled buffer: preserved={preserved_count} read={number_of_bytes} end={self.end}"
        )
        return number_of_bytes

    def take(self, count: int) -> bytes:
        """Remove ``count`` bytes from the window start and return them."""
        if count > len(self):
            raise ValueError(f"Cannot take {count} bytes from a window of {len(self)}")
        data = bytes(self.store[self.start:self.start + count])
        self.start += count
        return data
