"""Shared fakes for pager tests."""

import errno
import io

import pytest


class ChunkedSource(io.RawIOBase):
    """Byte source that returns short reads and can fail on demand.

    Args:
        data: Bytes to serve
        chunk_size: Maximum bytes returned per read (None for no limit)
        fail_at: 1-based read number that raises EIO, and every read after it
    """

    def __init__(self, data: bytes, chunk_size=None, fail_at=None):
        self._data = data
        self._pos = 0
        self.chunk_size = chunk_size
        self.fail_at = fail_at
        self.reads = 0

    def readable(self):
        return True

    def readinto(self, b):
        self.reads += 1
        if self.fail_at is not None and self.reads >= self.fail_at:
            raise OSError(errno.EIO, "Input/output error")
        n = len(b) if self.chunk_size is None else min(len(b), self.chunk_size)
        chunk = self._data[self._pos:self._pos + n]
        b[:len(chunk)] = chunk
        self._pos += len(chunk)
        return len(chunk)


@pytest.fixture
def make_source():
    """Factory for ChunkedSource instances."""
    return ChunkedSource
