"""Word tokenizer over a :class:`CircularBuffer`."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .buffer import CircularBuffer, SourceReadError
from .constants import PagerConstants

logger = logging.getLogger(__name__)


class ScanStatus(Enum):
    """Outcome of a scan for the next word or line."""
    FOUND = "found"
    END_OF_STREAM = "end_of_stream"
    OVERLONG = "overlong"
    IO_ERROR = "io_error"


@dataclass(frozen=True)
class ScanResult:
    """Tagged result of :meth:`WordScanner.next_word`."""
    status: ScanStatus
    data: bytes = b""
    error: Optional[SourceReadError] = None

    def __len__(self) -> int:
        return len(self.data)


END_OF_STREAM = ScanResult(ScanStatus.END_OF_STREAM)
OVERLONG = ScanResult(ScanStatus.OVERLONG)


class WordScanner:
    """Pulls whitespace-delimited words out of a buffer, refilling on demand.

    A word is a run of non-delimiter bytes plus at most one trailing
    delimiter (space, tab or line feed), which is consumed with the word.
    """

    def __init__(self, buffer: CircularBuffer):
        self.buffer = buffer

    def next_word(self, max_size: Optional[int] = None) -> ScanResult:
        """Scan the next word of at most ``max_size`` content bytes.

        The trailing delimiter does not count against ``max_size``, so a
        found word is at most ``max_size + 1`` bytes long.

        If the word does not fit, OVERLONG is returned and nothing is
        consumed; the word stays in the window for a later call with a
        larger budget. END_OF_STREAM and IO_ERROR also consume nothing.

        With ``max_size=None`` the scan is unbounded. A word that fills the
        whole backing store is moved aside so scanning can continue, which
        lets words longer than the buffer capacity through intact.

        Args:
            max_size: Content byte budget, or None for no limit

        Returns:
            ScanResult tagged with the outcome

        Raises:
            ValueError: if ``max_size + 1`` does not fit in the backing store
        """
        buf = self.buffer
        limit = None if max_size is None else max_size + 1
        if limit is not None and limit > buf.capacity:
            raise ValueError(
                f"Budget of {max_size} bytes plus delimiter exceeds buffer capacity {buf.capacity}"
            )
        spilled = bytearray()
        count = 0

        while limit is None or count < limit:
            if count == len(buf):
                # Scan reached the window end
                if count == buf.capacity:
                    # Only unbounded scans get here; a read error below loses these bytes
                    spilled += buf.take(count)
                    count = 0
                buf.compact(count)
                try:
                    number_of_bytes = buf.refill(count)
                except SourceReadError as e:
                    if spilled:
                        logger.error(f"Discarding {len(spilled) + count} bytes of a partial word after read error")
                    return ScanResult(ScanStatus.IO_ERROR, error=e)
                if number_of_bytes == 0:
                    if count or spilled:
                        break  # Final word of the stream, no delimiter
                    return END_OF_STREAM

            byte = buf.byte_at(count)
            count += 1
            if byte in PagerConstants.DELIMITERS:
                break
        else:
            logger.debug(f"Word exceeds budget of {max_size} bytes; leaving it in the window")
            return OVERLONG

        if spilled:
            spilled += buf.take(count)
            return ScanResult(ScanStatus.FOUND, bytes(spilled))
        return ScanResult(ScanStatus.FOUND, buf.take(count))
