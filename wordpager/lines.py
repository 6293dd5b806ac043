"""Compose width-bounded lines from scanned words."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from .buffer import SourceReadError
from .constants import PagerConstants
from .scanner import ScanStatus, WordScanner


@dataclass(frozen=True)
class LineResult:
    """Tagged result of :meth:`LineAssembler.next_line`.

    ``status`` is FOUND, END_OF_STREAM or IO_ERROR; OVERLONG is handled
    inside the assembler and never returned.
    """
    status: ScanStatus
    data: bytes = b""
    error: Optional[SourceReadError] = None

    def __len__(self) -> int:
        return len(self.data)

    @property
    def ends_with_newline(self) -> bool:
        return bool(self.data) and self.data[-1] == PagerConstants.LINE_FEED


class LineAssembler:
    """Builds lines of at most ``line_width`` bytes out of whole words.

    A line ends after a word terminated by a line feed, or when it reaches
    ``line_width``. A word that does not fit in the rest of the line starts
    the next one. A single word longer than ``line_width`` is passed through
    whole as a line of its own.
    """

    def __init__(self, scanner: WordScanner, line_width: int = PagerConstants.LINE_WIDTH):
        if line_width < 1:
            raise ValueError(f"Line width must be positive, got {line_width}")
        self.scanner = scanner
        self.line_width = line_width

    @property
    def exhausted(self) -> bool:
        """True when no more lines can be produced without a new read."""
        return self.scanner.buffer.exhausted

    def next_line(self) -> LineResult:
        line = bytearray()
        while True:
            # The first word of a line is never too long
            budget = self.line_width - len(line) if line else None
            word = self.scanner.next_word(budget)
            if word.status is ScanStatus.FOUND:
                line += word.data
                if word.data[-1] == PagerConstants.LINE_FEED or len(line) >= self.line_width:
                    break
            elif word.status is ScanStatus.OVERLONG:
                break
            elif word.status is ScanStatus.END_OF_STREAM:
                if not line:
                    return LineResult(ScanStatus.END_OF_STREAM)
                break
            else:
                return LineResult(ScanStatus.IO_ERROR, error=word.error)
        return LineResult(ScanStatus.FOUND, bytes(line))

    def iter_lines(self) -> Iterator[bytes]:
        """Yield successive lines until the end of the stream.

        Raises:
            SourceReadError: if the byte source fails
        """
        while True:
            result = self.next_line()
            if result.status is ScanStatus.END_OF_STREAM:
                return
            if result.status is ScanStatus.IO_ERROR:
                raise result.error
            yield result.data
