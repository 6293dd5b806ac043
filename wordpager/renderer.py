"""Render fixed-size pages of lines to a binary output stream."""

from __future__ import annotations

import logging
from enum import Enum
from typing import BinaryIO

from .constants import PagerConstants
from .lines import LineAssembler
from .scanner import ScanStatus

logger = logging.getLogger(__name__)


class PageStatus(Enum):
    """Outcome of rendering one page."""
    MORE = "more"
    END_OF_STREAM = "end_of_stream"
    READ_ERROR = "read_error"
    WRITE_FAILED = "write_failed"

    @property
    def ended(self) -> bool:
        """True when no further pages can be rendered."""
        return self is not PageStatus.MORE


class PageRenderer:
    """Writes up to ``page_size`` lines per call, then a sentinel at the end.

    Lines are written verbatim; a line feed is appended to any line that
    does not already end with one. Once the stream has ended (or an error
    occurred), further calls write nothing and return the final status.
    """

    def __init__(
        self,
        lines: LineAssembler,
        output: BinaryIO,
        page_size: int = PagerConstants.PAGE_SIZE,
    ):
        if page_size < 1:
            raise ValueError(f"Page size must be positive, got {page_size}")
        self.lines = lines
        self.output = output
        self.page_size = page_size
        self.status = PageStatus.MORE
        self.pages_rendered = 0

    def render_page(self) -> PageStatus:
        """Render the next page.

        Returns:
            MORE if further pages may remain, otherwise the reason rendering
            stopped
        """
        if self.status.ended:
            return self.status
        try:
            self.status = self._write_page()
            self.output.flush()
        except OSError as e:
            logger.error(f"Could not write page {self.pages_rendered + 1}: {e}")
            self.status = PageStatus.WRITE_FAILED
        else:
            self.pages_rendered += 1
        return self.status

    def _write_page(self) -> PageStatus:
        for _ in range(self.page_size):
            line = self.lines.next_line()
            if line.status is ScanStatus.END_OF_STREAM:
                self.output.write(PagerConstants.EOF_SENTINEL)
                return PageStatus.END_OF_STREAM
            if line.status is ScanStatus.IO_ERROR:
                logger.warning(f"Stopped rendering after read error: {line.error}")
                self.output.write(PagerConstants.ERROR_SENTINEL)
                return PageStatus.READ_ERROR

            self.output.write(line.data)
            if not line.ends_with_newline:
                self.output.write(b"\n")
            if self.lines.exhausted:
                self.output.write(PagerConstants.EOF_SENTINEL)
                return PageStatus.END_OF_STREAM
        return PageStatus.MORE
