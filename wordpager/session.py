"""Pager session: one file, one buffer, one output stream.

All mutable pager state (the buffer window, the open file handle and the
terminal mode) belongs to a :class:`PagerSession`. Independent sessions do
not share anything, so several can run side by side in tests.
"""

from __future__ import annotations

import logging
from typing import BinaryIO, Optional

from .buffer import CircularBuffer
from .constants import PagerConstants
from .controller import InputController
from .keyboard import KeyboardHandler
from .lines import LineAssembler
from .renderer import PageRenderer, PageStatus
from .scanner import WordScanner
from .terminal import TerminalInterface

logger = logging.getLogger(__name__)


class PagerSession:
    """Wires a byte source through the buffer, scanner, assembler and renderer.

    The session owns ``source`` and closes it when the session is closed.
    """

    def __init__(
        self,
        source,
        output: BinaryIO,
        line_width: int = PagerConstants.LINE_WIDTH,
        page_size: int = PagerConstants.PAGE_SIZE,
        capacity: Optional[int] = None,
    ):
        """Create a session.

        Args:
            source: Byte source with a ``readinto`` method
            output: Binary stream that receives rendered pages
            line_width: Maximum bytes per line
            page_size: Lines per page
            capacity: Buffer capacity; defaults to ``(line_width + 1) * page_size``
        """
        if capacity is None:
            capacity = (line_width + 1) * page_size
        if capacity < line_width + 1:
            raise ValueError(
                f"Buffer capacity {capacity} cannot hold a {line_width}-byte line plus delimiter"
            )
        self.source = source
        self.buffer = CircularBuffer(source, capacity)
        self.scanner = WordScanner(self.buffer)
        self.lines = LineAssembler(self.scanner, line_width)
        self.renderer = PageRenderer(self.lines, output, page_size)

    @classmethod
    def open(cls, path: str, output: BinaryIO, **kwargs) -> 'PagerSession':
        """Open ``path`` unbuffered for reading and create a session over it.

        Raises:
            OSError: if the file cannot be opened
        """
        source = open(path, 'rb', buffering=0)
        logger.debug(f"Opened {path} for paging")
        try:
            return cls(source, output, **kwargs)
        except BaseException:
            source.close()
            raise

    def __enter__(self) -> 'PagerSession':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the byte source."""
        self.source.close()

    def run(self, terminal: TerminalInterface) -> PageStatus:
        """Run the interactive loop with raw keyboard input.

        The terminal mode is restored before this method returns or raises.
        """
        with terminal:
            controller = InputController(self.renderer, KeyboardHandler(terminal))
            return controller.run()
