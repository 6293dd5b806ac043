"""Terminal interface using Blessed for mode handling and Curtsies for input."""

import contextlib
import logging
import os
import sys
from typing import Optional, TextIO

import blessed

logger = logging.getLogger(__name__)


class TerminalInterface:
    """Raw single-keystroke input as a scoped resource.

    Use as a context manager. On entry, when stdin is a terminal, Blessed's
    ``cbreak()`` mode is entered (no line buffering, no echo) and a Curtsies
    ``Input`` reader is opened. On exit both are restored in reverse order,
    whether the block ended normally or by an exception.

    When stdin is not a terminal, keys are read one character at a time from
    stdin and the terminal mode is left alone.
    """

    def __init__(self, terminal: Optional[blessed.Terminal] = None, stdin: Optional[TextIO] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.stdin = stdin or sys.stdin
        self._stack: Optional[contextlib.ExitStack] = None
        self._curtsies_input = None

    @property
    def is_interactive(self) -> bool:
        """True when keystrokes come from a terminal."""
        try:
            return os.isatty(self.stdin.fileno())
        except (AttributeError, OSError, ValueError):
            return False

    @property
    def raw_mode_active(self) -> bool:
        return self._curtsies_input is not None

    def __enter__(self) -> 'TerminalInterface':
        self.setup()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cleanup()

    def setup(self) -> None:
        """Enter raw input mode if reading from a terminal."""
        if self._stack is not None:
            raise RuntimeError("Terminal input is already set up")
        stack = contextlib.ExitStack()
        if self.is_interactive:
            from curtsies import Input  # type: ignore
            try:
                stack.enter_context(self.term.cbreak())
                self._curtsies_input = stack.enter_context(
                    Input(in_stream=self.stdin, keynames='curtsies', sigint_event=False)
                )
            except BaseException:
                stack.close()
                self._curtsies_input = None
                raise
            logger.debug("Entered raw keyboard mode")
        self._stack = stack

    def cleanup(self) -> None:
        """Restore the terminal mode captured by :meth:`setup`."""
        if self._stack is None:
            return
        stack, self._stack = self._stack, None
        self._curtsies_input = None
        stack.close()
        logger.debug("Restored terminal mode")

    def get_key(self) -> Optional[str]:
        """Block until a single keypress arrives.

        Returns:
            The key as a string (a Curtsies token in raw mode), or None when
            the input stream is closed
        """
        if self._curtsies_input is not None:
            try:
                return str(next(self._curtsies_input))
            except StopIteration:
                return None
        key = self.stdin.read(1)
        return key or None
