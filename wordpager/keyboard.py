"""Map single keystrokes to pager commands."""

from enum import Enum
from typing import Optional

from .constants import PagerConstants


class Command(Enum):
    """Commands understood by the input controller."""
    NEXT_PAGE = "next_page"
    QUIT = "quit"
    IGNORED = "ignored"


class KeyboardHandler:
    """Reads keys from a terminal interface and parses them into commands."""

    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface

    def get_command(self) -> Optional[Command]:
        """Block for the next keystroke.

        Returns:
            The parsed Command, or None once the key source is closed
        """
        key = self.terminal.get_key()
        if key is None:
            return None
        return self.parse_key(key)

    def parse_key(self, key) -> Command:
        """Parse a key token into a Command.

        Only the bare ``f`` and ``q`` characters are commands. Curtsies named
        tokens such as ``<SPACE>`` or ``<Ctrl-f>`` are ignored.
        """
        key_str = str(key)
        if key_str == PagerConstants.NEXT_PAGE_KEY:
            return Command.NEXT_PAGE
        if key_str == PagerConstants.QUIT_KEY:
            return Command.QUIT
        return Command.IGNORED
