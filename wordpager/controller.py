"""Single-keystroke command loop driving the page renderer."""

from __future__ import annotations

import logging
from enum import Enum

from .keyboard import Command, KeyboardHandler
from .renderer import PageRenderer, PageStatus

logger = logging.getLogger(__name__)


class ControllerState(Enum):
    """States of the input controller.

    RENDERING: pages may remain; ``f`` renders the next one.
    EXHAUSTED: the stream ended or could not be read; only ``q`` does
        anything.
    ENDED: the session is over.
    """
    RENDERING = "rendering"
    EXHAUSTED = "exhausted"
    ENDED = "ended"


class InputController:
    """State machine over keyboard commands.

    The first page is rendered by the initial transition in :meth:`start`,
    before any key is read.
    """

    def __init__(self, renderer: PageRenderer, keyboard: KeyboardHandler):
        self.renderer = renderer
        self.keyboard = keyboard
        self.state = ControllerState.RENDERING
        self.started = False

    def start(self) -> ControllerState:
        """Render the first page."""
        if self.started:
            raise RuntimeError("Controller already started")
        self.started = True
        self._render()
        return self.state

    def handle(self, command: Command) -> ControllerState:
        """Apply one command and return the resulting state."""
        if self.state is ControllerState.ENDED:
            return self.state
        if command is Command.QUIT:
            self.state = ControllerState.ENDED
        elif command is Command.NEXT_PAGE and self.state is ControllerState.RENDERING:
            self._render()
        return self.state

    def run(self) -> PageStatus:
        """Render the first page, then process keystrokes until the session ends.

        Returns:
            The renderer status at the end of the session
        """
        self.start()
        while self.state is not ControllerState.ENDED:
            command = self.keyboard.get_command()
            if command is None:
                logger.debug("Key source closed; ending session")
                command = Command.QUIT
            self.handle(command)
        return self.renderer.status

    def _render(self) -> None:
        status = self.renderer.render_page()
        if status is PageStatus.WRITE_FAILED:
            self.state = ControllerState.ENDED
        elif status.ended:
            self.state = ControllerState.EXHAUSTED
