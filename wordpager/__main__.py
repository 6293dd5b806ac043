"""Wordpager CLI entry point.

Allows running via `python -m wordpager FILE` and provides the console
script defined in `pyproject.toml`.

Controls:
    f: forward to the next page
    q: quit
Each keypress is read immediately; Enter is not needed.
"""

from __future__ import annotations

import sys
from typing import Optional

from .constants import PagerConstants
from .renderer import PageStatus
from .session import PagerSession
from .terminal import TerminalInterface
from .version import get_version_string


def main(argv: Optional[list[str]] = None) -> int:
    """Run the pager and return the process exit code."""
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return PagerConstants.EXIT_OK
    if len(args) != 1:
        print(PagerConstants.USAGE_MESSAGE.format("wordpager"), file=sys.stderr)
        return PagerConstants.EXIT_USAGE

    path = args[0]
    print(PagerConstants.OPENING_MESSAGE.format(path), flush=True)

    try:
        session = PagerSession.open(path, sys.stdout.buffer)
    except OSError as e:
        print(PagerConstants.OPEN_FAILED_MESSAGE.format(e), file=sys.stderr)
        return PagerConstants.EXIT_OPEN_FAILED

    try:
        with session:
            status = session.run(TerminalInterface())
    except KeyboardInterrupt:
        return PagerConstants.EXIT_INTERRUPTED
    if status is PageStatus.WRITE_FAILED:
        return PagerConstants.EXIT_WRITE_FAILED
    return PagerConstants.EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
