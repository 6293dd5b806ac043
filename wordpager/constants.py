"""Constants and configuration for the pager."""

class PagerConstants:
    """Central configuration constants for the pager."""

    # Page layout
    PAGE_SIZE = 20  # Lines per page
    LINE_WIDTH = 80  # Maximum bytes per rendered line
    BUFFER_SIZE = (LINE_WIDTH + 1) * PAGE_SIZE  # Backing store capacity in bytes

    # Tokenizing (raw bytes; carriage return is ordinary content)
    DELIMITERS = frozenset(b" \t\n")
    LINE_FEED = 0x0A

    # Commands
    NEXT_PAGE_KEY = 'f'
    QUIT_KEY = 'q'

    # Sentinel lines written to the output stream
    EOF_SENTINEL = b"=== EOF ===\n"
    ERROR_SENTINEL = b"(error reading file)\n"

    # Exit codes
    EXIT_OK = 0
    EXIT_OPEN_FAILED = 1
    EXIT_USAGE = 2
    EXIT_WRITE_FAILED = 3
    EXIT_INTERRUPTED = 130

    # Messages
    USAGE_MESSAGE = "Usage:\n{} <filename>"
    OPENING_MESSAGE = "Opening file {}..."
    OPEN_FAILED_MESSAGE = "open() failed: {}"
