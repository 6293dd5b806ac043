"""Wordpager - a paging viewer for text files."""

from .buffer import CircularBuffer, SourceReadError
from .scanner import WordScanner, ScanResult, ScanStatus
from .lines import LineAssembler, LineResult
from .renderer import PageRenderer, PageStatus
from .controller import InputController, ControllerState
from .keyboard import Command, KeyboardHandler
from .session import PagerSession

__all__ = [
    'CircularBuffer',
    'SourceReadError',
    'WordScanner',
    'ScanResult',
    'ScanStatus',
    'LineAssembler',
    'LineResult',
    'PageRenderer',
    'PageStatus',
    'InputController',
    'ControllerState',
    'Command',
    'KeyboardHandler',
    'PagerSession',
]
