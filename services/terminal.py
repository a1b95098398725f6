"""
Terminal capability set used by the game loop, and its curses implementation.

The core only reads keys and writes text at screen positions. Entering and
leaving raw mode belongs to CursesTerminal's context manager.
"""

import curses
import logging
from typing import Optional, Tuple

logger = logging.getLogger(__name__)


class TerminalTooSmallError(Exception):
    """Raised when the terminal cannot fit the board and the status lines."""

    def __init__(self, min_cols: int, min_rows: int, cols: int, rows: int):
        self.min_cols = min_cols
        self.min_rows = min_rows
        self.cols = cols
        self.rows = rows
        super().__init__(f"Terminal too small! Need at least {min_cols}x{min_rows}")


class Terminal:
    """
    Base class/interface for the terminal the game draws on.

    Keys are reported by their curses names: printable characters as
    themselves ("a", "Q"), special keys as "KEY_LEFT", "KEY_UP" and so on.
    """

    def read_key(self) -> Optional[str]:
        """Return the next buffered key, or None when nothing is pending in non-blocking mode."""
        raise NotImplementedError

    def write(self, row: int, col: int, text: str) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError

    def refresh(self) -> None:
        raise NotImplementedError

    def size(self) -> Tuple[int, int]:
        """Return (rows, cols)."""
        raise NotImplementedError

    def set_blocking(self, blocking: bool) -> None:
        raise NotImplementedError

    def ensure_size(self, min_cols: int, min_rows: int) -> None:
        rows, cols = self.size()
        if rows < min_rows or cols < min_cols:
            logger.error(f"Terminal is {cols}x{rows}, need at least {min_cols}x{min_rows}")
            raise TerminalTooSmallError(min_cols, min_rows, cols, rows)


class CursesTerminal(Terminal):
    """
    curses-backed terminal.

    Use as a context manager: entering puts the terminal into raw,
    non-echoing, cursor-hidden, non-blocking mode; leaving restores it,
    also when an exception escapes the block.
    """

    def __init__(self):
        self.screen = None

    def __enter__(self) -> "CursesTerminal":
        self.screen = curses.initscr()
        try:
            curses.noecho()
            curses.cbreak()
            self._set_cursor(0)
            self.screen.keypad(True)
            self.screen.nodelay(True)
        except BaseException:
            # __exit__ does not run when __enter__ raises
            self._restore()
            raise
        logger.debug("Entered curses mode")
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self._restore()
        logger.debug("Left curses mode")
        return False

    def _restore(self) -> None:
        try:
            self.screen.keypad(False)
        except curses.error:
            logger.debug("keypad(False) failed while restoring the terminal")
        curses.nocbreak()
        curses.echo()
        self._set_cursor(1)
        curses.endwin()

    @staticmethod
    def _set_cursor(visibility: int) -> None:
        try:
            curses.curs_set(visibility)
        except curses.error:
            # Some terminals cannot change cursor visibility
            logger.debug(f"curs_set({visibility}) not supported by this terminal")

    def read_key(self) -> Optional[str]:
        ch = self.screen.getch()
        if ch == -1:
            return None
        return curses.keyname(ch).decode("ascii", "replace")

    def write(self, row: int, col: int, text: str) -> None:
        try:
            self.screen.addstr(row, col, text)
        except curses.error:
            # addstr reports an error after writing the bottom-right cell
            logger.debug(f"addstr failed at ({row}, {col})")

    def clear(self) -> None:
        self.screen.clear()

    def refresh(self) -> None:
        self.screen.refresh()

    def size(self) -> Tuple[int, int]:
        return self.screen.getmaxyx()

    def set_blocking(self, blocking: bool) -> None:
        self.screen.nodelay(not blocking)
