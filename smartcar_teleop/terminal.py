"""
Terminal raw-mode handling for keyboard teleop.

Puts the input terminal into unbuffered, unechoed mode for the lifetime of
a `with` block and restores the previous settings on the way out.
"""
import termios
import tty
from typing import List, Optional

from smartcar_teleop.exceptions import RestoreError, StartupError


class TerminalRawModeGuard:
    """Scoped raw-mode acquisition for one terminal file descriptor."""

    def __init__(self, fd: int):
        """
        Initialize guard.

        Args:
            fd: Terminal input file descriptor
        """
        self.fd = fd
        self._saved: Optional[List] = None

    @property
    def active(self) -> bool:
        """True while raw mode is applied."""
        return self._saved is not None

    def acquire(self) -> None:
        """
        Save the current attributes and switch to raw input.

        Raises:
            StartupError: if the attributes cannot be read or applied
        """
        if self.active:
            return

        try:
            saved = termios.tcgetattr(self.fd)
        except (termios.error, OSError) as e:
            raise StartupError(f'tcgetattr failed on fd {self.fd}: {e}') from e

        raw = list(saved)
        raw[tty.CC] = list(saved[tty.CC])
        raw[tty.LFLAG] &= ~(termios.ICANON | termios.ECHO)
        # One byte per read, no inter-byte timer
        raw[tty.CC][termios.VMIN] = 1
        raw[tty.CC][termios.VTIME] = 0

        try:
            termios.tcsetattr(self.fd, termios.TCSANOW, raw)
        except (termios.error, OSError) as e:
            raise StartupError(f'tcsetattr failed on fd {self.fd}: {e}') from e

        self._saved = saved

    def release(self) -> None:
        """
        Restore the saved attributes. Safe to call more than once.

        Raises:
            RestoreError: if the attributes cannot be applied (only tried once)
        """
        if self._saved is None:
            return

        saved, self._saved = self._saved, None
        try:
            termios.tcsetattr(self.fd, termios.TCSANOW, saved)
        except (termios.error, OSError) as e:
            raise RestoreError(f'tcsetattr restore failed on fd {self.fd}: {e}') from e

    def __enter__(self) -> 'TerminalRawModeGuard':
        self.acquire()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()
