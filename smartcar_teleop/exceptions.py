"""Errors raised by the keyboard teleop loop."""


class TeleopError(Exception):
    """Base class for fatal teleop errors."""


class StartupError(TeleopError):
    """Terminal attributes could not be captured or changed."""


class PollError(TeleopError):
    """Waiting for keyboard input failed."""


class ReadError(TeleopError):
    """Input was reported ready but reading it failed."""


class RestoreError(TeleopError):
    """Saved terminal attributes could not be put back."""
