"""
SmartCar Keyboard Teleop

Features:
- Raw-mode terminal input with guaranteed restore
- WASD / JK key bindings with Shift for running speed
- Rate-limited cmd_vel publishing with a zero command on shutdown
"""
from .config import Config, TeleopConfig
from .types import VelocityCommand, RateGate, PollResult, ControllerState
from .exceptions import TeleopError, StartupError, PollError, ReadError, RestoreError
from .keymap import map_key_to_command
from .terminal import TerminalRawModeGuard
from .controller import TeleopController
from .keyboard_thread import KeyboardThread

__version__ = "0.1.0"
__all__ = [
    'Config',
    'TeleopConfig',
    'VelocityCommand',
    'RateGate',
    'PollResult',
    'ControllerState',
    'TeleopError',
    'StartupError',
    'PollError',
    'ReadError',
    'RestoreError',
    'map_key_to_command',
    'TerminalRawModeGuard',
    'TeleopController',
    'KeyboardThread',
]
