"""
Data type definitions for SmartCar keyboard teleop.

Provides structured data classes for commands, rate gating and loop state.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class VelocityCommand:
    """Velocity command sent to the motion controller."""
    linear_x: float = 0.0   # forward/back
    linear_y: float = 0.0   # strafe left/right
    angular_z: float = 0.0  # yaw rate

    @classmethod
    def zero(cls) -> 'VelocityCommand':
        """Fail-safe all-zero command."""
        return cls()

    def is_zero(self) -> bool:
        """Check if the command produces no motion."""
        return self.linear_x == 0.0 and self.linear_y == 0.0 and self.angular_z == 0.0


@dataclass
class RateGate:
    """Timestamp of the last published command."""
    last_publish: Optional[float] = None

    def elapsed(self, now: float) -> float:
        """Seconds since the last publish (infinite before the first one)."""
        if self.last_publish is None:
            return float('inf')
        return now - self.last_publish


class PollResult(Enum):
    """Outcome of waiting for keyboard input."""
    READY = 'ready'
    TIMED_OUT = 'timed_out'
    ERROR = 'error'


class ControllerState(Enum):
    """Teleop loop state."""
    IDLE = 'idle'
    POLLING = 'polling'
    GATING = 'gating'
    PUBLISHING = 'publishing'
    SHUTTING_DOWN = 'shutting_down'
    STOPPED = 'stopped'
