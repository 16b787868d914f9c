"""
Configuration for SmartCar keyboard teleop.

Fixed loop constants plus the velocity scales supplied at startup.
"""
import os
from dataclasses import dataclass, fields
from typing import Dict, Optional

import yaml


class Config:
    """Teleop configuration constants."""

    # ==================== Node ====================
    NODE_NAME = 'teleop_keyboard'
    CMD_VEL_TOPIC = 'cmd_vel'       # default output topic
    CMD_VEL_QUEUE_DEPTH = 1         # only the latest command matters

    # ==================== Loop Timing ====================
    POLL_TIMEOUT_MS = 250           # ms - bounds cancellation latency
    MIN_PUBLISH_INTERVAL = 0.1      # sec - at most 10 Hz on the wire
    SPIN_TIMEOUT = 0.1              # sec - node spin slice while keyboard runs
    THREAD_JOIN_TIMEOUT = 1.0       # sec - > one poll window
    CLOCK_TOLERANCE = 1e-9          # sec - float rounding on clock differences

    # ==================== Rotation Modes ====================
    ROTATION_LINEAR = 'linear'      # j/k use walk_vel, J/K use run_vel
    ROTATION_YAW = 'yaw'            # j/k use yaw_rate, J/K use yaw_rate_run
    ROTATION_MODES = (ROTATION_LINEAR, ROTATION_YAW)


@dataclass(frozen=True)
class TeleopConfig:
    """Velocity scales, immutable for the life of the process."""
    walk_vel: float = 0.2
    run_vel: float = 0.5
    yaw_rate: float = 0.5
    yaw_rate_run: float = 1.0
    rotation_speed: str = Config.ROTATION_LINEAR

    def __post_init__(self):
        for name in ('walk_vel', 'run_vel', 'yaw_rate', 'yaw_rate_run'):
            value = getattr(self, name)
            if not value > 0.0:
                raise ValueError(f'{name} must be positive, got {value}')
        if self.rotation_speed not in Config.ROTATION_MODES:
            raise ValueError(
                f'rotation_speed must be one of {Config.ROTATION_MODES}, '
                f'got {self.rotation_speed!r}'
            )

    def rotation_rate(self, run: bool) -> float:
        """
        Get the yaw rate used by the rotate keys.

        Args:
            run: True for the shifted (run) tier

        Returns:
            Angular rate for the selected tier
        """
        if self.rotation_speed == Config.ROTATION_YAW:
            return self.yaw_rate_run if run else self.yaw_rate
        return self.run_vel if run else self.walk_vel

    @classmethod
    def from_dict(cls, params: Optional[Dict]) -> 'TeleopConfig':
        """Build config from a parameter dict, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in (params or {}).items():
            if key not in known:
                continue
            kwargs[key] = str(value) if key == 'rotation_speed' else float(value)
        return cls(**kwargs)

    @classmethod
    def from_yaml(cls, path: str, node_name: str = Config.NODE_NAME) -> 'TeleopConfig':
        """
        Load config from a ROS 2 parameters file.

        Args:
            path: Path to params.yaml
            node_name: Top-level node section to read

        Returns:
            TeleopConfig (defaults when the file or section is missing)
        """
        if not os.path.exists(path):
            return cls()

        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}

        section = data.get(node_name, {}) or {}
        return cls.from_dict(section.get('ros__parameters', {}))
