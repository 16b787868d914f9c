"""
Key bindings for SmartCar keyboard teleop.

Lowercase keys move at walking speed, Shift (uppercase) at running speed.
"""
from typing import Dict, Tuple

from smartcar_teleop.config import TeleopConfig
from smartcar_teleop.types import VelocityCommand


# Key codes
KEYCODE_W = 0x77
KEYCODE_A = 0x61
KEYCODE_S = 0x73
KEYCODE_D = 0x64
KEYCODE_X = 0x78
KEYCODE_J = 0x6A
KEYCODE_K = 0x6B

# Shifted
KEYCODE_W_CAP = 0x57
KEYCODE_A_CAP = 0x41
KEYCODE_S_CAP = 0x53
KEYCODE_D_CAP = 0x44
KEYCODE_X_CAP = 0x58
KEYCODE_J_CAP = 0x4A
KEYCODE_K_CAP = 0x4B

LINEAR_X = 'linear_x'
LINEAR_Y = 'linear_y'
ANGULAR_Z = 'angular_z'

# key: (axis, direction, run tier)
KEY_BINDINGS: Dict[int, Tuple[str, float, bool]] = {
    KEYCODE_W: (LINEAR_X, 1.0, False),      # forward
    KEYCODE_X: (LINEAR_X, -1.0, False),     # backward
    KEYCODE_A: (LINEAR_Y, 1.0, False),      # strafe left
    KEYCODE_D: (LINEAR_Y, -1.0, False),     # strafe right
    KEYCODE_S: (LINEAR_X, 0.0, False),      # stop
    KEYCODE_J: (ANGULAR_Z, 1.0, False),     # rotate left
    KEYCODE_K: (ANGULAR_Z, -1.0, False),    # rotate right
    KEYCODE_W_CAP: (LINEAR_X, 1.0, True),
    KEYCODE_X_CAP: (LINEAR_X, -1.0, True),
    KEYCODE_A_CAP: (LINEAR_Y, 1.0, True),
    KEYCODE_D_CAP: (LINEAR_Y, -1.0, True),
    KEYCODE_S_CAP: (LINEAR_X, 0.0, True),
    KEYCODE_J_CAP: (ANGULAR_Z, 1.0, True),
    KEYCODE_K_CAP: (ANGULAR_Z, -1.0, True),
}

HELP = """
Reading from keyboard
---------------------
Use WASD keys to control the robot:
  w/x : forward/backward
  a/d : strafe left/right
  j/k : rotate left/right
  s   : stop

Press Shift to move faster (W/A/X/D/J/K).
Any other key stops the robot. Ctrl+C to quit.
"""


def map_key_to_command(key: int, config: TeleopConfig) -> VelocityCommand:
    """
    Map one key code to a velocity command.

    Args:
        key: Received key code (0-255)
        config: Velocity scales

    Returns:
        VelocityCommand with at most one non-zero field; unknown keys
        map to the zero command
    """
    binding = KEY_BINDINGS.get(key)
    if binding is None:
        return VelocityCommand.zero()

    axis, direction, run = binding
    if direction == 0.0:
        return VelocityCommand.zero()

    if axis == ANGULAR_Z:
        speed = config.rotation_rate(run)
    else:
        speed = config.run_vel if run else config.walk_vel

    return VelocityCommand(**{axis: direction * speed})
