#!/usr/bin/env python3
"""
Keyboard teleop node for SmartCar.

Reads key presses from the terminal and publishes Twist on cmd_vel.
"""
import sys
import threading

import rclpy
from geometry_msgs.msg import Twist
from rclpy.node import Node
from rclpy.signals import SignalHandlerOptions

from smartcar_teleop.config import Config, TeleopConfig
from smartcar_teleop.controller import TeleopController
from smartcar_teleop.keyboard_thread import KeyboardThread
from smartcar_teleop.keymap import HELP
from smartcar_teleop.types import VelocityCommand


class SmartCarTeleopNode(Node):
    """Owns the parameters and the cmd_vel publisher."""

    def __init__(self) -> None:
        super().__init__(Config.NODE_NAME)

        defaults = TeleopConfig()
        self.declare_parameter('walk_vel', defaults.walk_vel)
        self.declare_parameter('run_vel', defaults.run_vel)
        self.declare_parameter('yaw_rate', defaults.yaw_rate)
        self.declare_parameter('yaw_rate_run', defaults.yaw_rate_run)
        self.declare_parameter('rotation_speed', defaults.rotation_speed)
        self.declare_parameter('cmd_vel_topic', Config.CMD_VEL_TOPIC)

        self.teleop_config = TeleopConfig.from_dict({
            name: self.get_parameter(name).value
            for name in ('walk_vel', 'run_vel', 'yaw_rate', 'yaw_rate_run', 'rotation_speed')
        })
        topic = str(self.get_parameter('cmd_vel_topic').value)

        self.publisher = self.create_publisher(Twist, topic, Config.CMD_VEL_QUEUE_DEPTH)

        self.get_logger().info(HELP)
        self.get_logger().info(
            f'Publishing {topic} with walk={self.teleop_config.walk_vel:.2f}, '
            f'run={self.teleop_config.run_vel:.2f}, '
            f'rotation={self.teleop_config.rotation_speed}'
        )

    def publish_command(self, command: VelocityCommand) -> None:
        """Publish one VelocityCommand as Twist."""
        twist = Twist()
        twist.linear.x = command.linear_x
        twist.linear.y = command.linear_y
        twist.angular.z = command.angular_z
        self.publisher.publish(twist)


def main(args=None) -> None:
    """Run keyboard teleop until Ctrl+C or a terminal failure."""
    # Ctrl+C must reach us as KeyboardInterrupt so the zero command can still be sent
    rclpy.init(args=args, signal_handler_options=SignalHandlerOptions.NO)
    node = SmartCarTeleopNode()

    stop_event = threading.Event()
    controller = TeleopController(
        node.teleop_config,
        node.publish_command,
        input_fd=sys.stdin.fileno(),
        logger=node.get_logger().debug,
    )
    keyboard = KeyboardThread(controller, stop_event)
    keyboard.start()

    try:
        while rclpy.ok() and not stop_event.is_set():
            rclpy.spin_once(node, timeout_sec=Config.SPIN_TIMEOUT)
    except KeyboardInterrupt:
        pass
    finally:
        keyboard.stop(Config.THREAD_JOIN_TIMEOUT)
        if keyboard.is_alive():
            node.get_logger().error('Keyboard loop did not exit in time')
        elif keyboard.failed:
            node.get_logger().error(str(keyboard.error))
        else:
            node.get_logger().info('Stopped, terminal restored')

        node.destroy_node()
        rclpy.try_shutdown()

    if keyboard.failed or keyboard.is_alive():
        sys.exit(1)


if __name__ == '__main__':
    main()
