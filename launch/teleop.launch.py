#!/usr/bin/env python3
"""
Teleop launch file - SmartCar keyboard control.

The node runs in its own terminal so it can read raw key presses.
"""
from launch import LaunchDescription
from launch_ros.actions import Node
from launch.actions import DeclareLaunchArgument
from launch.substitutions import LaunchConfiguration
from ament_index_python.packages import get_package_share_directory
import os


def generate_launch_description():

    pkg_dir = get_package_share_directory('smartcar_teleop')
    default_params = os.path.join(pkg_dir, 'config', 'params.yaml')

    params_file = LaunchConfiguration('params_file')
    terminal_prefix = LaunchConfiguration('terminal_prefix')

    return LaunchDescription([
        # ========== Arguments ==========
        DeclareLaunchArgument(
            'params_file',
            default_value=default_params,
            description='Teleop parameters file'
        ),
        DeclareLaunchArgument(
            'terminal_prefix',
            default_value='xterm -e',
            description='Command used to open a terminal for keyboard input'
        ),

        # ========== Teleop Keyboard ==========
        Node(
            package='smartcar_teleop',
            executable='teleop_keyboard_node',
            name='teleop_keyboard',
            output='screen',
            parameters=[params_file],
            prefix=terminal_prefix,
        ),
    ])
