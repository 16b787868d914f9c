#!/usr/bin/env python3
"""Unit tests for teleop configuration."""
import os
import tempfile
from dataclasses import FrozenInstanceError

import pytest
import yaml

from smartcar_teleop.config import Config, TeleopConfig


# ==================== Fixtures ====================

@pytest.fixture
def params_file():
    """Create a temporary ROS 2 params YAML file."""
    params = {
        'teleop_keyboard': {
            'ros__parameters': {
                'walk_vel': 0.3,
                'run_vel': 0.8,
                'yaw_rate': 0.6,
                'yaw_rate_run': 1.2,
                'rotation_speed': 'yaw',
                'cmd_vel_topic': 'cmd_vel',
            }
        }
    }
    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        yaml.dump(params, f)
        path = f.name
    yield path
    os.unlink(path)


# ==================== Tests ====================

class TestDefaults:
    def test_default_scales(self):
        config = TeleopConfig()
        assert config.walk_vel == 0.2
        assert config.run_vel == 0.5
        assert config.yaw_rate == 0.5
        assert config.yaw_rate_run == 1.0
        assert config.rotation_speed == Config.ROTATION_LINEAR

    def test_loop_constants(self):
        assert Config.POLL_TIMEOUT_MS == 250
        assert Config.MIN_PUBLISH_INTERVAL == 0.1

    def test_immutable(self):
        config = TeleopConfig()
        with pytest.raises(FrozenInstanceError):
            config.walk_vel = 1.0


class TestValidation:
    @pytest.mark.parametrize('field', ['walk_vel', 'run_vel', 'yaw_rate', 'yaw_rate_run'])
    def test_non_positive_rejected(self, field):
        with pytest.raises(ValueError):
            TeleopConfig(**{field: 0.0})
        with pytest.raises(ValueError):
            TeleopConfig(**{field: -0.1})

    def test_unknown_rotation_mode(self):
        with pytest.raises(ValueError):
            TeleopConfig(rotation_speed='diagonal')


class TestRotationRate:
    def test_linear_mode(self):
        config = TeleopConfig()
        assert config.rotation_rate(run=False) == config.walk_vel
        assert config.rotation_rate(run=True) == config.run_vel

    def test_yaw_mode(self):
        config = TeleopConfig(rotation_speed='yaw')
        assert config.rotation_rate(run=False) == config.yaw_rate
        assert config.rotation_rate(run=True) == config.yaw_rate_run


class TestLoading:
    def test_from_yaml(self, params_file):
        config = TeleopConfig.from_yaml(params_file)
        assert config.walk_vel == 0.3
        assert config.run_vel == 0.8
        assert config.yaw_rate_run == 1.2
        assert config.rotation_speed == 'yaw'

    def test_missing_file(self):
        assert TeleopConfig.from_yaml('/nonexistent/params.yaml') == TeleopConfig()

    def test_missing_node_section(self, params_file):
        assert TeleopConfig.from_yaml(params_file, node_name='other_node') == TeleopConfig()

    def test_from_dict_ignores_unknown(self):
        config = TeleopConfig.from_dict({'walk_vel': 1, 'cmd_vel_topic': 'x'})
        assert config.walk_vel == 1.0

    def test_shipped_params_file(self):
        path = os.path.join(os.path.dirname(__file__), '..', 'config', 'params.yaml')
        assert TeleopConfig.from_yaml(path) == TeleopConfig()
