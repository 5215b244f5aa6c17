import pathlib
from typing import Dict, Optional

import system_info
from config import robot_config
from drivers import motor

_CONFIG_PATH = system_info.get_root_project_directory() / "env" / "omnidrive.json"


def get_robot_config(
    *, file_path: Optional[pathlib.Path] = None
) -> robot_config.OmniDrive:
    """The robot's config. Defaults to the built in geometry and limits unless a config
    file is given.
    """
    if file_path is not None:
        return robot_config.OmniDrive.from_json(file_path)

    return robot_config.OmniDrive()


def get_default_config_path() -> pathlib.Path:
    return _CONFIG_PATH


def get_robot_motors(
    config: robot_config.OmniDrive,
) -> Dict[robot_config.DrivetrainLocation, motor.SimulatedMotor]:
    """Simulated motors for every drivetrain of the robot."""
    return {
        drivetrain.location: motor.SimulatedMotor.from_drivetrain(drivetrain, config)
        for drivetrain in config.drivetrain
    }
