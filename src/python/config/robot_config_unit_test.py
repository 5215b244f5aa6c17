import json
import math
import pathlib

import pydantic
import pytest
import session
from models import constants

from config import robot_config


def test_default_config() -> None:
    config = session.get_robot_config()

    assert config.wheel_base_radius == constants.WHEEL_BASE_RADIUS
    assert config.slip_fraction == constants.VELOCITY_ALONG_AXIS_WHEEL_SLIP_FRACTION
    assert config.max_wheel_speed == constants.WHEEL_MAX_ACHIEVABLE_SPEED
    assert (
        config.max_wheel_acceleration
        == constants.WHEEL_MAX_ACHIEVABLE_ACCELERATION_FROM_STOP
    )
    assert [d.location for d in config.drivetrain] == list(
        robot_config.DrivetrainLocation
    )
    for location in robot_config.DrivetrainLocation:
        wheel = config.wheel(location)
        assert wheel.diameter == constants.WHEEL_DIAMETER
        assert wheel.circumference == constants.WHEEL_DIAMETER * math.pi


def test_wheels_are_independent() -> None:
    drivetrain = [
        robot_config.Drivetrain(location=location, wheel=robot_config.Wheel(diameter=d))
        for location, d in zip(robot_config.DrivetrainLocation, [3.8, 3.9, 4.0, 4.1])
    ]
    config = robot_config.OmniDrive(drivetrain=drivetrain)

    assert config.wheel(robot_config.DrivetrainLocation.BACK_LEFT).diameter == 4.0
    assert config.wheel(robot_config.DrivetrainLocation.BACK_RIGHT).diameter == 4.1


@pytest.mark.parametrize(
    "location, motor_name",
    [
        (robot_config.DrivetrainLocation.FRONT_LEFT, "DriveFlWheel"),
        (robot_config.DrivetrainLocation.FRONT_RIGHT, "DriveFrWheel"),
        (robot_config.DrivetrainLocation.BACK_LEFT, "DriveBlWheel"),
        (robot_config.DrivetrainLocation.BACK_RIGHT, "DriveBrWheel"),
    ],
)
def test_motor_name(location: robot_config.DrivetrainLocation, motor_name: str) -> None:
    assert location.motor_name == motor_name


@pytest.mark.parametrize(
    "field, value",
    [
        ("wheel_base_radius", 0.0),
        ("slip_fraction", 1.0),
        ("slip_fraction", -0.1),
        ("max_wheel_speed", -48.0),
        ("max_wheel_acceleration", 0.0),
    ],
)
def test_invalid_config(field: str, value: float) -> None:
    with pytest.raises(pydantic.ValidationError):
        robot_config.OmniDrive(**{field: value})


def test_invalid_wheel() -> None:
    with pytest.raises(pydantic.ValidationError):
        robot_config.Wheel(diameter=0.0)


def test_missing_drivetrain() -> None:
    drivetrain = [
        robot_config.Drivetrain(location=robot_config.DrivetrainLocation.FRONT_LEFT)
    ] * 4
    with pytest.raises(pydantic.ValidationError):
        robot_config.OmniDrive(drivetrain=drivetrain)


def test_from_json(tmp_path: pathlib.Path) -> None:
    config_path = tmp_path / "omnidrive.json"
    config_dict = robot_config.OmniDrive(slip_fraction=0.2).model_dump(mode="json")
    config_path.write_text(json.dumps(config_dict))

    config = robot_config.OmniDrive.from_json(config_path)
    assert config.slip_fraction == 0.2
    assert config == robot_config.OmniDrive(slip_fraction=0.2)


def test_default_config_file() -> None:
    config = session.get_robot_config(file_path=session.get_default_config_path())
    assert config == session.get_robot_config()


def test_from_json_missing_file(tmp_path: pathlib.Path) -> None:
    with pytest.raises(ValueError):
        robot_config.OmniDrive.from_json(tmp_path / "missing.json")
