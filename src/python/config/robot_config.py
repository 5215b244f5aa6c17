from __future__ import annotations

import enum
import functools
import json
import math
import pathlib
from typing import List

import pydantic
from models import constants


class Wheel(pydantic.BaseModel):
    """A mecanum drive wheel on the robot."""

    # Effective rolling diameter, in inches.
    diameter: float = pydantic.Field(default=constants.WHEEL_DIAMETER, gt=0.0)

    @property
    def circumference(self) -> float:
        return self.diameter * math.pi

    def __hash__(self) -> int:
        return hash((self.__class__, self.diameter))


# Str inheritance required so pydantic treats this as a string when
# serializing base model objects.
class DrivetrainLocation(str, enum.Enum):
    """The location of the drivetrain on the corners of the chassis."""

    FRONT_LEFT = "FRONT_LEFT"
    FRONT_RIGHT = "FRONT_RIGHT"
    BACK_LEFT = "BACK_LEFT"
    BACK_RIGHT = "BACK_RIGHT"

    @property
    def motor_name(self) -> str:
        """Name of the motor driving the wheel at this location, e.g. DriveFlWheel."""
        front_back, left_right = self.value.split("_")
        return f"Drive{front_back[0]}{left_right[0].lower()}Wheel"


class Drivetrain(pydantic.BaseModel):
    """A single wheel + motor and its location. There are 4 drivetrains on the omni
    drive, one on each corner mounted at 45 degrees to the body axes.
    """

    location: DrivetrainLocation
    wheel: Wheel = Wheel()

    def __hash__(self) -> int:
        return hash((self.__class__, self.location, self.wheel))


class OmniDrive(pydantic.BaseModel):
    """A four wheel omnidirectional drive base. Geometry and limits are fixed for the
    lifetime of the drive.
    """

    drivetrain: List[Drivetrain] = pydantic.Field(
        default_factory=lambda: [
            Drivetrain(location=location) for location in DrivetrainLocation
        ]
    )

    # Distance between the center of the wheel base and the wheels, in inches.
    wheel_base_radius: float = pydantic.Field(
        default=constants.WHEEL_BASE_RADIUS, gt=0.0
    )
    # 0.0 = no slippage; 1.0 = complete slippage. Complete slippage would make the
    # drive uncontrollable along the wheel axes so it is excluded.
    slip_fraction: float = pydantic.Field(
        default=constants.VELOCITY_ALONG_AXIS_WHEEL_SLIP_FRACTION, ge=0.0, lt=1.0
    )
    # Inches/s
    max_wheel_speed: float = pydantic.Field(
        default=constants.WHEEL_MAX_ACHIEVABLE_SPEED, gt=0.0
    )
    # Inches/s^2
    max_wheel_acceleration: float = pydantic.Field(
        default=constants.WHEEL_MAX_ACHIEVABLE_ACCELERATION_FROM_STOP, gt=0.0
    )

    @pydantic.field_validator("drivetrain")
    @classmethod
    def _one_drivetrain_per_location(
        cls, drivetrain: List[Drivetrain]
    ) -> List[Drivetrain]:
        locations = [d.location for d in drivetrain]
        if sorted(locations) != sorted(DrivetrainLocation):
            raise ValueError(f"Expected one drivetrain per location, got {locations=}")
        return drivetrain

    @classmethod
    def from_json(cls, file_path: pathlib.Path) -> OmniDrive:
        if not file_path.exists():
            raise ValueError(f"File path does not exist. {file_path}")

        with open(file_path, "r") as f:
            config_dict = json.load(f)

        return OmniDrive.model_validate(config_dict)

    def wheel(self, location: DrivetrainLocation) -> Wheel:
        return self._get_filtered_drivetrain(location).wheel

    @functools.lru_cache
    def _get_filtered_drivetrain(self, location: DrivetrainLocation) -> Drivetrain:
        return filter(lambda x: x.location == location, self.drivetrain).__next__()

    def __hash__(self) -> int:
        return hash(
            (
                self.__class__,
                *self.drivetrain,
                self.wheel_base_radius,
                self.slip_fraction,
                self.max_wheel_speed,
                self.max_wheel_acceleration,
            )
        )
