from __future__ import annotations

import dataclasses
from typing import Mapping, Tuple

import numpy as np
from config import robot_config
from geometry import math_helpers


@dataclasses.dataclass(frozen=True)
class WheelSet:
    """Wheel surface velocities of the four drive wheels in inches/s. Always ordered
    front left, front right, back left, back right, matching the drivetrain locations.
    """

    front_left: float
    front_right: float
    back_left: float
    back_right: float

    @property
    def data(self) -> Tuple[float, float, float, float]:
        return self.front_left, self.front_right, self.back_left, self.back_right

    def as_array(self) -> np.ndarray:
        return np.array(self.data, dtype=float)

    def is_close(
        self, other: WheelSet, *, atol: float = math_helpers.DEFAULT_ATOL
    ) -> bool:
        return all(
            abs(d2 - d1) < atol for d1, d2 in zip(self.data, other.data, strict=True)
        )

    @classmethod
    def from_array(cls, array: np.ndarray) -> WheelSet:
        return cls(*(float(val) for val in array))

    @classmethod
    def from_mapping(
        cls, velocities: Mapping[robot_config.DrivetrainLocation, float]
    ) -> WheelSet:
        return cls(*(float(velocities[loc]) for loc in robot_config.DrivetrainLocation))

    @classmethod
    def zero(cls) -> WheelSet:
        return cls(0.0, 0.0, 0.0, 0.0)

    def __getitem__(self, location: robot_config.DrivetrainLocation) -> float:
        return getattr(self, location.value.lower())

    def __mul__(self, scalar: float) -> WheelSet:
        return WheelSet.from_array(self.as_array() * scalar)
