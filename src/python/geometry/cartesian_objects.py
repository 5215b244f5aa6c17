from __future__ import annotations

import dataclasses
import math
from typing import Optional, Tuple, Type, TypeVar

import numpy as np

from geometry import frames, math_helpers

BaseVectorTypeT = TypeVar("BaseVectorTypeT", bound="BaseVectorType")


@dataclasses.dataclass
class BaseVectorType:
    """A vector in the plane of the drive base."""

    frame: frames.ReferenceFrame
    x: float
    y: float

    def __post_init__(self) -> None:
        # Ensures that values are floats.
        self.x = float(self.x)
        self.y = float(self.y)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y])

    @property
    def magnitude(self) -> float:
        return (self.x**2 + self.y**2) ** 0.5

    @property
    def direction(self) -> float:
        """Counterclockwise angle from the frame's x-axis in degrees, between -180 and
        180. A zero vector has no direction and reports 0.
        """
        return math.degrees(math.atan2(self.y, self.x))

    @property
    def data(self) -> Tuple[float, float]:
        return self.x, self.y

    def rotated(
        self: BaseVectorTypeT,
        angle: float,
        *,
        frame: Optional[frames.ReferenceFrame] = None,
    ) -> BaseVectorTypeT:
        """This vector rotated counterclockwise by the angle in degrees. Optionally
        re-expressed in another frame, which is how a vector is carried between the body
        and wheel axes frames.
        """
        rot_matrix = math_helpers.rotation_matrix_2d(math.radians(angle))
        rot_vec = np.dot(rot_matrix, self.as_array())
        return self.from_array(frame or self.frame, rot_vec)

    def is_close(
        self: BaseVectorTypeT,
        other: BaseVectorTypeT,
        *,
        atol: float = math_helpers.DEFAULT_ATOL,
    ) -> bool:
        """Compares two vector type objects and if they are relatively close to one
        another. A good way to account for different float quirks.
        """
        _raise_if_frames_different(self, other)
        return all(
            abs(d2 - d1) < atol for d1, d2 in zip(self.data, other.data, strict=True)
        )

    @classmethod
    def from_array(
        cls: Type[BaseVectorTypeT], frame: frames.ReferenceFrame, array: np.ndarray
    ) -> BaseVectorTypeT:
        return cls(frame, float(array[0]), float(array[1]))

    @classmethod
    def zero(
        cls: Type[BaseVectorTypeT], frame: frames.ReferenceFrame
    ) -> BaseVectorTypeT:
        return cls(frame, 0, 0)

    def __add__(self: BaseVectorTypeT, other: BaseVectorTypeT) -> BaseVectorTypeT:
        _raise_if_frames_different(self, other)
        return self.__class__(self.frame, self.x + other.x, self.y + other.y)

    def __sub__(self: BaseVectorTypeT, other: BaseVectorTypeT) -> BaseVectorTypeT:
        _raise_if_frames_different(self, other)
        return self.__class__(self.frame, self.x - other.x, self.y - other.y)

    def __mul__(self: BaseVectorTypeT, scalar: float) -> BaseVectorTypeT:
        return self.__class__(self.frame, self.x * scalar, self.y * scalar)

    def __truediv__(self: BaseVectorTypeT, scalar: float) -> BaseVectorTypeT:
        return self.__class__(self.frame, self.x / scalar, self.y / scalar)


class Velocity(BaseVectorType):
    """A planar velocity represented in inches/second."""

    def format(self, fmt: str = ".2f", unit: str = "in/s") -> str:
        return f"({self.x:{fmt}}{unit}, {self.y:{fmt}}{unit})"


@dataclasses.dataclass
class Twist:
    """The planar velocity and angular velocity of the robot. Spin is about the z-axis
    in degrees/second, positive counterclockwise.
    """

    velocity: Velocity
    spin: float = 0.0

    def __post_init__(self) -> None:
        self.spin = float(self.spin)

    @property
    def frame(self) -> frames.ReferenceFrame:
        return self.velocity.frame

    def is_close(
        self, other: Twist, *, atol: float = math_helpers.DEFAULT_ATOL
    ) -> bool:
        return self.velocity.is_close(other.velocity, atol=atol) and (
            abs(self.spin - other.spin) < atol
        )

    @classmethod
    def zero(cls, frame: frames.ReferenceFrame) -> Twist:
        return Twist(Velocity.zero(frame), 0.0)


def _raise_if_frames_different(*objs: BaseVectorType) -> None:
    obj_frames = set(obj.frame for obj in objs)
    if len(obj_frames) > 1:
        raise ValueError(f"Multiple frames found: {obj_frames=}")
