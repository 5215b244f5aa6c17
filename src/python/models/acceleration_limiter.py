from __future__ import annotations

from typing import Tuple

import log
import numpy as np
from config import robot_config

from models import primitives


class AccelerationLimiter:
    """Limits wheel velocity targets to values the wheels can reach within a single
    control cycle. Instead of clamping each wheel on its own, all four targets are
    scaled by one shared fraction. This keeps the robot moving in the requested
    direction and with the requested proportion of velocity to angular velocity.

    Setting the wheels to the requested targets directly can make the controls feel
    unresponsive. For example, when driving at high velocities the robot may not rotate
    because the motors are already at full capacity, and fast accelerations may rotate
    the robot because some of the wheels cannot keep up.
    """

    def __init__(self, max_speed: float, max_acceleration: float) -> None:
        self._max_speed = max_speed
        self._max_acceleration = max_acceleration

    @classmethod
    def from_config(cls, config: robot_config.OmniDrive) -> AccelerationLimiter:
        return cls(config.max_wheel_speed, config.max_wheel_acceleration)

    def acceleration_bounds(
        self, current: primitives.WheelSet
    ) -> Tuple[primitives.WheelSet, primitives.WheelSet]:
        """The min and max acceleration (inches/s^2) of each wheel. The capacity to
        accelerate shrinks linearly as a wheel approaches max speed in that direction,
        so a wheel at max speed can only decelerate.
        """
        velocities = current.as_array()
        min_accel = -self._max_acceleration * (1.0 + velocities / self._max_speed)
        max_accel = self._max_acceleration * (1.0 - velocities / self._max_speed)
        return (
            primitives.WheelSet.from_array(min_accel),
            primitives.WheelSet.from_array(max_accel),
        )

    def velocity_bounds(
        self, current: primitives.WheelSet, delta_time: float
    ) -> Tuple[primitives.WheelSet, primitives.WheelSet]:
        """The min and max velocity (inches/s) each wheel can reach after delta time."""
        _raise_if_invalid_delta_time(delta_time)
        min_accel, max_accel = self.acceleration_bounds(current)
        velocities = current.as_array()
        min_vel = velocities + min_accel.as_array() * delta_time
        max_vel = velocities + max_accel.as_array() * delta_time
        return (
            primitives.WheelSet.from_array(min_vel),
            primitives.WheelSet.from_array(max_vel),
        )

    def achievable_fraction(
        self,
        requested: primitives.WheelSet,
        current: primitives.WheelSet,
        delta_time: float,
    ) -> float:
        """The single fraction of the requested wheel velocities to target. It is the
        value closest to 1.0 (the exact request) that the most restrictive wheels allow.
        """
        min_vel, max_vel = self.velocity_bounds(current, delta_time)
        requested_vel = requested.as_array()

        # A wheel with no requested velocity is satisfied by any fraction.
        is_requested = requested_vel != 0.0
        min_vel_fraction = np.divide(
            min_vel.as_array(),
            requested_vel,
            out=np.full(4, -np.inf),
            where=is_requested,
        )
        max_vel_fraction = np.divide(
            max_vel.as_array(),
            requested_vel,
            out=np.full(4, np.inf),
            where=is_requested,
        )
        # Dividing by a negative requested velocity flips the bounds.
        wheel_min_fraction = np.minimum(min_vel_fraction, max_vel_fraction)
        wheel_max_fraction = np.maximum(min_vel_fraction, max_vel_fraction)

        # The highest min achievable fraction is what limits the overall min and the
        # lowest max achievable fraction is what limits the overall max.
        min_fraction = float(wheel_min_fraction.max())
        max_fraction = float(wheel_max_fraction.min())

        if min_fraction > max_fraction:
            log.debug(
                "No direction preserving wheel targets are achievable, "
                f"{min_fraction=:.3f} {max_fraction=:.3f}"
            )

        return _resolve_fraction(min_fraction, max_fraction)

    def limit(
        self,
        requested: primitives.WheelSet,
        current: primitives.WheelSet,
        delta_time: float,
    ) -> primitives.WheelSet:
        """The requested wheel velocities scaled to what is achievable this cycle."""
        return requested * self.achievable_fraction(requested, current, delta_time)


def _resolve_fraction(min_fraction: float, max_fraction: float) -> float:
    """Picks the fraction closest to 1.0 in the range between the min and max fraction.
    The min can exceed the max when no direction preserving solution exists, in which
    case the range is taken in either order.
    """
    if min_fraction < 1.0 and max_fraction < 1.0:
        return max(min_fraction, max_fraction)
    elif min_fraction > 1.0 and max_fraction > 1.0:
        return min(min_fraction, max_fraction)
    else:
        return 1.0


def _raise_if_invalid_delta_time(delta_time: float) -> None:
    if delta_time <= 0.0:
        raise ValueError(f"Delta time must be positive, {delta_time=}")
