import math
from typing import Dict, Tuple

import geometry
from config import robot_config

from models import acceleration_limiter, primitives, slip_model

# Sign each wheel's velocity contributes to the (x, y) velocity of the wheel axes frame.
# The x-axis runs along the front right and back left wheels and the y-axis along the
# front left and back right wheels.
_WHEEL_AXES_SIGNS: Dict[robot_config.DrivetrainLocation, Tuple[int, int]] = {
    robot_config.DrivetrainLocation.FRONT_LEFT: (0, 1),
    robot_config.DrivetrainLocation.FRONT_RIGHT: (1, 0),
    robot_config.DrivetrainLocation.BACK_LEFT: (-1, 0),
    robot_config.DrivetrainLocation.BACK_RIGHT: (0, -1),
}


class DriveKinematics:
    """Kinematic model of a four wheel omnidirectional drive with the wheels mounted at
    45 degrees on the corners of the robot. Converts between the body twist of the
    robot and the surface velocities of its four wheels.
    """

    def __init__(self, config: robot_config.OmniDrive) -> None:
        self._config = config
        self._limiter = acceleration_limiter.AccelerationLimiter.from_config(config)

    @property
    def limiter(self) -> acceleration_limiter.AccelerationLimiter:
        return self._limiter

    def twist(self, wheels: primitives.WheelSet) -> geometry.Twist:
        """The body twist produced by the wheel velocities. Works for measured wheel
        velocities as well as for wheel targets.
        """
        return geometry.Twist(self.velocity(wheels), self.spin(wheels))

    def velocity(self, wheels: primitives.WheelSet) -> geometry.Velocity:
        """Body velocity in inches/s relative to the robot's heading."""
        wheel_axes_velocity = geometry.Velocity(
            geometry.WHEEL_AXES,
            (wheels.front_right - wheels.back_left) / 2.0,
            (wheels.front_left - wheels.back_right) / 2.0,
        )
        # The wheels slip when driving along one of the wheel axes, so less of their
        # velocity reaches the ground.
        wheel_axes_velocity *= slip_model.vector_transfer_fraction(
            wheel_axes_velocity, self._config.slip_fraction
        )
        return wheel_axes_velocity.rotated(
            geometry.WHEEL_AXES_TO_BODY_ROT, frame=geometry.BODY
        )

    def spin(self, wheels: primitives.WheelSet) -> float:
        """Angular velocity in degrees/s, positive counterclockwise. The average wheel
        velocity is the tangential velocity of the wheel base.
        """
        tangential_speed = geometry.mean(wheels.data)
        return math.degrees(tangential_speed / self._config.wheel_base_radius)

    def wheel_velocities(self, twist: geometry.Twist) -> primitives.WheelSet:
        """The wheel velocities that produce the body twist, before any acceleration
        limits are applied.
        """
        if twist.frame != geometry.BODY:
            raise ValueError(f"Twist must be in the body frame, {twist.frame=}")

        wheel_axes_velocity = twist.velocity.rotated(
            -geometry.WHEEL_AXES_TO_BODY_ROT, frame=geometry.WHEEL_AXES
        )
        # Request more velocity along the wheel axes to make up for the wheels slipping.
        wheel_axes_velocity /= slip_model.vector_transfer_fraction(
            wheel_axes_velocity, self._config.slip_fraction
        )
        tangential_speed = math.radians(twist.spin) * self._config.wheel_base_radius

        return primitives.WheelSet.from_mapping(
            {
                location: tangential_speed
                + x_sign * wheel_axes_velocity.x
                + y_sign * wheel_axes_velocity.y
                for location, (x_sign, y_sign) in _WHEEL_AXES_SIGNS.items()
            }
        )

    def solve(
        self,
        twist: geometry.Twist,
        current: primitives.WheelSet,
        delta_time: float,
    ) -> primitives.WheelSet:
        """Wheel targets for the requested twist which the wheels can reach from their
        current velocities within delta time. If the twist is not obtainable, velocity
        and angular velocity are scaled proportionally and the direction of the velocity
        is kept the same.
        """
        requested = self.wheel_velocities(twist)
        return self._limiter.limit(requested, current, delta_time)
