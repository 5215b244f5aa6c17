from typing import Any, Mapping, Optional

import geometry
import log
from config import robot_config
from drivers import motor
from models import drive_kinematics, primitives
from typing_helpers import req


class Drive:
    """Controls a 4 wheel omnidirectional drive where the wheels are mounted at 45
    degrees on the corners of the robot. Reads the wheel velocities from the motors and
    writes wheel targets back to them once per control cycle.

    A control cycle is one call to `step` with the duration of the cycle followed by
    at most one call to `set_target_velocities`.
    """

    def __init__(
        self,
        config: robot_config.OmniDrive,
        motors: Mapping[robot_config.DrivetrainLocation, motor.Motor],
    ) -> None:
        missing = set(robot_config.DrivetrainLocation) - set(motors)
        if missing:
            raise ValueError(f"Missing motors for {missing=}")

        self._motors = motors
        self._kinematics = drive_kinematics.DriveKinematics(config)
        self._delta_time: Optional[float] = None

        log.info(
            f"Drive configured with {config.wheel_base_radius=} "
            f"{config.slip_fraction=} "
            f"{config.max_wheel_speed=} {config.max_wheel_acceleration=}"
        )

    def wheel_velocities(self) -> primitives.WheelSet:
        """The measured wheel velocities in inches/s."""
        return primitives.WheelSet.from_mapping(
            {location: m.velocity() for location, m in self._motors.items()}
        )

    def target_wheel_velocities(self) -> primitives.WheelSet:
        return primitives.WheelSet.from_mapping(
            {location: m.target_velocity() for location, m in self._motors.items()}
        )

    def twist(self) -> geometry.Twist:
        return self._kinematics.twist(self.wheel_velocities())

    def velocity(self) -> geometry.Velocity:
        """In inches/s relative to the robot's heading."""
        return self._kinematics.velocity(self.wheel_velocities())

    def angular_velocity(self) -> float:
        """In degrees/s with positive counterclockwise."""
        return self._kinematics.spin(self.wheel_velocities())

    def are_target_velocities_set(self) -> bool:
        """True if the drive has set target velocity and angular velocity."""
        return all(m.is_target_velocity_set() for m in self._motors.values())

    def target_twist(self) -> geometry.Twist:
        return self._kinematics.twist(self.target_wheel_velocities())

    def target_velocity(self) -> geometry.Velocity:
        """In inches/s relative to the robot's heading."""
        return self._kinematics.velocity(self.target_wheel_velocities())

    def target_angular_velocity(self) -> float:
        """In degrees/s with positive counterclockwise."""
        return self._kinematics.spin(self.target_wheel_velocities())

    def set_target_velocities(
        self, target_velocity: geometry.Velocity, target_angular_velocity: float
    ) -> primitives.WheelSet:
        """Targets a velocity (inches/s relative to the robot's heading) and an angular
        velocity (degrees/s, positive counterclockwise). If they are not obtainable
        within the current cycle both are scaled proportionally and the direction of
        the velocity is kept the same. Returns the wheel targets sent to the motors.
        """
        delta_time = req(
            self._delta_time, "The drive must be stepped before setting targets."
        )
        twist = geometry.Twist(target_velocity, target_angular_velocity)
        targets = self._kinematics.solve(twist, self.wheel_velocities(), delta_time)

        for location, m in self._motors.items():
            m.set_target_velocity(targets[location])

        return targets

    def step(self, delta_time: float) -> None:
        """Advances the drive by one control cycle lasting delta time seconds."""
        if delta_time <= 0.0:
            raise ValueError(f"Delta time must be positive, {delta_time=}")

        self._delta_time = delta_time
        for m in self._motors.values():
            m.update()

    def __str__(self) -> str:
        return (
            _state_string("targetVelocitiesSet", self.are_target_velocities_set())
            + _state_string("targetVelocity", self.target_velocity().format())
            + _state_string("velocity", self.velocity().format())
            + _state_string(
                "targetAngularVelocity", f"{self.target_angular_velocity():.0f}°/s"
            )
            + _state_string("angularVelocity", f"{self.angular_velocity():.0f}°/s")
            + "".join(str(m) for m in self._motors.values())
        )


def _state_string(name: str, value: Any) -> str:
    return f"{name}: {value}\n"
