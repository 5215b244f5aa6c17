from __future__ import annotations

from typing import Optional, Protocol

from config import robot_config


class Motor(Protocol):
    """A drive motor as seen by the drive. Velocities are wheel surface velocities in
    inches/s. Closed loop tracking of the target is the motor's own concern.
    """

    def velocity(self) -> float:
        ...

    def target_velocity(self) -> float:
        ...

    def is_target_velocity_set(self) -> bool:
        ...

    def set_target_velocity(self, velocity: float) -> None:
        ...

    def update(self) -> None:
        """Advances the motor's internal control state by one cycle."""
        ...


class SimulatedMotor:
    """An idealised motor that reaches its target velocity, within its max speed, on
    every update. Useful for tests and for simulating the drive without hardware.
    """

    def __init__(self, name: str, wheel: robot_config.Wheel, max_speed: float) -> None:
        self._name = name
        self._wheel = wheel
        self._max_speed = max_speed

        self._velocity = 0.0
        self._target_velocity: Optional[float] = None

    @classmethod
    def from_drivetrain(
        cls, drivetrain: robot_config.Drivetrain, config: robot_config.OmniDrive
    ) -> SimulatedMotor:
        return cls(
            drivetrain.location.motor_name, drivetrain.wheel, config.max_wheel_speed
        )

    @property
    def name(self) -> str:
        return self._name

    def velocity(self) -> float:
        return self._velocity

    def rotational_velocity(self) -> float:
        """Wheel velocity in turns/s. A surface velocity of 1 in/s on a wheel with a
        circumference of 3 in is 1/3 turns/s.
        """
        return self._velocity / self._wheel.circumference

    def target_velocity(self) -> float:
        return self._target_velocity if self._target_velocity is not None else 0.0

    def is_target_velocity_set(self) -> bool:
        return self._target_velocity is not None

    def set_target_velocity(self, velocity: float) -> None:
        self._target_velocity = velocity

    def update(self) -> None:
        if self._target_velocity is None:
            return

        self._velocity = max(
            -self._max_speed, min(self._target_velocity, self._max_speed)
        )

    def __str__(self) -> str:
        return (
            f"{self._name}: targetVelocity={self.target_velocity():.2f}in/s "
            f"velocity={self._velocity:.2f}in/s "
            f"({self.rotational_velocity():.2f}turns/s)\n"
        )
