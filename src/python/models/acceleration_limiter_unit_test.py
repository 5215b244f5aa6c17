import warnings

import geometry
import numpy as np
import pytest
import session

from models import acceleration_limiter, constants, drive_kinematics, primitives

_MAX_SPEED = constants.WHEEL_MAX_ACHIEVABLE_SPEED
_MAX_ACCEL = constants.WHEEL_MAX_ACHIEVABLE_ACCELERATION_FROM_STOP
# 50 hz
_DELTA_TIME = 1 / 50
_AT_REST = primitives.WheelSet.zero()


@pytest.fixture
def limiter() -> acceleration_limiter.AccelerationLimiter:
    return acceleration_limiter.AccelerationLimiter.from_config(
        session.get_robot_config()
    )


def test_acceleration_bounds(limiter: acceleration_limiter.AccelerationLimiter) -> None:
    current = primitives.WheelSet(0.0, _MAX_SPEED, -_MAX_SPEED, _MAX_SPEED / 2)
    min_accel, max_accel = limiter.acceleration_bounds(current)

    assert min_accel.is_close(
        primitives.WheelSet(-_MAX_ACCEL, -2 * _MAX_ACCEL, 0.0, -1.5 * _MAX_ACCEL)
    )
    # A wheel at max speed can only decelerate.
    assert max_accel.is_close(
        primitives.WheelSet(_MAX_ACCEL, 0.0, 2 * _MAX_ACCEL, 0.5 * _MAX_ACCEL)
    )


def test_velocity_bounds(limiter: acceleration_limiter.AccelerationLimiter) -> None:
    min_vel, max_vel = limiter.velocity_bounds(_AT_REST, _DELTA_TIME)
    reachable = _MAX_ACCEL * _DELTA_TIME

    assert min_vel.is_close(primitives.WheelSet(*([-reachable] * 4)))
    assert max_vel.is_close(primitives.WheelSet(*([reachable] * 4)))


@pytest.mark.parametrize("delta_time", [0.0, -0.02])
def test_invalid_delta_time(
    limiter: acceleration_limiter.AccelerationLimiter, delta_time: float
) -> None:
    requested = primitives.WheelSet(1.0, 1.0, 1.0, 1.0)
    with pytest.raises(ValueError):
        limiter.limit(requested, _AT_REST, delta_time)


def test_achievable_request_is_unchanged(
    limiter: acceleration_limiter.AccelerationLimiter,
) -> None:
    requested = primitives.WheelSet(1.0, -1.5, 0.5, 0.0)

    assert limiter.achievable_fraction(requested, _AT_REST, _DELTA_TIME) == 1.0
    assert limiter.limit(requested, _AT_REST, _DELTA_TIME) == requested


def test_zero_request_is_not_a_number_free(
    limiter: acceleration_limiter.AccelerationLimiter,
) -> None:
    current = primitives.WheelSet(10.0, -10.0, 10.0, -10.0)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        targets = limiter.limit(primitives.WheelSet.zero(), current, _DELTA_TIME)

    assert targets == primitives.WheelSet.zero()


def test_forward_from_rest() -> None:
    config = session.get_robot_config()
    kinematics = drive_kinematics.DriveKinematics(config)
    twist = geometry.Twist(geometry.Velocity(geometry.BODY, 24.0, 0.0), 0.0)

    requested = kinematics.wheel_velocities(twist)
    wheel_speed = 24.0 / 2**0.5
    assert np.allclose(np.abs(requested.as_array()), wheel_speed)

    # Only 2 in/s are reachable from rest in one cycle, all four wheels bind equally.
    fraction = kinematics.limiter.achievable_fraction(requested, _AT_REST, _DELTA_TIME)
    assert np.isclose(fraction, _MAX_ACCEL * _DELTA_TIME / wheel_speed)

    targets = kinematics.solve(twist, _AT_REST, _DELTA_TIME)
    assert np.allclose(np.abs(targets.as_array()), _MAX_ACCEL * _DELTA_TIME)
    assert np.allclose(np.sign(targets.as_array()), np.sign(requested.as_array()))


def test_shrinks_near_max_speed(
    limiter: acceleration_limiter.AccelerationLimiter,
) -> None:
    near_max = 47.0
    current = primitives.WheelSet(-near_max, near_max, -near_max, near_max)
    requested = primitives.WheelSet(-_MAX_SPEED, _MAX_SPEED, -_MAX_SPEED, _MAX_SPEED)

    fraction = limiter.achievable_fraction(requested, current, _DELTA_TIME)
    max_accel = _MAX_ACCEL * (1.0 - near_max / _MAX_SPEED)
    expected_fraction = (near_max + max_accel * _DELTA_TIME) / _MAX_SPEED

    assert 0.0 < fraction < 1.0
    assert np.isclose(fraction, expected_fraction)
    assert limiter.limit(requested, current, _DELTA_TIME).is_close(requested * fraction)


def test_cannot_slow_down_enough(
    limiter: acceleration_limiter.AccelerationLimiter,
) -> None:
    current = primitives.WheelSet(40.0, 40.0, 40.0, 40.0)
    requested = primitives.WheelSet(10.0, 10.0, 10.0, 10.0)
    min_vel, _ = limiter.velocity_bounds(current, _DELTA_TIME)

    # Decelerates as fast as the wheels allow.
    targets = limiter.limit(requested, current, _DELTA_TIME)
    assert targets.is_close(min_vel)
    assert limiter.achievable_fraction(requested, current, _DELTA_TIME) > 1.0


def test_no_direction_preserving_solution(
    limiter: acceleration_limiter.AccelerationLimiter,
) -> None:
    # The first wheel cannot slow to the request while the second cannot speed up to it.
    current = primitives.WheelSet(40.0, 0.0, 0.0, 0.0)
    requested = primitives.WheelSet(10.0, 10.0, 0.0, 0.0)

    assert limiter.achievable_fraction(requested, current, _DELTA_TIME) == 1.0
    assert limiter.limit(requested, current, _DELTA_TIME) == requested


@pytest.mark.parametrize(
    "current, requested",
    [
        (
            primitives.WheelSet(0.0, 0.0, 0.0, 0.0),
            primitives.WheelSet(-16.97, 16.97, -16.97, 16.97),
        ),
        (
            primitives.WheelSet(5.0, 5.0, 5.0, 5.0),
            primitives.WheelSet(10.0, 10.0, 10.0, 10.0),
        ),
        (
            primitives.WheelSet(10.0, -10.0, 3.0, 0.0),
            primitives.WheelSet(11.0, -9.0, 3.0, 0.5),
        ),
        (
            primitives.WheelSet(20.0, -20.0, 20.0, -20.0),
            primitives.WheelSet(30.0, -30.0, 30.0, -30.0),
        ),
    ],
)
def test_acceleration_envelope_respected(
    limiter: acceleration_limiter.AccelerationLimiter,
    current: primitives.WheelSet,
    requested: primitives.WheelSet,
) -> None:
    targets = limiter.limit(requested, current, _DELTA_TIME)
    min_accel, max_accel = limiter.acceleration_bounds(current)
    accel = (targets.as_array() - current.as_array()) / _DELTA_TIME

    assert np.all(accel >= min_accel.as_array() - 1e-6)
    assert np.all(accel <= max_accel.as_array() + 1e-6)

    fraction = limiter.achievable_fraction(requested, current, _DELTA_TIME)
    assert 0.0 < fraction <= 1.0
    assert targets.is_close(requested * fraction)
