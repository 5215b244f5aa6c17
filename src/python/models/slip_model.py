import geometry


def transfer_fraction(rotation: float, slip_fraction: float) -> float:
    """The fraction of a wheel axes frame velocity that transfers to the ground, given
    the velocity's rotation (degrees) relative to the wheel axes.
    0.0 = complete slippage; 1.0 = no slippage.
    """
    # 1.0 = velocity is in line with one of the wheel axes, where the wheels slip the
    # most. 0.0 = velocity is the full 45 degrees off the wheel axes, in line with one
    # of the body axes (forward, backward, left or right).
    # Recurs every 90 degrees to match the four wheel symmetry.
    along_wheel_axes_fraction = 0.5 * geometry.cos_degrees(rotation * 4.0) + 0.5
    return 1.0 - along_wheel_axes_fraction * slip_fraction


def vector_transfer_fraction(
    velocity: geometry.Velocity, slip_fraction: float
) -> float:
    """Transfer fraction of a velocity expressed in the wheel axes frame. A zero
    velocity has no direction and nothing to compensate, so it transfers fully.
    """
    if velocity.frame != geometry.WHEEL_AXES:
        raise ValueError(f"Velocity must be in the wheel axes frame, {velocity.frame=}")

    if velocity.magnitude == 0.0:
        return 1.0

    return transfer_fraction(velocity.direction, slip_fraction)
