import enum


class ReferenceFrame(enum.Enum):
    """Reference frames that the omnidirectional drive uses. Both frames share the
    origin at the center of the wheel base and the z-axis pointing skyward, so a
    positive rotation is counterclockwise when seen from above.

                                     BODY
                                       |
                                  WHEEL_AXES

    The wheels sit on the corners of the chassis with their rolling directions at 45
    degrees to the body axes. The wheel axes frame is the body frame rotated -45
    degrees about the z-axis.
    """

    # x-axis points toward the front of the robot and y-axis toward the left side of
    # the robot.
    BODY = "BODY"
    # x-axis runs along the rolling direction of the front right and back left wheels,
    # y-axis along the rolling direction of the front left and back right wheels.
    WHEEL_AXES = "WHEEL_AXES"

    def __repr__(self) -> str:
        return str(self)
