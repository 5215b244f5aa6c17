from geometry import cartesian_objects, frames, math_helpers

ReferenceFrame = frames.ReferenceFrame
# Frames for the omnidirectional drive base
BODY = frames.ReferenceFrame.BODY
WHEEL_AXES = frames.ReferenceFrame.WHEEL_AXES

BaseVectorType = cartesian_objects.BaseVectorType

Velocity = cartesian_objects.Velocity
Twist = cartesian_objects.Twist

cos_degrees = math_helpers.cos_degrees
mean = math_helpers.mean

# Rotation carrying a vector from the wheel axes frame into the body frame.
WHEEL_AXES_TO_BODY_ROT = 45.0
