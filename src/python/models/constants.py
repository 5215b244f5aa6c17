# Distance between the center of the wheel base and the wheels, in inches.
WHEEL_BASE_RADIUS = 8.25
# Effective rolling diameter of each drive wheel, in inches.
WHEEL_DIAMETER = 3.8
# Fudge factor compensating for the amount the wheels slip when the robot drives along
# one of the wheel axes. 0.0 = no slippage; 1.0 = complete slippage.
VELOCITY_ALONG_AXIS_WHEEL_SLIP_FRACTION = 0.1
# Max wheel surface speed in inches/s. Along with the max acceleration from stop this
# limits the wheel targets to obtainable levels while keeping them proportional to each
# other. Should be set as high as possible without noticeable decreases in handling.
WHEEL_MAX_ACHIEVABLE_SPEED = 48.0
# Max wheel acceleration from a standstill in inches/s^2 without the wheel slipping.
WHEEL_MAX_ACHIEVABLE_ACCELERATION_FROM_STOP = 100.0
