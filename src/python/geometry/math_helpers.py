import math
from typing import Collection

import numba as nb  # type: ignore[import-untyped]
import numpy as np

_F64_MATRIX = nb.types.Array(nb.types.float64, 2, "C")
# Default ATOL, same as numpy.
DEFAULT_ATOL = 1e-8


def mean(values: Collection[float]) -> float:
    """The mean of the values."""
    return sum(values) / len(values)


def cos_degrees(angle: float) -> float:
    """Cosine of an angle given in degrees."""
    return math.cos(math.radians(angle))


@nb.njit(_F64_MATRIX(nb.float64))
def rotation_matrix_2d(angle: float) -> np.ndarray:
    """A 2x2 rotation matrix which rotates a column vector counterclockwise by the
    angle (radians) about the z-axis.
    """
    rot = np.zeros((2, 2))
    cos_val = np.cos(angle)
    sin_val = np.sin(angle)

    rot[0, 0] = cos_val
    rot[0, 1] = -sin_val
    rot[1, 0] = sin_val
    rot[1, 1] = cos_val

    return rot
