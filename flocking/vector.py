"""Vector limiting, steering and periodic-boundary helpers (Numba JIT-compiled)."""

import math
import numpy as np
from numba import njit


# ============================================================================
# SCALAR HELPERS (used inside the step kernels)
# ============================================================================

@njit(cache=True, nogil=True)
def limit3(x: float, y: float, z: float, max_value: float):
    """Cap the magnitude of (x, y, z) at max_value, preserving direction."""
    mag = math.sqrt(x * x + y * y + z * z)
    if mag > max_value:
        return (x / mag) * max_value, (y / mag) * max_value, (z / mag) * max_value
    return x, y, z


@njit(cache=True, nogil=True)
def steer3(
    x: float, y: float, z: float,
    vx: float, vy: float, vz: float,
    max_speed: float,
    max_force: float
):
    """
    Turn a desired direction into a steering force.

    The direction is scaled to max_speed, the current velocity is
    subtracted and the result is capped at max_force. A zero direction
    yields a zero force.
    """
    mag = math.sqrt(x * x + y * y + z * z)
    if mag > 0.0:
        return limit3(
            (x / mag) * max_speed - vx,
            (y / mag) * max_speed - vy,
            (z / mag) * max_speed - vz,
            max_force
        )
    return 0.0, 0.0, 0.0


@njit(cache=True, nogil=True)
def wrap_coordinate(v: float, space_min: float, space_max: float) -> float:
    """Map a coordinate back into [space_min, space_max] on a periodic axis."""
    width = space_max - space_min
    if v < space_min:
        return space_max - (space_min - v) % width
    elif v > space_max:
        return space_min + (v - space_max) % width
    return v


# ============================================================================
# ARRAY HELPERS
# ============================================================================

@njit(cache=True)
def limit_vec(v: np.ndarray, max_value: float) -> np.ndarray:
    """Return v scaled down to magnitude max_value, or v itself if already within it."""
    mag = math.sqrt(np.sum(v * v))
    if mag > max_value:
        return (v / mag) * max_value
    return v


@njit(cache=True)
def wraparound(position: np.ndarray, space_min: float, space_max: float) -> np.ndarray:
    """Wrap every axis of a position independently into the periodic domain."""
    out = position.copy()
    for k in range(out.shape[0]):
        out[k] = wrap_coordinate(out[k], space_min, space_max)
    return out
