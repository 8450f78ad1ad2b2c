"""
Per-bird flocking kernels.

Every bird is updated from a read-only snapshot of the whole flock plus its
own prior state, so birds can be processed in any order and split across
any number of workers. The neighbor scan is brute force over all pairs.

Kernels are compiled without fastmath so that a bird's result does not
depend on which kernel or which partition computed it.
"""

import math
import numpy as np
from numba import njit, prange

from .vector import limit3, steer3, wrap_coordinate


@njit(cache=True, nogil=True)
def neighbor_forces(
    i: int,
    positions: np.ndarray,
    velocities: np.ndarray,
    perception_radius: float,
    max_speed: float,
    max_force: float
):
    """
    Unweighted separation, alignment and cohesion steering forces for bird i.

    Returns a flat 9-tuple (sep xyz, align xyz, coh xyz).
    """
    px, py, pz = positions[i, 0], positions[i, 1], positions[i, 2]
    vx, vy, vz = velocities[i, 0], velocities[i, 1], velocities[i, 2]

    sep_x, sep_y, sep_z = 0.0, 0.0, 0.0
    align_x, align_y, align_z = 0.0, 0.0, 0.0
    coh_x, coh_y, coh_z = 0.0, 0.0, 0.0
    total = 0

    for j in range(positions.shape[0]):
        dx = px - positions[j, 0]
        dy = py - positions[j, 1]
        dz = pz - positions[j, 2]
        distance = math.sqrt(dx * dx + dy * dy + dz * dz)

        # Strict bounds drop the bird itself (distance 0)
        if distance > 0.0 and distance < perception_radius:
            sep_x += dx / distance
            sep_y += dy / distance
            sep_z += dz / distance

            align_x += velocities[j, 0]
            align_y += velocities[j, 1]
            align_z += velocities[j, 2]

            coh_x += positions[j, 0]
            coh_y += positions[j, 1]
            coh_z += positions[j, 2]

            total += 1

    if total > 0:
        sep_x, sep_y, sep_z = steer3(
            sep_x / total, sep_y / total, sep_z / total,
            vx, vy, vz, max_speed, max_force
        )
        align_x, align_y, align_z = steer3(
            align_x / total, align_y / total, align_z / total,
            vx, vy, vz, max_speed, max_force
        )
        coh_x, coh_y, coh_z = steer3(
            coh_x / total - px, coh_y / total - py, coh_z / total - pz,
            vx, vy, vz, max_speed, max_force
        )

    return sep_x, sep_y, sep_z, align_x, align_y, align_z, coh_x, coh_y, coh_z


@njit(cache=True, nogil=True)
def update_bird(
    i: int,
    snap_positions: np.ndarray,
    snap_velocities: np.ndarray,
    out_positions: np.ndarray,
    out_velocities: np.ndarray,
    out_accelerations: np.ndarray,
    separation_weight: float,
    alignment_weight: float,
    cohesion_weight: float,
    perception_radius: float,
    max_speed: float,
    max_force: float,
    space_min: float,
    space_max: float
):
    """Compute bird i's new acceleration, velocity and position into the output slots."""
    (sep_x, sep_y, sep_z,
     align_x, align_y, align_z,
     coh_x, coh_y, coh_z) = neighbor_forces(
        i, snap_positions, snap_velocities, perception_radius, max_speed, max_force
    )

    ax = separation_weight * sep_x + alignment_weight * align_x + cohesion_weight * coh_x
    ay = separation_weight * sep_y + alignment_weight * align_y + cohesion_weight * coh_y
    az = separation_weight * sep_z + alignment_weight * align_z + cohesion_weight * coh_z

    vx, vy, vz = limit3(
        snap_velocities[i, 0] + ax,
        snap_velocities[i, 1] + ay,
        snap_velocities[i, 2] + az,
        max_speed
    )

    out_accelerations[i, 0] = ax
    out_accelerations[i, 1] = ay
    out_accelerations[i, 2] = az

    out_velocities[i, 0] = vx
    out_velocities[i, 1] = vy
    out_velocities[i, 2] = vz

    out_positions[i, 0] = wrap_coordinate(snap_positions[i, 0] + vx, space_min, space_max)
    out_positions[i, 1] = wrap_coordinate(snap_positions[i, 1] + vy, space_min, space_max)
    out_positions[i, 2] = wrap_coordinate(snap_positions[i, 2] + vz, space_min, space_max)


@njit(cache=True, nogil=True)
def update_range(
    snap_positions: np.ndarray,
    snap_velocities: np.ndarray,
    out_positions: np.ndarray,
    out_velocities: np.ndarray,
    out_accelerations: np.ndarray,
    start: int,
    stop: int,
    stride: int,
    separation_weight: float,
    alignment_weight: float,
    cohesion_weight: float,
    perception_radius: float,
    max_speed: float,
    max_force: float,
    space_min: float,
    space_max: float
):
    """Update birds start, start + stride, ... below stop. Releases the GIL."""
    for i in range(start, stop, stride):
        update_bird(
            i, snap_positions, snap_velocities,
            out_positions, out_velocities, out_accelerations,
            separation_weight, alignment_weight, cohesion_weight,
            perception_radius, max_speed, max_force,
            space_min, space_max
        )


@njit(parallel=True, cache=True)
def update_all_parallel(
    snap_positions: np.ndarray,
    snap_velocities: np.ndarray,
    out_positions: np.ndarray,
    out_velocities: np.ndarray,
    out_accelerations: np.ndarray,
    separation_weight: float,
    alignment_weight: float,
    cohesion_weight: float,
    perception_radius: float,
    max_speed: float,
    max_force: float,
    space_min: float,
    space_max: float
):
    """Update every bird using Numba's own thread pool."""
    for i in prange(snap_positions.shape[0]):
        update_bird(
            i, snap_positions, snap_velocities,
            out_positions, out_velocities, out_accelerations,
            separation_weight, alignment_weight, cohesion_weight,
            perception_radius, max_speed, max_force,
            space_min, space_max
        )


def flocking_forces(
    i: int,
    positions: np.ndarray,
    velocities: np.ndarray,
    perception_radius: float,
    max_speed: float,
    max_force: float
):
    """Return bird i's (separation, alignment, cohesion) steering forces as arrays."""
    forces = neighbor_forces(
        int(i),
        np.ascontiguousarray(positions, dtype=np.float64),
        np.ascontiguousarray(velocities, dtype=np.float64),
        float(perception_radius),
        float(max_speed),
        float(max_force)
    )
    return (
        np.array(forces[0:3]),
        np.array(forces[3:6]),
        np.array(forces[6:9]),
    )
