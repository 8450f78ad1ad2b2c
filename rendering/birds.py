"""Bird rendering: one depth-coloured triangle per bird."""

import numpy as np
from numba import njit, prange
from OpenGL.GL import *

from config import flocking as config


@njit(parallel=True, cache=True)
def build_vertices_numba(
    positions: np.ndarray,
    size: float,
    space_min: float,
    space_max: float,
    near_color: np.ndarray,
    far_color: np.ndarray,
    vertices: np.ndarray,
    vert_colors: np.ndarray
):
    """Write 3 vertices and colours per bird. Positions are only read."""
    width = space_max - space_min
    for i in prange(positions.shape[0]):
        px, py, pz = positions[i, 0], positions[i, 1], positions[i, 2]

        base = i * 3
        vertices[base, 0] = px - size
        vertices[base, 1] = py - size * 0.577
        vertices[base, 2] = pz
        vertices[base + 1, 0] = px
        vertices[base + 1, 1] = py + size * 1.154
        vertices[base + 1, 2] = pz
        vertices[base + 2, 0] = px + size
        vertices[base + 2, 1] = py - size * 0.577
        vertices[base + 2, 2] = pz

        # Depth along z in [0, 1]; the camera sits on the +z side
        t = (pz - space_min) / width
        t = min(max(t, 0.0), 1.0)
        for c in range(3):
            col = near_color[c] * t + far_color[c] * (1.0 - t)
            vert_colors[base, c] = col
            vert_colors[base + 1, c] = col
            vert_colors[base + 2, c] = col


class BirdRenderer:
    """Draws the flock from a read-only view; never writes bird state."""

    def __init__(self, num_birds: int, space_min: float, space_max: float):
        self.num_birds = num_birds
        self.space_min = float(space_min)
        self.space_max = float(space_max)
        self.size = float(config.FLOCK["size"])
        self.near_color = np.array(config.COLORS["near"], dtype=np.float32)
        self.far_color = np.array(config.COLORS["far"], dtype=np.float32)

        self._vertices = np.zeros((num_birds * 3, 3), dtype=np.float32)
        self._vert_colors = np.zeros((num_birds * 3, 3), dtype=np.float32)

    def draw(self, positions: np.ndarray):
        if self.num_birds == 0:
            return

        build_vertices_numba(
            positions,
            self.size,
            self.space_min,
            self.space_max,
            self.near_color,
            self.far_color,
            self._vertices,
            self._vert_colors
        )

        glEnableClientState(GL_VERTEX_ARRAY)
        glEnableClientState(GL_COLOR_ARRAY)

        glVertexPointer(3, GL_FLOAT, 0, self._vertices)
        glColorPointer(3, GL_FLOAT, 0, self._vert_colors)
        glDrawArrays(GL_TRIANGLES, 0, self.num_birds * 3)

        glDisableClientState(GL_VERTEX_ARRAY)
        glDisableClientState(GL_COLOR_ARRAY)
