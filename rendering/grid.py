"""Wireframe outline of the periodic simulation domain."""

import itertools

from OpenGL.GL import *
from config import flocking as config


class DomainBox:
    """Draws the 12 edges of the [space_min, space_max]^3 cube."""

    def __init__(self, space_min: float, space_max: float):
        self.color = config.GRID["color"]
        corners = list(itertools.product((space_min, space_max), repeat=3))
        # Edges join corners that differ on exactly one axis
        self.edges = [
            (a, b) for a, b in itertools.combinations(corners, 2)
            if sum(1 for u, v in zip(a, b) if u != v) == 1
        ]

    def draw(self):
        glBegin(GL_LINES)
        glColor3f(*self.color)
        for a, b in self.edges:
            glVertex3f(*a)
            glVertex3f(*b)
        glEnd()
