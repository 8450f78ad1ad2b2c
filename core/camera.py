"""Orbit camera looking at the centre of the flock."""

import math
from OpenGL.GL import *
from OpenGL.GLU import *
from config import flocking as config


class Camera:
    """Spherical-coordinate camera; starts on the +z axis like a fixed POV."""

    def __init__(self):
        self.radius = config.CAMERA["initial_radius"]
        self.theta = config.CAMERA["initial_theta"]
        self.phi = config.CAMERA["initial_phi"]

    def get_position(self) -> tuple:
        theta_rad = math.radians(self.theta)
        phi_rad = math.radians(self.phi)
        return (
            self.radius * math.cos(phi_rad) * math.cos(theta_rad),
            self.radius * math.sin(phi_rad),
            self.radius * math.cos(phi_rad) * math.sin(theta_rad),
        )

    def rotate(self, d_theta: float, d_phi: float):
        """Rotate by the given angles in degrees."""
        self.theta = (self.theta + d_theta) % 360
        self.phi = max(config.CAMERA["min_phi"], min(config.CAMERA["max_phi"], self.phi + d_phi))

    def zoom(self, delta: float):
        self.radius = max(config.CAMERA["min_radius"], min(config.CAMERA["max_radius"], self.radius + delta))

    def setup_projection(self, aspect: float):
        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        gluPerspective(config.CAMERA["fov"], aspect, config.CAMERA["near_clip"], config.CAMERA["far_clip"])
        glMatrixMode(GL_MODELVIEW)

    def apply(self):
        """Load the view transform into the modelview matrix."""
        x, y, z = self.get_position()
        glLoadIdentity()
        gluLookAt(x, y, z, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0)
