"""Keyboard and mouse input for the flocking window."""

import pygame
from pygame.locals import *
from config import flocking as config

from .camera import Camera


class InputHandler:
    """Camera control plus pause/quit keys."""

    def __init__(self, camera: Camera):
        self.camera = camera
        self.paused = False
        self.mouse_dragging = False
        self.last_mouse_pos = (0, 0)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle a single pygame event.
        Returns False if the application should quit, True otherwise.
        """
        if event.type == QUIT:
            return False
        elif event.type == KEYDOWN:
            if event.key == K_ESCAPE:
                return False
            if event.key == K_SPACE:
                self.paused = not self.paused
        elif event.type == MOUSEBUTTONDOWN and event.button == 1:
            self.mouse_dragging = True
            self.last_mouse_pos = pygame.mouse.get_pos()
        elif event.type == MOUSEBUTTONUP and event.button == 1:
            self.mouse_dragging = False
        elif event.type == MOUSEWHEEL:
            self.camera.zoom(-event.y * config.CAMERA["keyboard_zoom_speed"] * 0.1)
        return True

    def handle_continuous_input(self, dt: float):
        keys = pygame.key.get_pressed()
        rot = config.CAMERA["keyboard_rotate_speed"] * dt
        zoom = config.CAMERA["keyboard_zoom_speed"] * dt

        self.camera.rotate((keys[K_d] - keys[K_a]) * rot, (keys[K_w] - keys[K_s]) * rot)
        self.camera.zoom((keys[K_e] - keys[K_q]) * zoom)

        if self.mouse_dragging:
            x, y = pygame.mouse.get_pos()
            sensitivity = config.CAMERA["mouse_sensitivity"]
            self.camera.rotate((x - self.last_mouse_pos[0]) * sensitivity,
                               -(y - self.last_mouse_pos[1]) * sensitivity)
            self.last_mouse_pos = (x, y)
