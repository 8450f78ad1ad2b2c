"""Window, camera and input handling for the flocking app."""

from .camera import Camera
from .input_handler import InputHandler
from .application import Application

__all__ = ["Camera", "InputHandler", "Application"]
