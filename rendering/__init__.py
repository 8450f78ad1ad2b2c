"""Rendering components for the bird flocking simulation."""

from .birds import BirdRenderer
from .grid import DomainBox

__all__ = ["BirdRenderer", "DomainBox"]
