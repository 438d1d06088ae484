"""Core host components.

`core.application` needs pygame and PyOpenGL with a working display, so it
is imported on demand by the entry point rather than from here.
"""

from .camera import Camera
from .driver import FrameDriver

__all__ = ["Camera", "FrameDriver"]
