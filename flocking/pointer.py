"""Pointer ("predator") target shared between input handling and the flock."""

from typing import Tuple

import numpy as np


class PointerTarget:
    """
    Latest pointer position in world space plus an active flag.

    Written by the input handler between frames; the flock only reads a
    snapshot taken at the start of each tick.
    """

    def __init__(self):
        self.position = np.zeros(3, dtype=np.float64)
        self.active = False

    def move_to(self, position) -> None:
        """Set a new world-space position and mark the pointer active."""
        self.position = np.asarray(position, dtype=np.float64).reshape(3).copy()
        self.active = True

    def deactivate(self) -> None:
        self.active = False

    def snapshot(self) -> Tuple[np.ndarray, bool]:
        return self.position.copy(), self.active

    def __repr__(self):
        state = "active" if self.active else "inactive"
        return f"PointerTarget({self.position.tolist()}, {state})"
