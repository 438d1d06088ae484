"""Rendering components for the amber flock.

`rendering.mesh` is plain numpy. `rendering.birds` and `rendering.text` need
PyOpenGL and a live context, so import them directly where a window exists.
"""
