"""Bird rendering: cone bodies with two flapping wings, drawn from vertex arrays."""

import logging
import math

import numpy as np
from OpenGL.GL import *
from OpenGL.arrays import vbo

from config import flock as config
from flocking import Flock
from .mesh import cone_mesh, model_matrix, palette_rgb, wing_mesh

logger = logging.getLogger(__name__)


class _Mesh:
    """Static triangle list, uploaded to a VBO when the driver allows it."""

    def __init__(self, vertices: np.ndarray, normals: np.ndarray):
        self.vertices = vertices
        self.normals = normals
        self.count = len(vertices)
        self._vbo_vertices = None
        self._vbo_normals = None

    def upload(self) -> bool:
        try:
            self._vbo_vertices = vbo.VBO(self.vertices, usage=GL_STATIC_DRAW)
            self._vbo_normals = vbo.VBO(self.normals, usage=GL_STATIC_DRAW)
            return True
        except Exception:
            # Fallback to client-side arrays
            self._vbo_vertices = None
            self._vbo_normals = None
            return False

    def draw(self):
        glEnableClientState(GL_VERTEX_ARRAY)
        glEnableClientState(GL_NORMAL_ARRAY)

        if self._vbo_vertices is not None:
            self._vbo_vertices.bind()
            glVertexPointer(3, GL_FLOAT, 0, None)
            self._vbo_normals.bind()
            glNormalPointer(GL_FLOAT, 0, None)
            glDrawArrays(GL_TRIANGLES, 0, self.count)
            self._vbo_vertices.unbind()
            self._vbo_normals.unbind()
        else:
            glVertexPointer(3, GL_FLOAT, 0, self.vertices)
            glNormalPointer(GL_FLOAT, 0, self.normals)
            glDrawArrays(GL_TRIANGLES, 0, self.count)

        glDisableClientState(GL_VERTEX_ARRAY)
        glDisableClientState(GL_NORMAL_ARRAY)


class BirdRenderer:
    """Draws every boid in the flock, facing its direction of travel."""

    def __init__(self):
        bird = config.BIRD
        self.body = _Mesh(*cone_mesh(bird["body_radius"], bird["body_length"], bird["body_segments"]))
        self.wing = _Mesh(*wing_mesh(bird["wing_shape"]))
        self.wing_pivot = bird["wing_pivot"]
        self.palette = palette_rgb(config.COLORS["palette"])
        self._uploaded = False

    def setup_lighting(self):
        """Ambient plus one directional light; wings are lit on both faces."""
        ambient = config.COLORS["ambient_light"]
        diffuse = config.COLORS["directional_light"]

        glEnable(GL_LIGHTING)
        glEnable(GL_LIGHT0)
        glLightModelfv(GL_LIGHT_MODEL_AMBIENT, (ambient, ambient, ambient, 1.0))
        glLightModeli(GL_LIGHT_MODEL_TWO_SIDE, GL_TRUE)
        glLightfv(GL_LIGHT0, GL_DIFFUSE, (diffuse, diffuse, diffuse, 1.0))
        glLightfv(GL_LIGHT0, GL_AMBIENT, (0.0, 0.0, 0.0, 1.0))
        glEnable(GL_COLOR_MATERIAL)
        glColorMaterial(GL_FRONT_AND_BACK, GL_AMBIENT_AND_DIFFUSE)
        glEnable(GL_NORMALIZE)

    def _upload(self):
        if not (self.body.upload() and self.wing.upload()):
            logger.info("VBOs unavailable, drawing birds from client-side arrays")
        self._uploaded = True

    def _draw_wing(self, side: float, angle: float):
        px, py, pz = self.wing_pivot
        glPushMatrix()
        glTranslatef(px * side, py, pz)
        glRotatef(math.degrees(angle), 0.0, 0.0, 1.0)
        glScalef(side, 1.0, 1.0)
        self.wing.draw()
        glPopMatrix()

    def draw(self, flock: Flock):
        """Render all boids at their current pose."""
        if not self._uploaded:
            self._upload()

        # Set after the camera transform so the light stays fixed in world space
        glLightfv(GL_LIGHT0, GL_POSITION, config.COLORS["light_position"])

        for boid in flock:
            glPushMatrix()
            glMultMatrixf(model_matrix(boid.position, boid.rotation))
            glColor3f(*self.palette[boid.color_variant])

            self.body.draw()
            self._draw_wing(1.0, boid.left_wing_angle)
            self._draw_wing(-1.0, boid.right_wing_angle)

            glPopMatrix()
