## coordinate frames for solidgeom

## Copyright (c) 2025 solidgeom contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""local coordinate frames for **solidgeom**

====================
OVERVIEW
====================

A frame is an origin point plus an orthonormal basis: two directions in
2D, three in 3D.  Frames are the reference systems used by
:func:`solidgeom.coordinates.relative_to` and
:func:`solidgeom.coordinates.place_in`.

Each frame can hand out the two matrices that move between its local
coordinates and the global ones:

- ``to_global_matrix()`` takes local coordinates to global ones, with
  the basis directions as columns and the origin as translation.
- ``to_local_matrix()`` is its inverse.  Because the basis is
  orthonormal this is simply the transposed rotation block with the
  origin pushed through it, no numeric inversion required.

Explicit bases passed to the constructors are trusted to already be
orthonormal and are not re-validated.  The derived constructors
(``from_x_and_y``, ``with_z_direction``, ``with_x_direction``) build
the missing directions with cross products or a +90 degree rotation, so
the result is orthonormal by construction.

Frames may be left-handed, e.g. after a mirror; ``is_right_handed()``
tells the two apart.
"""

from dataclasses import dataclass

from solidgeom.axis import Axis2d, Axis3d
from solidgeom.plane import Plane3d, SketchPlane3d, _cross_direction
from solidgeom.point import Point2d, Point3d
from solidgeom.vector import Direction2d, Direction3d
from solidgeom.xform import ChangeOfBasis, Transformable


@dataclass(frozen=True)
class Frame3d(Transformable):
    origin_point: Point3d
    x_direction: Direction3d
    y_direction: Direction3d
    z_direction: Direction3d

    @classmethod
    def at_origin(cls):
        return cls.at_point(Point3d.origin())

    @classmethod
    def at_point(cls, point):
        return cls(point, Direction3d.positive_x(),
                   Direction3d.positive_y(), Direction3d.positive_z())

    @classmethod
    def from_x_and_y(cls, origin, x_direction, y_direction):
        """Right-handed frame from two orthonormal directions."""
        return cls(origin, x_direction, y_direction,
                   _cross_direction(x_direction, y_direction))

    @classmethod
    def with_z_direction(cls, origin, z_direction):
        """Right-handed frame with the given z direction.

        x is chosen by the perpendicular convention of
        :meth:`Direction3d.perpendicular`, then ``y = z cross x``.
        """
        x = z_direction.perpendicular()
        return cls(origin, x, _cross_direction(z_direction, x), z_direction)

    def x_axis(self):
        return Axis3d(self.origin_point, self.x_direction)

    def y_axis(self):
        return Axis3d(self.origin_point, self.y_direction)

    def z_axis(self):
        return Axis3d(self.origin_point, self.z_direction)

    def xy_plane(self):
        return Plane3d.from_x_and_y(self.origin_point, self.x_direction, self.y_direction)

    def yz_plane(self):
        return Plane3d.from_x_and_y(self.origin_point, self.y_direction, self.z_direction)

    def zx_plane(self):
        return Plane3d.from_x_and_y(self.origin_point, self.z_direction, self.x_direction)

    def xy_sketch_plane(self):
        return SketchPlane3d(self.origin_point, self.x_direction, self.y_direction)

    def yz_sketch_plane(self):
        return SketchPlane3d(self.origin_point, self.y_direction, self.z_direction)

    def zx_sketch_plane(self):
        return SketchPlane3d(self.origin_point, self.z_direction, self.x_direction)

    def is_right_handed(self):
        return self.x_direction.cross(self.y_direction).dot(self.z_direction) > 0.0

    def reverse_x(self):
        return Frame3d(self.origin_point, -self.x_direction, self.y_direction, self.z_direction)

    def reverse_y(self):
        return Frame3d(self.origin_point, self.x_direction, -self.y_direction, self.z_direction)

    def reverse_z(self):
        return Frame3d(self.origin_point, self.x_direction, self.y_direction, -self.z_direction)

    def move_to(self, point):
        return Frame3d(point, self.x_direction, self.y_direction, self.z_direction)

    def _basis(self):
        return (self.origin_point.coordinates(),
                self.x_direction.components(),
                self.y_direction.components(),
                self.z_direction.components())

    def to_global_matrix(self):
        return ChangeOfBasis(*self._basis())

    def to_local_matrix(self):
        return ChangeOfBasis(*self._basis(), inverse=True)

    def equal_within(self, other, tol):
        return (self.origin_point.equal_within(other.origin_point, tol) and
                self.x_direction.equal_within(other.x_direction, tol) and
                self.y_direction.equal_within(other.y_direction, tol) and
                self.z_direction.equal_within(other.z_direction, tol))

    def transform(self, m):
        return Frame3d(self.origin_point.transform(m),
                       self.x_direction.transform(m),
                       self.y_direction.transform(m),
                       self.z_direction.transform(m))

    def to_record(self):
        return {'origin_point': self.origin_point.to_record(),
                'x_direction': self.x_direction.to_record(),
                'y_direction': self.y_direction.to_record(),
                'z_direction': self.z_direction.to_record()}

    @classmethod
    def from_record(cls, record):
        return cls(Point3d.from_record(record['origin_point']),
                   Direction3d.from_record(record['x_direction']),
                   Direction3d.from_record(record['y_direction']),
                   Direction3d.from_record(record['z_direction']))


@dataclass(frozen=True)
class Frame2d(Transformable):
    origin_point: Point2d
    x_direction: Direction2d
    y_direction: Direction2d

    dimension = 2

    @classmethod
    def at_origin(cls):
        return cls.at_point(Point2d.origin())

    @classmethod
    def at_point(cls, point):
        return cls(point, Direction2d.positive_x(), Direction2d.positive_y())

    @classmethod
    def with_x_direction(cls, origin, x_direction):
        """Right-handed frame; y is x rotated by +90 degrees."""
        return cls(origin, x_direction, x_direction.perpendicular())

    @classmethod
    def with_y_direction(cls, origin, y_direction):
        """Right-handed frame; x is y rotated by -90 degrees."""
        return cls(origin, -y_direction.perpendicular(), y_direction)

    def x_axis(self):
        return Axis2d(self.origin_point, self.x_direction)

    def y_axis(self):
        return Axis2d(self.origin_point, self.y_direction)

    def is_right_handed(self):
        return self.x_direction.cross(self.y_direction) > 0.0

    def reverse_x(self):
        return Frame2d(self.origin_point, -self.x_direction, self.y_direction)

    def reverse_y(self):
        return Frame2d(self.origin_point, self.x_direction, -self.y_direction)

    def move_to(self, point):
        return Frame2d(point, self.x_direction, self.y_direction)

    ## the 2D basis is lifted into z=0 with +z as the third column so
    ## the matrices leave the plane invariant
    def _basis(self):
        o = self.origin_point
        x = self.x_direction
        y = self.y_direction
        return ((o.x, o.y, 0.0), (x.x, x.y, 0.0), (y.x, y.y, 0.0), (0.0, 0.0, 1.0))

    def to_global_matrix(self):
        return ChangeOfBasis(*self._basis())

    def to_local_matrix(self):
        return ChangeOfBasis(*self._basis(), inverse=True)

    def equal_within(self, other, tol):
        return (self.origin_point.equal_within(other.origin_point, tol) and
                self.x_direction.equal_within(other.x_direction, tol) and
                self.y_direction.equal_within(other.y_direction, tol))

    def transform(self, m):
        return Frame2d(self.origin_point.transform(m),
                       self.x_direction.transform(m),
                       self.y_direction.transform(m))

    def to_record(self):
        return {'origin_point': self.origin_point.to_record(),
                'x_direction': self.x_direction.to_record(),
                'y_direction': self.y_direction.to_record()}

    @classmethod
    def from_record(cls, record):
        return cls(Point2d.from_record(record['origin_point']),
                   Direction2d.from_record(record['x_direction']),
                   Direction2d.from_record(record['y_direction']))


__all__ = [
    'Frame3d',
    'Frame2d',
]
