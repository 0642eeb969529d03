## planes and sketch planes for solidgeom

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

"""Planes and sketch planes.

A :class:`Plane3d` carries an origin, two in-plane directions and a
normal, always with ``normal = x_direction x y_direction``.  A
:class:`SketchPlane3d` is the same thing seen as a 2D coordinate system
embedded in 3D space: it keeps only the in-plane basis and derives the
normal on demand.

Constructors that take explicit directions trust them to be
orthonormal.  Constructors that take less (a normal, or three points)
derive the rest by cross products so the invariant holds by
construction.
"""

from dataclasses import dataclass

from solidgeom.axis import Axis3d
from solidgeom.point import Point3d
from solidgeom.vector import Direction3d
from solidgeom.xform import ChangeOfBasis, Transformable


def _cross_direction(a, b):
    # cross product of two orthonormal directions, already unit length
    return Direction3d(a.y*b.z - a.z*b.y,
                       a.z*b.x - a.x*b.z,
                       a.x*b.y - a.y*b.x)


@dataclass(frozen=True)
class Plane3d(Transformable):
    origin_point: Point3d
    x_direction: Direction3d
    y_direction: Direction3d
    normal_direction: Direction3d

    @classmethod
    def xy(cls):
        return cls(Point3d.origin(), Direction3d.positive_x(),
                   Direction3d.positive_y(), Direction3d.positive_z())

    @classmethod
    def yz(cls):
        return cls(Point3d.origin(), Direction3d.positive_y(),
                   Direction3d.positive_z(), Direction3d.positive_x())

    @classmethod
    def zx(cls):
        return cls(Point3d.origin(), Direction3d.positive_z(),
                   Direction3d.positive_x(), Direction3d.positive_y())

    @classmethod
    def from_x_and_y(cls, origin, x_direction, y_direction):
        """Plane spanned by two orthonormal directions; normal is derived."""
        return cls(origin, x_direction, y_direction,
                   _cross_direction(x_direction, y_direction))

    @classmethod
    def through(cls, point, normal):
        """Plane through ``point`` with the given normal direction.

        The in-plane x direction follows the perpendicular convention
        of :meth:`Direction3d.perpendicular`.
        """
        x = normal.perpendicular()
        y = _cross_direction(normal, x)
        return cls(point, x, y, normal)

    @classmethod
    def through_points(cls, p1, p2, p3, tol=None):
        """Plane through three points, x direction from ``p1`` to ``p2``.

        Raises :class:`~solidgeom.errors.DegenerateDirection` if the
        points are coincident or collinear.
        """
        u = p2 - p1
        x = u.direction(tol)
        normal = u.cross(p3 - p1).direction(tol)
        return cls(p1, x, _cross_direction(normal, x), normal)

    def normal_axis(self):
        return Axis3d(self.origin_point, self.normal_direction)

    def x_axis(self):
        return Axis3d(self.origin_point, self.x_direction)

    def y_axis(self):
        return Axis3d(self.origin_point, self.y_direction)

    def move_to(self, point):
        return Plane3d(point, self.x_direction, self.y_direction, self.normal_direction)

    def offset_by(self, distance):
        """The parallel plane ``distance`` along the normal."""
        return self.move_to(Point3d.along(self.normal_axis(), distance))

    def reverse_normal(self):
        # swapping the in-plane directions keeps normal == x cross y
        return Plane3d(self.origin_point, self.y_direction, self.x_direction,
                       -self.normal_direction)

    def to_sketch_plane(self):
        return SketchPlane3d(self.origin_point, self.x_direction, self.y_direction)

    def to_global_matrix(self):
        return ChangeOfBasis(self.origin_point.coordinates(),
                             self.x_direction.components(),
                             self.y_direction.components(),
                             self.normal_direction.components())

    def to_local_matrix(self):
        return ChangeOfBasis(self.origin_point.coordinates(),
                             self.x_direction.components(),
                             self.y_direction.components(),
                             self.normal_direction.components(),
                             inverse=True)

    def equal_within(self, other, tol):
        return (self.origin_point.equal_within(other.origin_point, tol) and
                self.x_direction.equal_within(other.x_direction, tol) and
                self.y_direction.equal_within(other.y_direction, tol) and
                self.normal_direction.equal_within(other.normal_direction, tol))

    def transform(self, m):
        return Plane3d.from_x_and_y(self.origin_point.transform(m),
                                    self.x_direction.transform(m),
                                    self.y_direction.transform(m))

    def to_record(self):
        return {'origin_point': self.origin_point.to_record(),
                'x_direction': self.x_direction.to_record(),
                'y_direction': self.y_direction.to_record(),
                'normal_direction': self.normal_direction.to_record()}

    @classmethod
    def from_record(cls, record):
        return cls(Point3d.from_record(record['origin_point']),
                   Direction3d.from_record(record['x_direction']),
                   Direction3d.from_record(record['y_direction']),
                   Direction3d.from_record(record['normal_direction']))


@dataclass(frozen=True)
class SketchPlane3d(Transformable):
    origin_point: Point3d
    x_direction: Direction3d
    y_direction: Direction3d

    @classmethod
    def xy(cls):
        return Plane3d.xy().to_sketch_plane()

    @classmethod
    def yz(cls):
        return Plane3d.yz().to_sketch_plane()

    @classmethod
    def zx(cls):
        return Plane3d.zx().to_sketch_plane()

    @classmethod
    def from_plane(cls, plane):
        return plane.to_sketch_plane()

    def normal_direction(self):
        return _cross_direction(self.x_direction, self.y_direction)

    def normal_axis(self):
        return Axis3d(self.origin_point, self.normal_direction())

    def x_axis(self):
        return Axis3d(self.origin_point, self.x_direction)

    def y_axis(self):
        return Axis3d(self.origin_point, self.y_direction)

    def to_plane(self):
        return Plane3d.from_x_and_y(self.origin_point, self.x_direction, self.y_direction)

    def move_to(self, point):
        return SketchPlane3d(point, self.x_direction, self.y_direction)

    def to_global_matrix(self):
        return self.to_plane().to_global_matrix()

    def to_local_matrix(self):
        return self.to_plane().to_local_matrix()

    def equal_within(self, other, tol):
        return (self.origin_point.equal_within(other.origin_point, tol) and
                self.x_direction.equal_within(other.x_direction, tol) and
                self.y_direction.equal_within(other.y_direction, tol))

    def transform(self, m):
        return SketchPlane3d(self.origin_point.transform(m),
                             self.x_direction.transform(m),
                             self.y_direction.transform(m))

    def to_record(self):
        return {'origin_point': self.origin_point.to_record(),
                'x_direction': self.x_direction.to_record(),
                'y_direction': self.y_direction.to_record()}

    @classmethod
    def from_record(cls, record):
        return cls(Point3d.from_record(record['origin_point']),
                   Direction3d.from_record(record['x_direction']),
                   Direction3d.from_record(record['y_direction']))


__all__ = [
    'Plane3d',
    'SketchPlane3d',
]
