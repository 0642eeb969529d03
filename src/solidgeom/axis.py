## axes for solidgeom

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

"""Oriented lines: an origin point plus a unit direction."""

from dataclasses import dataclass

from solidgeom.point import Point2d, Point3d
from solidgeom.vector import Direction2d, Direction3d
from solidgeom.xform import Transformable


@dataclass(frozen=True)
class Axis3d(Transformable):
    origin_point: Point3d
    direction: Direction3d

    @classmethod
    def through(cls, point, direction):
        return cls(point, direction)

    @classmethod
    def x(cls):
        return cls(Point3d.origin(), Direction3d.positive_x())

    @classmethod
    def y(cls):
        return cls(Point3d.origin(), Direction3d.positive_y())

    @classmethod
    def z(cls):
        return cls(Point3d.origin(), Direction3d.positive_z())

    @classmethod
    def perpendicular_to(cls, axis):
        """Axis through the same origin, perpendicular to ``axis``.

        The direction is picked by the smallest-component convention
        of :meth:`Direction3d.perpendicular`; any perpendicular would do
        geometrically.
        """
        return cls(axis.origin_point, axis.direction.perpendicular())

    def reverse(self):
        return Axis3d(self.origin_point, -self.direction)

    def move_to(self, point):
        return Axis3d(point, self.direction)

    def point_at(self, distance):
        return Point3d.along(self, distance)

    def equal_within(self, other, tol):
        return (self.origin_point.equal_within(other.origin_point, tol) and
                self.direction.equal_within(other.direction, tol))

    def transform(self, m):
        return Axis3d(self.origin_point.transform(m), self.direction.transform(m))

    def project_into(self, sketch_plane):
        return Axis2d(self.origin_point.project_into(sketch_plane),
                      self.direction.project_into(sketch_plane))

    def to_record(self):
        return {'origin_point': self.origin_point.to_record(),
                'direction': self.direction.to_record()}

    @classmethod
    def from_record(cls, record):
        return cls(Point3d.from_record(record['origin_point']),
                   Direction3d.from_record(record['direction']))


@dataclass(frozen=True)
class Axis2d(Transformable):
    origin_point: Point2d
    direction: Direction2d

    dimension = 2

    @classmethod
    def through(cls, point, direction):
        return cls(point, direction)

    @classmethod
    def x(cls):
        return cls(Point2d.origin(), Direction2d.positive_x())

    @classmethod
    def y(cls):
        return cls(Point2d.origin(), Direction2d.positive_y())

    @classmethod
    def perpendicular_to(cls, axis):
        """Axis through the same origin, rotated +90 degrees."""
        return cls(axis.origin_point, axis.direction.perpendicular())

    def reverse(self):
        return Axis2d(self.origin_point, -self.direction)

    def move_to(self, point):
        return Axis2d(point, self.direction)

    def point_at(self, distance):
        return Point2d.along(self, distance)

    def equal_within(self, other, tol):
        return (self.origin_point.equal_within(other.origin_point, tol) and
                self.direction.equal_within(other.direction, tol))

    def transform(self, m):
        return Axis2d(self.origin_point.transform(m), self.direction.transform(m))

    def place_onto(self, sketch_plane):
        return Axis3d(self.origin_point.place_onto(sketch_plane),
                      self.direction.place_onto(sketch_plane))

    def to_record(self):
        return {'origin_point': self.origin_point.to_record(),
                'direction': self.direction.to_record()}

    @classmethod
    def from_record(cls, record):
        return cls(Point2d.from_record(record['origin_point']),
                   Direction2d.from_record(record['direction']))


__all__ = [
    'Axis3d',
    'Axis2d',
]
