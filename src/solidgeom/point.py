## points for solidgeom

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

"""Points: locations, as opposed to displacements.

The difference between a point and a vector is enforced through the
arithmetic operators.  ``point + vector`` and ``point - vector`` give a
point, ``point - point`` gives a vector, and ``point + point`` is a
``TypeError``.  Points lift to ``[x, y, z, 1]`` when they pass through
a :class:`~solidgeom.xform.Matrix`, so unlike vectors they feel
translation.
"""

from dataclasses import dataclass
from math import sqrt

import numpy as np

from solidgeom.vector import Vector2d, Vector3d, _as_floats, _check_shape
from solidgeom.xform import Transformable


@dataclass(frozen=True)
class Point3d(Transformable):
    """Location in three-dimensional space."""

    x: float
    y: float
    z: float

    def __post_init__(self):
        _as_floats(self, 'x', 'y', 'z')

    @classmethod
    def from_coordinates(cls, x, y, z):
        return cls(float(x), float(y), float(z))

    @classmethod
    def origin(cls):
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def interpolate_from(cls, a, b, t):
        """``a + t (b - a)``; extrapolates for ``t`` outside ``[0, 1]``."""
        return cls(a.x + t*(b.x - a.x),
                   a.y + t*(b.y - a.y),
                   a.z + t*(b.z - a.z))

    @classmethod
    def midpoint(cls, a, b):
        return cls.interpolate_from(a, b, 0.5)

    @classmethod
    def centroid(cls, points):
        pts = list(points)
        if not pts:
            raise ValueError('cannot take the centroid of no points')
        n = float(len(pts))
        return cls(sum(p.x for p in pts)/n,
                   sum(p.y for p in pts)/n,
                   sum(p.z for p in pts)/n)

    @classmethod
    def along(cls, axis, distance):
        """The point ``distance`` along ``axis`` from its origin."""
        o = axis.origin_point
        d = axis.direction
        return cls(o.x + distance*d.x, o.y + distance*d.y, o.z + distance*d.z)

    def coordinates(self):
        return (self.x, self.y, self.z)

    def __add__(self, other):
        if not isinstance(other, Vector3d):
            return NotImplemented
        return Point3d(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        if isinstance(other, Point3d):
            return Vector3d(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Vector3d):
            return Point3d(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def vector_from(self, other):
        return self - other

    def squared_distance_from(self, other):
        return (self - other).squared_length()

    def distance_from(self, other):
        return sqrt(self.squared_distance_from(other))

    def signed_distance_along(self, axis):
        """Distance along ``axis`` from its origin to this point's projection."""
        return (self - axis.origin_point).component_in(axis.direction)

    def signed_distance_from(self, plane):
        """Distance from ``plane``, positive on the side its normal points to."""
        return (self - plane.origin_point).component_in(plane.normal_direction)

    def equal_within(self, other, tol):
        return (abs(self.x - other.x) <= tol and
                abs(self.y - other.y) <= tol and
                abs(self.z - other.z) <= tol)

    def transform(self, m):
        return Point3d(*m.apply_point(self.coordinates()))

    def project_into(self, sketch_plane):
        """Project onto ``sketch_plane`` and express in its 2D coordinates."""
        v = self - sketch_plane.origin_point
        return Point2d(v.dot(sketch_plane.x_direction),
                       v.dot(sketch_plane.y_direction))

    def to_record(self):
        return {'x': self.x, 'y': self.y, 'z': self.z}

    @classmethod
    def from_record(cls, record):
        return cls(float(record['x']), float(record['y']), float(record['z']))

    def to_array(self):
        return np.array(self.coordinates(), dtype=np.float64)

    @classmethod
    def from_array(cls, arr):
        arr = _check_shape(arr, 3)
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))


@dataclass(frozen=True)
class Point2d(Transformable):
    """Location in the plane."""

    x: float
    y: float

    dimension = 2

    def __post_init__(self):
        _as_floats(self, 'x', 'y')

    @classmethod
    def from_coordinates(cls, x, y):
        return cls(float(x), float(y))

    @classmethod
    def origin(cls):
        return cls(0.0, 0.0)

    @classmethod
    def interpolate_from(cls, a, b, t):
        return cls(a.x + t*(b.x - a.x),
                   a.y + t*(b.y - a.y))

    @classmethod
    def midpoint(cls, a, b):
        return cls.interpolate_from(a, b, 0.5)

    @classmethod
    def centroid(cls, points):
        pts = list(points)
        if not pts:
            raise ValueError('cannot take the centroid of no points')
        n = float(len(pts))
        return cls(sum(p.x for p in pts)/n, sum(p.y for p in pts)/n)

    @classmethod
    def along(cls, axis, distance):
        o = axis.origin_point
        d = axis.direction
        return cls(o.x + distance*d.x, o.y + distance*d.y)

    def coordinates(self):
        return (self.x, self.y)

    def __add__(self, other):
        if not isinstance(other, Vector2d):
            return NotImplemented
        return Point2d(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        if isinstance(other, Point2d):
            return Vector2d(self.x - other.x, self.y - other.y)
        if isinstance(other, Vector2d):
            return Point2d(self.x - other.x, self.y - other.y)
        return NotImplemented

    def vector_from(self, other):
        return self - other

    def squared_distance_from(self, other):
        return (self - other).squared_length()

    def distance_from(self, other):
        return sqrt(self.squared_distance_from(other))

    def signed_distance_along(self, axis):
        return (self - axis.origin_point).component_in(axis.direction)

    def signed_distance_from(self, axis):
        """Distance from ``axis``, positive to the left of its direction."""
        return axis.direction.cross(self - axis.origin_point)

    def equal_within(self, other, tol):
        return abs(self.x - other.x) <= tol and abs(self.y - other.y) <= tol

    def transform(self, m):
        x, y, _ = m.apply_point((self.x, self.y, 0.0))
        return Point2d(x, y)

    def place_onto(self, sketch_plane):
        """Embed this point in 3D on ``sketch_plane``."""
        o = sketch_plane.origin_point
        return o + Vector2d(self.x, self.y).place_onto(sketch_plane)

    def to_record(self):
        return {'x': self.x, 'y': self.y}

    @classmethod
    def from_record(cls, record):
        return cls(float(record['x']), float(record['y']))

    def to_array(self):
        return np.array(self.coordinates(), dtype=np.float64)

    @classmethod
    def from_array(cls, arr):
        arr = _check_shape(arr, 2)
        return cls(float(arr[0]), float(arr[1]))


__all__ = [
    'Point3d',
    'Point2d',
]
