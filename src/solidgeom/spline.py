## quadratic Bezier splines for solidgeom

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

"""Quadratic Bezier splines.

A quadratic spline is exactly three control points ``p1, p2, p3``.
Everything here is built on de Casteljau's construction: for a
parameter ``t``

- ``q1 = lerp(p1, p2, t)`` and ``q2 = lerp(p2, p3, t)``,
- the point on the curve is ``lerp(q1, q2, t)``,
- the tangent is ``2 (q2 - q1)``,
- and ``(p1, q1, r), (r, q2, p3)`` with ``r = lerp(q1, q2, t)`` split the
  curve at ``t``.

Any real ``t`` is accepted; values outside ``[0, 1]`` extrapolate.
Coincident or collinear control points are valid and simply give a
degenerate curve, since nothing in evaluation divides.

Because Bezier evaluation is affine invariant, every transformation
and conversion is applied to the control points one at a time through
:meth:`map_points`.
"""

from dataclasses import dataclass

from solidgeom.point import Point2d, Point3d
from solidgeom.xform import Transformable


class _QuadraticSpline(Transformable):
    """Operations shared by the 2D and 3D splines."""

    _point_type = None

    @classmethod
    def from_control_points(cls, p1, p2, p3):
        return cls(p1, p2, p3)

    def control_points(self):
        return (self.p1, self.p2, self.p3)

    def start_point(self):
        return self.p1

    def end_point(self):
        return self.p3

    def point_on(self, t):
        P = self._point_type
        q1 = P.interpolate_from(self.p1, self.p2, t)
        q2 = P.interpolate_from(self.p2, self.p3, t)
        return P.interpolate_from(q1, q2, t)

    def derivative(self, t):
        v1 = self.p2 - self.p1
        v2 = self.p3 - self.p2
        return type(v1).interpolate_from(v1, v2, t) * 2.0

    def evaluate(self, t):
        """Return ``(point, derivative)`` at ``t`` from one de Casteljau pass."""
        P = self._point_type
        q1 = P.interpolate_from(self.p1, self.p2, t)
        q2 = P.interpolate_from(self.p2, self.p3, t)
        return P.interpolate_from(q1, q2, t), (q2 - q1) * 2.0

    def start_derivative(self):
        return (self.p2 - self.p1) * 2.0

    def end_derivative(self):
        return (self.p3 - self.p2) * 2.0

    def second_derivative(self):
        """Constant second derivative, ``2 (p3 - 2 p2 + p1)``."""
        return ((self.p3 - self.p2) - (self.p2 - self.p1)) * 2.0

    def split_at(self, t):
        P = self._point_type
        q1 = P.interpolate_from(self.p1, self.p2, t)
        q2 = P.interpolate_from(self.p2, self.p3, t)
        r = P.interpolate_from(q1, q2, t)
        return type(self)(self.p1, q1, r), type(self)(r, q2, self.p3)

    def bisect(self):
        return self.split_at(0.5)

    def reverse(self):
        return type(self)(self.p3, self.p2, self.p1)

    def map_points(self, fn, cls=None):
        """Apply ``fn`` to each control point and reassemble.

        ``cls`` picks the spline type of the result, for conversions
        that change dimension; it defaults to this spline's own type.
        """
        cls = cls or type(self)
        return cls(fn(self.p1), fn(self.p2), fn(self.p3))

    def transform(self, m):
        return self.map_points(lambda p: p.transform(m))

    def bounding_box(self):
        """Exact axis-aligned extents as a ``(min_point, max_point)`` pair.

        Each coordinate is a quadratic in ``t``; besides the end points
        its only possible extremum is where the derivative vanishes.
        """
        mins = []
        maxs = []
        for c1, c2, c3 in zip(self.p1.coordinates(),
                              self.p2.coordinates(),
                              self.p3.coordinates()):
            values = [c1, c3]
            denom = c1 - 2.0*c2 + c3
            if denom != 0.0:
                t = (c1 - c2)/denom
                if 0.0 < t < 1.0:
                    s = 1.0 - t
                    values.append(s*s*c1 + 2.0*s*t*c2 + t*t*c3)
            mins.append(min(values))
            maxs.append(max(values))
        P = self._point_type
        return P(*mins), P(*maxs)

    def sample(self, segments=16):
        """Return ``segments + 1`` points evenly spaced in parameter."""
        if segments < 1:
            raise ValueError('segments must be >= 1')
        return [self.point_on(i/segments) for i in range(segments + 1)]

    def equal_within(self, other, tol):
        return (self.p1.equal_within(other.p1, tol) and
                self.p2.equal_within(other.p2, tol) and
                self.p3.equal_within(other.p3, tol))

    def to_record(self):
        return {'p1': self.p1.to_record(),
                'p2': self.p2.to_record(),
                'p3': self.p3.to_record()}

    @classmethod
    def from_record(cls, record):
        P = cls._point_type
        return cls(P.from_record(record['p1']),
                   P.from_record(record['p2']),
                   P.from_record(record['p3']))


@dataclass(frozen=True)
class QuadraticSpline3d(_QuadraticSpline):
    p1: Point3d
    p2: Point3d
    p3: Point3d

    _point_type = Point3d

    def project_into(self, sketch_plane):
        return self.map_points(lambda p: p.project_into(sketch_plane), QuadraticSpline2d)


@dataclass(frozen=True)
class QuadraticSpline2d(_QuadraticSpline):
    p1: Point2d
    p2: Point2d
    p3: Point2d

    dimension = 2
    _point_type = Point2d

    def place_onto(self, sketch_plane):
        return self.map_points(lambda p: p.place_onto(sketch_plane), QuadraticSpline3d)


__all__ = [
    'QuadraticSpline3d',
    'QuadraticSpline2d',
]
