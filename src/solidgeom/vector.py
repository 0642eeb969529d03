## vectors and directions for solidgeom

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

"""vectors and directions for **solidgeom**

====================
OVERVIEW
====================

A *vector* is a displacement: an ordered pair or triple of floats with
no invariant beyond finiteness.  A *direction* is a vector of unit
length that represents orientation only.

The plain ``Direction3d(x, y, z)`` constructor trusts its arguments,
which is what the frame and plane constructors rely on when they
already hold an orthonormal basis.  Everything that has to *produce*
a unit vector from arbitrary input goes through normalization instead:
``Direction3d.from_components()``, ``Vector3d.direction()`` and
``Vector3d.normalize()``.  Normalization is the one place a degeneracy
check happens: the squared length is compared with ``epsilon**2``
(see :mod:`solidgeom.tolerance`) and a
:class:`~solidgeom.errors.DegenerateDirection` is raised below it.

Two-dimensional values live in the z=0 plane when they pass through a
:class:`~solidgeom.xform.Matrix`.

perpendicular convention
========================

In 2D the perpendicular of ``(x, y)`` is ``(-y, x)``, a +90 degree
rotation.  In 3D there is no unique perpendicular, so
``Vector3d.perpendicular()`` zeroes the component of smallest
magnitude and swaps/negates the other two.  This is a convention
chosen to be deterministic and well conditioned (the result is never
shorter than ``sqrt(2/3)`` of the input), not a geometric necessity.
"""

import logging
from dataclasses import dataclass
from math import atan2, cos, sin, sqrt

import numpy as np

from solidgeom.errors import DegenerateDirection
from solidgeom.tolerance import isgoodnum, resolve
from solidgeom.xform import Transformable

logger = logging.getLogger(__name__)


def _normalize3(x, y, z, tol=None):
    sq = x*x + y*y + z*z
    eps = resolve(tol)
    if sq <= eps*eps:
        logger.debug('refusing to normalize (%g, %g, %g): below tolerance %g', x, y, z, eps)
        raise DegenerateDirection('cannot normalize a zero-length vector',
                                  details={'components': (x, y, z), 'tolerance': eps})
    inv = 1.0/sqrt(sq)
    return x*inv, y*inv, z*inv


def _perpendicular3(x, y, z):
    ax, ay, az = abs(x), abs(y), abs(z)
    if ax <= ay:
        if ax <= az:
            return 0.0, -z, y
        return -y, x, 0.0
    if ay <= az:
        return z, 0.0, -x
    return -y, x, 0.0


def _check_shape(arr, n):
    arr = np.asarray(arr, dtype=np.float64)
    if arr.shape != (n,):
        raise ValueError('expected array of shape ({},), got {}'.format(n, arr.shape))
    return arr


## frozen dataclasses hold plain floats, whatever numeric type
## (numpy scalars included) the caller passed in
def _as_floats(obj, *names):
    for name in names:
        object.__setattr__(obj, name, float(getattr(obj, name)))


@dataclass(frozen=True)
class Vector3d(Transformable):
    """Three-dimensional displacement."""

    x: float
    y: float
    z: float

    def __post_init__(self):
        _as_floats(self, 'x', 'y', 'z')

    @classmethod
    def from_components(cls, x, y, z):
        return cls(float(x), float(y), float(z))

    @classmethod
    def zero(cls):
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def interpolate_from(cls, a, b, t):
        """``a + t (b - a)``; valid for any real ``t``."""
        return cls(a.x + t*(b.x - a.x),
                   a.y + t*(b.y - a.y),
                   a.z + t*(b.z - a.z))

    def components(self):
        return (self.x, self.y, self.z)

    def __add__(self, other):
        if not isinstance(other, Vector3d):
            return NotImplemented
        return Vector3d(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        if not isinstance(other, Vector3d):
            return NotImplemented
        return Vector3d(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self):
        return Vector3d(-self.x, -self.y, -self.z)

    def __mul__(self, k):
        if not isgoodnum(k):
            return NotImplemented
        return Vector3d(self.x*k, self.y*k, self.z*k)

    __rmul__ = __mul__

    def __truediv__(self, k):
        if not isgoodnum(k):
            return NotImplemented
        return Vector3d(self.x/k, self.y/k, self.z/k)

    def scale_by(self, k):
        return self * k

    def reverse(self):
        return -self

    def dot(self, other):
        return self.x*other.x + self.y*other.y + self.z*other.z

    def cross(self, other):
        return Vector3d(self.y*other.z - self.z*other.y,
                        self.z*other.x - self.x*other.z,
                        self.x*other.y - self.y*other.x)

    def squared_length(self):
        return self.x*self.x + self.y*self.y + self.z*self.z

    def length(self):
        return sqrt(self.squared_length())

    def normalize(self, tol=None):
        """Return the unit vector parallel to this one.

        Raises :class:`~solidgeom.errors.ZeroVector` when the length is
        below tolerance.
        """
        return Vector3d(*_normalize3(self.x, self.y, self.z, tol))

    def direction(self, tol=None):
        """Like :meth:`normalize`, but returns a :class:`Direction3d`."""
        return Direction3d(*_normalize3(self.x, self.y, self.z, tol))

    def component_in(self, direction):
        """Scalar projection of this vector onto ``direction``."""
        return self.dot(direction)

    def projection_in(self, direction):
        """Vector projection of this vector onto ``direction``."""
        k = self.dot(direction)
        return Vector3d(direction.x*k, direction.y*k, direction.z*k)

    def perpendicular(self):
        """An arbitrary perpendicular vector (see module notes)."""
        return Vector3d(*_perpendicular3(self.x, self.y, self.z))

    def angle_from(self, other):
        """Unsigned angle in radians between ``other`` and this vector."""
        return atan2(self.cross(other).length(), self.dot(other))

    def equal_within(self, other, tol):
        return (abs(self.x - other.x) <= tol and
                abs(self.y - other.y) <= tol and
                abs(self.z - other.z) <= tol)

    def transform(self, m):
        return Vector3d(*m.apply_vector(self.components()))

    def project_into(self, sketch_plane):
        """Express this vector in the 2D basis of ``sketch_plane``."""
        return Vector2d(self.dot(sketch_plane.x_direction),
                        self.dot(sketch_plane.y_direction))

    def to_record(self):
        return {'x': self.x, 'y': self.y, 'z': self.z}

    @classmethod
    def from_record(cls, record):
        return cls(float(record['x']), float(record['y']), float(record['z']))

    def to_array(self):
        return np.array(self.components(), dtype=np.float64)

    @classmethod
    def from_array(cls, arr):
        arr = _check_shape(arr, 3)
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))


@dataclass(frozen=True)
class Direction3d(Transformable):
    """Three-dimensional unit vector.

    The constructor does not validate; use :meth:`from_components` for
    arbitrary input.
    """

    x: float
    y: float
    z: float

    def __post_init__(self):
        _as_floats(self, 'x', 'y', 'z')

    @classmethod
    def from_components(cls, x, y, z, tol=None):
        return cls(*_normalize3(float(x), float(y), float(z), tol))

    @classmethod
    def positive_x(cls):
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def positive_y(cls):
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def positive_z(cls):
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def negative_x(cls):
        return cls(-1.0, 0.0, 0.0)

    @classmethod
    def negative_y(cls):
        return cls(0.0, -1.0, 0.0)

    @classmethod
    def negative_z(cls):
        return cls(0.0, 0.0, -1.0)

    def components(self):
        return (self.x, self.y, self.z)

    def to_vector(self):
        return Vector3d(self.x, self.y, self.z)

    def __neg__(self):
        return Direction3d(-self.x, -self.y, -self.z)

    def reverse(self):
        return -self

    def dot(self, other):
        return self.x*other.x + self.y*other.y + self.z*other.z

    def component_in(self, direction):
        return self.dot(direction)

    def cross(self, other):
        return self.to_vector().cross(other)

    def angle_from(self, other):
        return self.to_vector().angle_from(other)

    def perpendicular(self):
        """An arbitrary perpendicular direction (see module notes)."""
        return Direction3d(*_normalize3(*_perpendicular3(self.x, self.y, self.z)))

    def equal_within(self, other, tol):
        return (abs(self.x - other.x) <= tol and
                abs(self.y - other.y) <= tol and
                abs(self.z - other.z) <= tol)

    def transform(self, m):
        return Direction3d(*_normalize3(*m.apply_vector(self.components())))

    def project_into(self, sketch_plane):
        """Project into ``sketch_plane``; raises if the result collapses."""
        return self.to_vector().project_into(sketch_plane).direction()

    def to_record(self):
        return {'x': self.x, 'y': self.y, 'z': self.z}

    @classmethod
    def from_record(cls, record):
        return cls(float(record['x']), float(record['y']), float(record['z']))

    def to_array(self):
        return np.array(self.components(), dtype=np.float64)

    @classmethod
    def from_array(cls, arr):
        """Build from a numpy array, normalizing the components."""
        arr = _check_shape(arr, 3)
        return cls.from_components(arr[0], arr[1], arr[2])


@dataclass(frozen=True)
class Vector2d(Transformable):
    """Two-dimensional displacement."""

    x: float
    y: float

    dimension = 2

    def __post_init__(self):
        _as_floats(self, 'x', 'y')

    @classmethod
    def from_components(cls, x, y):
        return cls(float(x), float(y))

    @classmethod
    def zero(cls):
        return cls(0.0, 0.0)

    @classmethod
    def interpolate_from(cls, a, b, t):
        return cls(a.x + t*(b.x - a.x),
                   a.y + t*(b.y - a.y))

    def components(self):
        return (self.x, self.y)

    def __add__(self, other):
        if not isinstance(other, Vector2d):
            return NotImplemented
        return Vector2d(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        if not isinstance(other, Vector2d):
            return NotImplemented
        return Vector2d(self.x - other.x, self.y - other.y)

    def __neg__(self):
        return Vector2d(-self.x, -self.y)

    def __mul__(self, k):
        if not isgoodnum(k):
            return NotImplemented
        return Vector2d(self.x*k, self.y*k)

    __rmul__ = __mul__

    def __truediv__(self, k):
        if not isgoodnum(k):
            return NotImplemented
        return Vector2d(self.x/k, self.y/k)

    def scale_by(self, k):
        return self * k

    def reverse(self):
        return -self

    def dot(self, other):
        return self.x*other.x + self.y*other.y

    def cross(self, other):
        """Signed area of the parallelogram spanned by the two vectors."""
        return self.x*other.y - self.y*other.x

    def squared_length(self):
        return self.x*self.x + self.y*self.y

    def length(self):
        return sqrt(self.squared_length())

    def normalize(self, tol=None):
        x, y, _ = _normalize3(self.x, self.y, 0.0, tol)
        return Vector2d(x, y)

    def direction(self, tol=None):
        x, y, _ = _normalize3(self.x, self.y, 0.0, tol)
        return Direction2d(x, y)

    def component_in(self, direction):
        return self.dot(direction)

    def projection_in(self, direction):
        k = self.dot(direction)
        return Vector2d(direction.x*k, direction.y*k)

    def perpendicular(self):
        """This vector rotated by +90 degrees."""
        return Vector2d(-self.y, self.x)

    def angle_from(self, other):
        """Signed angle in radians from ``other`` to this vector."""
        return atan2(other.cross(self), other.dot(self))

    def equal_within(self, other, tol):
        return abs(self.x - other.x) <= tol and abs(self.y - other.y) <= tol

    def transform(self, m):
        x, y, _ = m.apply_vector((self.x, self.y, 0.0))
        return Vector2d(x, y)

    def place_onto(self, sketch_plane):
        """Embed this vector in 3D using the basis of ``sketch_plane``."""
        xd = sketch_plane.x_direction
        yd = sketch_plane.y_direction
        return Vector3d(self.x*xd.x + self.y*yd.x,
                        self.x*xd.y + self.y*yd.y,
                        self.x*xd.z + self.y*yd.z)

    def to_record(self):
        return {'x': self.x, 'y': self.y}

    @classmethod
    def from_record(cls, record):
        return cls(float(record['x']), float(record['y']))

    def to_array(self):
        return np.array(self.components(), dtype=np.float64)

    @classmethod
    def from_array(cls, arr):
        arr = _check_shape(arr, 2)
        return cls(float(arr[0]), float(arr[1]))


@dataclass(frozen=True)
class Direction2d(Transformable):
    """Two-dimensional unit vector."""

    x: float
    y: float

    dimension = 2

    def __post_init__(self):
        _as_floats(self, 'x', 'y')

    @classmethod
    def from_components(cls, x, y, tol=None):
        nx, ny, _ = _normalize3(float(x), float(y), 0.0, tol)
        return cls(nx, ny)

    @classmethod
    def from_angle(cls, angle):
        """Direction at ``angle`` radians counterclockwise from +x."""
        return cls(cos(angle), sin(angle))

    @classmethod
    def positive_x(cls):
        return cls(1.0, 0.0)

    @classmethod
    def positive_y(cls):
        return cls(0.0, 1.0)

    @classmethod
    def negative_x(cls):
        return cls(-1.0, 0.0)

    @classmethod
    def negative_y(cls):
        return cls(0.0, -1.0)

    def components(self):
        return (self.x, self.y)

    def to_vector(self):
        return Vector2d(self.x, self.y)

    def to_angle(self):
        return atan2(self.y, self.x)

    def __neg__(self):
        return Direction2d(-self.x, -self.y)

    def reverse(self):
        return -self

    def dot(self, other):
        return self.x*other.x + self.y*other.y

    def component_in(self, direction):
        return self.dot(direction)

    def cross(self, other):
        return self.x*other.y - self.y*other.x

    def angle_from(self, other):
        return self.to_vector().angle_from(other)

    def perpendicular(self):
        """This direction rotated by +90 degrees."""
        return Direction2d(-self.y, self.x)

    def equal_within(self, other, tol):
        return abs(self.x - other.x) <= tol and abs(self.y - other.y) <= tol

    def transform(self, m):
        x, y, _ = _normalize3(*m.apply_vector((self.x, self.y, 0.0)))
        return Direction2d(x, y)

    def place_onto(self, sketch_plane):
        return Direction3d(*_normalize3(*self.to_vector().place_onto(sketch_plane).components()))

    def to_record(self):
        return {'x': self.x, 'y': self.y}

    @classmethod
    def from_record(cls, record):
        return cls(float(record['x']), float(record['y']))

    def to_array(self):
        return np.array(self.components(), dtype=np.float64)

    @classmethod
    def from_array(cls, arr):
        arr = _check_shape(arr, 2)
        return cls.from_components(arr[0], arr[1])


__all__ = [
    'Vector3d',
    'Direction3d',
    'Vector2d',
    'Direction2d',
]
