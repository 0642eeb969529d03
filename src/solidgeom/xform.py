## generalized matrix transformation operations for 3D homogeneous
## coordinates in solidgeom

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

from abc import ABC, abstractmethod
from math import cos, sin

import numpy as np

from solidgeom.tolerance import isgoodnum

## A matrix is represented as a tuple of four row tuples.  Points are
## lifted to [x, y, z, 1] and vectors to [x, y, z, 0] before
## multiplication, so the translation column only ever moves points.
## Directions are vectors that get renormalized afterwards by their
## owning type.

## Two-dimensional entities live in the z=0 plane.  Every 2D operator
## below produces a matrix that leaves that plane invariant, so a 2D
## entity can be lifted, multiplied and dropped back without loss.

## Matrices are immutable.  Composition and transposition return new
## instances; the constructor functions at the bottom of this module
## take an ``inverse`` flag where the inverse has a closed form.

_IDENTITY = ((1.0, 0.0, 0.0, 0.0),
             (0.0, 1.0, 0.0, 0.0),
             (0.0, 0.0, 1.0, 0.0),
             (0.0, 0.0, 0.0, 1.0))


def _dot4(a, b):
    return a[0]*b[0] + a[1]*b[1] + a[2]*b[2] + a[3]*b[3]


class Matrix:
    """4x4 transformation matrix class for transforming homogeneous 3D coordinates"""

    __slots__ = ('m',)

    def __init__(self, a=None):
        if a is None:
            m = _IDENTITY
        elif isinstance(a, Matrix):
            m = a.m
        elif isinstance(a, (tuple, list)) and len(a) == 4:
            rows = []
            for r in a:
                if not isinstance(r, (tuple, list)) or len(r) != 4:
                    raise ValueError('bad row in matrix initialization: {}'.format(r))
                rows.append(tuple(Matrix._element(x) for x in r))
            m = tuple(rows)
        elif isinstance(a, (tuple, list)) and len(a) == 16:
            m = tuple(tuple(Matrix._element(a[i*4+j]) for j in range(4))
                      for i in range(4))
        else:
            raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))
        object.__setattr__(self, 'm', m)

    @staticmethod
    def _element(x):
        if not isgoodnum(x):
            raise ValueError('bad element in matrix initialization: {}'.format(x))
        return float(x)

    def __setattr__(self, name, value):
        raise AttributeError('Matrix instances are immutable')

    def __repr__(self):
        return "Matrix({},{},{},{})".format(*self.m)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.m == other.m

    def __hash__(self):
        return hash(self.m)

    #return value indexed by i,j
    def get(self, i, j):
        if i < 0 or i > 3 or j < 0 or j > 3:
            raise ValueError('bad index passed to get: {},{}'.format(i, j))
        return self.m[i][j]

    def getrow(self, i):
        if i < 0 or i > 3:
            raise ValueError('bad row passed to getrow: {}'.format(i))
        return self.m[i]

    def getcol(self, j):
        if j < 0 or j > 3:
            raise ValueError('bad column passed to getcol: {}'.format(j))
        return (self.m[0][j], self.m[1][j], self.m[2][j], self.m[3][j])

    def transpose(self):
        return Matrix([self.getcol(j) for j in range(4)])

    # matrix multiply.  If x is a matrix, compute MX.  If x is a
    # 4-vector, compute Mx. If x is a scalar, compute xM.
    def mul(self, x):
        if isinstance(x, Matrix):
            return Matrix([[_dot4(self.m[i], x.getcol(j)) for j in range(4)]
                           for i in range(4)])
        elif isinstance(x, (tuple, list)) and len(x) == 4:
            return tuple(_dot4(self.m[i], x) for i in range(4))
        elif isgoodnum(x):
            return Matrix([[v*x for v in row] for row in self.m])
        raise ValueError('bad thing passed to mul(): {}'.format(x))

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.mul(other)

    def then(self, other):
        """Return the matrix that applies ``self`` first, then ``other``."""
        return other.mul(self)

    def is_affine(self):
        return self.m[3] == (0.0, 0.0, 0.0, 1.0)

    def apply_point(self, p):
        """Map an ``(x, y, z)`` location, honouring translation."""
        r = self.mul((p[0], p[1], p[2], 1.0))
        w = r[3]
        if w == 1.0:
            return (r[0], r[1], r[2])
        if w == 0.0:
            raise ValueError('point mapped to infinity by {}'.format(self))
        return (r[0]/w, r[1]/w, r[2]/w)

    def apply_vector(self, v):
        """Map an ``(x, y, z)`` displacement, ignoring translation."""
        m = self.m
        x, y, z = v[0], v[1], v[2]
        return (m[0][0]*x + m[0][1]*y + m[0][2]*z,
                m[1][0]*x + m[1][1]*y + m[1][2]*z,
                m[2][0]*x + m[2][1]*y + m[2][2]*z)

    def to_array(self):
        """Return the matrix as a ``(4, 4)`` float numpy array."""
        return np.array(self.m, dtype=np.float64)

    def apply_array(self, values, vectors=False):
        """Map an ``(N, 3)`` array of points (or vectors) in one pass.

        Returns a new ``(N, 3)`` float array; the input is not modified.
        """
        arr = np.asarray(values, dtype=np.float64)
        if arr.ndim != 2 or arr.shape[1] != 3:
            raise ValueError('expected an array of shape (N, 3), got {}'.format(arr.shape))
        m = self.to_array()
        out = arr @ m[:3, :3].T
        if not vectors:
            out = out + m[:3, 3]
            if not self.is_affine():
                w = arr @ m[3, :3] + m[3, 3]
                out = out / w[:, np.newaxis]
        return out


class Transformable(ABC):
    """Interface shared by every solidgeom entity.

    A transformable entity knows how to push itself through a
    :class:`Matrix` and come back as a value of its own type.  Every
    operator in :mod:`solidgeom.transforms` and every conversion in
    :mod:`solidgeom.coordinates` bottoms out in :meth:`transform`.
    """

    #: 2 for entities living in the z=0 plane, 3 otherwise
    dimension = 3

    @abstractmethod
    def transform(self, m):
        """Return a copy of this entity mapped through matrix ``m``."""


def Identity():
    return Matrix()


def Translation(delta, inverse=False):
    if inverse:
        delta = (-delta[0], -delta[1], -delta[2])
    dx = delta[0]
    dy = delta[1]
    dz = delta[2]
    T = [[1, 0, 0, dx],
         [0, 1, 0, dy],
         [0, 0, 1, dz],
         [0, 0, 0, 1]]
    return Matrix(T)


# uniform scaling about an arbitrary center, p' = c + k (p - c)
def Scale(k, center=(0.0, 0.0, 0.0), inverse=False):
    if not isgoodnum(k):
        raise ValueError('bad scaling value passed to Scale: {}'.format(k))
    if inverse:
        k = 1.0/k
    cx, cy, cz = center[0], center[1], center[2]
    t = 1.0 - k
    S = [[k, 0, 0, t*cx],
         [0, k, 0, t*cy],
         [0, 0, k, t*cz],
         [0, 0, 0, 1.0]]
    return Matrix(S)


# Rodrigues' rotation about a unit axis through ``center``.  Angles are
# in radians, positive is counterclockwise looking down the axis from
# its positive end.
def Rotation(axis, angle, center=(0.0, 0.0, 0.0), inverse=False):
    ux = axis[0]
    uy = axis[1]
    uz = axis[2]

    if inverse:
        angle = -angle

    cang = cos(angle)
    cmin = 1.0 - cang
    sang = sin(angle)

    # see http://www.opengl-tutorial.org/assets/faq_quaternions/index.html#Q38
    R = [[cang + ux*ux*cmin, ux*uy*cmin - uz*sang, ux*uz*cmin + uy*sang],
         [uy*ux*cmin + uz*sang, cang + uy*uy*cmin, uy*uz*cmin - ux*sang],
         [uz*ux*cmin - uy*sang, uz*uy*cmin + ux*sang, cang + uz*uz*cmin]]
    return _affine(R, center)


# Householder reflection in the plane through ``origin`` with unit
# normal ``normal``.  In 2D the "plane" is the line perpendicular to a
# normal lying in z=0.  Reflections are their own inverse.
def Reflection(normal, origin=(0.0, 0.0, 0.0)):
    n = normal
    R = [[1.0 - 2.0*n[i]*n[j] if i == j else -2.0*n[i]*n[j] for j in range(3)]
         for i in range(3)]
    return _affine(R, origin)


# orthogonal projection onto the line through ``origin`` along unit
# ``direction``
def LineProjection(direction, origin=(0.0, 0.0, 0.0)):
    d = direction
    P = [[d[i]*d[j] for j in range(3)] for i in range(3)]
    return _affine(P, origin)


# orthogonal projection onto the plane through ``origin`` with unit
# ``normal``
def PlaneProjection(normal, origin=(0.0, 0.0, 0.0)):
    n = normal
    P = [[1.0 - n[i]*n[j] if i == j else -n[i]*n[j] for j in range(3)]
         for i in range(3)]
    return _affine(P, origin)


# change of basis for an orthonormal frame.  The forward matrix takes
# local coordinates to global ones; ``inverse=True`` gives the global
# to local map, which for an orthonormal basis is just the transpose of
# the rotation block.
def ChangeOfBasis(origin, xdir, ydir, zdir, inverse=False):
    if not inverse:
        B = [[xdir[0], ydir[0], zdir[0], origin[0]],
             [xdir[1], ydir[1], zdir[1], origin[1]],
             [xdir[2], ydir[2], zdir[2], origin[2]],
             [0, 0, 0, 1]]
        return Matrix(B)

    def _d(a):
        return a[0]*origin[0] + a[1]*origin[1] + a[2]*origin[2]

    B = [[xdir[0], xdir[1], xdir[2], -_d(xdir)],
         [ydir[0], ydir[1], ydir[2], -_d(ydir)],
         [zdir[0], zdir[1], zdir[2], -_d(zdir)],
         [0, 0, 0, 1]]
    return Matrix(B)


## build the affine matrix that applies linear block ``L`` about the
## fixed point ``c``, i.e. p' = c + L (p - c)
def _affine(L, c):
    t = [c[i] - (L[i][0]*c[0] + L[i][1]*c[1] + L[i][2]*c[2]) for i in range(3)]
    return Matrix([[L[0][0], L[0][1], L[0][2], t[0]],
                   [L[1][0], L[1][1], L[1][2], t[1]],
                   [L[2][0], L[2][1], L[2][2], t[2]],
                   [0, 0, 0, 1]])


__all__ = [
    'Matrix',
    'Transformable',
    'Identity',
    'Translation',
    'Scale',
    'Rotation',
    'Reflection',
    'LineProjection',
    'PlaneProjection',
    'ChangeOfBasis',
]
