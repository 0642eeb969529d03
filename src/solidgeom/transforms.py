## affine transformation operators for solidgeom

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

"""affine transformation operators for **solidgeom**

====================
OVERVIEW
====================

Every operator here takes the entity first and returns a new entity
of the same type.  Entities are any :class:`~solidgeom.xform.Transformable`:
vectors, directions, points, axes, frames, planes, sketch planes and
splines, in 2D or 3D.  Each operator builds one
:class:`~solidgeom.xform.Matrix` from its parameters and hands it to
the entity's ``transform()``, so the per-type code is written once.

- ``scale_about(x, center, k)`` -- ``p' = center + k (p - center)``.
  ``k = 1`` is the identity and ``k = 0`` collapses points onto
  ``center``.  Negative ``k`` is a point reflection plus scale, which
  reverses directions; that is allowed but rarely what you want.

- ``rotate_around(x, pivot, angle)`` -- rotate by ``angle`` radians,
  counterclockwise looking down the pivot axis from its positive end.
  The pivot is an ``Axis3d`` for 3D entities (Rodrigues' formula) or a
  ``Point2d`` for 2D ones.

- ``translate_by(x, delta)`` / ``translate_in(x, direction, distance)``
  -- pure additive shift.  Vectors are displacements and come back
  unchanged.

- ``mirror_across(x, mirror)`` -- reflect across an ``Axis2d`` or a
  ``Plane3d``/``SketchPlane3d``, ``p' = p - 2 ((p - o) . n) n``.

- ``project_onto(x, target)`` -- orthogonal projection onto an
  ``Axis2d``, ``Axis3d`` or ``Plane3d``/``SketchPlane3d``.  Applying it
  twice is the same as applying it once.

- ``transform(x, m)`` -- apply an arbitrary matrix.

directions
==========

Directions carry no position, so translating one is a silent no-op,
as it is for the directions inside an axis, frame or plane.

Scaling a direction by ``k > 0`` leaves it unchanged and by ``k < 0``
reverses it.  Scaling anything that carries a direction by ``k = 0``
(within tolerance) raises :class:`~solidgeom.errors.InvalidOperation`,
since no unit direction survives it.

Frames, planes and sketch planes cannot be projected, since the result
would no longer be orthonormal; that raises ``InvalidOperation`` too.
Projecting a direction or axis whose direction collapses (it was
perpendicular to the target) raises
:class:`~solidgeom.errors.DegenerateDirection`.
"""

from solidgeom.axis import Axis2d, Axis3d
from solidgeom.errors import InvalidOperation
from solidgeom.frame import Frame2d, Frame3d
from solidgeom.plane import Plane3d, SketchPlane3d
from solidgeom.point import Point2d, Point3d
from solidgeom.tolerance import isgoodnum, resolve
from solidgeom.vector import Direction2d, Direction3d, Vector2d, Vector3d
from solidgeom import xform

_DIRECTIONAL = (Direction2d, Direction3d, Axis2d, Axis3d,
                Frame2d, Frame3d, Plane3d, SketchPlane3d)

_FRAMED = (Frame2d, Frame3d, Plane3d, SketchPlane3d)


def _entity(x, op):
    if not isinstance(x, xform.Transformable):
        raise TypeError("don't know how to {} {!r}".format(op, x))
    return x


def _same_dimension(x, param, op):
    if x.dimension != param.dimension:
        raise TypeError('{}: cannot combine a {}D {} with a {}D {}'.format(
            op, x.dimension, type(x).__name__, param.dimension, type(param).__name__))


def _lift(p):
    # 2D coordinates into the z=0 plane
    if len(p) == 2:
        return (p[0], p[1], 0.0)
    return p


def transform(x, m):
    """Map entity ``x`` through matrix ``m``."""
    if not isinstance(m, xform.Matrix):
        raise TypeError('bad transformation matrix passed to transform: {!r}'.format(m))
    return _entity(x, 'transform').transform(m)


def scale_about(x, center, k, tol=None):
    _entity(x, 'scale')
    if not isinstance(center, (Point2d, Point3d)):
        raise TypeError('scale center must be a point, got {!r}'.format(center))
    if not isgoodnum(k):
        raise TypeError('scale factor must be a number, got {!r}'.format(k))
    _same_dimension(x, center, 'scale_about')

    if isinstance(x, _DIRECTIONAL) and abs(k) <= resolve(tol):
        raise InvalidOperation('cannot scale a {} by zero'.format(type(x).__name__),
                               details={'factor': k})
    if isinstance(x, (Direction2d, Direction3d)):
        return x if k > 0 else -x
    if k == 1:
        return x
    if isinstance(x, _DIRECTIONAL):
        # only the sign of k reaches the directions; the origin is
        # scaled on its own so no near-zero direction is renormalized
        origin = center + (x.origin_point - center) * k
        if k < 0:
            x = x.transform(xform.Scale(-1.0))
        return x.move_to(origin)
    return x.transform(xform.Scale(k, _lift(center.coordinates())))


def rotate_around(x, pivot, angle):
    _entity(x, 'rotate')
    if isinstance(pivot, Axis3d):
        _same_dimension(x, pivot, 'rotate_around')
        m = xform.Rotation(pivot.direction.components(), angle,
                           pivot.origin_point.coordinates())
    elif isinstance(pivot, Point2d):
        _same_dimension(x, pivot, 'rotate_around')
        m = xform.Rotation((0.0, 0.0, 1.0), angle, _lift(pivot.coordinates()))
    else:
        raise TypeError('rotation pivot must be an Axis3d or a Point2d, got {!r}'.format(pivot))
    return x.transform(m)


def translate_by(x, delta):
    _entity(x, 'translate')
    if not isinstance(delta, (Vector2d, Vector3d)):
        raise TypeError('translation must be a vector, got {!r}'.format(delta))
    _same_dimension(x, delta, 'translate_by')
    if isinstance(x, (Direction2d, Direction3d)):
        return x
    return x.transform(xform.Translation(_lift(delta.components())))


def translate_in(x, direction, distance):
    """Translate ``x`` by ``distance`` along ``direction``."""
    return translate_by(x, direction.to_vector() * distance)


def mirror_across(x, mirror):
    _entity(x, 'mirror')
    if isinstance(mirror, Axis2d):
        _same_dimension(x, mirror, 'mirror_across')
        n = mirror.direction.perpendicular()
        m = xform.Reflection((n.x, n.y, 0.0), _lift(mirror.origin_point.coordinates()))
    elif isinstance(mirror, (Plane3d, SketchPlane3d)):
        _same_dimension(x, mirror, 'mirror_across')
        plane = mirror if isinstance(mirror, Plane3d) else mirror.to_plane()
        m = xform.Reflection(plane.normal_direction.components(),
                             plane.origin_point.coordinates())
    else:
        raise TypeError('bad reflection axis or plane passed to mirror_across: {!r}'.format(mirror))
    return x.transform(m)


def project_onto(x, target):
    _entity(x, 'project')
    if isinstance(target, (Axis2d, Axis3d)):
        _same_dimension(x, target, 'project_onto')
        m = xform.LineProjection(_lift(target.direction.components()),
                                 _lift(target.origin_point.coordinates()))
    elif isinstance(target, (Plane3d, SketchPlane3d)):
        _same_dimension(x, target, 'project_onto')
        plane = target if isinstance(target, Plane3d) else target.to_plane()
        m = xform.PlaneProjection(plane.normal_direction.components(),
                                  plane.origin_point.coordinates())
    else:
        raise TypeError('bad projection target passed to project_onto: {!r}'.format(target))
    if isinstance(x, _FRAMED):
        raise InvalidOperation('cannot project a {}'.format(type(x).__name__))
    return x.transform(m)


__all__ = [
    'transform',
    'scale_about',
    'rotate_around',
    'translate_by',
    'translate_in',
    'mirror_across',
    'project_onto',
]
