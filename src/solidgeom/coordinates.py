## coordinate conversion between frames for solidgeom

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

"""Conversions between global coordinates, frames and sketch planes.

- ``relative_to(frame, x)`` re-expresses a global entity in the local
  coordinates of ``frame``.
- ``place_in(frame, x)`` is its exact inverse: an entity given in
  ``frame`` coordinates comes back in global ones, and
  ``place_in(f, relative_to(f, x)) == x`` up to rounding.
- ``project_into(sketch_plane, x)`` projects a 3D entity onto the plane
  and expresses it in the plane's 2D basis.  The out-of-plane
  component is lost.
- ``place_onto(sketch_plane, x)`` embeds a 2D entity in 3D.  For
  entities already lying in the plane, ``project_into`` undoes it.
"""

from solidgeom.axis import Axis2d, Axis3d
from solidgeom.errors import InvalidOperation
from solidgeom.frame import Frame2d, Frame3d
from solidgeom.plane import Plane3d, SketchPlane3d
from solidgeom.point import Point2d, Point3d
from solidgeom.spline import QuadraticSpline2d, QuadraticSpline3d
from solidgeom.vector import Direction2d, Direction3d, Vector2d, Vector3d
from solidgeom.xform import Transformable

_PROJECTABLE = (Point3d, Vector3d, Direction3d, Axis3d, QuadraticSpline3d)
_PLACEABLE = (Point2d, Vector2d, Direction2d, Axis2d, QuadraticSpline2d)


def _check_frame(frame, x, op):
    if not isinstance(frame, (Frame2d, Frame3d)):
        raise TypeError('{} needs a Frame2d or Frame3d, got {!r}'.format(op, frame))
    if not isinstance(x, Transformable):
        raise TypeError("don't know how to convert {!r}".format(x))
    if frame.dimension != x.dimension:
        raise TypeError('{}: cannot use a {}D frame with a {}D {}'.format(
            op, frame.dimension, x.dimension, type(x).__name__))


def _sketch_plane(plane, op):
    if isinstance(plane, SketchPlane3d):
        return plane
    if isinstance(plane, Plane3d):
        return plane.to_sketch_plane()
    raise TypeError('{} needs a SketchPlane3d, got {!r}'.format(op, plane))


def relative_to(frame, x):
    _check_frame(frame, x, 'relative_to')
    return x.transform(frame.to_local_matrix())


def place_in(frame, x):
    _check_frame(frame, x, 'place_in')
    return x.transform(frame.to_global_matrix())


def project_into(sketch_plane, x):
    sp = _sketch_plane(sketch_plane, 'project_into')
    if isinstance(x, _PROJECTABLE):
        return x.project_into(sp)
    if isinstance(x, Transformable) and x.dimension == 3:
        raise InvalidOperation('cannot project a {} into a sketch plane'.format(type(x).__name__))
    raise TypeError('project_into needs a 3D entity, got {!r}'.format(x))


def place_onto(sketch_plane, x):
    sp = _sketch_plane(sketch_plane, 'place_onto')
    if isinstance(x, _PLACEABLE):
        return x.place_onto(sp)
    if isinstance(x, Transformable) and x.dimension == 2:
        raise InvalidOperation('cannot place a {} onto a sketch plane'.format(type(x).__name__))
    raise TypeError('place_onto needs a 2D entity, got {!r}'.format(x))


__all__ = [
    'relative_to',
    'place_in',
    'project_into',
    'place_onto',
]
