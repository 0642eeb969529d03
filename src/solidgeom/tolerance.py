## numeric tolerance configuration for solidgeom

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

"""Process-wide degeneracy tolerance for **solidgeom**.

Only two places in the library need a tolerance at all: normalizing a
vector into a direction, and deriving an orthonormal basis.  Both
compare a *squared* length against ``epsilon**2`` so that no square
root is taken on the common path.

The default of ``1e-10`` can be changed in three ways:

- set the ``SOLIDGEOM_EPSILON`` environment variable before import,
- call :func:`set_epsilon` (process wide), or
- wrap a block in ``with tolerance(value):``.

Every function that performs a degeneracy check also accepts a ``tol``
keyword, which wins over the process-wide value for that call only.

**NOTE:** the configured value is a module global, like ``epsilon`` in
older releases.  ``tolerance()`` is therefore not isolated per thread.
"""

import logging
import numbers
import os
from contextlib import contextmanager

import numpy as np

logger = logging.getLogger(__name__)

DEFAULT_EPSILON = 1e-10
ENV_VAR = 'SOLIDGEOM_EPSILON'


def isgoodnum(n):
    """ determine if an argument is actually a scalar number, and not boolean
    """
    return (not isinstance(n, (bool, np.bool_))) and isinstance(n, numbers.Real)


def _check(value):
    if not isgoodnum(value) or not value > 0:
        raise ValueError('tolerance must be a positive number, got {!r}'.format(value))
    return float(value)


def _initial_epsilon():
    raw = os.environ.get(ENV_VAR, '').strip()
    if not raw:
        return DEFAULT_EPSILON
    try:
        value = float(raw)
    except ValueError:
        logger.warning('ignoring unparsable %s=%r, using %g', ENV_VAR, raw, DEFAULT_EPSILON)
        return DEFAULT_EPSILON
    if not value > 0:
        logger.warning('ignoring non-positive %s=%r, using %g', ENV_VAR, raw, DEFAULT_EPSILON)
        return DEFAULT_EPSILON
    return value


_epsilon = _initial_epsilon()


def get_epsilon():
    """Return the process-wide degeneracy tolerance."""
    return _epsilon


def set_epsilon(value):
    """Replace the process-wide degeneracy tolerance, returning the old one."""
    global _epsilon
    old = _epsilon
    _epsilon = _check(value)
    logger.debug('epsilon changed from %g to %g', old, _epsilon)
    return old


@contextmanager
def tolerance(value):
    """
    Context manager that swaps in a different tolerance for a block.

    Usage:
        with tolerance(1e-6):
            d = Vector3d(1e-8, 0, 0).direction()   # raises DegenerateDirection
    """
    old = set_epsilon(value)
    try:
        yield _epsilon
    finally:
        set_epsilon(old)


def resolve(tol=None):
    """Return ``tol`` if given, otherwise the process-wide tolerance."""
    if tol is None:
        return _epsilon
    return _check(tol)


def close(a, b, tol=None):
    """ are two scalars the same within tolerance
    """
    return abs(a - b) <= resolve(tol)


__all__ = [
    'DEFAULT_EPSILON',
    'ENV_VAR',
    'isgoodnum',
    'get_epsilon',
    'set_epsilon',
    'tolerance',
    'resolve',
    'close',
]
