## exception types for solidgeom

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

"""Exception types raised by solidgeom.

Nearly every operation in the library is a total function; the only
failures are the two kinds below, both raised to the immediate caller
and never caught internally.
"""


class GeometryError(ValueError):
    """Base class for geometric failures."""

    def __init__(self, message, details=None):
        super().__init__(message)
        self.details = details or {}


class DegenerateDirection(GeometryError):
    """Raised when a (near-)zero vector is normalized into a direction."""


# the same failure, under the name used when normalizing plain vectors
ZeroVector = DegenerateDirection


class InvalidOperation(GeometryError):
    """Raised when an operation is not defined for a directional entity."""


__all__ = [
    'GeometryError',
    'DegenerateDirection',
    'ZeroVector',
    'InvalidOperation',
]
