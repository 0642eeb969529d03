import pytest
from math import pi

import numpy as np

from solidgeom.xform import *
## unit tests for solidgeom xform.py


def _mclose(a, b, tol=1e-12):
    return np.allclose(a.to_array(), b.to_array(), atol=tol)


def _pclose(a, b, tol=1e-12):
    return all(abs(x - y) <= tol for x, y in zip(a, b))


class TestXform:
    """unit tests for solidgeom matrix operations"""

    def test_matrix(self):
        foo = Matrix([1,2,3,4,5,6,7,8,9,10,11,12,13,14,15,16])
        fooT = foo.transpose()
        bar = Matrix([[1,0,0,1],[0,1,0,1],[0,0,1,1],[0,0,0,1]])
        baz = (1, 2, 3, 1)
        I = Matrix()
        a = 10.0
        assert I.mul(bar) == bar
        assert I.mul(foo) == foo
        assert I.mul(fooT) == fooT.mul(I)
        assert I.mul(I) == I
        assert foo.mul(bar).m == ((1,2,3,10),(5,6,7,26),(9,10,11,42),(13,14,15,58))
        assert foo.mul(baz) == (18, 46, 74, 102)
        assert foo.mul(a).m == ((10.0,20.0,30.0,40.0),
                                (50.0,60.0,70.0,80.0),
                                (90.0,100.0,110.0,120.0),
                                (130.0,140.0,150.0,160.0))
        assert I.mul(baz) == baz
        assert fooT.getrow(0) == foo.getcol(0)
        assert foo @ bar == foo.mul(bar)

    def test_bad_init(self):
        with pytest.raises(ValueError):
            Matrix([1, 2, 3])
        with pytest.raises(ValueError):
            Matrix([[1, 0, 0, True], [0, 1, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]])
        with pytest.raises(ValueError):
            Matrix().get(4, 0)
        with pytest.raises(ValueError):
            Matrix().mul('foo')

    def test_immutable(self):
        I = Matrix()
        with pytest.raises(AttributeError):
            I.m = None
        assert Matrix(I) == I
        assert hash(Matrix(I)) == hash(I)

    def test_translation(self):
        T = Translation((1, 2, 3))
        assert T.apply_point((0, 0, 0)) == (1, 2, 3)
        assert T.apply_vector((1, 1, 1)) == (1, 1, 1)
        assert T.mul(Translation((1, 2, 3), inverse=True)) == Matrix()

    def test_numpy_elements(self):
        T = Translation((np.int64(1), np.float32(2), np.int32(3)))
        assert T.apply_point((0, 0, 0)) == (1, 2, 3)
        assert all(type(v) is float for row in T.m for v in row)
        assert Scale(np.float32(2)).apply_point((1, 1, 1)) == (2, 2, 2)
        with pytest.raises(ValueError):
            Matrix([[1, 0, 0, np.bool_(True)], [0, 1, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]])

    def test_scale(self):
        S = Scale(0.5, (1, 1, 0))
        assert S.apply_point((5, 1, 0)) == (3, 1, 0)
        assert S.apply_vector((2, 4, 6)) == (1, 2, 3)
        assert _mclose(S.mul(Scale(0.5, (1, 1, 0), inverse=True)), Matrix())
        with pytest.raises(ValueError):
            Scale(None)

    def test_rotation(self):
        R = Rotation((0, 0, 1), pi/2)
        assert _pclose(R.apply_point((1, 0, 0)), (0, 1, 0))
        assert _pclose(R.apply_point((0, 1, 0)), (-1, 0, 0))
        assert _mclose(R.mul(Rotation((0, 0, 1), pi/2, inverse=True)), Matrix())

        Rc = Rotation((0, 0, 1), pi, center=(1, 1, 0))
        assert _pclose(Rc.apply_point((2, 1, 0)), (0, 1, 0))
        assert _pclose(Rc.apply_point((1, 1, 5)), (1, 1, 5))

        Rx = Rotation((1, 0, 0), pi/2)
        assert _pclose(Rx.apply_point((0, 1, 0)), (0, 0, 1))

    def test_reflection(self):
        M = Reflection((0, 0, 1), (0, 0, 2))
        assert _pclose(M.apply_point((1, 2, 5)), (1, 2, -1))
        assert _pclose(M.apply_vector((1, 2, 5)), (1, 2, -5))
        assert _mclose(M.mul(M), Matrix())

    def test_projection(self):
        L = LineProjection((1, 0, 0), (0, 3, 0))
        assert _pclose(L.apply_point((5, 7, 9)), (5, 3, 0))
        assert _mclose(L.mul(L), L)

        n = (1/np.sqrt(3), 1/np.sqrt(3), 1/np.sqrt(3))
        P = PlaneProjection(n, (1, 0, 0))
        assert _mclose(P.mul(P), P)
        p = P.apply_point((4, 5, 6))
        assert abs(sum(a*b for a, b in zip(n, p)) - n[0]) < 1e-12

    def test_change_of_basis(self):
        s = 1/np.sqrt(2)
        origin = (1, 2, 3)
        x = (s, s, 0)
        y = (-s, s, 0)
        z = (0, 0, 1)
        B = ChangeOfBasis(origin, x, y, z)
        Binv = ChangeOfBasis(origin, x, y, z, inverse=True)
        assert _mclose(B.mul(Binv), Matrix())
        assert _pclose(B.apply_point((0, 0, 0)), origin)
        assert _pclose(Binv.apply_point((1 + s, 2 + s, 3)), (1, 0, 0))

    def test_then(self):
        m = Translation((1, 0, 0)).then(Scale(2.0))
        assert m.apply_point((0, 0, 0)) == (2, 0, 0)
        assert m.is_affine()

    def test_array(self):
        R = Rotation((0, 0, 1), pi/2)
        pts = np.array([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0]])
        out = R.apply_array(pts)
        assert np.allclose(out, [[0, 1, 0], [-1, 0, 0]])
        assert np.array_equal(pts, [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0]])

        T = Translation((1, 2, 3))
        assert np.allclose(T.apply_array(pts), [[2, 2, 3], [1, 3, 3]])
        assert np.allclose(T.apply_array(pts, vectors=True), pts)
        assert T.to_array().shape == (4, 4)

        with pytest.raises(ValueError):
            T.apply_array(np.zeros((3, 2)))
