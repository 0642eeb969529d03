import pytest
from math import pi

from solidgeom.axis import Axis2d, Axis3d
from solidgeom.coordinates import place_in, place_onto, project_into, relative_to
from solidgeom.errors import InvalidOperation
from solidgeom.frame import Frame2d, Frame3d
from solidgeom.plane import Plane3d, SketchPlane3d
from solidgeom.point import Point2d, Point3d
from solidgeom.spline import QuadraticSpline2d, QuadraticSpline3d
from solidgeom.transforms import rotate_around
from solidgeom.vector import Direction2d, Direction3d, Vector2d, Vector3d
## unit tests for solidgeom coordinates.py

TOL = 1e-12


def _frame3():
    return Frame3d.with_z_direction(Point3d(1, 2, 3), Direction3d.from_components(1, 1, 1))


def _frame2():
    return Frame2d.with_x_direction(Point2d(-1, 4), Direction2d.from_angle(0.6))


class TestFrames:

    def test_relative_to_translated_frame(self):
        f = Frame3d.at_point(Point3d(1, 2, 3))
        assert relative_to(f, Point3d(2, 2, 3)) == Point3d(1, 0, 0)
        assert relative_to(f, Vector3d(1, 1, 1)) == Vector3d(1, 1, 1)

    def test_relative_to_rotated_frame(self):
        f = Frame3d.from_x_and_y(Point3d(1, 0, 0), Direction3d.positive_y(),
                                 Direction3d.negative_x())
        assert relative_to(f, Point3d(1, 1, 0)).equal_within(Point3d(1, 0, 0), TOL)
        assert relative_to(f, Point3d(0, 0, 4)).equal_within(Point3d(0, 1, 4), TOL)
        assert place_in(f, Point3d(1, 0, 0)).equal_within(Point3d(1, 1, 0), TOL)

    def test_frame_relative_to_itself(self):
        f = _frame3()
        local = relative_to(f, f)
        assert local.equal_within(Frame3d.at_origin(), 1e-9)

    @pytest.mark.parametrize('entity', [
        Point3d(4, -5, 6),
        Vector3d(0.5, 0.25, -8),
        Direction3d.from_components(-1, 3, 2),
        Axis3d(Point3d(9, 9, 9), Direction3d.from_components(1, 0, 1)),
        Frame3d.with_z_direction(Point3d(-2, 0, 1), Direction3d.positive_y()),
        Plane3d.through(Point3d(0, 1, 0), Direction3d.from_components(2, 2, 1)),
        QuadraticSpline3d(Point3d(1, 1, 1), Point3d(3, 2, 1), Point3d(3, 3, 3)),
    ])
    def test_round_trip_3d(self, entity):
        f = _frame3()
        assert place_in(f, relative_to(f, entity)).equal_within(entity, 1e-9)
        assert relative_to(f, place_in(f, entity)).equal_within(entity, 1e-9)

    @pytest.mark.parametrize('entity', [
        Point2d(4, -5),
        Vector2d(0.5, -8),
        Direction2d.from_angle(2.0),
        Axis2d(Point2d(9, 9), Direction2d.from_components(1, 1)),
        Frame2d.with_y_direction(Point2d(3, 0), Direction2d.from_angle(-1.0)),
        QuadraticSpline2d(Point2d(0, 0), Point2d(1, 1), Point2d(2, 0)),
    ])
    def test_round_trip_2d(self, entity):
        f = _frame2()
        assert place_in(f, relative_to(f, entity)).equal_within(entity, 1e-9)

    def test_2d_frame(self):
        f = Frame2d.with_x_direction(Point2d(1, 1), Direction2d.positive_y())
        assert relative_to(f, Point2d(1, 3)).equal_within(Point2d(2, 0), TOL)
        assert place_in(f, Point2d(2, 0)).equal_within(Point2d(1, 3), TOL)
        assert relative_to(f, Direction2d.positive_y()).equal_within(
            Direction2d.positive_x(), TOL)

    def test_rotation_matches_change_of_frame(self):
        # rotating a frame by an angle is the same as rotating the points by minus it
        f = rotate_around(Frame2d.at_origin(), Point2d(0, 0), pi/3)
        p = Point2d(2, 1)
        assert relative_to(f, p).equal_within(rotate_around(p, Point2d(0, 0), -pi/3), 1e-12)

    def test_errors(self):
        with pytest.raises(TypeError):
            relative_to(_frame3(), Point2d(1, 1))
        with pytest.raises(TypeError):
            place_in(_frame2(), Point3d(1, 1, 1))
        with pytest.raises(TypeError):
            relative_to(Axis3d.x(), Point3d(1, 1, 1))
        with pytest.raises(TypeError):
            place_in(_frame3(), (1, 2, 3))


class TestSketchPlanes:

    def test_project_into(self):
        sp = SketchPlane3d.xy().move_to(Point3d(0, 0, 5))
        assert project_into(sp, Point3d(1, 2, 3)) == Point2d(1, 2)
        assert project_into(Plane3d.yz(), Vector3d(1, 2, 3)) == Vector2d(2, 3)
        assert project_into(sp, Direction3d.from_components(3, 4, 12)).equal_within(
            Direction2d(0.6, 0.8), TOL)

    def test_place_onto(self):
        sp = SketchPlane3d.xy().move_to(Point3d(0, 0, 5))
        assert place_onto(sp, Point2d(1, 2)) == Point3d(1, 2, 5)
        assert place_onto(sp, Vector2d(1, 2)) == Vector3d(1, 2, 0)
        axis = place_onto(SketchPlane3d.zx(), Axis2d.x())
        assert axis == Axis3d(Point3d(0, 0, 0), Direction3d(0, 0, 1))

    def test_place_then_project(self):
        sp = Frame3d.with_z_direction(Point3d(1, -1, 2),
                                      Direction3d.from_components(1, 2, 3)).xy_sketch_plane()
        s = QuadraticSpline2d(Point2d(0, 0), Point2d(1, 2), Point2d(2, 0))
        placed = place_onto(sp, s)
        assert isinstance(placed, QuadraticSpline3d)
        assert project_into(sp, placed).equal_within(s, 1e-9)

    def test_project_spline(self):
        s = QuadraticSpline3d(Point3d(1, 1, 1), Point3d(3, 2, 1), Point3d(3, 3, 3))
        flat = project_into(SketchPlane3d.xy(), s)
        assert flat == QuadraticSpline2d(Point2d(1, 1), Point2d(3, 2), Point2d(3, 3))

    def test_errors(self):
        sp = SketchPlane3d.xy()
        with pytest.raises(InvalidOperation):
            project_into(sp, Frame3d.at_origin())
        with pytest.raises(InvalidOperation):
            place_onto(sp, Frame2d.at_origin())
        with pytest.raises(TypeError):
            project_into(sp, Point2d(1, 1))
        with pytest.raises(TypeError):
            place_onto(sp, Point3d(1, 1, 1))
        with pytest.raises(TypeError):
            project_into(Axis3d.z(), Point3d(1, 1, 1))
