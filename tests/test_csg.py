import dataclasses

import pytest

from csg import (
    Box,
    Cylinder,
    Difference,
    GeometryError,
    Hull,
    InvalidArity,
    InvalidParameter,
    MinkowskiSum,
    Sphere,
    Union,
    bounding_box,
    difference,
    hull,
    intersection,
    minkowski,
    rotate,
    translate,
    union,
)


def bounds(solid):
    bb = bounding_box(solid)
    return bb.mins + bb.maxs


class TestConstruction:
    def test_box_dims_stored_as_float_tuple(self):
        box = Box([1, 2, 3])
        assert box.dims == (1.0, 2.0, 3.0)

    def test_negative_dimension_rejected(self):
        with pytest.raises(InvalidParameter):
            Box((1, -1, 1))
        with pytest.raises(InvalidParameter):
            Cylinder(-1, 2)
        with pytest.raises(InvalidParameter):
            Sphere(-0.5)

    def test_non_finite_dimension_rejected(self):
        with pytest.raises(InvalidParameter):
            Cylinder(float("nan"), 1)
        with pytest.raises(InvalidParameter):
            translate((0, float("inf"), 0), Box((1, 1, 1)))

    def test_vector_needs_three_components(self):
        with pytest.raises(InvalidParameter):
            Box((1, 2))

    def test_errors_are_value_errors(self):
        assert issubclass(InvalidParameter, GeometryError)
        assert issubclass(InvalidArity, ValueError)

    def test_hull_and_minkowski_need_two_children(self):
        with pytest.raises(InvalidArity):
            hull(Box((1, 1, 1)))
        with pytest.raises(InvalidArity):
            minkowski(Box((1, 1, 1)))
        with pytest.raises(InvalidArity):
            MinkowskiSum(())

    def test_union_needs_a_child(self):
        with pytest.raises(InvalidArity):
            Union(())
        with pytest.raises(InvalidArity):
            intersection()

    def test_difference_without_cutters_is_identity(self):
        base = Box((3, 4, 5))
        diff = difference(base)
        assert diff.subtracted == ()
        assert bounding_box(diff) == bounding_box(base)

    @pytest.mark.parametrize(
        "build",
        [
            lambda: Difference(None),
            lambda: difference(Box((1, 1, 1)), "hole"),
            lambda: Union(("box",)),
            lambda: hull(Box((1, 1, 1)), 3),
            lambda: minkowski(Box((1, 1, 1)), None),
            lambda: intersection([1, 2, 3]),
            lambda: translate((0, 0, 0), 3),
            lambda: rotate((0, 0, 90), (1, 1, 1)),
        ],
    )
    def test_non_solid_operand_rejected_at_construction(self, build):
        with pytest.raises(InvalidParameter):
            build()

    def test_non_solid_operand_never_reaches_bounding_box(self):
        with pytest.raises(GeometryError):
            bounding_box(union(Box((1, 1, 1)), "box"))

    def test_nodes_are_immutable(self):
        box = Box((1, 1, 1))
        with pytest.raises(dataclasses.FrozenInstanceError):
            box.dims = (2, 2, 2)

    def test_equal_trees_compare_and_hash_equal(self):
        a = union(translate((1, 2, 3), Cylinder(1, 2)), Sphere(3))
        b = union(translate((1, 2, 3), Cylinder(1, 2)), Sphere(3))
        assert a == b
        assert len({a, b}) == 1

    def test_difference_keeps_cut_order(self):
        first, second = Box((1, 1, 1)), Sphere(1)
        diff = difference(Box((5, 5, 5)), first, second)
        assert isinstance(diff, Difference)
        assert diff.subtracted == (first, second)


class TestBoundingBox:
    def test_primitives(self):
        assert bounds(Box((1, 2, 3))) == (0, 0, 0, 1, 2, 3)
        assert bounds(Cylinder(2, 5)) == (-2, -2, 0, 2, 2, 5)
        assert bounds(Sphere(1.5)) == (-1.5, -1.5, -1.5, 1.5, 1.5, 1.5)

    def test_translate(self):
        assert bounds(translate((1, -2, 3), Box((1, 1, 1)))) == (1, -2, 3, 2, -1, 4)

    def test_quarter_turn_rotation_is_exact(self):
        bb = bounding_box(rotate((0, 0, 90), Box((10, 20, 5))))
        assert (bb.xmin, bb.xmax) == pytest.approx((-20, 0))
        assert (bb.ymin, bb.ymax) == pytest.approx((0, 10))
        assert (bb.zmin, bb.zmax) == pytest.approx((0, 5))

    def test_half_turn_about_x(self):
        bb = bounding_box(rotate((180, 0, 0), Box((1, 2, 3))))
        assert bb.mins == pytest.approx((0, -2, -3))
        assert bb.maxs == pytest.approx((1, 0, 0))

    def test_union_and_hull_merge(self):
        parts = (Box((1, 1, 1)), translate((4, 5, 6), Box((1, 1, 1))))
        assert bounds(union(*parts)) == (0, 0, 0, 5, 6, 7)
        assert bounds(hull(*parts)) == (0, 0, 0, 5, 6, 7)

    def test_minkowski_adds_extents(self):
        solid = minkowski(Box((10, 10, 10)), Sphere(1))
        assert bounds(solid) == (-1, -1, -1, 11, 11, 11)

    def test_intersection_overlaps(self):
        solid = intersection(Box((10, 10, 10)), translate((5, -5, 2), Box((10, 10, 2))))
        assert bounds(solid) == (5, 0, 2, 10, 5, 4)

    def test_difference_clips_through_cut(self):
        slab = translate((-1, -1, 0.5), Box((4, 4, 2)))
        assert bounds(difference(Box((2, 2, 2)), slab)) == (0, 0, 0, 2, 2, 0.5)

    def test_difference_partial_cut_is_conservative(self):
        hole = translate((1, 1, -1), Cylinder(0.5, 4))
        assert bounds(difference(Box((2, 2, 2)), hole)) == (0, 0, 0, 2, 2, 2)

    def test_dimensions_and_center(self):
        bb = bounding_box(translate((1, 1, 1), Box((2, 4, 6))))
        assert (bb.xlen, bb.ylen, bb.zlen) == (2, 4, 6)
        assert bb.center == (2, 3, 4)

    def test_unknown_node_type(self):
        with pytest.raises(TypeError):
            bounding_box("box")


def test_hull_node_keeps_children_tuple():
    node = Hull([Box((1, 1, 1)), Sphere(1)])
    assert isinstance(node.children, tuple)
