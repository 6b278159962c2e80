import pytest

pytest.importorskip("solid")

from csg import Box, Cylinder, Sphere, difference, hull, rotate, translate
from fillets import corner_hull, filleted_prism
from scad_export import to_scad, write_scad


def compact(text):
    return "".join(text.split())


class TestToScad:
    def test_box_becomes_cube(self):
        text = compact(to_scad(Box((1, 2, 3))))
        assert "cube(" in text
        assert "union()" not in text

    def test_facets_in_header(self):
        text = to_scad(Sphere(2.5), facets=24)
        assert text.lstrip().startswith("$fn = 24;")
        assert "sphere(" in text

    def test_filleted_prism_emits_native_minkowski(self):
        text = compact(to_scad(filleted_prism(10, 10, 5, 1), facets=32))
        assert "minkowski(){" in text
        assert text.index("minkowski(){") < text.index("cube(") < text.index("cylinder(")
        assert "translate(v=[1" in text

    def test_corner_hull_emits_native_hull(self):
        text = compact(to_scad(corner_hull(20, 10, 2, 3)))
        assert "hull(){" in text
        assert text.count("cylinder(") == 4

    def test_difference_lists_base_first(self):
        text = compact(to_scad(difference(Box((4, 4, 4)), translate((2, 2, -1), Cylinder(1, 6)))))
        assert text.index("difference(){") < text.index("cube(") < text.index("cylinder(")

    def test_rotation_angles(self):
        text = compact(to_scad(rotate((0, 0, -90), Box((1, 1, 1)))))
        assert "rotate(a=[0" in text
        assert "-90" in text

    def test_nested_operators(self):
        text = compact(to_scad(hull(Sphere(1), translate((5, 0, 0), Sphere(1)))))
        assert text.count("sphere(") == 2


class TestWriteScad:
    def test_writes_all_parts(self, tmp_path):
        path = write_scad(tmp_path / "case.scad", 16, base=Box((1, 1, 1)), lid=Sphere(1))
        assert path == tmp_path / "case.scad"
        text = path.read_text(encoding="utf-8")
        assert "$fn = 16;" in text
        assert "// partes: base, lid" in text
        assert "cube(" in text
        assert "sphere(" in text

    def test_single_part(self, tmp_path):
        path = write_scad(tmp_path / "box.scad", 16, box=Box((1, 1, 1)))
        assert "cube(" in path.read_text(encoding="utf-8")

    def test_needs_a_part(self, tmp_path):
        with pytest.raises(ValueError):
            write_scad(tmp_path / "empty.scad", 16)
