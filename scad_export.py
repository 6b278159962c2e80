from pathlib import Path

from solid import (
    cube,
    cylinder,
    difference,
    hull,
    intersection,
    minkowski,
    rotate,
    scad_render,
    scad_render_to_file,
    sphere,
    translate,
    union,
)

from csg import (
    Box,
    Cylinder,
    Difference,
    Hull,
    Intersection,
    MinkowskiSum,
    Rotate,
    Solid,
    Sphere,
    Translate,
    Union,
)


def to_solidpython(solid: Solid):
    if isinstance(solid, Box):
        return cube(list(solid.dims))
    if isinstance(solid, Cylinder):
        return cylinder(r=solid.radius, h=solid.height)
    if isinstance(solid, Sphere):
        return sphere(r=solid.radius)
    if isinstance(solid, Translate):
        return translate(list(solid.offset))(to_solidpython(solid.child))
    if isinstance(solid, Rotate):
        # OpenSCAD tambem aplica rotate([ax, ay, az]) em x, depois y, depois z
        return rotate(list(solid.angles))(to_solidpython(solid.child))
    if isinstance(solid, Union):
        return union()(*[to_solidpython(c) for c in solid.children])
    if isinstance(solid, Difference):
        return difference()(to_solidpython(solid.base), *[to_solidpython(c) for c in solid.subtracted])
    if isinstance(solid, Intersection):
        return intersection()(*[to_solidpython(c) for c in solid.children])
    if isinstance(solid, Hull):
        return hull()(*[to_solidpython(c) for c in solid.children])
    if isinstance(solid, MinkowskiSum):
        return minkowski()(*[to_solidpython(c) for c in solid.children])
    raise TypeError(f"Tipo de solido desconhecido: {type(solid).__name__}")


def _header(facets: int, names=()) -> str:
    header = f"$fn = {facets};"
    if names:
        header += "\n// partes: " + ", ".join(names)
    return header


def to_scad(solid: Solid, facets: int = 64) -> str:
    return scad_render(to_solidpython(solid), file_header=_header(facets))


def write_scad(path: Path, facets: int = 64, **solids: Solid) -> Path:
    # partes nomeadas lado a lado, na ordem recebida
    if not solids:
        raise ValueError("write_scad precisa de pelo menos uma parte")
    parts = [to_solidpython(s) for s in solids.values()]
    scene = parts[0] if len(parts) == 1 else union()(*parts)
    scad_render_to_file(scene, filepath=str(path), file_header=_header(facets, solids), include_orig_code=False)
    return Path(path)
