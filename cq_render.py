# CadQuery nao tem hull nem soma de Minkowski: ambos viram fecho convexo (scipy)
# dos vertices tesselados, exato para operandos convexos.
import logging
import math
from functools import reduce
from pathlib import Path

import cadquery as cq
import numpy as np
from scipy.spatial import ConvexHull

from case_specs import PrintSpec
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

logger = logging.getLogger(__name__)

TESSELLATION_TOLERANCE = 0.01
AXES = ((1, 0, 0), (0, 1, 0), (0, 0, 1))


def _angular_tolerance(print_spec: PrintSpec) -> float:
    return 2.0 * math.pi / max(3, print_spec.facets)


def _compact(shape) -> cq.Workplane:
    return cq.Workplane("XY").newObject([shape])


def _vertices(wp: cq.Workplane, print_spec: PrintSpec) -> np.ndarray:
    verts, _ = wp.val().tessellate(TESSELLATION_TOLERANCE, _angular_tolerance(print_spec))
    return np.array([v.toTuple() for v in verts], dtype=float)


def _hull_vertices(points: np.ndarray) -> np.ndarray:
    points = np.unique(np.round(points, 6), axis=0)
    return points[ConvexHull(points).vertices]


def hull_solid(points: np.ndarray) -> cq.Solid:
    """Closed solid bounded by the convex hull of a point cloud."""
    points = np.unique(np.round(points, 6), axis=0)
    hull = ConvexHull(points)
    faces = []
    for simplex, equation in zip(hull.simplices, hull.equations):
        a, b, c = points[simplex]
        # orienta o triangulo com a normal externa do hull
        if np.dot(np.cross(b - a, c - a), equation[:3]) < 0:
            b, c = c, b
        wire = cq.Wire.makePolygon([cq.Vector(*map(float, p)) for p in (a, b, c)], close=True)
        faces.append(cq.Face.makeFromWires(wire))
    logger.debug("hull com %d faces a partir de %d pontos", len(faces), len(points))
    return cq.Solid.makeSolid(cq.Shell.makeShell(faces))


def minkowski_points(operands: list[np.ndarray]) -> np.ndarray:
    acc = _hull_vertices(operands[0])
    for pts in operands[1:]:
        pts = _hull_vertices(pts)
        acc = _hull_vertices((acc[:, None, :] + pts[None, :, :]).reshape(-1, 3))
    return acc


def to_workplane(solid: Solid, print_spec: PrintSpec = PrintSpec()) -> cq.Workplane:
    if isinstance(solid, Box):
        return cq.Workplane("XY").box(*solid.dims, centered=False)
    if isinstance(solid, Cylinder):
        return cq.Workplane("XY").circle(solid.radius).extrude(solid.height)
    if isinstance(solid, Sphere):
        return cq.Workplane("XY").sphere(solid.radius)
    if isinstance(solid, Translate):
        return to_workplane(solid.child, print_spec).translate(solid.offset)
    if isinstance(solid, Rotate):
        wp = to_workplane(solid.child, print_spec)
        for axis, angle in zip(AXES, solid.angles):
            if angle:
                wp = wp.rotate((0, 0, 0), axis, angle)
        return wp
    if isinstance(solid, Union):
        parts = [to_workplane(c, print_spec) for c in solid.children]
        return _compact(reduce(lambda a, b: a.union(b), parts).val())
    if isinstance(solid, Difference):
        body = to_workplane(solid.base, print_spec)
        for cutter in solid.subtracted:
            body = body.cut(to_workplane(cutter, print_spec))
        return _compact(body.val())
    if isinstance(solid, Intersection):
        parts = [to_workplane(c, print_spec) for c in solid.children]
        return _compact(reduce(lambda a, b: a.intersect(b), parts).val())
    if isinstance(solid, Hull):
        points = np.vstack([_vertices(to_workplane(c, print_spec), print_spec) for c in solid.children])
        return _compact(hull_solid(points))
    if isinstance(solid, MinkowskiSum):
        operands = [_vertices(to_workplane(c, print_spec), print_spec) for c in solid.children]
        logger.debug("soma de Minkowski de %d operandos", len(operands))
        return _compact(hull_solid(minkowski_points(operands)))
    raise TypeError(f"Tipo de solido desconhecido: {type(solid).__name__}")


def export_workplane(wp: cq.Workplane, path: Path) -> Path:
    cq.exporters.export(wp, str(path))
    logger.info("exportado %s", path)
    return path


def export_stl(solid: Solid, path: Path, print_spec: PrintSpec = PrintSpec()) -> Path:
    return export_workplane(to_workplane(solid, print_spec), path)
