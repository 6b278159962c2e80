import math
from dataclasses import dataclass
from functools import reduce
from typing import Union as TypingUnion

Vector3 = tuple[float, float, float]


class GeometryError(ValueError):
    pass


class InvalidParameter(GeometryError):
    pass


class InvalidDimension(GeometryError):
    pass


class InvalidArity(GeometryError):
    pass


def check_value(name: str, value: float) -> float:
    value = float(value)
    if not math.isfinite(value) or value < 0:
        raise InvalidParameter(f"{name} deve ser finito e >= 0 (recebido {value})")
    return value


def _as_vector(name: str, values, non_negative: bool = False) -> Vector3:
    vec = tuple(float(v) for v in values)
    if len(vec) != 3:
        raise InvalidParameter(f"{name} precisa de 3 componentes (recebido {len(vec)})")
    for v in vec:
        if not math.isfinite(v):
            raise InvalidParameter(f"{name} contem valor nao finito: {vec}")
    if non_negative:
        for v in vec:
            check_value(name, v)
    return vec


@dataclass(frozen=True)
class Box:
    dims: Vector3

    def __post_init__(self):
        object.__setattr__(self, "dims", _as_vector("Box.dims", self.dims, non_negative=True))


@dataclass(frozen=True)
class Cylinder:
    radius: float
    height: float

    def __post_init__(self):
        object.__setattr__(self, "radius", check_value("Cylinder.radius", self.radius))
        object.__setattr__(self, "height", check_value("Cylinder.height", self.height))


@dataclass(frozen=True)
class Sphere:
    radius: float

    def __post_init__(self):
        object.__setattr__(self, "radius", check_value("Sphere.radius", self.radius))


def _check_solid(name: str, value):
    if not isinstance(value, _SOLID_TYPES):
        raise InvalidParameter(f"{name} precisa ser um solido (recebido {type(value).__name__})")
    return value


@dataclass(frozen=True)
class Translate:
    offset: Vector3
    child: "Solid"

    def __post_init__(self):
        object.__setattr__(self, "offset", _as_vector("Translate.offset", self.offset))
        _check_solid("Translate.child", self.child)


@dataclass(frozen=True)
class Rotate:
    # graus, aplicados em x, depois y, depois z
    angles: Vector3
    child: "Solid"

    def __post_init__(self):
        object.__setattr__(self, "angles", _as_vector("Rotate.angles", self.angles))
        _check_solid("Rotate.child", self.child)


def _children(op: str, children, minimum: int) -> tuple:
    children = tuple(children)
    if len(children) < minimum:
        raise InvalidArity(f"{op} precisa de pelo menos {minimum} operandos (recebido {len(children)})")
    for child in children:
        _check_solid(op, child)
    return children


@dataclass(frozen=True)
class Union:
    children: tuple

    def __post_init__(self):
        object.__setattr__(self, "children", _children("Union", self.children, 1))


@dataclass(frozen=True)
class Difference:
    base: "Solid"
    subtracted: tuple = ()

    def __post_init__(self):
        _check_solid("Difference.base", self.base)
        subtracted = tuple(self.subtracted)
        for child in subtracted:
            _check_solid("Difference.subtracted", child)
        object.__setattr__(self, "subtracted", subtracted)


@dataclass(frozen=True)
class Intersection:
    children: tuple

    def __post_init__(self):
        object.__setattr__(self, "children", _children("Intersection", self.children, 1))


@dataclass(frozen=True)
class Hull:
    children: tuple

    def __post_init__(self):
        object.__setattr__(self, "children", _children("Hull", self.children, 2))


@dataclass(frozen=True)
class MinkowskiSum:
    children: tuple

    def __post_init__(self):
        object.__setattr__(self, "children", _children("MinkowskiSum", self.children, 2))


_SOLID_TYPES = (Box, Cylinder, Sphere, Translate, Rotate, Union, Difference, Intersection, Hull, MinkowskiSum)
Solid = TypingUnion[Box, Cylinder, Sphere, Translate, Rotate, Union, Difference, Intersection, Hull, MinkowskiSum]


def translate(offset, child: Solid) -> Translate:
    return Translate(offset, child)


def rotate(angles, child: Solid) -> Rotate:
    return Rotate(angles, child)


def union(*children: Solid) -> Union:
    return Union(children)


def difference(base: Solid, *subtracted: Solid) -> Difference:
    return Difference(base, subtracted)


def intersection(*children: Solid) -> Intersection:
    return Intersection(children)


def hull(*children: Solid) -> Hull:
    return Hull(children)


def minkowski(*children: Solid) -> MinkowskiSum:
    return MinkowskiSum(children)


@dataclass(frozen=True)
class BoundingBox:
    xmin: float
    ymin: float
    zmin: float
    xmax: float
    ymax: float
    zmax: float

    @property
    def xlen(self) -> float:
        return self.xmax - self.xmin

    @property
    def ylen(self) -> float:
        return self.ymax - self.ymin

    @property
    def zlen(self) -> float:
        return self.zmax - self.zmin

    @property
    def center(self) -> Vector3:
        return (
            (self.xmin + self.xmax) * 0.5,
            (self.ymin + self.ymax) * 0.5,
            (self.zmin + self.zmax) * 0.5,
        )

    @property
    def mins(self) -> Vector3:
        return (self.xmin, self.ymin, self.zmin)

    @property
    def maxs(self) -> Vector3:
        return (self.xmax, self.ymax, self.zmax)

    @classmethod
    def from_bounds(cls, mins, maxs) -> "BoundingBox":
        return cls(mins[0], mins[1], mins[2], maxs[0], maxs[1], maxs[2])

    def corners(self) -> list[Vector3]:
        return [
            (x, y, z)
            for x in (self.xmin, self.xmax)
            for y in (self.ymin, self.ymax)
            for z in (self.zmin, self.zmax)
        ]


def _merge(a: BoundingBox, b: BoundingBox) -> BoundingBox:
    return BoundingBox.from_bounds(
        [min(p, q) for p, q in zip(a.mins, b.mins)],
        [max(p, q) for p, q in zip(a.maxs, b.maxs)],
    )


def _overlap(a: BoundingBox, b: BoundingBox) -> BoundingBox:
    return BoundingBox.from_bounds(
        [max(p, q) for p, q in zip(a.mins, b.mins)],
        [min(p, q) for p, q in zip(a.maxs, b.maxs)],
    )


def _clip(base: BoundingBox, cut: BoundingBox) -> BoundingBox:
    # Um corte que atravessa a peca inteira em dois eixos encurta o terceiro
    # (caso do hemisferio). Qualquer outro corte mantem a caixa da base.
    mins, maxs = list(base.mins), list(base.maxs)
    for axis in range(3):
        others = [k for k in range(3) if k != axis]
        if not all(cut.mins[k] <= mins[k] and cut.maxs[k] >= maxs[k] for k in others):
            continue
        if cut.mins[axis] <= mins[axis] < cut.maxs[axis] < maxs[axis]:
            mins[axis] = cut.maxs[axis]
        elif mins[axis] < cut.mins[axis] < maxs[axis] <= cut.maxs[axis]:
            maxs[axis] = cut.mins[axis]
    return BoundingBox.from_bounds(mins, maxs)


def _rotation_matrix(angles: Vector3) -> list[list[float]]:
    ax, ay, az = (math.radians(a) for a in angles)
    cx, sx = math.cos(ax), math.sin(ax)
    cy, sy = math.cos(ay), math.sin(ay)
    cz, sz = math.cos(az), math.sin(az)
    rx = [[1, 0, 0], [0, cx, -sx], [0, sx, cx]]
    ry = [[cy, 0, sy], [0, 1, 0], [-sy, 0, cy]]
    rz = [[cz, -sz, 0], [sz, cz, 0], [0, 0, 1]]

    def mul(a, b):
        return [[sum(a[i][k] * b[k][j] for k in range(3)) for j in range(3)] for i in range(3)]

    return mul(rz, mul(ry, rx))


def rotate_point(angles: Vector3, point: Vector3) -> Vector3:
    m = _rotation_matrix(angles)
    # arredonda ruido de cos(90) para manter quartos de volta exatos
    return tuple(round(sum(m[i][k] * point[k] for k in range(3)), 9) for i in range(3))


def bounding_box(solid: Solid) -> BoundingBox:
    """Axis-aligned bounds of a tree, computed analytically.

    Exact for primitives, translations, quarter-turn rotations, unions, hulls
    and Minkowski sums. Differences and intersections return a conservative
    box, except for a cut spanning the whole part on two axes, which is
    clipped exactly.
    """
    if isinstance(solid, Box):
        return BoundingBox.from_bounds((0.0, 0.0, 0.0), solid.dims)
    if isinstance(solid, Cylinder):
        r = solid.radius
        return BoundingBox(-r, -r, 0.0, r, r, solid.height)
    if isinstance(solid, Sphere):
        r = solid.radius
        return BoundingBox(-r, -r, -r, r, r, r)
    if isinstance(solid, Translate):
        bb = bounding_box(solid.child)
        return BoundingBox.from_bounds(
            [m + o for m, o in zip(bb.mins, solid.offset)],
            [m + o for m, o in zip(bb.maxs, solid.offset)],
        )
    if isinstance(solid, Rotate):
        pts = [rotate_point(solid.angles, c) for c in bounding_box(solid.child).corners()]
        return BoundingBox.from_bounds(
            [min(p[k] for p in pts) for k in range(3)],
            [max(p[k] for p in pts) for k in range(3)],
        )
    if isinstance(solid, (Union, Hull)):
        return reduce(_merge, (bounding_box(c) for c in solid.children))
    if isinstance(solid, Intersection):
        return reduce(_overlap, (bounding_box(c) for c in solid.children))
    if isinstance(solid, Difference):
        return reduce(_clip, (bounding_box(c) for c in solid.subtracted), bounding_box(solid.base))
    if isinstance(solid, MinkowskiSum):
        boxes = [bounding_box(c) for c in solid.children]
        return BoundingBox.from_bounds(
            [sum(b.mins[k] for b in boxes) for k in range(3)],
            [sum(b.maxs[k] for b in boxes) for k in range(3)],
        )
    raise TypeError(f"Tipo de solido desconhecido: {type(solid).__name__}")
