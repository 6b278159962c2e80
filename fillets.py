from csg import (
    Box,
    Cylinder,
    InvalidDimension,
    Solid,
    Sphere,
    check_value,
    difference,
    hull,
    minkowski,
    translate,
    union,
)

# Altura do cilindro auxiliar da soma. Precisa ser > 0 (soma nao degenerada)
# e pequena o bastante para nao aparecer na altura final.
AUX_HEIGHT = 0.01


def _positive(name: str, value: float) -> float:
    if value <= 0:
        raise InvalidDimension(f"{name} resultante deve ser > 0 (obtido {value:.4f})")
    return value


def _check_inputs(**values: float) -> None:
    # valores vindos do chamador: negativo e erro do chamador, nao dimensao derivada
    for name, value in values.items():
        check_value(name, value)


def corner_centers(width: float, depth: float, radius: float) -> list[tuple[float, float]]:
    # ordem horaria a partir do canto min/min; o posicionamento dos parafusos depende dela
    return [
        (radius, radius),
        (radius, depth - radius),
        (width - radius, depth - radius),
        (width - radius, radius),
    ]


def filleted_prism(width: float, depth: float, length: float, radius: float) -> Solid:
    _check_inputs(width=width, depth=depth, length=length, radius=radius)
    if radius == 0:
        return Box((width, depth, length))

    core = Box(
        (
            _positive("width - 2R", width - 2 * radius),
            _positive("depth - 2R", depth - 2 * radius),
            _positive("length - AUX_HEIGHT", length - AUX_HEIGHT),
        )
    )
    rounding = translate((radius, radius, 0), Cylinder(radius, AUX_HEIGHT))
    return minkowski(core, rounding)


def half_round(radius: float) -> Solid:
    # hemisferio superior: face plana em z=0
    _positive("radius", check_value("radius", radius))
    cutter = translate((-radius, -radius, -2 * radius), Box((2 * radius, 2 * radius, 2 * radius)))
    return difference(Sphere(radius), cutter)


def half_rounded_prism(width: float, depth: float, length: float, radius: float) -> Solid:
    _check_inputs(width=width, depth=depth, length=length, radius=radius)
    if radius == 0:
        return Box((width, depth, length))

    core = Box(
        (
            _positive("width - 2R", width - 2 * radius),
            _positive("depth - 2R", depth - 2 * radius),
            _positive("length - R", length - radius),
        )
    )
    return minkowski(core, translate((radius, radius, 0), half_round(radius)))


def corner_hull(width: float, depth: float, radius: float, height: float) -> Solid:
    _check_inputs(width=width, depth=depth, radius=radius, height=height)
    _positive("radius", radius)
    _positive("width - 2R", width - 2 * radius)
    _positive("depth - 2R", depth - 2 * radius)
    corners = [
        translate((x, y, 0), Cylinder(radius, height)) for x, y in corner_centers(width, depth, radius)
    ]
    return hull(*corners)


def chamfered_plate(
    width: float,
    depth: float,
    thickness: float,
    radius: float,
    chamfer: float = 0.0,
    rabbet_inset: float = 0.0,
    rabbet_height: float = 0.0,
) -> Solid:
    # placa em z [0, thickness]; a faixa do rebaixo fica abaixo de z=0, recuada rabbet_inset
    _check_inputs(
        width=width,
        depth=depth,
        thickness=thickness,
        radius=radius,
        chamfer=chamfer,
        rabbet_inset=rabbet_inset,
        rabbet_height=rabbet_height,
    )
    _positive("radius", radius)
    _positive("width - 2R", width - 2 * radius)
    _positive("depth - 2R", depth - 2 * radius)
    centers = corner_centers(width, depth, radius)

    body_height = _positive("thickness - chamfer", thickness - chamfer)
    if chamfer == 0:
        plate = corner_hull(width, depth, radius, thickness)
    else:
        top_radius = _positive("radius - chamfer", radius - chamfer)
        lower = [translate((x, y, 0), Cylinder(radius, body_height)) for x, y in centers]
        upper = [
            translate((x, y, thickness - AUX_HEIGHT), Cylinder(top_radius, AUX_HEIGHT)) for x, y in centers
        ]
        plate = hull(*lower, *upper)

    if rabbet_height == 0:
        return union(plate)

    band_radius = _positive("radius - rabbet_inset", radius - rabbet_inset)
    band = hull(
        *[
            translate((x, y, -rabbet_height), Cylinder(band_radius, rabbet_height))
            for x, y in centers
        ]
    )
    return union(plate, band)
