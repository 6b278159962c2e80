# Negativos sao solidos feitos para serem subtraidos de uma peca.
from case_specs import PrintSpec, ScrewSpec
from csg import (
    Box,
    Cylinder,
    InvalidDimension,
    Solid,
    check_value,
    difference,
    intersection,
    rotate,
    translate,
    union,
)
from fillets import filleted_prism

# PrintSpec e imutavel; omitir print_spec equivale a passar PrintSpec()
DEFAULT_PRINT = PrintSpec()


def filleted_boss(width: float, length: float, radius: float) -> Solid:
    return filleted_prism(width, width, length, radius)


def _hole(diameter: float, allowance: float, length: float, boss_width: float) -> Solid:
    check_value("diameter", diameter)
    check_value("length", length)
    check_value("boss_width", boss_width)
    hole_d = diameter + allowance
    if hole_d <= 0:
        raise InvalidDimension(f"diametro do furo resultante deve ser > 0 (obtido {hole_d:.3f})")
    return translate((boss_width / 2, boss_width / 2, 0), Cylinder(hole_d / 2, length))


def clearance_negative(
    diameter: float, length: float, boss_width: float = 0.0, print_spec: PrintSpec = DEFAULT_PRINT
) -> Solid:
    return _hole(diameter, print_spec.clearance_mm, length, boss_width)


def interference_negative(
    diameter: float, length: float, boss_width: float = 0.0, print_spec: PrintSpec = DEFAULT_PRINT
) -> Solid:
    return _hole(diameter, print_spec.interference_mm, length, boss_width)


def screw_head_recess_negative(
    head_diameter: float,
    head_height: float,
    pilot_diameter: float = 0.0,
    boss_width: float = 0.0,
    print_spec: PrintSpec = DEFAULT_PRINT,
) -> Solid:
    """Counterbore for a screw head with two bridging layers on top.

    Printed pilot side down, layer one spans the recess across the pilot width
    and layer two is a pilot-sized square, so both bridge without support.
    """
    for name, value in (
        ("head_diameter", head_diameter),
        ("head_height", head_height),
        ("pilot_diameter", pilot_diameter),
        ("boss_width", boss_width),
    ):
        check_value(name, value)
    recess_d = head_diameter + print_spec.clearance_mm
    layer = print_spec.layer_height_mm
    parts = [Cylinder(recess_d / 2, head_height)]

    if pilot_diameter > 0:
        first = intersection(
            translate((-recess_d / 2, -pilot_diameter / 2, head_height), Box((recess_d, pilot_diameter, layer))),
            translate((0, 0, head_height), Cylinder(recess_d / 2, layer)),
        )
        second = translate(
            (-pilot_diameter / 2, -pilot_diameter / 2, head_height + layer),
            Box((pilot_diameter, pilot_diameter, layer)),
        )
        parts += [first, second]

    return translate((boss_width / 2, boss_width / 2, 0), union(*parts))


def screw_post(
    length: float,
    screw: ScrewSpec = ScrewSpec(),
    print_spec: PrintSpec = DEFAULT_PRINT,
    through: bool = False,
) -> Solid:
    # through=True: furo de folga passante; senao furo de interferencia
    check_value("length", length)
    boss = filleted_boss(screw.boss_width_mm, length, screw.boss_fillet_mm)
    make_hole = clearance_negative if through else interference_negative
    hole = make_hole(screw.diameter_mm, length, screw.boss_width_mm, print_spec)
    return difference(boss, hole)


def corner_origins(width: float, depth: float) -> list[tuple[float, float]]:
    return [(0.0, 0.0), (0.0, depth), (width, depth), (width, 0.0)]


def place_at_corners(width: float, depth: float, feature: Solid) -> Solid:
    # canto i: rotacao de -90*i em z, nunca espelhamento
    placed = [
        translate((x, y, 0), rotate((0, 0, -90 * i), feature))
        for i, (x, y) in enumerate(corner_origins(width, depth))
    ]
    return union(*placed)
