from case_specs import CaseSpec, PrintSpec, ScrewSpec
from csg import (
    Box,
    Cylinder,
    InvalidDimension,
    Solid,
    bounding_box,
    difference,
    hull,
    rotate,
    translate,
    union,
)
from fillets import chamfered_plate, corner_centers, corner_hull
from screw_features import (
    clearance_negative,
    place_at_corners,
    screw_head_recess_negative,
    screw_post,
)

try:
    from ocp_vscode import show
except ImportError:
    show = None

MODEL_VERSION = "v1.2.0"


def screw_center_offset(case: CaseSpec, screw: ScrewSpec) -> float:
    # centro do parafuso no referencial do canto 0 (boss encostado na parede)
    return case.wall_thickness_mm + screw.boss_width_mm / 2


def build_rabbet_pocket(case: CaseSpec, print_spec: PrintSpec) -> Solid:
    radius = case.fillet_mm - case.rabbet_inset_mm + print_spec.clearance_mm / 2
    if radius <= 0:
        raise InvalidDimension(f"raio do rebaixo resultante deve ser > 0 (obtido {radius:.3f})")
    # folga extra em z para evitar face coplanar no topo
    h = case.rabbet_height_mm + 1.0
    z = case.base_height_mm - case.rabbet_height_mm
    corners = [
        translate((x, y, z), Cylinder(radius, h))
        for x, y in corner_centers(case.width_mm, case.depth_mm, case.fillet_mm)
    ]
    return hull(*corners)


def build_base(case: CaseSpec, screw: ScrewSpec, print_spec: PrintSpec) -> Solid:
    w, d, h = case.width_mm, case.depth_mm, case.base_height_mm
    wall = case.wall_thickness_mm
    inner_radius = case.fillet_mm - wall
    if inner_radius <= 0 or w - 2 * wall <= 0 or d - 2 * wall <= 0:
        raise InvalidDimension(
            f"cavidade interna invalida: parede {wall:.2f} mm para raio {case.fillet_mm:.2f} mm "
            f"em {w:.1f} x {d:.1f} mm"
        )
    shell = corner_hull(w, d, case.fillet_mm, h)
    cavity = translate(
        (wall, wall, case.floor_thickness_mm),
        corner_hull(w - 2 * wall, d - 2 * wall, inner_radius, h),
    )

    post_len = h - case.floor_thickness_mm - case.rabbet_height_mm
    if post_len <= 0:
        raise InvalidDimension(f"altura do boss resultante deve ser > 0 (obtido {post_len:.3f})")
    post = translate((wall, wall, case.floor_thickness_mm), screw_post(post_len, screw, print_spec))

    body = difference(shell, cavity)
    if case.rabbet_height_mm > 0:
        body = difference(body, build_rabbet_pocket(case, print_spec))
    return union(body, place_at_corners(w, d, post))


def key_window_grid(case: CaseSpec) -> Solid:
    span_x = case.key_cols * case.key_pitch_mm
    span_y = case.key_rows * case.key_pitch_mm
    if span_x > case.width_mm - 2 * case.wall_thickness_mm or span_y > case.depth_mm - 2 * case.wall_thickness_mm:
        raise InvalidDimension(
            f"grade de teclas {span_x:.1f} x {span_y:.1f} mm nao cabe no case "
            f"{case.width_mm:.1f} x {case.depth_mm:.1f} mm"
        )
    x0 = (case.width_mm - span_x) / 2 + (case.key_pitch_mm - case.key_size_mm) / 2
    y0 = (case.depth_mm - span_y) / 2 + (case.key_pitch_mm - case.key_size_mm) / 2
    z0 = -case.rabbet_height_mm - 1.0
    cut_h = case.lid_thickness_mm + case.rabbet_height_mm + 2.0
    windows = [
        translate(
            (x0 + col * case.key_pitch_mm, y0 + row * case.key_pitch_mm, z0),
            Box((case.key_size_mm, case.key_size_mm, cut_h)),
        )
        for row in range(case.key_rows)
        for col in range(case.key_cols)
    ]
    return union(*windows)


def build_lid_screw_negative(case: CaseSpec, screw: ScrewSpec, print_spec: PrintSpec) -> Solid:
    c = screw_center_offset(case, screw)
    total_h = case.lid_thickness_mm + case.rabbet_height_mm
    hole = translate(
        (c, c, -case.rabbet_height_mm - 0.5),
        clearance_negative(screw.diameter_mm, total_h + 1.0, print_spec=print_spec),
    )
    # rebaixo abre na face de cima; as camadas de ponte ficam abaixo dele
    recess = screw_head_recess_negative(
        screw.head_diameter_mm,
        screw.head_height_mm,
        pilot_diameter=screw.diameter_mm + print_spec.clearance_mm,
        print_spec=print_spec,
    )
    recess = translate((c, c, case.lid_thickness_mm), rotate((180, 0, 0), recess))
    return union(hole, recess)


def build_lid(case: CaseSpec, screw: ScrewSpec, print_spec: PrintSpec) -> Solid:
    plate = chamfered_plate(
        case.width_mm,
        case.depth_mm,
        case.lid_thickness_mm,
        case.fillet_mm,
        chamfer=case.chamfer_mm,
        rabbet_inset=case.rabbet_inset_mm,
        rabbet_height=case.rabbet_height_mm,
    )
    screws = place_at_corners(case.width_mm, case.depth_mm, build_lid_screw_negative(case, screw, print_spec))
    return difference(plate, key_window_grid(case), screws)


def orient_lid_for_printing(lid: Solid, case: CaseSpec) -> Solid:
    # face de cima na mesa: gira 180 em X e devolve ao octante positivo
    return translate((0, case.depth_mm, case.lid_thickness_mm), rotate((180, 0, 0), lid))


def case_dimensions(case: CaseSpec, base: Solid, lid: Solid) -> dict:
    base_bb = bounding_box(base)
    lid_bb = bounding_box(lid)
    return {
        "outer": (base_bb.xlen, base_bb.ylen, base_bb.zlen + case.lid_thickness_mm),
        "base": (base_bb.xlen, base_bb.ylen, base_bb.zlen),
        "lid": (lid_bb.xlen, lid_bb.ylen, lid_bb.zlen),
        "inner": (
            case.width_mm - 2 * case.wall_thickness_mm,
            case.depth_mm - 2 * case.wall_thickness_mm,
            case.base_height_mm - case.floor_thickness_mm,
        ),
        "keys": case.key_rows * case.key_cols,
    }


def build_case_geometry(case: CaseSpec, screw: ScrewSpec, print_spec: PrintSpec) -> tuple[Solid, Solid, dict]:
    base = build_base(case, screw, print_spec)
    lid = build_lid(case, screw, print_spec)
    return base, lid, case_dimensions(case, base, lid)


def print_build_summary(label: str, model_version: str, dims: dict, case: CaseSpec, screw: ScrewSpec) -> None:
    print(f"=== {label} ===")
    print(f"Versao: {model_version}")
    print(f"Externo (L x P x A): {dims['outer'][0]:.1f} x {dims['outer'][1]:.1f} x {dims['outer'][2]:.1f} mm")
    print(f"Interno util (L x P x A): {dims['inner'][0]:.1f} x {dims['inner'][1]:.1f} x {dims['inner'][2]:.1f} mm")
    print(f"Tampa (L x P x A): {dims['lid'][0]:.1f} x {dims['lid'][1]:.1f} x {dims['lid'][2]:.1f} mm")
    print(f"Parede/Fundo: {case.wall_thickness_mm:.1f} / {case.floor_thickness_mm:.1f} mm | raio: {case.fillet_mm:.1f} mm")
    print(f"Teclas: {dims['keys']} ({case.key_rows} x {case.key_cols}) | parafuso: M{screw.diameter_mm:g}")


def show_preview(base, lid, lid_preview_offset_mm: float):
    if show is None:
        return
    lid_disp = lid.translate((0, 0, lid_preview_offset_mm)) if lid_preview_offset_mm else lid
    show(base, lid_disp, names=["base", "lid"], colors=["lightgray", "gold"], axes=True, grid=True)
