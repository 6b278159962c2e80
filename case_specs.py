from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class PrintSpec:
    layer_height_mm: float = 0.2
    clearance_mm: float = 0.4
    interference_mm: float = -0.4
    facets: int = 64


@dataclass(frozen=True)
class ScrewSpec:
    # M3 cabeca cilindrica
    diameter_mm: float = 3.0
    head_diameter_mm: float = 5.5
    head_height_mm: float = 3.0
    boss_width_mm: float = 8.0
    boss_fillet_mm: float = 1.5


@dataclass(frozen=True)
class CaseSpec:
    width_mm: float = 170.0
    depth_mm: float = 80.0
    base_height_mm: float = 25.0
    lid_thickness_mm: float = 4.0
    wall_thickness_mm: float = 2.4
    floor_thickness_mm: float = 2.0
    fillet_mm: float = 4.7
    chamfer_mm: float = 1.0
    rabbet_inset_mm: float = 1.2
    rabbet_height_mm: float = 1.2
    key_rows: int = 3
    key_cols: int = 5
    key_size_mm: float = 14.2
    key_pitch_mm: float = 19.05


@dataclass(frozen=True)
class BuildOptions:
    enable_preview: bool = True
    export_stl: bool = True
    export_scad: bool = False
    path_base: Path = Path("stream_deck_base.stl")
    path_lid: Path = Path("stream_deck_lid.stl")
    path_scad: Path = Path("stream_deck_case.scad")


def default_build_options(model_version: str, model_slug: str = "stream_deck_15") -> BuildOptions:
    return BuildOptions(
        path_base=Path(f"{model_slug}_base_{model_version}.stl"),
        path_lid=Path(f"{model_slug}_lid_{model_version}.stl"),
        path_scad=Path(f"{model_slug}_{model_version}.scad"),
    )
