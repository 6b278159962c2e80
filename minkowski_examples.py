import argparse
from pathlib import Path

from csg import Box, Solid, bounding_box, translate
from fillets import chamfered_plate, filleted_prism, half_rounded_prism
import scad_export

EXAMPLE_SIZE = (40.0, 25.0, 15.0)


def _side_by_side(shaped: Solid, size=EXAMPLE_SIZE) -> dict[str, Solid]:
    # caixa nominal ao lado, deslocada em X, para comparar o envelope
    return {"shaped": shaped, "nominal": translate((size[0] + 10.0, 0, 0), Box(size))}


def filleted_example(radius: float = 5.0) -> dict[str, Solid]:
    return _side_by_side(filleted_prism(*EXAMPLE_SIZE, radius))


def half_round_example(radius: float = 5.0) -> dict[str, Solid]:
    return _side_by_side(half_rounded_prism(*EXAMPLE_SIZE, radius))


def chamfer_example(radius: float = 5.0, chamfer: float = 2.0) -> dict[str, Solid]:
    w, d, h = EXAMPLE_SIZE
    return _side_by_side(chamfered_plate(w, d, h, radius, chamfer=chamfer))


EXAMPLES = {
    "fillet": filleted_example,
    "half_round": half_round_example,
    "chamfer": chamfer_example,
}


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Gera .scad de exemplo da soma de Minkowski.")
    parser.add_argument("--output-dir", type=Path, default=Path("."))
    parser.add_argument("--facets", type=int, default=48)
    args = parser.parse_args(argv)

    args.output_dir.mkdir(parents=True, exist_ok=True)
    for name, build in EXAMPLES.items():
        solids = build()
        bb = bounding_box(solids["shaped"])
        path = scad_export.write_scad(args.output_dir / f"minkowski_{name}.scad", args.facets, **solids)
        print(f"{name}: envelope {bb.xlen:.2f} x {bb.ylen:.2f} x {bb.zlen:.2f} mm -> {path}")


if __name__ == "__main__":
    main()
