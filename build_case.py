import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from case_models import get_case_model, list_case_models
from case_specs import default_build_options
from csg import GeometryError, translate
import scad_export
from stream_deck_case import MODEL_VERSION, build_case_geometry, orient_lid_for_printing, print_build_summary, show_preview


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Renderiza o case parametrizado do stream deck e exporta STL.")
    parser.add_argument(
        "--model",
        default=None,
        choices=list_case_models(),
        help="Perfil de case para renderizar.",
    )
    parser.add_argument("--no-preview", action="store_true", help="Desabilita preview no OCP viewer.")
    parser.add_argument("--no-export", action="store_true", help="Desabilita export de STL.")
    parser.add_argument("--scad", action="store_true", help="Exporta tambem o arquivo .scad equivalente.")
    parser.add_argument("--output-dir", type=Path, default=Path("."), help="Diretorio dos arquivos exportados.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log detalhado da renderizacao.")
    return parser.parse_args(argv)


def select_model_interactive() -> str:
    model_slugs = list_case_models()
    print("Selecione o modelo de case para renderizar:")
    for idx, slug in enumerate(model_slugs, start=1):
        profile = get_case_model(slug)
        print(f"  {idx}. {profile.label} ({slug})")

    while True:
        try:
            raw = input("Modelo [1]: ").strip()
        except KeyboardInterrupt:
            print()
            raise SystemExit(130)

        if raw == "":
            return model_slugs[0]
        if raw.isdigit():
            selected = int(raw)
            if 1 <= selected <= len(model_slugs):
                return model_slugs[selected - 1]
        if raw in model_slugs:
            return raw
        print("Opcao invalida. Informe o numero da lista ou o slug do modelo.")


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(name)s: %(message)s")

    model_slug = args.model
    if model_slug is None:
        if not sys.stdin.isatty():
            raise SystemExit("Sem --model em ambiente nao interativo. Use --model <slug>.")
        model_slug = select_model_interactive()

    model = get_case_model(model_slug)
    opts = default_build_options(MODEL_VERSION, model.slug)
    opts = replace(
        opts,
        path_base=args.output_dir / opts.path_base,
        path_lid=args.output_dir / opts.path_lid,
        path_scad=args.output_dir / opts.path_scad,
    )
    if args.no_preview:
        opts = replace(opts, enable_preview=False)
    if args.no_export:
        opts = replace(opts, export_stl=False)
    if args.scad:
        opts = replace(opts, export_scad=True)

    try:
        base, lid, dims = build_case_geometry(model.case, model.screw, model.print_spec)
    except GeometryError as exc:
        raise SystemExit(f"Parametros invalidos para {model.slug}: {exc}")

    print_build_summary(model.label, MODEL_VERSION, dims, model.case, model.screw)

    if opts.export_scad:
        args.output_dir.mkdir(parents=True, exist_ok=True)
        assembled_lid = translate((0, 0, model.case.base_height_mm), lid)
        scad_export.write_scad(opts.path_scad, model.print_spec.facets, base=base, lid=assembled_lid)
        print(f"SCAD exportado -> {opts.path_scad.resolve()}")

    if not (opts.enable_preview or opts.export_stl):
        return

    import cq_render

    base_wp = cq_render.to_workplane(base, model.print_spec)
    lid_wp = cq_render.to_workplane(lid, model.print_spec)

    if opts.enable_preview:
        try:
            show_preview(base_wp, lid_wp, model.case.base_height_mm + 20.0)
        except Exception as exc:
            print(f"Preview indisponivel no ambiente atual: {exc}")

    if opts.export_stl:
        args.output_dir.mkdir(parents=True, exist_ok=True)
        print_lid = cq_render.to_workplane(orient_lid_for_printing(lid, model.case), model.print_spec)
        cq_render.export_workplane(base_wp, opts.path_base)
        cq_render.export_workplane(print_lid, opts.path_lid)
        print(f"Modelo: {model.slug}")
        print(f"STL exportado (base) -> {opts.path_base.resolve()}")
        print(f"STL exportado (tampa, face para a mesa) -> {opts.path_lid.resolve()}")


if __name__ == "__main__":
    main()
