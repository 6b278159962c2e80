from dataclasses import dataclass

from case_specs import CaseSpec, PrintSpec, ScrewSpec

MX_KEY_CUTOUT_MM = 14.2
MX_KEY_PITCH_MM = 19.05


@dataclass(frozen=True)
class CaseModelProfile:
    slug: str
    label: str
    case: CaseSpec
    screw: ScrewSpec
    print_spec: PrintSpec


CASE_MODELS: dict[str, CaseModelProfile] = {
    "stream_deck_15": CaseModelProfile(
        slug="stream_deck_15",
        label="Stream Deck 15 teclas (3x5)",
        case=CaseSpec(),
        screw=ScrewSpec(),
        print_spec=PrintSpec(),
    ),
    "stream_deck_6": CaseModelProfile(
        slug="stream_deck_6",
        label="Stream Deck Mini 6 teclas (2x3)",
        case=CaseSpec(
            width_mm=90.0,
            depth_mm=64.0,
            base_height_mm=22.0,
            key_rows=2,
            key_cols=3,
            key_size_mm=MX_KEY_CUTOUT_MM,
            key_pitch_mm=MX_KEY_PITCH_MM,
        ),
        screw=ScrewSpec(),
        print_spec=PrintSpec(),
    ),
    "stream_deck_32": CaseModelProfile(
        slug="stream_deck_32",
        label="Stream Deck XL 32 teclas (4x8)",
        case=CaseSpec(
            width_mm=190.0,
            depth_mm=100.0,
            base_height_mm=25.0,
            key_rows=4,
            key_cols=8,
            key_size_mm=MX_KEY_CUTOUT_MM,
            key_pitch_mm=MX_KEY_PITCH_MM,
        ),
        screw=ScrewSpec(),
        print_spec=PrintSpec(layer_height_mm=0.16),
    ),
}


def list_case_models() -> tuple[str, ...]:
    return tuple(CASE_MODELS.keys())


def get_case_model(model_slug: str) -> CaseModelProfile:
    if model_slug not in CASE_MODELS:
        raise ValueError(f"Modelo de case desconhecido: {model_slug}")
    return CASE_MODELS[model_slug]
