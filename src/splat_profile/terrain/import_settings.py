"""Hinweise zu Import-Einstellungen der Texturen eines Layers."""

from __future__ import annotations

from typing import List, Optional, Sequence

from splat_profile.models.splat import (
    TEXTURE_TYPE_DEFAULT,
    TEXTURE_TYPE_NORMAL_MAP,
    Diagnostic,
    DiagnosticCategory,
    LayerDefinition,
    TextureAsset,
)

_TEXTURE_TYPE_LABELS = {
    TEXTURE_TYPE_DEFAULT: "Default",
    TEXTURE_TYPE_NORMAL_MAP: "Normal Map",
}


def texture_type_label(texture_type: str) -> str:
    return _TEXTURE_TYPE_LABELS.get(texture_type, texture_type)


def check_texture(
    name: str,
    texture: Optional[TextureAsset],
    *,
    required: bool,
    expected_type: str,
) -> List[str]:
    """Prüft eine Texturreferenz und liefert lesbare Problemmeldungen."""
    if texture is None:
        return [f"{name} ist erforderlich, aber nicht gesetzt."] if required else []
    problems: List[str] = []
    if texture.texture_type != expected_type:
        problems.append(
            f"{name} hat Texturtyp {texture_type_label(texture.texture_type)}, "
            f"erwartet wird {texture_type_label(expected_type)}."
        )
    return problems


def inspect_layer(layer: LayerDefinition, index: int) -> List[Diagnostic]:
    """Nur Hinweise: blockiert das Anwenden nicht."""
    problems = check_texture("Textur", layer.material.albedo, required=True, expected_type=TEXTURE_TYPE_DEFAULT)
    problems += check_texture(
        "Normal Map", layer.material.normal_map, required=False, expected_type=TEXTURE_TYPE_NORMAL_MAP
    )
    if layer.weight_image is None:
        problems.append("Gewichtsbild ist erforderlich, aber nicht gesetzt.")
    elif not layer.readable:
        problems.append("Gewichtsbild muss lesbar sein.")
    return [
        Diagnostic(DiagnosticCategory.IMPORT_SETTINGS, message, layer_index=index)
        for message in problems
    ]


def inspect_layers(layers: Sequence[LayerDefinition]) -> List[Diagnostic]:
    diagnostics: List[Diagnostic] = []
    for index, layer in enumerate(layers):
        diagnostics.extend(inspect_layer(layer, index))
    return diagnostics
