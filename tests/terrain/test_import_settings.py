"""Tests for advisory texture import checks."""

from __future__ import annotations

from pathlib import Path

from splat_profile.models.splat import (
    TEXTURE_TYPE_NORMAL_MAP,
    DiagnosticCategory,
    LayerDefinition,
    MaterialParams,
    TextureAsset,
)
from splat_profile.models.weight_image import ArrayWeightImage
from splat_profile.terrain.import_settings import check_texture, inspect_layer, inspect_layers


class TestCheckTexture:
    def test_required_but_missing(self) -> None:
        assert check_texture("Textur", None, required=True, expected_type="default") == [
            "Textur ist erforderlich, aber nicht gesetzt."
        ]

    def test_optional_missing_is_fine(self) -> None:
        assert check_texture("Normal Map", None, required=False, expected_type=TEXTURE_TYPE_NORMAL_MAP) == []

    def test_wrong_type(self) -> None:
        problems = check_texture(
            "Normal Map",
            TextureAsset(path=Path("n.png")),
            required=False,
            expected_type=TEXTURE_TYPE_NORMAL_MAP,
        )
        assert problems == ["Normal Map hat Texturtyp Default, erwartet wird Normal Map."]


class TestInspectLayer:
    def test_clean_layer(self) -> None:
        layer = LayerDefinition(
            weight_image=ArrayWeightImage.constant(1, 1, 1.0),
            material=MaterialParams(
                albedo=TextureAsset(path=Path("a.png")),
                normal_map=TextureAsset(path=Path("n.png"), texture_type=TEXTURE_TYPE_NORMAL_MAP),
            ),
        )
        assert inspect_layer(layer, 0) == []

    def test_reports_each_problem_with_index(self) -> None:
        layer = LayerDefinition(weight_image=None, material=MaterialParams())
        diagnostics = inspect_layer(layer, 3)
        assert len(diagnostics) == 2
        assert all(d.category is DiagnosticCategory.IMPORT_SETTINGS for d in diagnostics)
        assert all(d.layer_index == 3 for d in diagnostics)

    def test_unreadable_weight_image(self) -> None:
        layer = LayerDefinition(
            weight_image=ArrayWeightImage.constant(1, 1, 1.0),
            readable=False,
            material=MaterialParams(albedo=TextureAsset()),
        )
        assert [d.message for d in inspect_layer(layer, 0)] == ["Gewichtsbild muss lesbar sein."]

    def test_inspect_layers_concatenates(self) -> None:
        layers = [LayerDefinition(), LayerDefinition()]
        indices = [d.layer_index for d in inspect_layers(layers)]
        assert indices == [0, 0, 1, 1]
