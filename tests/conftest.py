"""Shared pytest fixtures for splat_profile tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, Optional

import numpy as np
import pytest
from PIL import Image

from splat_profile.models.splat import LayerDefinition, MaterialParams, TextureAsset
from splat_profile.models.weight_image import ArrayWeightImage

LayerFactory = Callable[..., LayerDefinition]


@pytest.fixture
def make_layer() -> LayerFactory:
    """Build a layer from a pixel grid (row 0 = bottom) or a constant."""

    def factory(
        pixels=None,
        *,
        constant: Optional[float] = None,
        width: int = 2,
        height: int = 2,
        readable: bool = True,
        name: str = "",
    ) -> LayerDefinition:
        if constant is not None:
            image = ArrayWeightImage.constant(width, height, constant)
        elif pixels is not None:
            image = ArrayWeightImage(pixels)
        else:
            image = None
        return LayerDefinition(
            weight_image=image,
            readable=readable,
            material=MaterialParams(albedo=TextureAsset(path=Path(f"{name or 'layer'}.png"))),
            name=name,
        )

    return factory


@pytest.fixture
def write_png(tmp_path: Path) -> Callable[[str, np.ndarray], Path]:
    """Write a uint8 array (top row first) as PNG into tmp_path."""

    def writer(name: str, pixels: np.ndarray) -> Path:
        destination = tmp_path / name
        Image.fromarray(np.asarray(pixels, dtype=np.uint8)).save(destination)
        return destination

    return writer


@pytest.fixture
def write_profile(tmp_path: Path) -> Callable[[dict], Path]:
    def writer(payload: dict, name: str = "profile.json") -> Path:
        destination = tmp_path / name
        destination.write_text(json.dumps(payload), encoding="utf-8")
        return destination

    return writer
