"""Normalisiert Gewichtsbilder zu einem WeightField, das pro Pixel auf 1 summiert."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from splat_profile.models.splat import LayerDefinition, WeightField
from splat_profile.terrain.sampling import sample_layers


def normalize(
    layers: Sequence[LayerDefinition],
    width: int,
    height: int,
    *,
    dtype: np.dtype = np.float32,
) -> WeightField:
    """Berechnet ``field[z][x][i] = w_i / Σ w`` für jedes Pixel.

    Der Aufrufer muss vorher ``validate`` ohne Diagnosen durchlaufen haben;
    hier wird nicht erneut geprüft.
    """
    stack = sample_layers(layers, width, height)
    totals = stack.sum(axis=2, keepdims=True)
    weights = (stack / totals).astype(dtype, copy=False)
    return WeightField(weights)
